from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='WorkHourEntry',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('date', models.DateField()),
                ('work_hours', models.PositiveSmallIntegerField(default=0)),
                ('work_minutes', models.PositiveSmallIntegerField(default=0)),
                ('work_start_hour', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('work_start_minute', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('work_start_am_pm', models.CharField(blank=True, choices=[('AM', 'AM'), ('PM', 'PM')], max_length=2)),
                ('work_end_hour', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('work_end_minute', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('work_end_am_pm', models.CharField(blank=True, choices=[('AM', 'AM'), ('PM', 'PM')], max_length=2)),
                ('work_home_start_hour', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('work_home_start_minute', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('work_home_start_am_pm', models.CharField(blank=True, choices=[('AM', 'AM'), ('PM', 'PM')], max_length=2)),
                ('work_home_end_hour', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('work_home_end_minute', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('work_home_end_am_pm', models.CharField(blank=True, choices=[('AM', 'AM'), ('PM', 'PM')], max_length=2)),
                ('work_office_start_hour', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('work_office_start_minute', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('work_office_start_am_pm', models.CharField(blank=True, choices=[('AM', 'AM'), ('PM', 'PM')], max_length=2)),
                ('work_office_end_hour', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('work_office_end_minute', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('work_office_end_am_pm', models.CharField(blank=True, choices=[('AM', 'AM'), ('PM', 'PM')], max_length=2)),
                ('work_location', models.CharField(blank=True, choices=[('home', 'Home'), ('office', 'Office'), ('hybrid', 'Hybrid')], max_length=10)),
                ('break_hours', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('break_minutes', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('work_from_home', models.BooleanField(blank=True, null=True)),
                ('notes', models.TextField(blank=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='work_hour_entries', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name_plural': 'work hour entries',
                'ordering': ['date'],
            },
        ),
        migrations.AddConstraint(
            model_name='workhourentry',
            constraint=models.UniqueConstraint(fields=('user', 'date'), name='unique_work_hours_per_day'),
        ),
    ]
