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
            name='UserProfile',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('name', models.CharField(blank=True, max_length=200)),
                ('email', models.EmailField(blank=True, max_length=254)),
                ('picture_url', models.URLField(blank=True, max_length=500)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='profile', to=settings.AUTH_USER_MODEL)),
            ],
        ),
        migrations.CreateModel(
            name='AccountSettings',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('clerk_email', models.EmailField(blank=True, max_length=254)),
                ('notifications_email', models.EmailField(blank=True, max_length=254)),
                ('onboarding_completed', models.BooleanField(default=False)),
                ('weekly_reminder', models.BooleanField(default=False)),
                ('weekly_reminder_day', models.CharField(choices=[('monday', 'Monday'), ('tuesday', 'Tuesday'), ('wednesday', 'Wednesday'), ('thursday', 'Thursday'), ('friday', 'Friday'), ('saturday', 'Saturday'), ('sunday', 'Sunday')], default='friday', max_length=10)),
                ('weekly_reminder_hour', models.PositiveSmallIntegerField(default=16)),
                ('weekly_reminder_minute', models.PositiveSmallIntegerField(default=0)),
                ('weekly_reminder_time_zone', models.CharField(default='UTC', max_length=64)),
                ('next_weekly_reminder_utc', models.DateTimeField(blank=True, db_index=True, null=True)),
                ('email_notifications_disabled', models.BooleanField(default=False)),
                ('work_hours', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('work_minutes', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('work_start_hour', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('work_start_minute', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('work_start_am_pm', models.CharField(blank=True, choices=[('AM', 'AM'), ('PM', 'PM')], max_length=2)),
                ('work_end_hour', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('work_end_minute', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('work_end_am_pm', models.CharField(blank=True, choices=[('AM', 'AM'), ('PM', 'PM')], max_length=2)),
                ('default_work_from_home', models.BooleanField(default=False)),
                ('break_hours', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('break_minutes', models.PositiveSmallIntegerField(blank=True, null=True)),
                ('employers', models.JSONField(blank=True, default=list)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.OneToOneField(on_delete=django.db.models.deletion.CASCADE, related_name='account_settings', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'verbose_name': 'account settings',
                'verbose_name_plural': 'account settings',
            },
        ),
    ]
