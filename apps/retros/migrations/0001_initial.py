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
            name='Retro',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('week_start_date', models.DateField()),
                ('week_end_date', models.DateField()),
                ('general_feelings', models.PositiveSmallIntegerField(default=50)),
                ('work_relationships', models.PositiveSmallIntegerField(default=50)),
                ('professional_growth', models.PositiveSmallIntegerField(default=50)),
                ('productivity', models.PositiveSmallIntegerField(default=50)),
                ('personal_wellbeing', models.PositiveSmallIntegerField(default=50)),
                ('positive_outcomes', models.TextField(blank=True, verbose_name='What went well?')),
                ('positive_outcomes_html', models.TextField(blank=True)),
                ('positive_outcomes_json', models.TextField(blank=True)),
                ('negative_outcomes', models.TextField(blank=True, verbose_name='What could be better?')),
                ('negative_outcomes_html', models.TextField(blank=True)),
                ('negative_outcomes_json', models.TextField(blank=True)),
                ('key_takeaways', models.TextField(blank=True, verbose_name='Key takeaways')),
                ('key_takeaways_html', models.TextField(blank=True)),
                ('key_takeaways_json', models.TextField(blank=True)),
                ('completed_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='retros', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-week_start_date', '-id'],
            },
        ),
        migrations.AddConstraint(
            model_name='retro',
            constraint=models.UniqueConstraint(fields=('user', 'week_start_date'), name='unique_retro_per_week'),
        ),
    ]
