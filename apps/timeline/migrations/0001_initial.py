from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ('contenttypes', '0002_remove_content_type_name'),
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name='TimelineEvent',
            fields=[
                ('id', models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name='ID')),
                ('event_type', models.CharField(choices=[('joined_sojournii', 'Joined Sojournii'), ('new_employer', 'New Employer'), ('goal_created', 'Goal created'), ('goal_status_changed', 'Goal status changed'), ('goal_updated', 'Goal updated'), ('goal_deleted', 'Goal deleted'), ('goal_milestone_created', 'Milestone created'), ('goal_milestone_status_changed', 'Milestone status changed'), ('goal_milestone_updated', 'Milestone updated'), ('goal_milestone_deleted', 'Milestone deleted'), ('user_goal_update', 'Goal update')], max_length=40)),
                ('object_id', models.PositiveIntegerField(blank=True, null=True)),
                ('title', models.CharField(blank=True, max_length=300)),
                ('description', models.TextField(blank=True)),
                ('previous_value', models.CharField(blank=True, max_length=200)),
                ('new_value', models.CharField(blank=True, max_length=200)),
                ('created_at', models.DateTimeField(auto_now_add=True, db_index=True)),
                ('content_type', models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, to='contenttypes.contenttype')),
                ('user', models.ForeignKey(on_delete=django.db.models.deletion.CASCADE, related_name='timeline_events', to=settings.AUTH_USER_MODEL)),
            ],
            options={
                'ordering': ['-created_at', '-id'],
                'indexes': [
                    models.Index(fields=['content_type', 'object_id'], name='timeline_ti_content_5a1c2e_idx'),
                    models.Index(fields=['user', 'created_at'], name='timeline_ti_user_id_8d3f41_idx'),
                ],
            },
        ),
    ]
