# apps/tasks/models.py
from django.db import models
from django.conf import settings

from apps.core.models import iso
from apps.tasks.domain.entities import TaskStatus


class Task(models.Model):
    class Status(models.TextChoices):
        PENDING = TaskStatus.PENDING.value, 'Pending'
        IN_PROGRESS = TaskStatus.IN_PROGRESS.value, 'In progress'
        COMPLETED = TaskStatus.COMPLETED.value, 'Completed'
        CANCELLED = TaskStatus.CANCELLED.value, 'Cancelled'

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='tasks')
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.PENDING, db_index=True)

    due_date = models.DateTimeField(null=True, blank=True)
    completion_date = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return self.title


def task_to_dict(task) -> dict:
    """Model albo TaskEntity -> JSON."""
    status = task.status.value if isinstance(task.status, TaskStatus) else task.status
    return {
        'id': task.id,
        'user_id': task.user_id,
        'title': task.title,
        'description': task.description,
        'status': status,
        'due_date': iso(task.due_date),
        'completion_date': iso(task.completion_date),
        'created_at': iso(task.created_at),
        'updated_at': iso(task.updated_at),
    }
