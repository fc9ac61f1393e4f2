# apps/goals/models.py
from django.db import models
from django.conf import settings

from apps.core.models import iso


class Goal(models.Model):
    class Status(models.TextChoices):
        ACTIVE = 'active', 'Active'
        COMPLETED = 'completed', 'Completed'
        PAUSED = 'paused', 'Paused'
        CANCELLED = 'cancelled', 'Cancelled'

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='goals')
    name = models.CharField(max_length=200)

    # Opis + lustra edytora (HTML/JSON trzymamy jako nieprzezroczyste stringi)
    description = models.TextField(blank=True)
    description_html = models.TextField(blank=True)
    description_json = models.TextField(blank=True)

    target_date = models.DateField(null=True, blank=True)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.ACTIVE)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return self.name

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'name': self.name,
            'description': self.description,
            'description_html': self.description_html,
            'description_json': self.description_json,
            'target_date': iso(self.target_date),
            'status': self.status,
            'created_at': iso(self.created_at),
            'updated_at': iso(self.updated_at),
        }


class GoalMilestone(models.Model):
    class Status(models.TextChoices):
        PENDING = 'pending', 'Pending'
        IN_PROGRESS = 'in_progress', 'In progress'
        COMPLETED = 'completed', 'Completed'
        CANCELLED = 'cancelled', 'Cancelled'

    goal = models.ForeignKey(Goal, on_delete=models.CASCADE, related_name='milestones')
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='goal_milestones')
    name = models.CharField(max_length=200)

    description = models.TextField(blank=True)
    description_html = models.TextField(blank=True)
    description_json = models.TextField(blank=True)

    target_date = models.DateField(null=True, blank=True)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.PENDING)
    order = models.PositiveIntegerField(default=0)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['order', 'id']

    def __str__(self):
        return f"{self.goal.name}: {self.name}"

    def to_dict(self):
        return {
            'id': self.id,
            'goal_id': self.goal_id,
            'user_id': self.user_id,
            'name': self.name,
            'description': self.description,
            'description_html': self.description_html,
            'description_json': self.description_json,
            'target_date': iso(self.target_date),
            'status': self.status,
            'order': self.order,
            'created_at': iso(self.created_at),
            'updated_at': iso(self.updated_at),
        }
