# apps/timeline/models.py
from django.db import models
from django.conf import settings
from django.contrib.contenttypes.fields import GenericForeignKey
from django.contrib.contenttypes.models import ContentType

from apps.core.models import iso

# Zewnętrzne nazwy typów treści -> (app_label, model)
CONTENT_TYPE_MODELS = {
    'goal': ('goals', 'goal'),
    'milestone': ('goals', 'goalmilestone'),
    'user': ('auth', 'user'),
}


class TimelineEvent(models.Model):
    # Kto?
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='timeline_events')

    class EventType(models.TextChoices):
        JOINED_SOJOURNII = 'joined_sojournii', 'Joined Sojournii'
        NEW_EMPLOYER = 'new_employer', 'New Employer'
        GOAL_CREATED = 'goal_created', 'Goal created'
        GOAL_STATUS_CHANGED = 'goal_status_changed', 'Goal status changed'
        GOAL_UPDATED = 'goal_updated', 'Goal updated'
        GOAL_DELETED = 'goal_deleted', 'Goal deleted'
        GOAL_MILESTONE_CREATED = 'goal_milestone_created', 'Milestone created'
        GOAL_MILESTONE_STATUS_CHANGED = 'goal_milestone_status_changed', 'Milestone status changed'
        GOAL_MILESTONE_UPDATED = 'goal_milestone_updated', 'Milestone updated'
        GOAL_MILESTONE_DELETED = 'goal_milestone_deleted', 'Milestone deleted'
        USER_GOAL_UPDATE = 'user_goal_update', 'Goal update'

    event_type = models.CharField(max_length=40, choices=EventType.choices)

    # Na czym? (Generic Relation, opcjonalnie - kamienie milowe produktu nie mają treści)
    # Usunięcie celu nie usuwa jego zdarzeń
    content_type = models.ForeignKey(ContentType, null=True, blank=True, on_delete=models.SET_NULL)
    object_id = models.PositiveIntegerField(null=True, blank=True)
    content_object = GenericForeignKey('content_type', 'object_id')

    title = models.CharField(max_length=300, blank=True)
    description = models.TextField(blank=True)

    # Np. stary i nowy status
    previous_value = models.CharField(max_length=200, blank=True)
    new_value = models.CharField(max_length=200, blank=True)

    created_at = models.DateTimeField(auto_now_add=True, db_index=True)

    class Meta:
        ordering = ['-created_at', '-id']
        indexes = [
            models.Index(fields=['content_type', 'object_id'], name='timeline_ti_content_5a1c2e_idx'),
            models.Index(fields=['user', 'created_at'], name='timeline_ti_user_id_8d3f41_idx'),
        ]

    def __str__(self):
        return f"{self.user} - {self.event_type} - {self.created_at}"

    @property
    def content_label(self):
        if self.content_type_id is None:
            return None
        key = (self.content_type.app_label, self.content_type.model)
        for label, model_key in CONTENT_TYPE_MODELS.items():
            if model_key == key:
                return label
        return None

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'event_type': self.event_type,
            'content_type': self.content_label,
            'content_id': str(self.object_id) if self.object_id is not None else None,
            'title': self.title,
            'description': self.description,
            'previous_value': self.previous_value,
            'new_value': self.new_value,
            'created_at': iso(self.created_at),
        }


# Typy zdarzeń, które klient może zapisać bezpośrednio na celu
GOAL_EVENT_TYPES = (
    TimelineEvent.EventType.GOAL_CREATED,
    TimelineEvent.EventType.GOAL_STATUS_CHANGED,
    TimelineEvent.EventType.GOAL_UPDATED,
    TimelineEvent.EventType.GOAL_DELETED,
)
