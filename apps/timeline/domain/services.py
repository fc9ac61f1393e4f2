# apps/timeline/domain/services.py
import logging
from itertools import chain
from typing import Iterable, List, Optional

from django.apps import apps as django_apps
from django.conf import settings
from django.contrib.contenttypes.models import ContentType
from django.core.exceptions import ValidationError

from apps.core.api import get_owned_or_404
from apps.timeline.models import CONTENT_TYPE_MODELS, GOAL_EVENT_TYPES, TimelineEvent

logger = logging.getLogger(__name__)


def default_limit():
    return settings.SOJOURNII['TIMELINE_LIMIT']


def merge_events(groups: Iterable[Iterable[TimelineEvent]], limit: int) -> List[TimelineEvent]:
    """Scala kilka list zdarzeń: najnowsze pierwsze, remis rozstrzyga id, obcięte do limitu."""
    merged = sorted(chain.from_iterable(groups), key=lambda e: (e.created_at, e.id), reverse=True)
    return merged[:limit]


def resolve_content_type(label: Optional[str]) -> Optional[ContentType]:
    if not label:
        return None
    try:
        app_label, model = CONTENT_TYPE_MODELS[label]
    except KeyError:
        raise ValidationError({'content_type': [f"Unknown content type: {label}"]})
    return ContentType.objects.get_for_model(django_apps.get_model(app_label, model))


class TimelineService:
    """Dziennik zdarzeń użytkownika. Tylko dopisywanie, bez edycji i usuwania."""

    @staticmethod
    def log(user, event_type, obj=None, title="", description="", previous_value="", new_value=""):
        """Zapis zdarzenia powiązanego (opcjonalnie) z obiektem."""
        return TimelineEvent.objects.create(
            user=user,
            event_type=event_type,
            content_type=ContentType.objects.get_for_model(obj) if obj is not None else None,
            object_id=obj.pk if obj is not None else None,
            title=title or "",
            description=description or "",
            previous_value=previous_value or "",
            new_value=new_value or "",
        )

    def create_event(self, user, event_type, content_type=None, content_id=None, title="",
                     description="", previous_value="", new_value=""):
        if event_type not in TimelineEvent.EventType.values:
            raise ValidationError({'event_type': [f"Unknown event type: {event_type}"]})

        ct = resolve_content_type(content_type)
        object_id = None
        if content_id not in (None, ""):
            try:
                object_id = int(content_id)
            except (TypeError, ValueError):
                raise ValidationError({'content_id': ["Invalid content id"]})

        return TimelineEvent.objects.create(
            user=user,
            event_type=event_type,
            content_type=ct,
            object_id=object_id,
            title=title or "",
            description=description or "",
            previous_value=previous_value or "",
            new_value=new_value or "",
        )

    def user_events(self, user, limit: Optional[int] = None, queryset=None):
        qs = queryset if queryset is not None else TimelineEvent.objects.all()
        qs = qs.filter(user=user).select_related('content_type').order_by('-created_at', '-id')
        return list(qs[:limit or default_limit()])

    def goal_events(self, user, goal_id, limit: Optional[int] = None) -> List[TimelineEvent]:
        """Zdarzenia celu + zdarzenia jego kamieni milowych, najnowsze pierwsze."""
        from apps.goals.models import Goal, GoalMilestone

        goal = get_owned_or_404(Goal, goal_id, user)
        limit = limit or default_limit()

        goal_ct = ContentType.objects.get_for_model(Goal)
        milestone_ct = ContentType.objects.get_for_model(GoalMilestone)
        milestone_ids = list(goal.milestones.values_list('id', flat=True))

        base = TimelineEvent.objects.filter(user=user).select_related('content_type')
        goal_events = base.filter(content_type=goal_ct, object_id=goal.id)
        milestone_events = base.filter(content_type=milestone_ct, object_id__in=milestone_ids)

        return merge_events([goal_events, milestone_events], limit)

    def create_goal_event(self, user, goal_id, event_type, title="", description="",
                          previous_value="", new_value=""):
        from apps.goals.models import Goal

        goal = get_owned_or_404(Goal, goal_id, user)
        if event_type not in GOAL_EVENT_TYPES and event_type != TimelineEvent.EventType.USER_GOAL_UPDATE:
            raise ValidationError({'event_type': [f"Event type not allowed for a goal: {event_type}"]})
        return self.log(user, event_type, goal, title, description, previous_value, new_value)

    def create_user_goal_update(self, user, goal_id, title, description="",
                                previous_value="", new_value=""):
        """Wpis użytkownika o postępie celu (np. notatka z tygodnia)."""
        event = self.create_goal_event(
            user, goal_id, TimelineEvent.EventType.USER_GOAL_UPDATE,
            title, description, previous_value, new_value,
        )
        logger.info("User %s posted an update for goal %s", user.pk, goal_id)
        return event
