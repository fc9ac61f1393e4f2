# apps/goals/domain/services.py
import logging
from typing import List

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from apps.core.api import get_owned_or_404
from apps.goals.models import Goal, GoalMilestone
from apps.timeline.domain.services import TimelineService
from apps.timeline.models import TimelineEvent

logger = logging.getLogger(__name__)

EventType = TimelineEvent.EventType

# Pola, których zmiana liczy się jako "ogólna" edycja (lustra HTML/JSON się nie liczą)
TRACKED_FIELDS = ('name', 'description', 'target_date')


def _clean_changes(changes: dict) -> dict:
    changes = dict(changes)
    if not changes.get('status'):
        changes.pop('status', None)
    if changes.get('order', 0) is None:
        changes.pop('order')
    return changes


def _apply(obj, changes: dict):
    """Nadpisuje pola i zwraca (stary status, czy zmieniło się coś poza statusem)."""
    old_status = obj.status
    other_changed = False
    for field, value in changes.items():
        if field in TRACKED_FIELDS + ('order',) and getattr(obj, field) != value:
            other_changed = True
        setattr(obj, field, value)
    return old_status, other_changed


class GoalService:

    def __init__(self, timeline: TimelineService = None):
        self.timeline = timeline or TimelineService()

    def list_goals(self, user):
        return Goal.objects.filter(user=user).order_by('-created_at', '-id')

    def get_goal(self, user, goal_id) -> Goal:
        return get_owned_or_404(Goal, goal_id, user)

    @transaction.atomic
    def create_goal(self, user, name, description="", description_html="", description_json="",
                    target_date=None, status=Goal.Status.ACTIVE) -> Goal:
        goal = Goal.objects.create(
            user=user,
            name=name,
            description=description or "",
            description_html=description_html or "",
            description_json=description_json or "",
            target_date=target_date,
            status=status or Goal.Status.ACTIVE,
        )
        self.timeline.log(
            user, EventType.GOAL_CREATED, goal,
            title=f"Created goal: {goal.name}",
            description=f'New goal "{goal.name}" was created',
        )
        return goal

    @transaction.atomic
    def create_goal_with_milestones(self, user, name, milestones: List[dict], description="",
                                    description_html="", description_json="", target_date=None,
                                    status=Goal.Status.ACTIVE) -> Goal:
        """Cel + kamienie milowe (kolejność 0..n-1) w jednej operacji. Kamienie bez zdarzeń."""
        goal = Goal.objects.create(
            user=user,
            name=name,
            description=description or "",
            description_html=description_html or "",
            description_json=description_json or "",
            target_date=target_date,
            status=status or Goal.Status.ACTIVE,
        )
        self.timeline.log(
            user, EventType.GOAL_CREATED, goal,
            title=f"Created goal: {goal.name}",
            description=f'New goal "{goal.name}" was created with {len(milestones)} milestones',
        )

        GoalMilestone.objects.bulk_create([
            GoalMilestone(
                goal=goal,
                user=user,
                name=data['name'],
                description=data.get('description') or "",
                description_html=data.get('description_html') or "",
                description_json=data.get('description_json') or "",
                target_date=data.get('target_date'),
                status=GoalMilestone.Status.PENDING,
                order=index,
            )
            for index, data in enumerate(milestones)
        ])
        return goal

    @transaction.atomic
    def update_goal(self, user, goal_id, **changes) -> Goal:
        goal = self.get_goal(user, goal_id)
        changes = _clean_changes(changes)

        old_status, other_changed = _apply(goal, changes)
        goal.save()

        # Osobne zdarzenie dla zmiany statusu
        if goal.status != old_status:
            self.timeline.log(
                user, EventType.GOAL_STATUS_CHANGED, goal,
                title=f"Goal status changed: {old_status} → {goal.status}",
                description=f'Status of "{goal.name}" changed from {old_status} to {goal.status}',
                previous_value=old_status,
                new_value=goal.status,
            )

        if other_changed:
            self.timeline.log(
                user, EventType.GOAL_UPDATED, goal,
                title=f"Updated goal: {goal.name}",
                description=f'Updated goal "{goal.name}"',
            )
        return goal

    @transaction.atomic
    def delete_goal(self, user, goal_id):
        goal = self.get_goal(user, goal_id)

        # Zdarzenie zostaje w dzienniku po usunięciu celu
        self.timeline.log(
            user, EventType.GOAL_DELETED, goal,
            title=f"Deleted goal: {goal.name}",
            description=f'Goal "{goal.name}" was deleted',
        )

        deleted, _ = goal.milestones.all().delete()
        logger.info("Goal %s deleted with %d milestones", goal.pk, deleted)
        goal.delete()

    def get_goal_timeline(self, user, goal_id, limit=None):
        return self.timeline.goal_events(user, goal_id, limit=limit)


class MilestoneService:

    def __init__(self, timeline: TimelineService = None):
        self.timeline = timeline or TimelineService()

    def get_goal_milestones(self, user, goal_id):
        goal = get_owned_or_404(Goal, goal_id, user)
        return goal.milestones.order_by('order', 'id')

    def get_user_milestones(self, user):
        return GoalMilestone.objects.filter(user=user).select_related('goal').order_by('-created_at', '-id')

    def get_milestone(self, user, milestone_id) -> GoalMilestone:
        return get_owned_or_404(GoalMilestone, milestone_id, user, label="Milestone")

    @transaction.atomic
    def create_milestone(self, user, goal_id, name, description="", description_html="",
                         description_json="", target_date=None, status=GoalMilestone.Status.PENDING,
                         order=None) -> GoalMilestone:
        goal = get_owned_or_404(Goal, goal_id, user)
        if order is None:
            order = goal.milestones.count()

        milestone = GoalMilestone.objects.create(
            goal=goal,
            user=user,
            name=name,
            description=description or "",
            description_html=description_html or "",
            description_json=description_json or "",
            target_date=target_date,
            status=status or GoalMilestone.Status.PENDING,
            order=order,
        )
        self.timeline.log(
            user, EventType.GOAL_MILESTONE_CREATED, milestone,
            title=f"Created milestone: {milestone.name}",
            description=f'Added new milestone "{milestone.name}" to goal "{goal.name}"',
        )
        return milestone

    @transaction.atomic
    def update_milestone(self, user, milestone_id, **changes) -> GoalMilestone:
        milestone = self.get_milestone(user, milestone_id)
        changes = _clean_changes(changes)

        old_status, other_changed = _apply(milestone, changes)
        milestone.save()

        if milestone.status != old_status:
            self.timeline.log(
                user, EventType.GOAL_MILESTONE_STATUS_CHANGED, milestone,
                title=f"Milestone status changed: {old_status} → {milestone.status}",
                description=f'Status of "{milestone.name}" changed from {old_status} to {milestone.status}',
                previous_value=old_status,
                new_value=milestone.status,
            )

        if other_changed:
            self.timeline.log(
                user, EventType.GOAL_MILESTONE_UPDATED, milestone,
                title=f"Updated milestone: {milestone.name}",
                description=f'Updated milestone "{milestone.name}" in goal "{milestone.goal.name}"',
            )
        return milestone

    @transaction.atomic
    def delete_milestone(self, user, milestone_id):
        milestone = self.get_milestone(user, milestone_id)
        self.timeline.log(
            user, EventType.GOAL_MILESTONE_DELETED, milestone,
            title=f"Deleted milestone: {milestone.name}",
            description=f'Removed milestone "{milestone.name}" from goal "{milestone.goal.name}"',
        )
        milestone.delete()

    @transaction.atomic
    def reorder_milestones(self, user, goal_id, milestone_ids: List[int]):
        goal = get_owned_or_404(Goal, goal_id, user)
        milestones = {m.id: m for m in goal.milestones.filter(id__in=milestone_ids)}

        missing = [pk for pk in milestone_ids if pk not in milestones]
        if missing:
            raise ValidationError({'ids': [f"Milestones {missing} do not belong to this goal"]})

        now = timezone.now()
        for index, pk in enumerate(milestone_ids):
            milestones[pk].order = index
            milestones[pk].updated_at = now
        GoalMilestone.objects.bulk_update(milestones.values(), ['order', 'updated_at'])
        return self.get_goal_milestones(user, goal_id)
