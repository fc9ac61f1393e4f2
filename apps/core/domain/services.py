# apps/core/domain/services.py
import logging
from typing import Optional

from django.core.exceptions import ValidationError
from django.db import transaction
from django.http import Http404

from apps.core.api import get_owned_or_404
from apps.core.domain.time_functions import get_local_date, get_next_weekly_reminder_utc, get_week_start
from apps.core.models import AccountSettings, UserProfile
from apps.timeline.domain.services import TimelineService
from apps.timeline.models import TimelineEvent

logger = logging.getLogger(__name__)

REMINDER_FIELDS = ('weekly_reminder_day', 'weekly_reminder_hour', 'weekly_reminder_minute',
                   'weekly_reminder_time_zone')


def user_timezone(user) -> Optional[str]:
    """Strefa czasowa z ustawień konta (None -> UTC w funkcjach czasu)."""
    return (
        AccountSettings.objects.filter(user=user)
        .values_list('weekly_reminder_time_zone', flat=True)
        .first()
    )


class UserService:

    def create_user(self, user, name="", email="", picture_url="") -> UserProfile:
        """Idempotentne: istniejące dane profilu nie są nadpisywane."""
        profile, _ = UserProfile.objects.get_or_create(user=user)

        changed = []
        for field, value in (('name', name), ('email', email), ('picture_url', picture_url)):
            if value and not getattr(profile, field):
                setattr(profile, field, value)
                changed.append(field)

        if changed:
            profile.save(update_fields=changed + ['updated_at'])
        return profile

    def get_current_user(self, user) -> UserProfile:
        profile, _ = UserProfile.objects.get_or_create(user=user, defaults={'email': user.email or ''})
        return profile


class AccountSettingsService:

    def __init__(self, timeline: TimelineService = None):
        self.timeline = timeline or TimelineService()

    def get(self, user) -> Optional[AccountSettings]:
        return AccountSettings.objects.filter(user=user).first()

    def _log_joined(self, user):
        # Jedno zdarzenie "dołączył" na użytkownika
        already = TimelineEvent.objects.filter(
            user=user, event_type=TimelineEvent.EventType.JOINED_SOJOURNII
        ).exists()
        if not already:
            self.timeline.log(
                user, TimelineEvent.EventType.JOINED_SOJOURNII,
                title='Joined Sojournii',
                description='Welcome to Sojournii! Your journey begins here.',
            )

    @staticmethod
    def _next_reminder(settings_obj: AccountSettings, now=None):
        if not settings_obj.weekly_reminder:
            return None
        return get_next_weekly_reminder_utc(
            settings_obj.weekly_reminder_day,
            settings_obj.weekly_reminder_hour,
            settings_obj.weekly_reminder_minute,
            settings_obj.weekly_reminder_time_zone,
            now=now,
        )

    @transaction.atomic
    def create(self, user, **data) -> AccountSettings:
        if AccountSettings.objects.filter(user=user).exists():
            raise ValidationError("Account settings already exist for this user")

        settings_obj = AccountSettings(user=user, **data)
        if not settings_obj.clerk_email:
            settings_obj.clerk_email = user.email or ''
        settings_obj.next_weekly_reminder_utc = self._next_reminder(settings_obj)
        settings_obj.save()

        self._log_joined(user)

        # Domyślne pytania tylko dla użytkownika bez pytań
        from apps.performance.domain.services import QuestionService
        QuestionService().seed_default_questions(user)

        logger.info("Account settings created for user %s", user.pk)
        return settings_obj

    @transaction.atomic
    def update(self, user, settings_id, **changes) -> AccountSettings:
        settings_obj = get_owned_or_404(AccountSettings, settings_id, user, label="Account settings")

        was_onboarded = settings_obj.onboarding_completed
        was_reminding = settings_obj.weekly_reminder
        old_employers = list(settings_obj.employers or [])

        for field, value in changes.items():
            setattr(settings_obj, field, value)

        if any(f in changes for f in REMINDER_FIELDS) or settings_obj.weekly_reminder != was_reminding:
            settings_obj.next_weekly_reminder_utc = self._next_reminder(settings_obj)

        settings_obj.save()

        if settings_obj.onboarding_completed and not was_onboarded:
            self._log_joined(user)

        if 'employers' in changes:
            for employer in (settings_obj.employers or [])[len(old_employers):]:
                name = employer.get('employer_name', '').strip()
                self.timeline.log(
                    user, TimelineEvent.EventType.NEW_EMPLOYER, user,
                    title=f"New employer: {name}",
                    description=f'Started working at "{name}"',
                    new_value=name,
                )
        return settings_obj

    def delete(self, user, settings_id):
        settings_obj = get_owned_or_404(AccountSettings, settings_id, user, label="Account settings")
        settings_obj.delete()
        logger.info("Account settings %s deleted", settings_id)

    def has_completed_onboarding(self, user) -> bool:
        settings_obj = self.get(user)
        return bool(settings_obj and settings_obj.onboarding_completed)

    def reminder_preferences(self, user) -> Optional[dict]:
        settings_obj = self.get(user)
        return settings_obj.reminder_preferences() if settings_obj else None

    def enable_email_notifications(self, user) -> AccountSettings:
        settings_obj = self.get(user)
        if settings_obj is None:
            raise Http404("Account settings not found")

        settings_obj.email_notifications_disabled = False
        settings_obj.save(update_fields=['email_notifications_disabled', 'updated_at'])
        logger.info("Email notifications re-enabled for user %s", user.pk)
        return settings_obj


class DashboardService:
    """Podsumowanie dla ekranu głównego."""

    def summary(self, user, now=None) -> dict:
        from django.db.models import Count

        from apps.goals.models import Goal, GoalMilestone
        from apps.performance.models import PerformanceQuestion, PerformanceResponse
        from apps.retros.models import Retro
        from apps.tasks.models import Task

        tz_name = user_timezone(user)
        week_start = get_week_start(now, tz_name)

        def by_status(qs):
            return {row['status']: row['total'] for row in qs.values('status').annotate(total=Count('id'))}

        answered = PerformanceResponse.objects.filter(
            user=user, week_start_date=week_start
        ).values_list('question_id', flat=True)
        unanswered = PerformanceQuestion.objects.filter(
            user=user, is_active=True
        ).exclude(id__in=answered).count()

        return {
            'today': get_local_date(now, tz_name).isoformat(),
            'week_start_date': week_start.isoformat(),
            'goals': by_status(Goal.objects.filter(user=user)),
            'milestones': by_status(GoalMilestone.objects.filter(user=user)),
            'open_tasks': Task.objects.filter(
                user=user, status__in=[Task.Status.PENDING, Task.Status.IN_PROGRESS]
            ).count(),
            'has_current_week_retro': Retro.objects.filter(user=user, week_start_date=week_start).exists(),
            'unanswered_questions': unanswered,
        }
