# apps/core/domain/reminders.py
import logging
from datetime import datetime, timedelta
from typing import List, Optional

import pytz
from django.conf import settings
from django.core.mail import EmailMultiAlternatives
from django.db.models import Q
from django.template.loader import render_to_string
from django.utils import timezone

from apps.core.domain.time_functions import format_week_range, get_next_weekly_reminder_utc, get_week_range
from apps.core.models import AccountSettings

logger = logging.getLogger(__name__)

SUBJECT = 'Weekly Sojourn Reminder - Time to Reflect on Your Journey'

DISABLING_EVENTS = ('email.bounced', 'email.complained')
PERMANENT_FAILURE_MARKERS = ('does not exist', 'invalid', 'rejected')


def reminder_window(now: Optional[datetime] = None):
    """Bieżące 15-minutowe okno UTC: [początek, koniec)."""
    now = (now or timezone.now()).astimezone(pytz.UTC)
    size = settings.SOJOURNII['REMINDER_WINDOW_MINUTES']
    start = now.replace(minute=now.minute - now.minute % size, second=0, microsecond=0)
    return start, start + timedelta(minutes=size)


def is_permanent_failure(error) -> bool:
    if isinstance(error, dict):
        if error.get('type') == 'permanent':
            return True
        error = error.get('message', '')
    text = str(error or '').lower()
    return any(marker in text for marker in PERMANENT_FAILURE_MARKERS)


class ReminderService:

    def due_settings(self, now: Optional[datetime] = None):
        start, end = reminder_window(now)
        return AccountSettings.objects.filter(
            weekly_reminder=True,
            next_weekly_reminder_utc__gte=start,
            next_weekly_reminder_utc__lt=end,
        ).select_related('user', 'user__profile')

    def send_reminder(self, settings_obj: AccountSettings, now: Optional[datetime] = None) -> bool:
        address = settings_obj.reminder_address
        if not address:
            logger.warning("No address for weekly reminder of user %s", settings_obj.user_id)
            return False

        site_url = settings.SOJOURNII['SITE_URL'].rstrip('/')
        start, end = get_week_range(now, settings_obj.weekly_reminder_time_zone)
        profile = getattr(settings_obj.user, 'profile', None)
        context = {
            'name': (profile.name if profile else '') or 'there',
            'week_range': format_week_range(start, end),
            'sojourn_url': f"{site_url}/my/sojourn",
            'settings_url': f"{site_url}/my/settings",
        }

        message = EmailMultiAlternatives(
            subject=SUBJECT,
            body=render_to_string('core/emails/weekly_reminder.txt', context),
            from_email=settings.DEFAULT_FROM_EMAIL,
            to=[address],
        )
        message.attach_alternative(render_to_string('core/emails/weekly_reminder.html', context), 'text/html')
        message.send()
        return True

    def advance(self, settings_obj: AccountSettings):
        """Następny termin: ten sam lokalny dzień i godzina tydzień później (odporne na DST)."""
        previous = settings_obj.next_weekly_reminder_utc or timezone.now()
        settings_obj.next_weekly_reminder_utc = get_next_weekly_reminder_utc(
            settings_obj.weekly_reminder_day,
            settings_obj.weekly_reminder_hour,
            settings_obj.weekly_reminder_minute,
            settings_obj.weekly_reminder_time_zone,
            now=previous,
        )
        settings_obj.save(update_fields=['next_weekly_reminder_utc', 'updated_at'])

    def send_due_reminders(self, now: Optional[datetime] = None) -> List[AccountSettings]:
        sent = []
        for settings_obj in list(self.due_settings(now)):
            try:
                if settings_obj.email_notifications_disabled:
                    logger.info("Skipping reminder for user %s: notifications disabled", settings_obj.user_id)
                elif self.send_reminder(settings_obj, now):
                    sent.append(settings_obj)
            except Exception:
                logger.exception("Weekly reminder for user %s failed", settings_obj.user_id)
            finally:
                # Termin przesuwany zawsze, także po błędzie wysyłki
                self.advance(settings_obj)

        logger.info("Weekly reminders sent: %d", len(sent))
        return sent

    # -- webhook dostawcy poczty ------------------------------------------------

    def find_settings_by_email(self, email) -> Optional[AccountSettings]:
        if not email:
            return None
        return (
            AccountSettings.objects.filter(clerk_email__iexact=email).first()
            or AccountSettings.objects.filter(notifications_email__iexact=email).first()
        )

    def disable_notifications(self, settings_obj: AccountSettings, reason: str):
        settings_obj.email_notifications_disabled = True
        settings_obj.save(update_fields=['email_notifications_disabled', 'updated_at'])
        logger.warning("Email notifications disabled for user %s: %s", settings_obj.user_id, reason)

    def handle_webhook_event(self, event: dict) -> Optional[AccountSettings]:
        """Zwraca ustawienia, którym wyłączono powiadomienia (albo None)."""
        event_type = event.get('type')
        data = event.get('data') or {}
        recipients = data.get('to')
        email = recipients[0] if isinstance(recipients, list) and recipients else recipients

        logger.info("Received email webhook event: %s", event_type)

        if event_type in DISABLING_EVENTS:
            reason = f"{event_type}: {data.get('reason') or 'Unknown reason'}"
        elif event_type == 'email.failed' and is_permanent_failure(data.get('error')):
            reason = f"email.failed: {data.get('error')}"
        else:
            return None

        settings_obj = self.find_settings_by_email(email)
        if settings_obj is None:
            logger.info("No user found for webhook address %s", email)
            return None

        self.disable_notifications(settings_obj, reason)
        return settings_obj
