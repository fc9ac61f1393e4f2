"""Przypomnienia tygodniowe i webhook dostawcy poczty."""
from datetime import datetime, timedelta
from io import StringIO

import pytest
import pytz
from django.core import mail
from django.core.management import call_command

from apps.core.domain.reminders import ReminderService, is_permanent_failure, reminder_window
from apps.core.models import AccountSettings

pytestmark = pytest.mark.django_db

NOW = pytz.UTC.localize(datetime(2024, 1, 12, 16, 7))  # piątek


@pytest.fixture
def due(user):
    return AccountSettings.objects.create(
        user=user,
        weekly_reminder=True,
        weekly_reminder_day='friday',
        weekly_reminder_hour=16,
        weekly_reminder_minute=0,
        weekly_reminder_time_zone='UTC',
        next_weekly_reminder_utc=pytz.UTC.localize(datetime(2024, 1, 12, 16, 0)),
        clerk_email='ada@example.com',
    )


def test_reminder_window():
    start, end = reminder_window(NOW)
    assert start == pytz.UTC.localize(datetime(2024, 1, 12, 16, 0))
    assert end - start == timedelta(minutes=15)


@pytest.mark.parametrize("error, expected", [
    ({'type': 'permanent'}, True),
    ({'message': 'Mailbox does not exist'}, True),
    ("Recipient rejected", True),
    ({'message': 'Temporary failure, retrying'}, False),
    (None, False),
])
def test_is_permanent_failure(error, expected):
    assert is_permanent_failure(error) is expected


class TestSendDueReminders:

    def test_sends_and_advances(self, due):
        sent = ReminderService().send_due_reminders(NOW)

        assert sent == [due]
        assert len(mail.outbox) == 1
        message = mail.outbox[0]
        assert message.to == ['ada@example.com']
        assert message.subject == 'Weekly Sojourn Reminder - Time to Reflect on Your Journey'
        assert "Jan 8 - Jan 14, 2024" in message.body
        due.refresh_from_db()
        assert due.next_weekly_reminder_utc == pytz.UTC.localize(datetime(2024, 1, 19, 16, 0))

    def test_prefers_notifications_email(self, due):
        due.notifications_email = 'alerts@example.com'
        due.save()

        ReminderService().send_due_reminders(NOW)

        assert mail.outbox[0].to == ['alerts@example.com']

    def test_outside_window(self, due):
        later = NOW + timedelta(minutes=30)
        assert ReminderService().send_due_reminders(later) == []
        assert mail.outbox == []

    def test_disabled_notifications_still_advance(self, due):
        due.email_notifications_disabled = True
        due.save()

        assert ReminderService().send_due_reminders(NOW) == []
        assert mail.outbox == []
        due.refresh_from_db()
        assert due.next_weekly_reminder_utc.day == 19

    def test_failed_send_still_advances(self, due, other_user, monkeypatch):
        second = AccountSettings.objects.create(
            user=other_user,
            weekly_reminder=True,
            weekly_reminder_day='friday',
            weekly_reminder_hour=16,
            weekly_reminder_minute=0,
            weekly_reminder_time_zone='UTC',
            next_weekly_reminder_utc=due.next_weekly_reminder_utc,
            clerk_email='grace@example.com',
        )
        original = ReminderService.send_reminder

        def flaky(service, settings_obj, now=None):
            if settings_obj.pk == due.pk:
                raise OSError("SMTP connection refused")
            return original(service, settings_obj, now)

        monkeypatch.setattr(ReminderService, 'send_reminder', flaky)

        sent = ReminderService().send_due_reminders(NOW)

        assert sent == [second]
        assert [m.to for m in mail.outbox] == [['grace@example.com']]
        next_week = pytz.UTC.localize(datetime(2024, 1, 19, 16, 0))
        for row in (due, second):
            row.refresh_from_db()
            assert row.next_weekly_reminder_utc == next_week

    def test_management_command(self, due, monkeypatch):
        monkeypatch.setattr('apps.core.domain.reminders.timezone.now', lambda: NOW)
        out = StringIO()

        call_command('send_weekly_reminders', stdout=out)

        assert len(mail.outbox) == 1
        assert 'ada@example.com' in out.getvalue()


class TestWebhook:

    URL = '/api/webhooks/email/'

    @pytest.fixture(autouse=True)
    def secret(self, settings):
        settings.RESEND_WEBHOOK_SECRET = 'whsec_test'

    def post(self, client, event, signature='whsec_test'):
        return client.post(self.URL, data=event, content_type='application/json',
                           HTTP_RESEND_SIGNATURE=signature)

    def test_bounce_disables_notifications(self, client, due):
        response = self.post(client, {'type': 'email.bounced', 'data': {'to': ['ADA@example.com']}})

        assert response.status_code == 200
        due.refresh_from_db()
        assert due.email_notifications_disabled

    def test_temporary_failure_is_ignored(self, client, due):
        self.post(client, {'type': 'email.failed', 'data': {'to': ['ada@example.com'],
                                                            'error': {'message': 'Timeout'}}})
        due.refresh_from_db()
        assert not due.email_notifications_disabled

    def test_permanent_failure(self, client, due):
        self.post(client, {'type': 'email.failed', 'data': {'to': 'ada@example.com',
                                                            'error': {'type': 'permanent'}}})
        due.refresh_from_db()
        assert due.email_notifications_disabled

    def test_bad_signature(self, client, due):
        response = self.post(client, {'type': 'email.bounced', 'data': {'to': ['ada@example.com']}},
                             signature='nope')
        assert response.status_code == 401
        due.refresh_from_db()
        assert not due.email_notifications_disabled

    def test_unknown_address(self, client):
        response = self.post(client, {'type': 'email.complained', 'data': {'to': ['ghost@example.com']}})
        assert response.status_code == 200

    def test_malformed_payload(self, client):
        response = client.post(self.URL, data='not json', content_type='application/json',
                               HTTP_RESEND_SIGNATURE='whsec_test')
        assert response.status_code == 400

    def test_missing_secret(self, client, settings):
        settings.RESEND_WEBHOOK_SECRET = ''
        assert self.post(client, {'type': 'email.bounced'}).status_code == 500
