from django.core.management.base import BaseCommand

from apps.core.domain.reminders import ReminderService


class Command(BaseCommand):
    help = 'Wysyła przypomnienia tygodniowe z bieżącego 15-minutowego okna (uruchamiać co 15 minut)'

    def handle(self, *args, **options):
        service = ReminderService()
        sent = service.send_due_reminders()

        self.stdout.write(self.style.SUCCESS(f'Wysłano {len(sent)} przypomnień tygodniowych.'))
        for s in sent:
            self.stdout.write(f"- {s.reminder_address} (next: {s.next_weekly_reminder_utc.isoformat()})")
