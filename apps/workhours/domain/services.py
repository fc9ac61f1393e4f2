# apps/workhours/domain/services.py
import logging
from typing import Optional

from django.core.exceptions import PermissionDenied
from django.http import Http404

from apps.core.domain.time_functions import calculate_work_minutes
from apps.workhours.models import TIME_PREFIXES, WorkHourEntry

logger = logging.getLogger(__name__)


def _span_minutes(values: dict, start: str, end: str) -> Optional[int]:
    """Długość odcinka start-end albo None, gdy brakuje którejś części."""
    parts = (
        values.get(f'{start}_hour'), values.get(f'{start}_minute'), values.get(f'{start}_am_pm'),
        values.get(f'{end}_hour'), values.get(f'{end}_minute'), values.get(f'{end}_am_pm'),
    )
    if any(part is None or part == '' for part in parts):
        return None
    return calculate_work_minutes(*parts)


def compute_work_time(values: dict):
    """(godziny, minuty) przepracowane po odjęciu przerwy, nigdy poniżej zera."""
    if values.get('work_location') == WorkHourEntry.Location.HYBRID:
        spans = [
            _span_minutes(values, 'work_home_start', 'work_home_end'),
            _span_minutes(values, 'work_office_start', 'work_office_end'),
        ]
        total = sum(span for span in spans if span is not None)
    else:
        total = _span_minutes(values, 'work_start', 'work_end')
        if total is None:
            return 0, 0

    total -= (values.get('break_hours') or 0) * 60 + (values.get('break_minutes') or 0)
    total = max(0, total)
    return total // 60, total % 60


class WorkHourService:

    def get_work_hours_by_date_range(self, user, start_date, end_date):
        return WorkHourEntry.objects.filter(
            user=user, date__gte=start_date, date__lte=end_date
        ).order_by('date')

    def get_work_hour_by_date(self, user, day) -> Optional[WorkHourEntry]:
        return WorkHourEntry.objects.filter(user=user, date=day).first()

    def upsert_work_hour_entry(self, user, date, **values) -> WorkHourEntry:
        """Jeden wpis na dzień: istniejący jest w całości nadpisywany."""
        work_hours, work_minutes = compute_work_time(values)

        fields = {'work_hours': work_hours, 'work_minutes': work_minutes}
        for prefix in TIME_PREFIXES:
            fields[f'{prefix}_hour'] = values.get(f'{prefix}_hour')
            fields[f'{prefix}_minute'] = values.get(f'{prefix}_minute')
            fields[f'{prefix}_am_pm'] = values.get(f'{prefix}_am_pm') or ''
        fields.update(
            work_location=values.get('work_location') or '',
            break_hours=values.get('break_hours'),
            break_minutes=values.get('break_minutes'),
            work_from_home=values.get('work_from_home'),
            notes=values.get('notes') or '',
        )

        entry, created = WorkHourEntry.objects.update_or_create(user=user, date=date, defaults=fields)
        logger.info("Work hours for %s %s: %dh %dm", date, "created" if created else "updated",
                    work_hours, work_minutes)
        return entry

    def delete_work_hour_entry(self, user, entry_id):
        entry = WorkHourEntry.objects.filter(pk=entry_id).first()
        if entry is None:
            raise Http404("Work hour entry not found")
        if entry.user_id != user.id:
            raise PermissionDenied("Not authorized to delete this entry")
        entry.delete()
