# apps/retros/domain/services.py
import logging
from typing import Optional

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from apps.core.api import get_owned_or_404
from apps.core.domain.services import user_timezone
from apps.core.domain.time_functions import get_local_date, get_week_end, get_week_range, get_week_start
from apps.retros.models import SLIDER_FIELDS, TEXT_FIELDS, Retro

logger = logging.getLogger(__name__)


def validate_sliders(values: dict):
    for field in SLIDER_FIELDS:
        value = values.get(field)
        if value is not None and not 0 <= value <= 100:
            raise ValidationError({field: ["Slider values must be between 0 and 100"]})


def _clean_text(values: dict) -> dict:
    for field in TEXT_FIELDS:
        if field in values:
            values[field] = (values[field] or "").strip()
    return values


class RetroService:

    def list_retros(self, user):
        return Retro.objects.filter(user=user).order_by('-week_start_date', '-id')

    def get_retro(self, user, retro_id) -> Retro:
        return get_owned_or_404(Retro, retro_id, user, label="Retro")

    def get_retro_by_week(self, user, week_start_date) -> Optional[Retro]:
        return Retro.objects.filter(user=user, week_start_date=week_start_date).first()

    def get_current_week_retro(self, user, now=None) -> Optional[Retro]:
        return self.get_retro_by_week(user, get_week_start(now, user_timezone(user)))

    @transaction.atomic
    def create_retro(self, user, week_start_date=None, mark_as_completed=False, now=None, **values) -> Retro:
        if week_start_date is None:
            week_start_date = get_week_start(now, user_timezone(user))

        if Retro.objects.filter(user=user, week_start_date=week_start_date).exists():
            raise ValidationError("Retro already exists for this week")

        validate_sliders(values)
        retro = Retro(
            user=user,
            week_start_date=week_start_date,
            week_end_date=get_week_end(week_start_date),
            **_clean_text(values),
        )
        # completed_at tylko na wyraźne żądanie
        if mark_as_completed:
            retro.completed_at = now or timezone.now()
        retro.save()

        logger.info("Retro for week %s created by user %s", week_start_date, user.pk)
        return retro

    def update_retro(self, user, retro_id, mark_as_completed=False, now=None, **changes) -> Retro:
        retro = self.get_retro(user, retro_id)
        validate_sliders(changes)

        for field, value in _clean_text(changes).items():
            setattr(retro, field, value)

        if mark_as_completed or retro.completed_at is None:
            retro.completed_at = now or timezone.now()
        retro.save()
        return retro

    def delete_retro(self, user, retro_id):
        self.get_retro(user, retro_id).delete()
        logger.info("Retro %s deleted by user %s", retro_id, user.pk)

    def get_current_week_info(self, user, now=None) -> dict:
        tz_name = user_timezone(user)
        start, end = get_week_range(now, tz_name)
        return {
            'start_date': start.isoformat(),
            'end_date': end.isoformat(),
            'current_date': get_local_date(now, tz_name).isoformat(),
        }
