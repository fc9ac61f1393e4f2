# apps/workhours/models.py
from django.db import models
from django.conf import settings

from apps.core.models import AmPm, iso

# Pola godzin w formacie 12-godzinnym: (godzina, minuta, AM/PM) dla każdego odcinka
TIME_PREFIXES = (
    'work_start', 'work_end',
    'work_home_start', 'work_home_end',
    'work_office_start', 'work_office_end',
)


def hour_field():
    return models.PositiveSmallIntegerField(null=True, blank=True)


def minute_field():
    return models.PositiveSmallIntegerField(null=True, blank=True)


def am_pm_field():
    return models.CharField(max_length=2, choices=AmPm.choices, blank=True)


class WorkHourEntry(models.Model):
    class Location(models.TextChoices):
        HOME = 'home', 'Home'
        OFFICE = 'office', 'Office'
        HYBRID = 'hybrid', 'Hybrid'

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='work_hour_entries')
    date = models.DateField()

    # Wyliczone przy zapisie
    work_hours = models.PositiveSmallIntegerField(default=0)
    work_minutes = models.PositiveSmallIntegerField(default=0)

    work_start_hour = hour_field()
    work_start_minute = minute_field()
    work_start_am_pm = am_pm_field()
    work_end_hour = hour_field()
    work_end_minute = minute_field()
    work_end_am_pm = am_pm_field()

    # Praca hybrydowa: osobno dom i biuro
    work_home_start_hour = hour_field()
    work_home_start_minute = minute_field()
    work_home_start_am_pm = am_pm_field()
    work_home_end_hour = hour_field()
    work_home_end_minute = minute_field()
    work_home_end_am_pm = am_pm_field()
    work_office_start_hour = hour_field()
    work_office_start_minute = minute_field()
    work_office_start_am_pm = am_pm_field()
    work_office_end_hour = hour_field()
    work_office_end_minute = minute_field()
    work_office_end_am_pm = am_pm_field()

    work_location = models.CharField(max_length=10, choices=Location.choices, blank=True)
    break_hours = models.PositiveSmallIntegerField(null=True, blank=True)
    break_minutes = models.PositiveSmallIntegerField(null=True, blank=True)
    work_from_home = models.BooleanField(null=True, blank=True)
    notes = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['date']
        verbose_name_plural = 'work hour entries'
        constraints = [
            models.UniqueConstraint(fields=['user', 'date'], name='unique_work_hours_per_day'),
        ]

    def __str__(self):
        return f"{self.date:%Y-%m-%d}: {self.work_hours}h {self.work_minutes}m"

    @property
    def total_minutes(self):
        return self.work_hours * 60 + self.work_minutes

    def to_dict(self):
        data = {
            'id': self.id,
            'user_id': self.user_id,
            'date': iso(self.date),
            'work_hours': self.work_hours,
            'work_minutes': self.work_minutes,
            'work_location': self.work_location or None,
            'break_hours': self.break_hours,
            'break_minutes': self.break_minutes,
            'work_from_home': self.work_from_home,
            'notes': self.notes,
            'created_at': iso(self.created_at),
            'updated_at': iso(self.updated_at),
        }
        for prefix in TIME_PREFIXES:
            data[f'{prefix}_hour'] = getattr(self, f'{prefix}_hour')
            data[f'{prefix}_minute'] = getattr(self, f'{prefix}_minute')
            data[f'{prefix}_am_pm'] = getattr(self, f'{prefix}_am_pm') or None
        return data
