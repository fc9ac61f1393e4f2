# apps/retros/models.py
from django.db import models
from django.conf import settings

from apps.core.models import iso

SLIDER_FIELDS = (
    'general_feelings',
    'work_relationships',
    'professional_growth',
    'productivity',
    'personal_wellbeing',
)

TEXT_FIELDS = ('positive_outcomes', 'negative_outcomes', 'key_takeaways')


class Retro(models.Model):
    """Cotygodniowe podsumowanie: suwaki 0-100 i trzy pola refleksji."""

    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='retros')

    # Tydzień: poniedziałek - niedziela
    week_start_date = models.DateField()
    week_end_date = models.DateField()

    # Suwaki
    general_feelings = models.PositiveSmallIntegerField(default=50)
    work_relationships = models.PositiveSmallIntegerField(default=50)
    professional_growth = models.PositiveSmallIntegerField(default=50)
    productivity = models.PositiveSmallIntegerField(default=50)
    personal_wellbeing = models.PositiveSmallIntegerField(default=50)

    # Refleksja (tekst + wersje z edytora)
    positive_outcomes = models.TextField(blank=True, verbose_name="What went well?")
    positive_outcomes_html = models.TextField(blank=True)
    positive_outcomes_json = models.TextField(blank=True)
    negative_outcomes = models.TextField(blank=True, verbose_name="What could be better?")
    negative_outcomes_html = models.TextField(blank=True)
    negative_outcomes_json = models.TextField(blank=True)
    key_takeaways = models.TextField(blank=True, verbose_name="Key takeaways")
    key_takeaways_html = models.TextField(blank=True)
    key_takeaways_json = models.TextField(blank=True)

    completed_at = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-week_start_date', '-id']
        constraints = [
            models.UniqueConstraint(fields=['user', 'week_start_date'], name='unique_retro_per_week'),
        ]

    def __str__(self):
        return f"Retro {self.week_start_date:%Y-%m-%d}"

    @property
    def is_completed(self):
        return self.completed_at is not None

    def to_dict(self):
        data = {
            'id': self.id,
            'user_id': self.user_id,
            'week_start_date': iso(self.week_start_date),
            'week_end_date': iso(self.week_end_date),
            'completed_at': iso(self.completed_at),
            'created_at': iso(self.created_at),
            'updated_at': iso(self.updated_at),
        }
        for field in SLIDER_FIELDS:
            data[field] = getattr(self, field)
        for field in TEXT_FIELDS:
            for suffix in ('', '_html', '_json'):
                data[field + suffix] = getattr(self, field + suffix)
        return data
