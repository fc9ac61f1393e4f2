# apps/performance/models.py
from django.db import models
from django.conf import settings

from apps.core.models import iso


class PerformanceQuestion(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='performance_questions')
    title = models.CharField(max_length=300)

    description = models.TextField(blank=True)
    description_html = models.TextField(blank=True)
    description_json = models.TextField(blank=True)

    order = models.PositiveIntegerField(default=1)
    # Pytanie z odpowiedziami nie jest usuwane, tylko wyłączane
    is_active = models.BooleanField(default=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['order', 'id']

    def __str__(self):
        return self.title

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'title': self.title,
            'description': self.description,
            'description_html': self.description_html,
            'description_json': self.description_json,
            'order': self.order,
            'is_active': self.is_active,
            'created_at': iso(self.created_at),
            'updated_at': iso(self.updated_at),
        }


class PerformanceResponse(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='performance_responses')
    question = models.ForeignKey(PerformanceQuestion, on_delete=models.CASCADE, related_name='responses')

    # Poniedziałek tygodnia, którego dotyczy odpowiedź
    week_start_date = models.DateField(db_index=True)

    response = models.TextField(blank=True)
    response_html = models.TextField(blank=True)
    response_json = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return f"{self.question.title} ({self.week_start_date})"

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'question_id': self.question_id,
            'week_start_date': iso(self.week_start_date),
            'response': self.response,
            'response_html': self.response_html,
            'response_json': self.response_json,
            'created_at': iso(self.created_at),
            'updated_at': iso(self.updated_at),
        }
