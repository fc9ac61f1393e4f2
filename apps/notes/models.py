# apps/notes/models.py
from django.db import models
from django.conf import settings

from apps.core.models import iso


class Note(models.Model):
    user = models.ForeignKey(settings.AUTH_USER_MODEL, on_delete=models.CASCADE, related_name='notes')
    title = models.CharField(max_length=200)

    # Treść + lustra edytora
    content = models.TextField(blank=True)
    content_html = models.TextField(blank=True)
    content_json = models.TextField(blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-created_at', '-id']

    def __str__(self):
        return self.title

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'title': self.title,
            'content': self.content,
            'content_html': self.content_html,
            'content_json': self.content_json,
            'created_at': iso(self.created_at),
            'updated_at': iso(self.updated_at),
        }
