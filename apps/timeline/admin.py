from django.contrib import admin
from .models import TimelineEvent


# Dziennik jest tylko do odczytu
@admin.register(TimelineEvent)
class TimelineEventAdmin(admin.ModelAdmin):
    list_display = ('event_type', 'title', 'user', 'created_at')
    list_filter = ('event_type',)
    search_fields = ('title', 'description')
    readonly_fields = [f.name for f in TimelineEvent._meta.fields]

    def has_change_permission(self, request, obj=None):
        return False
