from django.contrib import admin
from .models import WorkHourEntry


@admin.register(WorkHourEntry)
class WorkHourEntryAdmin(admin.ModelAdmin):
    list_display = ('date', 'user', 'work_hours', 'work_minutes', 'work_location')
    list_filter = ('work_location',)
    date_hierarchy = 'date'
