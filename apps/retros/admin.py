from django.contrib import admin
from .models import Retro


@admin.register(Retro)
class RetroAdmin(admin.ModelAdmin):
    list_display = ('week_start_date', 'user', 'general_feelings', 'productivity', 'completed_at')
    list_filter = ('week_start_date',)
    readonly_fields = ('week_end_date', 'created_at', 'updated_at')
