from django.contrib import admin
from .models import PerformanceQuestion, PerformanceResponse


@admin.register(PerformanceQuestion)
class PerformanceQuestionAdmin(admin.ModelAdmin):
    list_display = ('title', 'order', 'is_active', 'user')
    list_filter = ('is_active',)
    search_fields = ('title',)


@admin.register(PerformanceResponse)
class PerformanceResponseAdmin(admin.ModelAdmin):
    list_display = ('question', 'week_start_date', 'user')
    list_filter = ('week_start_date',)
