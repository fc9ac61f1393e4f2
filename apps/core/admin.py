from django.contrib import admin
from .models import AccountSettings, UserProfile


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    list_display = ('user', 'name', 'email', 'created_at')
    search_fields = ('user__username', 'name', 'email')


@admin.register(AccountSettings)
class AccountSettingsAdmin(admin.ModelAdmin):
    list_display = ('user', 'onboarding_completed', 'weekly_reminder', 'weekly_reminder_day',
                    'next_weekly_reminder_utc', 'email_notifications_disabled')
    list_filter = ('onboarding_completed', 'weekly_reminder', 'email_notifications_disabled')
    search_fields = ('user__username', 'clerk_email', 'notifications_email')
    readonly_fields = ('next_weekly_reminder_utc',)
