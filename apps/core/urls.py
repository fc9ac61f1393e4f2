# apps/core/urls.py
from django.urls import path
from . import views

urlpatterns = [
    path('users/', views.user_create_view, name='user_create'),
    path('users/me/', views.current_user_view, name='current_user'),

    path('account-settings/', views.account_settings_view, name='account_settings'),
    path('account-settings/<int:pk>/', views.account_settings_detail_view, name='account_settings_detail'),
    path('account-settings/onboarding/', views.onboarding_status_view, name='onboarding_status'),
    path('account-settings/reminders/', views.reminder_preferences_view, name='reminder_preferences'),
    path('account-settings/notifications/enable/', views.enable_notifications_view, name='enable_notifications'),

    path('reference/', views.reference_data_view, name='reference_data'),
    path('webhooks/email/', views.email_webhook_view, name='email_webhook'),
]
