# apps/core/models.py
from django.db import models
from django.contrib.auth.models import User
from django.db.models.signals import post_save
from django.dispatch import receiver


def iso(value):
    """Data/datetime -> ISO-8601 (None zostaje None)."""
    return value.isoformat() if value is not None else None


class AmPm(models.TextChoices):
    AM = 'AM', 'AM'
    PM = 'PM', 'PM'


class Weekday(models.TextChoices):
    MONDAY = 'monday', 'Monday'
    TUESDAY = 'tuesday', 'Tuesday'
    WEDNESDAY = 'wednesday', 'Wednesday'
    THURSDAY = 'thursday', 'Thursday'
    FRIDAY = 'friday', 'Friday'
    SATURDAY = 'saturday', 'Saturday'
    SUNDAY = 'sunday', 'Sunday'


class UserProfile(models.Model):
    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='profile')

    # Dane z dostawcy tożsamości
    name = models.CharField(max_length=200, blank=True)
    email = models.EmailField(blank=True)
    picture_url = models.URLField(max_length=500, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"Profile of {self.user.username}"

    def to_dict(self):
        return {
            'id': self.id,
            'user_id': self.user_id,
            'name': self.name,
            'email': self.email,
            'picture_url': self.picture_url,
            'created_at': iso(self.created_at),
            'updated_at': iso(self.updated_at),
        }


class AccountSettings(models.Model):
    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='account_settings')

    clerk_email = models.EmailField(blank=True)
    notifications_email = models.EmailField(blank=True)
    onboarding_completed = models.BooleanField(default=False)

    # Przypomnienie tygodniowe (godzina w formacie 24h, czas lokalny użytkownika)
    weekly_reminder = models.BooleanField(default=False)
    weekly_reminder_day = models.CharField(max_length=10, choices=Weekday.choices, default=Weekday.FRIDAY)
    weekly_reminder_hour = models.PositiveSmallIntegerField(default=16)
    weekly_reminder_minute = models.PositiveSmallIntegerField(default=0)
    weekly_reminder_time_zone = models.CharField(max_length=64, default='UTC')
    next_weekly_reminder_utc = models.DateTimeField(null=True, blank=True, db_index=True)
    email_notifications_disabled = models.BooleanField(default=False)

    # Domyślny plan pracy (12h)
    work_hours = models.PositiveSmallIntegerField(null=True, blank=True)
    work_minutes = models.PositiveSmallIntegerField(null=True, blank=True)
    work_start_hour = models.PositiveSmallIntegerField(null=True, blank=True)
    work_start_minute = models.PositiveSmallIntegerField(null=True, blank=True)
    work_start_am_pm = models.CharField(max_length=2, choices=AmPm.choices, blank=True)
    work_end_hour = models.PositiveSmallIntegerField(null=True, blank=True)
    work_end_minute = models.PositiveSmallIntegerField(null=True, blank=True)
    work_end_am_pm = models.CharField(max_length=2, choices=AmPm.choices, blank=True)
    default_work_from_home = models.BooleanField(default=False)
    break_hours = models.PositiveSmallIntegerField(null=True, blank=True)
    break_minutes = models.PositiveSmallIntegerField(null=True, blank=True)

    # Lista pracodawców: [{"employer_name": ..., "start_year": ..., ...}]
    employers = models.JSONField(default=list, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        verbose_name = 'account settings'
        verbose_name_plural = 'account settings'

    def __str__(self):
        return f"Settings of {self.user.username}"

    @property
    def reminder_address(self):
        return self.notifications_email or self.clerk_email

    def reminder_preferences(self):
        return {
            'weekly_reminder': self.weekly_reminder,
            'weekly_reminder_day': self.weekly_reminder_day,
            'weekly_reminder_hour': self.weekly_reminder_hour,
            'weekly_reminder_minute': self.weekly_reminder_minute,
            'weekly_reminder_time_zone': self.weekly_reminder_time_zone,
            'next_weekly_reminder_utc': iso(self.next_weekly_reminder_utc),
            'email_notifications_disabled': self.email_notifications_disabled,
        }

    def to_dict(self):
        data = {
            'id': self.id,
            'user_id': self.user_id,
            'clerk_email': self.clerk_email,
            'notifications_email': self.notifications_email,
            'onboarding_completed': self.onboarding_completed,
        }
        data.update(self.reminder_preferences())
        data.update({
            'work_hours': self.work_hours,
            'work_minutes': self.work_minutes,
            'work_start_hour': self.work_start_hour,
            'work_start_minute': self.work_start_minute,
            'work_start_am_pm': self.work_start_am_pm,
            'work_end_hour': self.work_end_hour,
            'work_end_minute': self.work_end_minute,
            'work_end_am_pm': self.work_end_am_pm,
            'default_work_from_home': self.default_work_from_home,
            'break_hours': self.break_hours,
            'break_minutes': self.break_minutes,
            'employers': self.employers,
            'created_at': iso(self.created_at),
            'updated_at': iso(self.updated_at),
        })
        return data


# Sygnał: Twórz profil automatycznie przy tworzeniu Usera
@receiver(post_save, sender=User)
def create_user_profile(sender, instance, created, **kwargs):
    if created:
        UserProfile.objects.create(user=instance, email=instance.email or '')
