# apps/core/forms.py
from django import forms

from .domain.timezones import TIMEZONE_CHOICES
from .models import AmPm, Weekday


class PayloadForm(forms.Form):
    """
    Formularz dla ciał JSON. Przy partial=True wymagane są tylko pola
    obecne w danych (PATCH).
    """

    # Pola, dla których null/"" znaczy "brak wartości" (kolumny NOT NULL)
    not_null = ()

    def __init__(self, *args, partial=False, **kwargs):
        super().__init__(*args, **kwargs)
        if partial:
            for name, field in self.fields.items():
                if name not in self.data:
                    field.required = False

    def changes(self):
        """Tylko pola przysłane przez klienta, już oczyszczone."""
        return {
            name: value for name, value in self.cleaned_data.items()
            if name in self.data and not (name in self.not_null and value in (None, ''))
        }


class UserForm(PayloadForm):
    name = forms.CharField(max_length=200, required=False)
    email = forms.EmailField(required=False)
    picture_url = forms.URLField(max_length=500, required=False)


class AccountSettingsForm(PayloadForm):
    not_null = ('weekly_reminder_day', 'weekly_reminder_hour', 'weekly_reminder_minute',
                'weekly_reminder_time_zone')

    clerk_email = forms.EmailField(required=False)
    notifications_email = forms.EmailField(required=False)
    onboarding_completed = forms.BooleanField(required=False)

    weekly_reminder = forms.BooleanField(required=False)
    weekly_reminder_day = forms.ChoiceField(choices=Weekday.choices, required=False)
    weekly_reminder_hour = forms.IntegerField(min_value=0, max_value=23, required=False)
    weekly_reminder_minute = forms.IntegerField(min_value=0, max_value=59, required=False)
    weekly_reminder_time_zone = forms.ChoiceField(choices=TIMEZONE_CHOICES, required=False)
    email_notifications_disabled = forms.BooleanField(required=False)

    work_hours = forms.IntegerField(min_value=0, max_value=24, required=False)
    work_minutes = forms.IntegerField(min_value=0, max_value=59, required=False)
    work_start_hour = forms.IntegerField(min_value=1, max_value=12, required=False)
    work_start_minute = forms.IntegerField(min_value=0, max_value=59, required=False)
    work_start_am_pm = forms.ChoiceField(choices=AmPm.choices, required=False)
    work_end_hour = forms.IntegerField(min_value=1, max_value=12, required=False)
    work_end_minute = forms.IntegerField(min_value=0, max_value=59, required=False)
    work_end_am_pm = forms.ChoiceField(choices=AmPm.choices, required=False)
    default_work_from_home = forms.BooleanField(required=False)
    break_hours = forms.IntegerField(min_value=0, max_value=24, required=False)
    break_minutes = forms.IntegerField(min_value=0, max_value=59, required=False)

    employers = forms.JSONField(required=False)

    def clean_employers(self):
        employers = self.cleaned_data.get('employers')
        if employers in (None, ''):
            return []
        if not isinstance(employers, list):
            raise forms.ValidationError("Employers must be a list")
        for employer in employers:
            if not isinstance(employer, dict) or not str(employer.get('employer_name', '')).strip():
                raise forms.ValidationError("Each employer needs an employer_name")
        return employers
