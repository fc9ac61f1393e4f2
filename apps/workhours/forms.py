from django import forms

from apps.core.forms import PayloadForm
from apps.core.models import AmPm
from .models import WorkHourEntry


class WorkHourEntryForm(PayloadForm):
    date = forms.DateField()

    work_start_hour = forms.IntegerField(min_value=1, max_value=12, required=False)
    work_start_minute = forms.IntegerField(min_value=0, max_value=59, required=False)
    work_start_am_pm = forms.ChoiceField(choices=AmPm.choices, required=False)
    work_end_hour = forms.IntegerField(min_value=1, max_value=12, required=False)
    work_end_minute = forms.IntegerField(min_value=0, max_value=59, required=False)
    work_end_am_pm = forms.ChoiceField(choices=AmPm.choices, required=False)

    work_home_start_hour = forms.IntegerField(min_value=1, max_value=12, required=False)
    work_home_start_minute = forms.IntegerField(min_value=0, max_value=59, required=False)
    work_home_start_am_pm = forms.ChoiceField(choices=AmPm.choices, required=False)
    work_home_end_hour = forms.IntegerField(min_value=1, max_value=12, required=False)
    work_home_end_minute = forms.IntegerField(min_value=0, max_value=59, required=False)
    work_home_end_am_pm = forms.ChoiceField(choices=AmPm.choices, required=False)

    work_office_start_hour = forms.IntegerField(min_value=1, max_value=12, required=False)
    work_office_start_minute = forms.IntegerField(min_value=0, max_value=59, required=False)
    work_office_start_am_pm = forms.ChoiceField(choices=AmPm.choices, required=False)
    work_office_end_hour = forms.IntegerField(min_value=1, max_value=12, required=False)
    work_office_end_minute = forms.IntegerField(min_value=0, max_value=59, required=False)
    work_office_end_am_pm = forms.ChoiceField(choices=AmPm.choices, required=False)

    work_location = forms.ChoiceField(choices=WorkHourEntry.Location.choices, required=False)
    break_hours = forms.IntegerField(min_value=0, max_value=24, required=False)
    break_minutes = forms.IntegerField(min_value=0, max_value=59, required=False)
    work_from_home = forms.NullBooleanField(required=False)
    notes = forms.CharField(required=False)


class DateRangeForm(forms.Form):
    start = forms.DateField()
    end = forms.DateField()

    def clean(self):
        cleaned = super().clean()
        start, end = cleaned.get('start'), cleaned.get('end')
        if start and end and start > end:
            raise forms.ValidationError("Start date must not be after end date")
        return cleaned


class DayForm(forms.Form):
    date = forms.DateField()
