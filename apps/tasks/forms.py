#apps/tasks/forms.py
from django import forms

from apps.core.forms import PayloadForm
from .models import Task


class TaskForm(PayloadForm):
    title = forms.CharField(max_length=200)
    description = forms.CharField(required=False)
    status = forms.ChoiceField(choices=Task.Status.choices, required=False)
    due_date = forms.DateTimeField(required=False)
    completion_date = forms.DateTimeField(required=False)


class CompleteTaskForm(PayloadForm):
    completion_date = forms.DateTimeField(required=False)


class DateRangeForm(forms.Form):
    start = forms.DateTimeField()
    end = forms.DateTimeField()

    def clean_end(self):
        end = self.cleaned_data['end']
        # Sama data jako koniec przedziału obejmuje cały dzień
        if len(str(self.data.get('end', '')).strip()) == 10:
            end = end.replace(hour=23, minute=59, second=59, microsecond=999999)
        return end
