from django import forms

from apps.core.forms import PayloadForm
from .models import Goal, GoalMilestone


class GoalForm(PayloadForm):
    name = forms.CharField(max_length=200)
    description = forms.CharField(required=False)
    description_html = forms.CharField(required=False, strip=False)
    description_json = forms.CharField(required=False, strip=False)
    target_date = forms.DateField(required=False)
    status = forms.ChoiceField(choices=Goal.Status.choices, required=False)

    def clean_name(self):
        # PATCH bez nazwy: nazwa zostaje bez zmian
        if 'name' not in self.data:
            return ''
        name = self.cleaned_data['name'].strip()
        if not name:
            raise forms.ValidationError("Goal name cannot be empty")
        return name


class MilestoneForm(PayloadForm):
    name = forms.CharField(max_length=200)
    description = forms.CharField(required=False)
    description_html = forms.CharField(required=False, strip=False)
    description_json = forms.CharField(required=False, strip=False)
    target_date = forms.DateField(required=False)
    status = forms.ChoiceField(choices=GoalMilestone.Status.choices, required=False)
    order = forms.IntegerField(min_value=0, required=False)

    def clean_name(self):
        if 'name' not in self.data:
            return ''
        name = self.cleaned_data['name'].strip()
        if not name:
            raise forms.ValidationError("Milestone name cannot be empty")
        return name


class ReorderForm(forms.Form):
    ids = forms.JSONField(required=False)

    def clean_ids(self):
        ids = self.cleaned_data['ids']
        if ids is None:
            return []
        if not isinstance(ids, list) or not all(isinstance(i, int) for i in ids):
            raise forms.ValidationError("ids must be a list of integers")
        return ids
