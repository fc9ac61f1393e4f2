from django import forms

from apps.core.forms import PayloadForm


class RetroForm(PayloadForm):
    not_null = ('general_feelings', 'work_relationships', 'professional_growth',
                'productivity', 'personal_wellbeing', 'mark_as_completed')

    week_start_date = forms.DateField(required=False)

    general_feelings = forms.IntegerField()
    work_relationships = forms.IntegerField()
    professional_growth = forms.IntegerField()
    productivity = forms.IntegerField()
    personal_wellbeing = forms.IntegerField()

    positive_outcomes = forms.CharField(required=False)
    positive_outcomes_html = forms.CharField(required=False, strip=False)
    positive_outcomes_json = forms.CharField(required=False, strip=False)
    negative_outcomes = forms.CharField(required=False)
    negative_outcomes_html = forms.CharField(required=False, strip=False)
    negative_outcomes_json = forms.CharField(required=False, strip=False)
    key_takeaways = forms.CharField(required=False)
    key_takeaways_html = forms.CharField(required=False, strip=False)
    key_takeaways_json = forms.CharField(required=False, strip=False)

    mark_as_completed = forms.BooleanField(required=False)

    def clean_week_start_date(self):
        day = self.cleaned_data.get('week_start_date')
        if day is not None and day.weekday() != 0:
            raise forms.ValidationError("Week must start on a Monday")
        return day


class RetroUpdateForm(RetroForm):
    """Tydzień retro nie jest zmieniany."""

    week_start_date = None


class WeekForm(forms.Form):
    week_start_date = forms.DateField()
