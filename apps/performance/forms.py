from django import forms

from apps.core.forms import PayloadForm


class QuestionForm(PayloadForm):
    not_null = ('order', 'is_active')

    title = forms.CharField(max_length=300)
    description = forms.CharField(required=False)
    description_html = forms.CharField(required=False, strip=False)
    description_json = forms.CharField(required=False, strip=False)
    order = forms.IntegerField(min_value=0, required=False)
    is_active = forms.NullBooleanField(required=False)


class ResponseForm(PayloadForm):
    question_id = forms.IntegerField()
    response = forms.CharField(required=False)
    response_html = forms.CharField(required=False, strip=False)
    response_json = forms.CharField(required=False, strip=False)
    week_start_date = forms.DateField(required=False)


class ResponseUpdateForm(PayloadForm):
    response = forms.CharField(required=False)
    response_html = forms.CharField(required=False, strip=False)
    response_json = forms.CharField(required=False, strip=False)


class ResponseFilterForm(forms.Form):
    question_id = forms.IntegerField(required=False)
    week_start_date = forms.DateField(required=False)
    limit = forms.IntegerField(min_value=1, required=False)
