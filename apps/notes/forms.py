from django import forms

from apps.core.forms import PayloadForm


class NoteForm(PayloadForm):
    title = forms.CharField(max_length=200)
    content = forms.CharField(required=False)
    content_html = forms.CharField(required=False, strip=False)
    content_json = forms.CharField(required=False, strip=False)
