# apps/timeline/forms.py
from django import forms

from apps.core.forms import PayloadForm
from apps.timeline.models import CONTENT_TYPE_MODELS, GOAL_EVENT_TYPES, TimelineEvent


class TimelineEventForm(PayloadForm):
    event_type = forms.ChoiceField(choices=TimelineEvent.EventType.choices)
    content_type = forms.ChoiceField(choices=[(k, k) for k in CONTENT_TYPE_MODELS], required=False)
    content_id = forms.CharField(max_length=50, required=False)
    title = forms.CharField(max_length=300, required=False)
    description = forms.CharField(required=False)
    previous_value = forms.CharField(max_length=200, required=False)
    new_value = forms.CharField(max_length=200, required=False)


class GoalEventForm(PayloadForm):
    event_type = forms.ChoiceField(choices=[(t.value, t.label) for t in GOAL_EVENT_TYPES])
    title = forms.CharField(max_length=300, required=False)
    description = forms.CharField(required=False)
    previous_value = forms.CharField(max_length=200, required=False)
    new_value = forms.CharField(max_length=200, required=False)


class UserGoalUpdateForm(PayloadForm):
    title = forms.CharField(max_length=300)
    description = forms.CharField(required=False)
    previous_value = forms.CharField(max_length=200, required=False)
    new_value = forms.CharField(max_length=200, required=False)
