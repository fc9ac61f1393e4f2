# apps/timeline/filters.py
import django_filters

from .models import TimelineEvent


class TimelineEventFilter(django_filters.FilterSet):
    event_type = django_filters.MultipleChoiceFilter(
        choices=TimelineEvent.EventType.choices,
        label="Event type",
    )
    since = django_filters.IsoDateTimeFilter(field_name='created_at', lookup_expr='gte')

    class Meta:
        model = TimelineEvent
        fields = ['event_type']
