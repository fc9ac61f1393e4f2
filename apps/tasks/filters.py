import django_filters
from .models import Task

class TaskFilter(django_filters.FilterSet):
    title = django_filters.CharFilter(lookup_expr='icontains', label="Title contains")
    status = django_filters.ChoiceFilter(choices=Task.Status.choices, label="Status")
    due_before = django_filters.IsoDateTimeFilter(field_name='due_date', lookup_expr='lte')
    due_after = django_filters.IsoDateTimeFilter(field_name='due_date', lookup_expr='gte')

    class Meta:
        model = Task
        fields = ['status']
