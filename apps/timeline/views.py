# apps/timeline/views.py
from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from apps.core.api import as_list, json_api, load_json, positive_limit, validated
from .domain.services import TimelineService
from .filters import TimelineEventFilter
from .forms import GoalEventForm, TimelineEventForm, UserGoalUpdateForm
from .models import TimelineEvent


@require_http_methods(["GET", "POST"])
@login_required
@json_api
def event_list_view(request):
    """GET: zdarzenia użytkownika (filtr event_type), POST: nowe zdarzenie."""
    service = TimelineService()

    if request.method == "POST":
        form = validated(TimelineEventForm(load_json(request)))
        event = service.create_event(request.user, **form.changes())
        return JsonResponse(event.to_dict(), status=201)

    f = TimelineEventFilter(request.GET, queryset=TimelineEvent.objects.all())
    if not f.is_valid():
        raise ValueError("Invalid filter")
    return as_list(service.user_events(request.user, limit=positive_limit(request), queryset=f.qs))


@require_http_methods(["GET", "POST"])
@login_required
@json_api
def goal_event_list_view(request, goal_pk):
    service = TimelineService()

    if request.method == "POST":
        form = validated(GoalEventForm(load_json(request)))
        event = service.create_goal_event(request.user, goal_pk, **form.changes())
        return JsonResponse(event.to_dict(), status=201)

    return as_list(service.goal_events(request.user, goal_pk, limit=positive_limit(request)))


@require_http_methods(["POST"])
@login_required
@json_api
def user_goal_update_view(request, goal_pk):
    form = validated(UserGoalUpdateForm(load_json(request)))
    event = TimelineService().create_user_goal_update(request.user, goal_pk, **form.changes())
    return JsonResponse(event.to_dict(), status=201)
