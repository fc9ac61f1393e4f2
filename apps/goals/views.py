# apps/goals/views.py
from django.contrib.auth.decorators import login_required
from django.core.exceptions import ValidationError
from django.http import HttpResponse, JsonResponse
from django.views.decorators.http import require_http_methods

from apps.core.api import as_list, json_api, load_json, positive_limit, validated
from .domain.services import GoalService, MilestoneService
from .forms import GoalForm, MilestoneForm, ReorderForm


def _milestone_payloads(raw):
    """Walidacja listy kamieni milowych przysłanej razem z celem."""
    if not isinstance(raw, list):
        raise ValidationError({'milestones': ["Milestones must be a list"]})

    cleaned = []
    for index, item in enumerate(raw):
        form = MilestoneForm(item if isinstance(item, dict) else {})
        if not form.is_valid():
            raise ValidationError({'milestones': [f"Milestone {index + 1}: {form.errors.as_text()}"]})
        cleaned.append(form.changes())
    return cleaned


@require_http_methods(["GET", "POST"])
@login_required
@json_api
def goal_list_view(request):
    """GET: cele (najnowsze pierwsze), POST: nowy cel (opcjonalnie z kamieniami milowymi)."""
    service = GoalService()

    if request.method == "POST":
        payload = load_json(request)
        form = validated(GoalForm(payload))

        if 'milestones' in payload:
            milestones = _milestone_payloads(payload['milestones'])
            goal = service.create_goal_with_milestones(request.user, milestones=milestones, **form.changes())
        else:
            goal = service.create_goal(request.user, **form.changes())
        return JsonResponse(goal.to_dict(), status=201)

    return as_list(service.list_goals(request.user))


@require_http_methods(["GET", "PATCH", "DELETE"])
@login_required
@json_api
def goal_detail_view(request, pk):
    service = GoalService()

    if request.method == "PATCH":
        form = validated(GoalForm(load_json(request), partial=True))
        goal = service.update_goal(request.user, pk, **form.changes())
        return JsonResponse(goal.to_dict())

    if request.method == "DELETE":
        service.delete_goal(request.user, pk)
        return HttpResponse(status=204)

    return JsonResponse(service.get_goal(request.user, pk).to_dict())


@require_http_methods(["GET"])
@login_required
@json_api
def goal_timeline_view(request, pk):
    events = GoalService().get_goal_timeline(request.user, pk, limit=positive_limit(request))
    return as_list(events)


@require_http_methods(["GET", "POST"])
@login_required
@json_api
def goal_milestones_view(request, pk):
    service = MilestoneService()

    if request.method == "POST":
        form = validated(MilestoneForm(load_json(request)))
        milestone = service.create_milestone(request.user, pk, **form.changes())
        return JsonResponse(milestone.to_dict(), status=201)

    return as_list(service.get_goal_milestones(request.user, pk))


@require_http_methods(["POST"])
@login_required
@json_api
def milestone_reorder_view(request, pk):
    form = validated(ReorderForm(load_json(request)))
    milestones = MilestoneService().reorder_milestones(request.user, pk, form.cleaned_data['ids'])
    return as_list(milestones)


@require_http_methods(["GET"])
@login_required
@json_api
def milestone_list_view(request):
    return as_list(MilestoneService().get_user_milestones(request.user))


@require_http_methods(["GET", "PATCH", "DELETE"])
@login_required
@json_api
def milestone_detail_view(request, pk):
    service = MilestoneService()

    if request.method == "PATCH":
        form = validated(MilestoneForm(load_json(request), partial=True))
        milestone = service.update_milestone(request.user, pk, **form.changes())
        return JsonResponse(milestone.to_dict())

    if request.method == "DELETE":
        service.delete_milestone(request.user, pk)
        return HttpResponse(status=204)

    return JsonResponse(service.get_milestone(request.user, pk).to_dict())
