# apps/performance/views.py
from django.contrib.auth.decorators import login_required
from django.http import HttpResponse, JsonResponse
from django.views.decorators.http import require_http_methods

from apps.core.api import as_list, json_api, load_json, validated
from apps.goals.forms import ReorderForm
from .domain.services import QuestionService, ResponseService
from .forms import QuestionForm, ResponseFilterForm, ResponseForm, ResponseUpdateForm


# ---------------------------------------------------------------------------
# Pytania
# ---------------------------------------------------------------------------

@require_http_methods(["GET", "POST"])
@login_required
@json_api
def question_list_view(request):
    service = QuestionService()

    if request.method == "POST":
        form = validated(QuestionForm(load_json(request)))
        question = service.create_question(request.user, **form.changes())
        return JsonResponse(question.to_dict(), status=201)

    include_inactive = request.GET.get('include_inactive') in ('1', 'true', 'yes')
    return as_list(service.list_questions(request.user, include_inactive=include_inactive))


@require_http_methods(["GET", "PATCH", "DELETE"])
@login_required
@json_api
def question_detail_view(request, pk):
    service = QuestionService()

    if request.method == "PATCH":
        form = validated(QuestionForm(load_json(request), partial=True))
        question = service.update_question(request.user, pk, **form.changes())
        return JsonResponse(question.to_dict())

    if request.method == "DELETE":
        return JsonResponse(service.delete_question(request.user, pk))

    return JsonResponse(service.get_question(request.user, pk).to_dict())


@require_http_methods(["GET"])
@login_required
def disabled_questions_view(request):
    return as_list(QuestionService().get_disabled_questions(request.user))


@require_http_methods(["POST"])
@login_required
@json_api
def question_reorder_view(request):
    form = validated(ReorderForm(load_json(request)))
    return as_list(QuestionService().reorder_questions(request.user, form.cleaned_data['ids']))


# ---------------------------------------------------------------------------
# Odpowiedzi
# ---------------------------------------------------------------------------

@require_http_methods(["GET", "POST"])
@login_required
@json_api
def response_list_view(request):
    service = ResponseService()

    if request.method == "POST":
        form = validated(ResponseForm(load_json(request)))
        response = service.create_response(request.user, **form.changes())
        return JsonResponse(response.to_dict(), status=201)

    filters = validated(ResponseFilterForm(request.GET)).cleaned_data
    responses = service.list_responses(
        request.user,
        question_id=filters.get('question_id'),
        week_start_date=filters.get('week_start_date'),
    )
    return as_list(responses)


@require_http_methods(["GET", "PATCH", "DELETE"])
@login_required
@json_api
def response_detail_view(request, pk):
    service = ResponseService()

    if request.method == "PATCH":
        form = validated(ResponseUpdateForm(load_json(request), partial=True))
        response = service.update_response(request.user, pk, **form.changes())
        return JsonResponse(response.to_dict())

    if request.method == "DELETE":
        service.delete_response(request.user, pk)
        return HttpResponse(status=204)

    return JsonResponse(service.get_response(request.user, pk).to_dict())


@require_http_methods(["GET"])
@login_required
@json_api
def weekly_responses_view(request):
    filters = validated(ResponseFilterForm(request.GET)).cleaned_data
    data = ResponseService().get_weekly_responses(request.user, filters.get('week_start_date'))
    return JsonResponse({
        'week_start_date': data['week_start_date'].isoformat(),
        'responses': [r.to_dict() for r in data['responses']],
        'questions': [q.to_dict() for q in data['questions']],
    })


@require_http_methods(["GET"])
@login_required
def current_week_view(request):
    return JsonResponse(ResponseService().get_current_week_info(request.user))


@require_http_methods(["GET"])
@login_required
@json_api
def response_history_view(request, question_pk):
    filters = validated(ResponseFilterForm(request.GET)).cleaned_data
    history = ResponseService().get_response_history(request.user, question_pk, limit=filters.get('limit'))
    return as_list(history)
