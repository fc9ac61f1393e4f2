# apps/retros/views.py
from django.contrib.auth.decorators import login_required
from django.http import HttpResponse, JsonResponse
from django.views.decorators.http import require_http_methods

from apps.core.api import as_list, json_api, load_json, validated
from .domain.services import RetroService
from .forms import RetroForm, RetroUpdateForm, WeekForm


@require_http_methods(["GET", "POST"])
@login_required
@json_api
def retro_list_view(request):
    service = RetroService()

    if request.method == "POST":
        form = validated(RetroForm(load_json(request)))
        retro = service.create_retro(request.user, **form.changes())
        return JsonResponse(retro.to_dict(), status=201)

    return as_list(service.list_retros(request.user))


@require_http_methods(["GET", "PATCH", "DELETE"])
@login_required
@json_api
def retro_detail_view(request, pk):
    service = RetroService()

    if request.method == "PATCH":
        form = validated(RetroUpdateForm(load_json(request), partial=True))
        retro = service.update_retro(request.user, pk, **form.changes())
        return JsonResponse(retro.to_dict())

    if request.method == "DELETE":
        service.delete_retro(request.user, pk)
        return HttpResponse(status=204)

    return JsonResponse(service.get_retro(request.user, pk).to_dict())


@require_http_methods(["GET"])
@login_required
def current_retro_view(request):
    retro = RetroService().get_current_week_retro(request.user)
    return JsonResponse(retro.to_dict() if retro else None, safe=False)


@require_http_methods(["GET"])
@login_required
@json_api
def retro_by_week_view(request):
    week = validated(WeekForm(request.GET)).cleaned_data['week_start_date']
    retro = RetroService().get_retro_by_week(request.user, week)
    return JsonResponse(retro.to_dict() if retro else None, safe=False)


@require_http_methods(["GET"])
@login_required
def current_week_info_view(request):
    return JsonResponse(RetroService().get_current_week_info(request.user))
