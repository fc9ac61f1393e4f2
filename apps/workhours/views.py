# apps/workhours/views.py
from django.contrib.auth.decorators import login_required
from django.http import HttpResponse, JsonResponse
from django.views.decorators.http import require_http_methods

from apps.core.api import as_list, json_api, load_json, validated
from .domain.services import WorkHourService
from .forms import DateRangeForm, DayForm, WorkHourEntryForm


@require_http_methods(["GET", "POST"])
@login_required
@json_api
def work_hour_list_view(request):
    """GET ?start=&end=: wpisy z zakresu, POST: utworzenie albo nadpisanie wpisu dnia."""
    service = WorkHourService()

    if request.method == "POST":
        form = validated(WorkHourEntryForm(load_json(request)))
        values = form.changes()
        entry = service.upsert_work_hour_entry(request.user, values.pop('date'), **values)
        return JsonResponse(entry.to_dict())

    dates = validated(DateRangeForm(request.GET)).cleaned_data
    return as_list(service.get_work_hours_by_date_range(request.user, dates['start'], dates['end']))


@require_http_methods(["GET"])
@login_required
@json_api
def work_hour_day_view(request):
    day = validated(DayForm(request.GET)).cleaned_data['date']
    entry = WorkHourService().get_work_hour_by_date(request.user, day)
    return JsonResponse(entry.to_dict() if entry else None, safe=False)


@require_http_methods(["DELETE"])
@login_required
@json_api
def work_hour_detail_view(request, pk):
    WorkHourService().delete_work_hour_entry(request.user, pk)
    return HttpResponse(status=204)
