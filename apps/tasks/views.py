# apps/tasks/views.py
from django.contrib.auth.decorators import login_required
from django.http import HttpResponse, JsonResponse
from django.views.decorators.http import require_http_methods

from apps.core.api import json_api, load_json, validated
from .adapters.orm_repositories import DjangoTaskRepository
from .application.use_cases import CreateTaskInput, CreateTaskUseCase
from .domain.services import TaskService
from .filters import TaskFilter
from .forms import CompleteTaskForm, DateRangeForm, TaskForm
from .models import Task, task_to_dict


def _service():
    return TaskService(DjangoTaskRepository())


def _as_json(tasks):
    return JsonResponse([task_to_dict(t) for t in tasks], safe=False)


@require_http_methods(["GET", "POST"])
@login_required
@json_api
def task_list_view(request):
    """GET: lista zadań (filtry: status, title, due_before/after), POST: nowe zadanie."""
    if request.method == "POST":
        form = validated(TaskForm(load_json(request)))
        data = form.changes()

        # 1. Przygotowanie DTO (Data Transfer Object)
        input_dto = CreateTaskInput(
            title=data['title'],
            user_id=request.user.id,
            description=data.get('description', ""),
            due_date=data.get('due_date'),
            status=data.get('status') or Task.Status.PENDING,
        )

        # 2. Złożenie Use Case (Manual Dependency Injection)
        use_case = CreateTaskUseCase(repository=DjangoTaskRepository())

        # 3. Wykonanie logiki biznesowej (ValueError -> 400)
        task = use_case.execute(input_dto)
        return JsonResponse(task_to_dict(task), status=201)

    # TaskFilter tylko parsuje query string, filtrowanie robi repozytorium
    f = TaskFilter(request.GET, queryset=Task.objects.none())
    if not f.is_valid():
        raise ValueError("Invalid filter")
    params = f.form.cleaned_data
    tasks = _service().list_tasks(
        request.user.id,
        status=params.get('status') or None,
        title=params.get('title') or "",
        due_after=params.get('due_after'),
        due_before=params.get('due_before'),
    )
    return _as_json(tasks)


@require_http_methods(["GET", "PATCH", "DELETE"])
@login_required
@json_api
def task_detail_view(request, pk):
    service = _service()

    if request.method == "PATCH":
        form = validated(TaskForm(load_json(request), partial=True))
        task = service.update_task(request.user.id, pk, **form.changes())
        return JsonResponse(task_to_dict(task))

    if request.method == "DELETE":
        service.delete_task(request.user.id, pk)
        return HttpResponse(status=204)

    return JsonResponse(task_to_dict(service.get_task(request.user.id, pk)))


@require_http_methods(["POST"])
@login_required
@json_api
def task_complete_view(request, pk):
    form = validated(CompleteTaskForm(load_json(request)))
    task = _service().complete_task(request.user.id, pk, form.cleaned_data.get('completion_date'))
    return JsonResponse(task_to_dict(task))


@require_http_methods(["GET"])
@login_required
@json_api
def task_range_view(request):
    form = validated(DateRangeForm(request.GET))
    tasks = _service().tasks_in_range(request.user.id, form.cleaned_data['start'], form.cleaned_data['end'])
    return _as_json(tasks)
