"""Zadania: encja, przypadek użycia, serwis i API."""
from datetime import datetime

import pytest
import pytz

from apps.tasks.adapters.orm_repositories import DjangoTaskRepository
from apps.tasks.application.use_cases import CreateTaskInput, CreateTaskUseCase
from apps.tasks.domain.entities import TaskEntity, TaskStatus
from apps.tasks.domain.services import TaskService
from apps.tasks.models import Task
from tests.conftest import send

NOW = pytz.UTC.localize(datetime(2024, 1, 10, 12, 0))


class TestTaskEntity:

    def test_completing_sets_completion_date(self):
        task = TaskEntity(id=None, user_id=1, title="Write report")
        task.set_status(TaskStatus.COMPLETED, NOW)
        assert task.completion_date == NOW
        assert not task.is_open()

    def test_reopening_clears_completion_date(self):
        task = TaskEntity(id=None, user_id=1, title="Write report",
                          status=TaskStatus.COMPLETED, completion_date=NOW)
        task.set_status(TaskStatus.IN_PROGRESS, NOW)
        assert task.completion_date is None
        assert task.is_open()

    def test_in_range(self):
        task = TaskEntity(id=None, user_id=1, title="Call", due_date=NOW)
        start = pytz.UTC.localize(datetime(2024, 1, 8))
        end = pytz.UTC.localize(datetime(2024, 1, 14))
        assert task.in_range(start, end)
        assert not task.in_range(end, end)


@pytest.mark.django_db
class TestTaskService:

    @pytest.fixture
    def service(self):
        return TaskService(DjangoTaskRepository())

    @pytest.fixture
    def task(self, user):
        use_case = CreateTaskUseCase(repository=DjangoTaskRepository())
        return use_case.execute(CreateTaskInput(title="  Plan sprint  ", user_id=user.id))

    def test_use_case_trims_title(self, task):
        assert task.title == "Plan sprint"
        assert task.status == TaskStatus.PENDING

    def test_use_case_rejects_blank_title(self, user):
        use_case = CreateTaskUseCase(repository=DjangoTaskRepository())
        with pytest.raises(ValueError):
            use_case.execute(CreateTaskInput(title="   ", user_id=user.id))

    def test_explicit_completion_date_wins(self, service, user, task):
        updated = service.update_task(user.id, task.id, status='completed', completion_date=NOW)
        assert updated.completion_date == NOW

    def test_complete_task(self, service, user, task):
        done = service.complete_task(user.id, task.id)
        assert done.status == TaskStatus.COMPLETED
        assert done.completion_date is not None

    def test_foreign_task(self, service, other_user, task):
        from django.core.exceptions import PermissionDenied

        with pytest.raises(PermissionDenied):
            service.get_task(other_user.id, task.id)

    def test_list_tasks_filters(self, service, user, task):
        Task.objects.create(user=user, title="Ship release", due_date=NOW)

        assert [t.title for t in service.list_tasks(user.id, title="ship")] == ["Ship release"]
        assert [t.title for t in service.list_tasks(user.id, due_after=NOW)] == ["Ship release"]
        assert len(service.list_tasks(user.id)) == 2

    def test_list_tasks_rejects_reversed_dates(self, service, user):
        with pytest.raises(ValueError):
            service.list_tasks(user.id, due_after=NOW, due_before=pytz.UTC.localize(datetime(2024, 1, 1)))

    def test_range_rejects_reversed_dates(self, service, user):
        with pytest.raises(ValueError):
            service.tasks_in_range(user.id, NOW, pytz.UTC.localize(datetime(2024, 1, 1)))


@pytest.mark.django_db
class TestTaskApi:

    def test_create_and_filter_by_status(self, api):
        send(api, 'post', '/api/tasks/', {'title': "Email Bob"})
        created = send(api, 'post', '/api/tasks/', {'title': "Review PR", 'status': 'in_progress'})
        assert created.status_code == 201

        in_progress = api.get('/api/tasks/', {'status': 'in_progress'}).json()
        assert [t['title'] for t in in_progress] == ["Review PR"]

    def test_filter_by_title_and_due_dates(self, api, user):
        Task.objects.create(user=user, title="Write report",
                            due_date=pytz.UTC.localize(datetime(2024, 1, 10, 9, 0)))
        Task.objects.create(user=user, title="Report review",
                            due_date=pytz.UTC.localize(datetime(2024, 2, 1, 9, 0)))
        Task.objects.create(user=user, title="Groceries")

        by_title = api.get('/api/tasks/', {'title': 'report'}).json()
        in_january = api.get('/api/tasks/', {
            'due_after': '2024-01-01T00:00:00Z',
            'due_before': '2024-01-31T23:59:59Z',
        }).json()

        assert sorted(t['title'] for t in by_title) == ["Report review", "Write report"]
        assert [t['title'] for t in in_january] == ["Write report"]

    def test_filter_reversed_dates(self, api):
        response = api.get('/api/tasks/', {
            'due_after': '2024-02-01T00:00:00Z',
            'due_before': '2024-01-01T00:00:00Z',
        })
        assert response.status_code == 400

    def test_list_only_own_tasks(self, api, other_user):
        Task.objects.create(user=other_user, title="Not yours")
        assert api.get('/api/tasks/').json() == []

    def test_patch_to_completed_and_back(self, api, user):
        task_id = send(api, 'post', '/api/tasks/', {'title': "Deploy"}).json()['id']

        done = send(api, 'patch', f'/api/tasks/{task_id}/', {'status': 'completed'}).json()
        assert done['completion_date'] is not None

        reopened = send(api, 'patch', f'/api/tasks/{task_id}/', {'status': 'pending'}).json()
        assert reopened['completion_date'] is None

    def test_complete_endpoint(self, api):
        task_id = send(api, 'post', '/api/tasks/', {'title': "Deploy"}).json()['id']

        response = send(api, 'post', f'/api/tasks/{task_id}/complete/', {})

        assert response.json()['status'] == 'completed'

    def test_range_with_date_only_end(self, api, user):
        Task.objects.create(user=user, title="Friday evening",
                            due_date=pytz.UTC.localize(datetime(2024, 1, 12, 22, 0)))

        tasks = api.get('/api/tasks/range/', {'start': '2024-01-08', 'end': '2024-01-12'}).json()

        assert [t['title'] for t in tasks] == ["Friday evening"]

    def test_delete(self, api):
        task_id = send(api, 'post', '/api/tasks/', {'title': "Temporary"}).json()['id']
        assert api.delete(f'/api/tasks/{task_id}/').status_code == 204
        assert api.get(f'/api/tasks/{task_id}/').status_code == 404
