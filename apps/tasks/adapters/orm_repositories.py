# apps/tasks/adapters/orm_repositories.py
from datetime import datetime
from typing import List, Optional

from django.db.models import Q

from apps.tasks.domain.entities import TaskEntity, TaskStatus
from apps.tasks.ports.repositories import ITaskRepository
from apps.tasks.models import Task as TaskModel


class DjangoTaskRepository(ITaskRepository):
    def to_entity(self, model: TaskModel) -> TaskEntity:
        """Konwertuje Model Django -> Czystą Encję."""
        return TaskEntity(
            id=model.id,
            user_id=model.user_id,
            title=model.title,
            description=model.description,
            status=TaskStatus(model.status),
            due_date=model.due_date,
            completion_date=model.completion_date,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def get_by_id(self, task_id: int) -> Optional[TaskEntity]:
        try:
            task = TaskModel.objects.get(id=task_id)
            return self.to_entity(task)
        except TaskModel.DoesNotExist:
            return None

    def save(self, task: TaskEntity) -> TaskEntity:
        data = {
            'title': task.title,
            'description': task.description,
            'status': task.status.value,
            'due_date': task.due_date,
            'completion_date': task.completion_date,
        }

        if task.id:
            model = TaskModel.objects.get(id=task.id)
            for field, value in data.items():
                setattr(model, field, value)
            model.save()
        else:
            model = TaskModel.objects.create(user_id=task.user_id, **data)

        return self.to_entity(model)

    def delete(self, task_id: int) -> None:
        TaskModel.objects.filter(id=task_id).delete()

    def list_for_user(self, user_id: int, status: Optional[TaskStatus] = None, title: str = "",
                      due_after: Optional[datetime] = None,
                      due_before: Optional[datetime] = None) -> List[TaskEntity]:
        qs = TaskModel.objects.filter(user_id=user_id)
        if status:
            qs = qs.filter(status=TaskStatus(status).value)
        if title:
            qs = qs.filter(title__icontains=title)
        if due_after:
            qs = qs.filter(due_date__gte=due_after)
        if due_before:
            qs = qs.filter(due_date__lte=due_before)
        return [self.to_entity(t) for t in qs.order_by('-created_at', '-id')]

    def in_date_range(self, user_id: int, start: datetime, end: datetime) -> List[TaskEntity]:
        qs = TaskModel.objects.filter(user_id=user_id).filter(
            Q(due_date__range=(start, end)) | Q(completion_date__range=(start, end))
        )
        return [self.to_entity(t) for t in qs.order_by('-created_at', '-id')]
