# apps/tasks/domain/services.py
import logging
from datetime import datetime
from typing import List, Optional

from django.core.exceptions import PermissionDenied
from django.http import Http404
from django.utils import timezone

from apps.tasks.domain.entities import TaskEntity, TaskStatus
from apps.tasks.ports.repositories import ITaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    def __init__(self, repository: ITaskRepository):
        self.repository = repository

    def get_task(self, user_id: int, task_id: int) -> TaskEntity:
        task = self.repository.get_by_id(task_id)
        if not task:
            raise Http404("Task not found")
        if task.user_id != user_id:
            raise PermissionDenied("Access denied")
        return task

    def list_tasks(self, user_id: int, status: Optional[TaskStatus] = None, title: str = "",
                   due_after: Optional[datetime] = None,
                   due_before: Optional[datetime] = None) -> List[TaskEntity]:
        if due_after and due_before and due_after > due_before:
            raise ValueError("Start date must not be after end date")
        return self.repository.list_for_user(user_id, status, title, due_after, due_before)

    def update_task(self, user_id: int, task_id: int, **changes) -> TaskEntity:
        """
        Częściowa aktualizacja. Reguły daty ukończenia:
        - przejście na 'completed' ustawia ją, jeśli jej nie było,
        - zejście z 'completed' ją czyści,
        - jawnie podana completion_date zawsze wygrywa.
        """
        task = self.get_task(user_id, task_id)

        if 'title' in changes:
            title = (changes['title'] or "").strip()
            if not title:
                raise ValueError("Task title cannot be empty")
            task.title = title
        if 'description' in changes:
            task.description = (changes['description'] or "").strip()
        if 'due_date' in changes:
            task.due_date = changes['due_date']
        if changes.get('status'):
            task.set_status(changes['status'], timezone.now())
        if 'completion_date' in changes:
            task.completion_date = changes['completion_date']

        return self.repository.save(task)

    def complete_task(self, user_id: int, task_id: int, completion_date: Optional[datetime] = None) -> TaskEntity:
        """Oznacza zadanie jako wykonane (data ukończenia: podana albo teraz)."""
        task = self.get_task(user_id, task_id)
        task.status = TaskStatus.COMPLETED
        task.completion_date = completion_date or timezone.now()
        return self.repository.save(task)

    def delete_task(self, user_id: int, task_id: int) -> None:
        self.get_task(user_id, task_id)
        self.repository.delete(task_id)
        logger.info("Task %s deleted by user %s", task_id, user_id)

    def tasks_in_range(self, user_id: int, start: datetime, end: datetime) -> List[TaskEntity]:
        if start > end:
            raise ValueError("Start date must not be after end date")
        return self.repository.in_date_range(user_id, start, end)
