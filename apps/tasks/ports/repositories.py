# apps/tasks/ports/repositories.py
from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from apps.tasks.domain.entities import TaskEntity, TaskStatus


class ITaskRepository(ABC):
    @abstractmethod
    def get_by_id(self, task_id: int) -> Optional[TaskEntity]:
        pass

    @abstractmethod
    def save(self, task: TaskEntity) -> TaskEntity:
        """Zapisuje (tworzy lub aktualizuje) zadanie i zwraca zaktualizowaną encję (np. z ID)."""
        pass

    @abstractmethod
    def delete(self, task_id: int) -> None:
        pass

    @abstractmethod
    def list_for_user(self, user_id: int, status: Optional[TaskStatus] = None, title: str = "",
                      due_after: Optional[datetime] = None,
                      due_before: Optional[datetime] = None) -> List[TaskEntity]:
        """Zadania użytkownika, najnowsze pierwsze (title: fragment tytułu)."""
        pass

    @abstractmethod
    def in_date_range(self, user_id: int, start: datetime, end: datetime) -> List[TaskEntity]:
        """Zadania z terminem albo ukończeniem w przedziale [start, end]."""
        pass
