# apps/tasks/domain/entities.py
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from enum import Enum


class TaskStatus(str, Enum):
    PENDING = 'pending'
    IN_PROGRESS = 'in_progress'
    COMPLETED = 'completed'
    CANCELLED = 'cancelled'


@dataclass
class TaskEntity:
    id: Optional[int]  # ID może być None przed zapisem
    user_id: int
    title: str
    description: str = ""
    status: TaskStatus = TaskStatus.PENDING

    # Czas
    due_date: Optional[datetime] = None
    completion_date: Optional[datetime] = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def is_open(self) -> bool:
        return self.status in [TaskStatus.PENDING, TaskStatus.IN_PROGRESS]

    def set_status(self, status: TaskStatus, now: datetime):
        """Ukończenie ustawia datę ukończenia (jeśli brak), wyjście z 'completed' ją czyści."""
        self.status = TaskStatus(status)
        if self.status == TaskStatus.COMPLETED:
            if self.completion_date is None:
                self.completion_date = now
        else:
            self.completion_date = None

    def in_range(self, start: datetime, end: datetime) -> bool:
        due = self.due_date is not None and start <= self.due_date <= end
        done = self.completion_date is not None and start <= self.completion_date <= end
        return due or done
