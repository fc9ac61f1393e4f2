# apps/tasks/application/use_cases.py
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from apps.tasks.domain.entities import TaskEntity, TaskStatus
from apps.tasks.ports.repositories import ITaskRepository

@dataclass
class CreateTaskInput:
    title: str
    user_id: int
    description: str = ""
    due_date: Optional[datetime] = None
    status: TaskStatus = TaskStatus.PENDING

class CreateTaskUseCase:
    def __init__(self, repository: ITaskRepository):
        self.repository = repository

    def execute(self, input_dto: CreateTaskInput) -> TaskEntity:
        title = (input_dto.title or "").strip()
        if not title:
            raise ValueError("Task title cannot be empty")

        task = TaskEntity(
            id=None,
            user_id=input_dto.user_id,
            title=title,
            description=(input_dto.description or "").strip(),
            status=TaskStatus(input_dto.status or TaskStatus.PENDING),
            due_date=input_dto.due_date,
        )

        return self.repository.save(task)
