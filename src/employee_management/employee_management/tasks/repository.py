from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import TaskStatus
from .model import Task


class TaskRepository(Protocol):
    def list_all(self) -> Sequence[Task]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[Task]:
        raise NotImplementedError

    def get_by_id(self, task_id: int) -> Optional[Task]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        title: str,
        description: str,
        deadline: date,
        is_recurring: bool,
        status: TaskStatus,
        created_at: datetime,
    ) -> Task:
        raise NotImplementedError

    def update(self, task: Task) -> bool:
        raise NotImplementedError

    def delete_by_id(self, task_id: int) -> bool:
        raise NotImplementedError
