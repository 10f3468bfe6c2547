from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..core.enums import TaskStatus
from ..storage.collection import JsonCollection
from ..storage.document import TASKS
from ..storage.json_store import JsonDocumentStore
from .model import Task
from .repository import TaskRepository


class JsonTaskRepository(TaskRepository):
    def __init__(self, store: JsonDocumentStore):
        self._items = JsonCollection(store, TASKS)

    def list_all(self) -> Sequence[Task]:
        return [Task.from_dict(r) for r in self._items.all()]

    def list_for_employee(self, employee_id: int) -> Sequence[Task]:
        return [Task.from_dict(r) for r in self._items.filter(lambda r: r.get("employeeId") == employee_id)]

    def get_by_id(self, task_id: int) -> Optional[Task]:
        record = self._items.find(task_id)
        return Task.from_dict(record) if record else None

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
        record = self._items.insert(
            lambda new_id: Task(
                task_id=new_id,
                employee_id=employee_id,
                title=title,
                description=description,
                deadline=deadline,
                status=status,
                is_recurring=is_recurring,
                last_completed_date=None,
                created_at=created_at,
            ).to_dict()
        )
        return Task.from_dict(record)

    def update(self, task: Task) -> bool:
        return self._items.replace(task.task_id, task.to_dict())

    def delete_by_id(self, task_id: int) -> bool:
        return self._items.remove(task_id)
