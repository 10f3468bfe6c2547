from __future__ import annotations

from contextlib import nullcontext
from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, ContextManager, Optional, Sequence

from ..common.datetime_utils import now_utc
from ..common.transitions import ensure_transition
from ..common.validators import as_bool, as_date, as_enum, as_id, is_blank, require_non_empty
from ..core.enums import TaskStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import Task
from .repository import TaskRepository

COMPLETE_ACTION = "complete"

TASK_TRANSITIONS = {
    TaskStatus.IN_PROGRESS: frozenset({TaskStatus.COMPLETED}),
    TaskStatus.COMPLETED: frozenset({TaskStatus.IN_PROGRESS}),
}


class TaskService:
    def __init__(self, tasks: TaskRepository, *, atomic: Optional[Callable[[], ContextManager]] = None):
        self._tasks = tasks
        self._atomic = atomic or nullcontext

    def roll_over_recurring(self, *, now: Optional[datetime] = None) -> int:
        """Reopen recurring tasks that were completed on an earlier day.

        Evaluated lazily on read rather than on a schedule.
        """
        today = (now or now_utc()).date()
        if not any(t.needs_daily_reset(today) for t in self._tasks.list_all()):
            return 0

        with self._atomic():
            stale = [t for t in self._tasks.list_all() if t.needs_daily_reset(today)]
            for task in stale:
                self._tasks.update(replace(task, status=TaskStatus.IN_PROGRESS))
        return len(stale)

    def list_all(self, *, status: Optional[str] = None, now: Optional[datetime] = None) -> Sequence[Task]:
        self.roll_over_recurring(now=now)
        tasks = self._tasks.list_all()
        if status:
            return [t for t in tasks if t.status.value == status]
        return tasks

    def list_for_employee(self, employee_id: int, *, now: Optional[datetime] = None) -> Sequence[Task]:
        self.roll_over_recurring(now=now)
        return self._tasks.list_for_employee(int(employee_id))

    def get(self, task_id: int, *, now: Optional[datetime] = None) -> Task:
        self.roll_over_recurring(now=now)
        return self._require(task_id)

    def create(
        self,
        *,
        employee_id: Any,
        title: Any,
        description: Any,
        deadline: Any = None,
        is_recurring: Any = None,
        now: Optional[datetime] = None,
    ) -> Task:
        if any(is_blank(v) for v in (employee_id, title, description)):
            raise ValidationError("Required fields are missing")

        now = now or now_utc()
        return self._tasks.create(
            employee_id=as_id(employee_id, "employeeId"),
            title=require_non_empty(title, "title"),
            description=require_non_empty(description, "description"),
            deadline=now.date() if is_blank(deadline) else as_date(deadline, "deadline"),
            is_recurring=False if is_recurring is None else as_bool(is_recurring, "isRecurring"),
            status=TaskStatus.IN_PROGRESS,
            created_at=now,
        )

    def update(
        self,
        task_id: int,
        *,
        status: Any = None,
        action: Any = None,
        now: Optional[datetime] = None,
    ) -> Task:
        now = now or now_utc()
        with self._atomic():
            task = self._require(task_id)

            if action is not None:
                if action != COMPLETE_ACTION:
                    raise ValidationError(f"Unknown action '{action}'")
                updated = self._complete(task, now)
            elif status is not None:
                target = as_enum(TaskStatus, status, "status")
                if target == task.status:
                    return task
                ensure_transition(TASK_TRANSITIONS, task.status, target, subject="Task")
                if target == TaskStatus.COMPLETED:
                    updated = self._complete(task, now)
                else:
                    updated = replace(task, status=target)
            else:
                return task

            self._tasks.update(updated)
        return updated

    def delete(self, task_id: int) -> None:
        if not self._tasks.delete_by_id(int(task_id)):
            raise NotFoundError("Task not found")

    def _require(self, task_id: int) -> Task:
        task = self._tasks.get_by_id(int(task_id))
        if not task:
            raise NotFoundError("Task not found")
        return task

    @staticmethod
    def _complete(task: Task, now: datetime) -> Task:
        # Recurring tasks are only done for today; one-off tasks stay done.
        if task.is_recurring:
            return replace(task, status=TaskStatus.COMPLETED, last_completed_date=now.date(), completed_at=now)
        return replace(task, status=TaskStatus.COMPLETED, completed_at=now)
