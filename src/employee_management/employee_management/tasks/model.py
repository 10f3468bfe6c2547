from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import format_date, format_timestamp, parse_iso_date, parse_timestamp
from ..core.enums import TaskStatus


@dataclass(frozen=True)
class Task:
    """Domain entity: a task assigned to an employee.

    Recurring tasks are daily: once completed they stay completed only for
    `last_completed_date`.
    """

    task_id: int
    employee_id: int
    title: str
    description: str
    deadline: date
    status: TaskStatus
    is_recurring: bool
    last_completed_date: Optional[date]
    created_at: datetime
    completed_at: Optional[datetime] = None

    def needs_daily_reset(self, today: date) -> bool:
        return (
            self.is_recurring
            and self.status == TaskStatus.COMPLETED
            and self.last_completed_date is not None
            and self.last_completed_date != today
        )

    def to_dict(self) -> dict:
        return {
            "id": self.task_id,
            "employeeId": self.employee_id,
            "title": self.title,
            "description": self.description,
            "deadline": format_date(self.deadline),
            "status": self.status.value,
            "isRecurring": self.is_recurring,
            "lastCompletedDate": format_date(self.last_completed_date) if self.last_completed_date else None,
            "createdAt": format_timestamp(self.created_at),
            "completedAt": format_timestamp(self.completed_at) if self.completed_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Task":
        last_completed = data.get("lastCompletedDate")
        return cls(
            task_id=int(data["id"]),
            employee_id=int(data["employeeId"]),
            title=data.get("title") or "",
            description=data.get("description") or "",
            deadline=parse_iso_date(data["deadline"][:10]),
            status=TaskStatus(data["status"]),
            is_recurring=bool(data.get("isRecurring", False)),
            last_completed_date=parse_iso_date(last_completed) if last_completed else None,
            created_at=parse_timestamp(data.get("createdAt")),
            completed_at=parse_timestamp(data.get("completedAt")),
        )
