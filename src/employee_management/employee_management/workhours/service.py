from __future__ import annotations

from contextlib import nullcontext
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from typing import Any, Callable, ContextManager, List, Optional, Sequence

from ..common.datetime_utils import now_utc
from ..common.validators import as_id, is_blank
from ..core.constants import STANDARD_WORK_HOURS, WEEKLY_SUMMARY_DAYS
from ..core.exceptions import BusinessRuleError, ValidationError
from .model import WorkHoursEntry
from .repository import WorkHoursRepository


@dataclass(frozen=True)
class WeeklySummary:
    total_hours: float
    total_overtime: float
    entries: List[WorkHoursEntry]

    def to_dict(self) -> dict:
        return {
            "totalHours": self.total_hours,
            "totalOvertime": self.total_overtime,
            "entries": [e.to_dict() for e in self.entries],
        }


class WorkHoursService:
    """Check-in/check-out time tracking, one open entry per employee per day."""

    def __init__(self, entries: WorkHoursRepository, *, atomic: Optional[Callable[[], ContextManager]] = None):
        self._entries = entries
        self._atomic = atomic or nullcontext

    def list_all(self) -> Sequence[WorkHoursEntry]:
        return self._entries.list_all()

    def list_for_employee(self, employee_id: int) -> Sequence[WorkHoursEntry]:
        return self._entries.list_for_employee(int(employee_id))

    def check_in(self, employee_id: Any, *, now: Optional[datetime] = None) -> WorkHoursEntry:
        employee_id = self._employee_id(employee_id)
        now = now or now_utc()
        with self._atomic():
            if self._entries.find_open(employee_id=employee_id, work_date=now.date()):
                raise BusinessRuleError("Already checked in today")
            return self._entries.create(employee_id=employee_id, work_date=now.date(), check_in=now)

    def check_out(self, employee_id: Any, *, now: Optional[datetime] = None) -> WorkHoursEntry:
        employee_id = self._employee_id(employee_id)
        now = now or now_utc()
        with self._atomic():
            entry = self._entries.find_open(employee_id=employee_id, work_date=now.date())
            if not entry:
                raise BusinessRuleError("No check-in found for today")

            # An entry without a recorded check-in time counts as zero hours.
            hours = (now - (entry.check_in or now)).total_seconds() / 3600
            closed = replace(
                entry,
                check_out=now,
                total_hours=round(hours, 2),
                overtime=round(max(0.0, hours - STANDARD_WORK_HOURS), 2),
            )
            self._entries.update(closed)
            return closed

    def weekly_summary(self, employee_id: int, *, now: Optional[datetime] = None) -> WeeklySummary:
        today = (now or now_utc()).date()
        week_ago = today - timedelta(days=WEEKLY_SUMMARY_DAYS)
        entries = [e for e in self._entries.list_for_employee(int(employee_id)) if week_ago <= e.work_date <= today]
        return WeeklySummary(
            total_hours=round(sum(e.total_hours for e in entries), 2),
            total_overtime=round(sum(e.overtime for e in entries), 2),
            entries=entries,
        )

    @staticmethod
    def _employee_id(value: Any) -> int:
        if is_blank(value):
            raise ValidationError("Employee ID is required")
        return as_id(value, "employeeId")
