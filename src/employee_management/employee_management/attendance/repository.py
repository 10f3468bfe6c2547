from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self, *, work_date: Optional[date] = None) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def replace_for_employee_and_date(
        self,
        *,
        employee_id: int,
        work_date: date,
        status: AttendanceStatus,
        marked_at: datetime,
    ) -> AttendanceRecord:
        """Drop any record for (employee, date) and insert a fresh one."""

        raise NotImplementedError

    def delete_by_id(self, attendance_id: int) -> bool:
        raise NotImplementedError
