from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional, Sequence

from ..common.datetime_utils import now_utc
from ..common.validators import as_date, as_enum, as_id, is_blank
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from .model import AttendanceRecord
from .repository import AttendanceRepository


class AttendanceService:
    """Use case: daily attendance marking by HR / department heads."""

    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def list_all(self, *, work_date: Optional[date] = None) -> Sequence[AttendanceRecord]:
        return self._attendance.list_all(work_date=work_date)

    def list_for_employee(self, employee_id: int) -> Sequence[AttendanceRecord]:
        return self._attendance.list_for_employee(int(employee_id))

    def mark(
        self,
        *,
        employee_id: Any,
        work_date: Any,
        status: Any,
        now: Optional[datetime] = None,
    ) -> AttendanceRecord:
        """Marking the same employee twice on one day keeps only the latest status."""
        if any(is_blank(v) for v in (employee_id, work_date, status)):
            raise ValidationError("Employee ID, date, and status are required")

        return self._attendance.replace_for_employee_and_date(
            employee_id=as_id(employee_id, "employeeId"),
            work_date=as_date(work_date, "date"),
            status=as_enum(AttendanceStatus, status, "status"),
            marked_at=now or now_utc(),
        )

    def delete(self, attendance_id: int) -> None:
        if not self._attendance.delete_by_id(int(attendance_id)):
            raise NotFoundError("Attendance record not found")
