from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime

from ..common.datetime_utils import format_date, format_timestamp, parse_iso_date, parse_timestamp
from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance mark for one day."""

    attendance_id: int
    employee_id: int
    work_date: date
    status: AttendanceStatus
    marked_at: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.attendance_id,
            "employeeId": self.employee_id,
            "date": format_date(self.work_date),
            "status": self.status.value,
            "markedAt": format_timestamp(self.marked_at),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AttendanceRecord":
        return cls(
            attendance_id=int(data["id"]),
            employee_id=int(data["employeeId"]),
            work_date=parse_iso_date(data["date"]),
            status=AttendanceStatus(data["status"]),
            marked_at=parse_timestamp(data.get("markedAt")),
        )
