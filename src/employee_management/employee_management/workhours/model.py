from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import format_date, format_optional_timestamp, parse_iso_date, parse_timestamp


@dataclass(frozen=True)
class WorkHoursEntry:
    entry_id: int
    employee_id: int
    work_date: date
    check_in: Optional[datetime]
    check_out: Optional[datetime] = None
    total_hours: float = 0
    overtime: float = 0

    @property
    def is_open(self) -> bool:
        return self.check_out is None

    def to_dict(self) -> dict:
        return {
            "id": self.entry_id,
            "employeeId": self.employee_id,
            "date": format_date(self.work_date),
            "checkIn": format_optional_timestamp(self.check_in),
            "checkOut": format_optional_timestamp(self.check_out),
            "totalHours": self.total_hours,
            "overtime": self.overtime,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "WorkHoursEntry":
        return cls(
            entry_id=int(data["id"]),
            employee_id=int(data["employeeId"]),
            work_date=parse_iso_date(data["date"][:10]),
            check_in=parse_timestamp(data.get("checkIn")),
            check_out=parse_timestamp(data.get("checkOut")),
            total_hours=float(data.get("totalHours") or 0),
            overtime=float(data.get("overtime") or 0),
        )
