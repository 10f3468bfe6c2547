from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import format_date, format_optional_timestamp, parse_iso_date, parse_timestamp
from ..core.enums import LeaveStatus


@dataclass(frozen=True)
class LeaveRequest:
    request_id: int
    employee_id: int
    start_date: date
    end_date: date
    leave_type: str
    reason: str
    status: LeaveStatus
    requested_at: Optional[datetime]
    reviewed_at: Optional[datetime] = None

    @property
    def day_span(self) -> int:
        """Inclusive number of calendar days covered."""
        return (self.end_date - self.start_date).days + 1

    def to_dict(self) -> dict:
        return {
            "id": self.request_id,
            "employeeId": self.employee_id,
            "startDate": format_date(self.start_date),
            "endDate": format_date(self.end_date),
            "type": self.leave_type,
            "reason": self.reason,
            "status": self.status.value,
            "requestedAt": format_optional_timestamp(self.requested_at),
            "reviewedAt": format_optional_timestamp(self.reviewed_at),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "LeaveRequest":
        return cls(
            request_id=int(data["id"]),
            employee_id=int(data["employeeId"]),
            start_date=parse_iso_date(data["startDate"][:10]),
            end_date=parse_iso_date(data["endDate"][:10]),
            leave_type=data.get("type") or "",
            reason=data.get("reason") or "",
            status=LeaveStatus(data["status"]),
            requested_at=parse_timestamp(data.get("requestedAt")),
            reviewed_at=parse_timestamp(data.get("reviewedAt")),
        )
