from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import LeaveStatus
from .model import LeaveRequest


class LeaveRepository(Protocol):
    def list_all(self, *, status: Optional[str] = None) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def get_by_id(self, request_id: int) -> Optional[LeaveRequest]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        start_date: date,
        end_date: date,
        leave_type: str,
        reason: str,
        status: LeaveStatus,
        requested_at: datetime,
    ) -> LeaveRequest:
        raise NotImplementedError

    def update(self, leave: LeaveRequest) -> bool:
        raise NotImplementedError

    def delete_by_id(self, request_id: int) -> bool:
        raise NotImplementedError
