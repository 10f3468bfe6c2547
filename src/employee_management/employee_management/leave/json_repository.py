from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..core.enums import LeaveStatus
from ..storage.collection import JsonCollection
from ..storage.document import LEAVE_REQUESTS
from ..storage.json_store import JsonDocumentStore
from .model import LeaveRequest
from .repository import LeaveRepository


class JsonLeaveRepository(LeaveRepository):
    def __init__(self, store: JsonDocumentStore):
        self._items = JsonCollection(store, LEAVE_REQUESTS)

    def list_all(self, *, status: Optional[str] = None) -> Sequence[LeaveRequest]:
        if status:
            rows = self._items.filter(lambda r: r.get("status") == status)
        else:
            rows = self._items.all()
        return [LeaveRequest.from_dict(r) for r in rows]

    def list_for_employee(self, employee_id: int) -> Sequence[LeaveRequest]:
        return [LeaveRequest.from_dict(r) for r in self._items.filter(lambda r: r.get("employeeId") == employee_id)]

    def get_by_id(self, request_id: int) -> Optional[LeaveRequest]:
        record = self._items.find(request_id)
        return LeaveRequest.from_dict(record) if record else None

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
        record = self._items.insert(
            lambda new_id: LeaveRequest(
                request_id=new_id,
                employee_id=employee_id,
                start_date=start_date,
                end_date=end_date,
                leave_type=leave_type,
                reason=reason,
                status=status,
                requested_at=requested_at,
            ).to_dict()
        )
        return LeaveRequest.from_dict(record)

    def update(self, leave: LeaveRequest) -> bool:
        return self._items.replace(leave.request_id, leave.to_dict())

    def delete_by_id(self, request_id: int) -> bool:
        return self._items.remove(request_id)
