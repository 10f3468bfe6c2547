from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import format_date
from ..core.enums import AttendanceStatus
from ..storage.collection import JsonCollection
from ..storage.document import ATTENDANCE
from ..storage.json_store import JsonDocumentStore
from .model import AttendanceRecord
from .repository import AttendanceRepository


class JsonAttendanceRepository(AttendanceRepository):
    def __init__(self, store: JsonDocumentStore):
        self._store = store
        self._items = JsonCollection(store, ATTENDANCE)

    def list_all(self, *, work_date: Optional[date] = None) -> Sequence[AttendanceRecord]:
        if work_date is None:
            rows = self._items.all()
        else:
            day = format_date(work_date)
            rows = self._items.filter(lambda r: r.get("date") == day)
        return [AttendanceRecord.from_dict(r) for r in rows]

    def list_for_employee(self, employee_id: int) -> Sequence[AttendanceRecord]:
        rows = self._items.filter(lambda r: r.get("employeeId") == employee_id)
        return [AttendanceRecord.from_dict(r) for r in rows]

    def replace_for_employee_and_date(
        self,
        *,
        employee_id: int,
        work_date: date,
        status: AttendanceStatus,
        marked_at: datetime,
    ) -> AttendanceRecord:
        day = format_date(work_date)
        with self._store.transaction():
            self._items.remove_where(lambda r: r.get("employeeId") == employee_id and r.get("date") == day)
            record = self._items.insert(
                lambda new_id: AttendanceRecord(
                    attendance_id=new_id,
                    employee_id=employee_id,
                    work_date=work_date,
                    status=status,
                    marked_at=marked_at,
                ).to_dict()
            )
        return AttendanceRecord.from_dict(record)

    def delete_by_id(self, attendance_id: int) -> bool:
        return self._items.remove(attendance_id)
