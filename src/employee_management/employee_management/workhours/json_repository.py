from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Sequence

from ..common.datetime_utils import format_date
from ..storage.collection import JsonCollection
from ..storage.document import WORK_HOURS
from ..storage.json_store import JsonDocumentStore
from .model import WorkHoursEntry
from .repository import WorkHoursRepository


class JsonWorkHoursRepository(WorkHoursRepository):
    def __init__(self, store: JsonDocumentStore):
        self._items = JsonCollection(store, WORK_HOURS)

    def list_all(self) -> Sequence[WorkHoursEntry]:
        return [WorkHoursEntry.from_dict(r) for r in self._items.all()]

    def list_for_employee(self, employee_id: int) -> Sequence[WorkHoursEntry]:
        return [WorkHoursEntry.from_dict(r) for r in self._items.filter(lambda r: r.get("employeeId") == employee_id)]

    def find_open(self, *, employee_id: int, work_date: date) -> Optional[WorkHoursEntry]:
        day = format_date(work_date)
        rows = self._items.filter(
            lambda r: r.get("employeeId") == employee_id and r.get("date") == day and not r.get("checkOut")
        )
        return WorkHoursEntry.from_dict(rows[0]) if rows else None

    def create(self, *, employee_id: int, work_date: date, check_in: datetime) -> WorkHoursEntry:
        record = self._items.insert(
            lambda new_id: WorkHoursEntry(
                entry_id=new_id,
                employee_id=employee_id,
                work_date=work_date,
                check_in=check_in,
            ).to_dict()
        )
        return WorkHoursEntry.from_dict(record)

    def update(self, entry: WorkHoursEntry) -> bool:
        return self._items.replace(entry.entry_id, entry.to_dict())
