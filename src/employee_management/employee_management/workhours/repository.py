from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import WorkHoursEntry


class WorkHoursRepository(Protocol):
    def list_all(self) -> Sequence[WorkHoursEntry]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[WorkHoursEntry]:
        raise NotImplementedError

    def find_open(self, *, employee_id: int, work_date: date) -> Optional[WorkHoursEntry]:
        raise NotImplementedError

    def create(self, *, employee_id: int, work_date: date, check_in: datetime) -> WorkHoursEntry:
        raise NotImplementedError

    def update(self, entry: WorkHoursEntry) -> bool:
        raise NotImplementedError
