from __future__ import annotations

from dataclasses import replace
from datetime import date, timedelta
from typing import Optional

import pytest

from src.employee_management.employee_management.core.exceptions import BusinessRuleError, ValidationError
from src.employee_management.employee_management.workhours.model import WorkHoursEntry
from src.employee_management.employee_management.workhours.service import WorkHoursService


class InMemoryWorkHours:
    def __init__(self):
        self._items: dict[int, WorkHoursEntry] = {}
        self._next_id = 1

    def list_all(self):
        return list(self._items.values())

    def list_for_employee(self, employee_id: int):
        return [e for e in self._items.values() if e.employee_id == employee_id]

    def find_open(self, *, employee_id: int, work_date: date) -> Optional[WorkHoursEntry]:
        for entry in self._items.values():
            if entry.employee_id == employee_id and entry.work_date == work_date and entry.is_open:
                return entry
        return None

    def create(self, *, employee_id, work_date, check_in) -> WorkHoursEntry:
        entry = WorkHoursEntry(entry_id=self._next_id, employee_id=employee_id, work_date=work_date, check_in=check_in)
        self._items[entry.entry_id] = entry
        self._next_id += 1
        return entry

    def update(self, entry: WorkHoursEntry) -> bool:
        self._items[entry.entry_id] = entry
        return True

    def add(self, entry: WorkHoursEntry) -> None:
        self._items[entry.entry_id] = entry


def test_nine_hour_shift_has_one_hour_overtime(fixed_now):
    svc = WorkHoursService(InMemoryWorkHours())

    svc.check_in(1, now=fixed_now)
    entry = svc.check_out(1, now=fixed_now + timedelta(hours=9))

    assert entry.total_hours == 9.0
    assert entry.overtime == 1.0
    assert entry.check_out == fixed_now + timedelta(hours=9)


def test_short_shift_has_no_overtime(fixed_now):
    svc = WorkHoursService(InMemoryWorkHours())

    svc.check_in(1, now=fixed_now)
    entry = svc.check_out(1, now=fixed_now + timedelta(hours=4, minutes=20))

    assert entry.total_hours == 4.33
    assert entry.overtime == 0


def test_double_check_in_is_rejected(fixed_now):
    svc = WorkHoursService(InMemoryWorkHours())
    svc.check_in(1, now=fixed_now)

    with pytest.raises(BusinessRuleError, match="Already checked in today"):
        svc.check_in(1, now=fixed_now + timedelta(minutes=5))


def test_check_in_again_after_check_out(fixed_now):
    svc = WorkHoursService(InMemoryWorkHours())
    svc.check_in(1, now=fixed_now)
    svc.check_out(1, now=fixed_now + timedelta(hours=1))

    entry = svc.check_in(1, now=fixed_now + timedelta(hours=2))

    assert entry.entry_id == 2


def test_check_out_without_check_in(fixed_now):
    svc = WorkHoursService(InMemoryWorkHours())

    with pytest.raises(BusinessRuleError, match="No check-in found for today"):
        svc.check_out(1, now=fixed_now)


def test_employee_id_is_required(fixed_now):
    svc = WorkHoursService(InMemoryWorkHours())

    with pytest.raises(ValidationError, match="Employee ID is required"):
        svc.check_in(None, now=fixed_now)


def test_weekly_summary_window(fixed_now):
    repo = InMemoryWorkHours()
    svc = WorkHoursService(repo)
    base = WorkHoursEntry(entry_id=1, employee_id=1, work_date=fixed_now.date(), check_in=fixed_now, check_out=fixed_now)
    repo.add(replace(base, entry_id=1, total_hours=9.0, overtime=1.0))
    repo.add(replace(base, entry_id=2, work_date=fixed_now.date() - timedelta(days=7), total_hours=8.25, overtime=0.25))
    repo.add(replace(base, entry_id=3, work_date=fixed_now.date() - timedelta(days=8), total_hours=10.0, overtime=2.0))
    repo.add(replace(base, entry_id=4, employee_id=2, total_hours=5.0))

    summary = svc.weekly_summary(1, now=fixed_now)

    assert [e.entry_id for e in summary.entries] == [1, 2]
    assert summary.to_dict()["totalHours"] == 17.25
    assert summary.to_dict()["totalOvertime"] == 1.25
