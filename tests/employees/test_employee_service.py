from __future__ import annotations

from dataclasses import replace
from typing import Optional

import pytest

from src.employee_management.employee_management.core.exceptions import NotFoundError, ValidationError
from src.employee_management.employee_management.employees.model import Employee
from src.employee_management.employee_management.employees.service import EmployeeService

from tests.stubs import RecordingAtomic


class InMemoryEmployees:
    def __init__(self):
        self._items: dict[int, Employee] = {}
        self._next_id = 1
        self.updates = 0

    def list_all(self):
        return list(self._items.values())

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._items.get(employee_id)

    def create(self, **fields) -> Employee:
        employee = Employee(employee_id=self._next_id, **fields)
        self._items[employee.employee_id] = employee
        self._next_id += 1
        return employee

    def update(self, employee: Employee) -> bool:
        self.updates += 1
        self._items[employee.employee_id] = employee
        return True

    def delete_by_id(self, employee_id: int) -> bool:
        return self._items.pop(employee_id, None) is not None


def test_create_sets_monthly_allowance(fixed_now):
    svc = EmployeeService(InMemoryEmployees())

    employee = svc.create(name="A", email="a@x.com", position="Dev", now=fixed_now)

    assert employee.employee_id == 1
    assert employee.leave_balance == 2
    assert employee.last_balance_reset == fixed_now
    assert employee.department is None


def test_create_requires_name_email_position():
    svc = EmployeeService(InMemoryEmployees())

    with pytest.raises(ValidationError, match="All fields are required"):
        svc.create(name="A", email="  ", position="Dev")


def test_update_only_touches_present_keys(fixed_now):
    svc = EmployeeService(InMemoryEmployees())
    created = svc.create(name="A", email="a@x.com", position="Dev", department="ops", now=fixed_now)

    updated = svc.update(created.employee_id, {"position": "Lead"})

    assert updated == replace(created, position="Lead")


def test_update_clears_optional_fields_explicitly(fixed_now):
    svc = EmployeeService(InMemoryEmployees())
    created = svc.create(name="A", email="a@x.com", position="Dev", department="ops", role="head", now=fixed_now)

    updated = svc.update(created.employee_id, {"department": None, "role": ""})

    assert updated.department is None
    assert updated.role is None


def test_update_rejects_blanking_required_field(fixed_now):
    svc = EmployeeService(InMemoryEmployees())
    created = svc.create(name="A", email="a@x.com", position="Dev", now=fixed_now)

    with pytest.raises(ValidationError):
        svc.update(created.employee_id, {"name": ""})


def test_update_without_changes_does_not_write(fixed_now):
    repo = InMemoryEmployees()
    svc = EmployeeService(repo)
    created = svc.create(name="A", email="a@x.com", position="Dev", now=fixed_now)

    svc.update(created.employee_id, {"name": "A"})

    assert repo.updates == 0


def test_missing_employee_is_not_found():
    svc = EmployeeService(InMemoryEmployees())

    with pytest.raises(NotFoundError, match="Employee not found"):
        svc.get(42)
    with pytest.raises(NotFoundError):
        svc.delete(42)


def test_update_rereads_inside_transaction(fixed_now):
    atomic = RecordingAtomic()
    repo = InMemoryEmployees()
    svc = EmployeeService(repo, atomic=atomic)
    created = svc.create(name="A", email="a@x.com", position="Dev", now=fixed_now)
    # A leave approval lands after the request was parsed but before the update.
    repo.update(replace(created, leave_balance=0))

    seen = []
    original_get = repo.get_by_id
    repo.get_by_id = lambda employee_id: seen.append(atomic.active) or original_get(employee_id)

    updated = svc.update(created.employee_id, {"position": "Lead"})

    assert seen == [True]
    assert updated.leave_balance == 0
    assert repo.get_by_id(created.employee_id).leave_balance == 0


def test_update_of_missing_employee_is_not_found_before_validation():
    svc = EmployeeService(InMemoryEmployees())

    with pytest.raises(NotFoundError):
        svc.update(42, {"name": ""})
