from __future__ import annotations

from contextlib import nullcontext
from dataclasses import replace
from datetime import datetime
from typing import Any, Callable, ContextManager, Mapping, Optional, Sequence

from ..common.datetime_utils import now_utc
from ..common.validators import is_blank, optional_text, require_non_empty
from ..core.constants import MONTHLY_LEAVE_ALLOWANCE
from ..core.exceptions import NotFoundError, ValidationError
from .model import Employee
from .repository import EmployeeRepository

REQUIRED_FIELDS = ("name", "email", "position")
OPTIONAL_FIELDS = ("department", "role")
UPDATABLE_FIELDS = REQUIRED_FIELDS + OPTIONAL_FIELDS


class EmployeeService:
    """Use case: manage employee records (HR)."""

    def __init__(self, employees: EmployeeRepository, *, atomic: Optional[Callable[[], ContextManager]] = None):
        self._employees = employees
        self._atomic = atomic or nullcontext

    def list_all(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def create(
        self,
        *,
        name: Any,
        email: Any,
        position: Any,
        department: Any = None,
        role: Any = None,
        now: Optional[datetime] = None,
    ) -> Employee:
        if any(is_blank(v) for v in (name, email, position)):
            raise ValidationError("All fields are required")

        return self._employees.create(
            name=require_non_empty(name, "name"),
            email=require_non_empty(email, "email"),
            position=require_non_empty(position, "position"),
            department=optional_text(department, "department"),
            role=optional_text(role, "role"),
            leave_balance=MONTHLY_LEAVE_ALLOWANCE,
            last_balance_reset=now or now_utc(),
        )

    def update(self, employee_id: int, changes: Mapping[str, Any]) -> Employee:
        """Apply only the keys present in `changes`.

        Required fields can't be blanked; department/role are cleared by an
        explicit null or empty string.
        """
        with self._atomic():
            employee = self.get(employee_id)

            updates: dict[str, Any] = {}
            for key, value in changes.items():
                if key in REQUIRED_FIELDS:
                    updates[key] = require_non_empty(value, key)
                elif key in OPTIONAL_FIELDS:
                    updates[key] = optional_text(value, key)
                else:
                    raise ValidationError(f"Unexpected field(s): {key}")

            updated = replace(employee, **updates)
            if updated != employee:
                self._employees.update(updated)
        return updated

    def delete(self, employee_id: int) -> None:
        if not self._employees.delete_by_id(int(employee_id)):
            raise NotFoundError("Employee not found")
