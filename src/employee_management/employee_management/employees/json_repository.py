from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..storage.collection import JsonCollection
from ..storage.document import EMPLOYEES
from ..storage.json_store import JsonDocumentStore
from .model import Employee
from .repository import EmployeeRepository


class JsonEmployeeRepository(EmployeeRepository):
    def __init__(self, store: JsonDocumentStore):
        self._items = JsonCollection(store, EMPLOYEES)

    def list_all(self) -> Sequence[Employee]:
        return [Employee.from_dict(r) for r in self._items.all()]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        record = self._items.find(employee_id)
        return Employee.from_dict(record) if record else None

    def create(
        self,
        *,
        name: str,
        email: str,
        position: str,
        department: Optional[str],
        role: Optional[str],
        leave_balance: int,
        last_balance_reset: datetime,
    ) -> Employee:
        def build(new_id: int) -> dict:
            return Employee(
                employee_id=new_id,
                name=name,
                email=email,
                position=position,
                department=department,
                role=role,
                leave_balance=leave_balance,
                last_balance_reset=last_balance_reset,
            ).to_dict()

        return Employee.from_dict(self._items.insert(build))

    def update(self, employee: Employee) -> bool:
        return self._items.replace(employee.employee_id, employee.to_dict())

    def delete_by_id(self, employee_id: int) -> bool:
        return self._items.remove(employee_id)
