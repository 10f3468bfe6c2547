from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import format_timestamp, parse_timestamp
from ..core.constants import MONTHLY_LEAVE_ALLOWANCE


@dataclass(frozen=True)
class Employee:
    """Domain entity: an employee record.

    Note: plain data object; `to_dict`/`from_dict` map it to the stored JSON
    shape, which is also the API shape.
    """

    employee_id: int
    name: str
    email: str
    position: str
    department: Optional[str]
    role: Optional[str]
    leave_balance: int
    last_balance_reset: Optional[datetime]

    def to_dict(self) -> dict:
        return {
            "id": self.employee_id,
            "name": self.name,
            "email": self.email,
            "position": self.position,
            "department": self.department,
            "role": self.role,
            "leaveBalance": self.leave_balance,
            "lastBalanceReset": format_timestamp(self.last_balance_reset) if self.last_balance_reset else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Employee":
        balance = data.get("leaveBalance")
        return cls(
            employee_id=int(data["id"]),
            name=data.get("name") or "",
            email=data.get("email") or "",
            position=data.get("position") or "",
            department=data.get("department"),
            role=data.get("role"),
            leave_balance=int(balance) if balance is not None else MONTHLY_LEAVE_ALLOWANCE,
            last_balance_reset=parse_timestamp(data.get("lastBalanceReset")),
        )
