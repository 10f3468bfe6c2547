from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class User:
    """Domain entity: a login account.

    Note: `password_hash` never leaves the service layer; `to_profile` is the
    public shape.
    """

    user_id: int
    username: str
    password_hash: str
    role: Role
    name: str
    employee_id: Optional[int] = None
    department: Optional[str] = None

    def to_profile(self) -> dict:
        profile = {
            "id": self.user_id,
            "username": self.username,
            "role": self.role.value,
            "name": self.name,
            "employeeId": self.employee_id,
        }
        if self.department:
            profile["department"] = self.department
        return profile
