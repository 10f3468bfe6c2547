from __future__ import annotations

import itertools
import threading
from typing import Dict, Optional, Sequence

from werkzeug.security import generate_password_hash

from ..core.enums import Role
from .model import User
from .repository import UserRepository

# username, password, role, name, employeeId
DEMO_USERS = (
    ("hr@company.com", "hr123", Role.HR, "HR Manager", None),
    ("john@company.com", "john123", Role.EMPLOYEE, "John Doe", 1),
    ("jane@company.com", "jane123", Role.EMPLOYEE, "Jane Smith", 2),
    ("bob@company.com", "bob123", Role.EMPLOYEE, "Bob Johnson", 3),
)


class InMemoryUserRepository(UserRepository):
    """Process-local accounts; they are rebuilt from the demo seed on restart."""

    def __init__(self):
        self._lock = threading.Lock()
        self._ids = itertools.count(1)
        self._users: Dict[int, User] = {}

    @classmethod
    def with_demo_users(cls) -> "InMemoryUserRepository":
        repo = cls()
        for username, password, role, name, employee_id in DEMO_USERS:
            repo.create_user(
                username=username,
                password_hash=generate_password_hash(password),
                role=role,
                name=name,
                employee_id=employee_id,
                department=None,
            )
        return repo

    def list_all(self) -> Sequence[User]:
        with self._lock:
            return list(self._users.values())

    def get_by_id(self, user_id: int) -> Optional[User]:
        with self._lock:
            return self._users.get(user_id)

    def get_by_username(self, username: str) -> Optional[User]:
        with self._lock:
            return next((u for u in self._users.values() if u.username == username), None)

    def create_user(
        self,
        *,
        username: str,
        password_hash: str,
        role: Role,
        name: str,
        employee_id: Optional[int],
        department: Optional[str],
    ) -> User:
        with self._lock:
            user = User(
                user_id=next(self._ids),
                username=username,
                password_hash=password_hash,
                role=role,
                name=name,
                employee_id=employee_id,
                department=department,
            )
            self._users[user.user_id] = user
            return user
