from __future__ import annotations

import logging
from typing import Any, Sequence

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import as_enum, as_id, is_blank, optional_text, require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, ValidationError
from .model import User
from .repository import UserRepository

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: log in, validate a stored session, manage accounts."""

    def __init__(self, users: UserRepository):
        self._users = users

    def login(self, username: Any, password: Any) -> User:
        if is_blank(username) or is_blank(password):
            raise ValidationError("Username and password are required")

        user = self._users.get_by_username(str(username))
        if not user or not _password_matches(user.password_hash, str(password)):
            raise AuthenticationError("Invalid credentials")
        return user

    def validate(self, user_id: Any) -> User:
        try:
            user = self._users.get_by_id(as_id(user_id, "userId"))
        except ValidationError:
            user = None
        if not user:
            raise AuthenticationError("Invalid session")
        return user

    def list_users(self) -> Sequence[User]:
        return self._users.list_all()

    def register(
        self,
        *,
        username: Any,
        password: Any,
        role: Any,
        name: Any,
        employee_id: Any = None,
        department: Any = None,
    ) -> User:
        if any(is_blank(v) for v in (username, password, role, name)):
            raise ValidationError("All fields are required")

        username = require_non_empty(username, "username")
        if self._users.get_by_username(username):
            raise ValidationError("Username already exists")

        user = self._users.create_user(
            username=username,
            password_hash=generate_password_hash(require_non_empty(password, "password")),
            role=as_enum(Role, role, "role"),
            name=require_non_empty(name, "name"),
            employee_id=None if is_blank(employee_id) else as_id(employee_id, "employeeId"),
            department=optional_text(department, "department"),
        )
        logger.info("Registered %s account %s", user.role.value, user.username)
        return user


def _password_matches(password_hash: str, password: str) -> bool:
    try:
        return check_password_hash(password_hash, password)
    except ValueError:
        # e.g. a malformed hash
        return False
