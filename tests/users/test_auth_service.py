from __future__ import annotations

import pytest

from src.employee_management.employee_management.core.enums import Role
from src.employee_management.employee_management.core.exceptions import AuthenticationError, ValidationError
from src.employee_management.employee_management.users.memory_repository import InMemoryUserRepository
from src.employee_management.employee_management.users.service import AuthService


@pytest.fixture
def auth() -> AuthService:
    return AuthService(InMemoryUserRepository.with_demo_users())


def test_demo_hr_can_log_in(auth):
    user = auth.login("hr@company.com", "hr123")

    assert user.role == Role.HR
    assert user.to_profile() == {
        "id": 1,
        "username": "hr@company.com",
        "role": "hr",
        "name": "HR Manager",
        "employeeId": None,
    }


def test_wrong_password_raises(auth):
    with pytest.raises(AuthenticationError, match="Invalid credentials"):
        auth.login("john@company.com", "wrong")


def test_login_requires_both_fields(auth):
    with pytest.raises(ValidationError, match="Username and password are required"):
        auth.login("john@company.com", "")


def test_passwords_are_hashed(auth):
    john = auth.login("john@company.com", "john123")

    assert john.employee_id == 1
    assert john.password_hash != "john123"
    assert "password" not in john.to_profile()


def test_validate_session(auth):
    assert auth.validate(3).name == "Jane Smith"
    with pytest.raises(AuthenticationError, match="Invalid session"):
        auth.validate(99)
    with pytest.raises(AuthenticationError):
        auth.validate("abc")


def test_register_and_login(auth):
    user = auth.register(username="ops@company.com", password="s3cret", role="head", name="Ops Head", department="operations")

    assert user.user_id == 5
    assert user.to_profile()["department"] == "operations"
    assert auth.login("ops@company.com", "s3cret").user_id == 5


def test_register_rejects_duplicates_and_unknown_roles(auth):
    with pytest.raises(ValidationError, match="Username already exists"):
        auth.register(username="bob@company.com", password="x", role="employee", name="Bob")
    with pytest.raises(ValidationError, match="role must be one of"):
        auth.register(username="new@company.com", password="x", role="admin", name="New")
    with pytest.raises(ValidationError, match="All fields are required"):
        auth.register(username="new@company.com", password="x", role="", name="New")
