from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Any, Iterable, Mapping, Optional, Type, TypeVar, Union

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date

E = TypeVar("E", bound=Enum)


def require_object(payload: Any) -> dict:
    if not isinstance(payload, dict):
        raise ValidationError("Request body must be a JSON object")
    return payload


def reject_unknown(payload: Mapping[str, Any], allowed: Iterable[str]) -> None:
    unknown = sorted(set(payload) - set(allowed))
    if unknown:
        raise ValidationError(f"Unexpected field(s): {', '.join(unknown)}")


def is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def require_fields(payload: Mapping[str, Any], fields: Iterable[str], message: str) -> None:
    """Fail with one endpoint-specific message when any field is absent or blank."""
    if any(is_blank(payload.get(name)) for name in fields):
        raise ValidationError(message)


def require_non_empty(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} must be a non-empty string")
    return value.strip()


def optional_text(value: Any, field_name: str) -> Optional[str]:
    if is_blank(value):
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a string")
    return value.strip()


def as_actor(value: Any, field_name: str) -> Union[int, str]:
    """A user reference: the dashboard sends a numeric user id, older clients a name."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip():
        return value.strip()
    raise ValidationError(f"{field_name} must be a user id or name")


def as_id(value: Any, field_name: str) -> int:
    """Accept a JSON integer or a digit string, like ids typed into form fields."""
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer")
    if isinstance(value, int):
        result = value
    elif isinstance(value, str) and value.strip().isdigit():
        result = int(value.strip())
    else:
        raise ValidationError(f"{field_name} must be an integer")
    if result <= 0:
        raise ValidationError(f"{field_name} must be positive")
    return result


def as_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ValidationError(f"{field_name} must be true or false")
    return value


def as_date(value: Any, field_name: str) -> date:
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")


def as_enum(enum_cls: Type[E], value: Any, field_name: str) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        choices = ", ".join(member.value for member in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {choices}")
