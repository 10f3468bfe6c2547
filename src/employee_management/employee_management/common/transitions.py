from __future__ import annotations

from enum import Enum
from typing import Mapping, TypeVar

from ..core.exceptions import InvalidTransitionError

S = TypeVar("S", bound=Enum)


def ensure_transition(table: Mapping[S, frozenset], current: S, target: S, *, subject: str) -> None:
    if target not in table.get(current, frozenset()):
        raise InvalidTransitionError(
            f"{subject} cannot move from '{current.value}' to '{target.value}'"
        )
