from __future__ import annotations

from typing import Iterable

from flask import request

from .validators import reject_unknown, require_object


def json_body(*, allowed: Iterable[str]) -> dict:
    """Current request's JSON object, restricted to the given keys."""
    payload = require_object(request.get_json(silent=True))
    reject_unknown(payload, allowed)
    return payload


def message(text: str) -> dict:
    return {"message": text}
