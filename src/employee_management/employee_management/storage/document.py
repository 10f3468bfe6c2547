from __future__ import annotations

from datetime import datetime
from typing import Any

from ..common.datetime_utils import format_timestamp
from ..core.constants import MONTHLY_LEAVE_ALLOWANCE

EMPLOYEES = "employees"
ATTENDANCE = "attendance"
TASKS = "tasks"
LEAVE_REQUESTS = "leaveRequests"
ANNOUNCEMENTS = "announcements"
ISSUES = "issues"
WORK_HOURS = "workHours"

COLLECTIONS = (EMPLOYEES, ATTENDANCE, TASKS, LEAVE_REQUESTS, ANNOUNCEMENTS, ISSUES, WORK_HOURS)
SEQUENCES = "sequences"

DEMO_EMPLOYEES = (
    ("John Doe", "john@company.com", "Developer"),
    ("Jane Smith", "jane@company.com", "Designer"),
    ("Bob Johnson", "bob@company.com", "Manager"),
)


def default_document(*, now: datetime, seed_demo_data: bool) -> dict:
    doc: dict[str, Any] = {name: [] for name in COLLECTIONS}
    if seed_demo_data:
        reset_at = format_timestamp(now)
        doc[EMPLOYEES] = [
            {
                "id": idx,
                "name": name,
                "email": email,
                "position": position,
                "department": None,
                "role": None,
                "leaveBalance": MONTHLY_LEAVE_ALLOWANCE,
                "lastBalanceReset": reset_at,
            }
            for idx, (name, email, position) in enumerate(DEMO_EMPLOYEES, start=1)
        ]
    doc[SEQUENCES] = derive_sequences(doc)
    return doc


def derive_sequences(doc: dict) -> dict:
    """Next id per collection, never lower than max(existing ids) + 1."""
    stored = doc.get(SEQUENCES) or {}
    sequences = {}
    for name in COLLECTIONS:
        ids = [item.get("id") for item in doc.get(name, []) if isinstance(item, dict)]
        highest = max((i for i in ids if isinstance(i, int) and not isinstance(i, bool)), default=0)
        current = stored.get(name)
        if not isinstance(current, int) or isinstance(current, bool):
            current = 0
        sequences[name] = max(current, highest + 1)
    return sequences


def normalize_document(raw: Any) -> dict:
    """Bring a loaded document (possibly an older layout) to the current shape."""
    if not isinstance(raw, dict):
        raise ValueError("data file must contain a JSON object")

    doc = dict(raw)
    for name in COLLECTIONS:
        items = doc.get(name)
        if items is None:
            doc[name] = []
        elif not isinstance(items, list):
            raise ValueError(f"collection {name!r} must be a list")
    doc[SEQUENCES] = derive_sequences(doc)
    return doc
