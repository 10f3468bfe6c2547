from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import format_timestamp, parse_timestamp
from ..core.enums import AnnouncementType


@dataclass(frozen=True)
class Announcement:
    """A company-wide or individual message from HR.

    `target_employee_id` is only set for individual announcements.
    """

    announcement_id: int
    title: str
    message: str
    announcement_type: AnnouncementType
    target_employee_id: Optional[int]
    created_at: datetime

    def to_dict(self) -> dict:
        return {
            "id": self.announcement_id,
            "title": self.title,
            "message": self.message,
            "type": self.announcement_type.value,
            "targetEmployeeId": self.target_employee_id,
            "createdAt": format_timestamp(self.created_at),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Announcement":
        target = data.get("targetEmployeeId")
        return cls(
            announcement_id=int(data["id"]),
            title=data.get("title") or "",
            message=data.get("message") or "",
            announcement_type=AnnouncementType(data.get("type") or AnnouncementType.COMPANY.value),
            target_employee_id=int(target) if target not in (None, "") else None,
            created_at=parse_timestamp(data.get("createdAt")),
        )
