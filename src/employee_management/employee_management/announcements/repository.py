from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AnnouncementType
from .model import Announcement


class AnnouncementRepository(Protocol):
    def list_all(self) -> Sequence[Announcement]:
        raise NotImplementedError

    def create(
        self,
        *,
        title: str,
        message: str,
        announcement_type: AnnouncementType,
        target_employee_id: Optional[int],
        created_at: datetime,
    ) -> Announcement:
        raise NotImplementedError

    def delete_by_id(self, announcement_id: int) -> bool:
        raise NotImplementedError
