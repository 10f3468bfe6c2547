from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import AnnouncementType
from ..storage.collection import JsonCollection
from ..storage.document import ANNOUNCEMENTS
from ..storage.json_store import JsonDocumentStore
from .model import Announcement
from .repository import AnnouncementRepository


class JsonAnnouncementRepository(AnnouncementRepository):
    def __init__(self, store: JsonDocumentStore):
        self._items = JsonCollection(store, ANNOUNCEMENTS)

    def list_all(self) -> Sequence[Announcement]:
        return [Announcement.from_dict(r) for r in self._items.all()]

    def create(
        self,
        *,
        title: str,
        message: str,
        announcement_type: AnnouncementType,
        target_employee_id: Optional[int],
        created_at: datetime,
    ) -> Announcement:
        record = self._items.insert(
            lambda new_id: Announcement(
                announcement_id=new_id,
                title=title,
                message=message,
                announcement_type=announcement_type,
                target_employee_id=target_employee_id,
                created_at=created_at,
            ).to_dict()
        )
        return Announcement.from_dict(record)

    def delete_by_id(self, announcement_id: int) -> bool:
        return self._items.remove(announcement_id)
