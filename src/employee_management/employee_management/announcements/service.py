from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional, Sequence

from ..common.datetime_utils import now_utc
from ..common.validators import as_enum, as_id, is_blank, require_non_empty
from ..core.enums import AnnouncementType
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import Announcement
from .repository import AnnouncementRepository

if TYPE_CHECKING:
    from ..notifications.service import NotificationService


class AnnouncementService:
    def __init__(
        self,
        announcements: AnnouncementRepository,
        employees: EmployeeRepository,
        notifier: Optional["NotificationService"] = None,
    ):
        self._announcements = announcements
        self._employees = employees
        self._notifier = notifier

    def list_all(self) -> Sequence[Announcement]:
        return self._announcements.list_all()

    def create(
        self,
        *,
        title: Any,
        message: Any,
        announcement_type: Any = None,
        target_employee_id: Any = None,
        now: Optional[datetime] = None,
    ) -> Announcement:
        if is_blank(title) or is_blank(message):
            raise ValidationError("Title and message are required")

        kind = (
            AnnouncementType.COMPANY
            if is_blank(announcement_type)
            else as_enum(AnnouncementType, announcement_type, "type")
        )
        target_id = None
        if kind == AnnouncementType.INDIVIDUAL:
            if is_blank(target_employee_id):
                raise ValidationError("Target employee is required for individual announcements")
            target_id = as_id(target_employee_id, "targetEmployeeId")

        announcement = self._announcements.create(
            title=require_non_empty(title, "title"),
            message=require_non_empty(message, "message"),
            announcement_type=kind,
            target_employee_id=target_id,
            created_at=now or now_utc(),
        )

        if self._notifier is not None:
            target = self._employees.get_by_id(target_id) if target_id else None
            self._notifier.dispatch(self._notifier.notify_announcement, announcement, target)
        return announcement

    def delete(self, announcement_id: int) -> None:
        if not self._announcements.delete_by_id(int(announcement_id)):
            raise NotFoundError("Announcement not found")
