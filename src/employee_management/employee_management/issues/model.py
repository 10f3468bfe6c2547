from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple, Union

from ..common.datetime_utils import format_optional_timestamp, parse_timestamp
from ..core.enums import IssuePriority, IssueStatus


@dataclass(frozen=True)
class Issue:
    """An issue raised by an employee and routed to a department.

    `assigned_to` and `department` name the same department; older records
    carry only one of them.
    """

    issue_id: int
    employee_id: int
    title: str
    description: str
    priority: IssuePriority
    status: IssueStatus
    assigned_to: Optional[str]
    department: Optional[str]
    created_at: Optional[datetime]
    assigned_at: Optional[datetime] = None
    resolved_at: Optional[datetime] = None
    resolved_by: Optional[Union[int, str]] = None
    resolution: Optional[str] = None
    reassigned_at: Optional[datetime] = None
    email_notification_sent: Optional[bool] = None
    email_sent_to: Tuple[str, ...] = ()
    email_error: Optional[str] = None

    def belongs_to(self, department: str) -> bool:
        wanted = department.strip().lower()
        return any(d and d.strip().lower() == wanted for d in (self.assigned_to, self.department))

    def to_dict(self) -> dict:
        data = {
            "id": self.issue_id,
            "employeeId": self.employee_id,
            "title": self.title,
            "description": self.description,
            "priority": self.priority.value,
            "status": self.status.value,
            "assignedTo": self.assigned_to,
            "department": self.department,
            "createdAt": format_optional_timestamp(self.created_at),
            "assignedAt": format_optional_timestamp(self.assigned_at),
            "resolvedAt": format_optional_timestamp(self.resolved_at),
            "resolvedBy": self.resolved_by,
            "resolution": self.resolution,
            "reassignedAt": format_optional_timestamp(self.reassigned_at),
        }
        if self.email_notification_sent is not None:
            data["emailNotificationSent"] = self.email_notification_sent
            if self.email_notification_sent:
                data["emailSentTo"] = list(self.email_sent_to)
            else:
                data["emailError"] = self.email_error
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Issue":
        return cls(
            issue_id=int(data["id"]),
            employee_id=int(data["employeeId"]),
            title=data.get("title") or "",
            description=data.get("description") or "",
            priority=IssuePriority(data.get("priority") or IssuePriority.MEDIUM.value),
            status=IssueStatus(data.get("status") or IssueStatus.OPEN.value),
            assigned_to=data.get("assignedTo"),
            department=data.get("department"),
            created_at=parse_timestamp(data.get("createdAt")),
            assigned_at=parse_timestamp(data.get("assignedAt")),
            resolved_at=parse_timestamp(data.get("resolvedAt")),
            resolved_by=data.get("resolvedBy"),
            resolution=data.get("resolution"),
            reassigned_at=parse_timestamp(data.get("reassignedAt")),
            email_notification_sent=data.get("emailNotificationSent"),
            email_sent_to=tuple(data.get("emailSentTo") or ()),
            email_error=data.get("emailError"),
        )
