from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Account roles used by the dashboard for routing."""

    HR = "hr"
    HEAD = "head"
    MANAGER = "manager"
    EMPLOYEE = "employee"


class AttendanceStatus(str, Enum):
    PRESENT = "Present"
    ABSENT = "Absent"
    WFH = "WFH"


class TaskStatus(str, Enum):
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"


class LeaveStatus(str, Enum):
    """Leave review flow: Pending -> Approved | Rejected."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class AnnouncementType(str, Enum):
    COMPANY = "company"
    INDIVIDUAL = "individual"


class IssuePriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class IssueStatus(str, Enum):
    OPEN = "Open"
    IN_PROGRESS = "In Progress"
    RESOLVED = "Resolved"
    CLOSED = "Closed"


class LeaveAction(str, Enum):
    """Which leave event a notification describes."""

    CREATE = "create"
    APPROVE = "approve"
    REJECT = "reject"
