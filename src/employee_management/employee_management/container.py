from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from .announcements.json_repository import JsonAnnouncementRepository
from .announcements.service import AnnouncementService
from .attendance.json_repository import JsonAttendanceRepository
from .attendance.service import AttendanceService
from .core.constants import DEFAULT_EMAIL_TIMEOUT_SECONDS, PLACEHOLDER_RESEND_KEY
from .employees.json_repository import JsonEmployeeRepository
from .employees.service import EmployeeService
from .issues.json_repository import JsonIssueRepository
from .issues.service import IssueService
from .leave.json_repository import JsonLeaveRepository
from .leave.service import LeaveService
from .notifications.model import EmailClient
from .notifications.recipients import RecipientDirectory
from .notifications.resend_client import ResendClient
from .notifications.service import NotificationService
from .storage.json_store import JsonDocumentStore
from .tasks.json_repository import JsonTaskRepository
from .tasks.service import TaskService
from .users.memory_repository import InMemoryUserRepository
from .users.service import AuthService
from .workhours.json_repository import JsonWorkHoursRepository
from .workhours.service import WorkHoursService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    store: JsonDocumentStore

    employees_repo: JsonEmployeeRepository
    attendance_repo: JsonAttendanceRepository
    tasks_repo: JsonTaskRepository
    leave_repo: JsonLeaveRepository
    announcements_repo: JsonAnnouncementRepository
    issues_repo: JsonIssueRepository
    work_hours_repo: JsonWorkHoursRepository
    users_repo: InMemoryUserRepository

    notification_service: NotificationService
    employee_service: EmployeeService
    attendance_service: AttendanceService
    task_service: TaskService
    leave_service: LeaveService
    announcement_service: AnnouncementService
    issue_service: IssueService
    work_hours_service: WorkHoursService
    auth_service: AuthService


def build_email_client(settings: Mapping[str, Any]) -> Optional[EmailClient]:
    api_key = (settings.get("RESEND_API_KEY") or "").strip()
    if not api_key or api_key == PLACEHOLDER_RESEND_KEY:
        logger.warning("RESEND_API_KEY not set, email notifications are disabled")
        return None
    return ResendClient(api_key, timeout=float(settings.get("EMAIL_TIMEOUT") or DEFAULT_EMAIL_TIMEOUT_SECONDS))


def build_container(*, settings: Mapping[str, Any], email_client: Optional[EmailClient] = None) -> Container:
    store = JsonDocumentStore(settings["DATA_FILE"], seed_demo_data=bool(settings.get("SEED_DEMO_DATA", True)))
    store.load()

    employees_repo = JsonEmployeeRepository(store)
    attendance_repo = JsonAttendanceRepository(store)
    tasks_repo = JsonTaskRepository(store)
    leave_repo = JsonLeaveRepository(store)
    announcements_repo = JsonAnnouncementRepository(store)
    issues_repo = JsonIssueRepository(store)
    work_hours_repo = JsonWorkHoursRepository(store)
    users_repo = InMemoryUserRepository.with_demo_users()

    notification_service = NotificationService(
        email_client if email_client is not None else build_email_client(settings),
        RecipientDirectory.from_settings(
            hr_email=settings.get("HR_EMAIL"),
            department_head_email=settings.get("DEPARTMENT_HEAD_EMAIL"),
            department_emails=settings.get("DEPARTMENT_EMAILS"),
        ),
        sender=str(settings.get("EMAIL_FROM") or ""),
    )

    return Container(
        store=store,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        tasks_repo=tasks_repo,
        leave_repo=leave_repo,
        announcements_repo=announcements_repo,
        issues_repo=issues_repo,
        work_hours_repo=work_hours_repo,
        users_repo=users_repo,
        notification_service=notification_service,
        employee_service=EmployeeService(employees_repo, atomic=store.transaction),
        attendance_service=AttendanceService(attendance_repo),
        task_service=TaskService(tasks_repo, atomic=store.transaction),
        leave_service=LeaveService(leave_repo, employees_repo, notification_service, atomic=store.transaction),
        announcement_service=AnnouncementService(announcements_repo, employees_repo, notification_service),
        issue_service=IssueService(issues_repo, employees_repo, notification_service, atomic=store.transaction),
        work_hours_service=WorkHoursService(work_hours_repo, atomic=store.transaction),
        auth_service=AuthService(users_repo),
    )
