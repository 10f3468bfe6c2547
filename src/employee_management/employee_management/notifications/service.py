from __future__ import annotations

import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from datetime import datetime
from typing import Callable, Optional, Sequence

from ..announcements.model import Announcement
from ..common.datetime_utils import format_timestamp, now_utc
from ..core.constants import HR_DEPARTMENT
from ..core.enums import AnnouncementType, LeaveAction
from ..core.exceptions import EmailDeliveryError
from ..employees.model import Employee
from ..issues.model import Issue
from ..leave.model import LeaveRequest
from . import templates
from .model import EmailClient, EmailMessage, NotificationResult
from .recipients import RecipientDirectory

logger = logging.getLogger(__name__)

NOT_CONFIGURED = "Email service not configured"
NO_RECIPIENTS = "No recipients configured"
UNKNOWN_EMPLOYEE = "Unknown Employee"


class NotificationService:
    """Best-effort email notifications.

    Every send returns a `NotificationResult`; nothing here raises to the
    caller. `dispatch` runs a send on a worker thread and returns its future,
    so callers decide whether to wait for the outcome.
    """

    def __init__(
        self,
        client: Optional[EmailClient],
        directory: RecipientDirectory,
        *,
        sender: str,
        executor: Optional[Executor] = None,
    ):
        self._client = client
        self._directory = directory
        self._sender = sender
        self._executor = executor or ThreadPoolExecutor(max_workers=2, thread_name_prefix="notify")

    @property
    def enabled(self) -> bool:
        return self._client is not None

    def dispatch(self, send: Callable[..., NotificationResult], *args, **kwargs) -> "Future[NotificationResult]":
        future = self._executor.submit(send, *args, **kwargs)
        future.add_done_callback(_log_outcome)
        return future

    def shutdown(self, *, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def notify_issue(self, issue: Issue, employee: Optional[Employee]) -> NotificationResult:
        data = issue.to_dict()
        html = templates.render(
            "issue.html",
            issue=data,
            employee_name=employee.name if employee else UNKNOWN_EMPLOYEE,
        )
        return self._send(
            subject=templates.issue_subject(data),
            html=html,
            recipients=self._directory.for_department(issue.assigned_to or issue.department),
            label="issue",
        )

    def notify_leave(self, leave: LeaveRequest, employee: Optional[Employee], action: LeaveAction) -> NotificationResult:
        employee_name = employee.name if employee else UNKNOWN_EMPLOYEE
        action_label = action.value.capitalize()
        html = templates.render(
            "leave.html",
            leave=leave.to_dict(),
            employee_name=employee_name,
            action_label=action_label,
        )
        return self._send(
            subject=templates.leave_subject(action_label, employee_name),
            html=html,
            recipients=self._directory.for_department(HR_DEPARTMENT),
            label=f"leave {action.value}",
        )

    def notify_announcement(self, announcement: Announcement, target: Optional[Employee] = None) -> NotificationResult:
        if announcement.announcement_type == AnnouncementType.INDIVIDUAL and target:
            recipients: Sequence[str] = tuple(e for e in (target.email,) if e)
        else:
            recipients = self._directory.company_wide()

        data = announcement.to_dict()
        html = templates.render("announcement.html", announcement=data, target_name=target.name if target else None)
        return self._send(
            subject=templates.announcement_subject(data),
            html=html,
            recipients=recipients,
            label="announcement",
        )

    def send_test_email(self, *, now: Optional[datetime] = None) -> NotificationResult:
        recipients = self._directory.hr_emails[:1] or ("test@example.com",)
        html = templates.render("test.html", sent_at=format_timestamp(now or now_utc()))
        return self._send(subject=templates.TEST_SUBJECT, html=html, recipients=recipients, label="test")

    def _send(self, *, subject: str, html: str, recipients: Sequence[str], label: str) -> NotificationResult:
        if not self._client:
            logger.info("Email service disabled, skipping %s notification", label)
            return NotificationResult(success=False, message=NOT_CONFIGURED)
        if not recipients:
            logger.info("No email recipients configured for %s notification", label)
            return NotificationResult(success=False, message=NO_RECIPIENTS)

        try:
            message_id = self._client.send(
                EmailMessage(sender=self._sender, to=tuple(recipients), subject=subject, html=html)
            )
        except EmailDeliveryError as e:
            logger.error("Failed to send %s notification: %s", label, e)
            return NotificationResult(success=False, message="Email delivery failed", error=str(e))

        logger.info("Sent %s notification %s to %s", label, message_id, ", ".join(recipients))
        return NotificationResult(
            success=True,
            message="Email notification sent",
            message_id=message_id,
            recipients=tuple(recipients),
        )


def _log_outcome(future: Future) -> None:
    if future.cancelled():
        return
    error = future.exception()
    if error is not None:
        logger.error("Notification task crashed", exc_info=error)
        return
    result = future.result()
    if not result.success:
        logger.warning("Notification not sent: %s", result.failure_reason)
