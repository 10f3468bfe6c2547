from __future__ import annotations

import logging
from contextlib import nullcontext
from dataclasses import replace
from datetime import datetime
from typing import TYPE_CHECKING, Any, Callable, ContextManager, Optional, Sequence

from ..common.datetime_utils import now_utc
from ..common.transitions import ensure_transition
from ..common.validators import as_actor, as_enum, as_id, is_blank, optional_text, require_non_empty
from ..core.constants import HR_DEPARTMENT
from ..core.enums import IssuePriority, IssueStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .model import Issue
from .repository import IssueRepository

if TYPE_CHECKING:
    from ..notifications.service import NotificationService

logger = logging.getLogger(__name__)

ISSUE_TRANSITIONS = {
    IssueStatus.OPEN: frozenset({IssueStatus.IN_PROGRESS, IssueStatus.RESOLVED, IssueStatus.CLOSED}),
    IssueStatus.IN_PROGRESS: frozenset({IssueStatus.RESOLVED, IssueStatus.CLOSED}),
    IssueStatus.RESOLVED: frozenset({IssueStatus.CLOSED, IssueStatus.IN_PROGRESS}),
    IssueStatus.CLOSED: frozenset(),
}

RESOLVING_STATUSES = frozenset({IssueStatus.RESOLVED, IssueStatus.CLOSED})


class IssueService:
    """Use case: employees report issues; departments work them to closure."""

    def __init__(
        self,
        issues: IssueRepository,
        employees: EmployeeRepository,
        notifier: Optional["NotificationService"] = None,
        *,
        atomic: Optional[Callable[[], ContextManager]] = None,
    ):
        self._issues = issues
        self._employees = employees
        self._notifier = notifier
        self._atomic = atomic or nullcontext

    def list_all(self) -> Sequence[Issue]:
        return self._issues.list_all()

    def list_for_employee(self, employee_id: int) -> Sequence[Issue]:
        return self._issues.list_for_employee(int(employee_id))

    def list_for_department(self, department: str) -> Sequence[Issue]:
        """HR sees every issue; other departments see what is routed to them."""
        issues = self._issues.list_all()
        if department.strip().lower() == HR_DEPARTMENT:
            return issues
        return [i for i in issues if i.belongs_to(department)]

    def get(self, issue_id: int) -> Issue:
        issue = self._issues.get_by_id(int(issue_id))
        if not issue:
            raise NotFoundError("Issue not found")
        return issue

    def create(
        self,
        *,
        employee_id: Any,
        title: Any,
        description: Any,
        assigned_to: Any,
        priority: Any = None,
        department: Any = None,
        now: Optional[datetime] = None,
    ) -> Issue:
        """Store the issue, then wait for the department notification.

        The outcome of the email is recorded on the issue; it never fails
        the create.
        """
        if any(is_blank(v) for v in (employee_id, title, description, assigned_to)):
            raise ValidationError("Employee ID, title, description and assigned department are required")

        assigned = require_non_empty(assigned_to, "assignedTo")
        issue = self._issues.create(
            employee_id=as_id(employee_id, "employeeId"),
            title=require_non_empty(title, "title"),
            description=require_non_empty(description, "description"),
            priority=IssuePriority.MEDIUM if is_blank(priority) else as_enum(IssuePriority, priority, "priority"),
            status=IssueStatus.OPEN,
            assigned_to=assigned,
            department=optional_text(department, "department") or assigned,
            created_at=now or now_utc(),
        )
        if self._notifier is None:
            return issue

        outcome = self._notification_outcome(issue)
        # Other requests may have changed the issue while the email was in flight.
        with self._atomic():
            current = self._issues.get_by_id(issue.issue_id)
            if not current:
                return replace(issue, **outcome)
            annotated = replace(current, **outcome)
            self._issues.update(annotated)
        return annotated

    def update(
        self,
        issue_id: int,
        *,
        status: Any = None,
        assigned_to: Any = None,
        department: Any = None,
        priority: Any = None,
        resolved_by: Any = None,
        resolution: Any = None,
        now: Optional[datetime] = None,
    ) -> Issue:
        """Apply a partial update.

        `resolved_by` and `resolution` only stick when the issue ends up
        Resolved or Closed.
        """
        now = now or now_utc()
        with self._atomic():
            issue = self.get(issue_id)
            updated = issue

            if status is not None:
                target = as_enum(IssueStatus, status, "status")
                if target != issue.status:
                    ensure_transition(ISSUE_TRANSITIONS, issue.status, target, subject="Issue")
                    updated = replace(updated, status=target)
                    if target in RESOLVING_STATUSES:
                        updated = replace(updated, resolved_at=now)

            if updated.status in RESOLVING_STATUSES:
                if not is_blank(resolved_by):
                    updated = replace(updated, resolved_by=as_actor(resolved_by, "resolvedBy"))
                if not is_blank(resolution):
                    updated = replace(updated, resolution=optional_text(resolution, "resolution"))

            if not is_blank(assigned_to):
                target_department = require_non_empty(assigned_to, "assignedTo")
                updated = replace(
                    updated, assigned_to=target_department, department=target_department, reassigned_at=now
                )
            elif not is_blank(department):
                target_department = require_non_empty(department, "department")
                updated = replace(updated, assigned_to=target_department, department=target_department)

            if priority is not None:
                updated = replace(updated, priority=as_enum(IssuePriority, priority, "priority"))

            if updated != issue:
                self._issues.update(updated)
        return updated

    def delete(self, issue_id: int) -> None:
        if not self._issues.delete_by_id(int(issue_id)):
            raise NotFoundError("Issue not found")

    def _notification_outcome(self, issue: Issue) -> dict:
        """Wait for the department email and return the fields recording how it went."""
        employee = self._employees.get_by_id(issue.employee_id)
        try:
            result = self._notifier.dispatch(self._notifier.notify_issue, issue, employee).result()
        except Exception as e:
            logger.exception("Issue notification for issue %s failed", issue.issue_id)
            return {"email_notification_sent": False, "email_sent_to": (), "email_error": str(e)}

        if result.success:
            return {"email_notification_sent": True, "email_sent_to": tuple(result.recipients), "email_error": None}
        return {"email_notification_sent": False, "email_sent_to": (), "email_error": result.failure_reason}
