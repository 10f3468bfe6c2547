from __future__ import annotations

import logging
from contextlib import nullcontext
from dataclasses import replace
from datetime import datetime
from typing import TYPE_CHECKING, Any, Callable, ContextManager, Optional, Sequence

from ..common.datetime_utils import now_utc
from ..common.validators import as_date, as_id, is_blank, require_non_empty
from ..core.constants import MONTHLY_LEAVE_ALLOWANCE
from ..core.enums import LeaveAction, LeaveStatus
from ..core.exceptions import BusinessRuleError, NotFoundError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .model import LeaveRequest
from .repository import LeaveRepository

if TYPE_CHECKING:
    from ..notifications.service import NotificationService

logger = logging.getLogger(__name__)

REVIEW_OUTCOMES = {
    LeaveStatus.APPROVED: LeaveAction.APPROVE,
    LeaveStatus.REJECTED: LeaveAction.REJECT,
}


def apply_monthly_reset(employee: Employee, now: datetime) -> Employee:
    """Restore the monthly allowance the first time it is checked in a new month."""
    last_reset = employee.last_balance_reset or now
    if (last_reset.year, last_reset.month) != (now.year, now.month):
        return replace(employee, leave_balance=MONTHLY_LEAVE_ALLOWANCE, last_balance_reset=now)
    return employee


class LeaveService:
    """Use case: employees request leave, HR approves or rejects it once."""

    def __init__(
        self,
        leaves: LeaveRepository,
        employees: EmployeeRepository,
        notifier: Optional["NotificationService"] = None,
        *,
        atomic: Optional[Callable[[], ContextManager]] = None,
    ):
        self._leaves = leaves
        self._employees = employees
        self._notifier = notifier
        self._atomic = atomic or nullcontext

    def list_all(self, *, status: Optional[str] = None) -> Sequence[LeaveRequest]:
        return self._leaves.list_all(status=status)

    def list_for_employee(self, employee_id: int) -> Sequence[LeaveRequest]:
        return self._leaves.list_for_employee(int(employee_id))

    def get(self, request_id: int) -> LeaveRequest:
        leave = self._leaves.get_by_id(int(request_id))
        if not leave:
            raise NotFoundError("Leave request not found")
        return leave

    def create(
        self,
        *,
        employee_id: Any,
        start_date: Any,
        end_date: Any,
        leave_type: Any,
        reason: Any,
        now: Optional[datetime] = None,
    ) -> LeaveRequest:
        if any(is_blank(v) for v in (employee_id, start_date, end_date, leave_type, reason)):
            raise ValidationError("All fields are required")

        start = as_date(start_date, "startDate")
        end = as_date(end_date, "endDate")
        if start > end:
            raise ValidationError("End date must be after start date")

        leave = self._leaves.create(
            employee_id=as_id(employee_id, "employeeId"),
            start_date=start,
            end_date=end,
            leave_type=require_non_empty(leave_type, "type"),
            reason=require_non_empty(reason, "reason"),
            status=LeaveStatus.PENDING,
            requested_at=now or now_utc(),
        )
        self._notify(leave, self._employees.get_by_id(leave.employee_id), LeaveAction.CREATE)
        return leave

    def review(self, request_id: int, *, status: Any, now: Optional[datetime] = None) -> LeaveRequest:
        """Approve or reject a pending request.

        Approval deducts the inclusive day span from the employee's balance,
        after the monthly reset; an insufficient balance changes nothing.
        """
        now = now or now_utc()
        with self._atomic():
            leave = self.get(request_id)

            try:
                target = LeaveStatus(status)
            except ValueError:
                target = None
            if target not in REVIEW_OUTCOMES:
                raise ValidationError("Status must be Approved or Rejected")

            if leave.status != LeaveStatus.PENDING:
                raise BusinessRuleError("Leave request has already been reviewed")

            employee = self._employees.get_by_id(leave.employee_id)
            if target == LeaveStatus.APPROVED:
                if not employee:
                    raise BusinessRuleError("Employee not found")
                employee = apply_monthly_reset(employee, now)
                if employee.leave_balance < leave.day_span:
                    raise BusinessRuleError("Insufficient leave balance")
                employee = replace(employee, leave_balance=employee.leave_balance - leave.day_span)
                self._employees.update(employee)

            reviewed = replace(leave, status=target, reviewed_at=now)
            self._leaves.update(reviewed)

        logger.info("Leave request %s %s", reviewed.request_id, target.value.lower())
        self._notify(reviewed, employee, REVIEW_OUTCOMES[target])
        return reviewed

    def delete(self, request_id: int) -> None:
        if not self._leaves.delete_by_id(int(request_id)):
            raise NotFoundError("Leave request not found")

    def _notify(self, leave: LeaveRequest, employee: Optional[Employee], action: LeaveAction) -> None:
        if self._notifier is None:
            return
        self._notifier.dispatch(self._notifier.notify_leave, leave, employee, action)
