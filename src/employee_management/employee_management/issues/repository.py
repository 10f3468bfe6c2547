from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import IssuePriority, IssueStatus
from .model import Issue


class IssueRepository(Protocol):
    def list_all(self) -> Sequence[Issue]:
        raise NotImplementedError

    def list_for_employee(self, employee_id: int) -> Sequence[Issue]:
        raise NotImplementedError

    def get_by_id(self, issue_id: int) -> Optional[Issue]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        title: str,
        description: str,
        priority: IssuePriority,
        status: IssueStatus,
        assigned_to: str,
        department: str,
        created_at: datetime,
    ) -> Issue:
        raise NotImplementedError

    def update(self, issue: Issue) -> bool:
        raise NotImplementedError

    def delete_by_id(self, issue_id: int) -> bool:
        raise NotImplementedError
