from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..core.enums import IssuePriority, IssueStatus
from ..storage.collection import JsonCollection
from ..storage.document import ISSUES
from ..storage.json_store import JsonDocumentStore
from .model import Issue
from .repository import IssueRepository


class JsonIssueRepository(IssueRepository):
    def __init__(self, store: JsonDocumentStore):
        self._items = JsonCollection(store, ISSUES)

    def list_all(self) -> Sequence[Issue]:
        return [Issue.from_dict(r) for r in self._items.all()]

    def list_for_employee(self, employee_id: int) -> Sequence[Issue]:
        return [Issue.from_dict(r) for r in self._items.filter(lambda r: r.get("employeeId") == employee_id)]

    def get_by_id(self, issue_id: int) -> Optional[Issue]:
        record = self._items.find(issue_id)
        return Issue.from_dict(record) if record else None

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
        record = self._items.insert(
            lambda new_id: Issue(
                issue_id=new_id,
                employee_id=employee_id,
                title=title,
                description=description,
                priority=priority,
                status=status,
                assigned_to=assigned_to,
                department=department,
                created_at=created_at,
                assigned_at=created_at,
            ).to_dict()
        )
        return Issue.from_dict(record)

    def update(self, issue: Issue) -> bool:
        return self._items.replace(issue.issue_id, issue.to_dict())

    def delete_by_id(self, issue_id: int) -> bool:
        return self._items.remove(issue_id)
