from __future__ import annotations

from datetime import date, datetime, timezone

import pytest
import requests

from src.employee_management.employee_management.announcements.model import Announcement
from src.employee_management.employee_management.core.enums import AnnouncementType, LeaveAction, LeaveStatus
from src.employee_management.employee_management.core.exceptions import EmailDeliveryError
from src.employee_management.employee_management.employees.model import Employee
from src.employee_management.employee_management.leave.model import LeaveRequest
from src.employee_management.employee_management.notifications.model import EmailMessage
from src.employee_management.employee_management.notifications.recipients import (
    RecipientDirectory,
    parse_department_emails,
    split_addresses,
)
from src.employee_management.employee_management.notifications.resend_client import ResendClient
from src.employee_management.employee_management.notifications.service import NotificationService

from tests.stubs import StubEmailClient

NOW = datetime(2025, 1, 15, 9, 0, 0, tzinfo=timezone.utc)


class FakeResponse:
    def __init__(self, status_code, body=None):
        self.status_code = status_code
        self._body = body
        self.text = "" if body is None else str(body)
        self.reason = "Error"

    def json(self):
        if self._body is None:
            raise ValueError("no json")
        return self._body


class FakeSession:
    def __init__(self, response=None, error=None):
        self.calls = []
        self._response = response
        self._error = error

    def post(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self._error:
            raise self._error
        return self._response


def _directory() -> RecipientDirectory:
    return RecipientDirectory.from_settings(
        hr_email="hr@company.com, hr2@company.com",
        department_head_email="head@company.com",
        department_emails="operations=ops@company.com;Listing=list@company.com,ops@company.com",
    )


def _employee() -> Employee:
    return Employee(
        employee_id=2,
        name="Jane <Smith>",
        email="jane@company.com",
        position="Designer",
        department=None,
        role=None,
        leave_balance=2,
        last_balance_reset=NOW,
    )


def test_split_addresses_trims_and_dedupes():
    assert split_addresses(" a@x.com, ,b@x.com,a@x.com,not-an-address ") == ("a@x.com", "b@x.com")
    assert split_addresses(None) == ()


def test_parse_department_emails_lowercases_keys():
    mapping = parse_department_emails("Ops=a@x.com; =b@x.com;junk;hr=c@x.com")

    assert mapping == {"ops": ("a@x.com",), "hr": ("c@x.com",)}


def test_directory_routes_by_department():
    directory = _directory()

    assert directory.for_department("Operations") == ("hr@company.com", "hr2@company.com", "ops@company.com")
    assert directory.for_department("marketing") == ("hr@company.com", "hr2@company.com", "head@company.com")
    assert directory.company_wide() == (
        "hr@company.com",
        "hr2@company.com",
        "head@company.com",
        "ops@company.com",
        "list@company.com",
    )


def test_disabled_service_returns_not_configured():
    svc = NotificationService(None, _directory(), sender="EMS <noreply@company.com>")

    result = svc.send_test_email(now=NOW)
    svc.shutdown()

    assert not result.success
    assert result.message == "Email service not configured"
    assert not svc.enabled


def test_no_recipients_is_a_failed_result():
    svc = NotificationService(StubEmailClient(), RecipientDirectory(), sender="EMS <noreply@company.com>")
    announcement = Announcement(
        announcement_id=1,
        title="Holiday",
        message="Office closed",
        announcement_type=AnnouncementType.COMPANY,
        target_employee_id=None,
        created_at=NOW,
    )

    result = svc.notify_announcement(announcement)
    svc.shutdown()

    assert result.to_dict() == {"success": False, "message": "No recipients configured"}


def test_individual_announcement_goes_to_target():
    client = StubEmailClient()
    svc = NotificationService(client, _directory(), sender="EMS <noreply@company.com>")
    announcement = Announcement(
        announcement_id=1,
        title="Review",
        message="See you at 3pm",
        announcement_type=AnnouncementType.INDIVIDUAL,
        target_employee_id=2,
        created_at=NOW,
    )

    result = svc.notify_announcement(announcement, _employee())
    svc.shutdown()

    assert result.success
    assert client.sent[0].to == ("jane@company.com",)
    assert client.sent[0].subject == "New Announcement - Review"


def test_leave_notification_escapes_user_input():
    client = StubEmailClient()
    svc = NotificationService(client, _directory(), sender="EMS <noreply@company.com>")
    leave = LeaveRequest(
        request_id=1,
        employee_id=2,
        start_date=date(2025, 1, 20),
        end_date=date(2025, 1, 21),
        leave_type="sick",
        reason="<script>alert(1)</script>",
        status=LeaveStatus.PENDING,
        requested_at=NOW,
    )

    result = svc.dispatch(svc.notify_leave, leave, _employee(), LeaveAction.CREATE).result()
    svc.shutdown()

    message = client.sent[0]
    assert result.success
    assert result.message_id == "msg-1"
    assert message.to == ("hr@company.com", "hr2@company.com", "head@company.com")
    assert message.subject == "Leave Request Create - Jane <Smith>"
    assert "<script>" not in message.html
    assert "&lt;script&gt;" in message.html


def test_delivery_error_becomes_failed_result():
    svc = NotificationService(StubEmailClient(fail_with="timeout"), _directory(), sender="EMS <noreply@company.com>")

    result = svc.send_test_email(now=NOW)
    svc.shutdown()

    assert not result.success
    assert result.error == "timeout"
    assert result.failure_reason == "timeout"


def test_resend_client_posts_message():
    session = FakeSession(FakeResponse(200, {"id": "abc123"}))
    client = ResendClient("re_key", session=session, timeout=3)

    message_id = client.send(EmailMessage(sender="EMS <a@x.com>", to=("b@x.com",), subject="Hi", html="<p>Hi</p>"))

    url, kwargs = session.calls[0]
    assert message_id == "abc123"
    assert url == "https://api.resend.com/emails"
    assert kwargs["headers"] == {"Authorization": "Bearer re_key"}
    assert kwargs["json"]["to"] == ["b@x.com"]
    assert kwargs["timeout"] == 3


def test_resend_client_raises_on_api_error():
    session = FakeSession(FakeResponse(422, {"message": "Invalid `from` field"}))
    client = ResendClient("re_key", session=session)

    with pytest.raises(EmailDeliveryError, match="422: Invalid `from` field"):
        client.send(EmailMessage(sender="bad", to=("b@x.com",), subject="Hi", html="x"))


def test_resend_client_wraps_transport_errors():
    session = FakeSession(error=requests.ConnectionError("refused"))
    client = ResendClient("re_key", session=session)

    with pytest.raises(EmailDeliveryError, match="refused"):
        client.send(EmailMessage(sender="a@x.com", to=("b@x.com",), subject="Hi", html="x"))
