from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone

from src.employee_management.employee_management.tasks import service as task_service_module

from tests.stubs import StubEmailClient


def _employee(client, **overrides):
    body = {"name": "A", "email": "a@x.com", "position": "Dev"}
    body.update(overrides)
    resp = client.post("/api/employees", json=body)
    assert resp.status_code == 201
    return resp.get_json()


def test_root_message(client):
    assert client.get("/").get_json() == {"message": "Employee Management System API"}


def test_employee_round_trip(client):
    created = _employee(client)

    fetched = client.get(f"/api/employees/{created['id']}").get_json()

    assert created["id"] == 1
    assert {k: fetched[k] for k in ("id", "name", "email", "position", "leaveBalance")} == {
        "id": 1,
        "name": "A",
        "email": "a@x.com",
        "position": "Dev",
        "leaveBalance": 2,
    }


def test_partial_update_keeps_other_fields(client):
    created = _employee(client, department="ops")

    resp = client.put(f"/api/employees/{created['id']}", json={"position": "Lead"})

    assert resp.status_code == 200
    assert resp.get_json()["department"] == "ops"
    assert resp.get_json()["position"] == "Lead"


def test_request_schema_errors(client):
    resp = client.post("/api/employees", json={"name": "A", "email": "a@x.com", "position": "Dev", "salary": 1})
    assert resp.status_code == 400
    assert resp.get_json() == {"message": "Unexpected field(s): salary"}

    resp = client.post("/api/employees", data="[1, 2]", content_type="application/json")
    assert resp.status_code == 400
    assert resp.get_json() == {"message": "Request body must be a JSON object"}


def test_unknown_route_and_id(client):
    assert client.get("/api/employees/99").status_code == 404
    assert client.get("/api/employees/99").get_json() == {"message": "Employee not found"}
    assert client.get("/api/nothing").status_code == 404
    assert client.get("/api/employees/abc").status_code == 404


def test_ids_not_reused_after_delete(client):
    first = _employee(client)
    client.delete(f"/api/employees/{first['id']}")

    second = _employee(client, email="b@x.com")

    assert second["id"] == first["id"] + 1


def test_attendance_mark_is_idempotent_per_day(client):
    body = {"employeeId": 1, "date": "2024-03-01", "status": "Present"}
    client.post("/api/attendance", json=body)
    client.post("/api/attendance", json=dict(body, status="WFH"))

    records = client.get("/api/attendance/employee/1").get_json()

    assert len(records) == 1
    assert records[0]["status"] == "WFH"
    assert client.get("/api/attendance?date=2024-03-01").get_json() == records
    assert client.get("/api/attendance?date=2024-03-02").get_json() == []


def test_leave_balance_scenario(client):
    employee = _employee(client)
    leave = client.post(
        "/api/leave",
        json={
            "employeeId": employee["id"],
            "startDate": "2024-01-01",
            "endDate": "2024-01-02",
            "type": "sick",
            "reason": "flu",
        },
    ).get_json()
    assert leave["status"] == "Pending"

    approved = client.put(f"/api/leave/{leave['id']}", json={"status": "Approved"})
    assert approved.get_json()["status"] == "Approved"
    assert client.get(f"/api/employees/{employee['id']}").get_json()["leaveBalance"] == 0

    again = client.put(f"/api/leave/{leave['id']}", json={"status": "Approved"})
    assert again.status_code == 400
    assert again.get_json() == {"message": "Leave request has already been reviewed"}

    extra = client.post(
        "/api/leave",
        json={"employeeId": 1, "startDate": "2024-01-05", "endDate": "2024-01-05", "type": "casual", "reason": "x"},
    ).get_json()
    resp = client.put(f"/api/leave/{extra['id']}", json={"status": "Approved"})
    assert resp.status_code == 400
    assert resp.get_json() == {"message": "Insufficient leave balance"}
    assert client.get(f"/api/leave/{extra['id']}").get_json()["status"] == "Pending"


def test_leave_start_after_end(client):
    resp = client.post(
        "/api/leave",
        json={"employeeId": 1, "startDate": "2024-02-02", "endDate": "2024-02-01", "type": "sick", "reason": "x"},
    )

    assert resp.status_code == 400
    assert resp.get_json() == {"message": "End date must be after start date"}


def test_recurring_task_resets_on_later_read(client, monkeypatch):
    task = client.post(
        "/api/tasks",
        json={"employeeId": 1, "title": "Daily report", "description": "Send it", "isRecurring": True},
    ).get_json()

    done = client.put(f"/api/tasks/{task['id']}", json={"action": "complete"}).get_json()
    assert done["status"] == "Completed"
    assert done["lastCompletedDate"] is not None

    later = datetime.now(timezone.utc) + timedelta(days=1)
    monkeypatch.setattr(task_service_module, "now_utc", lambda: later)

    tasks = client.get("/api/tasks").get_json()
    assert tasks[0]["status"] == "In Progress"


def test_issue_department_visibility(client):
    resp = client.post(
        "/api/issues",
        json={"employeeId": 1, "title": "Printer", "description": "Jammed", "assignedTo": "operations"},
    )
    assert resp.status_code == 201
    assert resp.get_json()["emailNotificationSent"] is False
    assert resp.get_json()["emailError"] == "Email service not configured"

    assert len(client.get("/api/issues/department/operations").get_json()) == 1
    assert client.get("/api/issues/department/listing").get_json() == []
    assert len(client.get("/api/issues/department/hr").get_json()) == 1


def test_illegal_issue_transition(client):
    issue = client.post(
        "/api/issues",
        json={"employeeId": 1, "title": "Printer", "description": "Jammed", "assignedTo": "operations"},
    ).get_json()
    client.put(f"/api/issues/{issue['id']}", json={"status": "Closed"})

    resp = client.put(f"/api/issues/{issue['id']}", json={"status": "In Progress"})

    assert resp.status_code == 400
    assert resp.get_json() == {"message": "Issue cannot move from 'Closed' to 'In Progress'"}


def test_issue_notification_with_email(make_app):
    email = StubEmailClient()
    client = make_app(email_client=email).test_client()

    issue = client.post(
        "/api/issues",
        json={"employeeId": 1, "title": "VPN", "description": "Down", "assignedTo": "operations", "priority": "high"},
    ).get_json()

    assert issue["emailNotificationSent"] is True
    assert issue["emailSentTo"] == ["hr@company.com", "ops@company.com"]
    assert client.get("/api/issues/employee/1").get_json()[0]["emailNotificationSent"] is True


def test_work_hours_check_out_before_check_in(client):
    resp = client.post("/api/workhours/checkout", json={"employeeId": 1})

    assert resp.status_code == 400
    assert resp.get_json() == {"message": "No check-in found for today"}


def test_work_hours_flow(client):
    assert client.post("/api/workhours/checkin", json={"employeeId": 1}).status_code == 201
    assert client.post("/api/workhours/checkin", json={"employeeId": 1}).status_code == 400

    entry = client.post("/api/workhours/checkout", json={"employeeId": 1}).get_json()
    assert entry["checkOut"] is not None

    summary = client.get("/api/workhours/weekly/1").get_json()
    assert len(summary["entries"]) == 1
    assert set(summary) == {"totalHours", "totalOvertime", "entries"}


def test_announcements(client):
    resp = client.post("/api/announcements", json={"title": "Hi", "message": "All hands", "targetEmployeeId": 3})
    assert resp.status_code == 201
    assert resp.get_json()["type"] == "company"
    assert resp.get_json()["targetEmployeeId"] is None

    missing = client.post("/api/announcements", json={"title": "", "message": "x"})
    assert missing.get_json() == {"message": "Title and message are required"}

    assert client.delete("/api/announcements/99").status_code == 404
    assert client.delete(f"/api/announcements/{resp.get_json()['id']}").get_json() == {
        "message": "Announcement deleted successfully"
    }


def test_auth_endpoints(client):
    login = client.post("/api/auth/login", json={"username": "hr@company.com", "password": "hr123"})
    assert login.get_json()["message"] == "Login successful"

    bad = client.post("/api/auth/login", json={"username": "hr@company.com", "password": "nope"})
    assert bad.status_code == 401

    assert client.post("/api/auth/validate", json={"userId": 99}).status_code == 401
    users = client.get("/api/auth/users").get_json()
    assert all("password" not in u and "passwordHash" not in u for u in users)

    created = client.post(
        "/api/auth/register",
        json={"username": "new@company.com", "password": "pw", "role": "manager", "name": "New", "employeeId": 2},
    )
    assert created.status_code == 201
    assert created.get_json()["user"]["employeeId"] == 2


def test_test_email_disabled_returns_500(client):
    resp = client.get("/api/test-email")

    assert resp.status_code == 500
    assert resp.get_json()["message"] == "Email service not configured"


def test_data_is_persisted_to_file(app, client):
    _employee(client)

    with open(app.config["DATA_FILE"], encoding="utf-8") as f:
        doc = json.load(f)

    assert doc["employees"][0]["name"] == "A"
    assert doc["sequences"]["employees"] == 2


def test_issue_resolved_with_numeric_user_id(client):
    issue = client.post(
        "/api/issues",
        json={"employeeId": 1, "title": "Printer", "description": "Jammed", "assignedTo": "operations"},
    ).get_json()

    resp = client.put(
        f"/api/issues/{issue['id']}",
        json={"status": "Resolved", "resolution": "fixed", "resolvedBy": 1},
    )

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["status"] == "Resolved"
    assert body["resolvedBy"] == 1
    assert body["resolution"] == "fixed"
    assert body["resolvedAt"] is not None


def test_issue_closed_while_email_is_sending_stays_closed(make_app):
    email = StubEmailClient()
    app = make_app(email_client=email)
    client = app.test_client()
    closes = []

    def close_issue(message):
        resp = app.test_client().put("/api/issues/1", json={"status": "Closed"})
        closes.append(resp.status_code)

    email.on_send = close_issue

    created = client.post(
        "/api/issues",
        json={"employeeId": 1, "title": "VPN", "description": "Down", "assignedTo": "operations"},
    ).get_json()

    assert closes == [200]
    assert created["status"] == "Closed"
    assert created["emailNotificationSent"] is True
    stored = client.get("/api/issues").get_json()[0]
    assert stored["status"] == "Closed"
    assert stored["resolvedAt"] is not None
    assert stored["emailSentTo"] == ["hr@company.com", "ops@company.com"]


def test_review_of_missing_leave_request_is_not_found(client):
    resp = client.put("/api/leave/99", json={"status": "Maybe"})

    assert resp.status_code == 404
    assert resp.get_json() == {"message": "Leave request not found"}


def test_records_missing_timestamps_still_list(make_app, tmp_path):
    legacy = {
        "employees": [],
        "leaveRequests": [
            {
                "id": 1,
                "employeeId": 1,
                "startDate": "2024-01-01",
                "endDate": "2024-01-02",
                "type": "sick",
                "reason": "flu",
                "status": "Pending",
            }
        ],
        "workHours": [{"id": 1, "employeeId": 1, "date": "2024-01-01", "totalHours": 0, "overtime": 0}],
    }
    (tmp_path / "legacy.json").write_text(json.dumps(legacy), encoding="utf-8")
    client = make_app(DATA_FILE=str(tmp_path / "legacy.json")).test_client()

    leave = client.get("/api/leave")
    assert leave.status_code == 200
    assert leave.get_json()[0]["requestedAt"] is None

    hours = client.get("/api/workhours")
    assert hours.status_code == 200
    assert hours.get_json()[0]["checkIn"] is None
