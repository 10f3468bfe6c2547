from __future__ import annotations

from datetime import datetime, timezone

import pytest

from src.employee_management.employee_management.main import create_app

from tests.stubs import StubEmailClient


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 1, 15, 9, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def stub_email() -> StubEmailClient:
    return StubEmailClient()


@pytest.fixture
def make_app(tmp_path, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    apps = []

    def _make(email_client=None, **overrides):
        settings = {
            "DATA_FILE": str(tmp_path / "data.json"),
            "SEED_DEMO_DATA": False,
            "RESEND_API_KEY": "",
            "HR_EMAIL": "hr@company.com",
            "DEPARTMENT_HEAD_EMAIL": "head@company.com",
            "DEPARTMENT_EMAILS": "operations=ops@company.com",
        }
        settings.update(overrides)
        app = create_app(settings, email_client=email_client)
        apps.append(app)
        return app

    yield _make

    for app in apps:
        app.extensions["container"].notification_service.shutdown(wait=True)


@pytest.fixture
def app(make_app):
    return make_app()


@pytest.fixture
def client(app):
    return app.test_client()
