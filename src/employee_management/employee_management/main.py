from __future__ import annotations

import importlib
import logging
from typing import Any, Mapping, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException

from config import get_settings_module

from .announcements.controller import register as register_announcements
from .attendance.controller import register as register_attendance
from .container import build_container
from .core.constants import DEFAULT_API_PREFIX
from .core.exceptions import DomainError
from .employees.controller import register as register_employees
from .issues.controller import register as register_issues
from .leave.controller import register as register_leave
from .notifications.controller import register as register_notifications
from .notifications.model import EmailClient
from .tasks.controller import register as register_tasks
from .users.controller import register as register_users
from .workhours.controller import register as register_work_hours

logger = logging.getLogger(__name__)

SETTING_NAMES = (
    "SECRET_KEY",
    "DEBUG",
    "DATA_FILE",
    "SEED_DEMO_DATA",
    "API_PREFIX",
    "RESEND_API_KEY",
    "EMAIL_FROM",
    "EMAIL_TIMEOUT",
    "HR_EMAIL",
    "DEPARTMENT_HEAD_EMAIL",
    "DEPARTMENT_EMAILS",
    "LOG_LEVEL",
    "PORT",
)


def create_app(overrides: Optional[Mapping[str, Any]] = None, *, email_client: Optional[EmailClient] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    for name in SETTING_NAMES:
        if hasattr(settings, name):
            app.config[name] = getattr(settings, name)
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config.setdefault("API_PREFIX", DEFAULT_API_PREFIX)
    app.config.update(overrides or {})
    app.secret_key = app.config.get("SECRET_KEY")

    logging.basicConfig(
        level=str(app.config.get("LOG_LEVEL") or "INFO").upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("Starting Employee Management API (settings=%s, data=%s)", settings_module, app.config.get("DATA_FILE"))

    CORS(app)
    _register_error_handlers(app)

    @app.before_request
    def log_request():
        logger.debug("%s %s", request.method, request.path)

    @app.route("/", methods=["GET"], endpoint="index")
    def index():
        return jsonify({"message": "Employee Management System API"})

    container = build_container(settings=app.config, email_client=email_client)
    app.extensions["container"] = container

    register_users(app, container)
    register_employees(app, container)
    register_attendance(app, container)
    register_tasks(app, container)
    register_leave(app, container)
    register_announcements(app, container)
    register_issues(app, container)
    register_work_hours(app, container)
    register_notifications(app, container)

    return app


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(DomainError)
    def handle_domain_error(e: DomainError):
        return jsonify({"message": str(e)}), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e: HTTPException):
        return jsonify({"message": e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected(e: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({"message": "Internal server error"}), 500
