import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parents[1]


def env_bool(name: str, default: str = "0") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "employee-management-secret"

    # Storage
    DATA_FILE = os.environ.get("DATA_FILE") or str(BASE_DIR / "backend" / "data.json")
    SEED_DEMO_DATA = env_bool("SEED_DEMO_DATA", "1")

    # HTTP
    API_PREFIX = os.environ.get("API_PREFIX", "/api")
    PORT = int(os.environ.get("PORT", "5000"))
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

    # Email (Resend)
    RESEND_API_KEY = os.environ.get("RESEND_API_KEY", "")
    EMAIL_FROM = os.environ.get("EMAIL_FROM", "Employee Management <onboarding@resend.dev>")
    EMAIL_TIMEOUT = float(os.environ.get("EMAIL_TIMEOUT", "10"))
    HR_EMAIL = os.environ.get("HR_EMAIL", "")
    DEPARTMENT_HEAD_EMAIL = os.environ.get("DEPARTMENT_HEAD_EMAIL", "")
    # dept=a@x.com,b@x.com;dept2=c@x.com
    DEPARTMENT_EMAILS = os.environ.get("DEPARTMENT_EMAILS", "")
