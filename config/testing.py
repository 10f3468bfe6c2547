import os
import tempfile

from .config import Config

SECRET_KEY = "test-secret"

DATA_FILE = os.path.join(tempfile.gettempdir(), "employee-management-test.json")
SEED_DEMO_DATA = False

API_PREFIX = Config.API_PREFIX
PORT = Config.PORT
LOG_LEVEL = "WARNING"

# Email stays disabled unless a test injects a client
RESEND_API_KEY = ""
EMAIL_FROM = "Employee Management <test@example.com>"
EMAIL_TIMEOUT = 1.0
HR_EMAIL = ""
DEPARTMENT_HEAD_EMAIL = ""
DEPARTMENT_EMAILS = ""

DEBUG = False
TESTING = True
