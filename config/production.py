import os

from .config import Config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DATA_FILE = Config.DATA_FILE
# Production starts from an empty document unless asked otherwise
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))

API_PREFIX = Config.API_PREFIX
PORT = Config.PORT
LOG_LEVEL = Config.LOG_LEVEL

RESEND_API_KEY = Config.RESEND_API_KEY
EMAIL_FROM = Config.EMAIL_FROM
EMAIL_TIMEOUT = Config.EMAIL_TIMEOUT
HR_EMAIL = Config.HR_EMAIL
DEPARTMENT_HEAD_EMAIL = Config.DEPARTMENT_HEAD_EMAIL
DEPARTMENT_EMAILS = Config.DEPARTMENT_EMAILS

DEBUG = False
