import os

from .config import Config, env_bool

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DATA_FILE = Config.DATA_FILE
SEED_DEMO_DATA = Config.SEED_DEMO_DATA

API_PREFIX = Config.API_PREFIX
PORT = Config.PORT
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

RESEND_API_KEY = Config.RESEND_API_KEY
EMAIL_FROM = Config.EMAIL_FROM
EMAIL_TIMEOUT = Config.EMAIL_TIMEOUT
HR_EMAIL = Config.HR_EMAIL
DEPARTMENT_HEAD_EMAIL = Config.DEPARTMENT_HEAD_EMAIL
DEPARTMENT_EMAILS = Config.DEPARTMENT_EMAILS

DEBUG = env_bool("DEBUG", "1")
