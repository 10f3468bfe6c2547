"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_API_PREFIX = "/api"
MONTHLY_LEAVE_ALLOWANCE = 2
STANDARD_WORK_HOURS = 8
WEEKLY_SUMMARY_DAYS = 7
DEFAULT_EMAIL_TIMEOUT_SECONDS = 10
RESEND_API_URL = "https://api.resend.com/emails"
PLACEHOLDER_RESEND_KEY = "your_resend_api_key_here"
HR_DEPARTMENT = "hr"
