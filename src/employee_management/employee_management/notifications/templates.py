"""Email subjects and bodies.

Bodies are deliberately plain; they are rendered with autoescaping because
titles and descriptions come straight from user input.
"""
from __future__ import annotations

from jinja2 import DictLoader, Environment, select_autoescape

_LAYOUT = """\
<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>{% block title %}{% endblock %}</title></head>
<body style="font-family: Arial, sans-serif; background: #f8f9fa; margin: 0; padding: 24px;">
  <div style="max-width: 600px; margin: 0 auto; background: #fff; border-radius: 8px; padding: 24px;">
    <h2 style="margin-top: 0;">{% block heading %}{% endblock %}</h2>
    {% block content %}{% endblock %}
    <p style="color: #6c757d; font-size: 12px; margin-top: 32px;">
      This is an automated notification from the Employee Management System.
      Please do not reply to this email.
    </p>
  </div>
</body>
</html>
"""

_ISSUE = """\
{% extends "layout.html" %}
{% block title %}Issue Notification{% endblock %}
{% block heading %}New {{ issue.priority|upper }} priority issue{% endblock %}
{% block content %}
<h3>{{ issue.title }}</h3>
<p>{{ issue.description }}</p>
<table cellpadding="6">
  <tr><th align="left">Reported by</th><td>{{ employee_name }}</td></tr>
  <tr><th align="left">Department</th><td>{{ issue.assignedTo or issue.department or "Unknown" }}</td></tr>
  <tr><th align="left">Created</th><td>{{ issue.createdAt }}</td></tr>
</table>
{% endblock %}
"""

_LEAVE = """\
{% extends "layout.html" %}
{% block title %}Leave Request Notification{% endblock %}
{% block heading %}Leave request {{ action_label }}{% endblock %}
{% block content %}
<p><strong>Status:</strong> {{ leave.status }}</p>
<table cellpadding="6">
  <tr><th align="left">Employee</th><td>{{ employee_name }}</td></tr>
  <tr><th align="left">Start date</th><td>{{ leave.startDate }}</td></tr>
  <tr><th align="left">End date</th><td>{{ leave.endDate }}</td></tr>
  <tr><th align="left">Type</th><td>{{ leave.type }}</td></tr>
  <tr><th align="left">Reason</th><td>{{ leave.reason }}</td></tr>
</table>
{% endblock %}
"""

_ANNOUNCEMENT = """\
{% extends "layout.html" %}
{% block title %}Announcement Notification{% endblock %}
{% block heading %}New {{ announcement.type }} announcement{% endblock %}
{% block content %}
<h3>{{ announcement.title }}</h3>
<p>{{ announcement.message }}</p>
<p style="color: #6c757d;">{{ announcement.createdAt }}{% if target_name %} &middot; For {{ target_name }}{% endif %}</p>
{% endblock %}
"""

_TEST = """\
{% extends "layout.html" %}
{% block title %}Email Service Test{% endblock %}
{% block heading %}Email service working{% endblock %}
{% block content %}
<p>This is a test email from your Employee Management System.</p>
<p><strong>Service:</strong> Resend API<br><strong>Time:</strong> {{ sent_at }}</p>
{% endblock %}
"""

_env = Environment(
    loader=DictLoader(
        {
            "layout.html": _LAYOUT,
            "issue.html": _ISSUE,
            "leave.html": _LEAVE,
            "announcement.html": _ANNOUNCEMENT,
            "test.html": _TEST,
        }
    ),
    autoescape=select_autoescape(default=True, default_for_string=True),
)


def render(template_name: str, **context) -> str:
    return _env.get_template(template_name).render(**context)


def issue_subject(issue: dict) -> str:
    return f"New {str(issue.get('priority') or '').upper()} Issue Reported - {issue.get('title')}"


def leave_subject(action_label: str, employee_name: str) -> str:
    return f"Leave Request {action_label} - {employee_name}"


def announcement_subject(announcement: dict) -> str:
    return f"New Announcement - {announcement.get('title')}"


TEST_SUBJECT = "Email Service Test - Resend Integration Working"
