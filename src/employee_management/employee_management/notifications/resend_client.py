from __future__ import annotations

from typing import Optional

import requests

from ..core.constants import DEFAULT_EMAIL_TIMEOUT_SECONDS, RESEND_API_URL
from ..core.exceptions import EmailDeliveryError
from .model import EmailClient, EmailMessage


class ResendClient(EmailClient):
    """Minimal client for the Resend transactional email HTTP API."""

    def __init__(
        self,
        api_key: str,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_EMAIL_TIMEOUT_SECONDS,
        api_url: str = RESEND_API_URL,
    ):
        self._api_key = api_key
        self._session = session or requests.Session()
        self._timeout = timeout
        self._api_url = api_url

    def send(self, message: EmailMessage) -> Optional[str]:
        try:
            resp = self._session.post(
                self._api_url,
                json={
                    "from": message.sender,
                    "to": list(message.to),
                    "subject": message.subject,
                    "html": message.html,
                },
                headers={"Authorization": f"Bearer {self._api_key}"},
                timeout=self._timeout,
            )
        except requests.RequestException as e:
            raise EmailDeliveryError(f"Email request failed: {e}") from e

        if resp.status_code >= 400:
            raise EmailDeliveryError(f"Resend API error {resp.status_code}: {_error_detail(resp)}")

        try:
            return resp.json().get("id")
        except ValueError:
            return None


def _error_detail(resp: requests.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return resp.text[:200] or resp.reason or "no details"
    if isinstance(body, dict):
        return str(body.get("message") or body.get("name") or body)
    return str(body)
