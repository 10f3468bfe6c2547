from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Tuple


@dataclass(frozen=True)
class EmailMessage:
    sender: str
    to: Tuple[str, ...]
    subject: str
    html: str


@dataclass(frozen=True)
class NotificationResult:
    """Outcome of one notification attempt; failures are values, not exceptions."""

    success: bool
    message: str = ""
    message_id: Optional[str] = None
    recipients: Tuple[str, ...] = ()
    error: Optional[str] = None

    def to_dict(self) -> dict:
        data = {"success": self.success, "message": self.message}
        if self.message_id:
            data["messageId"] = self.message_id
        if self.recipients:
            data["recipients"] = list(self.recipients)
        if self.error:
            data["error"] = self.error
        return data

    @property
    def failure_reason(self) -> str:
        return self.error or self.message or "Unknown error"


class EmailClient(Protocol):
    def send(self, message: EmailMessage) -> Optional[str]:
        """Deliver one email and return the provider's message id."""

        raise NotImplementedError
