class DomainError(Exception):
    """Base exception for business rule violations."""

    status_code = 400


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class BusinessRuleError(ValidationError):
    """Raised when a well-formed request conflicts with current state."""


class InvalidTransitionError(BusinessRuleError):
    """Raised when a status change is not allowed from the current status."""


class NotFoundError(DomainError):
    """Raised when an id lookup misses."""

    status_code = 404


class AuthenticationError(DomainError):
    """Raised when login credentials or a session are invalid."""

    status_code = 401


class EmailDeliveryError(Exception):
    """Raised by the email client when the provider rejects a send."""
