"""
Domain exceptions - Semantic error types for sign-up.

This module defines domain-specific exceptions that communicate
rejected submissions without leaking transport details. Local gate
failures derive from FormRejected; anything coming back from the
registration service derives from RemoteRegistrationError.
"""


class RegistrationError(Exception):
    """Base class for sign-up domain errors."""

    pass


class FormRejected(RegistrationError):
    """Submission stopped locally before any remote call."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message)
        self.message = message


class IncompleteForm(FormRejected):
    """One or more required fields are empty."""

    pass


class WeakPassword(FormRejected):
    """Password is shorter than the minimum length."""

    pass


class InlineValidationFailure(FormRejected):
    """An email-format or confirmation error is already shown inline."""

    pass


class RemoteRegistrationError(RegistrationError):
    """The registration service rejected the request or could not be reached."""

    def __init__(self, status: int | None = None, message: str | None = None) -> None:
        super().__init__(message or f"Registration request failed (status={status})")
        self.status = status
        self.message = message


class CredentialConflict(RemoteRegistrationError):
    """Email is already registered (HTTP 409)."""

    pass


class NetworkFailure(RemoteRegistrationError):
    """Transport-level failure: connection refused, DNS, timeout."""

    pass
