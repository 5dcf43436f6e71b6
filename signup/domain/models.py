"""
Domain models - Form values, derived validation and submission state.

RegistrationForm is the only thing user input mutates. ValidationState is
always re-derived from it (see validation.derive_validation_state) and is
frozen so nothing can patch an error in place. SubmissionState carries the
two UI flags that gate the submit trigger.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from enum import Enum


class FormField(str, Enum):
    """Fields of the sign-up form, keyed by RegistrationForm attribute name."""

    FIRST_NAME = "first_name"
    LAST_NAME = "last_name"
    EMAIL = "email"
    PASSWORD = "password"
    CONFIRM_PASSWORD = "confirm_password"


class Severity(str, Enum):
    """Notification severity understood by the snackbar."""

    SUCCESS = "success"
    ERROR = "error"


class SubmitOutcome(Enum):
    """
    Result of a submission attempt.

    Local rejections (no remote call made):
    - INCOMPLETE_FORM: a required field is empty
    - WEAK_PASSWORD: password shorter than the minimum
    - INLINE_VALIDATION_FAILURE: email-format or mismatch error pending

    Remote outcomes:
    - SUCCEEDED: session committed, panel should close
    - CREDENTIAL_CONFLICT: email already registered, shown on the email field
    - REMOTE_FAILURE: any other server or transport failure
    """

    SUCCEEDED = "succeeded"
    INCOMPLETE_FORM = "incomplete_form"
    WEAK_PASSWORD = "weak_password"
    INLINE_VALIDATION_FAILURE = "inline_validation_failure"
    CREDENTIAL_CONFLICT = "credential_conflict"
    REMOTE_FAILURE = "remote_failure"


@dataclass
class RegistrationForm:
    """Raw field values as typed by the user."""

    first_name: str = ""
    last_name: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = ""


@dataclass(frozen=True)
class ValidationState:
    """
    Derived validation signals for the current form values.

    Attributes:
        email_format_error: Set when the email does not look like local@domain.tld
        server_email_error: Set after a credential conflict, cleared on email edit
        password_mismatch_error: Set when confirmation differs from password
        password_strength: Coarse 0-100 score in steps of 25
    """

    email_format_error: str | None = None
    server_email_error: str | None = None
    password_mismatch_error: str | None = None
    password_strength: int = 0

    @property
    def email_error(self) -> str | None:
        """Error to render under the email field (format error wins)."""
        return self.email_format_error or self.server_email_error


@dataclass
class SubmissionState:
    """UI flags for an in-flight submission."""

    in_progress: bool = False
    controls_disabled: bool = False

    @contextmanager
    def active(self) -> Iterator["SubmissionState"]:
        """
        Hold the submitting status for the duration of the block.

        Both flags are raised on entry and lowered on every exit path,
        including exceptions, so the form can never stay disabled.
        """
        self.in_progress = True
        self.controls_disabled = True
        try:
            yield self
        finally:
            self.in_progress = False
            self.controls_disabled = False


@dataclass(frozen=True)
class Notification:
    """Transient message for the snackbar."""

    message: str
    severity: Severity


@dataclass(frozen=True)
class RegistrationPayload:
    """Normalized request body for the registration service."""

    name: str
    email: str
    password: str

    def __repr__(self) -> str:
        return f"RegistrationPayload(name={self.name!r}, email={self.email!r}, password='***')"


@dataclass(frozen=True)
class SubmitResult:
    """What a submission attempt produced, for the form store to apply."""

    outcome: SubmitOutcome
    message: str | None = None
    email_error: str | None = None
    close_panel: bool = False

    @property
    def succeeded(self) -> bool:
        return self.outcome is SubmitOutcome.SUCCEEDED
