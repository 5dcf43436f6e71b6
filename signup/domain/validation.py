"""
Validation engine - Pure checks over the sign-up form.

Everything here is deterministic and side-effect free. The form store calls
derive_validation_state() after each relevant field change; the submission
controller runs check_submittable() before touching the network.

Password Strength
=================

compute_password_strength() is a coarse entropy proxy, not a cryptographic
strength estimate. A password shorter than MIN_PASSWORD_LENGTH scores 0.
Otherwise each of four character classes present adds 25:

- ASCII lowercase letter
- ASCII uppercase letter
- ASCII digit
- one of SYMBOLS

Display bands (half-open except the exact top value):

    100        -> Strongest
    [75, 100)  -> Strong
    [50, 75)   -> Fair
    [25, 50)   -> Weak
    otherwise  -> Very weak
"""

import re

from .exceptions import IncompleteForm, InlineValidationFailure, WeakPassword
from .models import FormField, RegistrationForm, ValidationState

MIN_PASSWORD_LENGTH = 6
SYMBOLS = frozenset('!@#$%^&*(),.?":{}|<>')

EMAIL_FORMAT_MESSAGE = "Please enter a valid email address"
PASSWORD_MISMATCH_MESSAGE = "Passwords do not match"
INCOMPLETE_FORM_MESSAGE = "Please fill in all fields"
WEAK_PASSWORD_MESSAGE = f"Password must be at least {MIN_PASSWORD_LENGTH} characters"

_EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

_CHARACTER_CLASSES = (
    re.compile(r"[a-z]"),
    re.compile(r"[A-Z]"),
    re.compile(r"[0-9]"),
)


def validate_email_format(email: str) -> str | None:
    """
    Check that email has a local@domain.tld shape.

    Empty input is not a format error; emptiness is reported by the
    required-fields gate at submit time.

    Returns:
        Error message, or None when the value is empty or well-formed
    """
    if not email:
        return None
    if _EMAIL_PATTERN.fullmatch(email):
        return None
    return EMAIL_FORMAT_MESSAGE


def compute_password_strength(password: str) -> int:
    """Score password 0-100 in steps of 25 by character classes present."""
    if len(password) < MIN_PASSWORD_LENGTH:
        return 0
    present = sum(1 for pattern in _CHARACTER_CLASSES if pattern.search(password))
    if any(char in SYMBOLS for char in password):
        present += 1
    return present * 25


def validate_confirmation(password: str, confirm: str) -> str | None:
    """Return a mismatch error iff confirm is non-empty and differs from password."""
    if confirm and confirm != password:
        return PASSWORD_MISMATCH_MESSAGE
    return None


def strength_label(strength: int) -> str:
    if strength == 100:
        return "Strongest"
    if strength >= 75:
        return "Strong"
    if strength >= 50:
        return "Fair"
    if strength >= 25:
        return "Weak"
    return "Very weak"


def strength_color(strength: int) -> str:
    """Meter bar colour for a strength score."""
    if strength < 25:
        return "#e53935"
    if strength < 50:
        return "#ff9800"
    if strength < 75:
        return "#cddc39"
    return "#4caf50"


def derive_validation_state(
    form: RegistrationForm, server_email_error: str | None = None
) -> ValidationState:
    """
    Recompute every derived signal from the current form values.

    Args:
        form: Current field values
        server_email_error: Conflict message from the last submission, if the
            email has not been edited since

    Returns:
        Fresh ValidationState
    """
    return ValidationState(
        email_format_error=validate_email_format(form.email),
        server_email_error=server_email_error or None,
        password_mismatch_error=validate_confirmation(form.password, form.confirm_password),
        password_strength=compute_password_strength(form.password),
    )


def check_required_fields(form: RegistrationForm) -> None:
    """
    Raises:
        IncompleteForm: If any field is empty or whitespace-only
    """
    for field in FormField:
        if not getattr(form, field.value).strip():
            raise IncompleteForm(INCOMPLETE_FORM_MESSAGE)


def check_password_length(password: str) -> None:
    """
    Raises:
        WeakPassword: If password is shorter than MIN_PASSWORD_LENGTH
    """
    if len(password) < MIN_PASSWORD_LENGTH:
        raise WeakPassword(WEAK_PASSWORD_MESSAGE)


def check_inline_errors(validation: ValidationState) -> None:
    """
    Raises:
        InlineValidationFailure: If an email-format or mismatch error is pending
    """
    if validation.email_format_error or validation.password_mismatch_error:
        raise InlineValidationFailure(
            validation.email_format_error or validation.password_mismatch_error or ""
        )


def check_submittable(form: RegistrationForm, validation: ValidationState) -> None:
    """
    Run the submit gates in order: required fields, password length, inline errors.

    Raises:
        IncompleteForm: A required field is empty
        WeakPassword: Password is too short
        InlineValidationFailure: Inline errors are pending
    """
    check_required_fields(form)
    check_password_length(form.password)
    check_inline_errors(validation)
