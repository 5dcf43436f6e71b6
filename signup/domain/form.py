"""
Sign-up form store - Field state, derived validation and the submit trigger.

SignUpForm is the boundary the presentation layer talks to: it relays
field-change events and the submit button into the domain and exposes a
FormView snapshot for rendering.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from .models import (
    FormField,
    RegistrationForm,
    SubmissionState,
    SubmitOutcome,
    SubmitResult,
    ValidationState,
)
from .submission import SubmissionController
from .validation import derive_validation_state, strength_color, strength_label

logger = logging.getLogger(__name__)

# Fields that feed the validation engine
_VALIDATED_FIELDS = frozenset({FormField.EMAIL, FormField.PASSWORD, FormField.CONFIRM_PASSWORD})


@dataclass(frozen=True)
class FormView:
    """Everything the presentation layer needs to render the panel."""

    first_name: str
    last_name: str
    email: str
    password: str
    confirm_password: str
    email_error: str | None
    confirm_error: str | None
    strength: int
    strength_label: str
    strength_color: str
    is_loading: bool
    is_disabled: bool


@dataclass
class SignUpForm:
    """
    Field State Store for one open sign-up panel.

    Holds the raw values, re-derives ValidationState on every relevant edit
    and applies submission results back into visible state.
    """

    controller: SubmissionController
    on_close: Callable[[], None] | None = None
    values: RegistrationForm = field(default_factory=RegistrationForm)
    validation: ValidationState = field(default_factory=ValidationState)
    submission: SubmissionState = field(default_factory=SubmissionState)
    is_open: bool = True

    def set_field(self, name: FormField | str, value: str) -> None:
        """
        Apply a field-change event.

        Editing the email drops any server-reported email error, so a stale
        conflict message never sits against a changed value.

        Args:
            name: Field to update
            value: New raw value

        Raises:
            ValueError: If name is not a sign-up form field
        """
        form_field = FormField(name)
        setattr(self.values, form_field.value, value)

        if form_field not in _VALIDATED_FIELDS:
            return

        server_email_error = self.validation.server_email_error
        if form_field is FormField.EMAIL:
            server_email_error = None
        self.validation = derive_validation_state(self.values, server_email_error)

    async def submit(self) -> SubmitResult | None:
        """
        Handle the submit trigger.

        Returns:
            SubmitResult, or None when the trigger is disabled (a submission
            is already in flight or the panel is closed)
        """
        if self.submission.controls_disabled or not self.is_open:
            logger.debug("Submit ignored: controls disabled or panel closed")
            return None

        submitted_email = self.values.email
        result = await self.controller.attempt_submit(self.values, self.validation, self.submission)

        # A conflict only applies to the address that was sent
        if (
            result.outcome is SubmitOutcome.CREDENTIAL_CONFLICT
            and self.values.email == submitted_email
        ):
            self.validation = derive_validation_state(self.values, result.email_error)
        if result.close_panel:
            self.close()
        return result

    def close(self) -> None:
        """Discard entered values and mark the panel closed."""
        self.values = RegistrationForm()
        self.validation = ValidationState()
        self.is_open = False
        if self.on_close is not None:
            self.on_close()

    def view(self) -> FormView:
        strength = self.validation.password_strength
        return FormView(
            first_name=self.values.first_name,
            last_name=self.values.last_name,
            email=self.values.email,
            password=self.values.password,
            confirm_password=self.values.confirm_password,
            email_error=self.validation.email_error,
            confirm_error=self.validation.password_mismatch_error,
            strength=strength,
            strength_label=strength_label(strength),
            strength_color=strength_color(strength),
            is_loading=self.submission.in_progress,
            is_disabled=self.submission.controls_disabled,
        )
