"""
Submission controller - Gated registration call and outcome mapping.

One Submission Attempt
======================

    Idle -> Validating -> Rejected-Locally            -> Idle
                       -> Submitting -> Succeeded          -> Idle
                                     -> Rejected-Remotely  -> Idle

Local gates (no remote call):
- IncompleteForm: error notification
- WeakPassword: error notification
- InlineValidationFailure: silent, the error is already rendered inline

Remote outcomes:
- success: session committed, success notification, panel closes
- CredentialConflict: email-field error only, no notification
- anything else, including a session sink that fails to commit: error
  notification with a best-effort message, panel stays open

SubmissionState flags are held through SubmissionState.active() so they
drop on every exit path. The controller assumes single-flight invocation;
the form store refuses to call it while controls are disabled.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .exceptions import (
    CredentialConflict,
    FormRejected,
    IncompleteForm,
    NetworkFailure,
    RemoteRegistrationError,
    WeakPassword,
)
from .models import (
    Notification,
    RegistrationForm,
    RegistrationPayload,
    Severity,
    SubmissionState,
    SubmitOutcome,
    SubmitResult,
    ValidationState,
)
from .ports import NotificationChannel, RegistrationClient, SessionSink
from .validation import check_submittable

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Sign-up successful!"
CONFLICT_MESSAGE = "Email already registered"
NETWORK_ERROR_MESSAGE = "Network error, please check your connection"
GENERIC_ERROR_MESSAGE = "Something went wrong. Try again."


def build_payload(form: RegistrationForm) -> RegistrationPayload:
    """
    Normalize form values into the registration request body.

    Applies: trimmed first and last name joined by one space,
    email strip + lowercase. The password is sent as typed.
    """
    return RegistrationPayload(
        name=f"{form.first_name.strip()} {form.last_name.strip()}",
        email=form.email.strip().lower(),
        password=form.password,
    )


def remote_failure_message(error: Exception) -> str:
    """Human-readable message for a non-conflict remote failure."""
    if isinstance(error, RemoteRegistrationError) and error.message:
        return error.message
    if isinstance(error, NetworkFailure):
        return NETWORK_ERROR_MESSAGE
    return GENERIC_ERROR_MESSAGE


@dataclass
class SubmissionController:
    """
    Orchestrates a sign-up submission.

    Depends only on ports: the registration client, a session sink for the
    "current user" and a notification channel for the snackbar.
    """

    client: RegistrationClient
    session_sink: SessionSink
    notifications: NotificationChannel

    async def attempt_submit(
        self,
        form: RegistrationForm,
        validation: ValidationState,
        submission: SubmissionState,
    ) -> SubmitResult:
        """
        Validate, submit and reconcile one registration attempt.

        Args:
            form: Current field values
            validation: ValidationState derived from form
            submission: Flags to hold while the remote call is in flight

        Returns:
            SubmitResult describing the outcome for the form store to apply
        """
        try:
            check_submittable(form, validation)
        except FormRejected as exc:
            return self._reject_locally(exc)

        payload = build_payload(form)

        with submission.active():
            logger.info("Submitting registration for %s", payload.email)
            try:
                session = await self.client.register(payload)
            except CredentialConflict as exc:
                logger.info("Registration rejected: %s already registered", payload.email)
                return SubmitResult(
                    outcome=SubmitOutcome.CREDENTIAL_CONFLICT,
                    email_error=exc.message or CONFLICT_MESSAGE,
                )
            except RemoteRegistrationError as exc:
                logger.warning("Registration failed (status=%s): %s", exc.status, exc)
                return self._remote_failure(exc)
            except Exception as exc:
                logger.exception("Unexpected error from registration client")
                return self._remote_failure(exc)

            return self._succeed(session)

    def _reject_locally(self, exc: FormRejected) -> SubmitResult:
        if isinstance(exc, IncompleteForm):
            outcome = SubmitOutcome.INCOMPLETE_FORM
        elif isinstance(exc, WeakPassword):
            outcome = SubmitOutcome.WEAK_PASSWORD
        else:
            # Already rendered next to the field
            logger.debug("Submission blocked by inline error: %s", exc.message)
            return SubmitResult(outcome=SubmitOutcome.INLINE_VALIDATION_FAILURE)

        logger.debug("Submission rejected locally: %s", outcome.value)
        self.notifications.notify(Notification(exc.message, Severity.ERROR))
        return SubmitResult(outcome=outcome, message=exc.message)

    def _remote_failure(self, exc: Exception) -> SubmitResult:
        message = remote_failure_message(exc)
        self.notifications.notify(Notification(message, Severity.ERROR))
        return SubmitResult(outcome=SubmitOutcome.REMOTE_FAILURE, message=message)

    def _succeed(self, session: Mapping[str, Any]) -> SubmitResult:
        try:
            self.session_sink.commit_session(session)
        except Exception as exc:
            logger.exception("Could not commit session after registration")
            return self._remote_failure(exc)
        self.notifications.notify(Notification(SUCCESS_MESSAGE, Severity.SUCCESS))
        logger.info("Registration succeeded")
        return SubmitResult(
            outcome=SubmitOutcome.SUCCEEDED,
            message=SUCCESS_MESSAGE,
            close_panel=True,
        )
