"""
Domain layer - Pure sign-up logic with zero framework imports.

This package contains the client-side registration workflow: the form
store, the validation engine and the submission controller. It defines its
own port interfaces for the registration service, the session sink and the
notification channel, so adapters can be swapped freely.
"""

from .exceptions import (
    CredentialConflict,
    FormRejected,
    IncompleteForm,
    InlineValidationFailure,
    NetworkFailure,
    RegistrationError,
    RemoteRegistrationError,
    WeakPassword,
)
from .form import FormView, SignUpForm
from .models import (
    FormField,
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
from .submission import SubmissionController

__all__ = [
    "CredentialConflict",
    "FormField",
    "FormRejected",
    "FormView",
    "IncompleteForm",
    "InlineValidationFailure",
    "NetworkFailure",
    "Notification",
    "NotificationChannel",
    "RegistrationClient",
    "RegistrationError",
    "RegistrationForm",
    "RegistrationPayload",
    "RemoteRegistrationError",
    "SessionSink",
    "Severity",
    "SignUpForm",
    "SubmissionController",
    "SubmissionState",
    "SubmitOutcome",
    "SubmitResult",
    "ValidationState",
    "WeakPassword",
]
