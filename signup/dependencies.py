"""
Dependency wiring - Factories for a ready-to-use sign-up form.

This module builds the submission controller and form store from settings
and the default adapters. Each factory takes optional overrides so callers
(and tests) can inject fakes for any port.
"""

from collections.abc import Callable

import httpx

from signup.adapters.http.client import HttpxRegistrationClient
from signup.adapters.notifications.snackbar import SnackbarNotifier
from signup.adapters.session.memory import get_session_store
from signup.config.settings import Settings, get_settings
from signup.domain.form import SignUpForm
from signup.domain.ports import NotificationChannel, RegistrationClient, SessionSink
from signup.domain.submission import SubmissionController

# Module-level singleton - one snackbar per process
_notifier = SnackbarNotifier()


def get_notifier() -> SnackbarNotifier:
    """Get the snackbar notifier (singleton)."""
    return _notifier


def get_registration_client(
    settings: Settings | None = None, http_client: httpx.AsyncClient | None = None
) -> HttpxRegistrationClient:
    """Create the registration client from settings."""
    settings = settings or get_settings()
    return HttpxRegistrationClient(
        base_url=settings.api_base_url,
        signup_path=settings.signup_path,
        timeout=settings.request_timeout_seconds,
        client=http_client,
    )


def get_submission_controller(
    client: RegistrationClient | None = None,
    session_sink: SessionSink | None = None,
    notifications: NotificationChannel | None = None,
) -> SubmissionController:
    """
    Create the submission controller with injected dependencies.

    Wires together the registration client, session store and notifier.
    """
    return SubmissionController(
        client=client or get_registration_client(),
        session_sink=session_sink or get_session_store(),
        notifications=notifications or get_notifier(),
    )


def create_sign_up_form(
    controller: SubmissionController | None = None,
    on_close: Callable[[], None] | None = None,
) -> SignUpForm:
    """Open a fresh sign-up panel."""
    return SignUpForm(controller=controller or get_submission_controller(), on_close=on_close)
