"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the sign-up domain requires
from its surroundings. Adapters implement these protocols structurally.
"""

from collections.abc import Mapping
from typing import Any, Protocol

from .models import Notification, RegistrationPayload


class RegistrationClient(Protocol):
    """Port interface for the remote registration call."""

    async def register(self, payload: RegistrationPayload) -> Mapping[str, Any]:
        """
        Create an account on the registration service.

        Args:
            payload: Normalized name, email and password

        Returns:
            Authenticated-session payload as returned by the service

        Raises:
            CredentialConflict: Email is already registered (HTTP 409)
            NetworkFailure: Service could not be reached
            RemoteRegistrationError: Any other failure response
        """
        ...


class SessionSink(Protocol):
    """Port interface for the process-wide "current user" state."""

    def commit_session(self, session: Mapping[str, Any]) -> None:
        """
        Record the authenticated session after a successful sign-up.

        Args:
            session: Session payload returned by the registration service
        """
        ...


class NotificationChannel(Protocol):
    """Port interface for user-visible global notifications."""

    def notify(self, notification: Notification) -> None:
        """
        Emit a notification. Fire-and-forget, no acknowledgement.

        Args:
            notification: Message and severity to display
        """
        ...
