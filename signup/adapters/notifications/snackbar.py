"""
Snackbar notifier - Implements NotificationChannel protocol.

Logs every notification and keeps the last one, together with an open
flag, for whatever renders the snackbar.
"""

import logging

from signup.domain.models import Notification, Severity

logger = logging.getLogger(__name__)


class SnackbarNotifier:
    """
    Implements NotificationChannel protocol via logging plus a single slot.

    Uses structural subtyping - no explicit inheritance from Protocol.
    A new notification replaces the previous one.
    """

    def __init__(self) -> None:
        self.last: Notification | None = None
        self.open = False

    def notify(self, notification: Notification) -> None:
        """
        Show a notification.

        Success is logged at INFO, errors at WARNING.

        Args:
            notification: Message and severity to display
        """
        level = logging.INFO if notification.severity is Severity.SUCCESS else logging.WARNING
        logger.log(level, "[SNACKBAR] %s: %s", notification.severity.value, notification.message)
        self.last = notification
        self.open = True

    def dismiss(self) -> None:
        """Close the snackbar; the last notification is kept for inspection."""
        self.open = False
