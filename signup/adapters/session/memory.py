"""
In-memory session store - Implements SessionSink protocol.

Holds the process-wide "current user" after a successful sign-up.
Persistence and expiry are not handled here.
"""

import logging
import threading
from collections.abc import Mapping
from typing import Any

logger = logging.getLogger(__name__)


class InMemorySessionStore:
    """
    Implements SessionSink protocol with a lock-guarded attribute.

    Uses structural subtyping - no explicit inheritance from Protocol.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._current_user: dict[str, Any] | None = None

    def commit_session(self, session: Mapping[str, Any]) -> None:
        """
        Replace the current user with the given session payload.

        Args:
            session: Authenticated-session data returned by the service
        """
        with self._lock:
            self._current_user = dict(session)
        logger.info("Session committed")

    @property
    def current_user(self) -> dict[str, Any] | None:
        with self._lock:
            return None if self._current_user is None else dict(self._current_user)

    @property
    def is_authenticated(self) -> bool:
        with self._lock:
            return self._current_user is not None

    def clear(self) -> None:
        """Drop the current user (logout)."""
        with self._lock:
            self._current_user = None
        logger.info("Session cleared")


# Module-level singleton - one "current user" per process
_session_store = InMemorySessionStore()


def get_session_store() -> InMemorySessionStore:
    """Get the process-wide session store (singleton)."""
    return _session_store
