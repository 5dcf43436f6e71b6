"""Session adapters - "current user" state."""

from .memory import InMemorySessionStore, get_session_store

__all__ = ["InMemorySessionStore", "get_session_store"]
