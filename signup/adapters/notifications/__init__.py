"""Notification adapters - Snackbar channel."""

from .snackbar import SnackbarNotifier

__all__ = ["SnackbarNotifier"]
