"""HTTP adapters - Registration service client."""

from .client import HttpxRegistrationClient

__all__ = ["HttpxRegistrationClient"]
