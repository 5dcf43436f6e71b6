"""
Shared fixtures for adversarial tests.

Provides a registration client whose call can be held open, so tests can
act while a submission is in flight.
"""

import asyncio
from collections.abc import Callable, Mapping
from typing import Any
from unittest.mock import Mock

import pytest

from signup.domain.form import SignUpForm
from signup.domain.models import FormField, RegistrationPayload
from signup.domain.submission import SubmissionController

# Module-level marker for all adversarial tests
pytestmark = pytest.mark.adversarial


class GatedClient:
    """
    RegistrationClient that blocks until release() is called.

    When error is set it is raised after release instead of returning a session.
    """

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.calls: list[RegistrationPayload] = []
        self.entered = asyncio.Event()
        self._release = asyncio.Event()

    async def register(self, payload: RegistrationPayload) -> Mapping[str, Any]:
        self.calls.append(payload)
        self.entered.set()
        await self._release.wait()
        if self.error is not None:
            raise self.error
        return {"token": "abc"}

    def release(self) -> None:
        self._release.set()


@pytest.fixture
def gated_client() -> GatedClient:
    return GatedClient()


@pytest.fixture
def make_form() -> Callable[..., SignUpForm]:
    """Factory for a filled-in form wired to the given collaborators."""

    def _make(client: Any, session_sink: Any = None, notifications: Any = None) -> SignUpForm:
        controller = SubmissionController(
            client=client,
            session_sink=session_sink or Mock(),
            notifications=notifications or Mock(),
        )
        form = SignUpForm(controller=controller)
        fill(form)
        return form

    return _make


@pytest.fixture
def form(gated_client: GatedClient, make_form: Callable[..., SignUpForm]) -> SignUpForm:
    return make_form(gated_client)


def fill(form: SignUpForm) -> None:
    form.set_field(FormField.FIRST_NAME, "Jane")
    form.set_field(FormField.LAST_NAME, "Doe")
    form.set_field(FormField.EMAIL, "jane@x.com")
    form.set_field(FormField.PASSWORD, "Secret1!")
    form.set_field(FormField.CONFIRM_PASSWORD, "Secret1!")
