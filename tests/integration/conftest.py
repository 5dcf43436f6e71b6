"""
Shared fixtures for integration tests.

Provides an in-process stand-in for the registration service (FastAPI)
reached through httpx.ASGITransport, so the real HTTP adapter, controller
and form store run end to end without a network.
"""

from collections.abc import AsyncGenerator

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI, HTTPException, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from signup.adapters.http.client import HttpxRegistrationClient
from signup.adapters.notifications.snackbar import SnackbarNotifier
from signup.adapters.session.memory import InMemorySessionStore
from signup.domain.form import SignUpForm
from signup.domain.submission import SubmissionController

BASE_URL = "http://registry.test/api"


class SignUpBody(BaseModel):
    name: str
    email: str
    password: str


def create_registry_app() -> FastAPI:
    """Minimal registration service: 201 with a session, 409 on duplicate email."""
    app = FastAPI()
    app.state.accounts = {}
    app.state.requests = []
    app.state.fail_with = None

    @app.post("/api/user/signup", status_code=status.HTTP_201_CREATED)
    async def signup(body: SignUpBody):
        app.state.requests.append(body)
        if app.state.fail_with is not None:
            code, message = app.state.fail_with
            return JSONResponse(status_code=code, content={"message": message})
        if body.email in app.state.accounts:
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT, detail="Email already registered"
            )
        app.state.accounts[body.email] = body
        return {
            "token": f"token-{len(app.state.accounts)}",
            "user": {"name": body.name, "email": body.email},
        }

    return app


@pytest.fixture
def registry() -> FastAPI:
    return create_registry_app()


@pytest_asyncio.fixture
async def http_client(registry: FastAPI) -> AsyncGenerator[httpx.AsyncClient, None]:
    async with httpx.AsyncClient(transport=httpx.ASGITransport(app=registry)) as client:
        yield client


@pytest.fixture
def session_store() -> InMemorySessionStore:
    return InMemorySessionStore()


@pytest.fixture
def notifier() -> SnackbarNotifier:
    return SnackbarNotifier()


@pytest.fixture
def form(
    http_client: httpx.AsyncClient,
    session_store: InMemorySessionStore,
    notifier: SnackbarNotifier,
) -> SignUpForm:
    controller = SubmissionController(
        client=HttpxRegistrationClient(base_url=BASE_URL, client=http_client),
        session_sink=session_store,
        notifications=notifier,
    )
    return SignUpForm(controller=controller)
