"""
HTTP registration client - Implements RegistrationClient protocol.

This module provides the httpx implementation of the domain's registration
port. Transport and status errors are translated into domain exceptions so
httpx types never reach the submission controller:

- 2xx with a JSON object body: returned as the session payload
- 2xx with an empty or non-object body: empty session payload
- 409: CredentialConflict
- other status: RemoteRegistrationError
- httpx.TransportError (connect, DNS, timeout): NetworkFailure
"""

import logging
from collections.abc import Mapping
from typing import Any

import httpx
from pydantic import ValidationError

from signup.domain.exceptions import CredentialConflict, NetworkFailure, RemoteRegistrationError
from signup.domain.models import RegistrationPayload

from .models import ErrorBody, SignUpRequest

logger = logging.getLogger(__name__)


class HttpxRegistrationClient:
    """
    Implements RegistrationClient protocol via httpx.

    Uses structural subtyping - no explicit inheritance from Protocol.
    When no client is injected a short-lived AsyncClient is opened per call.
    """

    def __init__(
        self,
        base_url: str,
        signup_path: str = "/user/signup",
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Args:
            base_url: Registration service root, e.g. http://localhost:8080/api
            signup_path: Path of the sign-up endpoint under base_url
            timeout: Per-request timeout in seconds
            client: Pre-configured AsyncClient to reuse (tests, connection pooling)
        """
        self._base_url = base_url.rstrip("/")
        self._signup_path = "/" + signup_path.lstrip("/")
        self._timeout = timeout
        self._client = client

    @property
    def url(self) -> str:
        return f"{self._base_url}{self._signup_path}"

    async def register(self, payload: RegistrationPayload) -> Mapping[str, Any]:
        """
        POST the sign-up request and return the session payload.

        Raises:
            CredentialConflict: Status 409
            NetworkFailure: Request never got a response
            RemoteRegistrationError: Any other non-2xx status
        """
        body = SignUpRequest(name=payload.name, email=payload.email, password=payload.password)

        try:
            if self._client is not None:
                response = await self._client.post(self.url, json=body.model_dump())
            else:
                async with httpx.AsyncClient(timeout=self._timeout) as client:
                    response = await client.post(self.url, json=body.model_dump())
        except httpx.TransportError as exc:
            logger.warning("Registration request to %s failed: %s", self.url, exc)
            raise NetworkFailure(message=None) from exc

        if response.is_success:
            return self._session_from(response)

        message = self._error_message(response)
        if response.status_code == httpx.codes.CONFLICT:
            raise CredentialConflict(status=response.status_code, message=message)
        raise RemoteRegistrationError(status=response.status_code, message=message)

    @staticmethod
    def _session_from(response: httpx.Response) -> Mapping[str, Any]:
        """
        Session payload from a 2xx response.

        The account exists once the service answered 2xx, so an empty (204),
        undecodable or non-object body yields an empty session instead of a
        failure.
        """
        if not response.content:
            return {}
        try:
            data = response.json()
        except ValueError:
            logger.warning(
                "Registration succeeded with a non-JSON body (status=%s)", response.status_code
            )
            return {}
        if not isinstance(data, dict):
            logger.warning(
                "Registration succeeded with a non-object body (status=%s)", response.status_code
            )
            return {}
        return data

    @staticmethod
    def _error_message(response: httpx.Response) -> str | None:
        try:
            data = response.json()
        except ValueError:
            return None
        if not isinstance(data, dict):
            return None
        try:
            return ErrorBody.model_validate(data).best_message()
        except ValidationError:
            return None
