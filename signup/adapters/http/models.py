"""
Wire models for the registration service.

Pydantic models for the request body and for pulling a human-readable
message out of error responses.
"""

from pydantic import BaseModel, ConfigDict, Field


class SignUpRequest(BaseModel):
    """Request body for POST {signup_path}."""

    name: str = Field(..., description="First and last name joined by one space")
    email: str = Field(..., description="Trimmed, lowercased email")
    password: str


class ErrorBody(BaseModel):
    """
    Error response body.

    Services report the reason under "message"; FastAPI-style services use
    "detail". Anything else is ignored.
    """

    model_config = ConfigDict(extra="ignore")

    message: str | None = None
    detail: str | list | dict | None = None

    def best_message(self) -> str | None:
        if self.message:
            return self.message
        if isinstance(self.detail, str) and self.detail:
            return self.detail
        return None
