"""
Application settings - pydantic-settings configuration.

This module defines client configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Registration service
    api_base_url: str = "http://localhost:8080/api"
    signup_path: str = "/user/signup"

    # Transport
    request_timeout_seconds: float = 10.0  # Surfaces as NetworkFailure when exceeded


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
