"""
Unit tests for client settings.

Tests default values and environment variable overrides.
"""

import pytest

from signup.config.settings import Settings, get_settings


class TestSettings:
    """Tests for Settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for name in ("API_BASE_URL", "SIGNUP_PATH", "REQUEST_TIMEOUT_SECONDS"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.api_base_url == "http://localhost:8080/api"
        assert settings.signup_path == "/user/signup"
        assert settings.request_timeout_seconds == 10.0

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("API_BASE_URL", "https://shop.example.com/api")
        monkeypatch.setenv("request_timeout_seconds", "2.5")

        settings = Settings(_env_file=None)

        assert settings.api_base_url == "https://shop.example.com/api"
        assert settings.request_timeout_seconds == 2.5

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()
