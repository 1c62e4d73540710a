"""
Unit tests for application settings.

Tests defaults and environment variable loading.
"""

import pytest
from pydantic import ValidationError

from src.config.settings import Settings, get_settings


class TestSettingsDefaults:
    """Tests for default values."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Defaults listen on 0.0.0.0:8080 with a 60 second idle bound."""
        for name in ("PORT", "HOST", "LOG_LEVEL", "IDLE_TIMEOUT_SECONDS", "APP_NAME"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.host == "0.0.0.0"
        assert settings.port == 8080
        assert settings.idle_timeout_seconds == 60
        assert settings.log_level == "INFO"
        assert settings.app_name == "pingme-api"


class TestSettingsEnvironment:
    """Tests for environment variable overrides."""

    def test_port_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """PORT overrides the listening port."""
        monkeypatch.setenv("PORT", "9090")
        assert Settings(_env_file=None).port == 9090

    def test_names_are_case_insensitive(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("log_level", "DEBUG")
        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_invalid_port_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Non-numeric PORT fails validation."""
        monkeypatch.setenv("PORT", "not-a-port")
        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestGetSettings:
    """Tests for the cached accessor."""

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()
