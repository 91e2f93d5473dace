"""Unit tests for environment settings."""

import logging

import pytest
import structlog
from pydantic import ValidationError

from fetchkit.settings.app import FetchSettings, get_settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove FETCHKIT_* variables inherited from the environment."""
    for name in (
        "TIMEOUT_SECONDS",
        "MAX_ATTEMPTS",
        "MAX_WORKERS",
        "FOLLOW_REDIRECTS",
        "USER_AGENT",
        "LOG_LEVEL",
        "LOG_JSON",
    ):
        monkeypatch.delenv(f"FETCHKIT_{name}", raising=False)


class TestFetchSettings:
    """Tests for FetchSettings."""

    def test_defaults(self) -> None:
        """Test values used when nothing is set."""
        settings = FetchSettings(_env_file=None)  # type: ignore[call-arg]

        assert settings.timeout_seconds == 60.0
        assert settings.max_attempts == 3
        assert settings.max_workers == 8
        assert settings.follow_redirects is True
        assert settings.user_agent is None
        assert settings.log_level == "INFO"
        assert settings.log_json is True

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that FETCHKIT_* variables are read."""
        monkeypatch.setenv("FETCHKIT_TIMEOUT_SECONDS", "15")
        monkeypatch.setenv("FETCHKIT_MAX_ATTEMPTS", "5")
        monkeypatch.setenv("fetchkit_follow_redirects", "false")
        monkeypatch.setenv("FETCHKIT_USER_AGENT", "probe/2.0")

        settings = FetchSettings(_env_file=None)  # type: ignore[call-arg]

        assert settings.timeout_seconds == 15.0
        assert settings.max_attempts == 5
        assert settings.follow_redirects is False
        assert settings.user_agent == "probe/2.0"

    def test_invalid_value(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that out-of-range values are rejected."""
        monkeypatch.setenv("FETCHKIT_MAX_ATTEMPTS", "0")

        with pytest.raises(ValidationError):
            FetchSettings(_env_file=None)  # type: ignore[call-arg]

    def test_to_fetch_config(self) -> None:
        """Test conversion to a fetch configuration."""
        settings = FetchSettings(
            _env_file=None,  # type: ignore[call-arg]
            timeout_seconds=10,
            max_attempts=2,
            max_workers=4,
            user_agent="",
        )

        config = settings.to_fetch_config()

        assert config.timeout_seconds == 10.0
        assert config.max_attempts == 2
        assert config.max_workers == 4
        assert config.user_agent is None

    def test_get_settings(self) -> None:
        """Test that get_settings returns a settings instance."""
        assert isinstance(get_settings(), FetchSettings)


class TestConfigureLogging:
    """Tests for FetchSettings.configure_logging."""

    def teardown_method(self) -> None:
        """Restore structlog defaults."""
        structlog.reset_defaults()

    def test_level_applied(self) -> None:
        """Test that the configured level filters events."""
        settings = FetchSettings(
            _env_file=None,  # type: ignore[call-arg]
            log_level="warning",
        )

        settings.configure_logging()

        logger = structlog.get_logger()
        assert logger.is_enabled_for(logging.WARNING) is True
        assert logger.is_enabled_for(logging.INFO) is False
