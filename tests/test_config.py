"""Tests for application settings."""

import pytest
from pydantic import ValidationError

from fizzy_relay.config import Settings, get_settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch):
    """Without environment, forwarding is unconfigured and verification disabled."""
    for name in ("SLACK_WEBHOOK_URL", "FIZZY_SIGNING_SECRET", "SLACK_TIMEOUT_SECONDS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.slack_webhook_url == ""
    assert settings.fizzy_signing_secret == ""
    assert settings.slack_timeout_seconds == 10.0
    assert settings.log_level == "INFO"


def test_settings_read_from_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("SLACK_WEBHOOK_URL", "https://hooks.slack.com/services/T/B/X")
    monkeypatch.setenv("FIZZY_SIGNING_SECRET", "s3cret")
    monkeypatch.setenv("SLACK_TIMEOUT_SECONDS", "2.5")

    settings = Settings(_env_file=None)

    assert settings.slack_webhook_url == "https://hooks.slack.com/services/T/B/X"
    assert settings.fizzy_signing_secret == "s3cret"
    assert settings.slack_timeout_seconds == 2.5


def test_settings_are_frozen():
    settings = Settings(_env_file=None)

    with pytest.raises(ValidationError):
        settings.fizzy_signing_secret = "changed"


def test_get_settings_is_cached():
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
