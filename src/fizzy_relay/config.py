"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file.

    Frozen after construction: the relay reads configuration once at startup
    and never mutates it.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        frozen=True,
    )

    # Slack
    slack_webhook_url: str = ""
    slack_timeout_seconds: float = 10.0

    # Fizzy
    fizzy_signing_secret: str = ""  # Empty disables signature enforcement

    # App
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()
