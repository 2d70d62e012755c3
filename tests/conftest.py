"""Shared test fixtures."""

import copy

import pytest
from fastapi.testclient import TestClient

from fizzy_relay.app import app
from fizzy_relay.config import Settings, get_settings

TEST_SIGNING_SECRET = "test_signing_secret_1234"
TEST_WEBHOOK_URL = "https://hooks.slack.com/services/T000/B000/XXXX"

_USER = {
    "id": "03f5v9zkft4hj9qq0lsn9ohcm",
    "name": "Ada Lovelace",
    "role": "owner",
    "active": True,
    "email_address": "ada@example.com",
    "created_at": "2025-01-02T09:00:00Z",
    "url": "https://app.fizzy.do/1/users/03f5v9zkft4hj9qq0lsn9ohcm",
}

_BOARD = {
    "id": "03f5v9zo9qlcwwpyc0ascnikz",
    "name": "Roadmap",
    "all_access": True,
    "created_at": "2025-01-03T10:00:00Z",
    "creator": _USER,
}

CARD_EVENT = {
    "id": "03f8huu0sog76g3s975963b5e",
    "action": "card_published",
    "created_at": "2025-01-15T15:04:05Z",
    "board": _BOARD,
    "creator": _USER,
    "eventable": {
        "id": "03f8huu0sog76g3s975963b5f",
        "title": "Ship the relay",
        "status": "published",
        "image_url": None,
        "golden": False,
        "last_active_at": "2025-01-15T15:04:05Z",
        "created_at": "2025-01-15T15:00:00Z",
        "url": "https://app.fizzy.do/1/cards/42",
        "board": _BOARD,
        "column": {"id": "03f8huu0sog76g3s975963b60", "name": "In Progress"},
        "creator": _USER,
    },
}

COMMENT_EVENT = {
    "id": "03f8huu0sog76g3s975963b61",
    "action": "comment_created",
    "created_at": "2025-01-15T16:00:00Z",
    "board": _BOARD,
    "creator": _USER,
    "eventable": {
        "id": "03f8huu0sog76g3s975963b62",
        "created_at": "2025-01-15T16:00:00Z",
        "body": {
            "plain_text": "Looks good to me",
            "html": "<p>Looks good to me</p>",
        },
        "creator": _USER,
        "reactions_url": "https://app.fizzy.do/1/cards/42/comments/7/reactions",
        "url": "https://app.fizzy.do/1/cards/42#comment_7",
    },
}


@pytest.fixture
def card_event_payload() -> dict:
    """A fresh card_published payload, safe to mutate."""
    return copy.deepcopy(CARD_EVENT)


@pytest.fixture
def comment_event_payload() -> dict:
    """A fresh comment_created payload, safe to mutate."""
    return copy.deepcopy(COMMENT_EVENT)


@pytest.fixture
def settings() -> Settings:
    """Settings with a webhook URL and signing secret, ignoring any local .env."""
    return Settings(
        _env_file=None,
        slack_webhook_url=TEST_WEBHOOK_URL,
        fizzy_signing_secret=TEST_SIGNING_SECRET,
    )


@pytest.fixture
def client(settings: Settings):
    """Create a TestClient with settings injected through dependency overrides."""
    app.dependency_overrides[get_settings] = lambda: settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
