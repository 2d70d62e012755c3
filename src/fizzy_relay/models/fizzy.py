"""Fizzy webhook event models.

The event's ``eventable`` is either a card or a comment snapshot. The payload
carries no type tag on the eventable itself; the sibling ``action`` field
decides which shape to validate against.
"""

from datetime import datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationInfo, field_validator


class FizzyAction(str, Enum):
    """Known Fizzy event action kinds."""

    CARD_PUBLISHED = "card_published"
    CARD_ASSIGNED = "card_assigned"
    CARD_UNASSIGNED = "card_unassigned"
    CARD_CLOSED = "card_closed"
    CARD_REOPENED = "card_reopened"
    CARD_POSTPONED = "card_postponed"
    CARD_AUTO_POSTPONED = "card_auto_postponed"
    CARD_TRIAGED = "card_triaged"
    CARD_SENT_BACK_TO_TRIAGE = "card_sent_back_to_triage"
    CARD_BOARD_CHANGED = "card_board_changed"
    COMMENT_CREATED = "comment_created"


class FizzyUser(BaseModel):
    """A Fizzy user as embedded in event payloads."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    name: str | None = None
    role: str = ""
    active: bool = True
    email_address: str = ""
    created_at: datetime | None = None
    url: str = ""


class FizzyBoard(BaseModel):
    """The board an event or card belongs to."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    name: str
    all_access: bool = False
    created_at: datetime | None = None
    creator: FizzyUser | None = None


class FizzyColumn(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = ""
    name: str


class CardEventable(BaseModel):
    """Snapshot of a card at the time of the event."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    title: str
    status: str = ""
    image_url: str | None = None
    golden: bool = False
    last_active_at: datetime | None = None
    created_at: datetime | None = None
    url: str
    board: FizzyBoard | None = None
    column: FizzyColumn | None = None  # None while the card is untriaged
    creator: FizzyUser | None = None


class CommentBody(BaseModel):
    model_config = ConfigDict(frozen=True)

    plain_text: str
    html: str = ""


class CommentEventable(BaseModel):
    """Snapshot of a newly created comment."""

    model_config = ConfigDict(frozen=True)

    id: str = ""
    created_at: datetime | None = None
    body: CommentBody
    creator: FizzyUser | None = None
    reactions_url: str = ""
    url: str


class FizzyEvent(BaseModel):
    """A single Fizzy webhook delivery.

    ``action`` stays a plain string so kinds added to Fizzy later still parse;
    anything other than ``comment_created`` is treated as a card event.
    """

    model_config = ConfigDict(frozen=True)

    id: str = ""
    action: str
    created_at: datetime
    board: FizzyBoard
    creator: FizzyUser | None = None
    eventable: CardEventable | CommentEventable

    @field_validator("eventable", mode="before")
    @classmethod
    def _select_eventable(cls, value: Any, info: ValidationInfo) -> Any:
        """Validate the eventable against the shape implied by ``action``."""
        action = info.data.get("action")
        if action == FizzyAction.COMMENT_CREATED.value:
            expected = CommentEventable
        else:
            expected = CardEventable
        if isinstance(value, (CardEventable, CommentEventable)):
            if not isinstance(value, expected):
                raise ValueError(
                    f"{action!r} events carry a {expected.__name__}, got {type(value).__name__}"
                )
            return value
        return expected.model_validate(value)

    @property
    def is_comment(self) -> bool:
        return self.action == FizzyAction.COMMENT_CREATED.value
