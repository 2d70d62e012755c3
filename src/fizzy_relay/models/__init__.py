"""Data models for inbound Fizzy webhook events."""

from fizzy_relay.models.fizzy import (
    CardEventable,
    CommentBody,
    CommentEventable,
    FizzyAction,
    FizzyBoard,
    FizzyColumn,
    FizzyEvent,
    FizzyUser,
)

__all__ = [
    "FizzyAction",
    "FizzyUser",
    "FizzyBoard",
    "FizzyColumn",
    "CardEventable",
    "CommentBody",
    "CommentEventable",
    "FizzyEvent",
]
