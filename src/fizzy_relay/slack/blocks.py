"""Build Slack Block Kit payloads from Fizzy events.

Pure functions only: no I/O, and the same event always yields the same payload.
Comment events get a quote of the comment body; every other action kind
(including kinds this module does not know about) gets the card layout.
"""

from datetime import datetime, timezone

from slack_sdk.models.blocks import (
    Block,
    ContextBlock,
    MarkdownTextObject,
    SectionBlock,
)

from fizzy_relay.models.fizzy import (
    CardEventable,
    CommentEventable,
    FizzyAction,
    FizzyEvent,
)

ACTION_LABELS: dict[str, str] = {
    FizzyAction.CARD_PUBLISHED.value: "published a card",
    FizzyAction.CARD_ASSIGNED.value: "assigned",
    FizzyAction.CARD_UNASSIGNED.value: "unassigned",
    FizzyAction.CARD_CLOSED.value: "closed",
    FizzyAction.CARD_REOPENED.value: "reopened",
    FizzyAction.CARD_POSTPONED.value: "postponed",
    FizzyAction.CARD_AUTO_POSTPONED.value: "auto-postponed",
    FizzyAction.CARD_TRIAGED.value: "triaged",
    FizzyAction.CARD_SENT_BACK_TO_TRIAGE.value: "sent back to triage",
    FizzyAction.CARD_BOARD_CHANGED.value: "moved to a different board",
    FizzyAction.COMMENT_CREATED.value: "commented on",
}

ACTION_EMOJIS: dict[str, str] = {
    FizzyAction.CARD_PUBLISHED.value: "\U0001f4dd",  # memo
    FizzyAction.CARD_ASSIGNED.value: "\U0001f464",  # bust in silhouette
    FizzyAction.CARD_UNASSIGNED.value: "\U0001f464",
    FizzyAction.CARD_CLOSED.value: "\u2705",  # check mark
    FizzyAction.CARD_REOPENED.value: "\U0001f504",  # arrows
    FizzyAction.CARD_POSTPONED.value: "\u23f8\ufe0f",  # pause
    FizzyAction.CARD_AUTO_POSTPONED.value: "\u23f8\ufe0f",
    FizzyAction.CARD_TRIAGED.value: "\U0001f4cb",  # clipboard
    FizzyAction.CARD_SENT_BACK_TO_TRIAGE.value: "\u21a9\ufe0f",  # return arrow
    FizzyAction.CARD_BOARD_CHANGED.value: "\u27a1\ufe0f",  # right arrow
    FizzyAction.COMMENT_CREATED.value: "\U0001f4ac",  # speech balloon
}

DEFAULT_EMOJI = "\U0001f4cc"  # pushpin
DEFAULT_ACTOR = "Someone"
COMMENT_PREVIEW_LIMIT = 300
ELLIPSIS = "\u2026"
CONTEXT_SEPARATOR = " \u2022 "


def action_label(action: str) -> str:
    """Human-readable verb phrase for an action kind, or the raw kind if unknown."""
    return ACTION_LABELS.get(action, action)


def action_emoji(action: str) -> str:
    """Emoji for an action kind, or a pushpin if unknown."""
    return ACTION_EMOJIS.get(action, DEFAULT_EMOJI)


def truncate(text: str, limit: int = COMMENT_PREVIEW_LIMIT) -> str:
    """Cut ``text`` to ``limit`` characters, appending an ellipsis when cut."""
    if len(text) > limit:
        return text[:limit] + ELLIPSIS
    return text


def format_timestamp(value: datetime) -> str:
    """Render a timestamp in UTC as e.g. ``1/15/2025, 3:04:05 PM``.

    Naive datetimes are assumed to already be UTC.
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    hour = value.hour % 12 or 12
    meridiem = "AM" if value.hour < 12 else "PM"
    return (
        f"{value.month}/{value.day}/{value.year}, "
        f"{hour}:{value.minute:02d}:{value.second:02d} {meridiem}"
    )


def _actor_name(event: FizzyEvent) -> str:
    if event.creator is None or event.creator.name is None:
        return DEFAULT_ACTOR
    return event.creator.name


def _mrkdwn(text: str) -> MarkdownTextObject:
    return MarkdownTextObject(text=text)


def build_comment_blocks(event: FizzyEvent, comment: CommentEventable) -> list[Block]:
    """Header, quoted comment preview, and a link back to the comment."""
    emoji = action_emoji(event.action)
    actor = _actor_name(event)
    preview = truncate(comment.body.plain_text)

    return [
        SectionBlock(
            text=_mrkdwn(f"{emoji} *{actor}* commented on a card in *{event.board.name}*")
        ),
        SectionBlock(text=_mrkdwn(f"> {preview}")),
        ContextBlock(elements=[_mrkdwn(f"<{comment.url}|View comment>")]),
    ]


def build_card_fields(event: FizzyEvent, card: CardEventable) -> list[MarkdownTextObject]:
    """Column (if any), board (always), golden (if set), in that order."""
    fields = []
    if card.column is not None:
        fields.append(_mrkdwn(f"*Column:* {card.column.name}"))
    fields.append(_mrkdwn(f"*Board:* {event.board.name}"))
    if card.golden:
        fields.append(_mrkdwn("*Golden:* \u2b50 Yes"))
    return fields


def build_card_blocks(event: FizzyEvent, card: CardEventable) -> list[Block]:
    """Header linking the card, a field section, and a board/time context line."""
    emoji = action_emoji(event.action)
    label = action_label(event.action)
    actor = _actor_name(event)

    blocks: list[Block] = [
        SectionBlock(text=_mrkdwn(f"{emoji} *{actor}* {label} *<{card.url}|{card.title}>*")),
    ]

    blocks.append(SectionBlock(fields=build_card_fields(event, card)))

    blocks.append(
        ContextBlock(
            elements=[
                _mrkdwn(
                    f"{event.board.name}{CONTEXT_SEPARATOR}{format_timestamp(event.created_at)}"
                )
            ]
        )
    )
    return blocks


def build_slack_payload(event: FizzyEvent) -> dict:
    """Convert a Fizzy event into a Slack incoming-webhook payload.

    Returns:
        ``{"blocks": [...]}`` with each block serialized to its JSON dict form.

    Raises:
        SlackObjectFormationError: If a block exceeds Block Kit limits, such as
            section text longer than 3000 characters.
    """
    if event.is_comment:
        blocks = build_comment_blocks(event, event.eventable)
    else:
        blocks = build_card_blocks(event, event.eventable)
    return {"blocks": [block.to_dict() for block in blocks]}
