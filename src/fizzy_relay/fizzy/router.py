"""Fizzy webhook router: verify, parse, format, forward."""

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError
from slack_sdk.errors import SlackObjectFormationError

from fizzy_relay.config import Settings, get_settings
from fizzy_relay.fizzy.verification import verify_fizzy_request
from fizzy_relay.models.fizzy import FizzyEvent
from fizzy_relay.slack.blocks import build_slack_payload
from fizzy_relay.slack.forwarder import SlackForwardError, forward_to_slack

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["fizzy"])


@router.post("/", response_class=PlainTextResponse)
async def fizzy_webhook(
    body: bytes = Depends(verify_fizzy_request),
    settings: Settings = Depends(get_settings),
) -> PlainTextResponse:
    """Receive a Fizzy webhook and relay it to Slack.

    Only POST is routed here; other methods get 405 from the router before
    the body is read.
    """
    try:
        event = FizzyEvent.model_validate_json(body)
    except ValidationError:
        raise HTTPException(status_code=400, detail="Invalid JSON")

    try:
        payload = build_slack_payload(event)
    except SlackObjectFormationError as exc:
        # Over Block Kit limits, e.g. section text past 3000 characters
        logger.error(
            "Slack payload rejected before sending: %s",
            exc,
            extra={"fizzy_event_id": event.id, "fizzy_action": event.action},
        )
        raise HTTPException(status_code=502, detail="Failed to forward to Slack")

    try:
        await forward_to_slack(
            payload,
            settings.slack_webhook_url,
            timeout=settings.slack_timeout_seconds,
        )
    except SlackForwardError as exc:
        logger.error(
            "Slack error: %s %s (%s)",
            exc.status_code,
            exc.body,
            exc,
            extra={"fizzy_event_id": event.id, "fizzy_action": event.action},
        )
        raise HTTPException(status_code=502, detail="Failed to forward to Slack")

    return PlainTextResponse("OK")
