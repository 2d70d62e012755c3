"""Forward formatted payloads to a Slack incoming webhook.

One POST per call, no retries. Any outcome other than a 2xx response is
raised as SlackForwardError so the caller can decide how to report it.
"""

import httpx


class SlackForwardError(Exception):
    """Raised when Slack did not accept the forwarded payload."""

    def __init__(self, message: str, status_code: int | None = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


async def forward_to_slack(payload: dict, webhook_url: str, timeout: float = 10.0) -> None:
    """POST ``payload`` as JSON to ``webhook_url``.

    Args:
        payload: Slack message payload (``{"blocks": [...]}``).
        webhook_url: Slack incoming webhook URL.
        timeout: Seconds to wait on the outbound request.

    Raises:
        SlackForwardError: If the URL is not configured, the request fails at
            the transport level, or Slack responds with a non-2xx status.
    """
    if not webhook_url:
        raise SlackForwardError("Slack webhook URL is not configured")

    try:
        async with httpx.AsyncClient(timeout=httpx.Timeout(timeout)) as client:
            response = await client.post(webhook_url, json=payload)
    except httpx.HTTPError as exc:
        raise SlackForwardError(f"Request to Slack failed: {exc}") from exc

    if not response.is_success:
        raise SlackForwardError(
            f"Slack responded with {response.status_code}",
            status_code=response.status_code,
            body=response.text,
        )
