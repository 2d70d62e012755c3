"""Fizzy webhook signature verification as a FastAPI dependency."""

import hashlib
import hmac

from fastapi import Depends, HTTPException, Request

from fizzy_relay.config import Settings, get_settings

SIGNATURE_HEADER = "X-Webhook-Signature"


def compute_signature(body: bytes, secret: str) -> str:
    """Return the lowercase hex HMAC-SHA256 of ``body`` keyed by ``secret``."""
    return hmac.new(secret.encode("utf-8"), body, hashlib.sha256).hexdigest()


def verify_signature(body: bytes, signature: str, secret: str) -> bool:
    """Check ``signature`` against the HMAC-SHA256 of ``body``.

    The comparison is exact (hex case matters) and constant-time.
    """
    expected = compute_signature(body, secret)
    return hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))


async def verify_fizzy_request(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> bytes:
    """Verify the Fizzy signature header and return the raw request body.

    Reads the raw body FIRST (before any JSON parsing) so the signature is
    checked against the exact bytes Fizzy signed.

    Verification only runs when both the signature header and a signing
    secret are present. Deliveries missing either one are accepted
    unauthenticated, which keeps deployments without a secret working.

    Raises HTTPException(401) if the signature does not match.
    """
    body = await request.body()

    signature = request.headers.get(SIGNATURE_HEADER, "")
    secret = settings.fizzy_signing_secret

    if signature and secret and not verify_signature(body, signature, secret):
        raise HTTPException(status_code=401, detail="Invalid signature")

    return body
