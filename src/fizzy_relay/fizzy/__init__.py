"""Fizzy ingress: webhook route and signature verification."""

from fizzy_relay.fizzy.router import router
from fizzy_relay.fizzy.verification import verify_fizzy_request, verify_signature

__all__ = [
    "router",
    "verify_fizzy_request",
    "verify_signature",
]
