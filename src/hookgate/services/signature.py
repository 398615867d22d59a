"""HMAC-SHA256 signing in the platform's ``v0`` wire format.

A delivery is signed over ``v0:{timestamp}:{raw body}`` and the signature header
carries ``v0=`` followed by the lowercase hex digest.
"""

import hashlib
import hmac

SIGNATURE_VERSION = "v0"
SIGNATURE_PREFIX = f"{SIGNATURE_VERSION}="


def _as_bytes(value: str | bytes) -> bytes:
    return value.encode("utf-8") if isinstance(value, str) else value


def hmac_hex(secret: str | bytes, message: str | bytes) -> str:
    """Compute hex(HMAC-SHA256(secret, message))."""
    return hmac.new(_as_bytes(secret), _as_bytes(message), hashlib.sha256).hexdigest()


def signed_message(timestamp: str, body: bytes) -> bytes:
    """Build the canonical signing input from the untouched raw body."""
    return f"{SIGNATURE_VERSION}:{timestamp}:".encode("utf-8") + body


def sign(secret: str | bytes, timestamp: str, body: bytes) -> str:
    """Return the full signature header value for a delivery."""
    return SIGNATURE_PREFIX + hmac_hex(secret, signed_message(timestamp, body))


def has_signature_prefix(value: str) -> bool:
    return value.startswith(SIGNATURE_PREFIX)


def signatures_match(expected: str, received: str) -> bool:
    """Exact comparison in constant time."""
    return hmac.compare_digest(_as_bytes(expected), _as_bytes(received))
