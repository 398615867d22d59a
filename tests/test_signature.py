"""Tests for v0 HMAC signing helpers."""

import hashlib
import hmac

from hookgate.services.signature import (
    has_signature_prefix,
    hmac_hex,
    sign,
    signatures_match,
    signed_message,
)


def test_hmac_hex_matches_stdlib():
    expected = hmac.new(b"shh", b"abc123", hashlib.sha256).hexdigest()
    assert hmac_hex("shh", "abc123") == expected
    assert hmac_hex(b"shh", b"abc123") == expected


def test_hmac_hex_is_lowercase_hex():
    digest = hmac_hex("secret", "message")
    assert len(digest) == 64
    assert digest == digest.lower()
    int(digest, 16)


def test_signed_message_uses_raw_body_bytes():
    body = b'{"b": 1,   "a": 2}'
    assert signed_message("1700000000", body) == b'v0:1700000000:{"b": 1,   "a": 2}'


def test_sign_format():
    body = b'{"event":"meeting.started"}'
    sig = sign("shh", "1700000000", body)
    expected = hmac.new(b"shh", b'v0:1700000000:{"event":"meeting.started"}', hashlib.sha256).hexdigest()
    assert sig == "v0=" + expected


def test_prefix_detection():
    assert has_signature_prefix("v0=abcdef")
    assert not has_signature_prefix("v1=abcdef")
    assert not has_signature_prefix("abcdef")
    assert not has_signature_prefix("")


def test_signatures_match_is_exact():
    sig = sign("shh", "1", b"{}")
    assert signatures_match(sig, sig)
    assert not signatures_match(sig, sig.upper())
    assert not signatures_match(sig, sig[:-1])
    assert not signatures_match(sig, sig + "0")
