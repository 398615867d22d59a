"""Tests for the delivery signature state machine."""

import pytest

from hookgate.models.delivery import RawDelivery
from hookgate.models.enums import VerificationOutcome
from hookgate.services.signature import sign
from hookgate.services.verifier import SignatureVerifier

NOW = 1_700_000_000
BODY = b'{"event":"meeting.started","payload":{"object":{"id":"85746065"}}}'


def _verifier(secret="shh"):
    return SignatureVerifier(secret, clock=lambda: NOW)


def _delivery(body=BODY, timestamp=str(NOW), signature=None, secret="shh"):
    headers = {}
    if timestamp is not None:
        headers["x-zm-request-timestamp"] = timestamp
    if signature is None:
        signature = sign(secret, timestamp or "", body)
    if signature:
        headers["x-zm-signature"] = signature
    return RawDelivery(body=body, headers=headers)


def test_valid_signature_is_fresh():
    assert _verifier().verify(_delivery()) is VerificationOutcome.FRESH


def test_headers_are_case_insensitive():
    ts = str(NOW)
    delivery = RawDelivery(
        body=BODY,
        headers={"X-Zm-Request-Timestamp": ts, "X-ZM-Signature": sign("shh", ts, BODY)},
    )
    assert _verifier().verify(delivery) is VerificationOutcome.FRESH


def test_no_secret_skips():
    assert _verifier(secret="").verify(_delivery(signature="v0=deadbeef")) is VerificationOutcome.SKIP


def test_missing_signature_skips():
    assert _verifier().verify(_delivery(signature="")) is VerificationOutcome.SKIP


def test_signature_without_prefix_skips():
    assert _verifier().verify(_delivery(signature="sha256=deadbeef")) is VerificationOutcome.SKIP


def test_missing_timestamp_skips():
    delivery = RawDelivery(body=BODY, headers={"x-zm-signature": "v0=deadbeef"})
    assert _verifier().verify(delivery) is VerificationOutcome.SKIP


def test_stale_timestamp():
    ts = str(NOW - 301)
    assert _verifier().verify(_delivery(timestamp=ts)) is VerificationOutcome.STALE


def test_boundary_timestamp_is_fresh():
    ts = str(NOW - 300)
    assert _verifier().verify(_delivery(timestamp=ts)) is VerificationOutcome.FRESH


def test_non_numeric_timestamp_is_stale():
    assert _verifier().verify(_delivery(timestamp="yesterday")) is VerificationOutcome.STALE


def test_stale_checked_before_signature():
    delivery = _delivery(timestamp=str(NOW - 1000), signature="v0=deadbeef")
    assert _verifier().verify(delivery) is VerificationOutcome.STALE


def test_wrong_secret_is_invalid():
    delivery = _delivery(secret="not-the-secret")
    assert _verifier().verify(delivery) is VerificationOutcome.INVALID


def test_timestamp_is_bound_into_signature():
    ts = str(NOW)
    signed_for_other_ts = sign("shh", str(NOW - 10), BODY)
    delivery = _delivery(timestamp=ts, signature=signed_for_other_ts)
    assert _verifier().verify(delivery) is VerificationOutcome.INVALID


@pytest.mark.parametrize("index", [0, 10, len(BODY) // 2, len(BODY) - 1])
def test_any_body_byte_change_invalidates(index):
    ts = str(NOW)
    signature = sign("shh", ts, BODY)
    tampered = bytearray(BODY)
    tampered[index] ^= 0x01
    delivery = RawDelivery(
        body=bytes(tampered),
        headers={"x-zm-request-timestamp": ts, "x-zm-signature": signature},
    )
    assert _verifier().verify(delivery) is VerificationOutcome.INVALID


def test_reserialized_body_does_not_verify():
    ts = str(NOW)
    raw = b'{"event": "meeting.started",  "payload": {}}'
    signature = sign("shh", ts, raw)
    compact = b'{"event":"meeting.started","payload":{}}'
    delivery = RawDelivery(body=compact, headers={"x-zm-request-timestamp": ts, "x-zm-signature": signature})
    assert _verifier().verify(delivery) is VerificationOutcome.INVALID


def test_custom_header_names():
    ts = str(NOW)
    verifier = SignatureVerifier(
        "shh", signature_header="x-signature", timestamp_header="x-timestamp", clock=lambda: NOW
    )
    delivery = RawDelivery(body=BODY, headers={"x-timestamp": ts, "x-signature": sign("shh", ts, BODY)})
    assert verifier.verify(delivery) is VerificationOutcome.FRESH
