"""Delivery authentication: timestamp freshness plus ``v0`` HMAC signature."""

import logging
import time
from collections.abc import Callable

from hookgate.models.delivery import RawDelivery
from hookgate.models.enums import VerificationOutcome
from hookgate.services.signature import has_signature_prefix, sign, signatures_match
from hookgate.services.timestamp_guard import DEFAULT_TOLERANCE_SECONDS, is_timestamp_fresh

logger = logging.getLogger(__name__)


class SignatureVerifier:
    """Classify a delivery as skip, fresh, stale or invalid.

    Verification only applies when a secret is configured and the delivery
    carries a ``v0=`` signature and a timestamp; otherwise the outcome is
    ``SKIP`` and the caller decides whether unsigned traffic is acceptable.
    """

    def __init__(
        self,
        secret: str,
        signature_header: str = "x-zm-signature",
        timestamp_header: str = "x-zm-request-timestamp",
        tolerance: int = DEFAULT_TOLERANCE_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._secret = secret
        self._signature_header = signature_header
        self._timestamp_header = timestamp_header
        self._tolerance = tolerance
        self._clock = clock

    def verify(self, delivery: RawDelivery) -> VerificationOutcome:
        signature = delivery.header(self._signature_header)
        timestamp = delivery.header(self._timestamp_header)

        if not self._secret or not has_signature_prefix(signature) or not timestamp:
            logger.debug("Signature check skipped")
            return VerificationOutcome.SKIP

        if not is_timestamp_fresh(timestamp, now=self._clock(), tolerance=self._tolerance):
            return VerificationOutcome.STALE

        expected = sign(self._secret, timestamp, delivery.body)
        if not signatures_match(expected, signature):
            return VerificationOutcome.INVALID

        return VerificationOutcome.FRESH
