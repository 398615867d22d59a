"""Per-request orchestration of the verification pipeline.

Order: parse the body, answer URL validation challenges, authenticate the
delivery, then forward it. Every failure raises a ``HookgateError`` so each
request ends in exactly one response.
"""

import logging
import time
from collections.abc import Callable
from typing import Any

from hookgate.config import Settings
from hookgate.errors.exceptions import InvalidSignature, MissingSignature, StaleTimestamp
from hookgate.logging_config import bind_request_context
from hookgate.models.delivery import ForwardResponse, RawDelivery
from hookgate.models.enums import VerificationOutcome
from hookgate.services.challenge import respond_to_challenge
from hookgate.services.envelope_parser import parse_envelope
from hookgate.services.forwarder import Forwarder
from hookgate.services.verifier import SignatureVerifier

logger = logging.getLogger(__name__)


class RequestDispatcher:
    def __init__(
        self,
        config: Settings,
        forwarder: Forwarder | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._secret = config.webhook_secret.get_secret_value()
        self._require_signature = config.require_signature
        self._verifier = SignatureVerifier(
            self._secret,
            signature_header=config.signature_header,
            timestamp_header=config.timestamp_header,
            tolerance=config.timestamp_tolerance_seconds,
            clock=clock,
        )
        self._forwarder = forwarder or Forwarder(
            config.gas_url,
            timeout=config.forward_timeout_seconds,
            follow_redirects=config.forward_follow_redirects,
        )

    async def dispatch(self, delivery: RawDelivery) -> dict[str, Any]:
        """Run one delivery through the pipeline and return the JSON response body."""
        envelope = parse_envelope(delivery.body)
        if isinstance(envelope.event, str):
            bind_request_context(webhook_event=envelope.event)

        if envelope.is_challenge:
            return respond_to_challenge(envelope, self._secret).model_dump(by_alias=True)

        outcome = self._verifier.verify(delivery)
        if outcome is VerificationOutcome.STALE:
            raise StaleTimestamp()
        if outcome is VerificationOutcome.INVALID:
            raise InvalidSignature()
        if outcome is VerificationOutcome.SKIP:
            if self._require_signature:
                raise MissingSignature()
            logger.info("Forwarding unauthenticated delivery")

        result = await self._forwarder.forward(delivery.body)
        return ForwardResponse(forwarded_status=result.status_code).model_dump(by_alias=True)
