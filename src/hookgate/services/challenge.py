"""Endpoint ownership challenge (``endpoint.url_validation``).

The platform sends a ``plainToken``; the endpoint proves it holds the shared
secret by returning the HMAC of that token without revealing the secret.
"""

import logging

from hookgate.errors.exceptions import MissingChallengeMaterial
from hookgate.models.delivery import ChallengeResponse, WebhookEnvelope
from hookgate.services.signature import hmac_hex

logger = logging.getLogger(__name__)


def respond_to_challenge(envelope: WebhookEnvelope, secret: str) -> ChallengeResponse:
    """Answer a URL validation challenge or raise ``MissingChallengeMaterial``."""
    plain_token = envelope.plain_token
    if not plain_token or not secret:
        logger.warning(
            "URL validation cannot be answered (token=%s, secret=%s)",
            "present" if plain_token else "missing",
            "configured" if secret else "missing",
        )
        raise MissingChallengeMaterial()

    logger.info("Answering URL validation challenge")
    return ChallengeResponse(
        plain_token=plain_token,
        encrypted_token=hmac_hex(secret, plain_token),
    )
