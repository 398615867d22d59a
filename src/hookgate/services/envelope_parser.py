"""Decode raw delivery bodies into webhook envelopes."""

import json
import logging

from hookgate.errors.exceptions import MalformedBody
from hookgate.models.delivery import WebhookEnvelope

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    raise ValueError(f"{name} is not valid JSON")


def parse_envelope(body: bytes) -> WebhookEnvelope:
    """Strictly decode a JSON body.

    An empty body yields an empty envelope, as does valid JSON whose top level
    is not an object: it carries no event and is forwarded untouched. A leading
    UTF-8 byte order mark is ignored for decoding only; signatures are still
    computed over the raw bytes. Invalid UTF-8, malformed JSON and the
    non-standard ``NaN``/``Infinity`` literals raise ``MalformedBody``.
    """
    if not body:
        return WebhookEnvelope()

    try:
        data = json.loads(body.decode("utf-8-sig"), parse_constant=_reject_constant)
    except ValueError as exc:
        logger.debug("Body is not valid JSON: %s", exc)
        raise MalformedBody() from exc

    if not isinstance(data, dict):
        logger.debug("Body JSON is a %s, no event to read", type(data).__name__)
        return WebhookEnvelope()

    return WebhookEnvelope.model_validate(data)
