"""String enums for the verification pipeline."""

from enum import StrEnum


class VerificationOutcome(StrEnum):
    SKIP = "skip"
    FRESH = "fresh"
    STALE = "stale"
    INVALID = "invalid"


CHALLENGE_EVENT = "endpoint.url_validation"
