"""Pydantic models and value objects for inbound deliveries."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from hookgate.models.enums import CHALLENGE_EVENT


@dataclass(frozen=True)
class RawDelivery:
    """The exact request body plus its headers, for the duration of one request.

    Header names are stored lower-cased so lookups ignore case.
    """

    body: bytes
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", {k.lower(): v for k, v in self.headers.items()})

    def header(self, name: str) -> str:
        """Return the header value, or an empty string when absent."""
        return self.headers.get(name.lower(), "")


class WebhookEnvelope(BaseModel):
    """Decoded delivery body.

    Fields are left untyped: the gateway never interprets event payloads beyond
    the challenge discriminator, and a body the platform sends with unexpected
    shapes must still be forwarded.
    """

    model_config = ConfigDict(extra="allow")

    event: Any = None
    payload: Any = None

    @property
    def is_challenge(self) -> bool:
        return self.event == CHALLENGE_EVENT

    @property
    def plain_token(self) -> str | None:
        if not isinstance(self.payload, dict):
            return None
        token = self.payload.get("plainToken")
        return token if isinstance(token, str) and token else None


class ChallengeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    plain_token: str = Field(..., alias="plainToken")
    encrypted_token: str = Field(..., alias="encryptedToken")


class ForwardResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ok: bool = True
    forwarded_status: int = Field(..., alias="forwardedStatus")


class ErrorResponse(BaseModel):
    ok: bool = False
    error: str


@dataclass(frozen=True)
class ForwardResult:
    """Outcome of relaying a delivery downstream. Carries no downstream body."""

    status_code: int
    success: bool
