"""Relay verified deliveries to the downstream receiver."""

import logging

import httpx

from hookgate.errors.exceptions import DownstreamTimeout, DownstreamUnavailable, MissingDestination
from hookgate.models.delivery import ForwardResult

logger = logging.getLogger(__name__)


class Forwarder:
    """POST the raw delivery body to a single destination, once.

    ``transport`` lets tests substitute an ``httpx.MockTransport`` for the
    network.
    """

    def __init__(
        self,
        destination_url: str,
        timeout: float | None = 10.0,
        follow_redirects: bool = True,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.destination_url = destination_url
        self._timeout = timeout
        self._follow_redirects = follow_redirects
        self._transport = transport

    async def forward(self, body: bytes) -> ForwardResult:
        if not self.destination_url:
            raise MissingDestination()

        headers = {"Content-Type": "application/json"}
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout,
                follow_redirects=self._follow_redirects,
                transport=self._transport,
            ) as client:
                resp = await client.post(self.destination_url, content=body, headers=headers)
        except httpx.TimeoutException as exc:
            logger.warning("Forwarding timed out: %s", type(exc).__name__)
            raise DownstreamTimeout() from exc
        except httpx.HTTPError as exc:
            logger.warning("Forwarding failed: %s", type(exc).__name__)
            raise DownstreamUnavailable() from exc

        result = ForwardResult(status_code=resp.status_code, success=resp.is_success)
        if result.success:
            logger.info("Delivery forwarded (status=%d)", result.status_code)
        else:
            logger.warning("Downstream answered with status %d", result.status_code)
        return result
