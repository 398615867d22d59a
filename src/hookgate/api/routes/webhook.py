"""Inbound webhook endpoint."""

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse
from starlette.datastructures import Headers

from hookgate.dependencies import Dispatcher
from hookgate.models.delivery import RawDelivery


def collect_headers(headers: Headers) -> dict[str, str]:
    """Flatten request headers, joining repeated fields with ``", "``."""
    return {name: ", ".join(headers.getlist(name)) for name in headers.keys()}


def build_router(path: str) -> APIRouter:
    """Create the webhook router mounted at ``path``."""
    router = APIRouter(tags=["Webhook"])

    @router.post(path)
    async def receive_webhook(request: Request, dispatcher: Dispatcher) -> dict:
        """Verify a platform delivery and relay it downstream."""
        delivery = RawDelivery(body=await request.body(), headers=collect_headers(request.headers))
        return await dispatcher.dispatch(delivery)

    @router.get(path, response_class=PlainTextResponse)
    async def liveness() -> str:
        """Liveness probe."""
        return "ok"

    return router
