"""FastAPI application factory."""

import logging
import os

from fastapi import FastAPI

from hookgate.config import Settings, settings
from hookgate.logging_config import configure_logging
from hookgate.services.dispatcher import RequestDispatcher
from hookgate.services.forwarder import Forwarder

# Configure logging at import time
_json_logs = os.environ.get("HOOKGATE_LOCAL", "0") != "1"
configure_logging(log_level=settings.log_level, json_output=_json_logs)

logger = logging.getLogger(__name__)


def create_app(config: Settings | None = None, forwarder: Forwarder | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    ``config`` defaults to the environment-derived settings; tests pass their
    own, along with a forwarder bound to a mock transport.
    """
    config = config or settings

    app = FastAPI(
        title="hookgate",
        version="0.1.0",
        description="Verifies Zoom webhook deliveries and relays them to a downstream endpoint.",
    )

    from hookgate.api.middleware.trace_id import TraceIdMiddleware
    app.add_middleware(TraceIdMiddleware)

    from hookgate.errors.handlers import register_exception_handlers
    register_exception_handlers(app)

    app.state.dispatcher = RequestDispatcher(config, forwarder=forwarder)

    from hookgate.api.routes.webhook import build_router
    app.include_router(build_router(config.webhook_path))

    if not config.secret_configured:
        logger.warning("No webhook secret configured, signature verification disabled")
    elif config.require_signature:
        logger.info("Unsigned deliveries will be rejected")
    if not config.gas_url:
        logger.warning("No destination URL configured, deliveries cannot be forwarded")

    return app


app = create_app()
