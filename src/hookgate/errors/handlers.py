"""FastAPI exception handlers producing ``{ok: false, error: ...}`` responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from hookgate.errors.exceptions import AuthenticationError, HookgateError
from hookgate.models.delivery import ErrorResponse

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """Register all custom exception handlers on the FastAPI app."""

    @app.exception_handler(HookgateError)
    async def hookgate_error_handler(request: Request, exc: HookgateError):
        trace_id = getattr(request.state, "trace_id", "unknown")
        log_extra = {
            "path": request.url.path,
            "trace_id": trace_id,
            "code": exc.code,
            "client": request.client.host if request.client else "unknown",
        }
        if isinstance(exc, AuthenticationError):
            logger.warning("webhook_rejected", extra=log_extra)
        elif exc.status_code >= 500:
            logger.error("webhook_failed", extra=log_extra)
        else:
            logger.info("webhook_bad_request", extra=log_extra)

        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(error=exc.message).model_dump(),
        )
