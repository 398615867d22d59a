"""FastAPI dependency injection providers."""

from typing import Annotated

from fastapi import Depends, Request

from hookgate.services.dispatcher import RequestDispatcher


def get_dispatcher(request: Request) -> RequestDispatcher:
    """Return the dispatcher built at application startup."""
    return request.app.state.dispatcher


# Type aliases for dependency injection
Dispatcher = Annotated[RequestDispatcher, Depends(get_dispatcher)]
