"""Middleware that resolves the client address of every request."""

from typing import Any

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from forwarded_for.config import ForwardedConfig
from forwarded_for.dependencies import request_transport
from forwarded_for.resolver import resolve


class ForwardedMiddleware(BaseHTTPMiddleware):
    """Stores the resolved client address on request.state.

    Args:
        app: FastAPI application instance
        config: Resolver settings (loaded from env when None)

    Example:
        >>> from fastapi import FastAPI
        >>> from forwarded_for import ForwardedMiddleware
        >>>
        >>> app = FastAPI()
        >>> app.add_middleware(ForwardedMiddleware)
    """

    def __init__(self, app: Any, config: ForwardedConfig | None = None) -> None:
        super().__init__(app)
        self.config = config or ForwardedConfig()

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        forwarded = resolve(
            request_transport(request),
            request.headers,
            self.config.whitelist,
        )
        setattr(request.state, self.config.state_attribute, forwarded)

        return await call_next(request)
