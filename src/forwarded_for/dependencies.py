"""FastAPI dependency helpers.

Example:
    >>> from fastapi import APIRouter, Depends
    >>> from forwarded_for import Forwarded, get_forwarded
    >>>
    >>> router = APIRouter()
    >>>
    >>> @router.get("/whoami")
    >>> async def whoami(client: Forwarded = Depends(get_forwarded)):
    ...     return client
"""

from collections.abc import Callable
from typing import Any

from fastapi import Request

from forwarded_for.config import ForwardedConfig
from forwarded_for.constants import Defaults, TransportField
from forwarded_for.models import Forwarded
from forwarded_for.resolver import resolve


def request_transport(request: Request) -> dict[str, Any]:
    """Map the directly connected peer of a request to a transport shape.

    Args:
        request: FastAPI Request object

    Returns:
        {remoteAddress, remotePort} mapping, empty when the peer is unknown
    """
    client = request.client
    if client is None:
        return {}

    return {
        TransportField.REMOTE_ADDRESS: client.host,
        TransportField.REMOTE_PORT: client.port,
    }


def forwarded_dependency(config: ForwardedConfig | None = None) -> Callable[[Request], Forwarded]:
    """Dependency factory resolving the originating client address.

    Reuses the result ForwardedMiddleware stored under the same
    state_attribute, so each request is resolved once. Pass the config the
    middleware was added with when it sets a custom state_attribute.

    Args:
        config: Resolver settings shared with the middleware (defaults when None)

    Returns:
        Dependency function for FastAPI Depends

    Example:
        >>> config = ForwardedConfig(state_attribute="client_address")
        >>> app.add_middleware(ForwardedMiddleware, config=config)
        >>>
        >>> @router.get("/whoami")
        >>> async def whoami(client: Forwarded = Depends(forwarded_dependency(config))):
        ...     return client
    """
    state_attribute = config.state_attribute if config else Defaults.STATE_ATTRIBUTE
    whitelist = config.whitelist if config else None

    def _get_forwarded(request: Request) -> Forwarded:
        cached = getattr(request.state, state_attribute, None)
        if isinstance(cached, Forwarded):
            return cached

        return resolve(request_transport(request), request.headers, whitelist)

    return _get_forwarded


# Dependency for the default state_attribute
get_forwarded = forwarded_dependency()
