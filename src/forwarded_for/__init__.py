"""forwarded-for: resolve the originating address of proxied connections.

Looks through known proxy headers (x-forwarded-for, z-forwarded-for,
forwarded, x-real-ip) for the client address, falling back to the
connection object itself.

Main components:
    - resolve: Resolve a connection and its headers to a Forwarded
    - Forwarded: Resolved ip, port and secure flag
    - PROXY_HEADERS: Recognized proxy header conventions, in priority order
    - ForwardedMiddleware, get_forwarded, forwarded_dependency: FastAPI integration

Example:
    >>> from forwarded_for import resolve
    >>>
    >>> resolve({"remoteAddress": "10.0.0.2", "remotePort": 51234},
    ...         {"x-forwarded-for": "203.0.113.5, 10.0.0.2"})
    Forwarded(ip='203.0.113.5', port=0, secure=False)
"""

from forwarded_for.config import ForwardedConfig
from forwarded_for.constants import ResolutionSource
from forwarded_for.dependencies import forwarded_dependency, get_forwarded
from forwarded_for.middleware import ForwardedMiddleware
from forwarded_for.models import Forwarded, ProxyHeader
from forwarded_for.proxies import PROXY_HEADERS
from forwarded_for.resolver import explain, from_headers, from_transport, resolve
from forwarded_for.validators import ip_version, is_ip

__all__ = [
    "resolve",
    "explain",
    "from_headers",
    "from_transport",
    "Forwarded",
    "ProxyHeader",
    "PROXY_HEADERS",
    "ResolutionSource",
    "is_ip",
    "ip_version",
    "ForwardedConfig",
    "ForwardedMiddleware",
    "get_forwarded",
    "forwarded_dependency",
]
