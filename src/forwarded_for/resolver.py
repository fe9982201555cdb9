"""Client address resolution.

Resolves the originating address of a connection in two stages:
1. Proxy headers, scanned in PROXY_HEADERS priority order
2. The transport object itself, through an ordered chain of known shapes

Resolution never raises; total failure yields the loopback default.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from forwarded_for.constants import ResolutionSource, TransportField
from forwarded_for.logging import get_logger
from forwarded_for.models import Forwarded
from forwarded_for.proxies import PROXY_HEADERS
from forwarded_for.validators import is_ip

logger = get_logger(__name__)


def _lookup(obj: Any, name: str) -> tuple[bool, Any]:
    """Structural field lookup on a mapping key or attribute.

    Any error raised while reading the field counts as the field being absent.

    Returns:
        Tuple of (present, value)
    """
    if obj is None:
        return False, None

    try:
        if isinstance(obj, Mapping):
            if name not in obj:
                return False, None
            return True, obj[name]
        return True, getattr(obj, name)
    except AttributeError:
        return False, None
    except Exception as e:
        logger.debug(
            "transport_field_unreadable",
            field=name,
            exc_type=type(e).__name__,
        )
        return False, None


def _has_field(obj: Any, name: str) -> bool:
    present, _ = _lookup(obj, name)
    return present


def _get_field(obj: Any, name: str) -> Any:
    _, value = _lookup(obj, name)
    return value


def _split_hops(value: Any) -> list[str]:
    """Split a header value into hops (client, proxy, proxy, ...)."""
    if not value:
        return [""]
    if isinstance(value, list | tuple):
        # Repeated headers delivered as a list
        value = ",".join(str(item) for item in value)
    return [hop.strip() for hop in str(value).split(",")]


def from_headers(
    headers: Mapping[str, Any] | None,
    whitelist: Sequence[str] | None = None,
) -> Forwarded | None:
    """Resolve the client address from proxy headers.

    The first proxy convention whose ip header is present is committed to.
    If any hop in that header is not an IP literal the header is treated as
    forged and header resolution is abandoned, without trying lower
    priority conventions.

    Args:
        headers: Received headers with lowercase names
        whitelist: Trusted proxy addresses (accepted, not consulted)

    Returns:
        Forwarded built from the first hop, or None when no header applies

    Example:
        >>> from_headers({"x-forwarded-for": "203.0.113.5, 10.0.0.1"})
        Forwarded(ip='203.0.113.5', port=0, secure=False)
        >>> from_headers({"x-forwarded-for": "not-an-ip"}) is None
        True
    """
    if not headers:
        return None

    for proxy in PROXY_HEADERS:
        if proxy.ip not in headers:
            continue

        ips = _split_hops(headers.get(proxy.ip))
        ports = _split_hops(headers.get(proxy.port))

        if not all(is_ip(ip) for ip in ips):
            logger.debug(
                "proxy_header_rejected",
                header=proxy.ip,
                hops=len(ips),
            )
            return None

        return Forwarded.create(ips[0], ports[0])

    return None


def from_transport(obj: Any) -> tuple[Forwarded, ResolutionSource]:
    """Resolve the client address from a connection-like object.

    Shapes are tried in order:
    1. obj.remoteAddress / obj.remotePort
    2. obj.address / obj.port
    3. obj.connection.remoteAddress / obj.connection.remotePort
    4. socket.remoteAddress, where socket is obj.connection.socket when a
       connection exists, else obj.socket
    5. Loopback default

    Args:
        obj: Raw socket, wrapped connection, mapping or any object exposing
            the field names above

    Returns:
        Tuple of (Forwarded, ResolutionSource)
    """
    connection = _get_field(obj, TransportField.CONNECTION)
    if connection is not None:
        socket = _get_field(connection, TransportField.SOCKET)
    else:
        socket = _get_field(obj, TransportField.SOCKET)

    if _has_field(obj, TransportField.REMOTE_ADDRESS):
        return (
            Forwarded.create(
                _get_field(obj, TransportField.REMOTE_ADDRESS),
                _get_field(obj, TransportField.REMOTE_PORT),
            ),
            ResolutionSource.REMOTE_ADDRESS,
        )

    # Real-time transports (websocket sessions) expose address/port instead
    if _has_field(obj, TransportField.ADDRESS) and _has_field(obj, TransportField.PORT):
        return (
            Forwarded.create(
                _get_field(obj, TransportField.ADDRESS),
                _get_field(obj, TransportField.PORT),
            ),
            ResolutionSource.ADDRESS_PORT,
        )

    if _has_field(connection, TransportField.REMOTE_ADDRESS):
        return (
            Forwarded.create(
                _get_field(connection, TransportField.REMOTE_ADDRESS),
                _get_field(connection, TransportField.REMOTE_PORT),
            ),
            ResolutionSource.CONNECTION,
        )

    if _has_field(socket, TransportField.REMOTE_ADDRESS):
        # Port is read from remoteAddress too; kept for compatibility
        return (
            Forwarded.create(
                _get_field(socket, TransportField.REMOTE_ADDRESS),
                _get_field(socket, TransportField.REMOTE_ADDRESS),
            ),
            ResolutionSource.SOCKET,
        )

    return Forwarded.create(), ResolutionSource.DEFAULT


def explain(
    obj: Any,
    headers: Mapping[str, Any] | None,
    whitelist: Sequence[str] | None = None,
) -> tuple[Forwarded, ResolutionSource]:
    """Resolve the client address and report which stage produced it.

    Args:
        obj: Connection-like object
        headers: Received headers with lowercase names
        whitelist: Trusted proxy addresses (accepted, not consulted)

    Returns:
        Tuple of (Forwarded, ResolutionSource)
    """
    proxied = from_headers(headers, whitelist)
    if proxied is not None:
        result, source = proxied, ResolutionSource.HEADER
    else:
        result, source = from_transport(obj)

    logger.debug(
        "client_address_resolved",
        source=source.value,
        ip=result.ip,
        port=result.port,
    )
    return result, source


def resolve(
    obj: Any,
    headers: Mapping[str, Any] | None,
    whitelist: Sequence[str] | None = None,
) -> Forwarded:
    """Resolve the originating address, port and security flag of a connection.

    Proxy headers take precedence over the transport object, since the
    transport address points at the nearest proxy.

    Args:
        obj: Connection-like object
        headers: Received headers with lowercase names
        whitelist: Trusted proxy addresses (accepted, not consulted)

    Returns:
        Forwarded, always fully populated

    Example:
        >>> resolve({"remoteAddress": "192.168.1.10", "remotePort": 5000}, {})
        Forwarded(ip='192.168.1.10', port=5000, secure=False)
    """
    result, _ = explain(obj, headers, whitelist)
    return result
