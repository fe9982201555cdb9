"""Known proxy header conventions, in priority order.

The first entry whose ip header is present in a request wins, so the order
decides which convention is authoritative.
"""

from forwarded_for.models import ProxyHeader

PROXY_HEADERS: tuple[ProxyHeader, ...] = (
    ProxyHeader(
        ip="x-forwarded-for",
        port="x-forwarded-port",
        proto="x-forwarded-proto",
    ),
    # No standard port/proto headers exist for the next two; names follow x-forwarded-*
    ProxyHeader(
        ip="z-forwarded-for",
        port="z-forwarded-port",
        proto="z-forwarded-proto",
    ),
    ProxyHeader(
        ip="forwarded",
        port="forwarded-port",
        proto="forwarded-proto",
    ),
    ProxyHeader(
        ip="x-real-ip",
        port="x-real-port",
    ),
)
