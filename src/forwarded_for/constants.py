"""Resolver-wide constants.

Centralizes the default address values and the structural field names
consulted on transport objects, so resolution code never hardcodes them.
"""

from enum import StrEnum

# ===== Defaults =====


class Defaults:
    """Default values."""

    IP = "127.0.0.1"
    """IPv4 loopback literal"""

    PORT = 0
    """Port reported when unknown or unparsable"""

    STATE_ATTRIBUTE = "forwarded"
    """request.state attribute holding the resolved address"""


# ===== Transport Fields =====


class TransportField:
    """Field names looked up on connection-like objects."""

    REMOTE_ADDRESS = "remoteAddress"
    REMOTE_PORT = "remotePort"
    ADDRESS = "address"
    PORT = "port"
    CONNECTION = "connection"
    SOCKET = "socket"


# ===== Resolution Sources =====


class ResolutionSource(StrEnum):
    """Stage of the resolution chain that produced a result.

    Ordered the way the stages are tried:
    - HEADER: a recognized proxy header
    - REMOTE_ADDRESS: the object's own remoteAddress/remotePort
    - ADDRESS_PORT: the object's address/port pair (real-time transports)
    - CONNECTION: the wrapped connection's remoteAddress/remotePort
    - SOCKET: the underlying socket's remoteAddress
    - DEFAULT: nothing matched
    """

    HEADER = "header"
    REMOTE_ADDRESS = "remote_address"
    ADDRESS_PORT = "address_port"
    CONNECTION = "connection"
    SOCKET = "socket"
    DEFAULT = "default"
