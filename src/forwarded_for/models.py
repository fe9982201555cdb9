"""Resolved address and proxy header models.

Both models are frozen: a resolved address is owned by the caller and the
proxy header entries are shared process-wide.
"""

import math
import re
from typing import Any

from pydantic import BaseModel, ConfigDict

from forwarded_for.constants import Defaults

# ASCII digits with an optional all-zero fraction ("443", " 443 ", "443.0")
_PORT_PATTERN = re.compile(r"\s*([0-9]+)(?:\.0*)?\s*")


def _coerce_port(value: Any) -> int:
    """Coerce a raw port value to a non-negative int, 0 when unparsable."""
    if value is None or isinstance(value, bool):
        return Defaults.PORT

    if isinstance(value, int):
        return value if value >= 0 else Defaults.PORT

    if isinstance(value, float):
        if math.isfinite(value) and value >= 0 and value.is_integer():
            return int(value)
        return Defaults.PORT

    if not isinstance(value, str):
        return Defaults.PORT

    match = _PORT_PATTERN.fullmatch(value)
    if match is None:
        return Defaults.PORT
    return int(match.group(1))


class Forwarded(BaseModel):
    """Resolved origin of an inbound connection.

    Attributes:
        ip: Client IP address, loopback when nothing could be resolved
        port: Client port, 0 when unknown
        secure: Whether the connection was determined to be secured

    Example:
        >>> Forwarded.create("203.0.113.5", "443")
        Forwarded(ip='203.0.113.5', port=443, secure=False)
        >>> Forwarded.create()
        Forwarded(ip='127.0.0.1', port=0, secure=False)
    """

    model_config = ConfigDict(frozen=True)

    ip: str = Defaults.IP
    port: int = Defaults.PORT
    secure: bool = False

    @classmethod
    def create(cls, ip: Any = None, port: Any = None, secure: Any = False) -> "Forwarded":
        """Build a fully populated result from raw, possibly missing values.

        Args:
            ip: Raw address; falsy values fall back to the loopback literal
            port: Raw port (int, str, float, None); unparsable values become 0
            secure: Any value, interpreted by truthiness

        Returns:
            Forwarded instance
        """
        return cls(
            ip=str(ip) if ip else Defaults.IP,
            port=_coerce_port(port),
            secure=bool(secure),
        )


class ProxyHeader(BaseModel):
    """Header names used by one proxy convention.

    Attributes:
        ip: Header carrying the client address chain
        port: Header carrying the matching port chain
        proto: Header carrying the original protocol, if the convention has one
    """

    model_config = ConfigDict(frozen=True)

    ip: str
    port: str
    proto: str | None = None
