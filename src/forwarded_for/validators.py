"""IP literal validation for attacker-controllable header values."""

import ipaddress
from typing import Any


def ip_version(value: Any) -> int:
    """Return the IP version of a literal.

    Args:
        value: Candidate address token

    Returns:
        4 or 6 for a valid IPv4/IPv6 literal, 0 otherwise

    Example:
        >>> ip_version("203.0.113.5")
        4
        >>> ip_version("2001:db8::1")
        6
        >>> ip_version("example.com")
        0
    """
    if not isinstance(value, str) or not value:
        return 0

    try:
        return ipaddress.ip_address(value).version
    except ValueError:
        # Hostnames, CIDR notation, garbage
        return 0


def is_ip(value: Any) -> bool:
    """Check if value is a syntactically valid IPv4 or IPv6 literal.

    Args:
        value: Candidate address token

    Returns:
        True for a valid IP literal, False otherwise (never raises)
    """
    return ip_version(value) != 0
