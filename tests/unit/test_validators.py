"""IP literal validation tests."""

from forwarded_for.validators import ip_version, is_ip


class TestIsIp:
    """IPv4/IPv6 literal detection tests."""

    def test_ipv4_is_valid(self):
        """Dotted-quad IPv4 literals are valid."""
        assert is_ip("203.0.113.5") is True
        assert is_ip("0.0.0.0") is True
        assert is_ip("255.255.255.255") is True

    def test_ipv6_is_valid(self):
        """IPv6 literals are valid."""
        assert is_ip("::1") is True
        assert is_ip("2001:db8::1") is True
        assert is_ip("::ffff:192.0.2.128") is True

    def test_scoped_ipv6_is_valid(self):
        """Link-local IPv6 with a zone id is valid."""
        assert is_ip("fe80::1%eth0") is True

    def test_empty_string_is_invalid(self):
        """Empty string is not an IP."""
        assert is_ip("") is False

    def test_hostname_is_invalid(self):
        """Hostnames are not IPs."""
        assert is_ip("localhost") is False
        assert is_ip("example.com") is False

    def test_garbage_is_invalid(self):
        """Out-of-range octets, networks and garbage are invalid."""
        assert is_ip("not-an-ip") is False
        assert is_ip("999.999.999.999") is False
        assert is_ip("10.0.0.0/8") is False
        assert is_ip("1.2.3") is False

    def test_leading_zero_octet_is_invalid(self):
        """Octal-looking octets are rejected."""
        assert is_ip("010.0.0.1") is False

    def test_surrounding_whitespace_is_invalid(self):
        """Tokens are validated as given; callers strip them first."""
        assert is_ip(" 10.0.0.1") is False

    def test_non_string_is_invalid(self):
        """Non-string values never raise."""
        assert is_ip(None) is False
        assert is_ip(1234) is False
        assert is_ip(b"10.0.0.1") is False


class TestIpVersion:
    """IP version detection tests."""

    def test_ipv4_version(self):
        assert ip_version("192.0.2.1") == 4

    def test_ipv6_version(self):
        assert ip_version("2001:db8::1") == 6

    def test_invalid_version_is_zero(self):
        assert ip_version("example.com") == 0
        assert ip_version("") == 0
