"""pytest fixtures."""

from types import SimpleNamespace

import pytest


@pytest.fixture
def direct_socket():
    """Plain socket-like object with its own remote address."""
    return SimpleNamespace(remoteAddress="192.168.1.10", remotePort=5000)


@pytest.fixture
def wrapped_connection():
    """Request-like object whose address lives on a nested connection."""
    return SimpleNamespace(
        connection=SimpleNamespace(
            remoteAddress="10.2.2.2",
            remotePort=6000,
            socket=SimpleNamespace(remoteAddress="10.3.3.3"),
        )
    )


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """Isolate settings from FORWARDED_* variables and any local .env file."""
    for key in ("FORWARDED_ENV", "FORWARDED_WHITELIST", "FORWARDED_STATE_ATTRIBUTE"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
