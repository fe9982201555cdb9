"""Resolver settings tests."""

import pytest
from pydantic import ValidationError

from forwarded_for.config import ForwardedConfig


@pytest.mark.usefixtures("clean_env")
class TestForwardedConfig:
    """Settings loading and validation tests."""

    def test_defaults(self):
        # Act
        config = ForwardedConfig()

        # Assert
        assert config.env == "development"
        assert config.whitelist == []
        assert config.state_attribute == "forwarded"

    def test_loads_from_environment(self, monkeypatch):
        """FORWARDED_* variables are read."""
        # Arrange
        monkeypatch.setenv("FORWARDED_ENV", "production")
        monkeypatch.setenv("FORWARDED_WHITELIST", '["10.0.0.1", "::1"]')
        monkeypatch.setenv("FORWARDED_STATE_ATTRIBUTE", "client")

        # Act
        config = ForwardedConfig()

        # Assert
        assert config.env == "production"
        assert config.whitelist == ["10.0.0.1", "::1"]
        assert config.state_attribute == "client"

    def test_loads_from_dotenv(self, tmp_path):
        """A .env file in the working directory is read."""
        (tmp_path / ".env").write_text("FORWARDED_ENV=production\n")

        assert ForwardedConfig().env == "production"

    def test_whitelist_rejects_non_ip(self):
        with pytest.raises(ValidationError, match="Whitelist entries must be IP addresses"):
            ForwardedConfig(whitelist=["10.0.0.1", "proxy.internal"])

    def test_state_attribute_must_be_identifier(self):
        with pytest.raises(ValidationError, match="state_attribute must be a valid identifier"):
            ForwardedConfig(state_attribute="client-address")
