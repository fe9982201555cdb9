"""Resolver settings.

Loaded from environment variables with the FORWARDED_ prefix (or a .env file).
"""

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from forwarded_for.constants import Defaults
from forwarded_for.validators import is_ip


class ForwardedConfig(BaseSettings):
    """Settings for logging and the FastAPI integration.

    Attributes:
        env: Environment name; "development" renders logs for the console
        whitelist: Proxy addresses passed through to resolve (not consulted yet)
        state_attribute: request.state attribute the middleware writes to

    Example:
        >>> config = ForwardedConfig(whitelist=["10.0.0.1"])
        >>> config.state_attribute
        'forwarded'
    """

    env: str = Field(default="development", description="Environment (development/production)")

    whitelist: list[str] = Field(
        default_factory=list,
        description="Trusted proxy addresses, accepted for forward compatibility",
    )

    state_attribute: str = Field(
        default=Defaults.STATE_ATTRIBUTE, description="Attribute name set on request.state"
    )

    model_config = SettingsConfigDict(
        env_prefix="FORWARDED_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @model_validator(mode="after")
    def validate_settings(self) -> "ForwardedConfig":
        """Reject whitelist entries that are not IP literals and unusable attribute names."""
        if not self.state_attribute.isidentifier():
            raise ValueError(
                f"state_attribute must be a valid identifier: {self.state_attribute!r}"
            )

        invalid = [entry for entry in self.whitelist if not is_ip(entry)]
        if invalid:
            raise ValueError(f"Whitelist entries must be IP addresses: {', '.join(invalid)}")

        return self
