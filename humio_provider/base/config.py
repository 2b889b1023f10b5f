"""
Pydantic configuration model for the Humio GraphQL client.

Validates the address and token at initialization time instead of
failing on the first request.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, model_validator


class HumioConfig(BaseModel):
    """Configuration for the Humio API.

    Values are resolved in order:
    1. Explicit values passed in the config dict.
    2. Environment variables (HUMIO_ADDRESS, HUMIO_API_TOKEN,
       HUMIO_CA_CERTIFICATE_PATH).
    """

    model_config = ConfigDict(extra="forbid")

    address: str | None = Field(default=None, description="Base URL, e.g. 'https://cloud.humio.com'")
    api_token: str | None = Field(default=None, description="Personal or organization API token")
    ca_certificate_path: str | None = Field(
        default=None, description="Path to a PEM CA bundle used to verify the server"
    )

    @model_validator(mode="before")
    @classmethod
    def resolve_from_env(cls, values: dict[str, Any]) -> dict[str, Any]:
        """Fall back to environment variables for missing values."""
        env_map = {
            "address": "HUMIO_ADDRESS",
            "api_token": "HUMIO_API_TOKEN",
            "ca_certificate_path": "HUMIO_CA_CERTIFICATE_PATH",
        }
        for field, env_var in env_map.items():
            if not values.get(field):
                values[field] = os.environ.get(env_var)
        return values

    @model_validator(mode="after")
    def validate_address_and_token(self) -> HumioConfig:
        """Ensure address and token are set and the CA bundle exists."""
        if not self.address:
            raise ValueError(
                "Humio address is required. Set it explicitly or via "
                "the HUMIO_ADDRESS environment variable."
            )
        if not self.api_token:
            raise ValueError(
                "Humio API token is required. Set it explicitly or via "
                "the HUMIO_API_TOKEN environment variable."
            )
        if self.ca_certificate_path and not Path(self.ca_certificate_path).exists():
            raise ValueError(f"CA certificate file not found: {self.ca_certificate_path}")
        self.address = self.address.rstrip("/")
        return self

    @property
    def graphql_url(self) -> str:
        return f"{self.address}/graphql"


def validate_config(config: dict | HumioConfig) -> HumioConfig:
    """Validate and return a typed config model.

    Args:
        config: Raw configuration dictionary, or an already validated model.

    Returns:
        A validated :class:`HumioConfig`.

    Raises:
        pydantic.ValidationError: If the config is invalid.
    """
    if isinstance(config, HumioConfig):
        return config
    return HumioConfig(**config)


__all__ = [
    "HumioConfig",
    "validate_config",
]
