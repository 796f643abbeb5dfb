"""
Pydantic configuration model for the Route 53 client.

Validates client configs at construction time instead of silently
passing bad values to boto3.
"""

from __future__ import annotations

import os
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, model_validator


class AWSConfig(BaseModel):
    """Configuration for the Route 53 client.

    Credentials are resolved in order:
    1. Explicit values passed in the config dict.
    2. Environment variables (AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY, AWS_DEFAULT_REGION).
    3. If neither is set, fields are left as None so boto3 can fall back to its
       own credential chain (instance metadata, ~/.aws/credentials, etc.).

    ``mock`` selects the in-memory stub client instead of boto3.
    """

    model_config = ConfigDict(extra="forbid")

    aws_access_key_id: str | None = Field(default=None, description="AWS access key ID")
    aws_secret_access_key: str | None = Field(default=None, description="AWS secret access key")
    region_name: str | None = Field(default=None, description="AWS region (e.g. 'us-east-1')")
    mock: bool = Field(default=False, description="Use the stub client, no network calls")

    @model_validator(mode="before")
    @classmethod
    def resolve_from_env(cls, values: dict[str, Any]) -> dict[str, Any]:
        """Fall back to environment variables for missing credentials."""
        env_map = {
            "aws_access_key_id": "AWS_ACCESS_KEY_ID",
            "aws_secret_access_key": "AWS_SECRET_ACCESS_KEY",
            "region_name": "AWS_DEFAULT_REGION",
        }
        for field, env_var in env_map.items():
            if not values.get(field):
                values[field] = os.environ.get(env_var)
        return values

    @property
    def has_explicit_credentials(self) -> bool:
        """True when both halves of the access-key pair are set."""
        return bool(self.aws_access_key_id and self.aws_secret_access_key)


def validate_config(config: dict | AWSConfig) -> AWSConfig:
    """Validate and return a typed config model.

    Args:
        config: Raw configuration dictionary, or an already-built model.

    Returns:
        A validated :class:`AWSConfig`.

    Raises:
        pydantic.ValidationError: If the config is invalid.
    """
    if isinstance(config, AWSConfig):
        return config
    return AWSConfig(**config)


__all__ = [
    "AWSConfig",
    "validate_config",
]
