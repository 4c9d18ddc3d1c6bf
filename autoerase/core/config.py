"""Application configuration."""

import logging
import re
from typing import Annotated

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from autoerase.core.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from SUAE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SUAE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Homeserver settings
    HOST: str = Field(
        min_length=1,
        description='Synapse base URL, e.g. "https://matrix.example.com"',
    )
    TOKEN: str = Field(min_length=1, description="Synapse homeserver admin token")

    # Retention policy
    TTL: int = Field(gt=0, description="Days after registration before an account is erased")
    PREFIXES: Annotated[list[str], NoDecode] = Field(
        default_factory=list,
        description="Additional account name prefixes to ignore",
    )

    # Run modes
    DRYRUN: bool = Field(default=False, description="Only print the accounts that would be erased")
    REDACT: bool = Field(default=False, description="Redact all messages sent by erased accounts")

    # Logging
    LOG_LEVEL: str = Field(default="INFO")

    @field_validator("HOST")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        value = value.strip().rstrip("/")
        if not value:
            raise ValueError("HOST must not be empty")
        return value

    @field_validator("TOKEN")
    @classmethod
    def token_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("TOKEN must not be empty")
        return value.strip()

    @field_validator("LOG_LEVEL")
    @classmethod
    def known_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level {value}")
        return value

    @field_validator("PREFIXES", mode="before")
    @classmethod
    def split_prefixes(cls, value):
        if isinstance(value, str):
            return [part for part in re.split(r"[\s,]+", value) if part]
        return value


def get_settings(**overrides) -> Settings:
    """
    Load and validate settings from the environment.

    Args:
        **overrides: Field values that take precedence over the environment
            (``None`` values are ignored)

    Returns:
        Validated Settings

    Raises:
        ConfigurationError: If a required value is missing or invalid
    """
    try:
        settings = Settings()
    except ValidationError as e:
        problems = "; ".join(
            f"SUAE_{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigurationError(f"invalid configuration: {problems}") from e

    updates = {key: value for key, value in overrides.items() if value is not None}
    if updates:
        settings = settings.model_copy(update=updates)
    return settings
