"""Core application components."""

from autoerase.core.config import Settings, get_settings
from autoerase.core.exceptions import (
    AutoEraseException,
    ConfigurationError,
    DecodeError,
    ServerError,
    TransportError,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Exceptions
    "AutoEraseException",
    "ConfigurationError",
    "TransportError",
    "DecodeError",
    "ServerError",
]
