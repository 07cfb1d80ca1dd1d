"""Async client for the TIDAL music streaming API."""

from tidalhifi.config import TidalSettings, get_settings
from tidalhifi.domain.exceptions import (
    AuthenticationError,
    ConfigurationError,
    DomainException,
    InvalidStateException,
    LoginInProgressError,
)
from tidalhifi.domain.value_objects import (
    Credentials,
    ResourceQuery,
    SearchQuery,
    Session,
    get_art_url,
)
from tidalhifi.infrastructure.integrations import TidalClient

__version__ = "0.1.0"

__all__ = [
    "AuthenticationError",
    "ConfigurationError",
    "Credentials",
    "DomainException",
    "InvalidStateException",
    "LoginInProgressError",
    "ResourceQuery",
    "SearchQuery",
    "Session",
    "TidalClient",
    "TidalSettings",
    "get_art_url",
    "get_settings",
]
