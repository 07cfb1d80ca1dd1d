"""Credentials and Session value objects.

Hey future me - these two are deliberately separate! Credentials are what the caller
hands us once at construction time and never change. Session is what TIDAL hands back
from a successful login. A new login builds a NEW Session instead of patching fields on
the old one, so readers never observe a half-written session.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from tidalhifi.domain.exceptions import AuthenticationError, ConfigurationError

# Field name -> error message. Order matters: the first broken field is the one reported.
_CREDENTIAL_FIELDS: dict[str, str] = {
    "username": "Username invalid or missing",
    "password": "Password invalid or missing",
    "token": "Token invalid or missing",
    "quality": "Stream quality invalid or missing",
}


@dataclass(frozen=True)
class Credentials:
    """Static login data for one TIDAL account.

    Attributes:
        username: TIDAL account username (usually an email address)
        password: TIDAL account password
        token: API application token, sent as X-Tidal-Token on login
        quality: Preferred stream quality code (e.g. "LOSSLESS", "HIGH")
    """

    username: str
    password: str = field(repr=False)
    token: str = field(repr=False)
    quality: str

    def __post_init__(self) -> None:
        for name, message in _CREDENTIAL_FIELDS.items():
            if not isinstance(getattr(self, name), str):
                raise ConfigurationError(message)

    @classmethod
    def from_mapping(cls, data: Any) -> "Credentials":
        """Build credentials from a plain mapping (e.g. a dict loaded from JSON).

        Args:
            data: Mapping with username, password, token and quality keys

        Returns:
            Validated Credentials

        Raises:
            ConfigurationError: If data is not a mapping or any field is missing/not a str
        """
        if not isinstance(data, Mapping):
            raise ConfigurationError(
                "You must pass auth data into the TidalClient object correctly"
            )
        return cls(**{name: data.get(name) for name in _CREDENTIAL_FIELDS})


@dataclass(frozen=True)
class Session:
    """An authenticated TIDAL session.

    Attributes:
        session_id: Opaque session identifier, sent as X-Tidal-SessionId
        user_id: TIDAL user id of the logged-in account
        country_code: Account country, default countryCode for every read
        stream_quality: Default soundQuality for stream URL lookups
    """

    session_id: str
    user_id: int | str | None
    country_code: str | None
    stream_quality: str

    @classmethod
    def from_login_response(
        cls, data: Mapping[str, Any], stream_quality: str
    ) -> "Session":
        """Build a session from the JSON body of POST /login/username.

        Raises:
            AuthenticationError: If TIDAL answered 2xx but sent no sessionId
        """
        session_id = data.get("sessionId")
        if not session_id:
            raise AuthenticationError("TIDAL login response did not contain a sessionId")
        return cls(
            session_id=str(session_id),
            user_id=data.get("userId"),
            country_code=data.get("countryCode"),
            stream_quality=stream_quality,
        )
