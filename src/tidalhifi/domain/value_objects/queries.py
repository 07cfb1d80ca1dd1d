"""Query value objects for the TIDAL read endpoints.

Hey future me - every endpoint method takes EITHER a bare id ("12345" or 12345) OR one
of these objects when the caller wants to override limit/offset/filter/etc. The
coerce() classmethods turn both shapes into one object right at the call boundary,
so the client code never has to guess what it was given.

A None field means "use the default" (session quality, session country, 999, ...).
Explicit values are always sent as-is, including limit=0.
"""

from dataclasses import dataclass
from typing import Any


def _is_identifier(value: Any) -> bool:
    # bool is an int subclass, but True is never a TIDAL id
    return isinstance(value, (str, int)) and not isinstance(value, bool)


@dataclass(frozen=True)
class ResourceQuery:
    """Lookup of one artist/album/playlist/track/video/user by id."""

    id: str | int
    limit: int | None = None
    offset: int | None = None
    filter: str | None = None
    quality: str | None = None
    country_code: str | None = None
    types: str | None = None

    @classmethod
    def coerce(cls, value: "ResourceQuery | str | int") -> "ResourceQuery":
        """Resolve a bare id or a ResourceQuery into a ResourceQuery.

        Raises:
            TypeError: If value is neither
        """
        if isinstance(value, ResourceQuery):
            return value
        if _is_identifier(value):
            return cls(id=value)
        raise TypeError(
            f"Expected a TIDAL id or ResourceQuery, got {type(value).__name__}"
        )


@dataclass(frozen=True)
class SearchQuery:
    """Free-text search across the TIDAL catalog."""

    query: str
    limit: int | None = None
    offset: int | None = None
    types: str | None = None
    country_code: str | None = None

    @classmethod
    def coerce(cls, value: "SearchQuery | str") -> "SearchQuery":
        """Resolve a bare search string or a SearchQuery into a SearchQuery."""
        if isinstance(value, SearchQuery):
            return value
        if isinstance(value, str):
            return cls(query=value)
        raise TypeError(
            f"Expected a search string or SearchQuery, got {type(value).__name__}"
        )
