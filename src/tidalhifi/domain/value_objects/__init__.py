"""Domain value objects."""

from tidalhifi.domain.value_objects.artwork import get_art_url
from tidalhifi.domain.value_objects.credentials import Credentials, Session
from tidalhifi.domain.value_objects.queries import ResourceQuery, SearchQuery

__all__ = [
    "Credentials",
    "ResourceQuery",
    "SearchQuery",
    "Session",
    "get_art_url",
]
