"""External integration client implementations."""

from tidalhifi.infrastructure.integrations.tidal_client import TidalClient

__all__ = ["TidalClient"]
