"""Client settings.

Hey future me - all settings are passed programmatically (no .env, no env vars)!
The defaults match what the TIDAL web player talks to. Override them only for tests
or when TIDAL moves its API host again.
"""

from functools import lru_cache

from pydantic import BaseModel, ConfigDict, Field


class TidalSettings(BaseModel):
    """TIDAL API endpoints, request headers and per-call defaults."""

    model_config = ConfigDict(frozen=True)

    api_base_url: str = Field(
        default="https://api.tidalhifi.com/v1",
        description="Base URL every login/read path is appended to",
    )
    origin: str = Field(
        default="http://listen.tidal.com",
        description="Origin header sent with every read call",
    )
    images_base_url: str = Field(
        default="https://resources.tidal.com/images",
        description="Base URL for album/artist artwork",
    )
    timeout: float = Field(default=30.0, gt=0, description="HTTP timeout in seconds")

    # 999 is effectively "no limit" for every listing TIDAL serves
    default_limit: int = Field(default=999, ge=1)
    default_offset: int = Field(default=0, ge=0)
    default_filter: str = Field(default="ALL")
    default_search_types: str = Field(
        default="artists,albums,tracks,videos,playlists"
    )
    default_art_resolution: int = Field(default=1280, ge=1)


@lru_cache
def get_settings() -> TidalSettings:
    """Get the shared default settings instance."""
    return TidalSettings()
