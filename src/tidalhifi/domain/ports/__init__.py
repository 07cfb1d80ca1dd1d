"""Domain ports (interfaces) for dependency inversion."""

from abc import ABC, abstractmethod
from typing import Any

from tidalhifi.domain.value_objects import ResourceQuery, SearchQuery, Session

# Anything an endpoint method accepts as "which object": bare id or query object
ResourceRef = ResourceQuery | str | int
SearchRef = SearchQuery | str


class ITidalClient(ABC):
    """Port for TIDAL API client operations.

    Hey future me - TIDAL's legacy API authenticates with username/password plus an
    application token and hands back a sessionId. Every read afterwards sends that
    sessionId as a header and a countryCode as a query param. Responses are plain JSON
    dicts; we don't map them to entities.

    Quality codes seen in the wild: LOW, HIGH, LOSSLESS, HI_RES.
    """

    # =========================================================================
    # SESSION
    # =========================================================================

    @abstractmethod
    async def login(self) -> Session:
        """Authenticate with the stored credentials.

        Returns:
            The new session

        Raises:
            httpx.HTTPError: If TIDAL rejects the login or is unreachable
        """
        pass

    @abstractmethod
    def get_my_id(self) -> int | str | None:
        """Get the logged-in user's TIDAL id (None before login)."""
        pass

    # =========================================================================
    # SEARCH
    # =========================================================================

    @abstractmethod
    async def search(self, query: SearchRef) -> dict[str, Any]:
        """Search the catalog for artists, albums, tracks, videos and playlists."""
        pass

    # =========================================================================
    # ARTISTS
    # =========================================================================

    @abstractmethod
    async def get_artist(self, artist: ResourceRef) -> dict[str, Any]:
        """Get artist details."""
        pass

    @abstractmethod
    async def get_top_tracks(self, artist: ResourceRef) -> dict[str, Any]:
        """Get an artist's top tracks."""
        pass

    @abstractmethod
    async def get_artist_videos(self, artist: ResourceRef) -> dict[str, Any]:
        """Get an artist's videos."""
        pass

    @abstractmethod
    async def get_artist_bio(self, artist: ResourceRef) -> dict[str, Any]:
        """Get an artist's biography."""
        pass

    @abstractmethod
    async def get_similar_artists(self, artist: ResourceRef) -> dict[str, Any]:
        """Get artists similar to the given one."""
        pass

    @abstractmethod
    async def get_artist_albums(self, artist: ResourceRef) -> dict[str, Any]:
        """Get an artist's albums."""
        pass

    # =========================================================================
    # ALBUMS
    # =========================================================================

    @abstractmethod
    async def get_album(self, album: ResourceRef) -> dict[str, Any]:
        """Get album details."""
        pass

    @abstractmethod
    async def get_album_tracks(self, album: ResourceRef) -> dict[str, Any]:
        """Get an album's track list."""
        pass

    # =========================================================================
    # PLAYLISTS
    # =========================================================================

    @abstractmethod
    async def get_playlist(self, playlist: ResourceRef) -> dict[str, Any]:
        """Get playlist details."""
        pass

    @abstractmethod
    async def get_playlist_tracks(self, playlist: ResourceRef) -> dict[str, Any]:
        """Get a playlist's tracks."""
        pass

    # =========================================================================
    # TRACKS & VIDEOS
    # =========================================================================

    @abstractmethod
    async def get_track_info(self, track: ResourceRef) -> dict[str, Any]:
        """Get track details."""
        pass

    @abstractmethod
    async def get_stream_url(self, track: ResourceRef) -> dict[str, Any]:
        """Get a streaming URL for a track."""
        pass

    @abstractmethod
    async def get_offline_url(self, track: ResourceRef) -> dict[str, Any]:
        """Get an offline (download) URL for a track."""
        pass

    @abstractmethod
    async def get_video_stream_url(self, video: ResourceRef) -> dict[str, Any]:
        """Get a streaming URL for a video."""
        pass

    # =========================================================================
    # USERS
    # =========================================================================

    @abstractmethod
    async def get_user(self, user: ResourceRef) -> dict[str, Any]:
        """Get a TIDAL user's profile."""
        pass


__all__ = ["ITidalClient", "ResourceRef", "SearchRef"]
