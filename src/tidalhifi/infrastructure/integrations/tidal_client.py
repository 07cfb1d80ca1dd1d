"""TIDAL HTTP client implementation.

Hey future me - this talks to TIDAL's LEGACY api.tidalhifi.com/v1 API, the one the old
web player used. No OAuth here: we log in with username + password + an application
token (X-Tidal-Token) and get a sessionId back. Every read call afterwards sends that
sessionId as X-Tidal-SessionId plus the account's countryCode as a query param.

Shape of every read method:
1. coerce the argument (bare id or ResourceQuery) once
2. fill defaults (limit=999, offset=0, filter=ALL, soundQuality=session quality)
3. build the path ("/artists/" + id + "/toptracks")
4. hand path + params to _base_request()

No retries, no caching, no rate limiting. Errors from httpx are logged and re-raised
unchanged so callers can inspect status codes themselves.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Mapping
from typing import Any

import httpx

from tidalhifi.config.settings import TidalSettings, get_settings
from tidalhifi.domain.exceptions import AuthenticationError, LoginInProgressError
from tidalhifi.domain.ports import ITidalClient, ResourceRef, SearchRef
from tidalhifi.domain.value_objects import (
    Credentials,
    ResourceQuery,
    SearchQuery,
    Session,
    get_art_url,
)
from tidalhifi.infrastructure.observability.log_messages import LogMessages

logger = logging.getLogger(__name__)


class TidalClient(ITidalClient):
    """HTTP client for the TIDAL API.

    Usage:
        async with TidalClient({"username": ..., "password": ..., "token": ...,
                                "quality": "LOSSLESS"}) as client:
            await client.login()
            result = await client.search("Daft Punk")
            tracks = await client.get_album_tracks(ResourceQuery(id=123, limit=10))
    """

    LOGIN_PATH = "/login/username"

    def __init__(
        self,
        credentials: Credentials | Mapping[str, Any],
        settings: TidalSettings | None = None,
    ) -> None:
        """Initialize TIDAL client.

        Args:
            credentials: Credentials, or a mapping with username/password/token/quality
            settings: Endpoint and default settings (shared defaults if omitted)

        Raises:
            ConfigurationError: If credentials are missing or malformed
        """
        if isinstance(credentials, Credentials):
            self.credentials = credentials
        else:
            self.credentials = Credentials.from_mapping(credentials)

        self.settings = settings or get_settings()

        # Identifies this client instance to TIDAL on login. One per instance, never rotated.
        self.client_unique_key = str(uuid.uuid4())

        self._session: Session | None = None
        self._logging_in = False
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.settings.api_base_url,
                headers={"Accept": "application/json"},
                timeout=self.settings.timeout,
            )
        return self._client

    # Close the client or leak connections. Prefer "async with TidalClient(...)".
    async def close(self) -> None:
        """Close HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> TidalClient:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()

    # =========================================================================
    # SESSION
    # =========================================================================

    @property
    def session(self) -> Session | None:
        """Current session, None until login() succeeds."""
        return self._session

    @property
    def is_logged_in(self) -> bool:
        """Whether a session is available for read calls."""
        return self._session is not None

    # Hey future me, the _logging_in flag is checked and set BEFORE the first await, so two
    # coroutines can never both get past it (asyncio only switches tasks at awaits). The
    # session is swapped in one assignment AFTER the response is parsed, so a failed login
    # leaves whatever session we had before untouched.
    async def login(self) -> Session:
        """Log in with the stored credentials.

        Returns:
            The new session (also stored on the client)

        Raises:
            LoginInProgressError: If another login() on this client hasn't finished yet
            httpx.HTTPError: If TIDAL is unreachable or rejects the credentials
            AuthenticationError: If TIDAL answers 2xx without a sessionId
            ValueError: If the login response body is not JSON
        """
        if self._logging_in:
            raise LoginInProgressError()
        self._logging_in = True

        try:
            client = await self._get_client()
            response = await client.post(
                self.LOGIN_PATH,
                data={
                    "username": self.credentials.username,
                    "password": self.credentials.password,
                    "clientUniqueKey": self.client_unique_key,
                },
                headers={"X-Tidal-Token": self.credentials.token},
            )
            response.raise_for_status()
            session = Session.from_login_response(
                response.json(), self.credentials.quality
            )
        except (httpx.HTTPError, AuthenticationError, ValueError) as e:
            logger.error(
                LogMessages.login_failed(self.credentials.username, error=str(e)),
                exc_info=True,
            )
            raise
        finally:
            self._logging_in = False

        self._session = session
        logger.info(LogMessages.login_succeeded(session.user_id, session.country_code))
        return session

    def get_my_id(self) -> int | str | None:
        """Get the logged-in user's TIDAL id (None before login)."""
        return self._session.user_id if self._session else None

    # =========================================================================
    # REQUEST GATEWAY
    # =========================================================================

    async def _base_request(
        self, path: str, params: Mapping[str, Any]
    ) -> dict[str, Any]:
        """Make an authenticated GET request against the TIDAL API.

        countryCode defaults to the session's country. If params carry a
        comma-separated "types" value, the response is narrowed to exactly
        those top-level keys (missing ones come back as None).

        Args:
            path: API path, e.g. "/albums/123/tracks"
            params: Query parameters

        Returns:
            Parsed JSON body, or its projection onto "types"

        Raises:
            AuthenticationError: If login() hasn't succeeded yet (no request is made)
            httpx.HTTPError: If the request fails or TIDAL answers non-2xx
        """
        session = self._session
        if session is None:
            logger.warning(LogMessages.not_logged_in(path))
            raise AuthenticationError(
                "You are not logged in, please use the login() method "
                "before using api calls!"
            )

        query = dict(params)
        if not query.get("countryCode"):
            query["countryCode"] = session.country_code
        query = {key: value for key, value in query.items() if value is not None}

        headers = {
            "Origin": self.settings.origin,
            "X-Tidal-SessionId": session.session_id,
        }

        try:
            client = await self._get_client()
            response = await client.get(path, params=query, headers=headers)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(
                LogMessages.request_failed(path, query, error=str(e)), exc_info=True
            )
            raise

        data = response.json()
        logger.debug("TIDAL %s answered %d", path, response.status_code)

        types = query.get("types")
        if not types:
            return data

        requested = [name.strip() for name in str(types).split(",") if name.strip()]
        # A list or scalar body has none of the requested keys
        if not isinstance(data, Mapping):
            return {name: None for name in requested}
        return {name: data.get(name) for name in requested}

    # =========================================================================
    # PARAMETER DEFAULTS
    # =========================================================================

    def _with_overrides(
        self, params: dict[str, Any], country_code: str | None, types: str | None
    ) -> dict[str, Any]:
        if country_code:
            params["countryCode"] = country_code
        if types:
            params["types"] = types
        return params

    def _listing_params(
        self, query: ResourceQuery, with_filter: bool = True
    ) -> dict[str, Any]:
        """limit/filter/offset with defaults, plus per-call overrides."""
        params: dict[str, Any] = {
            "limit": self._or_default(query.limit, self.settings.default_limit),
        }
        if with_filter:
            params["filter"] = query.filter or self.settings.default_filter
        params["offset"] = self._or_default(query.offset, self.settings.default_offset)
        return self._with_overrides(params, query.country_code, query.types)

    def _plain_params(self, query: ResourceQuery) -> dict[str, Any]:
        return self._with_overrides({}, query.country_code, query.types)

    def _stream_params(self, query: ResourceQuery) -> dict[str, Any]:
        quality = query.quality or (
            self._session.stream_quality if self._session else self.credentials.quality
        )
        return self._with_overrides(
            {"soundQuality": quality}, query.country_code, query.types
        )

    @staticmethod
    def _or_default(value: int | None, default: int) -> int:
        return default if value is None else value

    # =========================================================================
    # SEARCH
    # =========================================================================

    async def search(self, query: SearchRef) -> dict[str, Any]:
        """Search the catalog.

        Without a types override the response is projected onto
        artists, albums, tracks, videos and playlists.

        Args:
            query: Search text or SearchQuery

        Returns:
            Dict keyed by result type
        """
        q = SearchQuery.coerce(query)
        params: dict[str, Any] = {
            "query": q.query,
            "limit": self._or_default(q.limit, self.settings.default_limit),
            "types": q.types or self.settings.default_search_types,
            "offset": self._or_default(q.offset, self.settings.default_offset),
        }
        return await self._base_request(
            "/search", self._with_overrides(params, q.country_code, None)
        )

    # =========================================================================
    # ARTISTS
    # =========================================================================

    async def get_artist(self, artist: ResourceRef) -> dict[str, Any]:
        """Get artist details."""
        q = ResourceQuery.coerce(artist)
        return await self._base_request(f"/artists/{q.id}", self._listing_params(q))

    async def get_top_tracks(self, artist: ResourceRef) -> dict[str, Any]:
        """Get an artist's top tracks."""
        q = ResourceQuery.coerce(artist)
        return await self._base_request(
            f"/artists/{q.id}/toptracks", self._listing_params(q)
        )

    async def get_artist_videos(self, artist: ResourceRef) -> dict[str, Any]:
        """Get an artist's videos."""
        q = ResourceQuery.coerce(artist)
        return await self._base_request(
            f"/artists/{q.id}/videos", self._listing_params(q)
        )

    async def get_artist_bio(self, artist: ResourceRef) -> dict[str, Any]:
        """Get an artist's biography."""
        q = ResourceQuery.coerce(artist)
        return await self._base_request(f"/artists/{q.id}/bio", self._plain_params(q))

    async def get_similar_artists(self, artist: ResourceRef) -> dict[str, Any]:
        """Get artists similar to the given one."""
        q = ResourceQuery.coerce(artist)
        return await self._base_request(
            f"/artists/{q.id}/similar", self._listing_params(q)
        )

    async def get_artist_albums(self, artist: ResourceRef) -> dict[str, Any]:
        """Get an artist's albums."""
        q = ResourceQuery.coerce(artist)
        return await self._base_request(
            f"/artists/{q.id}/albums", self._listing_params(q)
        )

    # =========================================================================
    # ALBUMS
    # =========================================================================

    async def get_album(self, album: ResourceRef) -> dict[str, Any]:
        """Get album details."""
        q = ResourceQuery.coerce(album)
        return await self._base_request(f"/albums/{q.id}", self._listing_params(q))

    async def get_album_tracks(self, album: ResourceRef) -> dict[str, Any]:
        """Get an album's track list."""
        q = ResourceQuery.coerce(album)
        return await self._base_request(
            f"/albums/{q.id}/tracks", self._listing_params(q)
        )

    # =========================================================================
    # PLAYLISTS
    # =========================================================================

    async def get_playlist(self, playlist: ResourceRef) -> dict[str, Any]:
        """Get playlist details."""
        q = ResourceQuery.coerce(playlist)
        return await self._base_request(f"/playlists/{q.id}", self._listing_params(q))

    async def get_playlist_tracks(self, playlist: ResourceRef) -> dict[str, Any]:
        """Get a playlist's tracks."""
        q = ResourceQuery.coerce(playlist)
        return await self._base_request(
            f"/playlists/{q.id}/tracks", self._listing_params(q)
        )

    # =========================================================================
    # TRACKS & VIDEOS
    # =========================================================================

    async def get_track_info(self, track: ResourceRef) -> dict[str, Any]:
        """Get track details."""
        q = ResourceQuery.coerce(track)
        return await self._base_request(f"/tracks/{q.id}", self._plain_params(q))

    # Stream and offline URLs depend on the account's subscription tier. Asking for
    # HI_RES on a HiFi account doesn't fail, TIDAL silently downgrades the quality.
    async def get_stream_url(self, track: ResourceRef) -> dict[str, Any]:
        """Get a streaming URL for a track in the session (or overridden) quality."""
        q = ResourceQuery.coerce(track)
        return await self._base_request(
            f"/tracks/{q.id}/streamUrl", self._stream_params(q)
        )

    async def get_offline_url(self, track: ResourceRef) -> dict[str, Any]:
        """Get an offline URL for a track in the session (or overridden) quality."""
        q = ResourceQuery.coerce(track)
        return await self._base_request(
            f"/tracks/{q.id}/offlineUrl", self._stream_params(q)
        )

    async def get_video_stream_url(self, video: ResourceRef) -> dict[str, Any]:
        """Get a streaming URL for a video."""
        q = ResourceQuery.coerce(video)
        return await self._base_request(
            f"/videos/{q.id}/streamUrl", self._plain_params(q)
        )

    # =========================================================================
    # USERS
    # =========================================================================

    async def get_user(self, user: ResourceRef) -> dict[str, Any]:
        """Get a TIDAL user's profile."""
        q = ResourceQuery.coerce(user)
        return await self._base_request(
            f"/users/{q.id}", self._listing_params(q, with_filter=False)
        )

    # =========================================================================
    # ARTWORK
    # =========================================================================

    def get_art_url(self, image_id: str, resolution: int | None = None) -> str:
        """Build the artwork URL for an image id using this client's settings."""
        return get_art_url(
            image_id,
            self.settings.default_art_resolution if resolution is None else resolution,
            base_url=self.settings.images_base_url,
        )
