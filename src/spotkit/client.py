"""Spotify Web API client wrapper.

Covers the read-only endpoints whose payloads spotkit normalizes.
Fetching goes through a transport; every payload is handed to the
decoders in ``spotkit.decoding``.
"""

import logging
from typing import Any, Protocol, TypeVar

from spotkit.config import APIConfig
from spotkit.decoding import decode_item, decode_library, decode_model, decode_search
from spotkit.exceptions import APIError, AuthenticationRequiredError, ItemNotFoundError
from spotkit.models.enums import ItemType
from spotkit.models.items import Album, Playlist, SpotifyModel, Track, User
from spotkit.models.protocols import LibraryItem, SearchItem
from spotkit.models.responses import CurrentlyPlaying
from spotkit.transport import HTTPTransport, RequestResult, TransportProtocol

logger = logging.getLogger(__name__)

ItemT = TypeVar("ItemT", bound=SpotifyModel)
LibraryItemT = TypeVar("LibraryItemT", bound=LibraryItem)
SearchItemT = TypeVar("SearchItemT", bound=SearchItem)

_ITEM_ENDPOINTS: dict[ItemType, str] = {
    ItemType.TRACK: "/tracks",
    ItemType.ALBUM: "/albums",
    ItemType.ARTIST: "/artists",
    ItemType.PLAYLIST: "/playlists",
    ItemType.USER: "/users",
}

_LIBRARY_ENDPOINTS: dict[ItemType, str] = {
    ItemType.TRACK: "/me/tracks",
    ItemType.ALBUM: "/me/albums",
    ItemType.PLAYLIST: "/me/playlists",
}


class SpotifyClientProtocol(Protocol):
    """Protocol for Spotify Web API clients.

    This protocol enables dependency injection and testing.
    Implement this protocol to create mock clients for testing.
    """

    def library(self, item_cls: type[LibraryItemT]) -> list[LibraryItemT]:
        """Fetch the current user's saved items of one type."""
        ...

    def saved_tracks(self) -> list[Track]:
        """Fetch the current user's saved tracks."""
        ...

    def saved_albums(self) -> list[Album]:
        """Fetch the current user's saved albums."""
        ...

    def saved_playlists(self) -> list[Playlist]:
        """Fetch the current user's playlists."""
        ...

    def search(
        self, query: str, item_cls: type[SearchItemT], limit: int | None = None
    ) -> list[SearchItemT]:
        """Search for items of one type."""
        ...

    def get_item(self, item_id: str, item_cls: type[ItemT]) -> ItemT:
        """Fetch a single item by ID."""
        ...

    def currently_playing(self) -> CurrentlyPlaying | None:
        """Fetch the current playback state."""
        ...

    def current_user(self) -> User:
        """Fetch the profile of the token's owner."""
        ...


class SpotifyClient:
    """Production Spotify Web API client.

    Implements SpotifyClientProtocol.
    """

    def __init__(
        self,
        transport: TransportProtocol | None = None,
        config: APIConfig | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            transport: Optional transport. Creates an HTTPTransport if not provided.
            config: Optional API configuration. Uses defaults if not provided.
        """
        self._config = config or APIConfig()
        self._owned_transport: HTTPTransport | None = None
        if transport is None:
            transport = self._owned_transport = HTTPTransport(
                timeout=self._config.timeout
            )
        self._transport = transport

    def close(self) -> None:
        """Close the transport if this client created it.

        An injected transport belongs to the caller and is left open.
        """
        if self._owned_transport is not None:
            self._owned_transport.close()

    def __enter__(self) -> "SpotifyClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def library(self, item_cls: type[LibraryItemT]) -> list[LibraryItemT]:
        """Fetch the current user's saved items of one type.

        Args:
            item_cls: Track, Album or Playlist.

        Returns:
            Saved items in library order. Entries that fail to decode are
            left out.

        Raises:
            ValueError: If the item type has no library listing.
            APIError: If the API request fails.
        """
        path = _LIBRARY_ENDPOINTS.get(item_cls.item_type)
        if path is None:
            raise ValueError(f"{item_cls.__name__} items have no library listing")

        data = self._get(path, f"fetch saved {item_cls.item_type}s")
        items = decode_library(data, item_cls).items
        logger.debug("Fetched %d saved %ss", len(items), item_cls.item_type)
        return items

    def saved_tracks(self) -> list[Track]:
        """Fetch the current user's saved tracks."""
        return self.library(Track)

    def saved_albums(self) -> list[Album]:
        """Fetch the current user's saved albums."""
        return self.library(Album)

    def saved_playlists(self) -> list[Playlist]:
        """Fetch the current user's playlists."""
        return self.library(Playlist)

    def search(
        self, query: str, item_cls: type[SearchItemT], limit: int | None = None
    ) -> list[SearchItemT]:
        """Search for items of one type.

        Args:
            query: Search query string.
            item_cls: Item model to search for.
            limit: Maximum number of results. Defaults to the configured limit.

        Returns:
            Matching items in relevance order.

        Raises:
            ValueError: If query is empty.
            APIError: If the API request fails.
        """
        if not query or not query.strip():
            raise ValueError("query cannot be empty")

        parameters = {
            "q": query,
            "type": item_cls.item_type.value,
            "limit": limit or self._config.search_limit,
        }
        data = self._get("/search", f"search {item_cls.item_type}s", parameters)
        return decode_search(data, item_cls).results.items

    def get_item(self, item_id: str, item_cls: type[ItemT]) -> ItemT:
        """Fetch a single item by ID.

        Args:
            item_id: Spotify ID of the item.
            item_cls: Item model to decode.

        Returns:
            The decoded item.

        Raises:
            ValueError: If item_id is empty.
            ItemNotFoundError: If no such item exists.
            ItemDecodeError: If the response lacks required fields.
            APIError: If the API request fails.
        """
        if not item_id or not item_id.strip():
            raise ValueError("item_id cannot be empty")

        path = f"{_ITEM_ENDPOINTS[item_cls.item_type]}/{item_id}"
        data = self._get(path, f"fetch {item_cls.item_type} {item_id}")
        return decode_item(data, item_cls)

    def currently_playing(self) -> CurrentlyPlaying | None:
        """Fetch the current playback state.

        Returns:
            Playback state, or None when nothing is playing (empty body).

        Raises:
            ItemDecodeError: If the playing item lacks required fields.
            APIError: If the API request fails.
        """
        data = self._get("/me/player/currently-playing", "fetch playback state")
        if not data.strip():
            return None
        return decode_model(data, CurrentlyPlaying)

    def current_user(self) -> User:
        """Fetch the profile of the token's owner."""
        data = self._get("/me", "fetch current user")
        return decode_item(data, User)

    def _get(
        self, path: str, action: str, parameters: dict[str, Any] | None = None
    ) -> bytes:
        url = f"{self._config.base_url.rstrip('/')}{path}"
        result = self._transport.request(
            url, parameters=parameters, headers=self._config.headers
        )
        if not result.ok or result.data is None:
            raise self._error_for(result, action) from result.error
        return result.data

    def _error_for(self, result: RequestResult, action: str) -> APIError:
        """Map a failed request to the matching exception."""
        match result.status_code:
            case 401:
                return AuthenticationRequiredError(
                    f"Authentication required to {action}. "
                    "The access token may be missing or expired."
                )
            case 404:
                return ItemNotFoundError(f"Not found: could not {action}")
            case _:
                return APIError(f"Failed to {action}: {result.error}")
