"""spotkit - Typed models for Spotify Web API payloads.

This library decodes Spotify Web API JSON into a small set of typed
items (tracks, albums, playlists, artists, users) and reconciles the
different shapes the same item arrives in: bare lists, saved-item
wrappers in library listings, and type-keyed branches in search results.

Examples:
    Decode a payload you already fetched:
    ```python
    from spotkit import Track, decode_library

    response = decode_library(body, Track)
    for track in response.items:
        print(f"{track.artist.name} - {track.name}")
    ```

    Fetch and decode in one step:
    ```python
    from spotkit import Album, create_client

    client = create_client(access_token="...")
    albums = client.search("kind of blue", Album)
    ```
"""

from dataclasses import replace

from spotkit.client import SpotifyClient
from spotkit.config import APIConfig
from spotkit.decoding import decode_item, decode_library, decode_model, decode_search
from spotkit.exceptions import (
    APIError,
    AuthenticationRequiredError,
    ItemContractError,
    ItemDecodeError,
    ItemNotFoundError,
    SpotKitError,
    TransportError,
)
from spotkit.models import (
    Album,
    Artist,
    CurrentAlbums,
    CurrentlyPlaying,
    CurrentPlaylists,
    Image,
    ItemType,
    LibraryResponse,
    Playlist,
    SearchKey,
    SearchResponse,
    Track,
    User,
)


def create_client(
    access_token: str | None = None,
    config: APIConfig | None = None,
) -> SpotifyClient:
    """Create a configured API client.

    Args:
        access_token: Bearer token for the Web API. Overrides the token
            in config when both are given.
        config: Optional API configuration. Uses defaults if not provided.

    Returns:
        A SpotifyClient using the default HTTP transport.

    Examples:
        ```python
        client = create_client(access_token=token)
        tracks = client.saved_tracks()
        ```
    """
    config = config or APIConfig()
    if access_token:
        config = replace(config, access_token=access_token)
    return SpotifyClient(config=config)


__all__ = [
    "APIConfig",
    "APIError",
    "Album",
    "Artist",
    "AuthenticationRequiredError",
    "CurrentAlbums",
    "CurrentPlaylists",
    "CurrentlyPlaying",
    "Image",
    "ItemContractError",
    "ItemDecodeError",
    "ItemNotFoundError",
    "ItemType",
    "LibraryResponse",
    "Playlist",
    "SearchKey",
    "SearchResponse",
    "SpotKitError",
    "SpotifyClient",
    "Track",
    "TransportError",
    "User",
    "create_client",
    "decode_item",
    "decode_library",
    "decode_model",
    "decode_search",
]
