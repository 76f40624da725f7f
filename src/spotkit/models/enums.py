"""Enumerations for spotkit domain models."""

from enum import StrEnum


class SearchKey(StrEnum):
    """Keys under which each item list is nested in a search response."""

    TRACKS = "tracks"
    ALBUMS = "albums"
    ARTISTS = "artists"
    PLAYLISTS = "playlists"
    USERS = "users"


class ItemType(StrEnum):
    """Kinds of Spotify item.

    The value is the singular tag the Web API uses in ``"type"`` fields,
    as the ``type=`` search parameter, and as the key that wraps an item
    inside a saved-library entry.
    """

    TRACK = "track"
    ALBUM = "album"
    ARTIST = "artist"
    PLAYLIST = "playlist"
    USER = "user"

    @property
    def search_key(self) -> SearchKey:
        """Plural key that holds items of this type in search results."""
        return _SEARCH_KEYS[self]


_SEARCH_KEYS: dict[ItemType, SearchKey] = {
    ItemType.TRACK: SearchKey.TRACKS,
    ItemType.ALBUM: SearchKey.ALBUMS,
    ItemType.ARTIST: SearchKey.ARTISTS,
    ItemType.PLAYLIST: SearchKey.PLAYLISTS,
    ItemType.USER: SearchKey.USERS,
}


class LibraryShape(StrEnum):
    """How a user-library listing lays out its items on the wire.

    - WRAPPED: each entry nests the item under its singular tag, next to
      the save timestamp (``{"added_at": ..., "track": {...}}``)
    - UNWRAPPED: each entry is the item itself
    - UNSUPPORTED: the item type never appears in library listings
    """

    WRAPPED = "wrapped"
    UNWRAPPED = "unwrapped"
    UNSUPPORTED = "unsupported"


LIBRARY_SHAPES: dict[ItemType, LibraryShape] = {
    ItemType.TRACK: LibraryShape.WRAPPED,
    ItemType.ALBUM: LibraryShape.WRAPPED,
    ItemType.PLAYLIST: LibraryShape.UNWRAPPED,
    ItemType.ARTIST: LibraryShape.UNSUPPORTED,
    ItemType.USER: LibraryShape.UNSUPPORTED,
}
