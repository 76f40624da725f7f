"""Response containers returned by Spotify Web API endpoints.

``LibraryResponse`` and ``SearchResponse`` are built by the tolerant
decoders in ``spotkit.decoding`` and always hold a well-formed item list.
The remaining containers are validated directly and fail loudly.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from spotkit.models.items import Album, Playlist, SpotifyModel, Track

T = TypeVar("T", bound=SpotifyModel)

__all__ = [
    "CurrentAlbums",
    "CurrentPlaylists",
    "CurrentlyPlaying",
    "LibraryResponse",
    "SavedAlbum",
    "SearchResponse",
    "SearchResults",
]


class LibraryResponse(BaseModel, Generic[T]):
    """Items from one of the current user's library listings.

    Saved tracks and albums arrive wrapped in ``{"added_at", <type>}``
    entries while playlists arrive bare; either way ``items`` is a flat,
    ordered list of the item type.
    """

    model_config = ConfigDict(frozen=True)

    items: list[T] = Field(default_factory=list)


class SearchResults(BaseModel, Generic[T]):
    """Paged list of items of one type inside a search response."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    items: list[T]


class SearchResponse(BaseModel, Generic[T]):
    """Search results for a single item type."""

    model_config = ConfigDict(frozen=True)

    results: SearchResults[T]


class CurrentlyPlaying(SpotifyModel):
    """Playback state from the currently-playing endpoint."""

    progress_ms: int
    is_playing: bool
    item: Track


class CurrentPlaylists(SpotifyModel):
    """Page of the current user's playlists."""

    limit: int
    total: int
    offset: int
    items: list[Playlist]

    @property
    def collection_playlists(self) -> list[Playlist]:
        return self.items


class SavedAlbum(SpotifyModel):
    """Album saved to the user's library, with the save timestamp."""

    added_at: str
    album: Album


class CurrentAlbums(SpotifyModel):
    """Page of the current user's saved albums."""

    limit: int
    total: int
    offset: int
    items: list[SavedAlbum]

    @property
    def collection_albums(self) -> list[Album]:
        return [saved.album for saved in self.items]
