"""Models for Spotify Web API item objects.

Each model decodes its own wire shape; unknown fields are ignored.
Simplified objects (an album nested in a search result, a track nested
in an album) decode into the same models with the optional parts absent.
"""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field

from spotkit.exceptions import ItemContractError
from spotkit.models.enums import LIBRARY_SHAPES, ItemType, LibraryShape

__all__ = [
    "Album",
    "AlbumTracks",
    "Artist",
    "Image",
    "Playlist",
    "PlaylistTrackEntry",
    "PlaylistTracks",
    "Track",
    "User",
]


class SpotifyModel(BaseModel):
    """Base model for Spotify Web API objects."""

    model_config = ConfigDict(extra="ignore", frozen=True)


class Image(SpotifyModel):
    """Cover art or avatar image.

    Dimensions are optional on the wire and are never used to pick a size.
    """

    url: str
    width: int | None = None
    height: int | None = None


class ArtworkModel(SpotifyModel):
    """Item carrying cover art ordered from highest to lowest resolution."""

    images: list[Image] = Field(default_factory=list)

    def _require_images(self) -> list[Image]:
        if not self.images:
            raise ItemContractError(
                f"{type(self).__name__} {getattr(self, 'id', '?')} has no images"
            )
        return self.images

    @property
    def art_large_url(self) -> str:
        """URL of the highest resolution image."""
        return self._require_images()[0].url

    @property
    def art_url(self) -> str:
        """URL of the medium size image.

        The API lists images largest first. With three or more images the
        second one is the medium size; otherwise the largest is used.
        """
        images = self._require_images()
        return images[1].url if len(images) > 2 else images[0].url

    @property
    def art_small_url(self) -> str:
        """URL of the lowest resolution image."""
        return self._require_images()[-1].url


class Artist(SpotifyModel):
    """Artist object (full or simplified)."""

    item_type: ClassVar[ItemType] = ItemType.ARTIST

    id: str
    uri: str
    name: str


def _primary_artist(owner: SpotifyModel, artists: list[Artist]) -> Artist:
    if not artists:
        raise ItemContractError(
            f"{type(owner).__name__} {getattr(owner, 'id', '?')} has no artists"
        )
    return artists[0]


class Track(SpotifyModel):
    """Track object.

    ``album`` is absent in simplified tracks, i.e. those nested inside an
    album's track listing.
    """

    item_type: ClassVar[ItemType] = ItemType.TRACK
    library_shape: ClassVar[LibraryShape] = LIBRARY_SHAPES[ItemType.TRACK]

    id: str
    uri: str
    name: str
    album: "Album | None" = None
    duration_ms: int | None = None
    artists: list[Artist] = Field(default_factory=list)

    @property
    def artist(self) -> Artist:
        """Primary artist. Every track on the API has at least one."""
        return _primary_artist(self, self.artists)


class AlbumTracks(SpotifyModel):
    """Track listing embedded in a full album object."""

    items: list[Track]


class Album(ArtworkModel):
    """Album object.

    Only full album objects carry ``tracks``; simplified albums (inside
    tracks or search results) leave it unset.
    """

    item_type: ClassVar[ItemType] = ItemType.ALBUM
    library_shape: ClassVar[LibraryShape] = LIBRARY_SHAPES[ItemType.ALBUM]

    id: str
    uri: str
    name: str
    artists: list[Artist] = Field(default_factory=list)
    tracks: AlbumTracks | None = None

    @property
    def artist(self) -> Artist:
        """Primary album artist."""
        return _primary_artist(self, self.artists)

    @property
    def collection_tracks(self) -> list[Track] | None:
        """Embedded tracks, or None for simplified albums."""
        return self.tracks.items if self.tracks is not None else None


class PlaylistTrackEntry(SpotifyModel):
    """One entry of a playlist's track listing."""

    track: Track


class PlaylistTracks(SpotifyModel):
    """Tracks reference of a playlist.

    ``items`` is only present when the playlist was fetched in full;
    ``total`` and ``href`` are always available.
    """

    items: list[PlaylistTrackEntry] | None = None
    href: str
    total: int


class Playlist(ArtworkModel):
    """Playlist object (full or simplified)."""

    item_type: ClassVar[ItemType] = ItemType.PLAYLIST
    library_shape: ClassVar[LibraryShape] = LIBRARY_SHAPES[ItemType.PLAYLIST]

    id: str
    uri: str
    name: str
    tracks: PlaylistTracks

    @property
    def collection_tracks(self) -> list[Track]:
        """Embedded tracks, empty when the listing was not inlined."""
        if self.tracks.items is None:
            return []
        return [entry.track for entry in self.tracks.items]

    @property
    def tracks_count(self) -> int:
        """Total number of tracks, whether or not they are inlined."""
        return self.tracks.total

    @property
    def tracks_url(self) -> str:
        """API URL of the full track listing."""
        return self.tracks.href


class User(SpotifyModel):
    """User profile (public or private)."""

    item_type: ClassVar[ItemType] = ItemType.USER

    id: str
    uri: str
    display_name: str | None = None
    email: str | None = None
    images: list[Image] = Field(default_factory=list)

    @property
    def name(self) -> str:
        """Display name, falling back to the user ID."""
        return self.display_name if self.display_name is not None else self.id

    @property
    def art_url(self) -> str:
        """Avatar URL, or an empty string for users without one."""
        return self.images[0].url if self.images else ""


Track.model_rebuild()
