"""Capability protocols shared by Spotify items.

Entities satisfy these structurally; the generic decoders are written
once against them and dispatch on the class-level ``item_type``.
"""

from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

from spotkit.models.enums import ItemType, LibraryShape

if TYPE_CHECKING:
    from spotkit.models.items import Track


@runtime_checkable
class Item(Protocol):
    """Anything decodable as a standalone Spotify item."""

    item_type: ClassVar[ItemType]

    @property
    def id(self) -> str: ...

    @property
    def uri(self) -> str: ...

    @property
    def name(self) -> str: ...


@runtime_checkable
class LibraryItem(Item, Protocol):
    """Item that can appear in the current user's library listings.

    Only tracks, albums and playlists are saved to a library; artists and
    users lack ``library_shape`` and never match.
    """

    library_shape: ClassVar[LibraryShape]


@runtime_checkable
class SearchItem(Item, Protocol):
    """Item that can appear in search results.

    Every item type has a search key, so any ``Item`` qualifies.
    """


@runtime_checkable
class TrackCollection(Protocol):
    """Item that may embed a list of tracks."""

    @property
    def collection_tracks(self) -> "list[Track] | None": ...
