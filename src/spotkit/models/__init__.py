"""Data models for spotkit.

Public API:
    Track, Album, Playlist, Artist, User - Decoded Spotify items
    ItemType - Item kinds with their wire tags and search keys
    LibraryResponse, SearchResponse - Normalized listing containers
    CurrentlyPlaying - Playback state

Internal (not exported):
    protocols.py - Capability protocols the decoders are written against
"""

from spotkit.models.enums import ItemType, SearchKey
from spotkit.models.items import Album, Artist, Image, Playlist, Track, User
from spotkit.models.responses import (
    CurrentAlbums,
    CurrentlyPlaying,
    CurrentPlaylists,
    LibraryResponse,
    SearchResponse,
)

__all__ = [
    "Album",
    "Artist",
    "CurrentAlbums",
    "CurrentPlaylists",
    "CurrentlyPlaying",
    "Image",
    "ItemType",
    "LibraryResponse",
    "Playlist",
    "SearchKey",
    "SearchResponse",
    "Track",
    "User",
]
