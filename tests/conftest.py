"""Test fixtures and configuration."""

from typing import Any

import pytest

API_URL = "https://api.spotify.com/v1"


def make_image(size: int) -> dict[str, Any]:
    return {
        "url": f"https://i.scdn.co/image/{size}.jpg",
        "width": size,
        "height": size,
    }


@pytest.fixture
def artist_payload() -> dict[str, Any]:
    """Create a simplified artist object."""
    return {
        "id": "0kbYTNQb4Pb1rPbbaF0pT4",
        "uri": "spotify:artist:0kbYTNQb4Pb1rPbbaF0pT4",
        "name": "Miles Davis",
        "type": "artist",
        "href": "https://api.spotify.com/v1/artists/0kbYTNQb4Pb1rPbbaF0pT4",
    }


@pytest.fixture
def simplified_track_payload(artist_payload: dict[str, Any]) -> dict[str, Any]:
    """Create a track as nested in an album's track listing (no album)."""
    return {
        "id": "4vLYewWIvqHfKtJDk8c8tq",
        "uri": "spotify:track:4vLYewWIvqHfKtJDk8c8tq",
        "name": "So What",
        "duration_ms": 562640,
        "artists": [artist_payload],
    }


@pytest.fixture
def simplified_album_payload(artist_payload: dict[str, Any]) -> dict[str, Any]:
    """Create an album as nested in a track or search result (no tracks)."""
    return {
        "id": "1weenld61qoidwYuZ1GESA",
        "uri": "spotify:album:1weenld61qoidwYuZ1GESA",
        "name": "Kind Of Blue",
        "album_type": "album",
        "images": [make_image(640), make_image(300), make_image(64)],
        "artists": [artist_payload],
    }


@pytest.fixture
def album_payload(
    simplified_album_payload: dict[str, Any],
    simplified_track_payload: dict[str, Any],
) -> dict[str, Any]:
    """Create a full album object with its track listing."""
    return {
        **simplified_album_payload,
        "tracks": {
            "href": "https://api.spotify.com/v1/albums/1weenld61qoidwYuZ1GESA/tracks",
            "total": 1,
            "items": [simplified_track_payload],
        },
    }


@pytest.fixture
def track_payload(
    simplified_track_payload: dict[str, Any],
    simplified_album_payload: dict[str, Any],
) -> dict[str, Any]:
    """Create a full track object with its album."""
    return {**simplified_track_payload, "album": simplified_album_payload}


@pytest.fixture
def playlist_payload(track_payload: dict[str, Any]) -> dict[str, Any]:
    """Create a full playlist object with inlined track entries."""
    return {
        "id": "37i9dQZF1DXbITWG1ZJKYt",
        "uri": "spotify:playlist:37i9dQZF1DXbITWG1ZJKYt",
        "name": "Jazz Classics",
        "images": [make_image(640)],
        "tracks": {
            "href": f"{API_URL}/playlists/37i9dQZF1DXbITWG1ZJKYt/tracks",
            "total": 1,
            "items": [{"added_at": "2024-01-01T00:00:00Z", "track": track_payload}],
        },
    }


@pytest.fixture
def simplified_playlist_payload() -> dict[str, Any]:
    """Create a playlist as listed in the library (track entries not inlined)."""
    return {
        "id": "3cEYpjA9oz9GiPac4AsH4n",
        "uri": "spotify:playlist:3cEYpjA9oz9GiPac4AsH4n",
        "name": "Late Night",
        "images": [make_image(300)],
        "tracks": {
            "href": f"{API_URL}/playlists/3cEYpjA9oz9GiPac4AsH4n/tracks",
            "total": 42,
        },
    }


@pytest.fixture
def user_payload() -> dict[str, Any]:
    """Create a private user profile."""
    return {
        "id": "wizzler",
        "uri": "spotify:user:wizzler",
        "display_name": "Wizzler",
        "email": "wizzler@example.com",
        "images": [make_image(300)],
    }


@pytest.fixture
def currently_playing_payload(track_payload: dict[str, Any]) -> dict[str, Any]:
    """Create a currently-playing response."""
    return {
        "timestamp": 1700000000000,
        "progress_ms": 44272,
        "is_playing": True,
        "currently_playing_type": "track",
        "item": track_payload,
    }
