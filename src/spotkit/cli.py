#!/usr/bin/env python3
"""Command-line interface for spotkit.

This CLI is primarily for debugging and development.
For production use, import spotkit as a library.
"""

import json
import logging
import sys
from collections.abc import Sequence
from typing import IO

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from spotkit.client import SpotifyClient
from spotkit.config import APIConfig
from spotkit.decoding import decode_item, decode_library, decode_model, decode_search
from spotkit.exceptions import SpotKitError
from spotkit.models.enums import ItemType
from spotkit.models.items import Album, Artist, Playlist, SpotifyModel, Track, User
from spotkit.models.protocols import TrackCollection
from spotkit.models.responses import CurrentlyPlaying

logger = logging.getLogger("spotkit")

ITEM_MODELS: dict[ItemType, type[SpotifyModel]] = {
    ItemType.TRACK: Track,
    ItemType.ALBUM: Album,
    ItemType.ARTIST: Artist,
    ItemType.PLAYLIST: Playlist,
    ItemType.USER: User,
}

KIND_CHOICE = click.Choice([t.value for t in ItemType], case_sensitive=False)
SHAPE_CHOICE = click.Choice(
    ["item", "library", "search", "playing"], case_sensitive=False
)

token_option = click.option(
    "--token",
    envvar="SPOTKIT_ACCESS_TOKEN",
    required=True,
    help="Web API access token (or set SPOTKIT_ACCESS_TOKEN).",
)
json_option = click.option("--json", "as_json", is_flag=True, help="Output as JSON.")


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Configure logging with Rich handler.

    Args:
        verbose: If True, set log level to DEBUG. Otherwise WARNING.
        console: Optional Console instance to use for RichHandler.
    """
    level = logging.DEBUG if verbose else logging.WARNING

    # Clear existing handlers to allow reconfiguration
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = RichHandler(
        rich_tracebacks=True,
        show_path=False,
        console=console,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root_logger.setLevel(level)
    root_logger.addHandler(handler)


def _primary_artist_name(item: SpotifyModel) -> str:
    artists = getattr(item, "artists", None)
    return artists[0].name if artists else ""


def _track_count(item: SpotifyModel) -> str:
    if isinstance(item, Playlist):
        return str(item.tracks_count)
    if isinstance(item, TrackCollection):
        tracks = item.collection_tracks
        return str(len(tracks)) if tracks is not None else "-"
    return ""


def print_items(console: Console, items: Sequence[SpotifyModel], title: str) -> None:
    """Print decoded items as a table.

    Args:
        console: Rich console for output.
        items: Decoded items of a single type.
        title: Table title.
    """
    if not items:
        console.print("[yellow]No items[/yellow]")
        return

    table = Table(title=f"[bold]{title}[/bold] ({len(items)})", title_justify="left")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Name", style="bold")
    table.add_column("Artist")
    table.add_column("Tracks", justify="right")
    table.add_column("URI", style="cyan", overflow="fold")

    for index, item in enumerate(items, start=1):
        table.add_row(
            str(index),
            getattr(item, "name", ""),
            _primary_artist_name(item),
            _track_count(item),
            getattr(item, "uri", ""),
        )

    console.print(table)


def print_playing(console: Console, playing: CurrentlyPlaying | None) -> None:
    """Print playback state."""
    if playing is None:
        console.print("[yellow]Nothing is playing[/yellow]")
        return

    state = "playing" if playing.is_playing else "paused"
    track = playing.item
    position = f"{playing.progress_ms // 1000}s"
    if track.duration_ms:
        position += f" / {track.duration_ms // 1000}s"
    console.print(f"[bold]{track.name}[/bold] [dim]({state}, {position})[/dim]")
    if track.artists:
        console.print(f"  {track.artist.name}")


def emit(
    console: Console,
    payload: SpotifyModel | Sequence[SpotifyModel] | None,
    as_json: bool,
    title: str,
) -> None:
    """Print a decode result as JSON or as a Rich rendering."""
    if as_json:
        if payload is None:
            data = None
        elif isinstance(payload, SpotifyModel):
            data = payload.model_dump()
        else:
            data = [item.model_dump() for item in payload]
        json.dump(data, sys.stdout, indent=2, ensure_ascii=False, default=str)
        sys.stdout.write("\n")
    elif payload is None or isinstance(payload, CurrentlyPlaying):
        print_playing(console, payload)
    elif isinstance(payload, SpotifyModel):
        print_items(console, [payload], title)
    else:
        print_items(console, payload, title)


def _client(token: str) -> SpotifyClient:
    return SpotifyClient(config=APIConfig(access_token=token))


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Decode and inspect Spotify Web API payloads."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    setup_logging(verbose=verbose)


@main.command(name="decode")
@click.argument("source", type=click.File("rb"), metavar="FILE")
@click.option(
    "--shape",
    type=SHAPE_CHOICE,
    default="item",
    show_default=True,
    help="Layout of the payload.",
)
@click.option(
    "--kind",
    type=KIND_CHOICE,
    default=ItemType.TRACK.value,
    show_default=True,
    help="Item type to decode.",
)
@json_option
def decode_cmd(source: IO[bytes], shape: str, kind: str, as_json: bool) -> None:
    """Decode a saved JSON payload (use - for stdin).

    \b
    Examples:
      spotkit decode saved_tracks.json --shape library --kind track
      spotkit decode search.json --shape search --kind album
      curl ... | spotkit decode - --shape playing
    """
    console = Console()
    item_cls = ITEM_MODELS[ItemType(kind.lower())]
    payload = source.read()

    try:
        match shape.lower():
            case "library":
                items = decode_library(payload, item_cls).items
                emit(console, items, as_json, "Library")
            case "search":
                results = decode_search(payload, item_cls).results.items
                emit(console, results, as_json, "Search results")
            case "playing":
                emit(console, decode_model(payload, CurrentlyPlaying), as_json, "")
            case _:
                item = decode_item(payload, item_cls)
                emit(console, item, as_json, item_cls.__name__)
    except SpotKitError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e


@main.command(name="library")
@click.argument("kind", type=click.Choice(["track", "album", "playlist"]))
@token_option
@json_option
def library_cmd(kind: str, token: str, as_json: bool) -> None:
    """List the current user's saved tracks, albums or playlists."""
    console = Console()
    item_cls = ITEM_MODELS[ItemType(kind)]

    try:
        with _client(token) as client:
            items = client.library(item_cls)
    except SpotKitError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e

    emit(console, items, as_json, f"Saved {kind}s")


@main.command(name="search")
@click.argument("query")
@click.option(
    "--kind",
    type=KIND_CHOICE,
    default=ItemType.TRACK.value,
    show_default=True,
    help="Item type to search for.",
)
@click.option("--limit", type=click.IntRange(1, 50), default=None, help="Max results.")
@token_option
@json_option
def search_cmd(
    query: str, kind: str, limit: int | None, token: str, as_json: bool
) -> None:
    """Search the catalog for one item type."""
    console = Console()
    item_cls = ITEM_MODELS[ItemType(kind.lower())]

    try:
        with _client(token) as client:
            items = client.search(query, item_cls, limit=limit)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="'QUERY'") from e
    except SpotKitError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e

    emit(console, items, as_json, f"Results for '{query}'")


@main.command(name="playing")
@token_option
@json_option
def playing_cmd(token: str, as_json: bool) -> None:
    """Show what the current user is playing."""
    console = Console()

    try:
        with _client(token) as client:
            playing = client.currently_playing()
    except SpotKitError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e

    emit(console, playing, as_json, "")


if __name__ == "__main__":
    main()
