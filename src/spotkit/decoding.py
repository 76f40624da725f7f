"""Decoders from raw Spotify Web API payloads to spotkit models.

Two error policies apply:

- Direct decodes (``decode_item``, ``decode_model``) raise
  ``ItemDecodeError`` when the payload is not valid JSON or required
  fields are missing. A single requested object that does not decode is
  a broken contract the caller must see.
- Container decodes (``decode_library``, ``decode_search``) never raise.
  Any shape mismatch yields an empty item list, so "no results" and
  "undecodable results" look the same to the caller.

All decoders accept the JSON document as bytes, str, or an already
parsed mapping, and keep no state between calls.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from spotkit.exceptions import ItemDecodeError
from spotkit.models.enums import LIBRARY_SHAPES, LibraryShape
from spotkit.models.items import SpotifyModel
from spotkit.models.protocols import LibraryItem, SearchItem
from spotkit.models.responses import LibraryResponse, SearchResponse, SearchResults

logger = logging.getLogger(__name__)

Payload = bytes | bytearray | str | Mapping[str, Any]

ItemT = TypeVar("ItemT", bound=SpotifyModel)
LibraryItemT = TypeVar("LibraryItemT", bound=LibraryItem)
SearchItemT = TypeVar("SearchItemT", bound=SearchItem)
ModelT = TypeVar("ModelT", bound=BaseModel)


def _load(payload: Payload) -> Any:
    """Parse a payload into Python objects. Parsed documents pass through."""
    if isinstance(payload, (bytes, bytearray, str)):
        return json.loads(payload)
    return payload


def _load_document(payload: Payload) -> Mapping[str, Any] | None:
    """Parse a payload expected to be a JSON object, or return None."""
    try:
        document = _load(payload)
    except (ValueError, RecursionError) as e:
        logger.debug("Payload is not valid JSON: %s", e)
        return None

    if not isinstance(document, Mapping):
        logger.debug("Expected a JSON object, got %s", type(document).__name__)
        return None
    return document


def decode_model(payload: Payload, model_cls: type[ModelT]) -> ModelT:
    """Decode a whole payload as a single model.

    Args:
        payload: JSON document.
        model_cls: Model to validate against, e.g. ``CurrentlyPlaying``.

    Returns:
        The validated model instance.

    Raises:
        ItemDecodeError: If the payload is not JSON or does not match.
    """
    try:
        document = _load(payload)
    except (ValueError, RecursionError) as e:
        raise ItemDecodeError(f"Invalid JSON for {model_cls.__name__}: {e}") from e

    try:
        return model_cls.model_validate(document)
    except (ValidationError, RecursionError) as e:
        raise ItemDecodeError(f"Failed to decode {model_cls.__name__}: {e}") from e


def decode_item(payload: Payload, item_cls: type[ItemT]) -> ItemT:
    """Decode a payload that is exactly one item, e.g. ``GET /tracks/{id}``.

    Raises:
        ItemDecodeError: If the payload is not JSON or lacks required fields.
    """
    return decode_model(payload, item_cls)


def decode_library(
    payload: Payload, item_cls: type[LibraryItemT]
) -> LibraryResponse[LibraryItemT]:
    """Decode a user-library listing into a flat list of items.

    The wire shape depends on the item type (see ``LIBRARY_SHAPES``):
    saved tracks and albums are wrapped entries, decoded one by one so
    that a malformed entry is dropped without affecting its siblings;
    playlists are a bare list that decodes as a whole or not at all.

    Args:
        payload: JSON document with a top-level ``items`` list.
        item_cls: Item model to decode, e.g. ``Track``.

    Returns:
        Response whose ``items`` keep the wire order. Never raises.
    """
    response_cls = LibraryResponse[item_cls]  # type: ignore[valid-type]
    document = _load_document(payload)
    if document is None:
        return response_cls()

    entries = document.get("items")
    shape = LIBRARY_SHAPES[item_cls.item_type]

    match shape:
        case LibraryShape.WRAPPED:
            items = _unwrap_saved_items(entries, item_cls)
        case LibraryShape.UNWRAPPED:
            items = _validate_items(entries, item_cls)
        case _:
            logger.debug("%s items never appear in library listings", item_cls.__name__)
            items = []

    return response_cls(items=items)


def _unwrap_saved_items(
    entries: Any, item_cls: type[LibraryItemT]
) -> list[LibraryItemT]:
    """Extract items nested under their type tag in saved-item entries."""
    if not isinstance(entries, list) or not all(
        isinstance(entry, Mapping) for entry in entries
    ):
        logger.debug("Library items are not a list of saved-item objects")
        return []

    key = item_cls.item_type.value
    items: list[LibraryItemT] = []
    for index, entry in enumerate(entries):
        if key not in entry:
            logger.debug("Dropping saved item %d: no '%s' key", index, key)
            continue
        try:
            items.append(item_cls.model_validate(entry[key]))
        except (ValidationError, RecursionError) as e:
            logger.debug("Dropping saved item %d: %s", index, e)

    return items


def _validate_items(
    entries: Any, item_cls: type[LibraryItemT]
) -> list[LibraryItemT]:
    """Validate a bare item list as a whole."""
    try:
        adapter = TypeAdapter(list[item_cls])  # type: ignore[valid-type]
        return adapter.validate_python(entries)
    except (ValidationError, RecursionError) as e:
        logger.debug("Library items are not a list of %s: %s", item_cls.__name__, e)
        return []


def decode_search(
    payload: Payload, item_cls: type[SearchItemT]
) -> SearchResponse[SearchItemT]:
    """Decode the search results for one item type.

    Only the branch keyed by the item type's search key is read
    (``"tracks"`` for ``Track`` and so on); other branches are ignored.

    Args:
        payload: JSON document from the search endpoint.
        item_cls: Item model to decode, e.g. ``Album``.

    Returns:
        Response whose ``results.items`` keep the wire order. A missing
        branch or any decode failure inside it yields no items. Never raises.
    """
    results_cls = SearchResults[item_cls]  # type: ignore[valid-type]
    response_cls = SearchResponse[item_cls]  # type: ignore[valid-type]
    key = item_cls.item_type.search_key

    document = _load_document(payload)
    raw_results = document.get(key) if document is not None else None
    if raw_results is None:
        logger.debug("Search response has no '%s' results", key)
        return response_cls(results=results_cls(items=[]))

    try:
        results = results_cls.model_validate(raw_results)
    except (ValidationError, RecursionError) as e:
        logger.debug("Discarding '%s' search results: %s", key, e)
        results = results_cls(items=[])

    return response_cls(results=results)
