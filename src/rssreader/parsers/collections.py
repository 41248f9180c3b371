"""Flattening of JSON collection payloads into items.

JSON and ParseHub feeds share one shape:
{"collection1": [{"name": "...", "url": "..."}], "collection2": [...]}
"""

from typing import Any

from pydantic import TypeAdapter, ValidationError

from rssreader.exceptions import DecodeError
from rssreader.models.document import Item

_collections_adapter = TypeAdapter(dict[str, list[dict[str, str]]])


def flatten_collections(payload: Any, location: str) -> list[Item]:
    """Turn every item object of every collection into an Item.

    Collection names and their order carry no meaning and are dropped.

    Args:
        payload: Decoded JSON body.
        location: Feed location for error reporting.

    Raises:
        DecodeError: When the payload is not a mapping of item-object lists.
    """
    try:
        collections = _collections_adapter.validate_python(payload)
    except ValidationError as e:
        raise DecodeError(
            location, f"Expected a mapping of collections, got {e.error_count()} errors"
        ) from e

    return [
        Item(title=obj.get("name", ""), link=obj.get("url", ""))
        for objects in collections.values()
        for obj in objects
    ]
