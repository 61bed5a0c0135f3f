"""Helpers for turning trigger payloads into source keys."""

import urllib.parse
from typing import Any, Mapping

from .exceptions import InvalidKey
from .models import SourceKey

KEY_SEPARATOR = "/"


def extract_object_key(event: Mapping[str, Any]) -> str:
    """
    Read the object key from an S3 object-created notification.

    S3 URL-encodes keys in notifications (spaces become ``+``), so the key is
    decoded before use.

    Raises:
        InvalidKey: If the event does not carry a record with an object key.
    """
    try:
        raw_key = event["Records"][0]["s3"]["object"]["key"]
    except (KeyError, IndexError, TypeError) as e:
        raise InvalidKey(f"Event does not contain an S3 object key: {e!r}") from e

    if not isinstance(raw_key, str):
        raise InvalidKey(f"S3 object key must be a string, got {type(raw_key).__name__}")

    return urllib.parse.unquote_plus(raw_key)


def parse_source_key(key: str) -> SourceKey:
    """
    Split ``<collection>/<group>/<item.ext>`` into its three parts.

    Raises:
        InvalidKey: Unless the key has exactly three non-empty segments.
    """
    parts = key.split(KEY_SEPARATOR)
    if len(parts) != 3 or not all(parts):
        raise InvalidKey(
            f"Expected '<collection>/<group>/<item>' but got {key!r}"
        )

    collection_id, group_id, item_id = parts
    return SourceKey(collection_id=collection_id, group_id=group_id, item_id=item_id)
