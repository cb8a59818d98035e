"""Query-string codec with bracket notation for nested values.

``decode`` turns ``a[b]=1&c[]=x&c[]=y`` into
``{"a": {"b": "1"}, "c": ["x", "y"]}`` and ``encode`` turns it back.
All decoded leaves are strings; typing happens at a higher layer
(see ``urlkv.values``).
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import unquote_plus

import qs_codec as qs

DEPTH_LIMIT = 10
ARRAY_LIMIT = 20


def decode(query: str, *, depth: int = DEPTH_LIMIT) -> dict[str, Any]:
    """Decode a query string into a nested mapping.

    A leading ``?`` is ignored. Keys nested deeper than ``depth`` keep
    the remainder of the key as one literal key instead of failing.
    """
    if query.startswith("?"):
        query = query[1:]
    if not query:
        return {}
    # An index can only belong to a dense list if the query has at
    # least that many pairs, so the limit never needs to be larger.
    list_limit = max(ARRAY_LIMIT, query.count("&") + 1)
    return qs.decode(query, qs.DecodeOptions(depth=depth, list_limit=list_limit))


def encode(mapping: Mapping[str, Any]) -> str:
    """Encode a nested mapping into a query string.

    Returns ``""`` for an empty mapping. Empty arrays and objects
    produce no pairs.
    """
    if not mapping:
        return ""
    return qs.encode(
        _index_container_lists(mapping),
        qs.EncodeOptions(list_format=qs.ListFormat.BRACKETS),
    )


def _index_container_lists(value: Any) -> Any:
    # Lists holding containers are written as index-keyed objects,
    # otherwise ``a[][x]=1&a[][x]=2`` decodes as one merged element.
    if isinstance(value, Mapping):
        return {k: _index_container_lists(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        items = [_index_container_lists(item) for item in value]
        if any(isinstance(item, (Mapping, list, tuple)) for item in value):
            return {str(i): item for i, item in enumerate(items)}
        return items
    return value


def root_key(pair: str) -> str:
    """Top-level key of one raw ``key=value`` pair."""
    key = unquote_plus(pair.partition("=")[0])
    return key.split("[", 1)[0]
