"""Dotted/bracket key paths over nested mappings.

A path such as ``filters.price[0]`` addresses
``data["filters"]["price"][0]``.
"""

from __future__ import annotations

from typing import Any

import pydash

MISSING = object()


def to_path(path: str) -> list[Any]:
    """Split a key path into its segments (list indices as ``int``)."""
    return pydash.to_path(path)


def root_segment(path: str) -> str:
    """First segment of ``path``, as a top-level query key."""
    return str(to_path(path)[0])


def get_path(data: Any, path: str) -> Any:
    """Value at ``path``, or ``MISSING``."""
    return pydash.get(data, path, MISSING)


def has_path(data: Any, path: str) -> bool:
    return pydash.has(data, path)


def set_path(data: dict[str, Any], path: str, value: Any) -> dict[str, Any]:
    """Set ``value`` at ``path`` in place, creating intermediate levels.

    A missing level becomes a list when the next segment is an index,
    otherwise a dict. Scalars in the way are replaced. Returns ``data``.

    Raises:
        TypeError: If a named segment would have to be set on a list.
    """
    keys = to_path(path)
    for i in range(1, len(keys)):
        current = pydash.get(data, keys[:i], MISSING)
        if current is MISSING:
            break
        if isinstance(current, list):
            if not isinstance(keys[i], int):
                raise TypeError(f"Cannot set key {keys[i]!r} on a list")
        elif not isinstance(current, dict):
            pydash.set_(data, keys[:i], [] if isinstance(keys[i], int) else {})
            break
    pydash.set_(data, path, value)
    return data


def unset_path(data: dict[str, Any], path: str) -> bool:
    """Delete the value at ``path`` in place. Returns whether it existed."""
    return pydash.unset(data, path)


def extract(mapping: dict[str, Any], base: str | None = None) -> dict[str, Any]:
    """The sub-mapping owned by namespace ``base``.

    Without a namespace the whole mapping is returned unchanged. A
    namespace that is absent or holds a non-object value yields ``{}``.
    """
    if not base:
        return mapping
    value = get_path(mapping, base)
    if isinstance(value, dict):
        return value
    return {}
