"""Value typing: storage values to and from their query-string form.

Query strings only carry text. On write, numbers and booleans become
their literal string form; on read, strings are typed back:

- a string that parses fully as a number becomes ``int``/``float``,
- ``"true"``/``"false"`` become booleans,
- any other string is tried as JSON (so ``"null"`` reads as ``None``),
- anything else stays a string.

The inference is lossy by construction: the string ``"42"`` reads back
as the number ``42``.
"""

from __future__ import annotations

import enum
import json
import math
import re
from collections.abc import Mapping
from typing import Any

_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INTEGER = re.compile(r"[+-]?\d+")


class ValueKind(enum.Enum):
    """The shapes a storage value can take."""

    NULL = "null"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ARRAY = "array"
    OBJECT = "object"


def kind_of(value: Any) -> ValueKind:
    """Classify a storage value.

    Raises:
        TypeError: If ``value`` is not a storage value.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, Mapping):
        return ValueKind.OBJECT
    raise TypeError(f"Not a storage value: {type(value).__name__}")


def is_storage_value(value: Any) -> bool:
    """Whether ``value`` (and everything nested in it) is storable."""
    try:
        kind = kind_of(value)
    except TypeError:
        return False
    if kind is ValueKind.ARRAY:
        return all(is_storage_value(item) for item in value)
    if kind is ValueKind.OBJECT:
        return all(
            isinstance(k, str) and is_storage_value(v) for k, v in value.items()
        )
    return True


def to_wire(value: Any) -> Any:
    """Convert a storage value into its query-string form.

    Scalars become strings, containers are converted recursively and
    ``None`` is kept (it encodes as ``key=``).

    Raises:
        TypeError: If ``value`` contains something that is not storable.
    """
    kind = kind_of(value)
    if kind is ValueKind.NULL:
        return None
    if kind is ValueKind.ARRAY:
        return [to_wire(item) for item in value]
    if kind is ValueKind.OBJECT:
        return {str(k): to_wire(v) for k, v in value.items()}
    return format_scalar(value)


def from_wire(raw: str) -> Any:
    """Type a single query-string value."""
    if _NUMBER.fullmatch(raw):
        return int(raw) if _INTEGER.fullmatch(raw) else float(raw)
    if raw == "true":
        return True
    if raw == "false":
        return False
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError:
        return raw


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Non-finite number {name!r}")


def coerce(value: Any) -> Any:
    """Apply ``from_wire`` to every string leaf of a decoded value."""
    if isinstance(value, str):
        return from_wire(value)
    if isinstance(value, dict):
        return {k: coerce(v) for k, v in value.items()}
    if isinstance(value, list):
        return [coerce(item) for item in value]
    return value


def to_raw(value: Any) -> str | None:
    """String form of a typed value; ``None`` stays ``None``."""
    if value is None:
        return None
    if isinstance(value, (list, dict)):
        return json.dumps(value, separators=(",", ":"))
    return format_scalar(value)


def format_scalar(value: Any) -> str:
    """Literal string form of a scalar value."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return value
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isfinite(value) and value.is_integer() and abs(value) < 1e16:
            return str(int(value))
        return repr(value)
    raise TypeError(f"Not a storage value: {type(value).__name__}")
