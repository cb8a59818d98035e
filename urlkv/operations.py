"""KeyOperations: per-key reads and writes within a namespace."""

from __future__ import annotations

import copy
import functools
import logging
from typing import Any, Callable, TypeVar

from . import codec
from .errors import (
    AddressTooLong,
    EnvironmentUnavailable,
    InvalidAddress,
    StorageOperationFailed,
)
from .mutator import AddressMutator
from .paths import MISSING, extract, get_path, has_path, set_path, unset_path
from .resolver import AddressResolver
from .values import coerce, is_storage_value, to_raw, to_wire

_logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

# Configuration errors surface from writes as-is.
_FATAL = (EnvironmentUnavailable, InvalidAddress)


def fail_soft(default: Callable[[], Any]) -> Callable[[F], F]:
    """Reads never raise: any failure returns ``default()``."""

    def decorator(fn: F) -> F:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return fn(*args, **kwargs)
            except Exception:
                _logger.debug("%s failed, returning default", fn.__name__, exc_info=True)
                return default()

        return wrapper  # type: ignore[return-value]

    return decorator


def fail_loud(message: str) -> Callable[[F], F]:
    """Writes wrap pipeline failures in ``StorageOperationFailed``."""

    def decorator(fn: F) -> F:
        @functools.wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                return fn(*args, **kwargs)
            except _FATAL:
                raise
            except StorageOperationFailed:
                raise
            except Exception as e:
                raise StorageOperationFailed(f"{message}: {e}", e) from e

        return wrapper  # type: ignore[return-value]

    return decorator


class KeyOperations:
    """Storage operations over the keys of one namespace.

    Keys are dotted/bracket paths relative to the namespace, so
    ``set_item("filters.price", 10)`` writes ``filters[price]=10``.
    """

    def __init__(
        self,
        resolver: AddressResolver,
        mutator: AddressMutator,
        base: str | None = None,
    ) -> None:
        self._resolver = resolver
        self._mutator = mutator
        self._base = base

    def contents(self) -> dict[str, Any]:
        """Decoded (untyped) contents of the namespace."""
        address = self._resolver.resolve()
        if not address.query:
            return {}
        return extract(codec.decode(address.query), self._base)

    # -- Read operations --

    @fail_soft(lambda: False)
    def has_item(self, key: str) -> bool:
        return has_path(self.contents(), key)

    @fail_soft(lambda: None)
    def get_item(self, key: str) -> Any:
        value = get_path(self.contents(), key)
        if value is MISSING:
            return None
        value = coerce(value)
        return value if is_storage_value(value) else None

    @fail_soft(lambda: None)
    def get_item_raw(self, key: str) -> str | None:
        return to_raw(self.get_item(key))

    @fail_soft(dict)
    def get_many(self, *keys: str) -> dict[str, Any]:
        data = self.contents()
        result: dict[str, Any] = {}
        for key in keys:
            value = get_path(data, key)
            if value is not MISSING:
                result[key] = coerce(value)
        return result

    @fail_soft(list)
    def get_keys(self) -> list[str]:
        return list(self.contents())

    # -- Write operations --

    @fail_loud("Failed to set item")
    def set_item(self, key: str, value: Any) -> AddressTooLong | None:
        if value is None:
            return self._remove(key)
        data = copy.deepcopy(self.contents())
        set_path(data, key, to_wire(value))
        return self._mutator.apply(data)

    @fail_loud("Failed to set item")
    def set_item_raw(self, key: str, value: str) -> AddressTooLong | None:
        if not isinstance(value, str):
            raise TypeError(f"Expected str, got {type(value).__name__}")
        return self.set_item(key, value)

    @fail_loud("Failed to remove item")
    def remove_item(self, key: str) -> AddressTooLong | None:
        return self._remove(key)

    def _remove(self, key: str) -> AddressTooLong | None:
        data = copy.deepcopy(self.contents())
        unset_path(data, key)
        return self._mutator.apply(data)

    @fail_loud("Failed to clear storage")
    def clear(self) -> AddressTooLong | None:
        return self._mutator.apply({})

    def dispose(self) -> None:
        """Nothing to release."""
