"""Storage-driver protocol, the query-string driver and its factory."""

from collections.abc import Iterator, MutableMapping
from typing import Any, Protocol, runtime_checkable

from .env.base import Environment
from .errors import AddressTooLong
from .mutator import AddressMutator
from .operations import KeyOperations
from .options import DriverOptions, HistoryMethod
from .resolver import AddressResolver


@runtime_checkable
class Driver(Protocol):
    """Protocol for key-value storage drivers.

    Implementations: ``QueryStringDriver``.
    """

    name: str
    options: Any

    def has_item(self, key: str) -> bool: ...
    def get_item(self, key: str) -> Any: ...
    def get_item_raw(self, key: str) -> str | None: ...
    def set_item(self, key: str, value: Any) -> Any: ...
    def remove_item(self, key: str) -> Any: ...
    def get_keys(self) -> list[str]: ...
    def clear(self) -> Any: ...
    def dispose(self) -> None: ...


class QueryStringDriver(MutableMapping[str, Any]):
    """Key-value storage kept in an address's query string.

    Each instance owns its own resolver, so independently configured
    drivers never share a cached address.

    Implements ``MutableMapping[str, Any]`` and the ``Driver`` protocol.

    Args:
        options: Driver configuration (defaults to ``DriverOptions()``).
        environment: Live environment supplying the current address
            and session history. Required unless ``options.url`` is an
            absolute address.
    """

    name = "query-string"

    def __init__(
        self,
        options: DriverOptions | None = None,
        *,
        environment: Environment | None = None,
    ) -> None:
        self.options = options if options is not None else DriverOptions()
        self._resolver = AddressResolver(self.options.url, environment)
        self._mutator = AddressMutator(self._resolver, self.options)
        self._ops = KeyOperations(self._resolver, self._mutator, self.options.base)

    @property
    def href(self) -> str:
        """The current address."""
        return self._resolver.resolve().href

    # -- Read operations --

    def has_item(self, key: str) -> bool:
        """Whether ``key`` exists in the namespace."""
        return self._ops.has_item(key)

    def get_item(self, key: str) -> Any:
        """Typed value at ``key``, or None."""
        return self._ops.get_item(key)

    def get_item_raw(self, key: str) -> str | None:
        """String form of the value at ``key``, or None."""
        return self._ops.get_item_raw(key)

    def get_many(self, *keys: str) -> dict[str, Any]:
        """Values for the keys that exist."""
        return self._ops.get_many(*keys)

    def get_keys(self) -> list[str]:
        """Top-level keys in the namespace."""
        return self._ops.get_keys()

    # -- Write operations --

    def set_item(self, key: str, value: Any) -> AddressTooLong | None:
        """Store ``value`` at ``key``; None removes the key."""
        return self._ops.set_item(key, value)

    def set_item_raw(self, key: str, value: str) -> AddressTooLong | None:
        return self._ops.set_item_raw(key, value)

    def remove_item(self, key: str) -> AddressTooLong | None:
        return self._ops.remove_item(key)

    def clear(self) -> AddressTooLong | None:
        """Remove every key in the namespace, leaving other keys alone."""
        return self._ops.clear()

    def dispose(self) -> None:
        self._ops.dispose()

    # -- MutableMapping --

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has_item(key)

    def __getitem__(self, key: str) -> Any:
        if key not in self:
            raise KeyError(key)
        return self.get_item(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.set_item(key, value)

    def __delitem__(self, key: str) -> None:
        if key not in self:
            raise KeyError(key)
        self.remove_item(key)

    def __iter__(self) -> Iterator[str]:
        return iter(self.get_keys())

    def __len__(self) -> int:
        return len(self.get_keys())

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.options!r})"


def query_string_driver(
    url: str | None = None,
    *,
    base: str | None = None,
    update_history: bool = True,
    history_method: HistoryMethod = "pushState",
    max_url_length: int = 2000,
    environment: Environment | None = None,
) -> QueryStringDriver:
    """Create a QueryStringDriver.

    Args:
        url: Explicit address to manage in memory. Omit to follow
            ``environment``'s live address.
        base: Dotted namespace path for all keys.
        update_history: Whether live writes touch session history.
        history_method: ``"pushState"`` (default) or ``"replaceState"``.
        max_url_length: Longest address a write may produce
            (default 2000).
        environment: Live environment; required without an absolute
            ``url``.

    Returns:
        A ``QueryStringDriver`` instance.
    """
    options = DriverOptions(
        url=url,
        base=base,
        update_history=update_history,
        history_method=history_method,
        max_url_length=max_url_length,
    )
    return QueryStringDriver(options, environment=environment)
