"""Driver configuration."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, Literal

HistoryMethod = Literal["pushState", "replaceState"]

HISTORY_METHODS = ("pushState", "replaceState")

_ALIASES = {
    "url": "url",
    "base": "base",
    "updateHistory": "update_history",
    "update_history": "update_history",
    "historyMethod": "history_method",
    "history_method": "history_method",
    "maxUrlLength": "max_url_length",
    "max_url_length": "max_url_length",
}


@dataclasses.dataclass(frozen=True)
class DriverOptions:
    """Immutable configuration for one driver instance.

    Parameters
    ----------
    url : str or None
        Explicit address to manage in memory. When unset the driver
        follows the live environment's address.
    base : str or None
        Dotted namespace path. All keys are relative to this subtree
        and other subtrees of the address are left alone.
    update_history : bool
        Whether writes in live mode add or replace history entries.
    history_method : {"pushState", "replaceState"}
        History call used when ``update_history`` is true.
    max_url_length : int
        Writes whose resulting address is longer than this many
        characters are rejected.
    """

    url: str | None = None
    base: str | None = None
    update_history: bool = True
    history_method: HistoryMethod = "pushState"
    max_url_length: int = 2000

    def __post_init__(self) -> None:
        # Empty strings mean "not configured".
        if not self.url:
            object.__setattr__(self, "url", None)
        if not self.base:
            object.__setattr__(self, "base", None)
        if self.history_method not in HISTORY_METHODS:
            raise ValueError(
                f"history_method must be one of {HISTORY_METHODS}, "
                f"not {self.history_method!r}"
            )
        if (
            isinstance(self.max_url_length, bool)
            or not isinstance(self.max_url_length, int)
            or self.max_url_length <= 0
        ):
            raise ValueError(
                f"max_url_length must be a positive integer, "
                f"not {self.max_url_length!r}"
            )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> DriverOptions:
        """Build options from a mapping of camelCase or snake_case names."""
        kwargs: dict[str, Any] = {}
        for key, value in mapping.items():
            if key not in _ALIASES:
                raise ValueError(f"Unknown driver option: {key!r}")
            kwargs[_ALIASES[key]] = value
        return cls(**kwargs)

    @property
    def managed(self) -> bool:
        """Whether the address is held in memory rather than live."""
        return self.url is not None
