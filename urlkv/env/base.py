"""Abstract host environment interface."""

from abc import ABC, abstractmethod
from typing import Any
from urllib.parse import urlsplit


class Environment(ABC):
    """A navigable context owning a live address and session history.

    Mirrors the browser primitives the driver relies on: reading the
    current location and pushing or replacing history entries.
    """

    @property
    @abstractmethod
    def href(self) -> str:
        """The current address as a string."""

    @property
    def origin(self) -> str:
        """Scheme and host of the current address."""
        parts = urlsplit(self.href)
        return f"{parts.scheme}://{parts.netloc.rpartition('@')[2]}"

    @abstractmethod
    def push_state(self, state: Any, title: str, url: str) -> None:
        """Add a history entry and make ``url`` current."""

    @abstractmethod
    def replace_state(self, state: Any, title: str, url: str) -> None:
        """Overwrite the current history entry with ``url``."""
