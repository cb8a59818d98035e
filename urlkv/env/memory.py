"""In-memory session history."""

from dataclasses import dataclass
from typing import Any
from urllib.parse import urljoin, urlsplit

from .base import Environment


@dataclass(frozen=True)
class HistoryEntry:
    url: str
    state: Any = None
    title: str = ""


class MemoryEnvironment(Environment):
    """A headless environment holding session history in memory.

    Behaves like a browser tab: ``push_state`` drops any forward
    entries, ``back``/``forward`` move the cursor, and navigation to
    another origin is refused.
    """

    def __init__(self, href: str = "http://localhost/") -> None:
        self.entries: list[HistoryEntry] = [HistoryEntry(href)]
        self.index = 0

    @property
    def href(self) -> str:
        return self.entries[self.index].url

    @property
    def state(self) -> Any:
        return self.entries[self.index].state

    @property
    def length(self) -> int:
        return len(self.entries)

    def _resolve(self, url: str) -> str:
        target = urljoin(self.href, url)
        if _origin(target) != self.origin:
            raise ValueError(
                f"Cannot navigate from origin {self.origin} to {target}"
            )
        return target

    def push_state(self, state: Any, title: str, url: str) -> None:
        entry = HistoryEntry(self._resolve(url), state, title)
        del self.entries[self.index + 1:]
        self.entries.append(entry)
        self.index += 1

    def replace_state(self, state: Any, title: str, url: str) -> None:
        self.entries[self.index] = HistoryEntry(self._resolve(url), state, title)

    def go(self, delta: int) -> None:
        """Move the cursor by ``delta``; out-of-range moves are ignored."""
        target = self.index + delta
        if 0 <= target < len(self.entries):
            self.index = target

    def back(self) -> None:
        self.go(-1)

    def forward(self) -> None:
        self.go(1)


def _origin(url: str) -> str:
    parts = urlsplit(url)
    return f"{parts.scheme}://{parts.netloc.rpartition('@')[2]}"
