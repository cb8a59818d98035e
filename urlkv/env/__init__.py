"""Host environments: where live addresses come from."""

from .base import Environment
from .memory import HistoryEntry, MemoryEnvironment

__all__ = ["Environment", "HistoryEntry", "MemoryEnvironment"]
