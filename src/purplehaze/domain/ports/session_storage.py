"""Abstract session-scoped key/value storage.

Values survive a reload within one browsing session and are dropped
when the session ends.  Values must be JSON-serializable.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class SessionStorage(ABC):

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Return the stored value for *key*, or None."""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store *value* under *key*, replacing any previous value."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Drop *key*; no-op if absent."""

    @abstractmethod
    def clear(self) -> None:
        """Drop everything stored for this session."""
