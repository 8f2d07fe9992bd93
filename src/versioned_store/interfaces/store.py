"""Protocol definition for the versioned store."""

from __future__ import annotations

from typing import Protocol

from ..core.types import Key, Record, Timestamp, Value


class Store(Protocol):
    """Public API of a time-versioned key-value store."""

    def set(self, key: Key, value: Value) -> None:
        """Client-facing set; assigns the insertion timestamp internally."""
        ...

    def get(self, key: Key, timestamp: Timestamp | None = None) -> Record:
        """Return the latest record, or the record at exactly timestamp."""
        ...

    def get_before(self, key: Key, timestamp: Timestamp) -> list[Record]:
        """Return records strictly before timestamp in insertion order."""
        ...
