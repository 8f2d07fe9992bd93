"""Protocol definition for a per-key history."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..core.types import Record, Timestamp


class History(Protocol):
    """Ordered list of records plus an exact-timestamp index over the same set."""

    def append(self, record: Record) -> None:
        """Add record to both views at once."""
        ...

    def latest(self) -> Record:
        """Return the last appended record."""
        ...

    def at(self, timestamp: Timestamp) -> Record:
        """Return the record at exactly timestamp; raise if absent."""
        ...

    def before(self, timestamp: Timestamp) -> list[Record]:
        """Return the prefix of records strictly before timestamp."""
        ...

    @property
    def records(self) -> list[Record]:
        """Copy of the ordered records."""
        ...

    @property
    def last_timestamp(self) -> Timestamp | None:
        """Timestamp of the latest record, None when empty."""
        ...

    def timestamps(self) -> list[Timestamp]:
        """Indexed timestamps in ascending order."""
        ...

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[Record]: ...
