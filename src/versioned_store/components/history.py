"""Per-key version history.

Holds every record ever set for one key in two synchronized views: the
insertion-ordered list and an exact-timestamp index backed by
sortedcontainers.SortedDict.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sortedcontainers import SortedDict

from ..core.errors import OutOfOrderError, TimestampNotFoundError
from .search import bisect_first_not_before

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..core.types import Key, Record, Timestamp


class KeyHistory:
    """All records of a single key.

    Args:
        key: Key this history belongs to (used in error messages)

    Invariants:
        - Records are kept in non-decreasing timestamp order, which is also
          insertion order
        - Every record in the list is reachable from the index under its own
          timestamp, except records shadowed by a later one with the same
          timestamp (OVERWRITE collision policy only)
        - Both views only change together, inside append()
    """

    def __init__(self, key: Key):
        self.key = key
        self._records: list[Record] = []
        self._index: SortedDict = SortedDict()

    def append(self, record: Record) -> None:
        """Add a record to both views.

        Raises:
            OutOfOrderError: If the record is older than the latest one
        """
        if self._records and record.timestamp < self._records[-1].timestamp:
            raise OutOfOrderError(
                f"Out-of-order timestamp {record.timestamp} for key [{self.key}] "
                f"(latest is {self._records[-1].timestamp})"
            )
        self._records.append(record)
        self._index[record.timestamp] = record

    def latest(self) -> Record:
        """Return the most recently appended record.

        Raises:
            IndexError: If the history is empty
        """
        if not self._records:
            raise IndexError(f"History for key [{self.key}] is empty")
        return self._records[-1]

    def at(self, timestamp: Timestamp) -> Record:
        """Return the record stored at exactly `timestamp`."""
        try:
            return self._index[timestamp]
        except KeyError:
            raise TimestampNotFoundError(self.key, timestamp) from None

    def before(self, timestamp: Timestamp) -> list[Record]:
        """Return all records strictly before `timestamp`, oldest first."""
        idx = bisect_first_not_before(self._records, timestamp)
        return self._records[:idx]

    @property
    def records(self) -> list[Record]:
        """Copy of the ordered history."""
        return list(self._records)

    @property
    def last_timestamp(self) -> Timestamp | None:
        if not self._records:
            return None
        return self._records[-1].timestamp

    def timestamps(self) -> list[Timestamp]:
        """Indexed timestamps in ascending order."""
        return list(self._index.keys())

    def __contains__(self, timestamp: object) -> bool:
        return timestamp in self._index

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __repr__(self) -> str:
        return f"KeyHistory(key={self.key!r}, records={len(self._records)})"
