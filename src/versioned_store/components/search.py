"""Ordered search over a timestamp-sorted record sequence."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ..core.types import Record, Timestamp


def bisect_first_not_before(records: Sequence[Record], timestamp: Timestamp) -> int:
    """Return the position of the first record whose timestamp is >= `timestamp`.

    Returns len(records) when every record is strictly before `timestamp`,
    and 0 when none is. `records` must be sorted ascending by timestamp.
    """
    # Binary search
    left, right = 0, len(records)

    while left < right:
        mid = (left + right) // 2
        if records[mid].timestamp < timestamp:
            left = mid + 1
        else:
            right = mid

    return left
