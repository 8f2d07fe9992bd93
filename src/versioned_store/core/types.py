"""Common type definitions for the versioned store.

Defines fundamental types used across all components.
"""

from __future__ import annotations

from typing import Any, Callable, NamedTuple

# Core primitive types
Key = str
Value = Any
Timestamp = int
Clock = Callable[[], Timestamp]


class Record(NamedTuple):
    """One immutable (timestamp, value) pair produced by a single set call."""

    timestamp: Timestamp
    value: Value
