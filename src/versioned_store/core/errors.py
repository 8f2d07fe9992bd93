"""Exception hierarchy for the versioned store.

Defines all custom exceptions used throughout the implementation.
"""

from __future__ import annotations

from .types import Key, Timestamp


class VersionedStoreError(Exception):
    """Base exception for all versioned store errors."""
    pass


class KeyNotFoundError(VersionedStoreError, KeyError):
    """Raised when a read targets a key that was never set."""

    def __init__(self, key: Key):
        super().__init__(f"key [{key}] does not exist")
        self.key = key

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class TimestampNotFoundError(VersionedStoreError, LookupError):
    """Raised when a key exists but holds no record at the requested timestamp."""

    def __init__(self, key: Key, timestamp: Timestamp):
        super().__init__(f"key [{key}] had no timestamp [{timestamp}]")
        self.key = key
        self.timestamp = timestamp


class TimestampCollisionError(VersionedStoreError):
    """Raised by set under the REJECT policy when a timestamp is already taken."""

    def __init__(self, key: Key, timestamp: Timestamp):
        super().__init__(f"key [{key}] already has timestamp [{timestamp}]")
        self.key = key
        self.timestamp = timestamp


class OutOfOrderError(VersionedStoreError, ValueError):
    """Raised when a record older than the latest one is appended to a history."""
    pass


class ConfigError(VersionedStoreError, ValueError):
    """Raised when store configuration is invalid."""
    pass
