"""Versioned Store - time-versioned in-memory key-value store in Python."""

from .core.config import CollisionPolicy, StoreConfig
from .core.errors import (
    VersionedStoreError,
    KeyNotFoundError,
    TimestampNotFoundError,
    TimestampCollisionError,
    OutOfOrderError,
    ConfigError,
)
from .core.store import VersionedStore
from .core.types import Key, Value, Timestamp, Record
from .components.clock import ManualClock, WallClock
from .components.history import KeyHistory

__all__ = [
    "StoreConfig",
    "CollisionPolicy",
    "VersionedStoreError",
    "KeyNotFoundError",
    "TimestampNotFoundError",
    "TimestampCollisionError",
    "OutOfOrderError",
    "ConfigError",
    "VersionedStore",
    "KeyHistory",
    "ManualClock",
    "WallClock",
    "Key",
    "Value",
    "Timestamp",
    "Record",
]
