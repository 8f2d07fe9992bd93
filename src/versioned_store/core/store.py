"""Versioned store implementation - main public API.

Routes every operation to the KeyHistory of its key and assigns insertion
timestamps.
"""

from __future__ import annotations

import logging
from typing import Iterator

from .config import CollisionPolicy, StoreConfig
from .errors import KeyNotFoundError, TimestampCollisionError
from .types import Clock, Key, Record, Timestamp, Value
from ..components.clock import WallClock
from ..components.history import KeyHistory
from ..interfaces.history import History

logger = logging.getLogger(__name__)


class VersionedStore:
    """Time-versioned key-value store keeping every value ever set.

    Args:
        config: Store configuration (defaults to StoreConfig())
        clock: Timestamp source; overrides config.clock and the wall clock

    Public API:
        - set(key, value): Append a new version of key
        - get(key): Latest record
        - get(key, timestamp): Record at exactly timestamp
        - get_before(key, timestamp): Records strictly before timestamp
        - history(key), timestamps(key), keys(), snapshot(): Inspection

    Invariants:
        - Timestamps handed out by the store never decrease
        - Within one key, insertion order equals timestamp order
        - A key's history is created by its first set and never removed
        - Failed operations leave the store unchanged
    """

    def __init__(self, config: StoreConfig | None = None, clock: Clock | None = None):
        self.config = config if config is not None else StoreConfig()
        if clock is None:
            clock = self.config.clock if self.config.clock is not None else WallClock(self.config.time_unit)
        self._clock: Clock = clock
        self._histories: dict[Key, History] = {}
        self._last_timestamp: Timestamp | None = None
        self._last_reading: Timestamp | None = None

        logger.info(
            f"Initialized VersionedStore (clock={self._clock!r}, "
            f"collision_policy={self.config.collision_policy.value})"
        )

    def _next_timestamp(self, key: Key, history: History | None) -> Timestamp:
        """Read the clock and apply the monotonic guard and collision policy."""
        reading = self._clock()

        if self._last_reading is not None and reading < self._last_reading:
            logger.warning(
                f"Clock went backwards ({reading} < {self._last_reading}), "
                f"clamping timestamp for key [{key}]"
            )
        self._last_reading = reading

        ts = reading
        if self._last_timestamp is not None and ts < self._last_timestamp:
            # Earlier bumps may leave assigned timestamps ahead of the clock
            logger.debug(
                f"Reading {ts} is behind last assigned timestamp "
                f"{self._last_timestamp}, clamping for key [{key}]"
            )
            ts = self._last_timestamp

        if history is not None and ts == history.last_timestamp:
            policy = self.config.collision_policy
            if policy is CollisionPolicy.REJECT:
                raise TimestampCollisionError(key, ts)
            if policy is CollisionPolicy.BUMP:
                logger.debug(f"Timestamp {ts} already used by key [{key}], bumping")
                ts += 1
            else:
                logger.warning(
                    f"Timestamp {ts} already used by key [{key}], "
                    "index entry will point at the newer record"
                )

        return ts

    def set(self, key: Key, value: Value) -> None:
        """Append value as the newest version of key.

        Creates the key's history on first use.

        Raises:
            TimestampCollisionError: Only under CollisionPolicy.REJECT
        """
        history = self._histories.get(key)
        ts = self._next_timestamp(key, history)

        if history is None:
            logger.debug(f"Creating history for new key [{key}]")
            history = KeyHistory(key)
            self._histories[key] = history

        history.append(Record(ts, value))
        self._last_timestamp = ts
        logger.debug(f"Set key [{key}] at {ts} ({len(history)} versions)")

    def get(self, key: Key, timestamp: Timestamp | None = None) -> Record:
        """Return the latest record for key, or the one at exactly timestamp.

        Raises:
            KeyNotFoundError: If key was never set
            TimestampNotFoundError: If timestamp is given and no record has it
        """
        history = self._history(key)
        if timestamp is None:
            return history.latest()
        return history.at(timestamp)

    def get_before(self, key: Key, timestamp: Timestamp) -> list[Record]:
        """Return every record of key with a timestamp strictly before timestamp.

        Records come back in insertion order. An empty list is a valid
        answer, not an error.

        Raises:
            KeyNotFoundError: If key was never set
        """
        return self._history(key).before(timestamp)

    def history(self, key: Key) -> list[Record]:
        """Return the full ordered history of key."""
        return self._history(key).records

    def timestamps(self, key: Key) -> list[Timestamp]:
        """Return the indexed timestamps of key in ascending order."""
        return self._history(key).timestamps()

    def keys(self) -> list[Key]:
        """Return all keys in first-set order."""
        return list(self._histories)

    def snapshot(self) -> dict[Key, list[Record]]:
        """Return a copy of every key's history, for inspection and debugging."""
        return {key: history.records for key, history in self._histories.items()}

    def _history(self, key: Key) -> History:
        try:
            return self._histories[key]
        except KeyError:
            raise KeyNotFoundError(key) from None

    def __contains__(self, key: object) -> bool:
        return key in self._histories

    def __len__(self) -> int:
        return len(self._histories)

    def __iter__(self) -> Iterator[Key]:
        return iter(list(self._histories))

    def __repr__(self) -> str:
        versions = sum(len(h) for h in self._histories.values())
        return f"VersionedStore(keys={len(self._histories)}, versions={versions})"
