"""Clock sources for timestamp assignment.

WallClock reads the system clock; ManualClock produces deterministic
timestamps for tests and reproducible runs.
"""

from __future__ import annotations

import time

from ..core.config import UNIT_DIVISORS
from ..core.errors import ConfigError
from ..core.types import Timestamp


class WallClock:
    """Current wall-clock time as an integer count of `time_unit` since the epoch.

    Args:
        time_unit: One of "s", "ms", "us", "ns"
    """

    def __init__(self, time_unit: str = "ns"):
        if time_unit not in UNIT_DIVISORS:
            raise ConfigError(f"Unknown time unit {time_unit!r}")
        self.time_unit = time_unit
        self._divisor = UNIT_DIVISORS[time_unit]

    def __call__(self) -> Timestamp:
        return time.time_ns() // self._divisor

    def __repr__(self) -> str:
        return f"WallClock(time_unit={self.time_unit!r})"


class ManualClock:
    """Deterministic clock that only moves when told to.

    Each call returns the current reading and then advances it by `step`.
    A step of 0 freezes the clock, which is useful to provoke collisions.

    Args:
        start: First timestamp returned
        step: Amount added after every reading
    """

    def __init__(self, start: Timestamp = 0, step: int = 1):
        if step < 0:
            raise ConfigError("ManualClock step must be >= 0")
        self.now = start
        self.step = step

    def __call__(self) -> Timestamp:
        ts = self.now
        self.now += self.step
        return ts

    def advance(self, amount: int) -> Timestamp:
        """Move the clock forward by `amount` and return the new reading."""
        self.now += amount
        return self.now

    def set(self, ts: Timestamp) -> None:
        """Jump to an arbitrary reading (backwards jumps included)."""
        self.now = ts

    def __repr__(self) -> str:
        return f"ManualClock(now={self.now}, step={self.step})"
