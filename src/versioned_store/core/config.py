"""Configuration for the versioned store.

Defines the tunable parameters of timestamp assignment.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import ConfigError
from .types import Clock

# Divisors from nanoseconds to each supported unit
UNIT_DIVISORS = {"s": 10**9, "ms": 10**6, "us": 10**3, "ns": 1}
TIME_UNITS = tuple(UNIT_DIVISORS)


class CollisionPolicy(Enum):
    """What set does when a new timestamp equals the key's latest one.

    BUMP: advance the timestamp by one unit so every timestamp of a key is
        unique and the index stays one-to-one with the ordered history.
        With a coarse time unit, repeated bumps can move assigned timestamps
        ahead of the wall clock until its readings catch up.
    OVERWRITE: append the record anyway; the timestamp index keeps only the
        newest record for that timestamp while the history holds both.
    REJECT: raise TimestampCollisionError and leave the store unchanged.
    """

    BUMP = "bump"
    OVERWRITE = "overwrite"
    REJECT = "reject"


@dataclass
class StoreConfig:
    """Configuration parameters for VersionedStore.

    Attributes:
        time_unit: Resolution of wall-clock timestamps ("s", "ms", "us", "ns")
        collision_policy: Handling of equal timestamps within one key
        clock: Zero-argument callable returning the current timestamp;
            overrides the wall clock when set
    """

    time_unit: str = "ns"
    collision_policy: CollisionPolicy = CollisionPolicy.BUMP
    clock: Clock | None = None

    def __post_init__(self) -> None:
        if self.time_unit not in TIME_UNITS:
            raise ConfigError(
                f"time_unit must be one of {', '.join(TIME_UNITS)}, not {self.time_unit!r}"
            )
        if isinstance(self.collision_policy, str):
            try:
                self.collision_policy = CollisionPolicy(self.collision_policy)
            except ValueError as e:
                raise ConfigError(f"Unknown collision policy {self.collision_policy!r}") from e
        if self.clock is not None and not callable(self.clock):
            raise ConfigError("clock must be a zero-argument callable")
