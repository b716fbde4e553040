"""Single-slot TTL cache cell for one fetched source."""

import time
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")

# 4 minutes
CACHE_TTL_SECONDS = 240.0


class CacheCell(Generic[T]):
    """One cached value plus its creation time and an invalidation flag.

    A cell is never refreshed in place: callers build a new cell to replace it.
    Only ``invalidated`` may change after construction.
    """

    __slots__ = ("_value", "_created_at", "_ttl", "_clock", "invalidated")

    def __init__(
        self,
        value: T,
        ttl: float = CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Wrap a value and stamp the creation time.

        Args:
            value: The value to cache. The cell owns it from now on.
            ttl: Time-to-live in seconds.
            clock: Monotonic time source in seconds.
        """
        self._value = value
        self._ttl = ttl
        self._clock = clock
        self._created_at = clock()
        self.invalidated = False

    @property
    def value(self) -> T:
        """The cached value."""
        return self._value

    @property
    def created_at(self) -> float:
        """Clock reading taken when the cell was built."""
        return self._created_at

    @property
    def age(self) -> float:
        """Seconds elapsed since the cell was built."""
        return self._clock() - self._created_at

    def is_expired(self) -> bool:
        """Check whether the cell must be replaced.

        Returns:
            True if manually invalidated or the TTL has elapsed.
        """
        return self.invalidated or self.age >= self._ttl
