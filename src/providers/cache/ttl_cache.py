"""Single-slot, time-boxed cache cell built on ``cachetools.TTLCache``.

Holds the most recent successful result of some computation together with
the moment it was captured.  ``read()`` only hands the value back while it
is fresh; the remaining methods expose how old the value is without side
effects.

Freshness is ``now - captured_at < ttl``: a value written at ``t`` is
returned for every read before ``t + ttl`` and never at or after it.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Generic, TypeVar

from cachetools import TTLCache

from src.models.world import CacheStats
from src.utils.errors import ConfigurationError
from src.utils.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

_SLOT = "payload"
_MISSING = object()


class TtlCache(Generic[T]):
    """Time-boxed memoization cell.

    Parameters
    ----------
    ttl:
        Time-to-live in seconds.  Must be positive; anything else raises
        :class:`ConfigurationError` immediately.
    clock:
        Monotonic time source in seconds.  Injected in tests.
    """

    def __init__(self, ttl: float, clock: Callable[[], float] = time.monotonic) -> None:
        if isinstance(ttl, bool) or not isinstance(ttl, (int, float)) or not ttl > 0:
            raise ConfigurationError(f"Cache TTL must be a positive number of seconds, got {ttl!r}")
        self._ttl = float(ttl)
        self._cell: TTLCache[str, T] = TTLCache(maxsize=1, ttl=self._ttl, timer=clock)
        self._captured_at: float | None = None
        logger.debug("cache_initialized", ttl_seconds=self._ttl)

    @property
    def ttl(self) -> float:
        return self._ttl

    # ------------------------------------------------------------------
    # Read / write
    # ------------------------------------------------------------------

    def read(self) -> T | None:
        """Return the payload if present and fresh, otherwise ``None``."""
        with self._cell.timer as now:
            value = self._cell.get(_SLOT, _MISSING)
            if value is not _MISSING:
                logger.debug("cache_hit", age_seconds=round(now - self._captured_at, 3))
                return value
            if self._captured_at is None:
                logger.debug("cache_miss")
            else:
                logger.debug(
                    "cache_expired",
                    age_seconds=round(now - self._captured_at, 3),
                    ttl_seconds=self._ttl,
                )
            return None

    def write(self, value: T) -> None:
        """Replace the payload and restart the TTL window from now."""
        with self._cell.timer as now:
            self._cell[_SLOT] = value
            self._captured_at = now
        logger.debug("cache_set", captured_at=now)

    def invalidate(self) -> None:
        """Drop the payload unconditionally."""
        self._cell.clear()
        self._captured_at = None
        logger.debug("cache_cleared")

    # ------------------------------------------------------------------
    # Introspection (no side effects)
    # ------------------------------------------------------------------

    def has_data(self) -> bool:
        """``True`` once written and until invalidated, expired or not."""
        return self._captured_at is not None

    def is_fresh(self) -> bool:
        return self._captured_at is not None and _SLOT in self._cell

    def age(self) -> float | None:
        """Seconds since the last write, or ``None`` when empty."""
        if self._captured_at is None:
            return None
        return max(0.0, self._cell.timer() - self._captured_at)

    def time_to_expiry(self) -> float | None:
        """Seconds until the payload goes stale, clamped at zero; ``None`` when empty."""
        age = self.age()
        if age is None:
            return None
        return max(0.0, self._ttl - age)

    def stats(self) -> CacheStats:
        """Snapshot of the introspection fields, durations in milliseconds."""
        with self._cell.timer:
            age = self.age()
            remaining = self.time_to_expiry()
            return CacheStats(
                has_data=self.has_data(),
                is_fresh=self.is_fresh(),
                age_ms=None if age is None else age * 1000,
                time_to_expiry_ms=None if remaining is None else remaining * 1000,
                ttl_ms=self._ttl * 1000,
            )
