"""In-memory per-address rate limiter.

Notes:
- Per-process only: records are lost on restart, and running multiple workers
  gives each worker its own independent map.
- Thread-safe: uses a lock around shared state.
"""

from __future__ import annotations

import math
import threading
import time
from typing import Callable

from app.adapters.rate_limit.base import AbstractRateLimiter, RateLimitDecision
from app.utils.timefmt import from_epoch


class InMemoryAddressRateLimiter(AbstractRateLimiter):
    """Allow one dispense per key per sliding window.

    A key is eligible again once ``now - last >= window_seconds``, where
    ``last`` is the timestamp passed to the most recent ``record`` call.
    """

    def __init__(
        self,
        *,
        window_seconds: float,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the limiter.

        Args:
            window_seconds: Minimum spacing between two dispenses to one key.
            clock: Time source returning UNIX time in seconds.

        Raises:
            ValueError: If window_seconds is not positive.
        """
        if window_seconds <= 0:
            raise ValueError("window_seconds must be > 0")

        self._window_seconds = window_seconds
        self._clock = clock
        self._lock = threading.RLock()
        self._last_by_key: dict[str, float] = {}

    def last_recorded(self, key: str) -> float | None:
        """Timestamp of the last recorded dispense for ``key``, if any."""
        with self._lock:
            return self._last_by_key.get(key)

    def check(self, key: str, now: float | None = None) -> RateLimitDecision:
        if not key:
            raise ValueError("key must be a non-empty string")
        if now is None:
            now = self._clock()

        with self._lock:
            last = self._last_by_key.get(key)

        if last is None or now - last >= self._window_seconds:
            return RateLimitDecision(allowed=True)

        retry_at = last + self._window_seconds
        return RateLimitDecision(
            allowed=False,
            retry_at=from_epoch(retry_at),
            retry_after_seconds=max(0, int(math.ceil(retry_at - now))),
        )

    def record(self, key: str, now: float | None = None) -> None:
        if not key:
            raise ValueError("key must be a non-empty string")
        if now is None:
            now = self._clock()

        with self._lock:
            self._last_by_key[key] = now

    def __len__(self) -> int:
        with self._lock:
            return len(self._last_by_key)
