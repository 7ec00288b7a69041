"""Rate limiter interfaces.

The faucet service depends on this abstraction (not the concrete
implementation) so tests can inject an isolated store with a fake clock, and a
shared backend could be swapped in later without touching the service.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class RateLimitDecision:
    """Outcome of checking an address against its dispense window.

    Attributes:
        allowed: Whether a dispense may proceed now.
        retry_at: UTC instant the address becomes eligible again (None when allowed).
        retry_after_seconds: Whole seconds until ``retry_at`` (None when allowed).
    """

    allowed: bool
    retry_at: datetime | None = None
    retry_after_seconds: int | None = None


class AbstractRateLimiter(ABC):
    """Per-key record of the last successful dispense.

    ``check`` is read-only; callers ``record`` only once the dispense has
    actually succeeded, so a failed transfer never burns the window.
    """

    @abstractmethod
    def check(self, key: str, now: float | None = None) -> RateLimitDecision:
        """Decide whether ``key`` may receive a dispense at ``now``.

        Args:
            key: Recipient address.
            now: UNIX seconds; defaults to the limiter's clock.

        Returns:
            RateLimitDecision for the key.
        """
        raise NotImplementedError

    @abstractmethod
    def record(self, key: str, now: float | None = None) -> None:
        """Store ``now`` as the last successful dispense for ``key``."""
        raise NotImplementedError
