"""Unit tests for the in-memory per-address rate limiter."""

from datetime import datetime, timezone
from unittest.mock import Mock

import pytest

from app.adapters.rate_limit.in_memory import InMemoryAddressRateLimiter

DAY = 24 * 60 * 60


def test_allows_unknown_key() -> None:
    limiter = InMemoryAddressRateLimiter(window_seconds=DAY, clock=Mock(return_value=1000.0))

    decision = limiter.check("k")

    assert decision.allowed is True
    assert decision.retry_at is None
    assert decision.retry_after_seconds is None


def test_check_does_not_record() -> None:
    limiter = InMemoryAddressRateLimiter(window_seconds=DAY, clock=Mock(return_value=1000.0))

    assert limiter.check("k").allowed is True
    assert limiter.check("k").allowed is True
    assert limiter.last_recorded("k") is None
    assert len(limiter) == 0


def test_denies_within_window_with_retry_at() -> None:
    clock = Mock(return_value=1_700_000_000.0)
    limiter = InMemoryAddressRateLimiter(window_seconds=DAY, clock=clock)

    limiter.record("k")
    clock.return_value = 1_700_000_000.0 + 60

    decision = limiter.check("k")

    assert decision.allowed is False
    assert decision.retry_at == datetime.fromtimestamp(1_700_000_000.0 + DAY, tz=timezone.utc)
    assert decision.retry_after_seconds == DAY - 60


def test_allows_again_once_window_elapsed() -> None:
    clock = Mock(return_value=1000.0)
    limiter = InMemoryAddressRateLimiter(window_seconds=10, clock=clock)

    limiter.record("k")
    clock.return_value = 1009.999
    assert limiter.check("k").allowed is False

    clock.return_value = 1010.0
    assert limiter.check("k").allowed is True


def test_explicit_now_overrides_clock() -> None:
    clock = Mock(return_value=0.0)
    limiter = InMemoryAddressRateLimiter(window_seconds=10, clock=clock)

    limiter.record("k", now=500.0)

    assert limiter.last_recorded("k") == 500.0
    assert limiter.check("k", now=505.0).allowed is False
    assert limiter.check("k", now=510.0).allowed is True


def test_record_overwrites_previous_timestamp() -> None:
    limiter = InMemoryAddressRateLimiter(window_seconds=10)

    limiter.record("k", now=100.0)
    limiter.record("k", now=200.0)

    assert limiter.last_recorded("k") == 200.0
    assert len(limiter) == 1


def test_isolated_by_key() -> None:
    limiter = InMemoryAddressRateLimiter(window_seconds=60, clock=Mock(return_value=1000.0))

    limiter.record("k1")

    assert limiter.check("k1").allowed is False
    assert limiter.check("k2").allowed is True


@pytest.mark.parametrize("window_seconds", [0, -1])
def test_invalid_window(window_seconds: int) -> None:
    with pytest.raises(ValueError):
        InMemoryAddressRateLimiter(window_seconds=window_seconds)


def test_empty_key_rejected() -> None:
    limiter = InMemoryAddressRateLimiter(window_seconds=60)

    with pytest.raises(ValueError):
        limiter.check("")

    with pytest.raises(ValueError):
        limiter.record("")
