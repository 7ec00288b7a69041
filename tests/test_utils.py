"""Tests for small utilities: timestamp formatting and keyed locks."""

import asyncio
from datetime import datetime, timedelta, timezone

import pytest

from app.utils.keyed_lock import KeyedLock
from app.utils.timefmt import from_epoch, isoformat_utc


class TestIsoformatUtc:
    def test_millisecond_precision_with_z_suffix(self):
        value = datetime(2024, 1, 2, 3, 4, 5, 678901, tzinfo=timezone.utc)

        assert isoformat_utc(value) == "2024-01-02T03:04:05.678Z"

    def test_converts_other_timezones_to_utc(self):
        value = datetime(2024, 1, 2, 5, 0, 0, tzinfo=timezone(timedelta(hours=2)))

        assert isoformat_utc(value) == "2024-01-02T03:00:00.000Z"

    def test_naive_is_treated_as_utc(self):
        assert isoformat_utc(datetime(2024, 1, 2)) == "2024-01-02T00:00:00.000Z"

    def test_from_epoch(self):
        assert isoformat_utc(from_epoch(1_700_000_000)) == "2023-11-14T22:13:20.000Z"


class TestKeyedLock:
    @pytest.mark.asyncio
    async def test_same_key_serializes(self):
        locks = KeyedLock()
        order: list[str] = []

        async def worker(name: str):
            async with locks.hold("k"):
                order.append(f"{name}-in")
                await asyncio.sleep(0.01)
                order.append(f"{name}-out")

        await asyncio.gather(worker("a"), worker("b"))

        assert order == ["a-in", "a-out", "b-in", "b-out"]

    @pytest.mark.asyncio
    async def test_distinct_keys_do_not_block(self):
        locks = KeyedLock()

        async with locks.hold("k1"):
            assert locks.locked("k1")
            async with locks.hold("k2"):
                assert locks.locked("k2")

    @pytest.mark.asyncio
    async def test_locks_are_released_and_forgotten(self):
        locks = KeyedLock()

        async with locks.hold("k"):
            assert len(locks) == 1

        assert len(locks) == 0
        assert not locks.locked("k")

    @pytest.mark.asyncio
    async def test_released_on_exception(self):
        locks = KeyedLock()

        with pytest.raises(RuntimeError):
            async with locks.hold("k"):
                raise RuntimeError("boom")

        assert len(locks) == 0
