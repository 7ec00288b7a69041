"""UTC timestamp helpers."""

from __future__ import annotations

from datetime import datetime, timezone


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def from_epoch(seconds: float) -> datetime:
    """Convert UNIX seconds to an aware UTC datetime."""

    return datetime.fromtimestamp(seconds, tz=timezone.utc)


def isoformat_utc(value: datetime) -> str:
    """Format as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` (millisecond precision, Z suffix).

    Naive datetimes are assumed to already be in UTC.

    Examples:
        >>> isoformat_utc(datetime(2024, 1, 2, 3, 4, 5, 678901, tzinfo=timezone.utc))
        '2024-01-02T03:04:05.678Z'
    """

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
