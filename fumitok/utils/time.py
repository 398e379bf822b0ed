"""UTC time helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
MAX_UTC = datetime.max.replace(tzinfo=timezone.utc)
MIN_UTC = datetime.min.replace(tzinfo=timezone.utc)


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def to_unix_ms(value: datetime) -> int:
    """Return milliseconds since the Unix epoch; naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - EPOCH) // timedelta(milliseconds=1)


def from_unix_ms(value: int) -> datetime:
    """Return the UTC datetime for a millisecond timestamp.

    Timestamps beyond what ``datetime`` can hold saturate to its maximum or
    minimum, so they compare as never or always expired.
    """
    try:
        return EPOCH + timedelta(milliseconds=value)
    except OverflowError:
        return MAX_UTC if value > 0 else MIN_UTC
