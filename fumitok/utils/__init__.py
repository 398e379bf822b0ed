"""Utility helpers for time conversion."""

from .time import from_unix_ms, to_unix_ms, utc_now

__all__ = ["utc_now", "to_unix_ms", "from_unix_ms"]
