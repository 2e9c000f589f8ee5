"""
Time-related utilities for the application.

All timestamps are generated in UTC. `created_at` on combos uses ISO-8601
with timezone information; image object keys use epoch milliseconds.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return the current timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def utc_now_iso() -> str:
    """Return current UTC time in ISO-8601 format.

    Example:
        2024-01-15T10:42:31.123456+00:00
    """
    return utc_now().isoformat()


def utc_now_millis() -> int:
    """Return milliseconds since the Unix epoch, used as a key uniqueness token."""
    return int(utc_now().timestamp() * 1000)
