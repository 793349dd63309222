"""
UTC datetime utilities for consistent timezone handling.

All datetime values in the system should be timezone-aware UTC.
Firestore timestamps decode as aware UTC datetimes; values written by older
clients may be naive, strings, or {seconds, nanos} mappings.
"""

from datetime import UTC, datetime


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)

    return dt.astimezone(UTC)


def from_timestamp_utc(timestamp: float) -> datetime:
    """
    Create a UTC-aware datetime from a Unix timestamp.
    Use instead of datetime.fromtimestamp() which returns naive local time.
    """
    return datetime.fromtimestamp(timestamp, tz=UTC)


def to_js_iso(dt: datetime) -> str:
    """
    Format like JavaScript's Date.toISOString(): UTC, millisecond precision, 'Z' suffix.

    Example: 2024-05-03T12:00:00.250Z
    """
    utc = ensure_utc(dt)
    assert utc is not None
    return f"{utc:%Y-%m-%dT%H:%M:%S}.{utc.microsecond // 1000:03d}Z"
