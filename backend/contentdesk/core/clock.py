"""Clock Helpers — timezone-aware UTC timestamps.

Invariants:
    - Every datetime leaving these helpers is timezone-aware UTC
    - Naive datetimes are interpreted as UTC (SQLite drops tzinfo on read)
"""

from datetime import datetime, timezone


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime | None) -> datetime | None:
    """Attach or convert to UTC; None passes through."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)
