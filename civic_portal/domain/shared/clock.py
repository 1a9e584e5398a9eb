"""Time helpers shared by the domain.

All domain timestamps are timezone-aware UTC datetimes.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(timezone.utc)


def ensure_aware(value: datetime) -> datetime:
    """Interpret naive datetimes as UTC, leave aware ones untouched."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def resolve_now(now: datetime | None = None) -> datetime:
    """Reference time for time-relative predicates, defaulting to the clock."""
    if now is None:
        return utc_now()
    return ensure_aware(now)
