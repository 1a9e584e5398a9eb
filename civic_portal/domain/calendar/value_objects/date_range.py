"""DateRange - start and end of an event."""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone

from civic_portal.domain.shared import (
    ErrorCode,
    ValueObject,
    ensure_aware,
    resolve_now,
    validate_value_object,
)

MAX_DURATION = timedelta(days=365)


@dataclass(frozen=True)
class DateRange(ValueObject):
    """Closed time interval, start strictly before end, at most one year long.

    Naive datetimes are interpreted as UTC. Time predicates accept ``now``
    so callers (and tests) can evaluate them at a fixed instant.
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "start", ensure_aware(self.start))
        object.__setattr__(self, "end", ensure_aware(self.end))
        validate_value_object(
            self.start < self.end,
            "Start date must be before end date",
            field="date_range",
            code=ErrorCode.INVALID_RANGE,
        )
        validate_value_object(
            self.end - self.start <= MAX_DURATION,
            "Date range cannot exceed 1 year",
            field="date_range",
            code=ErrorCode.INVALID_RANGE,
        )

    # ==================== Factory Methods ====================

    @classmethod
    def single_day(cls, day: date) -> "DateRange":
        """Whole calendar day in UTC."""
        start = datetime.combine(day, time.min, tzinfo=timezone.utc)
        end = datetime.combine(day, time(23, 59, 59, 999000), tzinfo=timezone.utc)
        return cls(start, end)

    @classmethod
    def from_duration(cls, start: datetime, hours: float) -> "DateRange":
        return cls(start, ensure_aware(start) + timedelta(hours=hours))

    # ==================== Queries ====================

    @property
    def duration(self) -> timedelta:
        return self.end - self.start

    @property
    def duration_hours(self) -> float:
        return self.duration.total_seconds() / 3600

    @property
    def duration_days(self) -> float:
        return self.duration_hours / 24

    def is_in_future(self, now: datetime | None = None) -> bool:
        return self.start > resolve_now(now)

    def is_in_past(self, now: datetime | None = None) -> bool:
        return self.end < resolve_now(now)

    def is_ongoing(self, now: datetime | None = None) -> bool:
        return self.contains(resolve_now(now))

    def is_single_day(self) -> bool:
        return self.start.date() == self.end.date()

    def contains(self, moment: datetime) -> bool:
        return self.start <= ensure_aware(moment) <= self.end

    def overlaps(self, other: "DateRange") -> bool:
        return self.start <= other.end and other.start <= self.end

    def time_until_start(self, now: datetime | None = None) -> timedelta:
        """Zero once the range has started."""
        return max(timedelta(0), self.start - resolve_now(now))

    def time_since_end(self, now: datetime | None = None) -> timedelta:
        """Zero until the range has ended."""
        return max(timedelta(0), resolve_now(now) - self.end)

    # ==================== Updates ====================

    def extend(self, hours: float) -> "DateRange":
        return DateRange(self.start, self.end + timedelta(hours=hours))

    def shift(self, hours: float) -> "DateRange":
        delta = timedelta(hours=hours)
        return DateRange(self.start + delta, self.end + delta)
