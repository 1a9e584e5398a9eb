"""Published Date - when an article went public."""

from dataclasses import dataclass
from datetime import datetime

from civic_portal.domain.shared import ValueObject, ensure_aware, resolve_now


@dataclass(frozen=True)
class PublishedDate(ValueObject):
    """Publication timestamp with relative-time helpers."""

    value: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", ensure_aware(self.value))

    def is_in_future(self, now: datetime | None = None) -> bool:
        return self.value > resolve_now(now)

    def is_today(self, now: datetime | None = None) -> bool:
        return self.value.date() == resolve_now(now).date()

    def days_ago(self, now: datetime | None = None) -> int:
        """Whole days elapsed since publication."""
        return (resolve_now(now) - self.value).days

    def time_ago(self, now: datetime | None = None) -> str:
        """Relative label: "Today", "Yesterday", "3 days ago", "2 weeks ago"..."""
        days = self.days_ago(now)
        if days <= 0:
            return "Today"
        if days == 1:
            return "Yesterday"
        if days < 7:
            return f"{days} days ago"
        if days < 30:
            return f"{days // 7} weeks ago"
        if days < 365:
            return f"{days // 30} months ago"
        return f"{days // 365} years ago"
