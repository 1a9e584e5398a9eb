"""EventRepository Port - interface for event persistence.

This is a PORT in Hexagonal Architecture (the domain defines the interface).
Storage adapters implement it outside this package.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from civic_portal.domain.shared import Page, PaginationOptions, SortOptions

from ..entities import Event
from ..value_objects import EventId, EventType


@dataclass(frozen=True)
class EventFilters:
    """Repository-side event filter. None means "any".

    is_upcoming/is_ongoing/is_past are evaluated against the event dates.
    """

    type: EventType | None = None
    is_upcoming: bool | None = None
    is_ongoing: bool | None = None
    is_past: bool | None = None
    is_online: bool | None = None
    city: str | None = None
    country: str | None = None
    tags: tuple[str, ...] = ()
    has_available_spots: bool | None = None
    search_query: str | None = None
    start_after: datetime | None = None
    start_before: datetime | None = None


class EventRepository(ABC):
    """Abstract interface for event persistence."""

    @abstractmethod
    async def find_by_id(self, event_id: EventId) -> Optional[Event]:
        """Get event by ID.

        Returns:
            Event entity or None if not found.
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        filters: EventFilters | None = None,
        sort: SortOptions | None = None,
        pagination: PaginationOptions | None = None,
    ) -> Page[Event]:
        """Query events.

        Args:
            filters: Optional filter; None returns every event.
            sort: Sort field (title, created_at, start_date, participants) and direction.
            pagination: Page to return; None returns everything as page 1.
        """
        pass

    @abstractmethod
    async def find_upcoming(self, limit: int | None = None) -> list[Event]:
        """Events starting in the future, soonest first."""
        pass

    @abstractmethod
    async def find_ongoing(self) -> list[Event]:
        pass

    @abstractmethod
    async def find_by_type(self, event_type: EventType) -> list[Event]:
        pass

    @abstractmethod
    async def find_in_city(self, city: str) -> list[Event]:
        pass

    @abstractmethod
    async def find_online(self) -> list[Event]:
        pass

    @abstractmethod
    async def find_with_available_spots(self) -> list[Event]:
        pass

    @abstractmethod
    async def save(self, event: Event) -> None:
        pass

    @abstractmethod
    async def delete(self, event_id: EventId) -> None:
        pass

    @abstractmethod
    async def exists(self, event_id: EventId) -> bool:
        pass

    @abstractmethod
    async def count_by_type(self, event_type: EventType) -> int:
        pass

    @abstractmethod
    async def count_upcoming(self) -> int:
        pass

    @abstractmethod
    async def get_popular_tags(self, limit: int = 10) -> list[str]:
        pass

    @abstractmethod
    async def get_popular_cities(self, limit: int = 10) -> list[str]:
        pass
