"""Calendar Bounded Context - Domain Layer (community events).

Exports:
    Entities: Event
    Value Objects: EventId, EventType, EventStatus, EventCapacity,
        DateRange, Location, Coordinates
    Services: EventService
    Repositories: EventRepository (interface)
"""

from .entities import Event
from .repositories import EventFilters, EventRepository
from .services import (
    EventCriteria,
    EventService,
    EventSortField,
    EventStats,
    EventTypeCount,
)
from .value_objects import (
    Coordinates,
    DateRange,
    EventCapacity,
    EventId,
    EventStatus,
    EventType,
    Location,
)

__all__ = [
    # Entities
    "Event",
    # Value Objects
    "EventId",
    "EventType",
    "EventStatus",
    "EventCapacity",
    "DateRange",
    "Location",
    "Coordinates",
    # Domain Services
    "EventService",
    "EventCriteria",
    "EventSortField",
    "EventStats",
    "EventTypeCount",
    # Repositories
    "EventRepository",
    "EventFilters",
]
