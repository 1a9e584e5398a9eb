"""Event domain services."""

from .event_service import (
    EventCriteria,
    EventService,
    EventSortField,
    EventStats,
    EventTypeCount,
)

__all__ = [
    "EventService",
    "EventCriteria",
    "EventSortField",
    "EventStats",
    "EventTypeCount",
]
