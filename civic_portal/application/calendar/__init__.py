"""Calendar application layer."""

from .dtos import EventDTO, LocationDTO
from .handlers import GetUpcomingEventsHandler
from .queries import GetUpcomingEventsQuery

__all__ = [
    "GetUpcomingEventsQuery",
    "EventDTO",
    "LocationDTO",
    "GetUpcomingEventsHandler",
]
