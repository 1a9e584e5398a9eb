"""Event value objects."""

from .date_range import DateRange
from .event_capacity import EventCapacity
from .event_id import EventId
from .event_status import EventStatus
from .event_type import EventType
from .location import Coordinates, Location

__all__ = [
    "EventId",
    "EventType",
    "EventStatus",
    "EventCapacity",
    "DateRange",
    "Location",
    "Coordinates",
]
