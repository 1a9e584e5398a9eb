"""Calendar queries."""

from .get_upcoming_events import GetUpcomingEventsQuery

__all__ = ["GetUpcomingEventsQuery"]
