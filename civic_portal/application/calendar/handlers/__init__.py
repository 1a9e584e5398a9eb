"""Calendar use case handlers."""

from .get_upcoming_events_handler import GetUpcomingEventsHandler

__all__ = ["GetUpcomingEventsHandler"]
