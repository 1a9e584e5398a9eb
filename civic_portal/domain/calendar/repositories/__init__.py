"""Event repository interfaces."""

from .event_repository import EventFilters, EventRepository

__all__ = ["EventRepository", "EventFilters"]
