"""Data Transfer Objects for the calendar use cases."""

from .event_dto import EventDTO, LocationDTO

__all__ = ["EventDTO", "LocationDTO"]
