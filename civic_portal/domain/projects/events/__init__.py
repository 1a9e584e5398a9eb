"""Project domain events."""

from .project_events import (
    ProjectCreatedEvent,
    ProjectEvent,
    ProjectStatsUpdatedEvent,
    ProjectStatusChangedEvent,
    ProjectTagsChangedEvent,
)

__all__ = [
    "ProjectEvent",
    "ProjectCreatedEvent",
    "ProjectStatusChangedEvent",
    "ProjectStatsUpdatedEvent",
    "ProjectTagsChangedEvent",
]
