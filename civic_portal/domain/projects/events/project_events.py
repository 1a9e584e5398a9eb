"""Project domain events.

Events that ProjectAggregate records. Each one is a past-tense fact about
a single project; the payload fields become ``event_data`` when serialized.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar

from civic_portal.domain.shared import DomainEvent

from ..value_objects import ProjectCategory, ProjectStatus


@dataclass(frozen=True, kw_only=True)
class ProjectEvent(DomainEvent):
    """Base for events raised by ProjectAggregate."""

    aggregate_type: ClassVar[str] = "Project"


@dataclass(frozen=True, kw_only=True)
class ProjectCreatedEvent(ProjectEvent):
    """Event: new project created.

    Triggered when:
        - ProjectAggregate.create() builds a new project
    """

    event_type: ClassVar[str] = "ProjectCreated"

    title: str
    description: str
    category: ProjectCategory
    status: ProjectStatus


@dataclass(frozen=True, kw_only=True)
class ProjectStatusChangedEvent(ProjectEvent):
    """Event: project moved to a different status.

    Triggered when:
        - change_status() is called with a status different from the current one
    """

    event_type: ClassVar[str] = "ProjectStatusChanged"

    previous_status: ProjectStatus
    new_status: ProjectStatus
    changed_at: datetime


@dataclass(frozen=True, kw_only=True)
class ProjectStatsUpdatedEvent(ProjectEvent):
    """Event: repository stars or forks changed."""

    event_type: ClassVar[str] = "ProjectStatsUpdated"

    previous_star_count: int
    new_star_count: int
    previous_fork_count: int
    new_fork_count: int


@dataclass(frozen=True, kw_only=True)
class ProjectTagsChangedEvent(ProjectEvent):
    """Event: the set of tags changed.

    added_tags/removed_tags hold only the tags that actually changed.
    """

    event_type: ClassVar[str] = "ProjectTagsChanged"

    previous_tags: tuple[str, ...]
    new_tags: tuple[str, ...]
    added_tags: tuple[str, ...]
    removed_tags: tuple[str, ...]
