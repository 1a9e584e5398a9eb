"""Projects Bounded Context - Domain Layer.

Exports:
    Entities: Project
    Aggregates: ProjectAggregate
    Value Objects: ProjectId, ProjectCategory, ProjectStatus, GitHubMetrics
    Services: ProjectService, ProjectAnalytics
    Events: ProjectCreatedEvent, ProjectStatusChangedEvent,
        ProjectStatsUpdatedEvent, ProjectTagsChangedEvent
    Repositories: ProjectRepository (interface)
"""

# Entities
from .entities import Project

# Aggregates
from .aggregates import ProjectAggregate

# Value Objects
from .value_objects import GitHubMetrics, ProjectCategory, ProjectId, ProjectStatus

# Domain Services
from .services import (
    ImpactLevel,
    ProjectAnalytics,
    ProjectCriteria,
    ProjectService,
    ProjectSortField,
    ProjectStats,
)

# Events
from .events import (
    ProjectCreatedEvent,
    ProjectEvent,
    ProjectStatsUpdatedEvent,
    ProjectStatusChangedEvent,
    ProjectTagsChangedEvent,
)

# Repository interfaces
from .repositories import ProjectFilters, ProjectRepository

__all__ = [
    # Entities
    "Project",
    "ProjectAggregate",
    # Value Objects
    "ProjectId",
    "ProjectCategory",
    "ProjectStatus",
    "GitHubMetrics",
    # Domain Services
    "ProjectService",
    "ProjectCriteria",
    "ProjectSortField",
    "ProjectStats",
    "ProjectAnalytics",
    "ImpactLevel",
    # Events
    "ProjectEvent",
    "ProjectCreatedEvent",
    "ProjectStatusChangedEvent",
    "ProjectStatsUpdatedEvent",
    "ProjectTagsChangedEvent",
    # Repositories
    "ProjectRepository",
    "ProjectFilters",
]
