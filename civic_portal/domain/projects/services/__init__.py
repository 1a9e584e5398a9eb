"""Project domain services."""

from .project_analytics import ImpactLevel, ProjectAnalytics
from .project_service import ProjectCriteria, ProjectService, ProjectSortField, ProjectStats

__all__ = [
    "ProjectService",
    "ProjectCriteria",
    "ProjectSortField",
    "ProjectStats",
    "ProjectAnalytics",
    "ImpactLevel",
]
