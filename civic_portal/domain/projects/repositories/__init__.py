"""Project repository interfaces."""

from .project_repository import ProjectFilters, ProjectRepository

__all__ = ["ProjectRepository", "ProjectFilters"]
