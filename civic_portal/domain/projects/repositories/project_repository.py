"""ProjectRepository Port - interface for project persistence.

This is a PORT in Hexagonal Architecture (the domain defines the interface).
Storage adapters implement it outside this package.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from civic_portal.domain.shared import Page, PaginationOptions, SortOptions

from ..entities import Project
from ..value_objects import ProjectCategory, ProjectId, ProjectStatus


@dataclass(frozen=True)
class ProjectFilters:
    """Repository-side project filter. None means "any"."""

    category: ProjectCategory | None = None
    status: ProjectStatus | None = None
    tags: tuple[str, ...] = ()
    search_query: str | None = None


class ProjectRepository(ABC):
    """Abstract interface for project persistence.

    Example (Domain uses):
        >>> project = await project_repo.find_by_id(project_id)
        >>> aggregate = ProjectAggregate.from_project(project)
        >>> aggregate.change_status(ProjectStatus.COMPLETED)
        >>> await project_repo.save(aggregate.project)
    """

    @abstractmethod
    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        """Get project by ID.

        Args:
            project_id: Project ID.

        Returns:
            Project entity or None if not found.
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        filters: ProjectFilters | None = None,
        sort: SortOptions | None = None,
        pagination: PaginationOptions | None = None,
    ) -> Page[Project]:
        """Query projects.

        Args:
            filters: Optional filter; None returns every project.
            sort: Sort field (title, created_at, updated_at, star_count) and direction.
            pagination: Page to return; None returns everything as page 1.

        Returns:
            Page with items, total, page and total_pages.
        """
        pass

    @abstractmethod
    async def find_featured(self, limit: int = 6) -> list[Project]:
        """Get featured (most popular active) projects."""
        pass

    @abstractmethod
    async def find_by_category(self, category: ProjectCategory) -> list[Project]:
        pass

    @abstractmethod
    async def find_active(self) -> list[Project]:
        pass

    @abstractmethod
    async def save(self, project: Project) -> None:
        """Insert or update project.

        Args:
            project: Project entity to save.
        """
        pass

    @abstractmethod
    async def delete(self, project_id: ProjectId) -> None:
        pass

    @abstractmethod
    async def exists(self, project_id: ProjectId) -> bool:
        pass

    @abstractmethod
    async def count_by_status(self, status: ProjectStatus) -> int:
        pass

    @abstractmethod
    async def get_popular_tags(self, limit: int = 10) -> list[str]:
        """Most used tags, most common first."""
        pass
