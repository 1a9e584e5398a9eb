"""ProjectService - stateless queries over project collections.

Used by the projects listing page: filter, search, sort, featured selection
and aggregate statistics. Every method takes the collection explicitly and
returns a new list; inputs are never mutated.
"""

from dataclasses import dataclass, field
from typing import Sequence

from civic_portal.domain.shared import (
    DomainEnum,
    SortDirection,
    TagCount,
    collation_key,
    count_tags,
    is_ignored,
    normalize_query,
    sort_items,
)

from ..entities import Project
from ..value_objects import ProjectCategory, ProjectStatus


class ProjectSortField(DomainEnum):
    """Fields the projects listing can be sorted by."""

    TITLE = "title"
    STARS = "stars"
    FORKS = "forks"
    DATE = "date"
    UPDATED = "updated"


@dataclass(frozen=True)
class ProjectCriteria:
    """Project filter. None or "all" disables a criterion.

    Criteria are AND-combined; ``tags`` matches a project carrying any of
    the listed tags.
    """

    category: ProjectCategory | str | None = None
    status: ProjectStatus | str | None = None
    tags: tuple[str, ...] = ()


@dataclass(frozen=True)
class ProjectStats:
    """Aggregate numbers shown on the projects page."""

    total: int = 0
    active: int = 0
    completed: int = 0
    planning: int = 0
    archived: int = 0
    total_stars: int = 0
    total_forks: int = 0
    average_stars: float = 0.0
    category_distribution: dict[str, int] = field(default_factory=dict)
    status_distribution: dict[str, int] = field(default_factory=dict)


class ProjectService:
    """Filter/search/sort/statistics over projects.

    Example:
        >>> visible = ProjectService.filter_projects(
        ...     projects, ProjectCriteria(category="government", tags=("open-data",))
        ... )
        >>> visible = ProjectService.sort_projects(visible, ProjectSortField.STARS)
    """

    FEATURED_LIMIT = 6
    POPULAR_TAGS_LIMIT = 10

    @staticmethod
    def filter_projects(
        projects: Sequence[Project], criteria: ProjectCriteria
    ) -> list[Project]:
        """Keep projects that satisfy every active criterion."""

        def matches(project: Project) -> bool:
            if not is_ignored(criteria.category) and project.category != criteria.category:
                return False
            if not is_ignored(criteria.status) and project.status != criteria.status:
                return False
            if criteria.tags and not any(project.has_tag(t) for t in criteria.tags):
                return False
            return True

        return [project for project in projects if matches(project)]

    @staticmethod
    def search_projects(projects: Sequence[Project], query: str | None) -> list[Project]:
        """Substring search on title, description and tags.

        Empty or whitespace-only query returns every project, in order.
        """
        if not normalize_query(query):
            return list(projects)
        return [project for project in projects if project.matches_search(query)]

    @staticmethod
    def sort_projects(
        projects: Sequence[Project],
        sort_by: ProjectSortField | str = ProjectSortField.STARS,
        direction: SortDirection | str = SortDirection.DESC,
    ) -> list[Project]:
        """Stable sort by the given field (stars descending by default)."""
        sort_by = ProjectSortField(sort_by)
        keys = {
            ProjectSortField.TITLE: lambda p: collation_key(p.title),
            ProjectSortField.STARS: lambda p: p.star_count,
            ProjectSortField.FORKS: lambda p: p.fork_count,
            ProjectSortField.DATE: lambda p: p.created_at,
            ProjectSortField.UPDATED: lambda p: p.updated_at,
        }
        return sort_items(projects, keys[sort_by], SortDirection(direction))

    @classmethod
    def get_featured_projects(
        cls, projects: Sequence[Project], limit: int = FEATURED_LIMIT
    ) -> list[Project]:
        """Active projects ranked by popularity score (stars×2 + forks)."""
        active = [project for project in projects if project.is_active()]
        ranked = sort_items(active, lambda p: p.popularity_score, SortDirection.DESC)
        return ranked[:limit]

    @staticmethod
    def get_project_stats(projects: Sequence[Project]) -> ProjectStats:
        """Counts and sums in a single pass over the collection."""
        by_status: dict[str, int] = {}
        by_category: dict[str, int] = {}
        total_stars = 0
        total_forks = 0

        for project in projects:
            by_status[project.status.value] = by_status.get(project.status.value, 0) + 1
            by_category[project.category.value] = by_category.get(project.category.value, 0) + 1
            total_stars += project.star_count
            total_forks += project.fork_count

        total = len(projects)
        return ProjectStats(
            total=total,
            active=by_status.get(ProjectStatus.ACTIVE.value, 0),
            completed=by_status.get(ProjectStatus.COMPLETED.value, 0),
            planning=by_status.get(ProjectStatus.PLANNING.value, 0),
            archived=by_status.get(ProjectStatus.ARCHIVED.value, 0),
            total_stars=total_stars,
            total_forks=total_forks,
            average_stars=round(total_stars / total, 2) if total else 0.0,
            category_distribution=by_category,
            status_distribution=by_status,
        )

    @classmethod
    def get_popular_tags(
        cls, projects: Sequence[Project], limit: int = POPULAR_TAGS_LIMIT
    ) -> list[TagCount]:
        """Most used tags across projects."""
        return count_tags((project.tags for project in projects), limit)
