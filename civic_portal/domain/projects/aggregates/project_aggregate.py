"""ProjectAggregate - transaction boundary around one Project."""

from typing import Iterable

from civic_portal.domain.shared import AggregateRoot, Url

from ..entities import Project
from ..events import (
    ProjectCreatedEvent,
    ProjectStatsUpdatedEvent,
    ProjectStatusChangedEvent,
    ProjectTagsChangedEvent,
)
from ..value_objects import ProjectCategory, ProjectId, ProjectStatus


class ProjectAggregate(AggregateRoot):
    """Aggregate root wrapping exactly one Project.

    Each operation compares the old and new state, replaces the wrapped
    project and records an event only when something actually changed.
    The aggregate is owned by the code path that created or loaded it until
    its events are dispatched and cleared.

    Example:
        >>> aggregate = ProjectAggregate.from_project(project)
        >>> aggregate.change_status(ProjectStatus.COMPLETED)
        >>> aggregate.change_status(ProjectStatus.COMPLETED)  # no second event
        >>> len(aggregate.get_domain_events())
        1
    """

    def __init__(self, project: Project) -> None:
        """Initialize aggregate.

        Args:
            project: Project to wrap.
        """
        super().__init__()
        self._project = project

    # ==================== Factory Methods ====================

    @classmethod
    def create(
        cls,
        *,
        title: str,
        description: str,
        category: ProjectCategory,
        status: ProjectStatus,
        github_url: Url | None = None,
        website_url: Url | None = None,
        tags: Iterable[str] = (),
        star_count: int = 0,
        fork_count: int = 0,
    ) -> "ProjectAggregate":
        """Create a new project and record ProjectCreatedEvent."""
        project = Project.create(
            title=title,
            description=description,
            category=category,
            status=status,
            github_url=github_url,
            website_url=website_url,
            tags=tags,
            star_count=star_count,
            fork_count=fork_count,
        )
        aggregate = cls(project)
        aggregate.add_domain_event(
            ProjectCreatedEvent(
                aggregate_id=project.id.value,
                title=project.title,
                description=project.description,
                category=project.category,
                status=project.status,
            )
        )
        return aggregate

    @classmethod
    def from_project(cls, project: Project) -> "ProjectAggregate":
        """Wrap a loaded project. No event is recorded."""
        return cls(project)

    # ==================== Properties ====================

    @property
    def id(self) -> ProjectId:
        return self._project.id

    @property
    def project(self) -> Project:
        return self._project

    # ==================== Operations ====================

    def change_status(self, new_status: ProjectStatus) -> None:
        """Move project to new_status.

        Args:
            new_status: Target status.

        Note:
            Same status is a no-op (no event).
        """
        previous_status = self._project.status
        if previous_status == new_status:
            return

        self._project = self._project.update_status(new_status)
        self.add_domain_event(
            ProjectStatusChangedEvent(
                aggregate_id=self.id.value,
                previous_status=previous_status,
                new_status=new_status,
                changed_at=self._project.updated_at,
            )
        )

    def update_github_stats(self, star_count: int, fork_count: int) -> None:
        """Replace repository metrics, recording before/after counts.

        Raises:
            ValidationError: If a count is negative.
        """
        previous_stars = self._project.star_count
        previous_forks = self._project.fork_count
        if previous_stars == star_count and previous_forks == fork_count:
            return

        self._project = self._project.update_github_stats(star_count, fork_count)
        self.add_domain_event(
            ProjectStatsUpdatedEvent(
                aggregate_id=self.id.value,
                previous_star_count=previous_stars,
                new_star_count=star_count,
                previous_fork_count=previous_forks,
                new_fork_count=fork_count,
            )
        )

    def manage_tags(
        self,
        tags_to_add: Iterable[str] = (),
        tags_to_remove: Iterable[str] = (),
    ) -> None:
        """Apply additions then removals; record one event if the tag set changed.

        Args:
            tags_to_add: Tags to append (duplicates ignored).
            tags_to_remove: Tags to drop (absent tags ignored).
        """
        previous_tags = self._project.tags

        updated = self._project
        for tag in tags_to_add:
            updated = updated.add_tag(tag)
        for tag in tags_to_remove:
            updated = updated.remove_tag(tag)

        before, after = set(previous_tags), set(updated.tags)
        if before == after:
            return

        self._project = updated
        self.add_domain_event(
            ProjectTagsChangedEvent(
                aggregate_id=self.id.value,
                previous_tags=previous_tags,
                new_tags=updated.tags,
                added_tags=tuple(t for t in updated.tags if t not in before),
                removed_tags=tuple(t for t in previous_tags if t not in after),
            )
        )
