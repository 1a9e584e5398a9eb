"""Project Entity - a civic technology project showcased on the site."""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable

from civic_portal.domain.shared import (
    Entity,
    UNSET,
    Unset,
    Url,
    ensure_text,
    normalize_query,
    text_matches,
    utc_now,
)

from ..value_objects import GitHubMetrics, ProjectCategory, ProjectId, ProjectStatus

MAX_TITLE_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 1000


@dataclass(frozen=True, kw_only=True)
class Project(Entity):
    """Project entity.

    Immutable: every update returns a new Project with a later updated_at.
    The status transition table is not enforced here (see
    ProjectStatus.can_transition_to).

    Example:
        >>> project = Project.create(
        ...     title="Open Budget",
        ...     description="Explore the city budget",
        ...     category=ProjectCategory.GOVERNMENT,
        ...     status=ProjectStatus.ACTIVE,
        ... )
        >>> project = project.add_tag("transparency")
        >>> project.has_tag("Transparency")  # True
    """

    id: ProjectId
    title: str
    description: str
    category: ProjectCategory
    status: ProjectStatus
    github_url: Url | None = None
    website_url: Url | None = None
    tags: tuple[str, ...] = ()
    metrics: GitHubMetrics = GitHubMetrics()

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "tags", tuple(self.tags))
        ensure_text(
            self.title, field="title", label="Project title", max_length=MAX_TITLE_LENGTH
        )
        ensure_text(
            self.description,
            field="description",
            label="Project description",
            max_length=MAX_DESCRIPTION_LENGTH,
        )

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
    ) -> "Project":
        """Create new project with a generated id.

        Raises:
            ValidationError: If any field is invalid.
        """
        now = utc_now()
        return cls(
            id=ProjectId.generate(),
            title=title,
            description=description,
            category=category,
            status=status,
            github_url=github_url,
            website_url=website_url,
            tags=tuple(tags),
            metrics=GitHubMetrics(stars=star_count, forks=fork_count),
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def from_persistence(
        cls,
        *,
        id: ProjectId,
        title: str,
        description: str,
        category: ProjectCategory,
        status: ProjectStatus,
        tags: Iterable[str],
        star_count: int,
        fork_count: int,
        created_at: datetime,
        updated_at: datetime,
        github_url: Url | None = None,
        website_url: Url | None = None,
    ) -> "Project":
        """Rehydrate a stored project. All invariants are checked again."""
        return cls(
            id=id,
            title=title,
            description=description,
            category=category,
            status=status,
            github_url=github_url,
            website_url=website_url,
            tags=tuple(tags),
            metrics=GitHubMetrics(stars=star_count, forks=fork_count),
            created_at=created_at,
            updated_at=updated_at,
        )

    # ==================== Properties ====================

    @property
    def star_count(self) -> int:
        return self.metrics.stars

    @property
    def fork_count(self) -> int:
        return self.metrics.forks

    @property
    def popularity_score(self) -> int:
        return self.metrics.popularity_score

    # ==================== Queries ====================

    def is_active(self) -> bool:
        return self.status.is_active()

    def is_completed(self) -> bool:
        return self.status.is_completed()

    def has_tag(self, tag: str) -> bool:
        """Case-insensitive tag membership."""
        wanted = tag.lower()
        return any(t.lower() == wanted for t in self.tags)

    def matches_search(self, query: str) -> bool:
        """Case-insensitive substring match on title, description and tags."""
        needle = normalize_query(query)
        if not needle:
            return True
        return text_matches(needle, self.title, self.description, *self.tags)

    # ==================== Updates ====================

    def update_status(self, status: ProjectStatus) -> "Project":
        return self._evolve(status=status)

    def update_github_stats(self, star_count: int, fork_count: int) -> "Project":
        """Replace repository metrics.

        Raises:
            ValidationError: If a count is negative.
        """
        return self._evolve(metrics=GitHubMetrics(stars=star_count, forks=fork_count))

    def update_details(
        self,
        *,
        title: str | None = None,
        description: str | None = None,
        category: ProjectCategory | None = None,
        github_url: Url | None | Unset = UNSET,
        website_url: Url | None | Unset = UNSET,
    ) -> "Project":
        """Change descriptive fields; omitted arguments keep their value.

        Passing None for a URL clears it.
        """
        return self._evolve(
            title=self.title if title is None else title,
            description=self.description if description is None else description,
            category=self.category if category is None else category,
            github_url=self.github_url if github_url is UNSET else github_url,
            website_url=self.website_url if website_url is UNSET else website_url,
        )

    def add_tag(self, tag: str) -> "Project":
        """Append tag. Returns self unchanged if the tag is already present."""
        if tag in self.tags:
            return self
        return self._evolve(tags=self.tags + (tag,))

    def remove_tag(self, tag: str) -> "Project":
        """Drop tag. Returns self unchanged if the tag is absent."""
        if tag not in self.tags:
            return self
        return self._evolve(tags=tuple(t for t in self.tags if t != tag))
