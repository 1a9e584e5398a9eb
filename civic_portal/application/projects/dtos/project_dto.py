"""Project DTOs for the presentation layer."""

from dataclasses import asdict, dataclass, field
from typing import Any

from civic_portal.domain.projects import Project


@dataclass(frozen=True)
class ProjectDTO:
    """Flat, JSON-ready projection of a Project. Dates are ISO-8601 strings."""

    id: str
    title: str
    description: str
    category: str
    status: str
    github_url: str | None
    website_url: str | None
    tags: list[str]
    star_count: int
    fork_count: int
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, project: Project) -> "ProjectDTO":
        return cls(
            id=project.id.value,
            title=project.title,
            description=project.description,
            category=project.category.value,
            status=project.status.value,
            github_url=project.github_url.value if project.github_url else None,
            website_url=project.website_url.value if project.website_url else None,
            tags=list(project.tags),
            star_count=project.star_count,
            fork_count=project.fork_count,
            created_at=project.created_at.isoformat(),
            updated_at=project.updated_at.isoformat(),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ProjectListDTO:
    """One page of the projects listing."""

    items: list[ProjectDTO]
    total: int
    page: int
    total_pages: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ProjectUpdateDTO:
    """Updated project plus the serialized events the update raised."""

    project: ProjectDTO
    events: list[dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
