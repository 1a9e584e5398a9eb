"""GetFeaturedProjects Query - projects for the landing page."""

from dataclasses import dataclass

from civic_portal.application.shared import Query


@dataclass(frozen=True)
class GetFeaturedProjectsQuery(Query):
    """Featured projects. None uses the configured limit."""

    limit: int | None = None
