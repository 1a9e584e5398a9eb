"""GetFeaturedProjects Handler."""

import logging

from civic_portal.application.projects.dtos import ProjectDTO
from civic_portal.application.projects.queries import GetFeaturedProjectsQuery
from civic_portal.application.shared import QueryHandler
from civic_portal.config import get_settings
from civic_portal.domain.projects import ProjectRepository

logger = logging.getLogger(__name__)


class GetFeaturedProjectsHandler(QueryHandler[GetFeaturedProjectsQuery, list[ProjectDTO]]):
    """Load featured projects from the repository and map them to DTOs."""

    def __init__(self, project_repo: ProjectRepository) -> None:
        self._project_repo = project_repo

    async def handle(self, query: GetFeaturedProjectsQuery) -> list[ProjectDTO]:
        limit = query.limit or get_settings().featured_projects_limit
        projects = await self._project_repo.find_featured(limit)

        logger.debug(
            "get_featured_projects.completed",
            extra={"limit": limit, "count": len(projects)},
        )
        return [ProjectDTO.from_entity(project) for project in projects]
