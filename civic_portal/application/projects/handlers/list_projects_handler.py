"""ListProjects Handler - the projects listing page."""

import logging

from civic_portal.application.projects.dtos import ProjectDTO, ProjectListDTO
from civic_portal.application.projects.queries import ListProjectsQuery
from civic_portal.application.shared import QueryHandler
from civic_portal.config import get_settings
from civic_portal.domain.projects import (
    ProjectCriteria,
    ProjectRepository,
    ProjectService,
    ProjectSortField,
)
from civic_portal.domain.shared import Page, PaginationOptions, SortDirection

logger = logging.getLogger(__name__)


class ListProjectsHandler(QueryHandler[ListProjectsQuery, ProjectListDTO]):
    """Filter, search, sort and paginate projects.

    Loads every project with ``find_all`` and runs the pipeline through
    ProjectService: filter -> search -> sort -> paginate.

    Raises:
        ValidationError: Unknown category, status, sort field or direction.
    """

    def __init__(self, project_repo: ProjectRepository) -> None:
        self._project_repo = project_repo

    async def handle(self, query: ListProjectsQuery) -> ProjectListDTO:
        settings = get_settings()
        limit = min(query.limit or settings.default_page_size, settings.max_page_size)
        pagination = PaginationOptions(page=query.page, limit=limit)

        loaded = await self._project_repo.find_all()
        projects = ProjectService.filter_projects(
            loaded.items,
            ProjectCriteria(category=query.category, status=query.status, tags=query.tags),
        )
        projects = ProjectService.search_projects(projects, query.search)
        projects = ProjectService.sort_projects(
            projects, ProjectSortField(query.sort_field), SortDirection(query.direction)
        )
        page = Page.paginate(projects, pagination)

        logger.debug(
            "list_projects.completed",
            extra={
                "total": page.total,
                "page": page.page,
                "limit": limit,
                "search": query.search,
            },
        )
        return ProjectListDTO(
            items=[ProjectDTO.from_entity(project) for project in page.items],
            total=page.total,
            page=page.page,
            total_pages=page.total_pages,
        )
