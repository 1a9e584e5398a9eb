"""ListProjects Query - filtered, searched, sorted page of projects."""

from dataclasses import dataclass

from civic_portal.application.shared import Query


@dataclass(frozen=True)
class ListProjectsQuery(Query):
    """Projects listing page.

    ``category``/``status`` accept a raw value or "all". ``limit`` None uses
    the configured page size; larger values are capped at max_page_size.

    Example:
        >>> query = ListProjectsQuery(category="government", search="budget", page=2)
        >>> page = await handler.handle(query)
    """

    category: str | None = None
    status: str | None = None
    tags: tuple[str, ...] = ()
    search: str | None = None
    sort_field: str = "stars"
    direction: str = "desc"
    page: int = 1
    limit: int | None = None
