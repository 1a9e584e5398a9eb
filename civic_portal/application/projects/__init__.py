"""Projects application layer."""

from .commands import UpdateProjectCommand, UpdateProjectError
from .dtos import ProjectDTO, ProjectListDTO, ProjectUpdateDTO
from .handlers import GetFeaturedProjectsHandler, ListProjectsHandler, UpdateProjectHandler
from .queries import GetFeaturedProjectsQuery, ListProjectsQuery

__all__ = [
    "GetFeaturedProjectsQuery",
    "ListProjectsQuery",
    "UpdateProjectCommand",
    "UpdateProjectError",
    "ProjectDTO",
    "ProjectListDTO",
    "ProjectUpdateDTO",
    "GetFeaturedProjectsHandler",
    "ListProjectsHandler",
    "UpdateProjectHandler",
]
