"""Project use case handlers."""

from .get_featured_projects_handler import GetFeaturedProjectsHandler
from .list_projects_handler import ListProjectsHandler
from .update_project_handler import UpdateProjectHandler

__all__ = [
    "GetFeaturedProjectsHandler",
    "ListProjectsHandler",
    "UpdateProjectHandler",
]
