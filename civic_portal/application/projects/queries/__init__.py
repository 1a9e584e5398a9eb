"""Project queries."""

from .get_featured_projects import GetFeaturedProjectsQuery
from .list_projects import ListProjectsQuery

__all__ = ["GetFeaturedProjectsQuery", "ListProjectsQuery"]
