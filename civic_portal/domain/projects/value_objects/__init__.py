"""Project value objects."""

from .github_metrics import GitHubMetrics
from .project_category import ProjectCategory
from .project_id import ProjectId
from .project_status import ProjectStatus

__all__ = [
    "ProjectId",
    "ProjectCategory",
    "ProjectStatus",
    "GitHubMetrics",
]
