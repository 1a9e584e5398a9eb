"""ProjectId - identifier of a project."""

from dataclasses import dataclass

from civic_portal.domain.shared import Identifier


@dataclass(frozen=True)
class ProjectId(Identifier):
    """UUID v4 identifier of a Project."""
