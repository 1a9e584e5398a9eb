"""About value objects."""

from .core_value import CoreValue, OrganizationPrinciple
from .mission_statement import MissionStatement
from .organization_id import OrganizationId
from .team_member import TeamMember

__all__ = [
    "OrganizationId",
    "MissionStatement",
    "CoreValue",
    "OrganizationPrinciple",
    "TeamMember",
]
