"""About Bounded Context - Domain Layer (organization profile).

Exports:
    Entities: Organization
    Value Objects: OrganizationId, MissionStatement, CoreValue,
        OrganizationPrinciple, TeamMember
    Services: AboutService
"""

from .entities import Organization
from .services import AboutService, CompletenessReport, OrganizationStats
from .value_objects import (
    CoreValue,
    MissionStatement,
    OrganizationId,
    OrganizationPrinciple,
    TeamMember,
)

__all__ = [
    # Entities
    "Organization",
    # Value Objects
    "OrganizationId",
    "MissionStatement",
    "CoreValue",
    "OrganizationPrinciple",
    "TeamMember",
    # Domain Services
    "AboutService",
    "OrganizationStats",
    "CompletenessReport",
]
