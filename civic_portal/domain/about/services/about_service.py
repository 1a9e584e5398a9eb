"""AboutService - ordering and summaries for the about page."""

from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

from civic_portal.domain.shared import (
    SortDirection,
    collation_key,
    normalize_query,
    sort_items,
    text_matches,
)

from ..entities import Organization
from ..value_objects import CoreValue, OrganizationPrinciple, TeamMember


@dataclass(frozen=True)
class OrganizationStats:
    founded_year: int
    age: int
    principles_count: int
    values_count: int
    active_members: int
    total_members: int


@dataclass(frozen=True)
class CompletenessReport:
    is_complete: bool
    missing_fields: tuple[str, ...] = ()


class AboutService:
    """Stateless helpers over organization content."""

    @staticmethod
    def get_core_values(values: Sequence[CoreValue]) -> list[CoreValue]:
        """Values in title order."""
        return sorted(values, key=lambda v: collation_key(v.title))

    @staticmethod
    def get_principles(
        principles: Sequence[OrganizationPrinciple],
    ) -> list[OrganizationPrinciple]:
        """Highest priority first; equal priorities in title order."""
        return sort_items(
            principles,
            lambda p: p.priority,
            SortDirection.DESC,
            tiebreak=lambda p: collation_key(p.title),
        )

    @staticmethod
    def get_active_team_members(members: Sequence[TeamMember]) -> list[TeamMember]:
        active = [member for member in members if member.is_active]
        return sorted(active, key=lambda m: collation_key(m.name))

    @classmethod
    def search_team_members(
        cls, members: Sequence[TeamMember], query: str | None
    ) -> list[TeamMember]:
        """Active members whose name, role or bio contains ``query``.

        An empty query returns all active members in name order.
        """
        needle = normalize_query(query)
        if not needle:
            return cls.get_active_team_members(members)
        return [
            member for member in members
            if member.is_active and text_matches(needle, member.name, member.role, member.bio)
        ]

    @classmethod
    def get_organization_stats(
        cls,
        organization: Organization,
        principles: Sequence[OrganizationPrinciple],
        values: Sequence[CoreValue],
        members: Sequence[TeamMember],
        now: datetime | None = None,
    ) -> OrganizationStats:
        return OrganizationStats(
            founded_year=organization.founded_year,
            age=organization.age(now),
            principles_count=len(principles),
            values_count=len(values),
            active_members=len(cls.get_active_team_members(members)),
            total_members=len(members),
        )

    @staticmethod
    def validate_organization_completeness(organization: Organization) -> CompletenessReport:
        """List the text fields that are blank, as dotted paths."""
        fields = {
            "name": organization.name,
            "tagline": organization.tagline,
            "description": organization.description,
            "mission.title": organization.mission.title,
            "mission.description": organization.mission.description,
            "vision.title": organization.vision.title,
            "vision.description": organization.vision.description,
        }
        missing = tuple(name for name, value in fields.items() if not value.strip())
        return CompletenessReport(is_complete=not missing, missing_fields=missing)
