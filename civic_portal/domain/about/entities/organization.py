"""Organization Entity - the organization behind the site."""

from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Mapping

from civic_portal.domain.shared import (
    Entity,
    ErrorCode,
    ensure_text,
    resolve_now,
    strip_text_fields,
    utc_now,
    validate_value_object,
)

from ..value_objects import MissionStatement, OrganizationId

MIN_FOUNDED_YEAR = 1900


@dataclass(frozen=True, kw_only=True)
class Organization(Entity):
    """Organization profile.

    ``contact_info`` maps a channel ("email", "github", "slack") to a value and
    is read-only.
    """

    id: OrganizationId
    name: str
    tagline: str
    founded_year: int
    description: str
    mission: MissionStatement
    vision: MissionStatement
    contact_info: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        strip_text_fields(self, "name", "tagline", "description")
        object.__setattr__(self, "contact_info", MappingProxyType(dict(self.contact_info)))
        ensure_text(self.name, field="name", label="Organization name")
        ensure_text(self.tagline, field="tagline", label="Organization tagline")
        ensure_text(self.description, field="description", label="Organization description")
        validate_value_object(
            MIN_FOUNDED_YEAR <= self.founded_year <= utc_now().year,
            "Founded year must be valid",
            field="founded_year",
            code=ErrorCode.INVALID_RANGE,
        )

    @classmethod
    def create(
        cls,
        *,
        id: str,
        name: str,
        tagline: str,
        founded_year: int,
        description: str,
        mission: MissionStatement,
        vision: MissionStatement,
        contact_info: Mapping[str, str] | None = None,
    ) -> "Organization":
        now = utc_now()
        return cls(
            id=OrganizationId(id),
            name=name,
            tagline=tagline,
            founded_year=founded_year,
            description=description,
            mission=mission,
            vision=vision,
            contact_info=contact_info or {},
            created_at=now,
            updated_at=now,
        )

    def age(self, now: datetime | None = None) -> int:
        """Years since the founding year."""
        return resolve_now(now).year - self.founded_year
