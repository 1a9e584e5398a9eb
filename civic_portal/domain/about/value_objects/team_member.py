"""Team Member - person listed in the team section."""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from civic_portal.domain.shared import ValueObject, ensure_text, strip_text_fields

MAX_NAME_LENGTH = 100
MAX_ROLE_LENGTH = 100
MAX_BIO_LENGTH = 1000


@dataclass(frozen=True)
class TeamMember(ValueObject):
    """Team member card.

    ``social_links`` maps a network name ("github") to a profile URL and is
    read-only.
    """

    id: str
    name: str
    role: str
    bio: str
    image_url: str | None = None
    social_links: Mapping[str, str] = field(default_factory=dict, hash=False)
    is_active: bool = True

    def __post_init__(self) -> None:
        strip_text_fields(self, "id", "name", "role", "bio", "image_url")
        object.__setattr__(self, "social_links", MappingProxyType(dict(self.social_links)))
        ensure_text(self.id, field="id", label="Team member ID")
        ensure_text(
            self.name, field="name", label="Team member name", max_length=MAX_NAME_LENGTH
        )
        ensure_text(
            self.role, field="role", label="Team member role", max_length=MAX_ROLE_LENGTH
        )
        ensure_text(self.bio, field="bio", label="Team member bio", max_length=MAX_BIO_LENGTH)
