"""User DTO for the presentation layer."""

from dataclasses import asdict, dataclass
from typing import Any

from civic_portal.domain.users import User


@dataclass(frozen=True)
class UserDTO:
    id: str
    email: str
    name: str
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        return cls(
            id=user.id.value,
            email=user.email.value,
            name=user.name,
            created_at=user.created_at.isoformat(),
            updated_at=user.updated_at.isoformat(),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
