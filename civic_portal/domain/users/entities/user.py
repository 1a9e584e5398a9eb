"""User Entity."""

from dataclasses import dataclass
from datetime import datetime

from civic_portal.domain.shared import Entity, ensure_text, utc_now

from ..value_objects import Email, UserId

MAX_NAME_LENGTH = 100


@dataclass(frozen=True, kw_only=True)
class User(Entity):
    """Registered user.

    The name is stored trimmed. Renaming always yields an ``updated_at``
    strictly later than the previous one, even within the same millisecond.
    """

    id: UserId
    email: Email
    name: str

    def __post_init__(self) -> None:
        super().__post_init__()
        if isinstance(self.name, str):
            object.__setattr__(self, "name", self.name.strip())
        ensure_text(self.name, field="name", label="User name", max_length=MAX_NAME_LENGTH)

    @classmethod
    def create(cls, *, email: Email, name: str) -> "User":
        now = utc_now()
        return cls(id=UserId.generate(), email=email, name=name, created_at=now, updated_at=now)

    @classmethod
    def from_persistence(
        cls,
        *,
        id: UserId,
        email: Email,
        name: str,
        created_at: datetime,
        updated_at: datetime,
    ) -> "User":
        return cls(id=id, email=email, name=name, created_at=created_at, updated_at=updated_at)

    def update_name(self, name: str) -> "User":
        """Rename the user.

        Raises:
            ValidationError: EMPTY_FIELD for a blank name, FIELD_TOO_LONG past 100 chars.
        """
        return self._evolve(name=name)
