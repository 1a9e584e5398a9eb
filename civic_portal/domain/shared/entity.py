"""Base Entity class for domain model.

Entities here are immutable: every change produces a new instance with a
later ``updated_at``. Constructing (or replacing) an entity always re-runs
its validation, so an invalid state cannot be rehydrated from persistence.
"""

from abc import ABC
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, TypeVar

from .clock import ensure_aware, utc_now

TEntity = TypeVar("TEntity", bound="Entity")


class Unset(Enum):
    """Default for update arguments where None clears the field."""

    UNSET = "UNSET"


UNSET = Unset.UNSET


@dataclass(frozen=True, kw_only=True)
class Entity(ABC):
    """Base class for all domain entities.

    Subclasses declare their own ``id`` value object and payload fields.
    Equality is structural: two instances with the same id but different
    payloads are different states of the same entity; compare ``id`` to
    test identity.

    Example:
        >>> project = Project.create(title="Open Budget", ...)
        >>> renamed = project.update_details(title="Open Budget 2")
        >>> renamed.id == project.id  # True (same identity)
        >>> renamed == project  # False (different state)
    """

    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        """Normalize timestamps to aware UTC."""
        object.__setattr__(self, "created_at", ensure_aware(self.created_at))
        object.__setattr__(self, "updated_at", ensure_aware(self.updated_at))

    def _next_updated_at(self) -> datetime:
        """Timestamp for the next version, strictly later than the current one."""
        now = utc_now()
        if now <= self.updated_at:
            return self.updated_at + timedelta(milliseconds=1)
        return now

    def _evolve(self: TEntity, **changes: Any) -> TEntity:
        """Return a validated copy with ``changes`` applied and updated_at bumped."""
        return replace(self, updated_at=self._next_updated_at(), **changes)
