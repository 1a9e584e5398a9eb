"""Base DomainEvent class for event-driven architecture.

DomainEvent - something important that happened in the domain and that other
parts of the system may want to react to. Aggregates only record events;
dispatching them is the caller's job.
"""

from abc import ABC
from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar
from uuid import UUID, uuid4

from .clock import utc_now


@dataclass(frozen=True, kw_only=True)
class DomainEvent(ABC):
    """Base class for all domain events.

    DomainEvent represents a fact that happened in the domain.
    Events are named in past tense (ProjectCreated, ProjectStatusChanged).

    Characteristics:
    - **Immutable**: Events never change after creation
    - **Rich with data**: Payload fields describe what happened
    - **Timestamped**: occurred_on is set on creation (UTC)
    - **Unique**: Every event has its own event_id

    Subclasses set ``event_type``/``aggregate_type`` and declare payload
    fields; everything that is not a base field becomes ``event_data``.

    Example:
        >>> @dataclass(frozen=True, kw_only=True)
        ... class ProjectArchivedEvent(DomainEvent):
        ...     event_type: ClassVar[str] = "ProjectArchived"
        ...     aggregate_type: ClassVar[str] = "Project"
        ...     reason: str

        >>> event = ProjectArchivedEvent(aggregate_id="...", reason="done")
        >>> event.event_data  # {"reason": "done"}
    """

    event_type: ClassVar[str] = "DomainEvent"
    aggregate_type: ClassVar[str] = ""
    event_version: ClassVar[int] = 1

    aggregate_id: str

    event_id: UUID = field(default_factory=uuid4, init=False)
    """Unique event ID (auto-generated)."""

    occurred_on: datetime = field(default_factory=utc_now, init=False)
    """When the event happened (auto-generated, UTC)."""

    @property
    def event_name(self) -> str:
        """Get event class name (e.g., "ProjectCreatedEvent")."""
        return self.__class__.__name__

    @property
    def event_data(self) -> dict[str, Any]:
        """Payload fields of the concrete event, JSON-ready."""
        return {
            f.name: _to_primitive(getattr(self, f.name))
            for f in fields(self)
            if f.name not in _BASE_FIELDS
        }

    def to_dict(self) -> dict[str, Any]:
        """Serializable record of the event.

        Returns:
            Dict with event_id, event_type, aggregate_id, aggregate_type,
            event_version, occurred_on and event_data.
        """
        return {
            "event_id": str(self.event_id),
            "event_type": self.event_type,
            "aggregate_id": self.aggregate_id,
            "aggregate_type": self.aggregate_type,
            "event_version": self.event_version,
            "occurred_on": self.occurred_on.isoformat(),
            "event_data": self.event_data,
        }

    def __repr__(self) -> str:
        return f"{self.event_name}(event_id={self.event_id}, occurred_on={self.occurred_on})"


_BASE_FIELDS = frozenset({"aggregate_id", "event_id", "occurred_on"})


def _to_primitive(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, (list, tuple, frozenset, set)):
        return [_to_primitive(item) for item in value]
    return value
