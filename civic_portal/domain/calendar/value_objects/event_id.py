"""EventId - identifier of an event."""

from dataclasses import dataclass

from civic_portal.domain.shared import Identifier


@dataclass(frozen=True)
class EventId(Identifier):
    """UUID v4 identifier of an Event."""
