"""GetUpcomingEvents Query."""

from dataclasses import dataclass

from civic_portal.application.shared import Query


@dataclass(frozen=True)
class GetUpcomingEventsQuery(Query):
    """Upcoming events, soonest first. None uses the configured limit."""

    limit: int | None = None
