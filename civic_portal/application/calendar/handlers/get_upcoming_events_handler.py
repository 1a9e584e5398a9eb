"""GetUpcomingEvents Handler."""

import logging

from civic_portal.application.calendar.dtos import EventDTO
from civic_portal.application.calendar.queries import GetUpcomingEventsQuery
from civic_portal.application.shared import QueryHandler
from civic_portal.config import get_settings
from civic_portal.domain.calendar import EventRepository

logger = logging.getLogger(__name__)


class GetUpcomingEventsHandler(QueryHandler[GetUpcomingEventsQuery, list[EventDTO]]):
    def __init__(self, event_repo: EventRepository) -> None:
        self._event_repo = event_repo

    async def handle(self, query: GetUpcomingEventsQuery) -> list[EventDTO]:
        limit = query.limit or get_settings().upcoming_events_limit
        events = await self._event_repo.find_upcoming(limit)

        logger.debug(
            "get_upcoming_events.completed",
            extra={"limit": limit, "count": len(events)},
        )
        return [EventDTO.from_entity(event) for event in events]
