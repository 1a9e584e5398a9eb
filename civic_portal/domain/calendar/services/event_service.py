"""EventService - stateless queries over event collections."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Sequence

from civic_portal.domain.shared import (
    DomainEnum,
    SortDirection,
    TagCount,
    collation_key,
    count_tags,
    ensure_aware,
    is_ignored,
    normalize_query,
    sort_items,
)

from ..entities import Event
from ..value_objects import EventStatus, EventType


class EventSortField(DomainEnum):
    """Fields the events listing can be sorted by."""

    TITLE = "title"
    START_DATE = "start_date"
    REGISTRATIONS = "registrations"
    CAPACITY = "capacity"


@dataclass(frozen=True)
class EventCriteria:
    """Event filter. None (or "all" for type/status) disables a criterion.

    Time-based flags (is_upcoming) look at the event's dates relative to
    ``now``; ``status`` looks at the stored editorial status.
    """

    type: EventType | str | None = None
    status: EventStatus | str | None = None
    is_featured: bool | None = None
    is_upcoming: bool | None = None
    is_ongoing: bool | None = None
    is_past: bool | None = None
    is_online: bool | None = None
    city: str | None = None
    country: str | None = None
    tags: tuple[str, ...] = ()
    has_available_spots: bool | None = None
    search_query: str | None = None
    start_after: datetime | None = None
    start_before: datetime | None = None


@dataclass(frozen=True)
class EventTypeCount:
    type: EventType
    count: int


@dataclass(frozen=True)
class EventStats:
    """Aggregate numbers shown on the events page."""

    total: int = 0
    upcoming: int = 0
    ongoing: int = 0
    past: int = 0
    cancelled: int = 0
    featured: int = 0
    with_available_spots: int = 0
    total_capacity: int = 0
    total_registered: int = 0
    average_occupancy: float = 0.0
    type_distribution: dict[str, int] = field(default_factory=dict)


class EventService:
    """Filter/search/sort/statistics over events.

    Example:
        >>> open_events = EventService.filter_events(
        ...     events, EventCriteria(has_available_spots=True)
        ... )
    """

    FEATURED_LIMIT = 3
    POPULAR_TAGS_LIMIT = 10

    @staticmethod
    def filter_events(
        events: Sequence[Event],
        criteria: EventCriteria,
        now: datetime | None = None,
    ) -> list[Event]:
        """Keep events that satisfy every active criterion."""
        query = normalize_query(criteria.search_query)
        city = criteria.city.strip().lower() if criteria.city else None
        country = criteria.country.strip().lower() if criteria.country else None
        start_after = ensure_aware(criteria.start_after) if criteria.start_after else None
        start_before = ensure_aware(criteria.start_before) if criteria.start_before else None

        def matches(event: Event) -> bool:
            if not is_ignored(criteria.type) and event.type != criteria.type:
                return False
            if not is_ignored(criteria.status) and event.status != criteria.status:
                return False
            if criteria.is_featured is not None and event.is_featured != criteria.is_featured:
                return False
            if criteria.is_upcoming is not None and event.is_upcoming(now) != criteria.is_upcoming:
                return False
            if criteria.is_ongoing is not None and event.is_ongoing(now) != criteria.is_ongoing:
                return False
            if criteria.is_past is not None and event.is_past(now) != criteria.is_past:
                return False
            if criteria.is_online is not None and event.location.is_online != criteria.is_online:
                return False
            if city and event.location.city.lower() != city:
                return False
            if country and event.location.country.lower() != country:
                return False
            if criteria.tags and not any(event.has_tag(t) for t in criteria.tags):
                return False
            if criteria.has_available_spots and event.is_full():
                return False
            if query and not event.matches_search(query):
                return False
            if start_after and event.start < start_after:
                return False
            if start_before and event.start > start_before:
                return False
            return True

        return [event for event in events if matches(event)]

    @staticmethod
    def search_events(events: Sequence[Event], query: str | None) -> list[Event]:
        """Substring search on title, description, tags and venue name."""
        if not normalize_query(query):
            return list(events)
        return [event for event in events if event.matches_search(query)]

    @staticmethod
    def sort_events(
        events: Sequence[Event],
        sort_by: EventSortField | str = EventSortField.START_DATE,
        direction: SortDirection | str = SortDirection.ASC,
    ) -> list[Event]:
        """Stable sort (start date ascending by default).

        Numeric fields fall back to title order on ties. Uncapped events
        sort as capacity 0.
        """
        sort_by = EventSortField(sort_by)
        title_key = lambda e: collation_key(e.title)  # noqa: E731
        keys = {
            EventSortField.TITLE: title_key,
            EventSortField.START_DATE: lambda e: e.start,
            EventSortField.REGISTRATIONS: lambda e: e.current_participants,
            EventSortField.CAPACITY: lambda e: e.max_participants or 0,
        }
        tiebreak = None if sort_by is EventSortField.TITLE else title_key
        return sort_items(events, keys[sort_by], SortDirection(direction), tiebreak)

    @classmethod
    def get_featured_events(
        cls, events: Sequence[Event], limit: int = FEATURED_LIMIT
    ) -> list[Event]:
        """Featured, not cancelled, most registrations first."""
        featured = [
            event for event in events
            if event.is_featured and not event.status.is_cancelled()
        ]
        ranked = sort_items(
            featured, lambda e: e.current_participants, SortDirection.DESC
        )
        return ranked[:limit]

    @classmethod
    def get_upcoming_events(
        cls, events: Sequence[Event], limit: int | None = None
    ) -> list[Event]:
        """Events with status upcoming, soonest first."""
        upcoming = cls.filter_events(events, EventCriteria(status=EventStatus.UPCOMING))
        ordered = cls.sort_events(upcoming, EventSortField.START_DATE, SortDirection.ASC)
        return ordered[:limit] if limit else ordered

    @classmethod
    def get_past_events(
        cls, events: Sequence[Event], limit: int | None = None
    ) -> list[Event]:
        """Events with status past, most recent first."""
        past = cls.filter_events(events, EventCriteria(status=EventStatus.PAST))
        ordered = cls.sort_events(past, EventSortField.START_DATE, SortDirection.DESC)
        return ordered[:limit] if limit else ordered

    @classmethod
    def get_events_by_type(
        cls, events: Sequence[Event], event_type: EventType | str
    ) -> list[Event]:
        return cls.filter_events(events, EventCriteria(type=event_type))

    @staticmethod
    def get_popular_event_types(events: Sequence[Event]) -> list[EventTypeCount]:
        """Event types by number of events, most common first."""
        counts: dict[EventType, int] = {}
        for event in events:
            counts[event.type] = counts.get(event.type, 0) + 1
        ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
        return [EventTypeCount(type=event_type, count=count) for event_type, count in ranked]

    @classmethod
    def get_popular_tags(
        cls, events: Sequence[Event], limit: int = POPULAR_TAGS_LIMIT
    ) -> list[TagCount]:
        return count_tags((event.tags for event in events), limit)

    @staticmethod
    def get_event_stats(events: Sequence[Event]) -> EventStats:
        """Counts by stored status plus capacity sums, in one pass.

        Only capped events contribute to capacity and occupancy.
        """
        by_status: dict[EventStatus, int] = {}
        by_type: dict[str, int] = {}
        featured = 0
        with_spots = 0
        total_capacity = 0
        total_registered = 0

        for event in events:
            by_status[event.status] = by_status.get(event.status, 0) + 1
            by_type[event.type.value] = by_type.get(event.type.value, 0) + 1
            if event.is_featured:
                featured += 1
            if not event.is_full():
                with_spots += 1
            if event.max_participants is not None:
                total_capacity += event.max_participants
                total_registered += event.current_participants

        return EventStats(
            total=len(events),
            upcoming=by_status.get(EventStatus.UPCOMING, 0),
            ongoing=by_status.get(EventStatus.ONGOING, 0),
            past=by_status.get(EventStatus.PAST, 0),
            cancelled=by_status.get(EventStatus.CANCELLED, 0),
            featured=featured,
            with_available_spots=with_spots,
            total_capacity=total_capacity,
            total_registered=total_registered,
            average_occupancy=total_registered / total_capacity if total_capacity else 0.0,
            type_distribution=by_type,
        )
