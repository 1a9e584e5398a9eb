"""Event Entity - a community event (workshop, hackathon, meetup, conference)."""

import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable

from civic_portal.domain.shared import (
    Entity,
    ErrorCode,
    InvalidStateTransition,
    Slug,
    UNSET,
    Unset,
    Url,
    ensure_non_negative,
    ensure_text,
    normalize_query,
    resolve_now,
    text_matches,
    utc_now,
    validate_value_object,
)

from ..value_objects import DateRange, EventCapacity, EventId, EventStatus, EventType, Location

MAX_TITLE_LENGTH = 150
MAX_DESCRIPTION_LENGTH = 2000


@dataclass(frozen=True, kw_only=True)
class Event(Entity):
    """Event entity.

    Lifecycle:
        Registration opens and closes independently of the stored status.
        Participants are counted against an optional cap; an event without
        ``max_participants`` never fills up.

    Example:
        >>> event = Event.create(
        ...     title="Open Data Workshop",
        ...     description="Hands-on session",
        ...     type=EventType.WORKSHOP,
        ...     date_range=DateRange.from_duration(start, 4),
        ...     location=Location.online(),
        ...     max_participants=30,
        ... )
        >>> event = event.open_registration().add_participant()
        >>> event.available_spots
        29
    """

    id: EventId
    title: str
    slug: Slug
    description: str
    type: EventType
    status: EventStatus = EventStatus.UPCOMING
    date_range: DateRange
    location: Location
    max_participants: int | None = None
    current_participants: int = 0
    registration_url: Url | None = None
    is_registration_open: bool = False
    is_featured: bool = False
    organizer_name: str | None = None
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "tags", tuple(self.tags))
        ensure_text(
            self.title, field="title", label="Event title", max_length=MAX_TITLE_LENGTH
        )
        ensure_text(
            self.description,
            field="description",
            label="Event description",
            max_length=MAX_DESCRIPTION_LENGTH,
        )
        ensure_non_negative(
            self.current_participants,
            field="current_participants",
            label="Current participants",
        )
        if self.max_participants is not None:
            ensure_non_negative(
                self.max_participants,
                field="max_participants",
                label="Max participants",
            )
            validate_value_object(
                self.current_participants <= self.max_participants,
                "Current participants cannot exceed maximum participants",
                field="current_participants",
                code=ErrorCode.INVALID_RANGE,
            )

    # ==================== Factory Methods ====================

    @classmethod
    def create(
        cls,
        *,
        title: str,
        description: str,
        type: EventType,
        date_range: DateRange,
        location: Location,
        max_participants: int | None = None,
        registration_url: Url | None = None,
        is_featured: bool = False,
        organizer_name: str | None = None,
        tags: Iterable[str] = (),
    ) -> "Event":
        """Create a new upcoming event with registration closed."""
        event_id = EventId.generate()
        now = utc_now()
        return cls(
            id=event_id,
            title=title,
            slug=Slug.from_title(title, fallback=f"event-{event_id.value[:8]}"),
            description=description,
            type=type,
            status=EventStatus.UPCOMING,
            date_range=date_range,
            location=location,
            max_participants=max_participants,
            current_participants=0,
            registration_url=registration_url,
            is_registration_open=False,
            is_featured=is_featured,
            organizer_name=organizer_name,
            tags=tuple(tags),
            created_at=now,
            updated_at=now,
        )

    @classmethod
    def from_persistence(
        cls,
        *,
        id: EventId,
        title: str,
        slug: Slug,
        description: str,
        type: EventType,
        status: EventStatus,
        date_range: DateRange,
        location: Location,
        created_at: datetime,
        updated_at: datetime,
        max_participants: int | None = None,
        current_participants: int = 0,
        registration_url: Url | None = None,
        is_registration_open: bool = False,
        is_featured: bool = False,
        organizer_name: str | None = None,
        tags: Iterable[str] = (),
    ) -> "Event":
        """Rehydrate a stored event. All invariants are checked again."""
        return cls(
            id=id,
            title=title,
            slug=slug,
            description=description,
            type=type,
            status=status,
            date_range=date_range,
            location=location,
            max_participants=max_participants,
            current_participants=current_participants,
            registration_url=registration_url,
            is_registration_open=is_registration_open,
            is_featured=is_featured,
            organizer_name=organizer_name,
            tags=tuple(tags),
            created_at=created_at,
            updated_at=updated_at,
        )

    # ==================== Capacity ====================

    @property
    def capacity(self) -> EventCapacity | None:
        """Capacity value object, None when the event is uncapped."""
        if self.max_participants is None:
            return None
        return EventCapacity(self.max_participants, self.current_participants)

    @property
    def available_spots(self) -> int | None:
        """Seats left, None when the event is uncapped."""
        if self.max_participants is None:
            return None
        return self.max_participants - self.current_participants

    def is_full(self) -> bool:
        capacity = self.capacity
        return capacity is not None and capacity.is_full()

    def has_available_spots(self) -> bool:
        return not self.is_full()

    def can_add_participant(self) -> bool:
        return self.is_registration_open and not self.is_full()

    def can_register(self, now: datetime | None = None) -> bool:
        """Registration is possible right now through the registration URL."""
        return (
            not self.is_full()
            and self.status == EventStatus.UPCOMING
            and self.date_range.is_in_future(now)
            and self.registration_url is not None
        )

    # ==================== Time ====================

    @property
    def start(self) -> datetime:
        return self.date_range.start

    @property
    def duration_hours(self) -> float:
        return self.date_range.duration_hours

    def is_upcoming(self, now: datetime | None = None) -> bool:
        return self.date_range.is_in_future(now)

    def is_ongoing(self, now: datetime | None = None) -> bool:
        return self.date_range.is_ongoing(now)

    def is_past(self, now: datetime | None = None) -> bool:
        return self.date_range.is_in_past(now)

    def days_until_event(self, now: datetime | None = None) -> int:
        """Whole days until start, rounded up; negative once started."""
        delta = self.start - resolve_now(now)
        return math.ceil(delta / timedelta(days=1))

    # ==================== Search ====================

    def has_tag(self, tag: str) -> bool:
        wanted = tag.lower()
        return any(t.lower() == wanted for t in self.tags)

    def matches_search(self, query: str) -> bool:
        """Case-insensitive match on title, description, tags and venue name."""
        needle = normalize_query(query)
        if not needle:
            return True
        return text_matches(
            needle, self.title, self.description, self.location.name, *self.tags
        )

    # ==================== Updates ====================

    def add_participant(self) -> "Event":
        """Register one participant.

        Raises:
            InvalidStateTransition: If the event is full or registration is closed.
        """
        if not self.can_add_participant():
            raise InvalidStateTransition(
                "Cannot add participant: event is full or registration is closed",
                event_id=self.id.value,
            )
        return self._evolve(current_participants=self.current_participants + 1)

    def remove_participant(self) -> "Event":
        """Unregister one participant.

        Raises:
            InvalidStateTransition: If nobody is registered.
        """
        if self.current_participants <= 0:
            raise InvalidStateTransition(
                "Cannot remove participant: no participants registered",
                event_id=self.id.value,
            )
        return self._evolve(current_participants=self.current_participants - 1)

    def open_registration(self) -> "Event":
        return self._evolve(is_registration_open=True)

    def close_registration(self) -> "Event":
        return self._evolve(is_registration_open=False)

    def cancel(self) -> "Event":
        """Mark cancelled and close registration."""
        return self._evolve(status=EventStatus.CANCELLED, is_registration_open=False)

    def update_details(
        self,
        *,
        title: str | None = None,
        description: str | None = None,
        date_range: DateRange | None = None,
        location: Location | None = None,
        max_participants: int | None | Unset = UNSET,
        registration_url: Url | None | Unset = UNSET,
        tags: Iterable[str] | None = None,
    ) -> "Event":
        """Change descriptive fields; omitted arguments keep their value.

        The slug follows the title. Passing None for ``max_participants``
        removes the cap, for ``registration_url`` clears the link.
        """
        new_title = self.title if title is None else title
        return self._evolve(
            title=new_title,
            slug=self.slug if title is None else Slug.from_title(
                new_title, fallback=self.slug.value
            ),
            description=self.description if description is None else description,
            date_range=date_range or self.date_range,
            location=location or self.location,
            max_participants=(
                self.max_participants if max_participants is UNSET else max_participants
            ),
            registration_url=(
                self.registration_url if registration_url is UNSET else registration_url
            ),
            tags=self.tags if tags is None else tuple(tags),
        )
