"""Event DTOs for the presentation layer."""

from dataclasses import asdict, dataclass
from typing import Any

from civic_portal.domain.calendar import Event, Location


@dataclass(frozen=True)
class LocationDTO:
    name: str
    address: str | None
    city: str
    country: str
    is_online: bool
    full_address: str

    @classmethod
    def from_value(cls, location: Location) -> "LocationDTO":
        return cls(
            name=location.name,
            address=location.address,
            city=location.city,
            country=location.country,
            is_online=location.is_online,
            full_address=location.full_address,
        )


@dataclass(frozen=True)
class EventDTO:
    """Flat projection of an Event with a nested location.

    ``available_spots`` is None for events without a participant cap.
    """

    id: str
    title: str
    slug: str
    description: str
    type: str
    status: str
    start_date: str
    end_date: str
    location: LocationDTO
    max_participants: int | None
    current_participants: int
    available_spots: int | None
    registration_url: str | None
    is_registration_open: bool
    is_featured: bool
    tags: list[str]
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, event: Event) -> "EventDTO":
        return cls(
            id=event.id.value,
            title=event.title,
            slug=event.slug.value,
            description=event.description,
            type=event.type.value,
            status=event.status.value,
            start_date=event.date_range.start.isoformat(),
            end_date=event.date_range.end.isoformat(),
            location=LocationDTO.from_value(event.location),
            max_participants=event.max_participants,
            current_participants=event.current_participants,
            available_spots=event.available_spots,
            registration_url=event.registration_url.value if event.registration_url else None,
            is_registration_open=event.is_registration_open,
            is_featured=event.is_featured,
            tags=list(event.tags),
            created_at=event.created_at.isoformat(),
            updated_at=event.updated_at.isoformat(),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
