"""Event Type - format of a community event."""

from civic_portal.domain.shared import DomainEnum


class EventType(DomainEnum):
    """Event format with display metadata.

    Types:
        - WORKSHOP: Hands-on session (typically 4h)
        - HACKATHON: Build weekend (typically 48h)
        - MEETUP: Evening gathering (typically 2h)
        - CONFERENCE: Talks day (typically 8h)
    """

    WORKSHOP = "workshop"
    HACKATHON = "hackathon"
    MEETUP = "meetup"
    CONFERENCE = "conference"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    @property
    def icon(self) -> str:
        return _ICONS[self]

    @property
    def typical_duration_hours(self) -> int:
        return _TYPICAL_DURATION_HOURS[self]


_ICONS = {
    EventType.WORKSHOP: "🛠️",
    EventType.HACKATHON: "⚡",
    EventType.MEETUP: "👥",
    EventType.CONFERENCE: "🎤",
}

_TYPICAL_DURATION_HOURS = {
    EventType.WORKSHOP: 4,
    EventType.HACKATHON: 48,
    EventType.MEETUP: 2,
    EventType.CONFERENCE: 8,
}
