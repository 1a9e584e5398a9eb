"""Event Status - publication state of an event."""

from civic_portal.domain.shared import DomainEnum


class EventStatus(DomainEnum):
    """Event status as shown on the listing.

    The stored status is editorial; whether an event is actually in the
    future is answered by its DateRange.
    """

    UPCOMING = "upcoming"
    ONGOING = "ongoing"
    PAST = "past"
    CANCELLED = "cancelled"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()

    def is_cancelled(self) -> bool:
        return self == EventStatus.CANCELLED
