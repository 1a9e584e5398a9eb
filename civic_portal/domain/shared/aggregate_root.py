"""Base AggregateRoot class for domain model.

AggregateRoot - the entry point of an aggregate. It guards the consistency
of what it wraps and records domain events about changes.
"""

from typing import List

from .domain_event import DomainEvent


class AggregateRoot:
    """Base class for aggregate roots in DDD.

    AggregateRoot is:
    - **Consistency boundary**: Invariants hold inside the aggregate
    - **Transaction boundary**: Saved/loaded as a single unit
    - **Event producer**: Records domain events about changes

    The event buffer is a manual outbox. Nothing is dispatched from inside
    the aggregate; the caller reads the events, dispatches them and then
    clears the buffer.

    Example:
        >>> aggregate = ProjectAggregate.create(title="Open Budget", ...)
        >>> aggregate.change_status(ProjectStatus.COMPLETED)
        >>> events = aggregate.get_domain_events()
        >>> await event_bus.publish_all(events)
        >>> aggregate.clear_domain_events()
    """

    def __init__(self) -> None:
        """Initialize aggregate root with an empty event buffer."""
        self._domain_events: List[DomainEvent] = []

    def add_domain_event(self, event: DomainEvent) -> None:
        """Add domain event to pending events list.

        Args:
            event: Domain event to add.
        """
        self._domain_events.append(event)

    def get_domain_events(self) -> List[DomainEvent]:
        """Get all pending domain events.

        Returns:
            Copy of the pending events; mutating it does not touch the buffer.
        """
        return self._domain_events.copy()

    def clear_domain_events(self) -> None:
        """Clear all pending domain events.

        Call after the events were dispatched, otherwise they will be
        returned again by get_domain_events().
        """
        self._domain_events.clear()

    @property
    def has_domain_events(self) -> bool:
        """Check if aggregate has pending domain events.

        Returns:
            True if there are undispatched events, False otherwise.
        """
        return len(self._domain_events) > 0
