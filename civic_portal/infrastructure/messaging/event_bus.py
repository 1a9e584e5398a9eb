"""Event Bus - in-process dispatch of domain events.

- Aggregates record events (ProjectStatusChanged, ProjectTagsChanged, ...)
- Application handlers publish them after saving
- Subscribers react without the domain knowing about them
"""

import logging
from collections import defaultdict
from typing import Awaitable, Callable, Iterable, Type

from civic_portal.domain.shared import DomainEvent

logger = logging.getLogger(__name__)

# Event handler signature: async function that takes DomainEvent
EventHandler = Callable[[DomainEvent], Awaitable[None]]


class EventBus:
    """Event bus for domain events, keyed by event class.

    Handlers run sequentially in subscription order. A failing handler is
    logged and does not stop the others.

    Example:
        >>> event_bus = EventBus()
        >>> event_bus.subscribe(ProjectStatusChangedEvent, refresh_listing_cache)
        >>> event_bus.subscribe(ProjectStatusChangedEvent, notify_maintainers)

        >>> events = aggregate.get_domain_events()
        >>> await event_bus.publish_all(events)
        >>> aggregate.clear_domain_events()
    """

    def __init__(self) -> None:
        self._subscribers: dict[Type[DomainEvent], list[EventHandler]] = defaultdict(list)
        logger.debug("event_bus.initialized")

    def subscribe(self, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        """Subscribe handler to event type.

        Args:
            event_type: Event class (e.g., ProjectCreatedEvent).
            handler: Async function to call when the event is published.
        """
        self._subscribers[event_type].append(handler)
        logger.info(
            "event_bus.subscription_added",
            extra={
                "event_type": event_type.__name__,
                "handler": _handler_name(handler),
            },
        )

    def unsubscribe(self, event_type: Type[DomainEvent], handler: EventHandler) -> None:
        """Remove handler; unknown handlers are ignored."""
        if handler in self._subscribers.get(event_type, []):
            self._subscribers[event_type].remove(handler)
            logger.info(
                "event_bus.subscription_removed",
                extra={
                    "event_type": event_type.__name__,
                    "handler": _handler_name(handler),
                },
            )

    async def publish(self, event: DomainEvent) -> None:
        """Publish single domain event to every handler of its class.

        Args:
            event: Domain event to publish.
        """
        event_type = type(event)
        handlers = list(self._subscribers.get(event_type, []))

        if not handlers:
            logger.debug(
                "event_bus.no_subscribers",
                extra={"event_type": event_type.__name__},
            )
            return

        logger.info(
            "event_bus.publishing",
            extra={
                "event_type": event_type.__name__,
                "handlers_count": len(handlers),
                "event_id": str(event.event_id),
            },
        )

        for handler in handlers:
            try:
                await handler(event)
            except Exception as e:
                # Log error but continue with other handlers
                logger.error(
                    "event_bus.handler_failed",
                    extra={
                        "event_type": event_type.__name__,
                        "handler": _handler_name(handler),
                        "error": str(e),
                    },
                    exc_info=True,
                )

    async def publish_all(self, events: Iterable[DomainEvent]) -> None:
        """Publish events in order."""
        events = list(events)
        if not events:
            return

        logger.info(
            "event_bus.publishing_batch",
            extra={"events_count": len(events)},
        )

        for event in events:
            await self.publish(event)

    def clear_subscribers(self) -> None:
        """Clear all subscribers (useful for testing)."""
        self._subscribers.clear()
        logger.info("event_bus.cleared")

    def get_subscribers_count(self, event_type: Type[DomainEvent]) -> int:
        return len(self._subscribers.get(event_type, []))


def _handler_name(handler: EventHandler) -> str:
    return getattr(handler, "__name__", repr(handler))


_event_bus_instance: EventBus | None = None


def get_event_bus() -> EventBus:
    """Get the process-wide event bus, creating it on first use."""
    global _event_bus_instance
    if _event_bus_instance is None:
        _event_bus_instance = EventBus()
    return _event_bus_instance


def reset_event_bus() -> None:
    """Replace the process-wide event bus with an empty one (for testing)."""
    global _event_bus_instance
    _event_bus_instance = EventBus()
    logger.info("event_bus.reset")
