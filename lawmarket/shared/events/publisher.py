# 📄 File: lawmarket/shared/events/publisher.py

# 🧭 Purpose (Layman Explanation):
# Announces important changes (an account banned, a lawyer application submitted) to the parts
# of the system that care about them, once the change has been saved.

# 🧪 Purpose (Technical Summary):
# In-process event publisher: every event is written to the business-event log, then handed to
# the async handlers subscribed to its event_type. Handler failures are logged and counted; they
# never undo a write that already committed.

# 🔗 Dependencies:
# - lawmarket.shared.events.base (DomainEvent)
# - lawmarket.shared.utils.logging (StructuredLogger)

# 🔄 Connected Modules / Calls From:
# Command handlers (after repository writes), lawmarket.main (handler registration),
# lawyers event handlers (admin notification)

from collections import defaultdict
from typing import Awaitable, Callable, Dict, Iterable, List

from lawmarket.shared.events.base import DomainEvent
from lawmarket.shared.utils.logging import get_logger

logger = get_logger(__name__)

EventHandler = Callable[[DomainEvent], Awaitable[None]]


class EventPublisher:
    """
    Dispatches domain events to subscribed handlers in the current task.
    """

    def __init__(self):
        self._handlers: Dict[str, List[EventHandler]] = defaultdict(list)
        self.published_count = 0
        self.failed_count = 0

    def subscribe(self, event_type: str, handler: EventHandler) -> None:
        if handler not in self._handlers[event_type]:
            self._handlers[event_type].append(handler)
            logger.debug(f"Subscribed {getattr(handler, '__name__', handler)} to {event_type}")

    def handlers_for(self, event_type: str) -> List[EventHandler]:
        return list(self._handlers.get(event_type, []))

    async def publish(self, event: DomainEvent) -> None:
        """
        Publish a single event.

        Args:
            event: Event pulled from an aggregate after a successful write
        """
        logger.log_business_event(
            event_type=event.event_type,
            description=f"Domain event {event.event_type} for {event.aggregate_id}",
            entity_id=event.aggregate_id,
            extra={"event_id": event.event_id, "payload": event.to_dict()},
        )
        self.published_count += 1

        for handler in self.handlers_for(event.event_type):
            try:
                await handler(event)
            except Exception as e:
                self.failed_count += 1
                logger.error(
                    f"Event handler {getattr(handler, '__name__', handler)} failed for "
                    f"{event.event_type} ({event.event_id}): {e}",
                    exc_info=True,
                )

    async def publish_all(self, events: Iterable[DomainEvent]) -> None:
        for event in events:
            await self.publish(event)


_event_publisher = EventPublisher()


def get_event_publisher() -> EventPublisher:
    """Process-wide publisher used by FastAPI dependencies."""
    return _event_publisher
