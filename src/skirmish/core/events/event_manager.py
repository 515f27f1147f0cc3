"""
Event bus shared by the parts of an encounter.

The turn processor, combat resolver, battle system and battle log talk to each
other only through events published here. A bus may carry several encounters
at once: events published with an ``encounter_id`` reach only the
subscriptions made for that encounter, plus subscriptions made without one.
Events published without an ``encounter_id`` reach every subscriber.
"""

import heapq
from collections import defaultdict
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .events import GameEvent, EventType


class EventPriority(Enum):
    """Event processing priorities."""
    CRITICAL = auto()
    HIGH = auto()
    NORMAL = auto()
    LOW = auto()


@dataclass
class QueuedEvent:
    """An event waiting for delivery, with the encounter it belongs to."""
    event: "GameEvent"
    priority: EventPriority = EventPriority.NORMAL
    sequence: int = 0
    source: Optional[str] = None
    encounter_id: Optional[str] = None

    def __lt__(self, other: "QueuedEvent") -> bool:
        # Lower enum value = higher priority, then publication order
        return (self.priority.value, self.sequence) < (other.priority.value, other.sequence)


EventSubscriber = Callable[["GameEvent"], None]


@dataclass
class Subscription:
    """A subscriber callback, optionally bound to one encounter."""
    callback: EventSubscriber
    name: str
    encounter_id: Optional[str] = None

    def accepts(self, queued: QueuedEvent) -> bool:
        if self.encounter_id is None or queued.encounter_id is None:
            return True
        return self.encounter_id == queued.encounter_id


@dataclass(frozen=True)
class DeliveryFailure:
    """A subscriber that raised while handling an event."""
    subscriber: str
    event_type: "EventType"
    error: str


class EventManager:
    """Priority-ordered, encounter-aware event bus.

    Delivery is synchronous. A failing subscriber is recorded in
    ``failures`` and does not stop delivery to the others.
    """

    def __init__(self):
        self._subscriptions: dict["EventType", list[Subscription]] = defaultdict(list)
        self._queue: list[QueuedEvent] = []
        self._sequence = 0
        self._events_processed = 0
        self.failures: list[DeliveryFailure] = []

    def subscribe(
        self,
        event_type: "EventType",
        subscriber: EventSubscriber,
        subscriber_name: Optional[str] = None,
        encounter_id: Optional[str] = None
    ) -> Subscription:
        """Subscribe to events of a specific type.

        Args:
            event_type: The type of events to subscribe to
            subscriber: Callback function to handle events
            subscriber_name: Optional name recorded with delivery failures
            encounter_id: Only receive events of this encounter (None for all)
        """
        subscription = Subscription(
            callback=subscriber,
            name=subscriber_name or getattr(subscriber, '__name__', 'anonymous'),
            encounter_id=encounter_id,
        )
        self._subscriptions[event_type].append(subscription)
        return subscription

    def unsubscribe(self, event_type: "EventType", subscriber: EventSubscriber) -> bool:
        """Remove every subscription of ``subscriber`` to ``event_type``.

        Returns:
            True if at least one subscription was removed
        """
        current = self._subscriptions.get(event_type, [])
        remaining = [s for s in current if s.callback is not subscriber]
        self._subscriptions[event_type] = remaining
        return len(remaining) < len(current)

    def _wrap(self, event: "GameEvent", priority: EventPriority,
              source: Optional[str], encounter_id: Optional[str]) -> QueuedEvent:
        self._sequence += 1
        return QueuedEvent(
            event=event,
            priority=priority,
            sequence=self._sequence,
            source=source,
            encounter_id=encounter_id,
        )

    def publish(
        self,
        event: "GameEvent",
        priority: EventPriority = EventPriority.NORMAL,
        source: Optional[str] = None,
        encounter_id: Optional[str] = None
    ) -> None:
        """Queue an event for delivery by ``process_events``."""
        heapq.heappush(self._queue, self._wrap(event, priority, source, encounter_id))

    def publish_immediate(
        self,
        event: "GameEvent",
        source: Optional[str] = None,
        encounter_id: Optional[str] = None
    ) -> None:
        """Deliver an event right away, ahead of anything queued."""
        self._deliver(self._wrap(event, EventPriority.CRITICAL, source, encounter_id))

    def process_events(self, max_events: Optional[int] = None) -> int:
        """Deliver queued events in priority order.

        Events published by subscribers during the drain are delivered in the
        same call.

        Args:
            max_events: Maximum number of events to deliver (None for all)

        Returns:
            Number of events delivered
        """
        processed = 0
        while self._queue and (max_events is None or processed < max_events):
            self._deliver(heapq.heappop(self._queue))
            processed += 1
        return processed

    def _deliver(self, queued: QueuedEvent) -> None:
        event = queued.event
        self._events_processed += 1

        for subscription in list(self._subscriptions.get(event.event_type, [])):
            if not subscription.accepts(queued):
                continue
            try:
                subscription.callback(event)
            except Exception as e:
                self.failures.append(DeliveryFailure(subscription.name, event.event_type, repr(e)))

    def has_queued_events(self) -> bool:
        return bool(self._queue)

    def get_statistics(self) -> dict[str, Any]:
        """Get event processing statistics."""
        return {
            'events_published': self._sequence,
            'events_processed': self._events_processed,
            'events_queued': len(self._queue),
            'subscribers_count': sum(len(subs) for subs in self._subscriptions.values()),
            'delivery_failures': len(self.failures),
        }
