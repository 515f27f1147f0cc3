"""
Unit tests for the Event Manager system.

Tests the publisher-subscriber bus that connects the turn processor, the
battle system and the battle log, including encounter-scoped delivery.
"""

from unittest.mock import Mock

from skirmish.core.events import (
    EventManager,
    EventPriority,
    EventType,
    LogMessage,
    QueuedEvent,
    DebugMessage,
)


def log_event(turn: int = 1, message: str = "test") -> LogMessage:
    return LogMessage(turn=turn, message=message, category="SYSTEM", source="test")


class TestQueuedEvent:
    """Test QueuedEvent ordering."""

    def test_queued_event_creation(self):
        event = log_event()
        queued = QueuedEvent(event=event, priority=EventPriority.HIGH, source="test", encounter_id="a")

        assert queued.event == event
        assert queued.priority == EventPriority.HIGH
        assert queued.source == "test"
        assert queued.encounter_id == "a"

    def test_ordering_by_priority(self):
        critical = QueuedEvent(log_event(), EventPriority.CRITICAL)
        high = QueuedEvent(log_event(), EventPriority.HIGH)
        normal = QueuedEvent(log_event(), EventPriority.NORMAL)
        low = QueuedEvent(log_event(), EventPriority.LOW)

        assert critical < high
        assert high < normal
        assert normal < low

    def test_ordering_by_sequence_within_priority(self):
        first = QueuedEvent(log_event(), EventPriority.NORMAL, sequence=1)
        second = QueuedEvent(log_event(), EventPriority.NORMAL, sequence=2)

        assert first < second
        assert not second < first


class TestEventManager:
    """Test EventManager functionality."""

    def test_event_manager_creation(self, event_manager):
        stats = event_manager.get_statistics()
        assert stats['events_published'] == 0
        assert stats['events_processed'] == 0
        assert stats['delivery_failures'] == 0

    def test_event_type_is_set_by_event(self):
        assert log_event().event_type == EventType.LOG_MESSAGE
        assert DebugMessage(turn=0, message="x", source="y").event_type == EventType.DEBUG_MESSAGE

    def test_subscribe_counts(self, event_manager):
        event_manager.subscribe(EventType.LOG_MESSAGE, Mock())
        event_manager.subscribe(EventType.DEBUG_MESSAGE, Mock(), encounter_id="a")

        assert event_manager.get_statistics()['subscribers_count'] == 2

    def test_publish_queues_until_processed(self, event_manager):
        subscriber = Mock()
        event_manager.subscribe(EventType.LOG_MESSAGE, subscriber)

        event_manager.publish(log_event(), source="test")

        assert event_manager.has_queued_events()
        subscriber.assert_not_called()

        processed = event_manager.process_events()

        assert processed == 1
        assert not event_manager.has_queued_events()
        subscriber.assert_called_once()

    def test_publish_immediate(self, event_manager):
        subscriber = Mock()
        event_manager.subscribe(EventType.LOG_MESSAGE, subscriber)

        event = log_event()
        event_manager.publish_immediate(event, source="test")

        subscriber.assert_called_once_with(event)

    def test_immediate_overtakes_queued(self, event_manager):
        received = []
        event_manager.subscribe(EventType.LOG_MESSAGE, lambda e: received.append(e.message))

        event_manager.publish(log_event(message="queued"))
        event_manager.publish_immediate(log_event(message="immediate"))
        event_manager.process_events()

        assert received == ["immediate", "queued"]

    def test_processing_order_is_fifo_within_priority(self, event_manager):
        received = []
        event_manager.subscribe(EventType.LOG_MESSAGE, lambda e: received.append(e.message))

        for message in ("first", "second", "third"):
            event_manager.publish(log_event(message=message))
        event_manager.process_events()

        assert received == ["first", "second", "third"]

    def test_higher_priority_processed_first(self, event_manager):
        received = []
        event_manager.subscribe(EventType.LOG_MESSAGE, lambda e: received.append(e.message))

        event_manager.publish(log_event(message="low"), priority=EventPriority.LOW)
        event_manager.publish(log_event(message="critical"), priority=EventPriority.CRITICAL)
        event_manager.process_events()

        assert received == ["critical", "low"]

    def test_events_published_while_draining_are_delivered(self, event_manager):
        received = []

        def relay(event):
            event_manager.publish(DebugMessage(turn=event.turn, message="relayed", source="relay"))

        event_manager.subscribe(EventType.LOG_MESSAGE, relay)
        event_manager.subscribe(EventType.DEBUG_MESSAGE, lambda e: received.append(e.message))
        event_manager.publish(log_event())

        assert event_manager.process_events() == 2
        assert received == ["relayed"]

    def test_max_events_leaves_remainder_queued(self, event_manager):
        for index in range(3):
            event_manager.publish(log_event(turn=index))

        assert event_manager.process_events(max_events=2) == 2
        assert event_manager.get_statistics()['events_queued'] == 1

    def test_unsubscribe(self, event_manager):
        subscriber = Mock()
        event_manager.subscribe(EventType.LOG_MESSAGE, subscriber)

        assert event_manager.unsubscribe(EventType.LOG_MESSAGE, subscriber)
        assert not event_manager.unsubscribe(EventType.LOG_MESSAGE, subscriber)

        event_manager.publish_immediate(log_event())
        subscriber.assert_not_called()

    def test_failing_subscriber_does_not_stop_delivery(self, event_manager):
        failing = Mock(side_effect=RuntimeError("boom"))
        healthy = Mock()
        event_manager.subscribe(EventType.LOG_MESSAGE, failing, subscriber_name="failing")
        event_manager.subscribe(EventType.LOG_MESSAGE, healthy)

        event_manager.publish_immediate(log_event())

        healthy.assert_called_once()
        assert len(event_manager.failures) == 1
        failure = event_manager.failures[0]
        assert failure.subscriber == "failing"
        assert failure.event_type == EventType.LOG_MESSAGE
        assert "boom" in failure.error


class TestEncounterScoping:
    """Test delivery of events tagged with an encounter id."""

    def test_scoped_subscriber_only_sees_its_encounter(self, event_manager):
        first, second = Mock(), Mock()
        event_manager.subscribe(EventType.LOG_MESSAGE, first, encounter_id="first")
        event_manager.subscribe(EventType.LOG_MESSAGE, second, encounter_id="second")

        event = log_event()
        event_manager.publish_immediate(event, encounter_id="first")

        first.assert_called_once_with(event)
        second.assert_not_called()

    def test_unscoped_subscriber_sees_every_encounter(self, event_manager):
        received = []
        event_manager.subscribe(EventType.LOG_MESSAGE, lambda e: received.append(e.message))

        event_manager.publish(log_event(message="a"), encounter_id="first")
        event_manager.publish(log_event(message="b"), encounter_id="second")
        event_manager.process_events()

        assert received == ["a", "b"]

    def test_unscoped_event_reaches_scoped_subscribers(self, event_manager):
        scoped = Mock()
        event_manager.subscribe(EventType.LOG_MESSAGE, scoped, encounter_id="first")

        event_manager.publish_immediate(log_event())

        scoped.assert_called_once()
