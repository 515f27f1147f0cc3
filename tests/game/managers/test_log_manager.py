"""
Unit tests for the BattleLog.
"""

from skirmish.core.events import DebugMessage, LogMessage
from skirmish.game.managers import BattleLog, LogCategory, LogLevel


class TestBattleLog:

    def test_snapshot_only_has_outcome_lines(self):
        log = BattleLog()
        log.system("setup")
        log.battle("A attacked B for 5 damage.")
        log.progression("A gained 50 experience.")
        log.battle("A wins the battle!")

        assert log.snapshot() == ["A attacked B for 5 damage.", "A wins the battle!"]
        assert len(log) == 4

    def test_snapshot_is_a_copy(self):
        log = BattleLog()
        log.battle("line")

        log.snapshot().append("forged")
        log.entries.clear()

        assert log.snapshot() == ["line"]

    def test_entries_keep_order_and_category(self):
        log = BattleLog()
        log.warning("careful")
        log.error("broken")

        assert [(e.text, e.category) for e in log] == [
            ("careful", LogCategory.WARNING),
            ("broken", LogCategory.ERROR),
        ]

    def test_format(self):
        log = BattleLog()
        log.battle("hit")
        assert log.entries[0].format() == "[BTL] hit"
        assert log.entries[0].format(include_category=False) == "hit"


class TestFiltering:

    def test_debug_hidden_by_default(self):
        log = BattleLog()
        log.debug("noise")
        log.battle("hit")

        assert [e.text for e in log.get_messages()] == ["hit"]
        assert not log.is_debug_enabled()

    def test_toggle_debug(self):
        log = BattleLog()
        log.debug("noise")
        log.queue("queued")

        log.toggle_debug()
        assert log.is_debug_enabled()
        assert [e.text for e in log.get_messages()] == ["noise", "queued"]

        log.toggle_debug()
        assert log.get_messages() == []

    def test_category_filter_and_count(self):
        log = BattleLog()
        for i in range(5):
            log.battle(f"line {i}")
        log.system("sys")

        recent = log.get_messages(count=2, categories={LogCategory.BATTLE})
        assert [e.text for e in recent] == ["line 3", "line 4"]

    def test_disabled_category(self):
        log = BattleLog()
        log.system("sys")
        log.disable_category(LogCategory.SYSTEM)
        assert log.get_messages() == []

    def test_log_level(self):
        log = BattleLog(default_level=LogLevel.WARNING)
        log.battle("hit")
        log.warning("careful")
        assert [e.text for e in log.get_messages()] == ["careful"]


class TestEventSubscriptions:

    def test_log_message_events_are_recorded(self, event_manager):
        log = BattleLog(event_manager)
        event_manager.publish(LogMessage(turn=1, message="hello", category="QUEUE", source="test"))
        event_manager.publish(LogMessage(turn=1, message="odd", category="NOPE", source="test"))
        event_manager.process_events()

        assert [(e.text, e.category) for e in log] == [
            ("hello", LogCategory.QUEUE),
            ("odd", LogCategory.SYSTEM),
        ]

    def test_debug_message_events(self, event_manager):
        log = BattleLog(event_manager)
        event_manager.publish(DebugMessage(turn=0, message="details", source="Resolver"))
        event_manager.process_events()

        assert log.entries[0].text == "[Resolver] details"
        assert log.entries[0].category == LogCategory.DEBUG
