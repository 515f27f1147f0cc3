"""
Edge case and error handling tests.

Tests boundary conditions, invalid inputs and the errors the engine raises
or recovers from.
"""
import pytest

from skirmish.core.data import ActionKind, ArchetypeKind
from skirmish.core.engine import BattleAction, EncounterState
from skirmish.core.events import EventType, LogMessage
from skirmish.core.exceptions import (
    EncounterEndedError,
    InventoryFullError,
    InvariantViolationError,
    ItemNotFoundError,
    SkirmishError,
)
from skirmish.game.battle_system import BattleSystem
from skirmish.game.combat import BattleCalculator
from skirmish.game.entities import Combatant, Item
from skirmish.game.managers import BattleLog


class CursedCharm(Item):
    """Usable item that corrupts its user's health."""

    @property
    def is_usable(self):
        return True

    @property
    def is_exhausted(self):
        return False

    def use(self, target):
        target.health.current_health = target.max_health + 10
        return True


class TestExceptionHierarchy:

    @pytest.mark.parametrize("error", [
        EncounterEndedError("queue action"),
        ItemNotFoundError("Elixir"),
        InventoryFullError("Rock", 20),
        InvariantViolationError("Conan", "health out of range"),
    ])
    def test_all_errors_share_a_base(self, error):
        assert isinstance(error, SkirmishError)

    def test_messages_carry_details(self):
        assert "Elixir" in str(ItemNotFoundError("Elixir"))
        assert "20 items" in str(InventoryFullError("Rock", 20))
        assert str(EncounterEndedError("queue action")).startswith("Cannot queue action")


class TestInvalidInputs:

    def test_item_intent_needs_item_name(self, warrior, mage):
        with pytest.raises(ValueError):
            BattleAction(warrior, mage, ActionKind.USE_ITEM)

    def test_only_item_intents_carry_names(self, warrior, mage):
        with pytest.raises(ValueError):
            BattleAction(warrior, mage, ActionKind.ATTACK, item_name="Sword")

    def test_negative_damage(self, warrior):
        with pytest.raises(ValueError):
            warrior.take_damage(-5)

    def test_negative_mitigation_input(self):
        with pytest.raises(ValueError):
            BattleCalculator.mitigate_damage(-1, [])

    def test_full_inventory(self, warrior):
        for i in range(20):
            warrior.add_item(Item(f"Pebble {i}"))
        with pytest.raises(InventoryFullError) as excinfo:
            warrior.add_item(Item("Boulder"))
        assert excinfo.value.capacity == 20
        assert len(warrior.items) == 20

    def test_unknown_item_removal_is_not_an_error(self, warrior):
        assert not warrior.remove_item("Nothing")


class TestBoundaries:

    def test_zero_damage_hit(self, warrior):
        assert warrior.take_damage(0) == 0
        assert warrior.current_health == 150

    def test_overkill_reports_health_removed(self, mage):
        assert mage.take_damage(500) == 80

    def test_full_armor_cap_still_hurts(self, warrior):
        assert BattleCalculator.mitigate_damage(1, [0.9, 0.9]) == 1

    def test_flee_chance_saturates(self):
        assert BattleCalculator.flee_chance(30, 1) == 1.0
        assert BattleCalculator.flee_chance(1, 30) == 0.0

    def test_encounter_state_ends_once(self, warrior, mage):
        state = EncounterState(player=warrior, opponent=mage, log=BattleLog())
        state.end(winner=warrior)
        with pytest.raises(RuntimeError):
            state.end(winner=mage)

    def test_opponent_of_outsider(self, warrior, mage, archer):
        state = EncounterState(player=warrior, opponent=mage, log=BattleLog())
        assert state.opponent_of(mage) is warrior
        with pytest.raises(ValueError):
            state.opponent_of(archer)


class TestRecovery:

    def test_missing_item_does_not_stop_the_round(self, make_battle, warrior, mage):
        battle = make_battle(warrior, mage)

        lines = battle.play_round(ActionKind.USE_ITEM, item_name="Elixir")

        assert lines == [
            "Conan tried to use an item but couldn't find it.",
            "Merlin entered defensive stance.",
        ]
        assert not battle.is_ended

    def test_failing_subscriber_does_not_break_battle(self, make_battle, warrior, mage):
        battle = make_battle(warrior, mage)

        def broken(event):
            raise RuntimeError("subscriber failure")

        battle.event_manager.subscribe(EventType.ACTION_RESOLVED, broken)
        assert len(battle.play_round(ActionKind.ATTACK)) == 2
        assert [f.subscriber for f in battle.event_manager.failures] == ["broken", "broken"]

    def test_unknown_log_category_falls_back_to_system(self, event_manager):
        log = BattleLog(event_manager)
        event_manager.publish_immediate(
            LogMessage(turn=0, message="stray", category="MYSTERY", source="test")
        )
        assert log.entries[-1].text == "stray"

    def test_invariant_violation_propagates(self, make_battle, warrior, mage):
        warrior.add_item(CursedCharm("Cursed Charm"))
        battle = make_battle(warrior, mage)
        battle.queue_player_item_action("Cursed Charm")

        with pytest.raises(InvariantViolationError):
            battle.process_next_action()

    def test_starting_a_second_battle_after_the_first(self, warrior):
        first_foe = Combatant("Imp", ArchetypeKind.MAGE)
        first_foe.take_damage(first_foe.current_health - 1)
        battle = BattleSystem(warrior, first_foe, seed=1)
        battle.queue_player_action(ActionKind.ATTACK)
        battle.process_all_actions()
        assert battle.winner is warrior

        with pytest.raises(EncounterEndedError):
            battle.queue_player_action(ActionKind.ATTACK)

        rematch = BattleSystem(warrior, Combatant("Ogre", ArchetypeKind.WARRIOR), seed=2)
        assert not rematch.is_ended
        assert rematch.battle_log == ["Battle started: Conan vs Ogre"]
