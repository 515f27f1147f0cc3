"""
Unit tests for the CombatResolver.

Tests the execution of each action kind and the outcome lines produced.
"""

import pytest

from skirmish.core.data import ActionKind, PotionType
from skirmish.core.engine import BattleAction
from skirmish.core.events import EventType
from skirmish.core.exceptions import ItemNotFoundError
from skirmish.game.combat import CombatResolver
from skirmish.game.entities import Item, Potion
from conftest import TestDataBuilder, mock_rng


@pytest.fixture
def resolver(event_manager, rng):
    return CombatResolver(event_manager, rng)


class TestAttack:

    def test_attack_reports_raw_and_dealt(self, resolver, warrior, mage):
        TestDataBuilder.equip(warrior, TestDataBuilder.fixed_weapon(10))
        TestDataBuilder.equip(mage, TestDataBuilder.armor(0.2))

        outcome = resolver.resolve(BattleAction(warrior, mage, ActionKind.ATTACK))

        assert outcome.success
        assert outcome.amount == 25
        assert outcome.damage_dealt == 20
        assert outcome.description == "Conan attacked Merlin for 25 damage."
        assert mage.current_health == 60

    def test_attack_builds_attacker_focus(self, resolver, archer, warrior):
        resolver.resolve(BattleAction(archer, warrior, ActionKind.ATTACK))
        assert archer.resource.current == 15

    def test_attack_builds_target_rage(self, resolver, mage, warrior):
        resolver.resolve(BattleAction(mage, warrior, ActionKind.ATTACK))
        assert warrior.resource.current == 10


class TestSpecial:

    def test_special_success(self, resolver, mage, warrior):
        outcome = resolver.resolve(BattleAction(mage, warrior, ActionKind.SPECIAL))

        assert outcome.success
        assert outcome.damage_dealt == 25
        assert outcome.description == "Merlin used a Special Ability on Conan!"

    def test_special_failure_is_generic(self, resolver, warrior, mage):
        outcome = resolver.resolve(BattleAction(warrior, mage, ActionKind.SPECIAL))

        assert not outcome.success
        assert outcome.description == "Conan tried to use Special Ability but did not have enough resource."
        assert mage.current_health == mage.max_health


class TestDefend:

    def test_defend_always_succeeds(self, resolver, event_manager, warrior, mage):
        received = []
        event_manager.subscribe(EventType.LOG_MESSAGE, lambda e: received.append(e.message))

        outcome = resolver.resolve(BattleAction(warrior, mage, ActionKind.DEFEND))

        assert outcome.success
        assert outcome.description == "Conan entered defensive stance."
        assert received == ["Conan is defending!"]
        assert not event_manager.has_queued_events()
        assert warrior.current_health == 150
        assert mage.current_health == 80


class TestUseItem:

    def test_missing_item_raises(self, resolver, warrior, mage):
        with pytest.raises(ItemNotFoundError):
            resolver.resolve(BattleAction(warrior, mage, ActionKind.USE_ITEM, item_name="Elixir"))

    def test_potion_used_and_removed_when_exhausted(self, resolver, warrior, mage):
        potion = TestDataBuilder.health_potion(potency=30)
        warrior.add_item(potion)
        warrior.take_damage(40)

        outcome = resolver.resolve(BattleAction(warrior, mage, ActionKind.USE_ITEM, item_name="Health Potion"))

        assert outcome.success
        assert outcome.description == "Conan used item: Health Potion."
        assert warrior.current_health == 140
        assert warrior.find_item("Health Potion") is None
        assert warrior.peek_recently_used() is potion

    def test_multi_use_potion_stays_until_exhausted(self, resolver, warrior, mage):
        potion = TestDataBuilder.health_potion(potency=10, uses=2)
        warrior.add_item(potion)
        warrior.take_damage(50)
        action = BattleAction(warrior, mage, ActionKind.USE_ITEM, item_name="Health Potion")

        resolver.resolve(action)
        assert warrior.find_item("Health Potion") is potion
        assert potion.remaining_uses == 1

        resolver.resolve(action)
        assert warrior.find_item("Health Potion") is None
        assert warrior.current_health == 120

    def test_unusable_potion_fails(self, resolver, warrior, mage):
        warrior.add_item(TestDataBuilder.health_potion())

        outcome = resolver.resolve(BattleAction(warrior, mage, ActionKind.USE_ITEM, item_name="Health Potion"))

        assert not outcome.success
        assert outcome.description == "Conan failed to use item."
        assert warrior.find_item("Health Potion") is not None
        assert warrior.peek_recently_used() is None

    def test_non_consumable_item_fails(self, resolver, warrior, mage):
        warrior.add_item(Item("Rock"))

        outcome = resolver.resolve(BattleAction(warrior, mage, ActionKind.USE_ITEM, item_name="Rock"))

        assert not outcome.success
        assert warrior.find_item("Rock") is not None

    def test_strength_potion_applies_bonus(self, resolver, warrior, mage):
        warrior.add_item(Potion("Strength Tonic", PotionType.STRENGTH, 5))

        resolver.resolve(BattleAction(warrior, mage, ActionKind.USE_ITEM, item_name="Strength Tonic"))

        assert warrior.compute_attack_damage() == 20


class TestFlee:

    def test_flee_success(self, event_manager, warrior, mage):
        resolver = CombatResolver(event_manager, mock_rng(random_value=0.29))
        outcome = resolver.resolve(BattleAction(warrior, mage, ActionKind.FLEE))

        assert outcome.success
        assert outcome.fled
        assert outcome.description == "Conan fled from battle!"

    def test_flee_failure(self, event_manager, warrior, mage):
        resolver = CombatResolver(event_manager, mock_rng(random_value=0.30))
        outcome = resolver.resolve(BattleAction(warrior, mage, ActionKind.FLEE))

        assert not outcome.success
        assert not outcome.fled
        assert outcome.description == "Conan tried to flee but failed!"

    def test_single_draw_per_attempt(self, event_manager, warrior, mage):
        generator = mock_rng(random_value=0.9)
        resolver = CombatResolver(event_manager, generator)
        resolver.resolve(BattleAction(warrior, mage, ActionKind.FLEE))

        generator.random.assert_called_once()
