"""
Basic test fixtures for the skirmish test suite.

Provides combatants, seeded random generators and battle factories.
"""

import sys
import os
from unittest.mock import Mock

import numpy as np
import pytest

# Add the source tree to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, os.path.join(project_root, "src"))

from skirmish.core.data import ArchetypeKind, ArmorSlot, PotionType
from skirmish.core.events import EventManager
from skirmish.game.ai import PassivePolicy
from skirmish.game.battle_system import BattleSystem
from skirmish.game.entities import Armor, Combatant, Potion, Weapon


@pytest.fixture
def event_manager():
    """Create an event manager for testing."""
    return EventManager()


@pytest.fixture
def rng():
    """Create a seeded random generator for deterministic runs."""
    return np.random.default_rng(12345)


@pytest.fixture
def warrior(rng):
    """Create a level 1 warrior."""
    return Combatant("Conan", ArchetypeKind.WARRIOR, rng=rng)


@pytest.fixture
def mage(rng):
    """Create a level 1 mage."""
    return Combatant("Merlin", ArchetypeKind.MAGE, rng=rng)


@pytest.fixture
def archer(rng):
    """Create a level 1 archer."""
    return Combatant("Robin", ArchetypeKind.ARCHER, rng=rng)


@pytest.fixture
def make_battle():
    """Factory for battles with a predictable opponent by default."""
    def _make(player, opponent, policy=None, rng=None, **kwargs):
        return BattleSystem(
            player,
            opponent,
            rng=rng if rng is not None else np.random.default_rng(7),
            policy=policy if policy is not None else PassivePolicy(),
            **kwargs
        )
    return _make


def mock_rng(random_value: float = 0.5, integer_value: int = 50) -> Mock:
    """Create a stand-in generator with fixed draws."""
    generator = Mock()
    generator.random.return_value = random_value
    generator.integers.return_value = integer_value
    return generator


class TestDataBuilder:
    """Builder for common test items and equipped combatants."""

    @staticmethod
    def fixed_weapon(damage: int, name: str = "Test Blade") -> Weapon:
        return Weapon(name, min_damage=damage, max_damage=damage)

    @staticmethod
    def armor(reduction: float, slot: ArmorSlot = ArmorSlot.CHEST, name: str = "Test Plate") -> Armor:
        return Armor(name, defense=int(reduction * 100), slot=slot, damage_reduction=reduction)

    @staticmethod
    def health_potion(potency: int = 30, uses: int = 1, name: str = "Health Potion") -> Potion:
        return Potion(name, PotionType.HEALTH, potency, max_uses=uses)

    @staticmethod
    def equip(combatant: Combatant, *items) -> Combatant:
        """Put items in the inventory and equip them."""
        for item in items:
            combatant.add_item(item)
            if isinstance(item, Weapon):
                combatant.equip_weapon(item)
            else:
                combatant.equip_armor(item)
        return combatant
