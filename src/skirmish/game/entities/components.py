"""Combatant components.

This module contains the concrete component implementations that make up a
combatant: Identity, Health, Mana, Combat, Equipment, Inventory and
Progression. The archetype-specific special resource lives in
``archetypes.py``.
"""

from typing import TYPE_CHECKING, Optional

from ...core.data import ArchetypeKind, ArmorSlot, ComponentType, ItemRarity, ARCHETYPE_NAMES
from ...core.data.game_info import (
    DEFAULT_INVENTORY_SIZE,
    EXPERIENCE_PER_LEVEL,
)
from ...core.entities import Component
from ...core.exceptions import InventoryFullError

if TYPE_CHECKING:
    from ...core.entities import Entity
    from .items import Armor, Item, Weapon


class IdentityComponent(Component):
    """Component for identity and classification.

    Holds who the combatant is: their display name and archetype.
    """

    component_type = ComponentType.IDENTITY

    def __init__(self, entity: "Entity", name: str, archetype: ArchetypeKind):
        super().__init__(entity)
        self.name = name
        self.archetype = archetype

    def get_archetype_name(self) -> str:
        """Get the human-readable archetype name."""
        return ARCHETYPE_NAMES[self.archetype]


class HealthComponent(Component):
    """Component for life and death management.

    Health stays within [0, max_health]; a combatant at zero health is dead.
    """

    component_type = ComponentType.HEALTH

    def __init__(self, entity: "Entity", max_health: int):
        """Initialize health component.

        Args:
            entity: The entity this component belongs to
            max_health: Maximum health, current health starts full
        """
        super().__init__(entity)
        if max_health <= 0:
            raise ValueError("Maximum health must be positive")
        self.max_health = max_health
        self.current_health = max_health

    def is_alive(self) -> bool:
        return self.current_health > 0

    def take_damage(self, amount: int) -> int:
        """Remove health.

        Args:
            amount: Damage after mitigation

        Returns:
            Health actually removed (capped by remaining health)
        """
        if amount < 0:
            raise ValueError("Damage amount cannot be negative")

        old_health = self.current_health
        self.current_health = max(0, self.current_health - amount)
        return old_health - self.current_health

    def heal(self, amount: int) -> int:
        """Restore health up to the maximum.

        Returns:
            Health actually restored
        """
        if amount < 0:
            raise ValueError("Healing amount cannot be negative")

        old_health = self.current_health
        self.current_health = min(self.max_health, self.current_health + amount)
        return self.current_health - old_health

    def increase_max(self, amount: int) -> None:
        self.max_health += amount

    def restore_full(self) -> None:
        self.current_health = self.max_health


class ManaComponent(Component):
    """Component for the mana pool."""

    component_type = ComponentType.MANA

    def __init__(self, entity: "Entity", max_mana: int):
        super().__init__(entity)
        if max_mana < 0:
            raise ValueError("Maximum mana cannot be negative")
        self.max_mana = max_mana
        self.current_mana = max_mana

    def restore(self, amount: int) -> int:
        """Restore mana up to the maximum.

        Returns:
            Mana actually restored
        """
        if amount < 0:
            raise ValueError("Mana amount cannot be negative")

        old_mana = self.current_mana
        self.current_mana = min(self.max_mana, self.current_mana + amount)
        return self.current_mana - old_mana

    def spend(self, amount: int) -> bool:
        """Spend mana if strictly more than ``amount`` is available.

        Holding exactly ``amount`` is not enough; the pool can never be
        drained to zero by a single spend.

        Returns:
            True if the mana was spent
        """
        if amount < 0:
            raise ValueError("Mana amount cannot be negative")
        if self.current_mana > amount:
            self.current_mana -= amount
            return True
        return False

    def increase_max(self, amount: int) -> None:
        self.max_mana += amount

    def restore_full(self) -> None:
        self.current_mana = self.max_mana


class CombatComponent(Component):
    """Component for base combat statistics and temporary buffs.

    Temporary bonuses come from potions and last until the encounter ends.
    """

    component_type = ComponentType.COMBAT

    def __init__(self, entity: "Entity", strength: int, defense: int):
        super().__init__(entity)
        self.strength = strength
        self.defense = defense
        self.bonus_strength = 0
        self.bonus_defense = 0

    @property
    def effective_strength(self) -> int:
        return self.strength + self.bonus_strength

    @property
    def effective_defense(self) -> int:
        return self.defense + self.bonus_defense

    def add_temporary_bonus(self, strength: int = 0, defense: int = 0) -> None:
        self.bonus_strength += strength
        self.bonus_defense += defense

    def clear_temporary_bonuses(self) -> None:
        self.bonus_strength = 0
        self.bonus_defense = 0


class EquipmentComponent(Component):
    """Component for the equipped weapon and armor pieces.

    At most one weapon and at most one armor piece per slot.
    """

    component_type = ComponentType.EQUIPMENT

    def __init__(self, entity: "Entity"):
        super().__init__(entity)
        self.weapon: Optional["Weapon"] = None
        self.armor: dict[ArmorSlot, "Armor"] = {}

    def equip_weapon(self, weapon: "Weapon") -> Optional["Weapon"]:
        """Equip a weapon, returning the one it replaced."""
        previous = self.weapon
        self.weapon = weapon
        return previous

    def equip_armor(self, armor: "Armor") -> Optional["Armor"]:
        """Equip an armor piece into its slot, returning the replaced piece."""
        previous = self.armor.get(armor.slot)
        self.armor[armor.slot] = armor
        return previous

    def get_damage_reductions(self) -> list[float]:
        """Reduction fraction of every equipped armor piece."""
        return [piece.calculate_damage_reduction() for piece in self.armor.values()]

    def get_armor_defense(self) -> int:
        return sum(piece.defense for piece in self.armor.values())


class InventoryComponent(Component):
    """Component for carried items.

    Items are kept in insertion order. A separate stack remembers the
    potions used most recently.
    """

    component_type = ComponentType.INVENTORY

    def __init__(self, entity: "Entity", capacity: int = DEFAULT_INVENTORY_SIZE):
        super().__init__(entity)
        self.capacity = capacity
        self.items: list["Item"] = []
        self.recently_used: list["Item"] = []

    @property
    def is_full(self) -> bool:
        return len(self.items) >= self.capacity

    def add_item(self, item: "Item") -> None:
        """Add an item.

        Raises:
            InventoryFullError: If the inventory is at capacity
        """
        if self.is_full:
            raise InventoryFullError(item.name, self.capacity)
        self.items.append(item)

    def remove_item(self, item: "Item") -> bool:
        """Remove a specific item instance. Returns False if absent."""
        for index, held in enumerate(self.items):
            if held is item:
                del self.items[index]
                return True
        return False

    def find_item(self, name: str) -> Optional["Item"]:
        """First item with exactly this name, in insertion order."""
        for item in self.items:
            if item.name == name:
                return item
        return None

    def find_items_by_type(self, item_type: type) -> list["Item"]:
        return [item for item in self.items if isinstance(item, item_type)]

    def get_items_by_rarity(self, rarity: ItemRarity) -> list["Item"]:
        return [item for item in self.items if item.rarity == rarity]

    def push_recently_used(self, item: "Item") -> None:
        self.recently_used.append(item)

    def pop_recently_used(self) -> Optional["Item"]:
        return self.recently_used.pop() if self.recently_used else None

    def peek_recently_used(self) -> Optional["Item"]:
        return self.recently_used[-1] if self.recently_used else None


class ProgressionComponent(Component):
    """Component for level, experience and gold.

    Experience is kept as the remainder toward the next level. Reaching
    ``level * EXPERIENCE_PER_LEVEL`` points spends them and grants a level.
    """

    component_type = ComponentType.PROGRESSION

    def __init__(self, entity: "Entity", level: int = 1, experience: int = 0, gold: int = 0):
        super().__init__(entity)
        if level < 1:
            raise ValueError("Level must be at least 1")
        self.level = level
        self.experience = experience
        self.gold = gold

    @property
    def experience_to_next_level(self) -> int:
        return self.level * EXPERIENCE_PER_LEVEL

    def add_experience(self, amount: int) -> int:
        """Add experience and convert it into levels.

        Returns:
            Number of levels gained
        """
        if amount < 0:
            raise ValueError("Experience amount cannot be negative")

        self.experience += amount
        levels_gained = 0
        while self.experience >= self.experience_to_next_level:
            self.experience -= self.experience_to_next_level
            self.level += 1
            levels_gained += 1
        return levels_gained

    def add_gold(self, amount: int) -> None:
        if amount < 0:
            raise ValueError("Gold amount cannot be negative")
        self.gold += amount

    def spend_gold(self, amount: int) -> bool:
        """Spend gold if enough is available."""
        if amount < 0:
            raise ValueError("Gold amount cannot be negative")
        if self.gold >= amount:
            self.gold -= amount
            return True
        return False
