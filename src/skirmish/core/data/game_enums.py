"""Centralized game enums and constants.

This module contains all core enums that are used across multiple modules,
eliminating duplication and providing a single source of truth.
"""

from enum import Enum, auto


class ActionKind(Enum):
    """Kinds of intent a combatant can queue for a turn."""
    ATTACK = auto()
    SPECIAL = auto()
    DEFEND = auto()
    USE_ITEM = auto()
    FLEE = auto()


class ArchetypeKind(Enum):
    """Combatant archetypes with distinct special resources."""
    WARRIOR = auto()
    MAGE = auto()
    ARCHER = auto()


class ArmorSlot(Enum):
    """Equipment slots an armor piece can occupy."""
    HEAD = auto()
    CHEST = auto()
    LEGS = auto()
    HANDS = auto()
    FEET = auto()


class WeaponType(Enum):
    """Weapon families."""
    SWORD = auto()
    AXE = auto()
    STAFF = auto()
    BOW = auto()
    DAGGER = auto()


class PotionType(Enum):
    """Consumable potion effects."""
    HEALTH = auto()
    MANA = auto()
    STRENGTH = auto()
    DEFENSE = auto()


class ItemRarity(Enum):
    """Item rarity tiers, ordered from most to least common."""
    COMMON = 0
    UNCOMMON = 1
    RARE = 2
    EPIC = 3
    LEGENDARY = 4


class ComponentType(Enum):
    """Component type identifiers for the entity system."""
    IDENTITY = "identity"
    HEALTH = "health"
    MANA = "mana"
    COMBAT = "combat"
    EQUIPMENT = "equipment"
    INVENTORY = "inventory"
    PROGRESSION = "progression"
    RESOURCE = "resource"


# Convenience mappings for display
ACTION_KIND_NAMES = {
    ActionKind.ATTACK: "Attack",
    ActionKind.SPECIAL: "Special Ability",
    ActionKind.DEFEND: "Defend",
    ActionKind.USE_ITEM: "Use Item",
    ActionKind.FLEE: "Flee",
}

ARCHETYPE_NAMES = {
    ArchetypeKind.WARRIOR: "Warrior",
    ArchetypeKind.MAGE: "Mage",
    ArchetypeKind.ARCHER: "Archer",
}

POTION_EFFECTS = {
    PotionType.HEALTH: "Restores health points",
    PotionType.MANA: "Restores mana points",
    PotionType.STRENGTH: "Temporarily increases strength",
    PotionType.DEFENSE: "Temporarily increases defense",
}

COMPONENT_TYPE_NAMES = {
    ComponentType.IDENTITY: "Identity",
    ComponentType.HEALTH: "Health",
    ComponentType.MANA: "Mana",
    ComponentType.COMBAT: "Combat",
    ComponentType.EQUIPMENT: "Equipment",
    ComponentType.INVENTORY: "Inventory",
    ComponentType.PROGRESSION: "Progression",
    ComponentType.RESOURCE: "Resource",
}
