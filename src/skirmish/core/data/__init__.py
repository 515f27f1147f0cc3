"""Core data definitions.

This package contains fundamental game definitions:
- game_enums.py: Centralized enums for action kinds, archetypes, items
- game_info.py: Balance constants and static lookup tables
"""

from .game_enums import (
    ActionKind,
    ArchetypeKind,
    ArmorSlot,
    WeaponType,
    PotionType,
    ItemRarity,
    ComponentType,
    ACTION_KIND_NAMES,
    ARCHETYPE_NAMES,
    POTION_EFFECTS,
    COMPONENT_TYPE_NAMES,
)
from .game_info import ACTION_PRIORITIES

__all__ = [
    "ActionKind",
    "ArchetypeKind",
    "ArmorSlot",
    "WeaponType",
    "PotionType",
    "ItemRarity",
    "ComponentType",
    "ACTION_KIND_NAMES",
    "ARCHETYPE_NAMES",
    "POTION_EFFECTS",
    "COMPONENT_TYPE_NAMES",
    "ACTION_PRIORITIES",
]
