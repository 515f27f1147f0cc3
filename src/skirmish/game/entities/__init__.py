"""Combatant entities.

This package contains everything a combatant is built from:
- components.py: Identity, health, mana, combat, equipment, inventory, progression
- archetypes.py: Archetype special resources and their lookup table
- archetype_templates.py: YAML-backed archetype templates
- items.py: Weapons, armor and potions
- combatant.py: The Combatant facade over an Entity
"""

from .items import Item, Weapon, Armor, Potion
from .archetypes import (
    SpecialResource,
    RageResource,
    ArcaneResource,
    FocusResource,
    SPECIAL_RESOURCES,
    create_special_resource,
)
from .archetype_templates import ArchetypeTemplate, get_template, create_combatant_entity
from .combatant import Combatant

__all__ = [
    "Item",
    "Weapon",
    "Armor",
    "Potion",
    "SpecialResource",
    "RageResource",
    "ArcaneResource",
    "FocusResource",
    "SPECIAL_RESOURCES",
    "create_special_resource",
    "ArchetypeTemplate",
    "get_template",
    "create_combatant_entity",
    "Combatant",
]
