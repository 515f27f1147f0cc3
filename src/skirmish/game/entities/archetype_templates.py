"""Archetype templates for component initialization.

This module defines how each archetype is configured with components.
Templates are loaded from ``assets/data/archetypes.yaml`` and converted to
data structures that give the initial values for each component, the growth
applied on level up and the special resource parameters.
"""

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict

import yaml

from ...core.data import ArchetypeKind

if TYPE_CHECKING:
    from ...core.entities import Entity


@dataclass
class ArchetypeTemplate:
    """Template for initializing a combatant's components.

    Each field corresponds to a component and holds the keyword arguments
    passed to that component's constructor.
    """
    # HealthComponent initialization
    health: Dict[str, int]

    # ManaComponent initialization
    mana: Dict[str, int]

    # CombatComponent initialization
    combat: Dict[str, int]

    # Growth applied once per level gained
    level_up: Dict[str, int]

    # SpecialResource initialization
    resource: Dict[str, Any]


def _load_archetype_templates() -> Dict[ArchetypeKind, ArchetypeTemplate]:
    """Load archetype templates from the bundled YAML file.

    Returns:
        Dictionary mapping ArchetypeKind enums to ArchetypeTemplate objects
    """
    # The package root is two levels up from this file
    current_dir = os.path.dirname(os.path.abspath(__file__))
    package_root = os.path.dirname(os.path.dirname(current_dir))
    yaml_path = os.path.join(package_root, "assets", "data", "archetypes.yaml")

    try:
        with open(yaml_path, 'r') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Archetype templates file not found: {yaml_path}")

    try:
        templates = {}
        for archetype_name, template_data in data["archetype_templates"].items():
            archetype = ArchetypeKind[archetype_name]
            templates[archetype] = ArchetypeTemplate(
                health=template_data["health"],
                mana=template_data["mana"],
                combat=template_data["combat"],
                level_up=template_data["level_up"],
                resource=template_data.get("resource", {}),
            )
        return templates

    except KeyError as e:
        raise KeyError(f"Invalid template structure in {yaml_path}: {e}")


# Load templates from YAML file
ARCHETYPE_TEMPLATES: Dict[ArchetypeKind, ArchetypeTemplate] = _load_archetype_templates()


def get_template(archetype: ArchetypeKind) -> ArchetypeTemplate:
    """Get the component template for an archetype.

    Raises:
        KeyError: If the archetype has no template
    """
    if archetype not in ARCHETYPE_TEMPLATES:
        raise KeyError(f"No template found for archetype: {archetype}")

    return ARCHETYPE_TEMPLATES[archetype]


def create_combatant_entity(name: str, archetype: ArchetypeKind) -> "Entity":
    """Create a complete combatant entity from its archetype template.

    The entity starts at level 1 with the template's base statistics; the
    caller applies growth for any further levels.

    Returns:
        Entity with all combatant components configured
    """
    from ...core.entities import Entity
    from .archetypes import create_special_resource
    from .components import (
        IdentityComponent, HealthComponent, ManaComponent, CombatComponent,
        EquipmentComponent, InventoryComponent, ProgressionComponent,
    )

    template = get_template(archetype)

    entity = Entity()
    return entity.attach(
        IdentityComponent(entity, name, archetype),
        HealthComponent(entity, **template.health),
        ManaComponent(entity, **template.mana),
        CombatComponent(entity, **template.combat),
        EquipmentComponent(entity),
        InventoryComponent(entity),
        ProgressionComponent(entity),
        create_special_resource(archetype, entity, template.resource),
    )
