"""Archetype special resources.

Each archetype owns one :class:`SpecialResource` component that gates its
special ability and may add a bonus to ordinary attacks:

- Warrior: Rage, built by taking hits, spent on Berserk (double damage)
- Mage: Mana, spent on Fireball (attack damage plus spell power)
- Archer: Focus, built by attacking, spent on Aimed Shot (1.5x damage)

Combatants never subclass per archetype; the resource is picked from
``SPECIAL_RESOURCES`` when the combatant is assembled.
"""

import math
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Mapping, Optional

from ...core.data import ArchetypeKind, ComponentType
from ...core.entities import Component

if TYPE_CHECKING:
    from ...core.entities import Entity
    from .combatant import Combatant


class SpecialResource(Component, ABC):
    """Capability interface for an archetype's special ability."""

    component_type = ComponentType.RESOURCE
    resource_name = ""

    @property
    @abstractmethod
    def current(self) -> int:
        pass

    @property
    @abstractmethod
    def maximum(self) -> int:
        pass

    def attack_bonus(self) -> int:
        """Extra damage added to every ordinary attack."""
        return 0

    def on_damage_taken(self, amount: int) -> None:
        """Hook called after the owner takes a hit."""
        pass

    def on_attack_made(self) -> None:
        """Hook called after the owner performs an ordinary attack."""
        pass

    @abstractmethod
    def attempt_special(self, owner: "Combatant", target: "Combatant") -> bool:
        """Spend the resource and apply the special ability to ``target``.

        Returns:
            False without side effects when the resource is insufficient
        """
        pass

    def describe(self) -> str:
        return f"{self.resource_name}: {self.current}/{self.maximum}"


class RageResource(SpecialResource):
    """Warrior rage, gained on every hit taken."""

    resource_name = "Rage"

    def __init__(self, entity: "Entity", max_rage: int = 100, rage_per_hit: int = 10,
                 special_cost: int = 50, special_multiplier: int = 2):
        super().__init__(entity)
        self.rage = 0
        self.max_rage = max_rage
        self.rage_per_hit = rage_per_hit
        self.special_cost = special_cost
        self.special_multiplier = special_multiplier

    @property
    def current(self) -> int:
        return self.rage

    @property
    def maximum(self) -> int:
        return self.max_rage

    def attack_bonus(self) -> int:
        return self.rage // 10

    def on_damage_taken(self, amount: int) -> None:
        self.rage = min(self.max_rage, self.rage + self.rage_per_hit)

    def attempt_special(self, owner: "Combatant", target: "Combatant") -> bool:
        if self.rage < self.special_cost:
            return False
        self.rage -= self.special_cost
        # Damage uses the rage bonus left after paying the cost
        target.take_damage(owner.compute_attack_damage() * self.special_multiplier)
        return True


class ArcaneResource(SpecialResource):
    """Mage resource backed by the owner's mana pool."""

    resource_name = "Mana"

    def __init__(self, entity: "Entity", special_cost: int = 25, spell_power: int = 20):
        super().__init__(entity)
        self.special_cost = special_cost
        self.spell_power = spell_power

    @property
    def current(self) -> int:
        return self.entity.require_component(ComponentType.MANA).current_mana

    @property
    def maximum(self) -> int:
        return self.entity.require_component(ComponentType.MANA).max_mana

    def attempt_special(self, owner: "Combatant", target: "Combatant") -> bool:
        if not owner.use_mana(self.special_cost):
            return False
        target.take_damage(owner.compute_attack_damage() + self.spell_power)
        return True


class FocusResource(SpecialResource):
    """Archer focus, gained on every ordinary attack."""

    resource_name = "Focus"

    def __init__(self, entity: "Entity", max_focus: int = 100, focus_per_attack: int = 15,
                 special_cost: int = 40, special_multiplier: float = 1.5):
        super().__init__(entity)
        self.focus = 0
        self.max_focus = max_focus
        self.focus_per_attack = focus_per_attack
        self.special_cost = special_cost
        self.special_multiplier = special_multiplier

    @property
    def current(self) -> int:
        return self.focus

    @property
    def maximum(self) -> int:
        return self.max_focus

    def attack_bonus(self) -> int:
        return self.focus // 20

    def on_attack_made(self) -> None:
        self.focus = min(self.max_focus, self.focus + self.focus_per_attack)

    def attempt_special(self, owner: "Combatant", target: "Combatant") -> bool:
        if self.focus < self.special_cost:
            return False
        self.focus -= self.special_cost
        target.take_damage(math.ceil(owner.compute_attack_damage() * self.special_multiplier))
        return True


SPECIAL_RESOURCES: dict[ArchetypeKind, type[SpecialResource]] = {
    ArchetypeKind.WARRIOR: RageResource,
    ArchetypeKind.MAGE: ArcaneResource,
    ArchetypeKind.ARCHER: FocusResource,
}


def create_special_resource(archetype: ArchetypeKind, entity: "Entity",
                            params: Optional[Mapping[str, Any]] = None) -> SpecialResource:
    """Build the special resource component for an archetype.

    Args:
        archetype: Archetype of the combatant being assembled
        entity: Entity the component will be attached to
        params: Constructor overrides from the archetype template
    """
    resource_class = SPECIAL_RESOURCES.get(archetype)
    if resource_class is None:
        raise ValueError(f"No special resource registered for {archetype}")
    return resource_class(entity, **dict(params or {}))
