"""Component-based combatant.

:class:`Combatant` wraps an :class:`Entity` assembled from an archetype
template and exposes the operations the encounter engine consumes: damage
intake with armor mitigation, healing, mana, attack damage and the special
ability hook. Archetype behavior lives in the ``SpecialResource`` component,
never in subclasses.
"""

import math
from typing import TYPE_CHECKING, Optional, Union

import numpy as np

from ...core.data import ArchetypeKind, ComponentType, ItemRarity
from ...core.data.game_info import SHIELD_BLOCK_DAMAGE_FRACTION, SHIELD_BLOCK_MANA_COST
from ...core.exceptions import InvariantViolationError, ItemNotFoundError
from ..combat.battle_calculator import BattleCalculator
from .archetype_templates import create_combatant_entity, get_template
from .items import Armor, Item, Weapon

if TYPE_CHECKING:
    from .archetypes import SpecialResource
    from .components import (
        IdentityComponent, HealthComponent, ManaComponent, CombatComponent,
        EquipmentComponent, InventoryComponent, ProgressionComponent,
    )


class Combatant:
    """One side of an encounter.

    Property Access Patterns:
    1. **Core properties**: combatant.name, combatant.current_health,
       combatant.is_alive, combatant.level
    2. **Component access**: combatant.combat.strength,
       combatant.inventory.capacity, combatant.resource.current

    Examples:
        hero = Combatant("Conan", ArchetypeKind.WARRIOR, rng=np.random.default_rng(7))
        hero.equip_weapon(sword)  # sword must already be in the inventory
        damage = hero.compute_attack_damage()
        actual = villain.take_damage(damage)
    """

    def __init__(self, name: str, archetype: ArchetypeKind, level: int = 1,
                 rng: Optional[np.random.Generator] = None, combatant_id: Optional[str] = None):
        """Initialize combatant using the component system.

        Args:
            name: Display name
            archetype: Archetype enum selecting the template and special resource
            level: Starting level, growth is applied for every level above 1
            rng: Random generator for weapon rolls
            combatant_id: Optional custom ID
        """
        if level < 1:
            raise ValueError("Level must be at least 1")

        self.entity = create_combatant_entity(name, archetype)
        self.rng = rng if rng is not None else np.random.default_rng()

        if combatant_id is not None:
            self.entity.entity_id = combatant_id

        for _ in range(level - 1):
            self._progression.level += 1
            self._apply_level_growth()

    # ============== Core Properties ==============

    @property
    def combatant_id(self) -> str:
        return self.entity.entity_id

    @property
    def name(self) -> str:
        return self._identity.name

    @property
    def archetype(self) -> ArchetypeKind:
        return self._identity.archetype

    @property
    def archetype_name(self) -> str:
        return self._identity.get_archetype_name()

    @property
    def level(self) -> int:
        return self._progression.level

    @property
    def experience(self) -> int:
        return self._progression.experience

    @property
    def gold(self) -> int:
        return self._progression.gold

    @property
    def current_health(self) -> int:
        return self._health.current_health

    @property
    def max_health(self) -> int:
        return self._health.max_health

    @property
    def current_mana(self) -> int:
        return self._mana.current_mana

    @property
    def max_mana(self) -> int:
        return self._mana.max_mana

    @property
    def base_strength(self) -> int:
        return self._combat.strength

    @property
    def base_defense(self) -> int:
        return self._combat.defense

    @property
    def total_defense(self) -> int:
        """Base defense plus equipped armor defense plus potion bonus."""
        return self._combat.effective_defense + self._equipment.get_armor_defense()

    @property
    def is_alive(self) -> bool:
        return self._health.is_alive()

    @property
    def equipped_weapon(self) -> Optional[Weapon]:
        return self._equipment.weapon

    @property
    def equipped_armor(self) -> dict:
        """Copy of the slot to armor mapping."""
        return dict(self._equipment.armor)

    @property
    def items(self) -> list[Item]:
        """Copy of the inventory contents in insertion order."""
        return list(self._inventory.items)

    # ============== Component Access ==============

    @property
    def identity(self) -> "IdentityComponent":
        return self._identity

    @property
    def health(self) -> "HealthComponent":
        return self._health

    @property
    def mana(self) -> "ManaComponent":
        return self._mana

    @property
    def combat(self) -> "CombatComponent":
        return self._combat

    @property
    def equipment(self) -> "EquipmentComponent":
        return self._equipment

    @property
    def inventory(self) -> "InventoryComponent":
        return self._inventory

    @property
    def progression(self) -> "ProgressionComponent":
        return self._progression

    @property
    def resource(self) -> "SpecialResource":
        return self.entity.require_component(ComponentType.RESOURCE)

    @property
    def _identity(self) -> "IdentityComponent":
        return self.entity.require_component(ComponentType.IDENTITY)

    @property
    def _health(self) -> "HealthComponent":
        return self.entity.require_component(ComponentType.HEALTH)

    @property
    def _mana(self) -> "ManaComponent":
        return self.entity.require_component(ComponentType.MANA)

    @property
    def _combat(self) -> "CombatComponent":
        return self.entity.require_component(ComponentType.COMBAT)

    @property
    def _equipment(self) -> "EquipmentComponent":
        return self.entity.require_component(ComponentType.EQUIPMENT)

    @property
    def _inventory(self) -> "InventoryComponent":
        return self.entity.require_component(ComponentType.INVENTORY)

    @property
    def _progression(self) -> "ProgressionComponent":
        return self.entity.require_component(ComponentType.PROGRESSION)

    # ============== Combat ==============

    def take_damage(self, raw_damage: int) -> int:
        """Take a hit, mitigated by equipped armor.

        Args:
            raw_damage: Incoming damage before mitigation

        Returns:
            Health actually removed
        """
        actual = BattleCalculator.mitigate_damage(raw_damage, self._equipment.get_damage_reductions())
        removed = self._health.take_damage(actual)
        self.resource.on_damage_taken(actual)
        return removed

    def heal(self, amount: int) -> int:
        return self._health.heal(amount)

    def restore_mana(self, amount: int) -> int:
        return self._mana.restore(amount)

    def use_mana(self, amount: int) -> bool:
        """Spend mana; fails unless strictly more than ``amount`` remains."""
        return self._mana.spend(amount)

    def compute_attack_damage(self) -> int:
        """Raw damage of an ordinary attack.

        Strength (including potion bonus), plus a weapon roll when a weapon
        is equipped, plus the archetype resource bonus.
        """
        weapon = self._equipment.weapon
        weapon_damage = weapon.calculate_damage(self.rng) if weapon is not None else 0
        return self._combat.effective_strength + weapon_damage + self.resource.attack_bonus()

    def register_attack(self) -> None:
        """Notify the archetype resource that an ordinary attack was made."""
        self.resource.on_attack_made()

    def attempt_special_ability(self, target: "Combatant") -> bool:
        """Use the archetype special ability against ``target``.

        Returns:
            False when the special resource is insufficient
        """
        return self.resource.attempt_special(self, target)

    def shield_block(self, incoming_damage: int) -> bool:
        """Block with a shield, taking a quarter of the incoming damage.

        Only warriors carry a shield. Costs SHIELD_BLOCK_MANA_COST mana
        under the same strict check as any other mana spend.

        Returns:
            True if the block happened
        """
        if self.archetype != ArchetypeKind.WARRIOR:
            raise ValueError(f"{self.archetype_name} cannot shield block")
        if not self.use_mana(SHIELD_BLOCK_MANA_COST):
            return False

        self.take_damage(math.ceil(incoming_damage * SHIELD_BLOCK_DAMAGE_FRACTION))
        return True

    def clear_temporary_effects(self) -> None:
        self._combat.clear_temporary_bonuses()

    def check_invariants(self) -> None:
        """Verify health and mana are within their bounds.

        Raises:
            InvariantViolationError: If either pool left [0, max]
        """
        if not 0 <= self.current_health <= self.max_health:
            raise InvariantViolationError(
                self.name, f"health {self.current_health} outside [0, {self.max_health}]")
        if not 0 <= self.current_mana <= self.max_mana:
            raise InvariantViolationError(
                self.name, f"mana {self.current_mana} outside [0, {self.max_mana}]")

    # ============== Inventory ==============

    def add_item(self, item: Item) -> None:
        self._inventory.add_item(item)

    def remove_item(self, item: Union[Item, str]) -> bool:
        """Remove an item by instance or by exact name."""
        if isinstance(item, str):
            item = self._inventory.find_item(item)
            if item is None:
                return False
        return self._inventory.remove_item(item)

    def find_item(self, name: str) -> Optional[Item]:
        return self._inventory.find_item(name)

    def find_items_by_type(self, item_type: type) -> list[Item]:
        return self._inventory.find_items_by_type(item_type)

    def get_items_by_rarity(self, rarity: ItemRarity) -> list[Item]:
        return self._inventory.get_items_by_rarity(rarity)

    def push_recently_used(self, item: Item) -> None:
        self._inventory.push_recently_used(item)

    def pop_recently_used(self) -> Optional[Item]:
        return self._inventory.pop_recently_used()

    def peek_recently_used(self) -> Optional[Item]:
        return self._inventory.peek_recently_used()

    # ============== Equipment ==============

    def equip_weapon(self, weapon: Weapon) -> Optional[Weapon]:
        """Equip a weapon from the inventory.

        The previously equipped weapon, if any, goes back to the inventory.

        Raises:
            ItemNotFoundError: If the weapon is not in the inventory
        """
        if not self._inventory.remove_item(weapon):
            raise ItemNotFoundError(weapon.name)
        previous = self._equipment.equip_weapon(weapon)
        if previous is not None:
            self._inventory.add_item(previous)
        return previous

    def equip_armor(self, armor: Armor) -> Optional[Armor]:
        """Equip an armor piece from the inventory into its slot.

        The piece previously in that slot, if any, goes back to the inventory.

        Raises:
            ItemNotFoundError: If the armor is not in the inventory
        """
        if not self._inventory.remove_item(armor):
            raise ItemNotFoundError(armor.name)
        previous = self._equipment.equip_armor(armor)
        if previous is not None:
            self._inventory.add_item(previous)
        return previous

    # ============== Progression ==============

    def gain_experience(self, amount: int) -> list[int]:
        """Add experience, leveling up as many times as it allows.

        Each level gained applies the archetype growth and refills health
        and mana.

        Returns:
            The new levels reached, in order
        """
        start_level = self.level
        levels_gained = self._progression.add_experience(amount)
        for _ in range(levels_gained):
            self._apply_level_growth()
        return list(range(start_level + 1, start_level + levels_gained + 1))

    def add_gold(self, amount: int) -> None:
        self._progression.add_gold(amount)

    def spend_gold(self, amount: int) -> bool:
        return self._progression.spend_gold(amount)

    def _apply_level_growth(self) -> None:
        growth = get_template(self.archetype).level_up
        self._health.increase_max(growth.get("max_health", 0))
        self._mana.increase_max(growth.get("max_mana", 0))
        self._combat.strength += growth.get("strength", 0)
        self._combat.defense += growth.get("defense", 0)
        self._health.restore_full()
        self._mana.restore_full()

    def __str__(self) -> str:
        return (f"{self.archetype_name}: {self.name} (Level {self.level}) - "
                f"HP: {self.current_health}/{self.max_health}, "
                f"Mana: {self.current_mana}/{self.max_mana}, Gold: {self.gold} | "
                f"{self.resource.describe()}")

    def __repr__(self) -> str:
        return f"Combatant({self.name!r}, {self.archetype.name}, level={self.level})"
