"""Item definitions: weapons, armor and potions.

Items are plain data holders with a small amount of behavior. Only potions
are usable in combat; weapons and armor contribute through equipment.
"""

from typing import TYPE_CHECKING, Optional

import numpy as np

from ...core.data import ArmorSlot, ItemRarity, PotionType, WeaponType, POTION_EFFECTS

if TYPE_CHECKING:
    from .combatant import Combatant


class Item:
    """Base class for everything that can sit in an inventory."""

    def __init__(self, name: str, description: str = "", weight: int = 1,
                 base_price: int = 0, rarity: ItemRarity = ItemRarity.COMMON):
        self.name = name
        self.description = description
        self.weight = weight
        self.base_price = base_price
        self.rarity = rarity

    @property
    def is_usable(self) -> bool:
        """Whether the item can be consumed with a USE_ITEM intent."""
        return False

    def can_use(self, target: "Combatant") -> bool:
        return False

    def use(self, target: "Combatant") -> bool:
        return False

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r}, rarity={self.rarity.name})"


class Weapon(Item):
    """Equippable weapon that contributes a damage roll to attacks."""

    def __init__(self, name: str, min_damage: int, max_damage: int,
                 weapon_type: WeaponType = WeaponType.SWORD, **kwargs):
        super().__init__(name, **kwargs)
        if min_damage < 0 or max_damage < min_damage:
            raise ValueError(f"Invalid damage range for {name}: {min_damage}-{max_damage}")
        self.min_damage = min_damage
        self.max_damage = max_damage
        self.weapon_type = weapon_type

    def calculate_damage(self, rng: np.random.Generator) -> int:
        """Roll weapon damage uniformly in [min_damage, max_damage]."""
        return int(rng.integers(self.min_damage, self.max_damage + 1))


class Armor(Item):
    """Equippable armor piece occupying one slot.

    ``damage_reduction`` is the fraction of incoming damage this piece
    absorbs. When not given it is derived from defense (1% per point).
    """

    def __init__(self, name: str, defense: int, slot: ArmorSlot,
                 damage_reduction: Optional[float] = None, **kwargs):
        super().__init__(name, **kwargs)
        self.defense = defense
        self.slot = slot
        if damage_reduction is None:
            damage_reduction = defense / 100
        if not 0.0 <= damage_reduction <= 1.0:
            raise ValueError(f"Damage reduction must be within [0, 1], got {damage_reduction}")
        self.damage_reduction = damage_reduction

    def calculate_damage_reduction(self) -> float:
        return self.damage_reduction


class Potion(Item):
    """Consumable with a limited number of uses."""

    def __init__(self, name: str, potion_type: PotionType, potency: int,
                 max_uses: int = 1, **kwargs):
        kwargs.setdefault("description", POTION_EFFECTS[potion_type])
        super().__init__(name, **kwargs)
        if max_uses < 1:
            raise ValueError("A potion needs at least one use")
        self.potion_type = potion_type
        self.potency = potency
        self.max_uses = max_uses
        self.remaining_uses = max_uses

    @property
    def is_usable(self) -> bool:
        return True

    @property
    def is_exhausted(self) -> bool:
        return self.remaining_uses <= 0

    def can_use(self, target: "Combatant") -> bool:
        """Check whether drinking the potion would have any effect.

        Health and mana potions are refused at full health/mana; other
        potions only need a remaining use.
        """
        if self.is_exhausted:
            return False
        if self.potion_type == PotionType.HEALTH:
            return target.current_health < target.max_health
        if self.potion_type == PotionType.MANA:
            return target.current_mana < target.max_mana
        return True

    def use(self, target: "Combatant") -> bool:
        """Apply the potion's effect and spend one use.

        Returns:
            True if the potion was used
        """
        if not self.can_use(target):
            return False

        if self.potion_type == PotionType.HEALTH:
            target.heal(self.potency)
        elif self.potion_type == PotionType.MANA:
            target.restore_mana(self.potency)
        elif self.potion_type == PotionType.STRENGTH:
            target.combat.add_temporary_bonus(strength=self.potency)
        elif self.potion_type == PotionType.DEFENSE:
            target.combat.add_temporary_bonus(defense=self.potency)

        self.remaining_uses -= 1
        return True

    def __repr__(self) -> str:
        return (f"Potion({self.name!r}, {self.potion_type.name}, potency={self.potency}, "
                f"uses={self.remaining_uses}/{self.max_uses})")
