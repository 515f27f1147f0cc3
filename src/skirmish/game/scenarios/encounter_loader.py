"""
Encounter loading from YAML definitions.

An encounter file names the two combatants (archetype, level, gear and
inventory), the opponent policy and an optional seed. The seed drives one
shared generator used for weapon rolls, flee draws and the policy.
"""
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import numpy as np
import yaml

from ...core.data import ArchetypeKind, ArmorSlot, ItemRarity, PotionType, WeaponType
from ..ai.ai_behaviors import AIType, create_opponent_policy
from ..battle_system import BattleSystem
from ..entities.combatant import Combatant
from ..entities.items import Armor, Item, Potion, Weapon

BUNDLED_ENCOUNTER_DIR = os.path.join(
    os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))),
    "assets", "data", "encounters",
)


@dataclass
class Encounter:
    """A loaded encounter definition, ready to start."""

    name: str
    player: Combatant
    opponent: Combatant
    description: str = ""
    seed: Optional[int] = None
    ai_type: AIType = AIType.BANDED
    rng: np.random.Generator = field(default_factory=np.random.default_rng)

    def create_battle(self) -> BattleSystem:
        """Start a battle between the two loaded combatants."""
        policy = create_opponent_policy(self.ai_type, self.rng)
        return BattleSystem(self.player, self.opponent, rng=self.rng, policy=policy)


class EncounterLoader:
    """Handles loading encounters from YAML files."""

    @staticmethod
    def load_from_file(file_path: str) -> Encounter:
        """Load an encounter from a YAML file."""
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Encounter file not found: {file_path}")
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML encounter: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"Encounter file {Path(file_path).name} must contain a mapping")

        return EncounterLoader._parse_encounter(data)

    @staticmethod
    def load_bundled(name: str) -> Encounter:
        """Load one of the encounters shipped with the package, by file stem."""
        return EncounterLoader.load_from_file(os.path.join(BUNDLED_ENCOUNTER_DIR, f"{name}.yaml"))

    @staticmethod
    def list_bundled() -> list[str]:
        if not os.path.isdir(BUNDLED_ENCOUNTER_DIR):
            return []
        return sorted(Path(entry).stem for entry in os.listdir(BUNDLED_ENCOUNTER_DIR)
                      if entry.endswith((".yaml", ".yml")))

    @staticmethod
    def _parse_encounter(data: dict[str, Any]) -> Encounter:
        """Parse encounter data from a dictionary."""
        for required in ("player", "opponent"):
            if required not in data:
                raise ValueError(f"Encounter is missing '{required}'")

        seed = data.get("seed")
        rng = np.random.default_rng(seed)

        try:
            ai_type = AIType[data.get("policy", "BANDED").upper()]
        except KeyError:
            raise ValueError(f"Unknown opponent policy: {data.get('policy')}")

        return Encounter(
            name=data.get("name", "Unnamed Encounter"),
            description=data.get("description", ""),
            player=EncounterLoader._parse_combatant(data["player"], rng),
            opponent=EncounterLoader._parse_combatant(data["opponent"], rng),
            seed=seed,
            ai_type=ai_type,
            rng=rng,
        )

    @staticmethod
    def _parse_combatant(data: dict[str, Any], rng: np.random.Generator) -> Combatant:
        try:
            archetype = ArchetypeKind[data["archetype"].upper()]
        except KeyError as e:
            raise ValueError(f"Invalid combatant definition, bad or missing archetype: {e}")

        combatant = Combatant(
            name=data.get("name", archetype.name.title()),
            archetype=archetype,
            level=data.get("level", 1),
            rng=rng,
        )
        if data.get("gold"):
            combatant.add_gold(data["gold"])

        for item_data in data.get("inventory", []):
            combatant.add_item(EncounterLoader._parse_item(item_data))

        if "weapon" in data:
            weapon = EncounterLoader._parse_item({**data["weapon"], "type": "weapon"})
            combatant.add_item(weapon)
            combatant.equip_weapon(weapon)

        for armor_data in data.get("armor", []):
            armor = EncounterLoader._parse_item({**armor_data, "type": "armor"})
            combatant.add_item(armor)
            combatant.equip_armor(armor)

        return combatant

    @staticmethod
    def _parse_item(data: dict[str, Any]) -> Item:
        item_type = data.get("type", "item").lower()

        try:
            common = {
                "description": data.get("description", ""),
                "weight": data.get("weight", 1),
                "base_price": data.get("price", 0),
                "rarity": ItemRarity[data.get("rarity", "COMMON").upper()],
            }
            if item_type == "weapon":
                return Weapon(
                    data["name"],
                    min_damage=data["min_damage"],
                    max_damage=data["max_damage"],
                    weapon_type=WeaponType[data.get("weapon_type", "SWORD").upper()],
                    **common,
                )
            if item_type == "armor":
                return Armor(
                    data["name"],
                    defense=data["defense"],
                    slot=ArmorSlot[data["slot"].upper()],
                    damage_reduction=data.get("damage_reduction"),
                    **common,
                )
            if item_type == "potion":
                if not common["description"]:
                    del common["description"]
                return Potion(
                    data["name"],
                    potion_type=PotionType[data["potion_type"].upper()],
                    potency=data["potency"],
                    max_uses=data.get("uses", 1),
                    **common,
                )
            if item_type == "item":
                return Item(data["name"], **common)
        except KeyError as e:
            raise ValueError(f"Invalid {item_type} definition {data.get('name', '?')}: {e}")

        raise ValueError(f"Unknown item type: {item_type}")
