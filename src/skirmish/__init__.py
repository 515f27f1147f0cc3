"""Turn-based two-combatant encounter engine."""

from .core.data import ActionKind, ArchetypeKind
from .core.engine import ActionOutcome, BattleAction
from .core.exceptions import (
    SkirmishError,
    EncounterEndedError,
    ItemNotFoundError,
    InventoryFullError,
    InvariantViolationError,
)
from .game.battle_system import BattleSystem
from .game.entities import Combatant, Weapon, Armor, Potion
from .game.scenarios import EncounterLoader

__version__ = "0.1.0"

__all__ = [
    "ActionKind",
    "ArchetypeKind",
    "ActionOutcome",
    "BattleAction",
    "SkirmishError",
    "EncounterEndedError",
    "ItemNotFoundError",
    "InventoryFullError",
    "InvariantViolationError",
    "BattleSystem",
    "Combatant",
    "Weapon",
    "Armor",
    "Potion",
    "EncounterLoader",
]
