"""Intents and outcomes for turn-based encounters.

A :class:`BattleAction` is the immutable description of one combatant's
requested action for the current turn. It is produced by the caller (player
intents) or by an opponent policy, consumed exactly once by the combat
resolver, and never mutated. The resolver answers with an
:class:`ActionOutcome`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Optional

from ..data import ActionKind, ACTION_KIND_NAMES, ACTION_PRIORITIES

if TYPE_CHECKING:
    from ...game.entities.combatant import Combatant


@dataclass(frozen=True)
class BattleAction:
    """An immutable intent: who acts, against whom, and how.

    ``priority`` defaults to the value configured for ``kind`` and is only
    consulted when a caller explicitly sorts the queue.
    """

    actor: "Combatant"
    target: "Combatant"
    kind: ActionKind
    item_name: Optional[str] = None
    priority: Optional[int] = field(default=None, compare=False)

    def __post_init__(self):
        if self.kind == ActionKind.USE_ITEM and not self.item_name:
            raise ValueError("USE_ITEM intents require an item name")
        if self.kind != ActionKind.USE_ITEM and self.item_name is not None:
            raise ValueError(f"{self.kind.name} intents cannot carry an item name")
        if self.priority is None:
            object.__setattr__(self, 'priority', ACTION_PRIORITIES[self.kind])

    def get_description(self) -> str:
        """Get human-readable description of the intent."""
        label = ACTION_KIND_NAMES[self.kind]
        if self.kind == ActionKind.USE_ITEM:
            return f"{self.actor.name}: {label} ({self.item_name})"
        return f"{self.actor.name}: {label} -> {self.target.name}"


ActionFilter = Callable[[BattleAction], bool]


@dataclass(frozen=True)
class ActionOutcome:
    """Result of resolving a single intent.

    Attributes:
        description: Human-readable line recorded in the battle log
        success: Whether the action achieved its effect
        amount: Numeric effect reported for the action (raw damage, healing)
        damage_dealt: Health actually removed from the target after mitigation
        fled: True when a flee attempt succeeded
    """

    description: str
    success: bool
    amount: Optional[int] = None
    damage_dealt: Optional[int] = None
    fled: bool = False

    @classmethod
    def succeeded(cls, description: str, amount: Optional[int] = None,
                  damage_dealt: Optional[int] = None) -> "ActionOutcome":
        """Create a successful outcome."""
        return cls(description=description, success=True, amount=amount, damage_dealt=damage_dealt)

    @classmethod
    def failed(cls, description: str) -> "ActionOutcome":
        """Create a failed outcome."""
        return cls(description=description, success=False)

    @classmethod
    def escaped(cls, description: str) -> "ActionOutcome":
        """Create the outcome of a successful flee."""
        return cls(description=description, success=True, fled=True)
