"""Encounter state for a two-combatant battle.

:class:`EncounterState` is the single mutable record of an encounter: the two
combatants, the pending action queue, the phase of the state machine and the
recorded outcome. It moves from ``ACTIVE`` to ``ENDED`` exactly once; the
transition closes the action queue so no further intents can be accepted.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, Optional

from .action_queue import ActionQueue

if TYPE_CHECKING:
    from ...game.entities.combatant import Combatant
    from ...game.managers.log_manager import BattleLog


class EncounterPhase(Enum):
    """Phases of the encounter state machine."""

    ACTIVE = auto()  # Intents are accepted and resolved
    ENDED = auto()   # Terminal: winner (or escape) recorded


@dataclass
class EncounterState:
    """Mutable state of one encounter."""

    player: "Combatant"
    opponent: "Combatant"
    log: "BattleLog"
    queue: ActionQueue = field(default_factory=ActionQueue)
    phase: EncounterPhase = EncounterPhase.ACTIVE
    winner: Optional["Combatant"] = None
    fled: bool = False
    turn: int = 0  # Number of intents resolved so far
    encounter_id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def is_ended(self) -> bool:
        return self.phase == EncounterPhase.ENDED

    def opponent_of(self, combatant: "Combatant") -> "Combatant":
        """Get the other combatant of the encounter."""
        if combatant is self.player:
            return self.opponent
        if combatant is self.opponent:
            return self.player
        raise ValueError(f"{combatant.name} is not part of this encounter")

    def end(self, winner: Optional["Combatant"] = None, fled: bool = False) -> None:
        """Transition to the terminal phase.

        Args:
            winner: The victorious combatant, or None for an escape
            fled: Whether the encounter ended by a successful flee
        """
        if self.is_ended:
            raise RuntimeError("Encounter has already ended")

        self.phase = EncounterPhase.ENDED
        self.winner = winner
        self.fled = fled
        self.queue.close()
