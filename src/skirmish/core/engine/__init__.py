"""Core encounter engine components.

This package contains the fundamental engine systems:
- actions.py: Immutable intents and resolution outcomes
- action_queue.py: FIFO queue of pending intents
- encounter_state.py: Encounter state machine record
"""

from .actions import BattleAction, ActionOutcome, ActionFilter
from .action_queue import ActionQueue
from .encounter_state import EncounterState, EncounterPhase

__all__ = [
    "BattleAction",
    "ActionOutcome",
    "ActionFilter",
    "ActionQueue",
    "EncounterState",
    "EncounterPhase",
]
