"""Encounter events and context.

This module defines all events that encounter systems can subscribe to.

Event Design Principles:
- Events are immutable dataclasses with rich object payloads
- All events carry the encounter turn counter at the time they were raised
- Events use rich objects (Combatant, BattleAction) instead of primitive fields
- Keep event types focused and avoid over-granular events
"""

from dataclasses import dataclass, field
from typing import Optional, TYPE_CHECKING
from abc import ABC
from enum import Enum, auto

if TYPE_CHECKING:
    from ..engine.actions import BattleAction, ActionOutcome
    from ...game.entities.combatant import Combatant


class EventType(Enum):
    """Types of encounter events that systems can subscribe to."""
    # Encounter lifecycle
    ENCOUNTER_STARTED = auto()
    ENCOUNTER_ENDED = auto()

    # Queue and resolution
    ACTION_QUEUED = auto()
    ACTION_RESOLVED = auto()
    ACTION_SKIPPED = auto()

    # Combatant events
    COMBATANT_DEFEATED = auto()
    LEVEL_GAINED = auto()

    # Logging
    LOG_MESSAGE = auto()
    DEBUG_MESSAGE = auto()


@dataclass(frozen=True)
class GameEvent(ABC):
    """Base class for all encounter events."""
    turn: int
    event_type: EventType = field(init=False)


@dataclass(frozen=True)
class EncounterStarted(GameEvent):
    """Event emitted when an encounter begins."""
    player: "Combatant"
    opponent: "Combatant"

    def __post_init__(self):
        # Set event_type since dataclass frozen=True prevents normal assignment
        object.__setattr__(self, 'event_type', EventType.ENCOUNTER_STARTED)


@dataclass(frozen=True)
class EncounterEnded(GameEvent):
    """Event emitted when an encounter reaches its terminal state.

    ``winner`` is None when the encounter ended by a successful flee.
    """
    winner: Optional["Combatant"]
    loser: Optional["Combatant"]
    fled: bool = False

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.ENCOUNTER_ENDED)


@dataclass(frozen=True)
class ActionQueued(GameEvent):
    """Event emitted when an intent is appended to the action queue."""
    action: "BattleAction"
    queue_size: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.ACTION_QUEUED)


@dataclass(frozen=True)
class ActionResolved(GameEvent):
    """Event emitted after an intent has been resolved."""
    action: "BattleAction"
    outcome: "ActionOutcome"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.ACTION_RESOLVED)


@dataclass(frozen=True)
class ActionSkipped(GameEvent):
    """Event emitted when an intent is discarded without being resolved."""
    action: "BattleAction"
    reason: str

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.ACTION_SKIPPED)


@dataclass(frozen=True)
class CombatantDefeated(GameEvent):
    """Event emitted when a combatant's health reaches zero."""
    combatant: "Combatant"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.COMBATANT_DEFEATED)


@dataclass(frozen=True)
class LevelGained(GameEvent):
    """Event emitted when a combatant levels up."""
    combatant: "Combatant"
    new_level: int

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.LEVEL_GAINED)


@dataclass(frozen=True)
class LogMessage(GameEvent):
    """Event emitted when a log message is created."""
    message: str
    category: str
    source: str
    level: str = "INFO"

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.LOG_MESSAGE)


@dataclass(frozen=True)
class DebugMessage(GameEvent):
    """Event emitted for debug-specific messages."""
    message: str
    source: str
    context: Optional[dict] = None

    def __post_init__(self):
        object.__setattr__(self, 'event_type', EventType.DEBUG_MESSAGE)
