"""Event system for publisher-subscriber communication.

This package contains the event-driven plumbing of an encounter:
- event_manager.py: Publisher-subscriber event routing
- events.py: Event definitions for inter-system communication
"""

from .event_manager import EventManager, EventPriority, QueuedEvent
from .events import (
    GameEvent,
    EventType,
    EncounterStarted,
    EncounterEnded,
    ActionQueued,
    ActionResolved,
    ActionSkipped,
    CombatantDefeated,
    LevelGained,
    LogMessage,
    DebugMessage,
)

__all__ = [
    "EventManager",
    "EventPriority",
    "QueuedEvent",
    "GameEvent",
    "EventType",
    "EncounterStarted",
    "EncounterEnded",
    "ActionQueued",
    "ActionResolved",
    "ActionSkipped",
    "CombatantDefeated",
    "LevelGained",
    "LogMessage",
    "DebugMessage",
]
