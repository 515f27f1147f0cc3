"""Encounter managers.

This package contains the systems that run an encounter:
- turn_manager.py: Queue draining and the encounter state machine
- log_manager.py: Append-only battle log
"""

from .log_manager import BattleLog, LogCategory, LogEntry, LogLevel
from .turn_manager import TurnProcessor

__all__ = [
    "BattleLog",
    "LogCategory",
    "LogEntry",
    "LogLevel",
    "TurnProcessor",
]
