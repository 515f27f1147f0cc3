"""Opponent AI.

This package contains the opponent decision logic:
- ai_behaviors.py: Opponent policies and their factory
"""

from .ai_behaviors import (
    AIType,
    AIDecision,
    OpponentPolicy,
    BandedPolicy,
    AggressivePolicy,
    PassivePolicy,
    create_opponent_policy,
)

__all__ = [
    "AIType",
    "AIDecision",
    "OpponentPolicy",
    "BandedPolicy",
    "AggressivePolicy",
    "PassivePolicy",
    "create_opponent_policy",
]
