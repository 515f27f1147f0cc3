"""Opponent policy strategy classes.

This module implements the Strategy design pattern for opponent behavior.
Each policy turns the current encounter into a single intent for the
opponent; none of them ever chooses to flee.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import TYPE_CHECKING, Optional

import numpy as np

from ...core.data import ActionKind
from ...core.data.game_info import POLICY_DEFEND_BELOW, POLICY_ROLL_MAX, POLICY_SPECIAL_BELOW
from ...core.engine import BattleAction

if TYPE_CHECKING:
    from ..entities.combatant import Combatant


class AIType(Enum):
    """Available opponent policy types."""
    BANDED = auto()
    AGGRESSIVE = auto()
    PASSIVE = auto()


@dataclass(frozen=True)
class AIDecision:
    """A policy decision and the reason it was taken."""
    kind: ActionKind
    reasoning: str = ""


class OpponentPolicy(ABC):
    """Abstract base class for opponent policies."""

    last_decision: Optional[AIDecision] = None

    @abstractmethod
    def choose_action(self, actor: "Combatant", target: "Combatant") -> AIDecision:
        """Choose the action kind for this turn.

        Args:
            actor: The opponent making the decision
            target: The player it acts against

        Returns:
            AIDecision with the chosen kind
        """
        pass

    @abstractmethod
    def get_behavior_name(self) -> str:
        """Get the name of this policy."""
        pass

    def generate(self, actor: "Combatant", target: "Combatant") -> BattleAction:
        """Produce the opponent's intent for this turn.

        The decision behind it is kept in ``last_decision``.
        """
        self.last_decision = self.choose_action(actor, target)
        return BattleAction(actor=actor, target=target, kind=self.last_decision.kind)


class BandedPolicy(OpponentPolicy):
    """Stochastic policy over fixed probability bands.

    Draws an integer uniformly from [0, 100]:
    - [0, 25): DEFEND
    - [25, 60): SPECIAL
    - [60, 100]: ATTACK
    """

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng()

    def choose_action(self, actor: "Combatant", target: "Combatant") -> AIDecision:
        roll = int(self.rng.integers(0, POLICY_ROLL_MAX + 1))
        return AIDecision(
            kind=self.kind_for_roll(roll),
            reasoning=f"rolled {roll}",
        )

    @staticmethod
    def kind_for_roll(roll: int) -> ActionKind:
        """Map a draw from [0, 100] to its band."""
        if roll < POLICY_DEFEND_BELOW:
            return ActionKind.DEFEND
        if roll < POLICY_SPECIAL_BELOW:
            return ActionKind.SPECIAL
        return ActionKind.ATTACK

    def get_behavior_name(self) -> str:
        return "Banded"


class AggressivePolicy(OpponentPolicy):
    """Policy that always attacks."""

    def choose_action(self, actor: "Combatant", target: "Combatant") -> AIDecision:
        return AIDecision(
            kind=ActionKind.ATTACK,
            reasoning=f"attacking {target.name}",
        )

    def get_behavior_name(self) -> str:
        return "Aggressive"


class PassivePolicy(OpponentPolicy):
    """Policy that always defends."""

    def choose_action(self, actor: "Combatant", target: "Combatant") -> AIDecision:
        return AIDecision(
            kind=ActionKind.DEFEND,
            reasoning="always defends",
        )

    def get_behavior_name(self) -> str:
        return "Passive"


def create_opponent_policy(ai_type: AIType, rng: Optional[np.random.Generator] = None) -> OpponentPolicy:
    """Factory function to create opponent policies.

    Args:
        ai_type: The type of policy to create
        rng: Random generator for stochastic policies

    Returns:
        OpponentPolicy instance
    """
    if ai_type == AIType.BANDED:
        return BandedPolicy(rng)
    elif ai_type == AIType.AGGRESSIVE:
        return AggressivePolicy()
    elif ai_type == AIType.PASSIVE:
        return PassivePolicy()
    else:
        raise ValueError(f"Unknown AI type: {ai_type}")
