"""
Battle calculation system for the numeric combat formulas.

This module keeps the balance-sensitive formulas (armor mitigation and flee
chance) separate from actual combat resolution, so they can be used for
forecasting and tested without touching combatant state.
"""
from typing import Iterable

import numpy as np

from ...core.data.game_info import (
    FLEE_BASE_CHANCE,
    FLEE_CHANCE_PER_LEVEL,
    MAX_ARMOR_REDUCTION,
)

# Products are rounded to this many decimals before the ceiling so that
# binary float noise (10 * 0.7 == 7.000000000000001) never adds a point.
_ROUNDING_DECIMALS = 9


class BattleCalculator:
    """Pure combat formulas."""

    @staticmethod
    def clamp(value: float, low: float, high: float) -> float:
        """Clamp a value into [low, high]."""
        return max(low, min(high, value))

    @staticmethod
    def total_reduction(reductions: Iterable[float]) -> float:
        """Sum armor reduction fractions, capped at MAX_ARMOR_REDUCTION.

        Args:
            reductions: Damage reduction fraction of each equipped armor piece

        Returns:
            The reduction to apply, in [0, MAX_ARMOR_REDUCTION]
        """
        values = np.fromiter(reductions, dtype=np.float64)
        if values.size == 0:
            return 0.0
        return float(np.clip(values.sum(), 0.0, MAX_ARMOR_REDUCTION))

    @staticmethod
    def mitigate_damage(raw_damage: int, reductions: Iterable[float]) -> int:
        """Calculate the damage that gets through armor.

        ``actual = ceil(raw * (1 - min(0.75, sum(reductions))))``. Rounding is
        always upward, so mitigation never truncates a hit down to zero.

        Args:
            raw_damage: Incoming damage before mitigation
            reductions: Damage reduction fraction of each equipped armor piece

        Returns:
            Damage to subtract from health
        """
        if raw_damage < 0:
            raise ValueError("Damage amount cannot be negative")

        reduction = BattleCalculator.total_reduction(reductions)
        scaled = np.round(raw_damage * (1.0 - reduction), _ROUNDING_DECIMALS)
        return int(np.ceil(scaled))

    @staticmethod
    def flee_chance(actor_level: int, opponent_level: int) -> float:
        """Calculate the probability that a flee attempt succeeds.

        ``chance = clamp(0.30 + (actor_level - opponent_level) * 0.05, 0, 1)``

        Returns:
            Probability in [0.0, 1.0]
        """
        chance = FLEE_BASE_CHANCE + (actor_level - opponent_level) * FLEE_CHANCE_PER_LEVEL
        # Rounded so that 0.30 + 4 * 0.05 reads as 0.5 rather than 0.49999999999999994
        return BattleCalculator.clamp(round(chance, _ROUNDING_DECIMALS), 0.0, 1.0)
