"""Combat systems.

This package contains intent execution and its formulas:
- battle_calculator.py: Mitigation and flee chance formulas
- combat_resolver.py: Per-kind intent execution
"""

from .battle_calculator import BattleCalculator
from .combat_resolver import CombatResolver

__all__ = [
    "BattleCalculator",
    "CombatResolver",
]
