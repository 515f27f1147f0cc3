"""Encounter gameplay.

This package contains the combat model built on the core engine:
- entities/: Combatants, their components and items
- combat/: Intent resolution and combat formulas
- ai/: Opponent policies
- managers/: Turn processing and the battle log
- scenarios/: YAML encounter loading
- battle_system.py: Caller-facing encounter facade
"""
