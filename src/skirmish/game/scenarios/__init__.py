"""Encounter definitions.

This package contains encounter loading:
- encounter_loader.py: YAML encounter files to ready-to-run battles
"""

from .encounter_loader import Encounter, EncounterLoader, BUNDLED_ENCOUNTER_DIR

__all__ = [
    "Encounter",
    "EncounterLoader",
    "BUNDLED_ENCOUNTER_DIR",
]
