"""Core engine systems.

This package contains the domain-independent plumbing of an encounter:
- data/: Enums, balance constants and lookup tables
- entities/: Component and Entity foundation
- events/: Event bus and event definitions
- engine/: Intents, action queue and encounter state
- exceptions.py: Engine exception hierarchy
"""
