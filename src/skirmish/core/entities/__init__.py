"""Entity system foundation.

This package contains the component foundation:
- entity.py: Base Component and Entity classes
"""

from .entity import Component, Entity

__all__ = [
    "Component",
    "Entity",
]
