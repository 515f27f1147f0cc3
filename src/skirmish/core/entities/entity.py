"""Entity and component foundation for combatants.

A combatant's state is split into components, one per :class:`ComponentType`.
Each concrete component names its slot with the ``component_type`` class
attribute, and an :class:`Entity` holds at most one component per slot.
"""

import uuid
from typing import ClassVar

from ..data.game_enums import ComponentType
from ..exceptions import DuplicateComponentError, MissingComponentError


class Component:
    """One slice of a combatant's state, owned by a single entity."""

    component_type: ClassVar[ComponentType]

    def __init__(self, entity: "Entity"):
        self.entity = entity


class Entity:
    """A unique id plus the components attached to it."""

    def __init__(self):
        self.entity_id: str = str(uuid.uuid4())
        self._slots: dict[ComponentType, Component] = {}

    def attach(self, *components: Component) -> "Entity":
        """Attach components, each into its own slot.

        Raises:
            DuplicateComponentError: If a slot is already taken
        """
        for component in components:
            slot = component.component_type
            if slot in self._slots:
                raise DuplicateComponentError(self.entity_id, slot)
            self._slots[slot] = component
        return self

    def require_component(self, component_type: ComponentType) -> Component:
        """Component in the given slot.

        Raises:
            MissingComponentError: If the slot is empty
        """
        try:
            return self._slots[component_type]
        except KeyError:
            raise MissingComponentError(self.entity_id, component_type) from None

    def __contains__(self, component_type: ComponentType) -> bool:
        return component_type in self._slots
