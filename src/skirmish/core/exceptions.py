"""Exception hierarchy for the encounter engine."""

from .data.game_enums import COMPONENT_TYPE_NAMES, ComponentType


class SkirmishError(Exception):
    """Base exception for encounter engine errors."""
    pass


class EncounterEndedError(SkirmishError):
    """Raised when an intent is queued after the encounter has ended."""

    def __init__(self, operation: str, reason: str = "the encounter has already ended"):
        super().__init__(f"Cannot {operation}: {reason}")
        self.operation = operation
        self.reason = reason


class ItemNotFoundError(SkirmishError):
    """Raised when a named item is not in a combatant's inventory."""

    def __init__(self, item_name: str):
        super().__init__(f"Item not found: {item_name}")
        self.item_name = item_name


class InventoryFullError(SkirmishError):
    """Raised when adding an item to an inventory at capacity."""

    def __init__(self, item_name: str, capacity: int):
        super().__init__(f"Cannot add {item_name}: inventory is full ({capacity} items)")
        self.item_name = item_name
        self.capacity = capacity


class InvariantViolationError(SkirmishError):
    """Raised when combatant state leaves its legal bounds.

    This signals a programming error and is never recovered by the engine.
    """

    def __init__(self, combatant_name: str, detail: str):
        super().__init__(f"Invariant violated for {combatant_name}: {detail}")
        self.combatant_name = combatant_name
        self.detail = detail


class ComponentError(SkirmishError):
    """Base exception for entity composition errors."""

    def __init__(self, message: str, entity_id: str, component_type: ComponentType):
        super().__init__(message)
        self.entity_id = entity_id
        self.component_type = component_type


class MissingComponentError(ComponentError):
    """Raised when an entity has no component in the requested slot."""

    def __init__(self, entity_id: str, component_type: ComponentType):
        super().__init__(f"Entity {entity_id} has no {COMPONENT_TYPE_NAMES[component_type]} component",
                         entity_id, component_type)


class DuplicateComponentError(ComponentError):
    """Raised when a component is attached to an occupied slot."""

    def __init__(self, entity_id: str, component_type: ComponentType):
        super().__init__(f"Entity {entity_id} already has a {COMPONENT_TYPE_NAMES[component_type]} component",
                         entity_id, component_type)
