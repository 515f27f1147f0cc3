"""
Combat resolution system for executing intents.

This module holds the per-kind execution logic: it applies an intent to the
two combatants and describes what happened. It does not touch the action
queue or decide when the encounter ends; that is the turn processor's job.
"""
from typing import TYPE_CHECKING, Callable, Optional

import numpy as np

from ...core.data import ActionKind
from ...core.engine import ActionOutcome
from ...core.events import LogMessage
from ...core.exceptions import ItemNotFoundError
from .battle_calculator import BattleCalculator

if TYPE_CHECKING:
    from ...core.engine import BattleAction
    from ...core.events import EventManager


class CombatResolver:
    """Executes intents against combatant state."""

    def __init__(self, event_manager: "EventManager", rng: Optional[np.random.Generator] = None,
                 encounter_id: Optional[str] = None):
        self.event_manager = event_manager
        self.encounter_id = encounter_id
        self.rng = rng if rng is not None else np.random.default_rng()
        self.current_turn = 0

        self._handlers: dict[ActionKind, Callable[["BattleAction"], ActionOutcome]] = {
            ActionKind.ATTACK: self.resolve_attack,
            ActionKind.SPECIAL: self.resolve_special,
            ActionKind.DEFEND: self.resolve_defend,
            ActionKind.USE_ITEM: self.resolve_use_item,
            ActionKind.FLEE: self.resolve_flee,
        }

    def resolve(self, action: "BattleAction", turn: int = 0) -> ActionOutcome:
        """Execute an intent.

        Args:
            action: The intent to execute; its actor is expected to be alive
            turn: Turn number stamped on emitted log events

        Raises:
            ItemNotFoundError: If a USE_ITEM intent names an item the actor lacks
        """
        self.current_turn = turn
        return self._handlers[action.kind](action)

    def resolve_attack(self, action: "BattleAction") -> ActionOutcome:
        """Ordinary attack: raw damage goes through the target's mitigation."""
        actor, target = action.actor, action.target
        raw_damage = actor.compute_attack_damage()
        dealt = target.take_damage(raw_damage)
        actor.register_attack()

        self._emit_log(f"{actor.name} raw {raw_damage}, {target.name} lost {dealt} health", "DEBUG", "DEBUG")
        return ActionOutcome.succeeded(
            f"{actor.name} attacked {target.name} for {raw_damage} damage.",
            amount=raw_damage,
            damage_dealt=dealt,
        )

    def resolve_special(self, action: "BattleAction") -> ActionOutcome:
        """Archetype special ability, gated by the actor's special resource."""
        actor, target = action.actor, action.target
        health_before = target.current_health
        if actor.attempt_special_ability(target):
            return ActionOutcome.succeeded(
                f"{actor.name} used a Special Ability on {target.name}!",
                damage_dealt=health_before - target.current_health,
            )
        return ActionOutcome.failed(
            f"{actor.name} tried to use Special Ability but did not have enough resource."
        )

    def resolve_defend(self, action: "BattleAction") -> ActionOutcome:
        """Defensive stance. Records the stance only; no mechanical effect."""
        self._emit_log(f"{action.actor.name} is defending!", "SYSTEM")
        return ActionOutcome.succeeded(f"{action.actor.name} entered defensive stance.")

    def resolve_use_item(self, action: "BattleAction") -> ActionOutcome:
        """Use a named inventory item on the actor.

        The first item with exactly that name is used. A successful use spends
        one use, removes the item once exhausted and pushes it onto the
        recently-used stack.

        Raises:
            ItemNotFoundError: If no item has that name
        """
        actor = action.actor
        item = actor.find_item(action.item_name)
        if item is None:
            raise ItemNotFoundError(action.item_name)

        if not item.is_usable or not item.use(actor):
            return ActionOutcome.failed(f"{actor.name} failed to use item.")

        if item.is_exhausted:
            actor.remove_item(item)
        actor.push_recently_used(item)
        return ActionOutcome.succeeded(f"{actor.name} used item: {item.name}.")

    def resolve_flee(self, action: "BattleAction") -> ActionOutcome:
        """Attempt to escape; one uniform draw against the flee chance."""
        actor = action.actor
        chance = BattleCalculator.flee_chance(actor.level, action.target.level)
        roll = float(self.rng.random())

        self._emit_log(f"{actor.name} flee roll {roll:.3f} against {chance:.2f}", "DEBUG", "DEBUG")
        if roll < chance:
            return ActionOutcome.escaped(f"{actor.name} fled from battle!")
        return ActionOutcome.failed(f"{actor.name} tried to flee but failed!")

    def _emit_log(self, message: str, category: str = "BATTLE", level: str = "INFO") -> None:
        """Emit a log message event, delivered before the outcome line is written."""
        self.event_manager.publish_immediate(
            LogMessage(
                turn=self.current_turn,
                message=message,
                category=category,
                level=level,
                source="CombatResolver"
            ),
            source="CombatResolver",
            encounter_id=self.encounter_id
        )
