"""
Turn processing for a two-combatant encounter.

This module drains the action queue one intent at a time, hands each intent
to the combat resolver, records the outcome line and moves the encounter to
its terminal phase as soon as a combatant falls or a flee succeeds.
"""
from typing import TYPE_CHECKING, Optional

from ...core.engine import ActionOutcome
from ...core.events import (
    ActionResolved,
    ActionSkipped,
    CombatantDefeated,
    EncounterEnded,
    LogMessage,
)
from ...core.exceptions import ItemNotFoundError

if TYPE_CHECKING:
    from ...core.engine import BattleAction, EncounterState
    from ...core.events import EventManager
    from ..combat.combat_resolver import CombatResolver
    from ..entities.combatant import Combatant


class TurnProcessor:
    """Drives the encounter state machine.

    Once the encounter has ended the processor is inert: nothing further is
    dequeued, resolved or logged. Intents still queued at that point stay
    in the queue and are never executed.
    """

    def __init__(
        self,
        state: "EncounterState",
        resolver: "CombatResolver",
        event_manager: "EventManager",
    ):
        self.state = state
        self.resolver = resolver
        self.event_manager = event_manager
        self.last_outcome: Optional[ActionOutcome] = None

    def process_next(self) -> Optional[str]:
        """Resolve the next intent whose actor is still alive.

        Intents of dead actors are discarded on the way, without side
        effects beyond an ActionSkipped event.

        Returns:
            The outcome line, or None if the queue ran empty or the encounter
            has already ended

        Raises:
            InvariantViolationError: If a resolution left health or mana out of bounds
        """
        if self.state.is_ended:
            return None

        action = self._next_live_action()
        if action is None:
            return None

        try:
            outcome = self.resolver.resolve(action, turn=self.state.turn + 1)
        except ItemNotFoundError as e:
            self._emit_log(f"Missing item: {e.item_name}", "WARNING", "WARNING")
            outcome = ActionOutcome.failed(
                f"{action.actor.name} tried to use an item but couldn't find it."
            )

        self.state.turn += 1
        self.last_outcome = outcome
        self.state.log.battle(outcome.description)

        self._check_invariants()

        self.event_manager.publish(
            ActionResolved(turn=self.state.turn, action=action, outcome=outcome),
            source="TurnProcessor",
            encounter_id=self.state.encounter_id
        )
        self._check_encounter_end(action, outcome)
        return outcome.description

    def process_all(self) -> list[str]:
        """Resolve intents until the queue is empty or the encounter ends.

        Returns:
            Outcome lines in the order they were produced
        """
        results = []
        while not self.state.queue.is_empty and not self.state.is_ended:
            description = self.process_next()
            if description is None:
                break
            results.append(description)
        return results

    def _next_live_action(self) -> Optional["BattleAction"]:
        """Dequeue until an intent with a living actor turns up."""
        action = self.state.queue.dequeue()
        while action is not None and not action.actor.is_alive:
            self.event_manager.publish(
                ActionSkipped(
                    turn=self.state.turn,
                    action=action,
                    reason=f"{action.actor.name} is defeated"
                ),
                source="TurnProcessor",
                encounter_id=self.state.encounter_id
            )
            action = self.state.queue.dequeue()
        return action

    def _check_invariants(self) -> None:
        self.state.player.check_invariants()
        self.state.opponent.check_invariants()

    def _check_encounter_end(self, action: "BattleAction", outcome: ActionOutcome) -> None:
        """Move to the terminal phase if the encounter is decided.

        The player is checked first, so when both combatants are down the
        opponent is recorded as the winner.
        """
        if outcome.fled:
            self.state.end(winner=None, fled=True)
            self._publish_encounter_ended(winner=None, loser=None, fled=True)
            return

        player, opponent = self.state.player, self.state.opponent
        if not player.is_alive:
            winner, loser = opponent, player
        elif not opponent.is_alive:
            winner, loser = player, opponent
        else:
            return

        for combatant in (player, opponent):
            if not combatant.is_alive:
                self.event_manager.publish(
                    CombatantDefeated(turn=self.state.turn, combatant=combatant),
                    source="TurnProcessor",
                    encounter_id=self.state.encounter_id
                )

        self.state.end(winner=winner)
        self.state.log.battle(f"{winner.name} wins the battle!")
        self._publish_encounter_ended(winner=winner, loser=loser, fled=False)

    def _publish_encounter_ended(self, winner: Optional["Combatant"],
                                 loser: Optional["Combatant"], fled: bool) -> None:
        self.event_manager.publish_immediate(
            EncounterEnded(turn=self.state.turn, winner=winner, loser=loser, fled=fled),
            source="TurnProcessor",
            encounter_id=self.state.encounter_id
        )

    def _emit_log(self, message: str, category: str = "SYSTEM", level: str = "INFO") -> None:
        """Emit a log message event, delivered before the outcome line is written."""
        self.event_manager.publish_immediate(
            LogMessage(
                turn=self.state.turn,
                message=message,
                category=category,
                level=level,
                source="TurnProcessor"
            ),
            source="TurnProcessor",
            encounter_id=self.state.encounter_id
        )
