"""
Battle system facade for one encounter.

:class:`BattleSystem` wires the encounter state, action queue, combat
resolver, turn processor, opponent policy and battle log together and is the
only object callers need.

Typical round:

    battle = BattleSystem(hero, goblin, seed=42)
    battle.queue_player_action(ActionKind.ATTACK)
    if not battle.is_ended:
        battle.queue_opponent_action()
    battle.process_all_actions()
"""
import uuid
from typing import TYPE_CHECKING, Optional

import numpy as np

from ..core.data import ActionKind
from ..core.data.game_info import VICTORY_EXPERIENCE_PER_LEVEL
from ..core.engine import ActionFilter, BattleAction, EncounterState
from ..core.events import (
    ActionQueued,
    EncounterEnded,
    EncounterStarted,
    EventManager,
    EventType,
    LevelGained,
    LogMessage,
)
from ..core.exceptions import EncounterEndedError
from .ai.ai_behaviors import BandedPolicy, OpponentPolicy
from .combat.combat_resolver import CombatResolver
from .managers.log_manager import BattleLog
from .managers.turn_manager import TurnProcessor

if TYPE_CHECKING:
    from .entities.combatant import Combatant


class BattleSystem:
    """Caller-facing facade for a single encounter.

    Every instance owns its queue, log and state. The event manager may be
    shared with other encounters; everything this encounter publishes or
    subscribes to is scoped by ``encounter_id``, so encounters on one bus
    never see each other's events.
    """

    def __init__(
        self,
        player: "Combatant",
        opponent: "Combatant",
        rng: Optional[np.random.Generator] = None,
        seed: Optional[int] = None,
        policy: Optional[OpponentPolicy] = None,
        event_manager: Optional[EventManager] = None,
    ):
        """Start an encounter.

        Args:
            player: The player's combatant, must be alive
            opponent: The opposing combatant, must be alive
            rng: Random generator for flee draws and the default policy
            seed: Seed for a fresh generator when ``rng`` is not given
            policy: Opponent policy, BandedPolicy by default
            event_manager: Event bus to publish on, a private one by default

        Raises:
            ValueError: If a combatant is dead or both sides are the same object
        """
        if player is opponent:
            raise ValueError("A combatant cannot fight itself")
        for combatant in (player, opponent):
            if not combatant.is_alive:
                raise ValueError(f"{combatant.name} cannot start a battle while defeated")

        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.event_manager = event_manager if event_manager is not None else EventManager()
        self.encounter_id = str(uuid.uuid4())
        self.log = BattleLog(self.event_manager, encounter_id=self.encounter_id)
        self.state = EncounterState(
            player=player, opponent=opponent, log=self.log, encounter_id=self.encounter_id
        )
        self.resolver = CombatResolver(self.event_manager, self.rng, encounter_id=self.encounter_id)
        self.policy = policy if policy is not None else BandedPolicy(self.rng)
        self.turn_processor = TurnProcessor(self.state, self.resolver, self.event_manager)

        self.event_manager.subscribe(
            EventType.ENCOUNTER_ENDED,
            self._handle_encounter_ended,
            subscriber_name="BattleSystem.encounter_ended",
            encounter_id=self.encounter_id
        )

        self.log.battle(f"Battle started: {player.name} vs {opponent.name}")
        self.event_manager.publish(
            EncounterStarted(turn=0, player=player, opponent=opponent),
            source="BattleSystem",
            encounter_id=self.encounter_id
        )
        self.event_manager.process_events()

    # ============== Queueing ==============

    def queue_action(self, action: BattleAction) -> None:
        """Append an intent to the queue.

        Raises:
            EncounterEndedError: If the encounter has already ended
            ValueError: If actor or target is not part of this encounter, or
                the actor targets itself
        """
        if self.state.is_ended:
            raise EncounterEndedError("queue action")
        if action.actor is action.target:
            raise ValueError(f"{action.actor.name} cannot target itself")
        for combatant in (action.actor, action.target):
            if combatant is not self.state.player and combatant is not self.state.opponent:
                raise ValueError(f"{combatant.name} is not part of this encounter")

        self.state.queue.enqueue(action)
        self.event_manager.publish(
            ActionQueued(turn=self.state.turn, action=action, queue_size=len(self.state.queue)),
            source="BattleSystem",
            encounter_id=self.encounter_id
        )
        self._emit_log(f"Queued {action.get_description()}", "QUEUE")
        self.event_manager.process_events()

    def queue_player_action(self, kind: ActionKind) -> BattleAction:
        """Queue an intent of the player against the opponent.

        Raises:
            EncounterEndedError: If the encounter has already ended
            ValueError: For USE_ITEM, which needs ``queue_player_item_action``
        """
        if self.state.is_ended:
            raise EncounterEndedError("queue player action")

        action = BattleAction(actor=self.state.player, target=self.state.opponent, kind=kind)
        self.queue_action(action)
        return action

    def queue_player_item_action(self, item_name: str) -> BattleAction:
        """Queue a USE_ITEM intent of the player.

        Raises:
            EncounterEndedError: If the encounter has already ended
        """
        if self.state.is_ended:
            raise EncounterEndedError("queue item action")

        action = BattleAction(
            actor=self.state.player,
            target=self.state.opponent,
            kind=ActionKind.USE_ITEM,
            item_name=item_name,
        )
        self.queue_action(action)
        return action

    def generate_opponent_action(self) -> BattleAction:
        """Ask the opponent policy for an intent without queueing it."""
        action = self.policy.generate(self.state.opponent, self.state.player)
        self._emit_log(
            f"{self.policy.get_behavior_name()} policy chose {action.kind.name} "
            f"({self.policy.last_decision.reasoning})",
            "AI"
        )
        return action

    def queue_opponent_action(self) -> BattleAction:
        """Generate and queue the opponent's intent.

        Raises:
            EncounterEndedError: If the encounter has already ended
        """
        if self.state.is_ended:
            raise EncounterEndedError("queue opponent action")

        action = self.generate_opponent_action()
        self.queue_action(action)
        return action

    # ============== Processing ==============

    def process_next_action(self) -> Optional[str]:
        """Resolve the next intent.

        Returns:
            The outcome line, or None if nothing was resolved
        """
        result = self.turn_processor.process_next()
        self.event_manager.process_events()
        return result

    def process_all_actions(self) -> list[str]:
        """Resolve intents until the queue empties or the encounter ends."""
        results = self.turn_processor.process_all()
        self.event_manager.process_events()
        return results

    def play_round(self, kind: ActionKind, item_name: Optional[str] = None) -> list[str]:
        """Queue the player's intent and one opponent intent, then drain.

        Args:
            kind: The player's action kind
            item_name: Item to use when ``kind`` is USE_ITEM

        Returns:
            Outcome lines of the round
        """
        if kind == ActionKind.USE_ITEM:
            self.queue_player_item_action(item_name)
        else:
            self.queue_player_action(kind)

        if not self.state.is_ended:
            self.queue_opponent_action()
        return self.process_all_actions()

    def sort_pending_by_priority(self) -> None:
        """Stable-sort the pending intents, highest priority first."""
        self.state.queue.sort_by_priority()

    def filter_pending(self, predicate: ActionFilter) -> list[BattleAction]:
        """Pending intents matching ``predicate``; the queue is unchanged."""
        return self.state.queue.filter(predicate)

    # ============== Queries ==============

    @property
    def player(self) -> "Combatant":
        return self.state.player

    @property
    def opponent(self) -> "Combatant":
        return self.state.opponent

    @property
    def is_ended(self) -> bool:
        return self.state.is_ended

    @property
    def winner(self) -> Optional["Combatant"]:
        return self.state.winner

    @property
    def fled(self) -> bool:
        return self.state.fled

    @property
    def turn(self) -> int:
        return self.state.turn

    @property
    def battle_log(self) -> list[str]:
        """Outcome lines so far, as a copy."""
        return self.log.snapshot()

    @property
    def pending_count(self) -> int:
        return len(self.state.queue)

    @property
    def is_queue_empty(self) -> bool:
        return self.state.queue.is_empty

    def get_pending_preview(self, count: int = 5) -> list[BattleAction]:
        return self.state.queue.get_preview(count)

    # ============== Encounter end ==============

    def _handle_encounter_ended(self, event) -> None:
        """Award victory experience and clear encounter-scoped buffs."""
        if not isinstance(event, EncounterEnded):
            return

        for combatant in (self.state.player, self.state.opponent):
            combatant.clear_temporary_effects()

        if event.winner is None or event.loser is None:
            return

        winner = event.winner
        experience = VICTORY_EXPERIENCE_PER_LEVEL * event.loser.level
        new_levels = winner.gain_experience(experience)
        self.log.progression(f"{winner.name} gained {experience} experience.")

        for level in new_levels:
            self.log.progression(f"{winner.name} reached level {level}!")
            self.event_manager.publish(
                LevelGained(turn=event.turn, combatant=winner, new_level=level),
                source="BattleSystem",
                encounter_id=self.encounter_id
            )

    def _emit_log(self, message: str, category: str = "SYSTEM", level: str = "INFO") -> None:
        """Emit a log message event, delivered at once to keep log order."""
        self.event_manager.publish_immediate(
            LogMessage(
                turn=self.state.turn,
                message=message,
                category=category,
                level=level,
                source="BattleSystem"
            ),
            source="BattleSystem",
            encounter_id=self.encounter_id
        )
