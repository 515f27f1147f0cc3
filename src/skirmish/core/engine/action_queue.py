"""Action queue for serialized turn resolution.

The queue holds the pending intents of one encounter in strict FIFO order.
No reordering happens on its own: a caller that wants priority ordering has
to ask for it through :meth:`ActionQueue.sort_by_priority` before draining.

Core Concepts:
- Intents are appended at the tail and consumed from the head
- The queue is closed when the encounter ends; closed queues reject intents
- Priority sorting is stable, so equal priorities keep their arrival order
"""

from __future__ import annotations

from collections import deque
from typing import Optional

from .actions import ActionFilter, BattleAction
from ..exceptions import EncounterEndedError


class ActionQueue:
    """FIFO queue of pending intents for a single encounter.

    Key Features:
    - Strict first-in, first-out processing
    - Optional, explicitly invoked stable sort by priority (descending)
    - Closing on encounter end so late intents fail loudly
    """

    def __init__(self):
        self._queue: deque[BattleAction] = deque()
        self._closed: bool = False

    @property
    def is_empty(self) -> bool:
        """Check if the queue has any pending intents."""
        return not self._queue

    @property
    def is_closed(self) -> bool:
        """Check if the queue stopped accepting intents."""
        return self._closed

    def __len__(self) -> int:
        return len(self._queue)

    def enqueue(self, action: BattleAction) -> None:
        """Append an intent to the tail of the queue.

        Args:
            action: The intent to queue

        Raises:
            EncounterEndedError: If the encounter has already ended
        """
        if self._closed:
            raise EncounterEndedError("queue action")

        self._queue.append(action)

    def dequeue(self) -> Optional[BattleAction]:
        """Remove and return the head of the queue.

        Returns:
            The next intent or None if the queue is empty
        """
        if not self._queue:
            return None
        return self._queue.popleft()

    def get_preview(self, count: int) -> list[BattleAction]:
        """Get the next N intents in processing order."""
        return list(self._queue)[:count]

    def sort_by_priority(self) -> None:
        """Stable-sort pending intents by priority, highest first."""
        ordered = sorted(self._queue, key=lambda action: action.priority, reverse=True)
        self._queue = deque(ordered)

    def filter(self, predicate: ActionFilter) -> list[BattleAction]:
        """Return the pending intents matching a predicate.

        The queue itself is left untouched.
        """
        return [action for action in self._queue if predicate(action)]

    def close(self) -> None:
        """Stop accepting intents. Pending intents stay where they are."""
        self._closed = True
