"""
Battle log for outcome lines and diagnostic messages.

This module provides the append-only record of an encounter. Outcome lines
are written in the BATTLE category and form the encounter's public record;
other categories carry diagnostics published on the event bus.
"""
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ...core.events import EventManager


class LogCategory(Enum):
    """Categories for log messages."""
    SYSTEM = auto()       # Setup and teardown messages
    BATTLE = auto()       # Outcome lines of the encounter
    AI = auto()           # Opponent policy decisions
    QUEUE = auto()        # Intent queueing and skipping
    PROGRESSION = auto()  # Experience and level ups
    DEBUG = auto()        # Debug messages
    WARNING = auto()      # Warning messages
    ERROR = auto()        # Error messages


@dataclass(frozen=True)
class LogEntry:
    """A single log entry with metadata."""
    text: str
    category: LogCategory
    timestamp: datetime = field(default_factory=datetime.now)

    def format(self, include_timestamp: bool = False, include_category: bool = True) -> str:
        """Format the entry for display."""
        parts = []

        if include_timestamp:
            time_str = self.timestamp.strftime("%H:%M:%S")
            parts.append(f"[{time_str}]")

        if include_category:
            category_tags = {
                LogCategory.SYSTEM: "SYS",
                LogCategory.BATTLE: "BTL",
                LogCategory.AI: "AI",
                LogCategory.QUEUE: "QUE",
                LogCategory.PROGRESSION: "PRG",
                LogCategory.DEBUG: "DBG",
                LogCategory.WARNING: "WRN",
                LogCategory.ERROR: "ERR",
            }
            tag = category_tags.get(self.category, "???")
            parts.append(f"[{tag}]")

        parts.append(self.text)
        return " ".join(parts)


class LogLevel(Enum):
    """Log levels for filtering."""
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


class BattleLog:
    """Append-only, categorised log of one encounter.

    Entries are never removed or rewritten. Callers get copies, so the
    record cannot be altered from outside.
    """

    def __init__(
        self,
        event_manager: Optional["EventManager"] = None,
        default_level: LogLevel = LogLevel.INFO,
        encounter_id: Optional[str] = None
    ):
        """Initialize the battle log.

        Args:
            event_manager: Event manager to receive LogMessage/DebugMessage events from
            default_level: Default log level for filtering
            encounter_id: Only record messages published for this encounter
        """
        self._entries: list[LogEntry] = []
        self.log_level = default_level
        self.enabled_categories = set(LogCategory) - {LogCategory.DEBUG}
        self.event_manager = event_manager
        self.encounter_id = encounter_id

        # Category-specific log level mappings
        self.category_levels = {
            # Debug-only categories
            LogCategory.DEBUG: LogLevel.DEBUG,
            LogCategory.AI: LogLevel.DEBUG,
            LogCategory.QUEUE: LogLevel.DEBUG,

            # Always visible categories
            LogCategory.WARNING: LogLevel.WARNING,
            LogCategory.ERROR: LogLevel.ERROR,

            # SYSTEM, BATTLE, PROGRESSION default to INFO
        }

        if event_manager is not None:
            self._setup_event_subscriptions()

    def _setup_event_subscriptions(self) -> None:
        """Set up event subscriptions for centralized logging."""
        from ...core.events import EventType

        self.event_manager.subscribe(
            EventType.LOG_MESSAGE,
            self._handle_log_message_event,
            subscriber_name="BattleLog.log_message",
            encounter_id=self.encounter_id
        )
        self.event_manager.subscribe(
            EventType.DEBUG_MESSAGE,
            self._handle_debug_message_event,
            subscriber_name="BattleLog.debug_message",
            encounter_id=self.encounter_id
        )

    def _handle_log_message_event(self, event) -> None:
        """Handle log message events from the event system."""
        from ...core.events import LogMessage
        if isinstance(event, LogMessage):
            try:
                category = LogCategory[event.category.upper()]
            except (KeyError, AttributeError):
                category = LogCategory.SYSTEM

            self.log(event.message, category)

    def _handle_debug_message_event(self, event) -> None:
        """Handle debug message events from the event system."""
        from ...core.events import DebugMessage
        if isinstance(event, DebugMessage):
            self.log(f"[{event.source}] {event.message}", LogCategory.DEBUG)

    def log(self, text: str, category: LogCategory = LogCategory.SYSTEM) -> None:
        """Append an entry.

        Entries are always stored; category and level only filter what
        ``get_messages`` shows.
        """
        self._entries.append(LogEntry(text=text, category=category))

    # Convenience methods for common categories
    def system(self, text: str) -> None:
        """Log a system message."""
        self.log(text, LogCategory.SYSTEM)

    def battle(self, text: str) -> None:
        """Log an outcome line."""
        self.log(text, LogCategory.BATTLE)

    def ai(self, text: str) -> None:
        """Log an opponent policy message."""
        self.log(text, LogCategory.AI)

    def queue(self, text: str) -> None:
        """Log a queue message."""
        self.log(text, LogCategory.QUEUE)

    def progression(self, text: str) -> None:
        """Log an experience or level message."""
        self.log(text, LogCategory.PROGRESSION)

    def debug(self, text: str) -> None:
        """Log a debug message."""
        self.log(text, LogCategory.DEBUG)

    def warning(self, text: str) -> None:
        """Log a warning message."""
        self.log(text, LogCategory.WARNING)

    def error(self, text: str) -> None:
        """Log an error message."""
        self.log(text, LogCategory.ERROR)

    def snapshot(self) -> list[str]:
        """Outcome lines of the encounter, in the order they happened."""
        return [entry.text for entry in self._entries if entry.category == LogCategory.BATTLE]

    @property
    def entries(self) -> list[LogEntry]:
        """Copy of every entry, regardless of filters."""
        return list(self._entries)

    def get_messages(self, count: Optional[int] = None,
                     categories: Optional[set[LogCategory]] = None) -> list[LogEntry]:
        """Get recent entries, optionally filtered by category.

        Args:
            count: Maximum number of entries to return (None for all)
            categories: Set of categories to include (None for all enabled)

        Returns:
            List of recent entries
        """
        if categories:
            filtered = [entry for entry in self._entries
                        if entry.category in categories and entry.category in self.enabled_categories]
        else:
            filtered = []
            for entry in self._entries:
                if entry.category not in self.enabled_categories:
                    continue

                entry_level = self.category_levels.get(entry.category, LogLevel.INFO)
                if entry_level.value < self.log_level.value:
                    continue

                filtered.append(entry)

        if count is not None and count < len(filtered):
            return filtered[-count:]
        return filtered

    def enable_category(self, category: LogCategory) -> None:
        """Enable a log category."""
        self.enabled_categories.add(category)

    def disable_category(self, category: LogCategory) -> None:
        """Disable a log category."""
        self.enabled_categories.discard(category)

    def set_log_level(self, level: LogLevel) -> None:
        """Set the minimum log level."""
        self.log_level = level

    def is_debug_enabled(self) -> bool:
        """Check if debug messages are currently shown."""
        return (LogCategory.DEBUG in self.enabled_categories and
                self.log_level == LogLevel.DEBUG)

    def toggle_debug(self) -> None:
        """Toggle debug message visibility."""
        if self.is_debug_enabled():
            self.disable_category(LogCategory.DEBUG)
            self.set_log_level(LogLevel.INFO)
        else:
            self.enable_category(LogCategory.DEBUG)
            self.set_log_level(LogLevel.DEBUG)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(list(self._entries))
