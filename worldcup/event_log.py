"""
Game event logging.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class EventType(Enum):
    """Types of game events."""

    GAME_START = "game_start"
    ROUND_START = "round_start"
    DICE_ROLL = "dice_roll"
    MOVE = "move"
    PASS_SQUARE = "pass_square"
    LAND = "land"
    SUSPENDED_TURN = "suspended_turn"

    BANKRUPTCY = "bankruptcy"
    ELIMINATION = "elimination"
    GAME_END = "game_end"


@dataclass
class GameEvent:
    """A logged event in the game."""

    event_type: EventType
    player_name: Optional[str] = None
    details: Dict[str, Any] = field(default_factory=dict)

    def __repr__(self) -> str:
        player_str = self.player_name if self.player_name is not None else "System"
        return f"[{player_str}] {self.event_type.value}: {self.details}"


class EventLog:
    """Manages the game event log."""

    def __init__(self):
        self.events: List[GameEvent] = []

    def log(self, event_type: EventType, player_name: Optional[str] = None, **details: Any) -> None:
        """Log a game event."""
        self.events.append(GameEvent(event_type, player_name, details))

    def get_events(self) -> List[GameEvent]:
        """Get all logged events."""
        return self.events.copy()

    def of_type(self, event_type: EventType) -> List[GameEvent]:
        return [e for e in self.events if e.event_type == event_type]
