"""
JSONL logger for World Cup game events.

Works as a scoreboard (one record per round, turn and win) and can also
flush the engine's internal event log through the event mapper.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Union

from events.mapper import map_events
from worldcup.scoreboard import ScoreBoard


class GameLogger(ScoreBoard):
    """Scoreboard that writes game events to a JSONL file."""

    def __init__(self, log_file: Union[str, Path] = None, log_dir: Union[str, Path] = "."):
        """
        Initialize game logger.

        Args:
            log_file: Path to log file. If None, generates timestamped filename in log_dir.
            log_dir: Directory for generated filenames.
        """
        if log_file is None:
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = Path(log_dir) / f"worldcup_game_{timestamp}.jsonl"

        self.log_file = Path(log_file)
        self.event_count = 0
        self.round_number = None
        self._engine_last_idx = 0  # last flushed index from engine's internal EventLog

        # Create/clear log file
        self.log_file.parent.mkdir(parents=True, exist_ok=True)
        self.log_file.write_text("")

    def log_event(self, event_type: str, **kwargs):
        """
        Log a game event to JSONL file.

        Args:
            event_type: Type of event (e.g., "round", "turn", "win")
            **kwargs: Additional event data
        """
        event = {
            "event_id": self.event_count,
            "timestamp": datetime.now().isoformat(),
            "event_type": event_type,
            **kwargs,
        }

        with open(self.log_file, "a") as f:
            f.write(json.dumps(event) + "\n")

        self.event_count += 1

    def on_round(self, round_no: int) -> None:
        self.round_number = round_no
        self.log_event("round", round_number=round_no)

    def on_turn(self, player_name: str, player_status: str, square_name: str, money: int) -> None:
        self.log_event(
            "turn",
            round_number=self.round_number,
            player_name=player_name,
            status=player_status,
            square_name=square_name,
            funds=money,
        )

    def on_win(self, player_name: str) -> None:
        self.log_event("win", player_name=player_name)

    def flush_engine_events(self, game) -> int:
        """Flush new internal engine events to JSONL using the event mapper.

        Returns the number of events written.
        """
        events = game.event_log.events
        if self._engine_last_idx >= len(events):
            return 0

        mapped = map_events(game.board, events[self._engine_last_idx :])
        for m in mapped:
            etype = m.pop("event_type")
            self.log_event(f"engine.{etype}", **m)

        self._engine_last_idx = len(events)
        return len(mapped)
