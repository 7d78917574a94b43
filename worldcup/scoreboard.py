"""
Scoreboards receive the results of a game as it is played.
"""

import sys
from abc import ABC, abstractmethod
from typing import Optional, TextIO


class ScoreBoard(ABC):
    """
    Abstract base class for result sinks.

    The engine calls ``on_round`` once at the top of every round,
    ``on_turn`` once for every turn a player takes (including the turn
    they go bankrupt), and ``on_win`` exactly once when the game ends.
    """

    @abstractmethod
    def on_round(self, round_no: int) -> None:
        """
        Called before any player acts in a round.

        Args:
            round_no: Zero-based round index.
        """
        pass

    @abstractmethod
    def on_turn(self, player_name: str, player_status: str, square_name: str, money: int) -> None:
        """
        Called after a player's turn has been resolved.

        Args:
            player_name: The player's display name.
            player_status: "active", "waiting: N" or "bankrupt".
            square_name: Name of the square the player is on.
            money: The player's funds after the turn.
        """
        pass

    @abstractmethod
    def on_win(self, player_name: str) -> None:
        """Called once with the winner's name."""
        pass


class DefaultScoreBoard(ScoreBoard):
    """Scoreboard that ignores everything."""

    def on_round(self, round_no: int) -> None:
        pass

    def on_turn(self, player_name: str, player_status: str, square_name: str, money: int) -> None:
        pass

    def on_win(self, player_name: str) -> None:
        pass


class ConsoleScoreBoard(ScoreBoard):
    """Prints a line per notification to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def on_round(self, round_no: int) -> None:
        print(f"=== Round: {round_no}", file=self.stream)

    def on_turn(self, player_name: str, player_status: str, square_name: str, money: int) -> None:
        print(f"{player_name} [{player_status}] [{square_name}] {money}", file=self.stream)

    def on_win(self, player_name: str) -> None:
        print(f"=== Winner: {player_name}", file=self.stream)


class MultiScoreBoard(ScoreBoard):
    """Forwards every notification to several scoreboards, in order."""

    def __init__(self, *scoreboards: ScoreBoard):
        self.scoreboards = list(scoreboards)

    def on_round(self, round_no: int) -> None:
        for sb in self.scoreboards:
            sb.on_round(round_no)

    def on_turn(self, player_name: str, player_status: str, square_name: str, money: int) -> None:
        for sb in self.scoreboards:
            sb.on_turn(player_name, player_status, square_name, money)

    def on_win(self, player_name: str) -> None:
        for sb in self.scoreboards:
            sb.on_win(player_name)
