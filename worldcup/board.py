"""
The cyclic game board and the standard World Cup 2022 layout.
"""

from typing import Iterator, List, Optional

from worldcup.config import GameConfig
from worldcup.squares import (
    Square,
    SeasonStartSquare,
    MatchSquare,
    MatchType,
    RestDaySquare,
    YellowCardSquare,
    BookmakerSquare,
    GoalSquare,
    PenaltySquare,
)


class Board:
    """A cyclic board of squares. Positions wrap around modulo its length."""

    def __init__(self, squares: List[Square]):
        if not squares:
            raise ValueError("Board needs at least one square")
        self.squares: List[Square] = list(squares)

    def __len__(self) -> int:
        return len(self.squares)

    def __iter__(self) -> Iterator[Square]:
        return iter(self.squares)

    def get_square(self, index: int) -> Square:
        """
        Get the square at an exact index.

        Raises:
            IndexError: if index is outside [0, len(board))
        """
        if not 0 <= index < len(self.squares):
            raise IndexError(f"Square index {index} out of range for board of {len(self.squares)}")
        return self.squares[index]

    def square_at(self, position: int) -> Square:
        """Get the square at a position, wrapping around the board."""
        return self.get_square(position % len(self.squares))

    def reset(self) -> None:
        """Clear per-game counters on every square."""
        for square in self.squares:
            square.reset()


def create_standard_board(config: Optional[GameConfig] = None) -> Board:
    """Create the 12-square World Cup 2022 board."""
    config = config or GameConfig()
    return Board([
        SeasonStartSquare("Season Start", config.start_bonus),
        MatchSquare("Match vs San Marino", MatchType.FRIENDLY, 160),
        RestDaySquare("Rest Day"),
        MatchSquare("Match vs Liechtenstein", MatchType.FRIENDLY, 220),
        YellowCardSquare("Yellow Card", 3),
        MatchSquare("Match vs Mexico", MatchType.FOR_POINTS, 300),
        MatchSquare("Match vs Saudi Arabia", MatchType.FOR_POINTS, 280),
        BookmakerSquare("Bookmaker", 100, config.bookmaker_win_frequency),
        MatchSquare("Match vs Argentina", MatchType.FOR_POINTS, 250),
        GoalSquare("Goal", 120),
        MatchSquare("Match vs France", MatchType.FINAL, 400),
        PenaltySquare("Penalty Kick", 180),
    ])
