"""
Game configuration settings.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class GameConfig:
    """Rule constants for a World Cup 2022 game."""

    starting_balance: int = 1000

    min_players: int = 2
    max_players: int = 11
    dice_count: int = 2
    die_sides: int = 6

    start_bonus: int = 50
    bookmaker_win_frequency: int = 3

    seed: Optional[int] = None
