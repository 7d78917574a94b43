"""
World Cup 2022 Rules Engine

A deterministic (given the dice) implementation of the World Cup 2022
board game.
"""

from .game import WorldCup2022, create_game
from .player import PlayerState
from .board import Board, create_standard_board
from .config import GameConfig
from .dice import Dice, Die, RandomDie
from .scoreboard import ScoreBoard, DefaultScoreBoard, ConsoleScoreBoard, MultiScoreBoard

__all__ = [
    "WorldCup2022",
    "create_game",
    "PlayerState",
    "Board",
    "create_standard_board",
    "GameConfig",
    "Dice",
    "Die",
    "RandomDie",
    "ScoreBoard",
    "DefaultScoreBoard",
    "ConsoleScoreBoard",
    "MultiScoreBoard",
]
