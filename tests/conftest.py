"""Shared test fixtures for World Cup tests."""

import pytest

from worldcup import GameConfig, WorldCup2022
from worldcup.board import Board
from worldcup.dice import Die
from worldcup.scoreboard import ScoreBoard
from worldcup.squares import RestDaySquare, Square, SquareType


class FixedDie(Die):
    """Die that always rolls the same value."""

    def __init__(self, value: int):
        self.value = value
        self.rolls = 0

    def roll(self) -> int:
        self.rolls += 1
        return self.value


class SequenceDie(Die):
    """Die that cycles through a fixed list of values."""

    def __init__(self, values):
        self.values = list(values)
        self.index = 0

    def roll(self) -> int:
        value = self.values[self.index % len(self.values)]
        self.index += 1
        return value


class RecordingScoreBoard(ScoreBoard):
    """Scoreboard that keeps every notification."""

    def __init__(self):
        self.rounds = []
        self.turns = []
        self.wins = []

    def on_round(self, round_no):
        self.rounds.append(round_no)

    def on_turn(self, player_name, player_status, square_name, money):
        self.turns.append((player_name, player_status, square_name, money))

    def on_win(self, player_name):
        self.wins.append(player_name)


class CountingSquare(Square):
    """Square that counts how often it was passed and stopped on."""

    def __init__(self, name: str):
        super().__init__(name, SquareType.REST_DAY)
        self.passes = 0
        self.stops = 0

    def on_pass(self, player):
        self.passes += 1

    def on_stop(self, player):
        self.stops += 1


def make_game(rolls, player_names=("Alice", "Bob"), board=None, config=None):
    """Game whose dice total follows ``rolls`` turn by turn."""
    game = WorldCup2022(config or GameConfig(), board=board)
    game.add_die(SequenceDie(rolls))
    game.add_die(FixedDie(0))
    for name in player_names:
        game.add_player(name)
    return game


@pytest.fixture
def game_config():
    """Default game configuration."""
    return GameConfig()


@pytest.fixture
def scoreboard():
    return RecordingScoreBoard()


@pytest.fixture
def quiet_board():
    """Four squares where nothing ever happens."""
    return Board([RestDaySquare(f"Rest {i}") for i in range(4)])


@pytest.fixture
def two_player_game(scoreboard):
    """Standard board, two players, dice always totalling 2."""
    game = make_game([2])
    game.set_scoreboard(scoreboard)
    return game


@pytest.fixture
def three_player_game(scoreboard):
    """Standard board, three players, dice always totalling 2."""
    game = make_game([2], player_names=("Alice", "Bob", "Carol"))
    game.set_scoreboard(scoreboard)
    return game
