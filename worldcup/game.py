"""
Main game engine and round loop.
"""

import logging
from typing import Iterable, List, Optional

from worldcup.board import Board, create_standard_board
from worldcup.config import GameConfig
from worldcup.dice import Dice, Die
from worldcup.exceptions import (
    TooFewDiceError,
    TooFewPlayersError,
    TooManyDiceError,
    TooManyPlayersError,
)
from worldcup.event_log import EventLog, EventType
from worldcup.player import PlayerState
from worldcup.scoreboard import DefaultScoreBoard, ScoreBoard

logger = logging.getLogger(__name__)

STATUS_ACTIVE = "active"
STATUS_BANKRUPT = "bankrupt"


def waiting_status(turns: int) -> str:
    """Status shown for a player who still has to sit out ``turns`` turns."""
    return f"waiting: {turns}"


class WorldCup2022:
    """
    The World Cup 2022 game.

    Register dice and players, optionally install a scoreboard, then call
    ``play``. A single instance is meant for a single playthrough: a later
    ``play`` puts everyone back on the start square and clears the board
    counters, but keeps funds, suspensions and the shrunken roster.
    """

    def __init__(self, config: Optional[GameConfig] = None, board: Optional[Board] = None):
        self.config = config or GameConfig()
        self.board = board if board is not None else create_standard_board(self.config)
        self.dice = Dice()
        self.players: List[PlayerState] = []
        self.scoreboard: ScoreBoard = DefaultScoreBoard()
        self.event_log = EventLog()

        self.round_number = 0
        self.game_over = False
        self.winner: Optional[str] = None

    def add_die(self, die: Optional[Die]) -> None:
        """Register a die. ``None`` is ignored."""
        if die is not None:
            self.dice.add_die(die)

    def add_player(self, name: str) -> PlayerState:
        """Register a player. Turn order follows registration order."""
        player = PlayerState(name, self.config.starting_balance)
        self.players.append(player)
        return player

    def set_scoreboard(self, scoreboard: ScoreBoard) -> None:
        self.scoreboard = scoreboard

    def get_player(self, name: str) -> Optional[PlayerState]:
        """Find a player still in the game by name."""
        for player in self.players:
            if player.name == name:
                return player
        return None

    def _check_dice(self) -> None:
        if len(self.dice) > self.config.dice_count:
            raise TooManyDiceError(
                f"{len(self.dice)} dice registered, the game is played with {self.config.dice_count}"
            )
        if len(self.dice) < self.config.dice_count:
            raise TooFewDiceError(
                f"{len(self.dice)} dice registered, the game is played with {self.config.dice_count}"
            )

    def _check_players(self) -> None:
        if len(self.players) > self.config.max_players:
            raise TooManyPlayersError(
                f"{len(self.players)} players registered, at most {self.config.max_players} allowed"
            )
        if len(self.players) < self.config.min_players:
            raise TooFewPlayersError(
                f"{len(self.players)} players registered, at least {self.config.min_players} required"
            )

    def validate(self) -> None:
        """
        Check dice and roster against the rules without touching game state.

        Raises:
            TooFewDiceError, TooManyDiceError: wrong number of dice
            TooFewPlayersError, TooManyPlayersError: roster size out of range
        """
        self._check_dice()
        self._check_players()

    def reset_players_position(self) -> None:
        for player in self.players:
            player.put_to_start()

    def move_player(self, player: PlayerState, fields: int) -> str:
        """
        Move a player forward and apply square effects.

        Every square strictly between the old and new position is passed,
        then the destination square is stopped on.

        Returns:
            The player's status after the move
        """
        start = player.position
        for i in range(1, fields):
            square = self.board.square_at(start + i)
            square.on_pass(player)
            self.event_log.log(
                EventType.PASS_SQUARE,
                player.name,
                square=square.name,
                position=(start + i) % len(self.board),
                funds_after=player.funds,
            )

        player.move(fields, len(self.board))
        self.event_log.log(
            EventType.MOVE,
            player.name,
            from_position=start,
            to_position=player.position,
            fields=fields,
        )

        square = self.board.get_square(player.position)
        square.on_stop(player)
        self.event_log.log(
            EventType.LAND,
            player.name,
            square=square.name,
            position=player.position,
            funds_after=player.funds,
        )

        if player.is_bankrupt:
            return STATUS_BANKRUPT
        if player.is_suspended:
            return waiting_status(player.suspension + 1)
        return STATUS_ACTIVE

    def play_turn(self, player: PlayerState) -> str:
        """Resolve one turn for a player and return their status."""
        if player.is_suspended:
            status = waiting_status(player.suspension)
            player.suspension -= 1
            self.event_log.log(EventType.SUSPENDED_TURN, player.name, remaining=player.suspension)
            return status

        fields = self.dice.roll()
        self.event_log.log(
            EventType.DICE_ROLL,
            player.name,
            values=list(self.dice.last_roll or ()),
            total=fields,
        )
        return self.move_player(player, fields)

    def _play_round(self, round_no: int) -> None:
        self.scoreboard.on_round(round_no)
        self.event_log.log(EventType.ROUND_START, round=round_no, players_left=len(self.players))
        logger.debug("Round %d with %d players", round_no, len(self.players))

        index = 0
        while index < len(self.players):
            player = self.players[index]
            status = self.play_turn(player)
            square = self.board.get_square(player.position)
            logger.debug("%s [%s] [%s] %d", player.name, status, square.name, player.funds)
            self.scoreboard.on_turn(player.name, status, square.name, player.funds)

            if player.is_bankrupt:
                self.event_log.log(EventType.BANKRUPTCY, player.name, square=square.name)
                logger.info("%s went bankrupt on %s in round %d", player.name, square.name, round_no)
                # The last player standing stays so the game can name a winner.
                if len(self.players) > 1:
                    del self.players[index]
                    self.event_log.log(EventType.ELIMINATION, player.name, round=round_no)
                    continue
            index += 1

    def find_winner(self) -> str:
        """
        Decide the winner among the remaining players.

        A sole survivor wins outright. Otherwise the richest player wins
        and ties go to whoever comes first in turn order.
        """
        if len(self.players) == 1:
            return self.players[0].name
        best = self.players[0]
        for player in self.players[1:]:
            if player.funds > best.funds:
                best = player
        return best.name

    def play(self, rounds: int) -> str:
        """
        Play up to ``rounds`` rounds and report the winner.

        Whether the game is already decided is checked once at the start
        of every round, before anyone acts.

        Raises:
            TooFewDiceError, TooManyDiceError: wrong number of dice
            TooFewPlayersError, TooManyPlayersError: roster size out of range

        Returns:
            The winner's name
        """
        self.validate()

        self.board.reset()
        self.reset_players_position()
        self.game_over = False
        self.winner = None
        self.event_log.log(
            EventType.GAME_START,
            players=[p.name for p in self.players],
            starting_balance=self.config.starting_balance,
            rounds=rounds,
        )

        self.round_number = 0
        while self.round_number < rounds and len(self.players) > 1:
            self._play_round(self.round_number)
            self.round_number += 1

        self.winner = self.find_winner()
        self.game_over = True
        winner = self.get_player(self.winner)
        self.event_log.log(
            EventType.GAME_END,
            self.winner,
            rounds_played=self.round_number,
            funds=winner.funds if winner else None,
        )
        logger.info("%s won after %d rounds", self.winner, self.round_number)
        self.scoreboard.on_win(self.winner)
        return self.winner


def create_game(
    config: GameConfig,
    player_names: Iterable[str],
    dice: Iterable[Die] = (),
    scoreboard: Optional[ScoreBoard] = None,
) -> WorldCup2022:
    """
    Create a game on the standard board.

    Args:
        config: Game configuration
        player_names: Names in turn order
        dice: Dice to register
        scoreboard: Optional scoreboard to install

    Returns:
        Ready-to-play game
    """
    game = WorldCup2022(config)
    for die in dice:
        game.add_die(die)
    for name in player_names:
        game.add_player(name)
    if scoreboard is not None:
        game.set_scoreboard(scoreboard)
    return game
