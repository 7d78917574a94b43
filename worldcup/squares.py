"""
Board square definitions and their effect rules.

Every square reacts to a player in two ways: ``on_stop`` when a move ends
on it and ``on_pass`` for each square a move crosses without stopping.
Squares only ever look at their own parameters and the player in front
of them.
"""

from dataclasses import dataclass
from enum import Enum

from worldcup.player import PlayerState


class SquareType(Enum):
    """Types of squares on the board."""

    SEASON_START = "season_start"
    GOAL = "goal"
    PENALTY = "penalty"
    BOOKMAKER = "bookmaker"
    YELLOW_CARD = "yellow_card"
    MATCH = "match"
    REST_DAY = "rest_day"


class MatchType(Enum):
    """Match classification, which sets the payout multiplier."""

    FRIENDLY = "friendly"
    FOR_POINTS = "for_points"
    FINAL = "final"

    @property
    def rate_tenths(self) -> int:
        """Payout multiplier in tenths (2.5 is stored as 25)."""
        return _MATCH_RATE_TENTHS[self]


_MATCH_RATE_TENTHS = {
    MatchType.FRIENDLY: 10,
    MatchType.FOR_POINTS: 25,
    MatchType.FINAL: 40,
}


@dataclass
class Square:
    """Base class for a board square. Does nothing on stop or pass."""

    name: str
    square_type: SquareType

    def on_stop(self, player: PlayerState) -> None:
        pass

    def on_pass(self, player: PlayerState) -> None:
        pass

    def reset(self) -> None:
        """Clear per-game counters. Only stateful squares override this."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"


@dataclass
class SeasonStartSquare(Square):
    """The season start. Pays a bonus both on stop and on pass."""

    bonus: int

    def __init__(self, name: str, bonus: int = 50):
        super().__init__(name, SquareType.SEASON_START)
        self.bonus = bonus

    def on_stop(self, player: PlayerState) -> None:
        player.credit(self.bonus)

    def on_pass(self, player: PlayerState) -> None:
        player.credit(self.bonus)


@dataclass
class GoalSquare(Square):
    """A goal. Pays a bonus to whoever stops here."""

    bonus: int

    def __init__(self, name: str, bonus: int):
        super().__init__(name, SquareType.GOAL)
        self.bonus = bonus

    def on_stop(self, player: PlayerState) -> None:
        player.credit(self.bonus)


@dataclass
class PenaltySquare(Square):
    """A penalty kick. The player pays the goalkeeper's save price."""

    save_price: int

    def __init__(self, name: str, save_price: int):
        super().__init__(name, SquareType.PENALTY)
        self.save_price = save_price

    def on_stop(self, player: PlayerState) -> None:
        player.debit(self.save_price)


@dataclass
class BookmakerSquare(Square):
    """
    A bookmaker.

    Every ``win_frequency``-th stop since the last reset wins the bet,
    starting with the first one. All other stops lose it.
    """

    bet: int
    win_frequency: int
    stops: int = 0

    def __init__(self, name: str, bet: int, win_frequency: int = 3):
        super().__init__(name, SquareType.BOOKMAKER)
        self.bet = bet
        self.win_frequency = win_frequency
        self.stops = 0

    def on_stop(self, player: PlayerState) -> None:
        if self.stops == 0:
            player.credit(self.bet)
        else:
            player.debit(self.bet)
        self.stops = (self.stops + 1) % self.win_frequency

    def reset(self) -> None:
        self.stops = 0


@dataclass
class YellowCardSquare(Square):
    """
    A yellow card.

    The player sits out ``suspension_size`` turns in total, counting the
    turn the card was shown.
    """

    suspension_size: int

    def __init__(self, name: str, suspension_size: int):
        super().__init__(name, SquareType.YELLOW_CARD)
        self.suspension_size = suspension_size

    def on_stop(self, player: PlayerState) -> None:
        player.suspension += self.suspension_size - 1


@dataclass
class MatchSquare(Square):
    """
    A match.

    Passing players pay the fee. Whoever stops collects every fee paid
    since the last stop, multiplied by the match rate.
    """

    match_type: MatchType
    fee: int
    players_passed: int = 0

    def __init__(self, name: str, match_type: MatchType, fee: int):
        super().__init__(name, SquareType.MATCH)
        self.match_type = match_type
        self.fee = fee
        self.players_passed = 0

    def payout(self) -> int:
        """Amount the next player to stop here will collect."""
        return self.players_passed * self.fee * self.match_type.rate_tenths // 10

    def on_stop(self, player: PlayerState) -> None:
        player.credit(self.payout())
        self.players_passed = 0

    def on_pass(self, player: PlayerState) -> None:
        if player.debit(self.fee):
            self.players_passed += 1

    def reset(self) -> None:
        self.players_passed = 0


@dataclass
class RestDaySquare(Square):
    """A day off training. Nothing happens."""

    def __init__(self, name: str):
        super().__init__(name, SquareType.REST_DAY)
