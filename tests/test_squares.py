"""
Tests for square effect rules.
"""

from worldcup.player import PlayerState
from worldcup.squares import (
    BookmakerSquare,
    GoalSquare,
    MatchSquare,
    MatchType,
    PenaltySquare,
    RestDaySquare,
    SeasonStartSquare,
    SquareType,
    YellowCardSquare,
)


def test_season_start_pays_on_stop_and_pass():
    square = SeasonStartSquare("Season Start", 50)
    player = PlayerState("Alice", 1000)

    square.on_pass(player)
    assert player.funds == 1050

    square.on_stop(player)
    assert player.funds == 1100


def test_goal_pays_only_on_stop():
    square = GoalSquare("Goal", 120)
    player = PlayerState("Alice", 1000)

    square.on_pass(player)
    assert player.funds == 1000

    square.on_stop(player)
    assert player.funds == 1120


def test_penalty_exact_price_leaves_player_solvent():
    """Paying exactly everything you have is not bankruptcy."""
    square = PenaltySquare("Penalty Kick", 180)
    player = PlayerState("Alice", 180)

    square.on_stop(player)

    assert player.funds == 0
    assert not player.is_bankrupt


def test_penalty_above_funds_bankrupts():
    square = PenaltySquare("Penalty Kick", 181)
    player = PlayerState("Alice", 180)

    square.on_stop(player)

    assert player.funds == 0
    assert player.is_bankrupt


def test_penalty_ignores_passing_players():
    square = PenaltySquare("Penalty Kick", 180)
    player = PlayerState("Alice", 100)

    square.on_pass(player)

    assert player.funds == 100
    assert not player.is_bankrupt


def test_bookmaker_wins_once_every_three_stops():
    square = BookmakerSquare("Bookmaker", 100, win_frequency=3)
    player = PlayerState("Alice", 1000)

    balances = []
    for _ in range(6):
        square.on_stop(player)
        balances.append(player.funds)

    assert balances == [1100, 1000, 900, 1000, 900, 800]


def test_bookmaker_cycle_shared_between_players():
    square = BookmakerSquare("Bookmaker", 100)
    alice = PlayerState("Alice", 1000)
    bob = PlayerState("Bob", 1000)

    square.on_stop(alice)
    square.on_stop(bob)

    assert alice.funds == 1100
    assert bob.funds == 900


def test_bookmaker_reset_restarts_cycle():
    square = BookmakerSquare("Bookmaker", 100)
    player = PlayerState("Alice", 1000)

    square.on_stop(player)
    square.on_stop(player)
    square.reset()
    square.on_stop(player)

    assert player.funds == 1100
    assert square.stops == 1


def test_bookmaker_counter_advances_on_bankrupting_stop():
    square = BookmakerSquare("Bookmaker", 100)
    square.stops = 1
    broke = PlayerState("Broke", 50)

    square.on_stop(broke)

    assert broke.is_bankrupt
    assert square.stops == 2


def test_yellow_card_adds_size_minus_one():
    square = YellowCardSquare("Yellow Card", 3)
    player = PlayerState("Alice", 1000)

    square.on_stop(player)
    assert player.suspension == 2

    square.on_pass(player)
    assert player.suspension == 2


def test_match_collects_fees_from_passers():
    square = MatchSquare("Match vs San Marino", MatchType.FRIENDLY, 160)
    alice = PlayerState("Alice", 1000)
    bob = PlayerState("Bob", 1000)

    square.on_pass(alice)
    square.on_pass(alice)

    assert alice.funds == 680
    assert square.players_passed == 2

    square.on_stop(bob)

    assert bob.funds == 1320
    assert square.players_passed == 0


def test_match_does_not_count_insolvent_passer():
    square = MatchSquare("Match vs San Marino", MatchType.FRIENDLY, 160)
    rich = PlayerState("Rich", 1000)
    poor = PlayerState("Poor", 100)
    lander = PlayerState("Lander", 0)

    square.on_pass(rich)
    square.on_pass(poor)

    assert poor.is_bankrupt
    assert poor.funds == 0
    assert square.players_passed == 1

    square.on_stop(lander)
    assert lander.funds == 160


def test_match_rates_by_type():
    assert MatchSquare("a", MatchType.FRIENDLY, 100).match_type.rate_tenths == 10
    assert MatchSquare("b", MatchType.FOR_POINTS, 100).match_type.rate_tenths == 25
    assert MatchSquare("c", MatchType.FINAL, 100).match_type.rate_tenths == 40


def test_match_payout_for_points_and_final():
    points = MatchSquare("Match vs Argentina", MatchType.FOR_POINTS, 250)
    points.players_passed = 3
    assert points.payout() == 1875

    final = MatchSquare("Match vs France", MatchType.FINAL, 400)
    final.players_passed = 2
    assert final.payout() == 3200


def test_match_payout_is_floored():
    """2.5 x 101 = 252.5, paid out as 252."""
    square = MatchSquare("Odd fee", MatchType.FOR_POINTS, 101)
    square.players_passed = 1
    player = PlayerState("Alice", 0)

    square.on_stop(player)

    assert player.funds == 252


def test_match_stop_with_no_passers_pays_nothing():
    square = MatchSquare("Match vs San Marino", MatchType.FRIENDLY, 160)
    player = PlayerState("Alice", 1000)

    square.on_stop(player)

    assert player.funds == 1000


def test_match_reset_clears_passers():
    square = MatchSquare("Match vs Mexico", MatchType.FOR_POINTS, 300)
    square.on_pass(PlayerState("Alice", 1000))

    square.reset()

    assert square.players_passed == 0


def test_rest_day_does_nothing():
    square = RestDaySquare("Rest Day")
    player = PlayerState("Alice", 1000)

    square.on_stop(player)
    square.on_pass(player)

    assert player.funds == 1000
    assert player.suspension == 0
    assert square.square_type == SquareType.REST_DAY
