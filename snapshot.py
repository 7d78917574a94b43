"""
Public snapshot serialization of a WorldCup2022 game.
"""

from __future__ import annotations

from typing import Any, Dict, List

from worldcup.game import WorldCup2022
from worldcup.squares import BookmakerSquare, MatchSquare


def serialize_snapshot(game: WorldCup2022) -> Dict[str, Any]:
    """Serialize a game into a stable JSON dict.

    The snapshot includes:
    - round_number, game_over and winner
    - players still in the game, in turn order
    - board squares with their per-game counters
    - number of registered dice
    """
    players: List[Dict[str, Any]] = []
    for player in game.players:
        players.append(
            {
                "name": player.name,
                "funds": player.funds,
                "position": player.position,
                "square_name": game.board.get_square(player.position).name,
                "suspension": player.suspension,
                "is_bankrupt": player.is_bankrupt,
            }
        )

    squares: List[Dict[str, Any]] = []
    for index, square in enumerate(game.board):
        entry: Dict[str, Any] = {
            "index": index,
            "name": square.name,
            "type": square.square_type.value,
        }
        if isinstance(square, BookmakerSquare):
            entry["stops"] = square.stops
        elif isinstance(square, MatchSquare):
            entry["match_type"] = square.match_type.value
            entry["players_passed"] = square.players_passed
        squares.append(entry)

    return {
        "round_number": game.round_number,
        "game_over": game.game_over,
        "winner": game.winner,
        "players": players,
        "board": squares,
        "dice_count": len(game.dice),
    }
