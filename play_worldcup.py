#!/usr/bin/env python3
"""
Minimal CLI for simulating World Cup 2022 games.

Players roll two random dice; results go to the console and to a JSONL
log file.
"""

import argparse
import logging
import sys
from typing import List, Optional

from game_logger import GameLogger
from worldcup.dice import RandomDie
from worldcup.exceptions import WorldCupError
from worldcup.game import WorldCup2022, create_game
from worldcup.scoreboard import ConsoleScoreBoard, MultiScoreBoard
from worldcup.settings import get_settings

logger = logging.getLogger(__name__)

DEFAULT_PLAYERS = ["Lewandowski", "Messi", "Ronaldo"]


def print_game_summary(game: WorldCup2022) -> None:
    """Print final game summary."""
    print("\n" + "=" * 60)
    print("GAME OVER")
    print("=" * 60)
    print(f"\nWinner: {game.winner}")
    print(f"Rounds played: {game.round_number}")

    print("\nFinal Standings:")
    for player in game.players:
        status = "BANKRUPT" if player.is_bankrupt else f"{player.funds}"
        print(f"  {player.name}: {status}")


def simulate_game(
    player_names: List[str],
    rounds: int,
    seed: Optional[int] = None,
    verbose: bool = True,
    log_file: Optional[str] = None,
) -> WorldCup2022:
    """
    Simulate a complete game.

    Args:
        player_names: Player names in turn order
        rounds: Maximum number of rounds
        seed: Random seed for reproducibility
        verbose: Whether to print every turn
        log_file: Path to JSONL log file (None = auto-generate)
    """
    settings = get_settings()
    config = settings.to_game_config(seed)

    dice = [
        RandomDie(config.die_sides, seed=None if config.seed is None else config.seed + i)
        for i in range(config.dice_count)
    ]
    game = create_game(config, player_names, dice=dice)
    game.validate()

    game_logger = GameLogger(log_file, log_dir=settings.log_dir)
    game.set_scoreboard(MultiScoreBoard(ConsoleScoreBoard(), game_logger) if verbose else game_logger)

    logger.info("Starting game with %d players, %d rounds, seed %s", len(player_names), rounds, seed)
    game.play(rounds)
    game_logger.flush_engine_events(game)

    if verbose:
        print_game_summary(game)
        print(f"\nGame logged to: {game_logger.log_file}")

    return game


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for CLI."""
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Simulate a World Cup 2022 game")
    parser.add_argument(
        "--players",
        nargs="+",
        default=DEFAULT_PLAYERS,
        help="Player names in turn order (2-11)",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=settings.rounds,
        help=f"Maximum number of rounds (default: {settings.rounds})",
    )
    parser.add_argument("--seed", type=int, default=settings.seed, help="Random seed")
    parser.add_argument("--quiet", action="store_true", help="Do not print every turn")
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Path to JSONL log file (default: auto-generated timestamp)",
    )

    args = parser.parse_args(argv)
    if args.rounds < 0:
        parser.error("--rounds must not be negative")

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        game = simulate_game(
            player_names=args.players,
            rounds=args.rounds,
            seed=args.seed,
            verbose=not args.quiet,
            log_file=args.log_file,
        )
    except WorldCupError as e:
        logger.error("Cannot start game: %s", e)
        return 1

    if args.quiet:
        print(game.winner)
    return 0


if __name__ == "__main__":
    sys.exit(main())
