"""
Custom exception hierarchy for the World Cup engine.

Configuration errors are raised by ``WorldCup2022.play`` before any
game state is touched, so a caller can fix the setup and try again.
"""


class WorldCupError(Exception):
    """Base exception for all game-related errors."""


class ConfigurationError(WorldCupError):
    """The game was set up in a way that cannot be played."""


class TooFewDiceError(ConfigurationError):
    """Fewer dice registered than the rules require."""


class TooManyDiceError(ConfigurationError):
    """More dice registered than the rules allow."""


class TooFewPlayersError(ConfigurationError):
    """Not enough players registered to start a game."""


class TooManyPlayersError(ConfigurationError):
    """More players registered than the board can take."""
