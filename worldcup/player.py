"""
Player state and management.
"""


class PlayerState:
    """Represents the complete state of a player in the game."""

    def __init__(self, name: str, starting_balance: int):
        self.name = name
        self.funds = starting_balance
        self.position = 0
        self.suspension = 0
        self.is_bankrupt = False

    @property
    def is_suspended(self) -> bool:
        """Check if the player has turns left to sit out."""
        return self.suspension > 0

    def credit(self, amount: int) -> None:
        """Add money to the player's balance. Bankrupt players stay at 0."""
        if self.is_bankrupt:
            return
        self.funds += amount

    def debit(self, amount: int) -> bool:
        """
        Take money from the player.

        If the player cannot cover the full amount, their funds drop to 0
        and they go bankrupt.

        Returns:
            True if the amount was paid in full, False on bankruptcy
        """
        if self.funds >= amount:
            self.funds -= amount
            return True
        self.funds = 0
        self.is_bankrupt = True
        return False

    def move(self, fields: int, board_size: int) -> int:
        """Advance the player and return the new position."""
        self.position = (self.position + fields) % board_size
        return self.position

    def put_to_start(self) -> None:
        self.position = 0

    def __repr__(self) -> str:
        return (
            f"PlayerState(name='{self.name}', funds={self.funds}, "
            f"position={self.position}, suspension={self.suspension}, "
            f"bankrupt={self.is_bankrupt})"
        )
