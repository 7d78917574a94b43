"""
Dice: the die interface, a seeded random die, and the aggregator the
engine rolls every turn.
"""

import random
from abc import ABC, abstractmethod
from typing import List, Optional, Tuple


class Die(ABC):
    """A single die. Anything that can produce a bounded non-negative value."""

    @abstractmethod
    def roll(self) -> int:
        """Roll the die once and return the value."""
        pass


class RandomDie(Die):
    """A fair die with its own random number generator."""

    def __init__(self, sides: int = 6, seed: Optional[int] = None):
        self.sides = sides
        self.rng = random.Random(seed)

    def roll(self) -> int:
        return self.rng.randint(1, self.sides)

    def __repr__(self) -> str:
        return f"RandomDie(sides={self.sides})"


class Dice:
    """The set of dice rolled together each turn."""

    def __init__(self):
        self.dice: List[Die] = []
        self.last_roll: Optional[Tuple[int, ...]] = None

    def add_die(self, die: Die) -> None:
        self.dice.append(die)

    def __len__(self) -> int:
        return len(self.dice)

    def roll(self) -> int:
        """Roll every die exactly once and return the total."""
        values = tuple(die.roll() for die in self.dice)
        self.last_roll = values
        return sum(values)
