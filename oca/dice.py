"""The six-sided die used to move tokens around the board."""

from __future__ import annotations

import random

FACES = 6


class Die:
    """A fair six-sided die that remembers the last value it showed."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.value = 1

    def roll(self) -> int:
        """Roll the die, store the result and return it."""
        self.value = self._rng.randint(1, FACES)
        return self.value

    def __repr__(self) -> str:
        return f"Die(value={self.value})"