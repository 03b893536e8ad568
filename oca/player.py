"""Players and the tokens they move across the board."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from oca.dice import Die


@dataclass
class Token:
    """A player's piece on the board."""

    color: int = 1
    position: int = 0
    can_play: bool = True


@dataclass
class Player:
    """A participant in the game, owning a single token."""

    name: str = ""
    token: Optional[Token] = field(default_factory=Token)
    can_play: bool = True

    def __init__(self, name: str = "", token: Optional[Token] = None) -> None:
        self.name = name
        self.token = token if token is not None else Token()
        self.can_play = True

    def roll_die(self, die: Optional[Die]) -> int:
        """Roll the given die; without a die the result is 0."""
        if die is None:
            return 0
        return die.roll()

    def move_token(self, steps: int) -> None:
        """Advance the player's token by ``steps`` cells."""
        if self.token is None:
            return
        self.token.position += steps
        print(f"{self.name} se mueve {steps} casillas.")