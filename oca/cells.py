"""Board cells: plain cells and the special cells with their effects."""

from __future__ import annotations

from typing import Any, Optional

from oca.player import Player


def _announce(*lines: str) -> tuple[str, ...]:
    """Print each line and hand the lines back to the caller."""
    for line in lines:
        print(line)
    return lines


class Cell:
    """A plain board cell with no special effect."""

    def __init__(self, position: int = 0) -> None:
        self.position = position
        self.kind = "normal"

    def effect(self, player: Optional[Player], game: Any = None) -> tuple[str, ...]:
        """Apply the cell's effect to the player who landed on it.

        Returns the lines that were announced.
        """
        return _announce("Casilla normal - Sin efecto especial")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(position={self.position})"


class SpecialCell(Cell):
    """A cell that carries a special kind and a message."""

    def __init__(
        self,
        position: int = 0,
        special_kind: str = "especial",
        message: str = "Casilla especial",
    ) -> None:
        super().__init__(position)
        self.kind = "especial"
        self.special_kind = special_kind
        self.message = message

    def effect(self, player: Optional[Player], game: Any = None) -> tuple[str, ...]:
        return _announce(f"Efecto especial: {self.message}")


class GooseCell(SpecialCell):
    """From goose to goose: the player rolls again."""

    SPECIAL_KIND = "oca"
    MESSAGE = "¡De oca a oca y tiro porque me toca!"

    def __init__(self, position: int = 0) -> None:
        super().__init__(position, self.SPECIAL_KIND, self.MESSAGE)

    def effect(self, player: Optional[Player], game: Any = None) -> tuple[str, ...]:
        return _announce(
            self.message,
            "El jugador avanza a la siguiente oca y juega de nuevo.",
        )


class BridgeCell(SpecialCell):
    """From bridge to bridge: the player jumps and rolls again."""

    SPECIAL_KIND = "puente"
    MESSAGE = "¡De puente a puente y tiro porque me lleva la corriente!"

    def __init__(self, position: int = 0) -> None:
        super().__init__(position, self.SPECIAL_KIND, self.MESSAGE)

    def effect(self, player: Optional[Player], game: Any = None) -> tuple[str, ...]:
        return _announce(
            self.message,
            "El jugador salta al otro puente y juega de nuevo.",
        )


class InnCell(SpecialCell):
    """The inn: the player loses a turn."""

    SPECIAL_KIND = "posada"
    MESSAGE = "En la posada se está bien, pero pierdes un turno."

    def __init__(self, position: int = 0) -> None:
        super().__init__(position, self.SPECIAL_KIND, self.MESSAGE)

    def effect(self, player: Optional[Player], game: Any = None) -> tuple[str, ...]:
        lines = _announce(self.message)
        if player is not None:
            player.can_play = False
            lines += _announce(f"{player.name} descansa en la posada y pierde 1 turno.")
        return lines


class WellCell(SpecialCell):
    """The well: the player waits until rescued."""

    SPECIAL_KIND = "pozo"
    MESSAGE = "En el pozo te quedas hasta que otro jugador venga a salvarte."

    def __init__(self, position: int = 0) -> None:
        super().__init__(position, self.SPECIAL_KIND, self.MESSAGE)

    def effect(self, player: Optional[Player], game: Any = None) -> tuple[str, ...]:
        lines = _announce(self.message)
        if player is not None:
            player.can_play = False
            lines += _announce(f"{player.name} cae en el pozo y debe esperar.")
        return lines


class PrisonCell(SpecialCell):
    """The prison: the player loses two turns."""

    SPECIAL_KIND = "carcel"
    MESSAGE = "¡A la cárcel! Pierdes dos turnos."

    def __init__(self, position: int = 0) -> None:
        super().__init__(position, self.SPECIAL_KIND, self.MESSAGE)

    def effect(self, player: Optional[Player], game: Any = None) -> tuple[str, ...]:
        lines = _announce(self.message)
        if player is not None:
            player.can_play = False
            lines += _announce(f"{player.name} va a la cárcel y pierde 2 turnos.")
        return lines


class MazeCell(SpecialCell):
    """The maze: the player goes back to cell 30."""

    SPECIAL_KIND = "laberinto"
    MESSAGE = "Te pierdes en el laberinto y retrocedes a la casilla 30."
    TARGET = 30

    def __init__(self, position: int = 0) -> None:
        super().__init__(position, self.SPECIAL_KIND, self.MESSAGE)

    def effect(self, player: Optional[Player], game: Any = None) -> tuple[str, ...]:
        lines = _announce(self.message)
        if player is not None and player.token is not None:
            player.token.position = self.TARGET
            lines += _announce(f"{player.name} retrocede a la casilla {self.TARGET}.")
        return lines


class SkullCell(SpecialCell):
    """Death: the player goes back to the start."""

    SPECIAL_KIND = "calavera"
    MESSAGE = "¡La muerte te lleva! Vuelves al inicio."

    def __init__(self, position: int = 0) -> None:
        super().__init__(position, self.SPECIAL_KIND, self.MESSAGE)

    def effect(self, player: Optional[Player], game: Any = None) -> tuple[str, ...]:
        lines = _announce(self.message)
        if player is not None and player.token is not None:
            player.token.position = 0
            lines += _announce(f"{player.name} vuelve al inicio del juego.")
        return lines


class GardenCell(SpecialCell):
    """The garden: a restful cell with no penalty."""

    SPECIAL_KIND = "jardin"
    MESSAGE = "Te relajas en el jardín. ¡Qué hermoso lugar!"

    def __init__(self, position: int = 0) -> None:
        super().__init__(position, self.SPECIAL_KIND, self.MESSAGE)

    def effect(self, player: Optional[Player], game: Any = None) -> tuple[str, ...]:
        return _announce(self.message, "El jardín te da energía para continuar.")