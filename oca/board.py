"""The game board: a fixed number of cells, 63 in the classic game."""

from __future__ import annotations

from typing import Optional

from oca.cells import Cell

STANDARD_SIZE = 63


class Board:
    """The board the tokens travel across."""

    def __init__(self, size: int = STANDARD_SIZE) -> None:
        self.size = size
        self.cells: list[Cell] = []

    def create(self) -> str:
        """Announce the creation of the board and return the announcement."""
        announcement = f"Creando tablero con {self.size} casillas..."
        print(announcement)
        return announcement

    def get_cell(self, position: int) -> Optional[Cell]:
        """Return the cell at ``position``, or None if the board has none there."""
        print(f"Obteniendo casilla en posición: {position}")
        return next((cell for cell in self.cells if cell.position == position), None)

    def __repr__(self) -> str:
        return f"Board(size={self.size})"