"""Command that walks through every kind of cell and shows its effect."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from oca.cells import (
    BridgeCell,
    Cell,
    GardenCell,
    GooseCell,
    InnCell,
    MazeCell,
    PrisonCell,
    SkullCell,
    WellCell,
)
from oca.player import Player


def _show_cells(player: Player) -> None:
    cells = [
        Cell(1),
        GooseCell(9),
        BridgeCell(6),
        InnCell(19),
        WellCell(31),
        PrisonCell(52),
        MazeCell(42),
        SkullCell(58),
    ]
    for cell in cells:
        print(f"\n--- Casilla {cell.position} ---")
        print(f"Tipo: {cell.kind}")
        if player.token is not None:
            player.token.position = cell.position
        print(f"{player.name} cae en la casilla {cell.position}")
        cell.effect(player, None)


def _show_direct(player: Player) -> None:
    for title, cell in (
        ("Oca", GooseCell(27)),
        ("Puente", BridgeCell(12)),
        ("Jardín", GardenCell(50)),
    ):
        print(f"\nEfecto de {title}:")
        cell.effect(player, None)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the demonstration of the board cells."""
    parser = argparse.ArgumentParser(
        prog="oca", description="Muestra los efectos de las casillas del juego de la oca."
    )
    parser.parse_args(argv)

    print("=== JUEGO DE LA OCA CON HERENCIA ===")
    print("Probando jerarquía de herencia de casillas...")

    ana = Player("Ana")
    luis = Player("Luis")

    print("\n--- Probando polimorfismo con casillas ---")
    _show_cells(ana)

    print("\n--- Probando herencia directa ---")
    _show_direct(luis)

    print("\n--- Información de herencia ---")
    print("Jerarquía demostrada:")
    print("Casilla (clase base)")
    print("  ↑")
    print("CasillaEspecial (clase derivada)")
    print("  ↑")
    print("CasillaOca, CasillaPuente, etc. (clases derivadas específicas)")

    print("\n--- Estructura organizada del proyecto ---")
    print("📁 Core/              ← Lógica principal")
    print("📁 Entities/          ← Entidades del juego")
    print("📁 Board/             ← Sistema de casillas")
    print("  📁 SpecialCells/    ← Casillas específicas")
    print("📁 Main/              ← Programa principal")

    print("\nPrograma terminado exitosamente.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())