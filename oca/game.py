"""A game of the goose: board, die, players and whose turn it is."""

from __future__ import annotations

from typing import Iterable, Optional

from oca.board import Board
from oca.dice import Die
from oca.player import Player


class Game:
    """Holds the state of a game and moves the turn between players."""

    def __init__(
        self,
        board: Optional[Board] = None,
        die: Optional[Die] = None,
        players: Optional[Iterable[Player]] = None,
    ) -> None:
        self.board = board if board is not None else Board()
        self.die = die if die is not None else Die()
        self.players: list[Player] = list(players) if players is not None else []
        self.current_turn = 0

    @property
    def num_players(self) -> int:
        return len(self.players)

    def start(self) -> None:
        """Start the game and build the board."""
        print("Iniciando juego...")
        self.board.create()

    def start_turn(self) -> int:
        """Announce the turn and return the index of the player whose turn it is."""
        turn = self.current_turn
        print(f"Iniciando turno del jugador {turn}")
        return turn

    def next_turn(self) -> None:
        """Pass the turn to the next player, wrapping around."""
        if not self.players:
            raise ValueError("cannot pass the turn in a game without players")
        self.current_turn = (self.current_turn + 1) % self.num_players
        print(f"Siguiente turno: jugador {self.current_turn}")

    def has_winner(self) -> bool:
        """Check whether someone has won; no win condition is decided yet."""
        print("Verificando ganador...")
        return False