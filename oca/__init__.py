"""The Game of the Goose: board, die, players and special cells."""

__version__ = "0.1.0"