# oca

A small model of the Game of the Goose (*juego de la oca*). It has a 63-cell board, a six-sided die, players with tokens, and the classic special cells. Each special cell has its own effect on the player who lands on it. All messages are in Spanish.

## Installation

```
pip install .
```

## Command line

```
oca
```

The command runs a demonstration with two players, "Ana" and "Luis". Ana lands in turn on a plain cell and on the goose, bridge, inn, well, prison, maze and skull cells. Luis then lands on a goose, a bridge and a garden cell. The command prints the effect of every cell. The only options are the standard `-h` and `--help`.

## Library use

```python
from oca.player import Player
from oca.cells import SkullCell, InnCell

player = Player("Ana")
player.move_token(12)          # token moves to position 12

SkullCell(58).effect(player, None)   # token goes back to position 0
InnCell(19).effect(player, None)     # player.can_play becomes False
```

Every `effect(player, game)` prints its lines and also returns them as a tuple of strings.

### Modules

- `oca.dice.Die` is a six-sided die. It takes an optional `random.Random` for reproducible rolls. `roll()` stores a value from 1 to 6 in `value` and returns it. `value` starts at 1.
- `oca.player` holds the players and their tokens:
  - `Token` is a dataclass with `color` (default 1), `position` (default 0) and `can_play`.
  - `Player(name, token)` has a `name`, a `token` and a `can_play` flag.
  - `Player.roll_die(die)` rolls the given die. With `None` it returns 0.
  - `Player.move_token(steps)` advances the token and prints the move.
- `oca.cells` holds the cells:
  - `Cell` is a plain cell, with `kind` set to `"normal"`.
  - `SpecialCell` is a cell with `kind` set to `"especial"`, plus a `special_kind` and a `message`.
- `oca.board.Board(size=63)` is the board. It holds a `cells` list, which starts empty.
  - `create()` prints and returns an announcement.
  - `get_cell(position)` returns the cell in `cells` at that position, or `None`.
- `oca.game.Game(board, die, players)` holds a board, a die and a list of players. It tracks `current_turn`. It has these methods:
  - `start()` announces the game and creates the board.
  - `start_turn()` returns the index of the current player.
  - `next_turn()` passes the turn round the players. With no players it raises `ValueError`.
  - `has_winner()` always returns `False`.

### Special cells

`oca.cells` provides these special cells:

| Cell | Effect on the player who lands on it |
|------|--------------------------------------|
| `GooseCell` | Announces a roll again |
| `BridgeCell` | Announces a roll again |
| `GardenCell` | Announces a rest |
| `InnCell` | Sets `can_play` to `False` |
| `WellCell` | Sets `can_play` to `False` |
| `PrisonCell` | Sets `can_play` to `False` |
| `MazeCell` | Moves the token to position 30 |
| `SkullCell` | Moves the token to position 0 |

## What it does not do

This package does not play a full game. There is no game loop, and nothing fills the board with cells. Players do not skip turns after losing them. The goose and bridge cells only announce their jump and do not move the token. No win condition is checked.

## Running the tests

```
pip install ".[test]"
pytest
```