"""The rules of the game: moving the player, collecting cheese, ending.

The board is a validated map (see :mod:`fromage.mapfile`). The player
walks one square per key press, picks up every piece of cheese and then
leaves through the exit. Walking into the fox ends the game.

Moves record what must be redrawn in :attr:`Game.draws` as
``(row, column, sprite)`` tuples. Sprite names:

* ``floor``, ``cheese``, ``fox``, ``door_closed``, ``door_open``
* ``player_front``, ``player_back``, ``player_left``, ``player_right``
* ``collect`` (the player eating)
* ``corner_top_left``, ``corner_top_right``, ``corner_bottom_left``,
  ``corner_bottom_right``, ``wall_top``, ``wall_bottom``, ``wall_left``,
  ``wall_right`` and ``hole`` for walls
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from fromage.mapfile import WALL, find_tile

TILE_SIZE = 64
DIGIT_SIZE = 12
KEY_ESCAPE = 65307


class Direction(Enum):
    """A step on the board as ``(row, column)`` offsets."""

    RIGHT = (0, 1)
    LEFT = (0, -1)
    DOWN = (1, 0)
    UP = (-1, 0)

    @property
    def sprite(self) -> str:
        """The player sprite shown after stepping this way."""
        return _FACING[self]


_FACING = {
    Direction.RIGHT: "player_right",
    Direction.LEFT: "player_left",
    Direction.DOWN: "player_front",
    Direction.UP: "player_back",
}

_KEYS = {
    65363: Direction.RIGHT,
    ord("d"): Direction.RIGHT,
    65361: Direction.LEFT,
    ord("a"): Direction.LEFT,
    65364: Direction.DOWN,
    ord("s"): Direction.DOWN,
    65362: Direction.UP,
    ord("w"): Direction.UP,
}


class Outcome(Enum):
    """How the game stands."""

    ONGOING = "ongoing"
    ESCAPED = "escaped"
    CAUGHT = "caught"
    CLOSED = "closed"


class Game:
    """The state of one game on a board given as rows of tiles."""

    def __init__(self, rows: Sequence[str]) -> None:
        rows = list(rows)
        start = find_tile(rows, "P")
        exit_pos = find_tile(rows, "E")
        if start is None or exit_pos is None:
            raise ValueError("board needs a player start and an exit")
        self.grid = [list(row) for row in rows]
        self.height = len(rows)
        self.width = len(rows[0])
        self.player = start
        self.exit = exit_pos
        self.collect = self.count_collectibles()
        self.steps = 0
        self.outcome = Outcome.ONGOING
        self.draws: list[tuple[int, int, str]] = []

    @property
    def rows(self) -> list[str]:
        """The current board as strings."""
        return ["".join(row) for row in self.grid]

    @property
    def finished(self) -> bool:
        """Whether the game has ended."""
        return self.outcome is not Outcome.ONGOING

    def count_collectibles(self) -> int:
        """Count the cheese left on the board."""
        return sum(row.count("C") for row in self.grid)

    def move(self, direction: Direction) -> bool:
        """Try to step the player; return whether it reached a new square.

        Stepping onto the exit once all cheese is gone, or onto the fox,
        ends the game without moving.
        """
        if self.finished:
            return False
        row, col = self.player
        d_row, d_col = direction.value
        t_row, t_col = row + d_row, col + d_col
        if not (0 <= t_row < self.height and 0 <= t_col < len(self.grid[t_row])):
            return False
        target = self.grid[t_row][t_col]
        if target == WALL:
            return False
        if target in ("E", "R"):
            if target == "R":
                self.outcome = Outcome.CAUGHT
            elif self.collect == 0:
                self.outcome = Outcome.ESCAPED
            return False
        self.grid[row][col] = "0"
        self.grid[t_row][t_col] = "P"
        self.player = (t_row, t_col)
        self.draws.append((row, col, "floor"))
        if target == "C":
            self.draws.append((t_row, t_col, "collect"))
            self.collect -= 1
            if self.collect == 0:
                self.draws.append((*self.exit, "door_open"))
        else:
            self.draws.append((t_row, t_col, direction.sprite))
        return True

    def handle_key(self, key: int | str) -> bool:
        """Act on a key press; return whether the player moved.

        Arrow keys and ``w a s d`` move, counting a step on success;
        escape closes the game.
        """
        if isinstance(key, str):
            key = ord(key)
        if self.finished:
            return False
        if key == KEY_ESCAPE:
            self.outcome = Outcome.CLOSED
            return False
        direction = _KEYS.get(key)
        if direction is None:
            return False
        moved = self.move(direction)
        if moved:
            self.steps += 1
        return moved


def wall_sprite(rows: Sequence[str], row: int, col: int) -> str:
    """Name the wall sprite for the square at *row*, *col*."""
    last_row = len(rows) - 1
    last_col = len(rows[0]) - 1
    if row == 0 and col == 0:
        return "corner_top_left"
    if row == 0 and col == last_col:
        return "corner_top_right"
    if row == last_row and col == 0:
        return "corner_bottom_left"
    if row == last_row and col == last_col:
        return "corner_bottom_right"
    if row == 0:
        return "wall_top"
    if row == last_row:
        return "wall_bottom"
    if col == 0:
        return "wall_left"
    if col == last_col:
        return "wall_right"
    return "hole"


_TILE_SPRITES = {
    "0": "floor",
    "P": "player_front",
    "C": "cheese",
    "E": "door_closed",
    "R": "fox",
}


def tile_sprite(rows: Sequence[str], row: int, col: int) -> str:
    """Name the sprite drawn for the tile at *row*, *col* at the start."""
    tile = rows[row][col]
    if tile == WALL:
        return wall_sprite(rows, row, col)
    try:
        return _TILE_SPRITES[tile]
    except KeyError:
        raise ValueError(f"unknown tile {tile!r} at ({row}, {col})") from None


def number_width(n: int) -> int:
    """Count the decimal digits of *n*; anything below 10 takes one."""
    width = 1
    while n >= 10:
        width += 1
        n //= 10
    return width


def digit_positions(n: int) -> list[tuple[int, int]]:
    """Return ``(x, digit)`` pairs placing the digits of *n* from the left edge."""
    if n < 0:
        raise ValueError(f"step counter cannot be negative, got {n}")
    return [(index * DIGIT_SIZE, int(digit)) for index, digit in enumerate(str(n))]


def end_message(outcome: Outcome, steps: int, remaining: int) -> str:
    """Return the text printed when the game ends.

    *steps* counts moves made before the last one, which is added here.
    """
    if outcome in (Outcome.ESCAPED, Outcome.CAUGHT):
        if remaining == 0:
            return f"Nombres de pas : {steps + 1}\n\n  FELICITATIONS\n\n"
        return "\n\nLE RENARD A PRIS T'ES FROMAGE\n\n"
    return "\n\n  FENETRE FERMEE\n\n"