"""Reading and validating ``.ber`` map files.

A map is a rectangle of tiles:

* ``0`` floor
* ``1`` wall
* ``C`` collectible
* ``E`` exit
* ``P`` player start
* ``R`` fox, an enemy

A valid map has exactly one player and one exit and at least one
collectible. It is closed by walls. Every collectible can be reached
from the start, and so can a square next to the exit.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Sequence

ALLOWED_TILES = frozenset("01CPER")
WALL = "1"
FILL = "O"
_BLOCKING = frozenset((WALL, "E", FILL, "R"))


class MapError(ValueError):
    """Raised when a map file is missing or does not describe a valid map."""


def split_lines(text: str) -> list[str]:
    """Split *text* on newlines, dropping empty pieces."""
    return [piece for piece in text.split("\n") if piece]


def read_rows(path: str | os.PathLike[str]) -> list[str]:
    """Read the file at *path* and return its non-empty lines."""
    try:
        with open(path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError(f"cannot read map file {os.fspath(path)!r}") from exc
    return split_lines(text)


def is_rectangle(rows: Sequence[str]) -> int:
    """Return the number of rows if all rows are equally long, else 0."""
    if not rows:
        return 0
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        return 0
    return len(rows)


def valid_count(rows: Iterable[str]) -> bool:
    """Check tile counts: one player, one exit, some collectibles, no strangers."""
    text = "".join(rows)
    if any(tile not in ALLOWED_TILES for tile in text):
        return False
    return text.count("C") >= 1 and text.count("E") == 1 and text.count("P") == 1


def is_enclosed(rows: Sequence[str]) -> bool:
    """Check that the map border is made of walls only."""
    if not rows:
        return False
    last = len(rows) - 1
    for index, row in enumerate(rows):
        if index in (0, last):
            if row.count(WALL) != len(row):
                return False
        elif not row or row[0] != WALL or row[-1] != WALL:
            return False
    return True


def find_tile(rows: Sequence[str], tile: str) -> tuple[int, int] | None:
    """Return ``(row, column)`` of the first *tile*, scanning row by row."""
    for row_index, row in enumerate(rows):
        col_index = row.find(tile)
        if col_index >= 0:
            return row_index, col_index
    return None


def flood_fill(rows: Sequence[str], start: tuple[int, int]) -> list[str]:
    """Return a copy of *rows* with every square reachable from *start* set to ``O``.

    Walls, the exit and foxes stop the fill.
    """
    grid = [list(row) for row in rows]
    pending = [start]
    while pending:
        r, c = pending.pop()
        if not (0 <= r < len(grid) and 0 <= c < len(grid[r])):
            continue
        if grid[r][c] in _BLOCKING:
            continue
        grid[r][c] = FILL
        pending.extend(((r + 1, c), (r - 1, c), (r, c + 1), (r, c - 1)))
    return ["".join(row) for row in grid]


def is_playable(
    rows: Sequence[str], start: tuple[int, int], exit_pos: tuple[int, int]
) -> bool:
    """Check that all collectibles and a neighbour of the exit are reachable."""
    filled = flood_fill(rows, start)
    if any("C" in row for row in filled):
        return False
    er, ec = exit_pos
    for r, c in ((er + 1, ec), (er - 1, ec), (er, ec + 1), (er, ec - 1)):
        if 0 <= r < len(filled) and 0 <= c < len(filled[r]) and filled[r][c] == FILL:
            return True
    return False


def validate_rows(rows: Iterable[str]) -> list[str]:
    """Validate a map given as rows and return the rows as a list."""
    rows = list(rows)
    if not is_rectangle(rows):
        raise MapError("map is empty or not rectangular")
    if not valid_count(rows):
        raise MapError("map needs one P, one E, at least one C and only 0 1 C P E R")
    if not is_enclosed(rows):
        raise MapError("map is not closed by walls")
    start = find_tile(rows, "P")
    exit_pos = find_tile(rows, "E")
    if start is None or exit_pos is None or not is_playable(rows, start, exit_pos):
        raise MapError("map cannot be completed")
    return rows


def load_map(path: str | os.PathLike[str]) -> list[str]:
    """Load and validate the ``.ber`` map at *path*."""
    if not os.fspath(path).endswith(".ber"):
        raise MapError("map file name must end with .ber")
    return validate_rows(read_rows(path))