"""Loading and validating game maps stored in ``.ber`` files."""

from __future__ import annotations

import os
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Sequence, Union

from solong.linereader import LineReader

WALL = "1"
FLOOR = "0"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"
VISITED = "x"
MAP_SUFFIX = ".ber"

_KNOWN_CELLS = frozenset({WALL, FLOOR, COLLECTIBLE, EXIT, PLAYER})


class MapError(ValueError):
    """Raised when a map file or its contents break the map rules."""


@dataclass(frozen=True)
class GameMap:
    """A validated map: its rows, the player's (x, y) start and the collectible count."""

    rows: tuple[str, ...]
    player: tuple[int, int]
    collectibles: int

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def height(self) -> int:
        return len(self.rows)


def line_length(line: str) -> int:
    """Length of ``line`` up to, not including, its first newline."""
    index = line.find("\n")
    return len(line) if index < 0 else index


def check_extension(path: Union[str, os.PathLike]) -> None:
    """Raise MapError unless ``path`` names a ``.ber`` file."""
    if not os.fspath(path).endswith(MAP_SUFFIX):
        raise MapError(f"map file must end in {MAP_SUFFIX}: {os.fspath(path)}")


def read_map(path: Union[str, os.PathLike]) -> list[str]:
    """Read the rows of the map file at ``path``, newlines removed."""
    try:
        with open(path, "r", encoding="utf-8", newline="") as handle:
            lines = list(LineReader(handle, 4096))
    except (OSError, UnicodeDecodeError) as exc:
        raise MapError(f"cannot read map {os.fspath(path)}: {exc}") from exc
    if not lines:
        raise MapError(f"map file is empty: {os.fspath(path)}")
    return [line[: line_length(line)] for line in lines]


def check_walls(rows: Sequence[str]) -> None:
    """Raise MapError unless the rows form a rectangle closed by walls."""
    if not rows:
        raise MapError("map has no rows")
    width = line_length(rows[0])
    for row in rows:
        if line_length(row) != width:
            raise MapError("map rows differ in length")
        if width == 0 or row[0] != WALL or row[width - 1] != WALL:
            raise MapError("map is not closed by walls")
    for edge in (rows[0], rows[-1]):
        if any(cell != WALL for cell in edge[:width]):
            raise MapError("map is not closed by walls")


def count_elements(rows: Sequence[str]) -> tuple[int, tuple[int, int]]:
    """Check the map's characters and return (collectibles, (player_x, player_y)).

    The map needs exactly one exit, exactly one player and at least one
    collectible; any character other than 0, 1, C, E and P is an error.
    """
    counts: Counter[str] = Counter()
    player = (-1, -1)
    for y, row in enumerate(rows):
        for x, cell in enumerate(row):
            if cell not in _KNOWN_CELLS:
                raise MapError(f"unknown map character {cell!r} at ({x}, {y})")
            if cell == PLAYER:
                player = (x, y)
            counts[cell] += 1
    if counts[EXIT] != 1 or counts[PLAYER] != 1 or counts[COLLECTIBLE] < 1:
        raise MapError(
            "map needs one exit, one player and at least one collectible"
        )
    return counts[COLLECTIBLE], player


def flood_fill(rows: Sequence[str], start_x: int, start_y: int) -> list[str]:
    """Mark every cell reachable from (start_x, start_y) with ``x``.

    Walls stop the fill, and so does the exit, which is left unmarked.
    The input is not changed; the filled rows are returned.
    """
    grid = [list(row) for row in rows]
    stack = [(start_x, start_y)]
    while stack:
        x, y = stack.pop()
        if not (0 <= y < len(grid) and 0 <= x < len(grid[y])):
            continue
        if grid[y][x] in (WALL, VISITED, EXIT):
            continue
        grid[y][x] = VISITED
        stack.extend(((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)))
    return ["".join(row) for row in grid]


def check_reachable(rows: Iterable[str]) -> None:
    """Raise MapError if flood-filled ``rows`` hold a cell the fill did not reach."""
    for y, row in enumerate(rows):
        for x, cell in enumerate(row):
            if cell not in (WALL, VISITED, EXIT):
                raise MapError(f"unreachable map cell at ({x}, {y})")


def validate_rows(rows: Iterable[str]) -> GameMap:
    """Run every map check on ``rows`` and return the validated map."""
    rows = list(rows)
    check_walls(rows)
    collectibles, player = count_elements(rows)
    check_reachable(flood_fill(rows, *player))
    return GameMap(rows=tuple(rows), player=player, collectibles=collectibles)


def load_map(path: Union[str, os.PathLike]) -> GameMap:
    """Read and validate the ``.ber`` map file at ``path``."""
    check_extension(path)
    return validate_rows(read_map(path))