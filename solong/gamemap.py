"""Reading, describing and validating game maps."""

from __future__ import annotations

import os
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Sequence

from .errors import ErrorKind, MapError

WALL = "1"
SPACE = "0"
PLAYER = "P"
EXIT = "E"
COLLECTABLE = "C"
ALLOWED = frozenset(WALL + SPACE + PLAYER + EXIT + COLLECTABLE)
EXTENSION = ".ber"

Grid = Sequence[Sequence[str]]


@dataclass
class GameMap:
    """A map grid together with the player's position and item counts."""

    grid: list[list[str]]
    width: int
    height: int
    x: int = 0
    y: int = 0
    collectables: int = 0
    collected: int = 0

    @classmethod
    def from_text(cls, text: str) -> "GameMap":
        """Build a map from file contents without validating its layout."""
        rows = split_rows(text)
        grid = [list(row) for row in rows]
        x = y = 0
        if check_unique(grid, PLAYER):
            position = find_player(grid)
            if position is not None:
                x, y = position
        return cls(
            grid=grid,
            width=len(rows[-1]) if rows else 0,
            height=len(rows),
            x=x,
            y=y,
            collectables=count_collectables(grid),
        )

    def copy(self) -> "GameMap":
        """Return an independent copy of this map."""
        return GameMap(
            grid=[list(row) for row in self.grid],
            width=self.width,
            height=self.height,
            x=self.x,
            y=self.y,
            collectables=self.collectables,
            collected=self.collected,
        )


def verify_extension(path: str | os.PathLike) -> bool:
    """Tell whether the path names a file with a non-empty stem and '.ber'."""
    name = os.fspath(path)
    return len(name) > len(EXTENSION) and name.endswith(EXTENSION)


def split_rows(text: str) -> list[str]:
    """Split map text into rows; a blank line inside the text is an error."""
    if not text or "\n\n" in text:
        raise MapError(ErrorKind.MAP_ERROR)
    return [row for row in text.split("\n") if row]


def _cells(grid: Grid) -> Iterable[str]:
    return (cell for row in grid for cell in row)


def check_unique(grid: Grid, char: str) -> bool:
    """Tell whether the character appears exactly once in the grid."""
    return sum(1 for cell in _cells(grid) if cell == char) == 1


def check_characters(grid: Grid) -> bool:
    """Tell whether the grid holds only walls, spaces, P, E and C."""
    return all(cell in ALLOWED for cell in _cells(grid))


def is_rectangular(grid: Grid) -> bool:
    """Tell whether every row is as long as the first."""
    if not grid:
        return True
    width = len(grid[0])
    return all(len(row) == width for row in grid)


def is_closed(grid: Grid) -> bool:
    """Tell whether the map is surrounded by walls."""
    if not grid:
        return True
    last = len(grid[0]) - 1
    for row in grid:
        for j, cell in enumerate(row):
            if j in (0, last) and cell != WALL:
                return False
    return all(cell == WALL for cell in grid[0]) and all(
        cell == WALL for cell in grid[-1]
    )


def find_player(grid: Grid) -> tuple[int, int] | None:
    """Return the (x, y) of the first player cell, or None if there is none."""
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell == PLAYER:
                return x, y
    return None


def count_collectables(grid: Grid) -> int:
    """Count the collectables in the grid."""
    return Counter(_cells(grid))[COLLECTABLE]


def is_playable(grid: Grid, start: tuple[int, int]) -> bool:
    """Tell whether the exit and every collectable can be reached from start.

    The exit blocks the way: cells reachable only through it do not count.
    """
    total = count_collectables(grid)
    found = 0
    exits = 0
    seen = {start}
    stack = [start]
    while stack:
        x, y = stack.pop()
        cell = grid[y][x]
        if cell == COLLECTABLE:
            found += 1
        if cell == EXIT:
            exits += 1
            continue
        for nx, ny in ((x, y + 1), (x, y - 1), (x + 1, y), (x - 1, y)):
            if (nx, ny) in seen or not 0 <= ny < len(grid):
                continue
            if not 0 <= nx < len(grid[ny]) or grid[ny][nx] == WALL:
                continue
            seen.add((nx, ny))
            stack.append((nx, ny))
    return exits == 1 and found == total


def validate(grid: Grid) -> None:
    """Raise MapError for the first rule the grid breaks."""
    if not (
        check_unique(grid, PLAYER)
        and check_unique(grid, EXIT)
        and count_collectables(grid) > 0
    ):
        raise MapError(ErrorKind.WRONG_PEC)
    if not check_characters(grid):
        raise MapError(ErrorKind.WRONG_CHARACTER)
    if not is_rectangular(grid):
        raise MapError(ErrorKind.SQUARE_MAP)
    if not is_closed(grid):
        raise MapError(ErrorKind.CLOSED_MAP)
    start = find_player(grid)
    if start is None or not is_playable(grid, start):
        raise MapError(ErrorKind.PLAYABLE_MAP)


def load_map(path: str | os.PathLike) -> GameMap:
    """Read, parse and validate the map stored at path."""
    if not verify_extension(path):
        raise MapError(ErrorKind.FILE_EXTENSION_ERROR)
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError as exc:
        raise MapError(ErrorKind.MAP_FAILED_OPEN) from exc
    game_map = GameMap.from_text(text)
    validate(game_map.grid)
    return game_map