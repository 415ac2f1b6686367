"""Game state and player movement."""

from __future__ import annotations

from enum import Enum, IntEnum

from .gamemap import COLLECTABLE, EXIT, PLAYER, SPACE, WALL, GameMap

WIN_MESSAGE = "You reached your destination! Congratulations!"


class Key(IntEnum):
    """Key codes the game reacts to."""

    ESC = 65307
    ARROW_UP = 65362
    W = 119
    ARROW_DOWN = 65364
    S = 115
    ARROW_RIGHT = 65363
    D = 100
    ARROW_LEFT = 65361
    A = 97


class Direction(Enum):
    """A step on the grid as (dx, dy)."""

    UP = (0, -1)
    DOWN = (0, 1)
    RIGHT = (1, 0)
    LEFT = (-1, 0)

    @property
    def label(self) -> str:
        return self.name.lower()


class MoveOutcome(Enum):
    """What a key press or move attempt led to."""

    MOVED = "moved"
    BLOCKED = "blocked"
    WON = "won"
    QUIT = "quit"
    IGNORED = "ignored"


_KEY_DIRECTIONS = {
    Key.ARROW_UP: Direction.UP,
    Key.W: Direction.UP,
    Key.ARROW_DOWN: Direction.DOWN,
    Key.S: Direction.DOWN,
    Key.ARROW_RIGHT: Direction.RIGHT,
    Key.D: Direction.RIGHT,
    Key.ARROW_LEFT: Direction.LEFT,
    Key.A: Direction.LEFT,
}


def direction_for_key(key_code: int) -> Direction | None:
    """Return the direction a key moves the player in, or None."""
    try:
        return _KEY_DIRECTIONS.get(Key(key_code))
    except ValueError:
        return None


def describe_move(count: int, direction: Direction) -> str:
    """Return the line reported after a successful move."""
    return f"Move {count}, with a movement {direction.label}"


class Game:
    """A running game on a map: moves the player and tracks progress."""

    def __init__(self, game_map: GameMap) -> None:
        self.map = game_map
        self.moves = 0
        self.finished = False

    def _cell(self, x: int, y: int) -> str:
        grid = self.map.grid
        if 0 <= y < len(grid) and 0 <= x < len(grid[y]):
            return grid[y][x]
        return WALL

    def move(self, direction: Direction) -> MoveOutcome:
        """Try to move the player one step in the given direction."""
        if self.finished:
            return MoveOutcome.IGNORED
        dx, dy = direction.value
        prev_x, prev_y = self.map.x, self.map.y
        x, y = prev_x + dx, prev_y + dy
        target = self._cell(x, y)
        if target == EXIT:
            if self.map.collected != self.map.collectables:
                return MoveOutcome.BLOCKED
            print(WIN_MESSAGE)
            self.finished = True
            return MoveOutcome.WON
        if target == WALL:
            return MoveOutcome.BLOCKED
        if target == COLLECTABLE:
            self.map.collected += 1
        self.map.x, self.map.y = x, y
        self.map.grid[y][x] = PLAYER
        self.map.grid[prev_y][prev_x] = SPACE
        self.moves += 1
        print(describe_move(self.moves, direction))
        return MoveOutcome.MOVED

    def press(self, key_code: int) -> MoveOutcome:
        """React to a key: quit on escape, move on direction keys."""
        if self.finished:
            return MoveOutcome.IGNORED
        if key_code == Key.ESC:
            self.finished = True
            return MoveOutcome.QUIT
        direction = direction_for_key(key_code)
        if direction is None:
            return MoveOutcome.IGNORED
        return self.move(direction)