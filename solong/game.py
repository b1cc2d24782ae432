"""Game state and the moves a player makes on a validated map."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from solong.mapcheck import COLLECTIBLE, EXIT, FLOOR, PLAYER, WALL, GameMap

KEY_ESCAPE = 65307
KEY_W = 119
KEY_A = 97
KEY_S = 115
KEY_D = 100
KEY_UP = 65362
KEY_LEFT = 65361
KEY_DOWN = 65364
KEY_RIGHT = 65363


class Direction(Enum):
    """A step on the map as (row delta, column delta)."""

    UP = (-1, 0)
    LEFT = (0, -1)
    DOWN = (1, 0)
    RIGHT = (0, 1)

    @property
    def dy(self) -> int:
        return self.value[0]

    @property
    def dx(self) -> int:
        return self.value[1]


class MoveOutcome(Enum):
    """What a key press or a move did."""

    MOVED = "moved"
    COLLECTED = "collected"
    BLOCKED = "blocked"
    EXIT_LOCKED = "exit_locked"
    WON = "won"
    QUIT = "quit"
    IGNORED = "ignored"


_KEY_DIRECTIONS = {
    KEY_W: Direction.UP,
    KEY_UP: Direction.UP,
    KEY_A: Direction.LEFT,
    KEY_LEFT: Direction.LEFT,
    KEY_S: Direction.DOWN,
    KEY_DOWN: Direction.DOWN,
    KEY_D: Direction.RIGHT,
    KEY_RIGHT: Direction.RIGHT,
}


def key_to_direction(keycode: int) -> Optional[Direction]:
    """The direction bound to ``keycode`` (WASD or arrows), or None."""
    return _KEY_DIRECTIONS.get(keycode)


class Game:
    """A running game: the grid, the player, collected items and move count."""

    def __init__(self, game_map: GameMap):
        self._grid = [list(row) for row in game_map.rows]
        self.player_x, self.player_y = game_map.player
        self.total_collectibles = game_map.collectibles
        self.collected = 0
        self.moves = 0
        self.won = False

    @property
    def player(self) -> tuple[int, int]:
        """The player's position as (x, y)."""
        return self.player_x, self.player_y

    @property
    def rows(self) -> tuple[str, ...]:
        """The current grid, one string per row."""
        return tuple("".join(row) for row in self._grid)

    def cell(self, row: int, col: int) -> str:
        """The character at ``row``, ``col``."""
        return self._grid[row][col]

    def move(self, direction: Direction) -> MoveOutcome:
        """Try to step the player one cell in ``direction``.

        Walls stop the player without counting a move. Stepping onto the
        exit counts a move; it wins once every collectible is taken and
        otherwise leaves the player where it was.
        """
        if self.won:
            return MoveOutcome.WON
        new_y = self.player_y + direction.dy
        new_x = self.player_x + direction.dx
        target = self._grid[new_y][new_x]
        if target == WALL:
            return MoveOutcome.BLOCKED
        self.moves += 1
        if target == EXIT:
            if self.collected == self.total_collectibles:
                self.won = True
                return MoveOutcome.WON
            return MoveOutcome.EXIT_LOCKED
        outcome = MoveOutcome.MOVED
        if target == COLLECTIBLE:
            self.collected += 1
            outcome = MoveOutcome.COLLECTED
        self._grid[self.player_y][self.player_x] = FLOOR
        self._grid[new_y][new_x] = PLAYER
        self.player_x, self.player_y = new_x, new_y
        return outcome

    def handle_key(self, keycode: int) -> MoveOutcome:
        """Apply a key press: escape quits, movement keys move, others are ignored."""
        if keycode == KEY_ESCAPE:
            return MoveOutcome.QUIT
        direction = key_to_direction(keycode)
        if direction is None:
            return MoveOutcome.IGNORED
        return self.move(direction)