"""Game state: player movement, collectibles, win and loss, coin animation."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from mermaidgame.mapfile import GameMap

ESCAPE_KEY = 53

_KEY_DIRECTIONS = {
    0: "a", 123: "a", 97: "a",
    13: "w", 126: "w", 119: "w",
    2: "d", 124: "d", 100: "d",
    1: "s", 125: "s", 115: "s",
}

_COIN_NORMAL_PERIOD = 20
_COIN_REVERSED_PERIOD = 40


class Direction(Enum):
    """A step on the map, named by the key that makes it."""

    UP = "w"
    DOWN = "s"
    LEFT = "a"
    RIGHT = "d"

    @property
    def delta(self) -> tuple[int, int]:
        """Change of (row, column) made by one step."""
        return {
            Direction.UP: (-1, 0),
            Direction.DOWN: (1, 0),
            Direction.LEFT: (0, -1),
            Direction.RIGHT: (0, 1),
        }[self]


class Outcome(Enum):
    """State of a game after a key press or a move."""

    PLAYING = "playing"
    WON = "won"
    LOST = "lost"
    QUIT = "quit"


def direction_for_key(keycode: int) -> Optional[Direction]:
    """Return the direction bound to ``keycode``, or None."""
    letter = _KEY_DIRECTIONS.get(keycode)
    return Direction(letter) if letter is not None else None


class Game:
    """A running game on a validated map."""

    def __init__(self, game_map: GameMap) -> None:
        self.grid = [list(row) for row in game_map.grid]
        self.player = game_map.player
        self.exit = game_map.exit
        self.collectibles = game_map.collectibles
        self.moves = 0
        self.facing = Direction.RIGHT
        self.outcome = Outcome.PLAYING

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def rows(self) -> tuple[str, ...]:
        """The current map, one string per row."""
        return tuple("".join(row) for row in self.grid)

    def move(self, direction: Direction) -> Outcome:
        """Try to step the player one cell; walls block the step."""
        if self.outcome is not Outcome.PLAYING:
            return self.outcome
        row, col = self.player
        d_row, d_col = direction.delta
        target = (row + d_row, col + d_col)
        tile = self.grid[target[0]][target[1]]
        if tile == "1":
            return self.outcome
        if tile == "C":
            self.collectibles -= 1
        if tile == "V":
            self.outcome = Outcome.LOST
            return self.outcome
        if tile == "E" and self.collectibles == 0:
            self.outcome = Outcome.WON
            return self.outcome
        self.grid[row][col] = "0"
        self.player = target
        self.grid[target[0]][target[1]] = "P"
        self.grid[self.exit[0]][self.exit[1]] = "E"
        self.moves += 1
        return self.outcome

    def press(self, keycode: int) -> Outcome:
        """Handle a key: escape quits, movement keys move, others do nothing."""
        if keycode == ESCAPE_KEY:
            self.outcome = Outcome.QUIT
            return self.outcome
        direction = direction_for_key(keycode)
        if direction is None:
            return self.outcome
        if direction in (Direction.LEFT, Direction.RIGHT):
            self.facing = direction
        return self.move(direction)


class CoinAnimator:
    """Alternates the coin sprite between its normal and reversed frames."""

    def __init__(self) -> None:
        self.ticks = 0
        self.reversed = False

    def tick(self) -> bool:
        """Advance one frame; return True while the reversed coin shows."""
        if self.ticks % _COIN_NORMAL_PERIOD == 0:
            self.reversed = False
        if self.ticks % _COIN_REVERSED_PERIOD == 0:
            self.reversed = True
        self.ticks += 1
        return self.reversed