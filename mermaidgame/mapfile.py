"""Loading and validation of ``.ber`` map files."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, Union

from mermaidgame.pathcheck import has_valid_path

WHITESPACE = "\n\t\v\f\r "
ALLOWED = frozenset("VECP10")
MAP_SUFFIX = ".ber"


class MapError(ValueError):
    """Raised when a map file is missing or does not describe a valid map."""


@dataclass(frozen=True)
class GameMap:
    """A validated map: its rows, the player and exit cells and the coin count."""

    grid: tuple[str, ...]
    player: tuple[int, int]
    exit: tuple[int, int]
    collectibles: int

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0


def check_filename(path: Union[str, Path]) -> str:
    """Return the file name if it ends in '.ber'; raise MapError otherwise."""
    name = str(path)
    if not name.endswith(MAP_SUFFIX):
        raise MapError("Invalid file format!")
    return name


def ensure_not_blank(text: str) -> str:
    """Return ``text`` unless it is empty or holds only whitespace."""
    if all(char in WHITESPACE for char in text):
        raise MapError("Only whitespaces in map")
    return text


def check_double_newlines(text: str) -> str:
    """Return ``text`` unless it holds an empty line (two newlines in a row)."""
    if "\n\n" in text:
        raise MapError("Double new line!")
    return text


def trim_back(text: str, chars: str = WHITESPACE) -> str:
    """Remove trailing characters found in ``chars``."""
    return text.rstrip(chars)


def check_characters(rows: Sequence[str]) -> list[str]:
    """Return the rows if they hold only map characters; raise otherwise."""
    for row in rows:
        if any(char not in ALLOWED for char in row):
            raise MapError("Invalid map")
    return list(rows)


def measure(rows: Sequence[str]) -> tuple[int, int]:
    """Return (height, width) of a rectangular map."""
    if not rows:
        raise MapError("Empty map")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise MapError("Map isn't rectangular.")
    return len(rows), width


def check_borders(rows: Sequence[str]) -> GameMap:
    """Check walls and element counts, and locate the player and the exit.

    The map must be closed by walls, hold exactly one player and one exit,
    and at least one collectible.
    """
    height, width = measure(rows)
    players = exits = collectibles = 0
    player = exit_cell = (-1, -1)
    for r, row in enumerate(rows):
        for c, char in enumerate(row):
            if char == "E":
                exits += 1
                exit_cell = (r, c)
            elif char == "C":
                collectibles += 1
            elif char == "P":
                players += 1
                player = (r, c)
            on_edge = r == height - 1 or c == width - 1
            if rows[0][c] != "1" or row[0] != "1" or (on_edge and char != "1"):
                raise MapError("Map border isn't filled.")
    if players != 1 or exits != 1 or collectibles < 1:
        raise MapError("Wrong number of coll")
    return GameMap(tuple(rows), player, exit_cell, collectibles)


def parse_map(text: str) -> GameMap:
    """Validate the text of a map file and return the map it describes."""
    ensure_not_blank(text)
    text = check_double_newlines(text.strip(WHITESPACE))
    rows = [trim_back(line) for line in text.split("\n") if line]
    measure(rows)
    check_characters(rows)
    game_map = check_borders(rows)
    if not has_valid_path(game_map.grid):
        raise MapError("No valid path.")
    return game_map


def load_map(path: Union[str, Path]) -> GameMap:
    """Read a '.ber' map file and validate it."""
    try:
        data = Path(path).read_bytes()
    except OSError as error:
        raise MapError("Invalid filename!") from error
    check_filename(path)
    return parse_map(data.decode("latin-1"))