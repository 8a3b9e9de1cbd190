"""Reachability checks on a game map: exit and collectibles from the player."""

from __future__ import annotations

from typing import Optional, Sequence

_MOVES = ((-1, 0), (1, 0), (0, -1), (0, 1))


def find_player(grid: Sequence[str]) -> Optional[tuple[int, int]]:
    """Return (row, column) of the first 'P' in row-major order, or None."""
    for row, line in enumerate(grid):
        col = line.find("P")
        if col != -1:
            return row, col
    return None


def reachable_cells(grid: Sequence[str], start: tuple[int, int]) -> set[tuple[int, int]]:
    """Return every cell reachable from ``start`` without crossing a wall ('1').

    Moves go up, down, left and right and stay inside the grid. The start
    cell itself is always part of the result.
    """
    height = len(grid)
    width = len(grid[0]) if grid else 0
    visited = {start}
    stack = [start]
    while stack:
        row, col = stack.pop()
        for d_row, d_col in _MOVES:
            cell = (row + d_row, col + d_col)
            r, c = cell
            if (
                0 <= r < height
                and 0 <= c < width
                and cell not in visited
                and grid[r][c] != "1"
            ):
                visited.add(cell)
                stack.append(cell)
    return visited


def has_valid_path(grid: Sequence[str]) -> bool:
    """Tell whether the player can reach an exit and every collectible."""
    start = find_player(grid)
    if start is None:
        return False
    visited = reachable_cells(grid, start)
    if not any(grid[r][c] == "E" for r, c in visited):
        return False
    return all(
        (r, c) in visited
        for r, line in enumerate(grid)
        for c, char in enumerate(line)
        if char == "C"
    )