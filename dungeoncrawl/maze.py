"""Grid of walls and paths used by the level editor."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO


class CellState(IntEnum):
    """State of a single maze cell."""

    PATH = 0
    WALL = 1


_STEPS = ((-2, 0), (2, 0), (0, -2), (0, 2))


class Maze:
    """A rectangular maze where every cell is either a wall or a path."""

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols
        self._grid = [[CellState.WALL] * cols for _ in range(rows)]

    def set_path(self, row: int, col: int) -> None:
        """Mark the cell at (row, col) as walkable."""
        self._grid[row][col] = CellState.PATH

    def is_wall(self, row: int, col: int) -> bool:
        """Return True if the cell at (row, col) is a wall."""
        return self._grid[row][col] == CellState.WALL

    def neighbours(self, row: int, col: int) -> list[tuple[int, int]]:
        """Return wall cells two steps away that lie strictly inside the border."""
        found = []
        for d_row, d_col in _STEPS:
            n_row, n_col = row + d_row, col + d_col
            if 0 < n_row < self.rows - 1 and 0 < n_col < self.cols - 1:
                if self._grid[n_row][n_col] == CellState.WALL:
                    found.append((n_row, n_col))
        return found

    def display(self, out: TextIO | None = None) -> None:
        """Print the maze with '#' for walls and '.' for paths."""
        out = sys.stdout if out is None else out
        header = "".join(f"{i:2d} " for i in range(self.cols))
        out.write(f"   {header}\n")
        for i, row in enumerate(self._grid):
            cells = "".join(
                " . " if cell == CellState.PATH else " # " for cell in row
            )
            out.write(f"{i:2d} {cells}\n")

    def to_json(self) -> dict:
        """Return the maze dimensions and grid as a JSON-ready dict."""
        return {
            "rows": self.rows,
            "columns": self.cols,
            "grid": [[int(cell) for cell in row] for row in self._grid],
        }

    def is_within_bounds(self, row: int, col: int) -> bool:
        """Return True if (row, col) lies inside the grid."""
        return 0 <= row < self.rows and 0 <= col < self.cols