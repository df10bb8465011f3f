"""The game map: a grid of cells, the player's position and the finish cell."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, TextIO

from .cell import Cell
from .kinds import GameAction

if TYPE_CHECKING:
    from .hero import Hero

_MOVES = {
    GameAction.MOVE_UP: (-1, 0),
    GameAction.MOVE_DOWN: (1, 0),
    GameAction.MOVE_LEFT: (0, -1),
    GameAction.MOVE_RIGHT: (0, 1),
}

PLAYER_SYMBOL = "P"
FINISH_SYMBOL = "F"


@dataclass
class GameMap:
    """A rectangular level with the hero's position and the finish cell."""

    rows: int
    cols: int
    finish_row: int
    finish_col: int
    player_row: int
    player_col: int
    grid: list[list[Cell]] = field(repr=False)

    def _is_within_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def move_hero(self, hero: Hero, direction: GameAction) -> bool:
        """Try to move the hero one cell; return True if the move happened.

        On success the hero interacts with whatever occupies the new cell.
        """
        step = _MOVES.get(direction)
        if step is None:
            return False
        row, col = self.player_row + step[0], self.player_col + step[1]
        if not self._is_within_bounds(row, col):
            return False
        target = self.grid[row][col]
        if not target.step(hero):
            return False
        self.player_row, self.player_col = row, col
        target.interact(hero)
        return True

    def has_reached_end(self) -> bool:
        """Return True if the hero stands on the finish cell."""
        return (self.player_row, self.player_col) == (self.finish_row, self.finish_col)

    def display(self, out: TextIO | None = None) -> None:
        """Draw the map, marking the player with 'P' and the finish with 'F'."""
        out = sys.stdout if out is None else out
        for i, row in enumerate(self.grid):
            parts = []
            for j, cell in enumerate(row):
                if (i, j) == (self.player_row, self.player_col):
                    symbol = PLAYER_SYMBOL
                elif (i, j) == (self.finish_row, self.finish_col):
                    symbol = FINISH_SYMBOL
                else:
                    symbol = cell.symbol()
                parts.append(f" {symbol} ")
            out.write("".join(parts) + "\n")

    def to_json(self) -> dict:
        """Return the map state: walls as 1, paths as 0, plus monsters and treasures.

        Raises ValueError if a cell holds an entity of an unknown kind.
        """
        monsters = []
        treasures = []
        grid = []
        for i, row in enumerate(self.grid):
            grid_row = []
            for j, cell in enumerate(row):
                symbol = cell.symbol()
                if symbol == "#":
                    grid_row.append(1)
                    continue
                if symbol == "M":
                    monsters.append({**cell.entity_json(), "row": i, "column": j})
                elif symbol == "T":
                    treasures.append({**cell.entity_json(), "row": i, "column": j})
                elif symbol != ".":
                    raise ValueError("Unknown grid marker encountered!")
                grid_row.append(0)
            grid.append(grid_row)

        return {
            "rows": self.rows,
            "columns": self.cols,
            "finishRow": self.finish_row,
            "finishCol": self.finish_col,
            "playerRow": self.player_row,
            "playerCol": self.player_col,
            "monsters": monsters,
            "treasures": treasures,
            "grid": grid,
        }