"""Creation of game maps from level files or from saved JSON."""

from __future__ import annotations

from pathlib import Path

from .cell import Cell
from .entities import Wall
from .entity_factory import item_from_json, monster_from_json
from .game_map import GameMap
from .level_loader import LevelLoader


def create_map(level: int, data_dir: str | Path | None = None) -> GameMap:
    """Load level `level` from the level, item and monster files under `data_dir`."""
    return LevelLoader(data_dir).load(level)


def _check_position(row: int, col: int, rows: int, cols: int, what: str) -> None:
    if not (0 <= row < rows and 0 <= col < cols):
        raise ValueError(f"{what} coordinates out of bounds! Invalid map JSON!")


def map_from_json(data: dict) -> GameMap:
    """Rebuild a map, its walls, monsters and treasures from its JSON form.

    Raises KeyError for missing fields and ValueError for a grid smaller than
    its stated size or entities placed outside it.
    """
    cols = int(data["columns"])
    rows = int(data["rows"])
    player_row = int(data["playerRow"])
    player_col = int(data["playerCol"])
    finish_row = int(data["finishRow"])
    finish_col = int(data["finishCol"])

    grid_data = data["grid"]
    if len(grid_data) < rows or any(len(row) < cols for row in grid_data[:rows]):
        raise ValueError("Grid is smaller than its stated dimensions! Invalid map JSON!")

    grid = [
        [Cell(Wall()) if value == 1 else Cell() for value in row_data[:cols]]
        for row_data in grid_data[:rows]
    ]

    for monster_data in data["monsters"]:
        row, col = int(monster_data["row"]), int(monster_data["column"])
        _check_position(row, col, rows, cols, "Monster")
        grid[row][col].add_entity(monster_from_json(monster_data))

    for treasure_data in data["treasures"]:
        row, col = int(treasure_data["row"]), int(treasure_data["column"])
        _check_position(row, col, rows, cols, "Item")
        grid[row][col].add_entity(item_from_json(treasure_data))

    return GameMap(rows, cols, finish_row, finish_col, player_row, player_col, grid)