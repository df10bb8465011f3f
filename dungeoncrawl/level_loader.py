"""Loading of level files: the grid, random treasures and random monsters."""

from __future__ import annotations

import json
import random
from pathlib import Path
from typing import Any, Sequence

from .cell import Cell
from .entities import Item, NPEntity, Wall
from .entity_factory import create_monster
from .game_map import GameMap
from .kinds import item_type_from_name
from .stats import Stats

DEFAULT_DATA_DIR = Path("../../data")

_REQUIRED_FIELDS = ("columns", "rows", "grid", "monsterN", "treasureN")


def validate_level_json(data: dict) -> None:
    """Check that a level has its required fields and a grid of 'rows' rows.

    Raises ValueError otherwise.
    """
    for name in _REQUIRED_FIELDS:
        if name not in data:
            raise ValueError(f"Missing required field in level JSON: {name}")
    grid = data["grid"]
    if not isinstance(grid, list) or len(grid) != data["rows"]:
        raise ValueError("Grid must be an array of rows matching 'rows' count.")


def read_json(path: str | Path) -> Any:
    """Read and parse a JSON file; raise OSError if it cannot be opened."""
    try:
        with Path(path).open(encoding="utf-8") as file:
            return json.load(file)
    except OSError as exc:
        raise OSError(f"Could not open JSON file: {path}") from exc


def parse_grid(
    json_grid: Sequence[Sequence[int]], cols: int
) -> tuple[list[list[Cell]], list[tuple[int, int]]]:
    """Build cells from a 0/1 grid; return the cells and the free positions in order.

    Raises ValueError for rows of the wrong length or unknown cell values.
    """
    grid: list[list[Cell]] = []
    free: list[tuple[int, int]] = []
    for r, row_data in enumerate(json_grid):
        if not isinstance(row_data, list) or len(row_data) != cols:
            raise ValueError(
                "Each grid row must be an array of size equal to 'columns'."
            )
        row: list[Cell] = []
        for c, value in enumerate(row_data):
            if value == 0:
                row.append(Cell())
                free.append((r, c))
            elif value == 1:
                row.append(Cell(Wall()))
            else:
                raise ValueError(f"Unknown cell type in grid: {value}")
        grid.append(row)
    return grid, free


class LevelLoader:
    """Builds maps from the level, item and monster files under a data directory."""

    def __init__(
        self, data_dir: str | Path | None = None, rng: random.Random | None = None
    ) -> None:
        self.data_dir = DEFAULT_DATA_DIR if data_dir is None else Path(data_dir)
        self.rng = random.Random() if rng is None else rng

    def _level_path(self, n: int) -> Path:
        return self.data_dir / "levels" / f"level{n}.json"

    def _items_path(self, n: int) -> Path:
        return self.data_dir / "items" / f"items{n}.json"

    def _monsters_path(self, n: int) -> Path:
        return self.data_dir / "monsters" / f"monsters{n}.json"

    def load(self, n: int) -> GameMap:
        """Load level `n` and populate it with random treasures and monsters."""
        data = read_json(self._level_path(n))
        validate_level_json(data)

        monster_n = int(data["monsterN"])
        treasure_n = int(data["treasureN"])
        rows = int(data["rows"])
        cols = int(data["columns"])
        finish = (int(data["finishRow"]), int(data["finishCol"]))

        grid, free = parse_grid(data["grid"], cols)

        if finish not in free:
            raise ValueError("Finish cell should be free!")
        free.remove(finish)
        if not free:
            raise ValueError("Level has no free cell for the player to start on!")
        player_row, player_col = free.pop(0)

        self.place_entities(self.load_items(treasure_n, n), free, grid)
        self.place_entities(self.load_monsters(monster_n, n), free, grid)

        return GameMap(rows, cols, finish[0], finish[1], player_row, player_col, grid)

    def load_items(self, count: int, n: int) -> list[Item]:
        """Pick `count` random items from the pool of level `n`."""
        data = read_json(self._items_path(n))
        if "items" not in data:
            raise ValueError("Invalid item file.")
        pool = list(data["items"])
        if len(pool) < count:
            raise ValueError("Not enough treasures in the pool to choose from.")
        self.rng.shuffle(pool)
        return [
            Item(
                str(entry["name"]),
                float(entry["bonus"]),
                item_type_from_name(entry["type"]),
            )
            for entry in pool[:count]
        ]

    def load_monsters(self, count: int, n: int) -> list[NPEntity]:
        """Pick `count` random monsters from the pool of level `n`."""
        data = read_json(self._monsters_path(n))
        if "monsters" not in data or not isinstance(data["monsters"], list):
            raise ValueError("Invalid monsters JSON format.")
        pool = list(data["monsters"])
        if len(pool) < count:
            raise ValueError("Not enough monsters in the pool to select.")
        self.rng.shuffle(pool)
        monsters: list[NPEntity] = []
        for entry in pool[:count]:
            stats_data = entry["stats"]
            stats = Stats(
                int(stats_data["strength"]),
                int(stats_data["mana"]),
                int(stats_data["maxhealth"]),
            )
            monsters.append(create_monster(str(entry["name"]), n, stats))
        return monsters

    def place_entities(
        self,
        entities: Sequence[NPEntity],
        free_cells: list[tuple[int, int]],
        grid: list[list[Cell]],
    ) -> None:
        """Put each entity on a random free cell, removing used cells from `free_cells`."""
        for entity in entities:
            if not free_cells:
                raise ValueError("Not enough free cells to place entities.")
            row, col = free_cells.pop(self.rng.randrange(len(free_cells)))
            grid[row][col].add_entity(entity)