import json
import random

import pytest

from dungeoncrawl.cell import Cell
from dungeoncrawl.entities import Item, Monster, Wall
from dungeoncrawl.kinds import ItemType
from dungeoncrawl.level_loader import (
    LevelLoader,
    parse_grid,
    read_json,
    validate_level_json,
)

GRID = [
    [1, 1, 1, 1, 1],
    [1, 0, 0, 0, 1],
    [1, 0, 1, 0, 1],
    [1, 0, 0, 0, 1],
    [1, 1, 1, 1, 1],
]

ITEMS = {
    "items": [
        {"name": "Iron Sword", "bonus": 0.1, "type": "weapon"},
        {"name": "Firebolt", "bonus": 0.2, "type": "spell"},
        {"name": "Chain Mail", "bonus": 0.3, "type": "armor"},
    ]
}

MONSTERS = {
    "monsters": [
        {"name": "Goblin", "stats": {"strength": 5, "mana": 2, "maxhealth": 20}},
        {"name": "Orc", "stats": {"strength": 8, "mana": 1, "maxhealth": 30}},
    ]
}


def write(path, data):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")


def make_data(tmp_path, level=None, items=ITEMS, monsters=MONSTERS):
    level = level or {
        "rows": 5,
        "columns": 5,
        "grid": GRID,
        "monsterN": 2,
        "treasureN": 2,
        "finishRow": 3,
        "finishCol": 3,
    }
    write(tmp_path / "levels" / "level1.json", level)
    write(tmp_path / "items" / "items1.json", items)
    write(tmp_path / "monsters" / "monsters1.json", monsters)
    return tmp_path


def count_symbols(game_map, symbol):
    return sum(cell.symbol() == symbol for row in game_map.grid for cell in row)


def test_load_builds_map(tmp_path):
    loader = LevelLoader(make_data(tmp_path), random.Random(0))
    game_map = loader.load(1)
    assert (game_map.rows, game_map.cols) == (5, 5)
    assert (game_map.finish_row, game_map.finish_col) == (3, 3)
    assert (game_map.player_row, game_map.player_col) == (1, 1)
    assert count_symbols(game_map, "T") == 2
    assert count_symbols(game_map, "M") == 2
    assert game_map.grid[1][1].entity is None
    assert game_map.grid[3][3].entity is None
    assert game_map.to_json()["grid"] == GRID


def test_load_rejects_finish_on_wall(tmp_path):
    level = {
        "rows": 5, "columns": 5, "grid": GRID, "monsterN": 0, "treasureN": 0,
        "finishRow": 0, "finishCol": 0,
    }
    loader = LevelLoader(make_data(tmp_path, level=level), random.Random(0))
    with pytest.raises(ValueError, match="Finish cell should be free!"):
        loader.load(1)


def test_load_missing_level_file(tmp_path):
    with pytest.raises(OSError):
        LevelLoader(tmp_path).load(3)


def test_validate_reports_missing_field():
    with pytest.raises(ValueError, match="monsterN"):
        validate_level_json({"columns": 5, "rows": 5, "grid": GRID, "treasureN": 1})


def test_validate_rejects_row_count_mismatch():
    data = {"columns": 5, "rows": 4, "grid": GRID, "monsterN": 0, "treasureN": 0}
    with pytest.raises(ValueError):
        validate_level_json(data)


def test_read_json_round_trip(tmp_path):
    path = tmp_path / "data.json"
    write(path, ITEMS)
    assert read_json(path) == ITEMS


def test_read_json_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_json(tmp_path / "absent.json")


def test_parse_grid_cells_and_free_spaces():
    grid, free = parse_grid([[1, 0], [0, 1]], 2)
    assert free == [(0, 1), (1, 0)]
    assert isinstance(grid[0][0].entity, Wall)
    assert grid[0][1].entity is None
    assert [[cell.symbol() for cell in row] for row in grid] == [["#", "."], [".", "#"]]


def test_parse_grid_rejects_bad_row_length():
    with pytest.raises(ValueError):
        parse_grid([[0, 0], [0]], 2)


def test_parse_grid_rejects_unknown_value():
    with pytest.raises(ValueError, match="Unknown cell type in grid: 7"):
        parse_grid([[0, 7]], 2)


def test_load_items_picks_from_pool(tmp_path):
    loader = LevelLoader(make_data(tmp_path), random.Random(1))
    items = loader.load_items(3, 1)
    assert len(items) == 3
    assert {item.name for item in items} == {"Iron Sword", "Firebolt", "Chain Mail"}
    assert Item("Chain Mail", 0.3, ItemType.ARMOR) in items


def test_load_items_too_few(tmp_path):
    loader = LevelLoader(make_data(tmp_path))
    with pytest.raises(ValueError):
        loader.load_items(4, 1)


def test_load_items_invalid_file(tmp_path):
    loader = LevelLoader(make_data(tmp_path, items={"other": []}))
    with pytest.raises(ValueError, match="Invalid item file."):
        loader.load_items(1, 1)


def test_load_monsters_uses_level_scaling(tmp_path):
    loader = LevelLoader(make_data(tmp_path), random.Random(2))
    monsters = loader.load_monsters(2, 1)
    assert {monster.name for monster in monsters} == {"Goblin", "Orc"}
    for monster in monsters:
        assert isinstance(monster, Monster)
        assert monster.level == 1
        assert monster.scales_defence_mult == pytest.approx(0.15)


def test_load_monsters_invalid_format(tmp_path):
    loader = LevelLoader(make_data(tmp_path, monsters={"monsters": {}}))
    with pytest.raises(ValueError):
        loader.load_monsters(1, 1)


def test_load_monsters_too_few(tmp_path):
    loader = LevelLoader(make_data(tmp_path))
    with pytest.raises(ValueError):
        loader.load_monsters(3, 1)


def test_place_entities_consumes_free_cells():
    grid = [[Cell(), Cell(), Cell()]]
    free = [(0, 0), (0, 1), (0, 2)]
    walls = [Wall(), Wall()]
    LevelLoader(rng=random.Random(3)).place_entities(walls, free, grid)
    assert len(free) == 1
    occupied = [(0, c) for c in range(3) if grid[0][c].entity is not None]
    assert len(occupied) == 2
    assert free[0] not in occupied


def test_place_entities_without_room():
    with pytest.raises(ValueError):
        LevelLoader(rng=random.Random(0)).place_entities([Wall()], [], [[]])