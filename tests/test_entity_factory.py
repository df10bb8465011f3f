import pytest

from dungeoncrawl.entities import Item, Monster
from dungeoncrawl.entity_factory import (
    create_monster,
    item_from_json,
    monster_from_json,
)
from dungeoncrawl.kinds import ItemType
from dungeoncrawl.stats import Stats


def test_create_monster_level_one_base_resistance():
    monster = create_monster("Rat", 1, Stats(3, 1, 10))
    assert monster.scales_defence_mult == pytest.approx(0.15)
    assert monster.current_health == 10
    assert monster.level == 1


def test_create_monster_resistance_grows_per_level():
    stats = Stats(3, 1, 10)
    low = create_monster("Rat", 2, stats).scales_defence_mult
    high = create_monster("Rat", 3, stats).scales_defence_mult
    assert high - low == pytest.approx(0.05)
    assert low > create_monster("Rat", 1, stats).scales_defence_mult


def test_monster_json_round_trip():
    original = Monster("Troll", 3, Stats(12, 4, 70), 0.25)
    rebuilt = monster_from_json(original.to_json())
    assert rebuilt.name == original.name
    assert rebuilt.level == original.level
    assert rebuilt.stats.mana == original.stats.mana
    assert rebuilt.stats.max_health == original.stats.max_health
    assert rebuilt.scales_defence_mult == original.scales_defence_mult
    assert rebuilt.current_health == original.stats.max_health


def test_monster_from_json_reads_fields():
    data = {
        "name": "Bat",
        "level": 2,
        "strength": 6,
        "mana": 2,
        "maxhealth": 20,
        "scalesdefencemult": 0.1,
    }
    monster = monster_from_json(data)
    assert monster.stats == Stats(6, 2, 20)
    assert monster.name == "Bat"


def test_monster_from_json_negative_resistance():
    data = {
        "name": "Bat",
        "level": 2,
        "strength": 6,
        "mana": 2,
        "maxhealth": 20,
        "scalesdefencemult": -0.1,
    }
    with pytest.raises(ValueError):
        monster_from_json(data)


def test_monster_from_json_missing_field():
    with pytest.raises(KeyError):
        monster_from_json({"name": "Bat", "level": 1})


def test_item_json_round_trip():
    for item in (
        Item("Iron Sword", 0.1, ItemType.WEAPON),
        Item("Firebolt", 0.1, ItemType.SPELL),
        Item("Light Leather Armor", 0.05, ItemType.ARMOR),
    ):
        assert item_from_json(item.to_json()) == item


def test_item_from_json_negative_bonus():
    with pytest.raises(ValueError):
        item_from_json({"name": "Cursed", "mult": -0.5, "itemtype": "weapon"})


def test_item_from_json_unknown_type():
    with pytest.raises(ValueError, match="No such item type!"):
        item_from_json({"name": "Ring", "mult": 0.5, "itemtype": "ring"})


def test_item_from_json_missing_field():
    with pytest.raises(KeyError):
        item_from_json({"name": "Ring", "itemtype": "armor"})