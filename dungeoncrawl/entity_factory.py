"""Construction of monsters and items from parameters or saved JSON."""

from __future__ import annotations

from .entities import Item, Monster
from .kinds import item_type_from_name
from .stats import Stats

BASE_DEFENCE_MULT = 0.15
DEFENCE_PER_LEVEL = 0.05


def create_monster(name: str, level: int, stats: Stats) -> Monster:
    """Create a monster whose resistance grows with its level."""
    mult = BASE_DEFENCE_MULT + (level - 1) * DEFENCE_PER_LEVEL
    return Monster(name, level, stats, mult)


def monster_from_json(data: dict) -> Monster:
    """Rebuild a monster from its JSON form.

    Raises KeyError for missing fields and ValueError for a negative resistance.
    """
    name = str(data["name"])
    level = int(data["level"])
    mult = float(data["scalesdefencemult"])
    if mult < 0:
        raise ValueError("Invalid value for 'scalesdefencemult' in monster JSON")
    stats = Stats(int(data["strength"]), int(data["mana"]), int(data["maxhealth"]))
    return Monster(name, level, stats, mult)


def item_from_json(data: dict) -> Item:
    """Rebuild an item from its JSON form.

    Raises KeyError for missing fields and ValueError for a negative bonus or an
    unknown item type.
    """
    name = str(data["name"])
    mult = float(data["mult"])
    if mult < 0:
        raise ValueError("Invalid value for item bonus!")
    item_type = item_type_from_name(data["itemtype"])
    return Item(name, mult, item_type)