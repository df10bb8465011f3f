"""Creation of heroes from a chosen race and class or from saved JSON."""

from __future__ import annotations

from .entities import Item
from .entity_factory import item_from_json
from .hero import Hero
from .kinds import HeroClass, HeroRace, ItemType, hero_class_from_name, hero_race_from_name
from .stats import Stats

_INITIAL_STATS = {
    HeroClass.WARRIOR: Stats(20, 10, 40),
    HeroClass.MAGE: Stats(10, 20, 40),
}

_RACIAL_BONUS = {
    HeroRace.HUMAN: Stats(3, 2, 5),
    HeroRace.ELF: Stats(0, 5, 10),
}


def initial_stats(hero_class: HeroClass) -> Stats:
    """Return the starting stats of a hero class."""
    try:
        return _INITIAL_STATS[hero_class]
    except KeyError:
        raise ValueError("Invalid hero class! Cannot assign initial stats!") from None


def racial_bonus(race: HeroRace) -> Stats:
    """Return the stat bonus granted by a race."""
    try:
        return _RACIAL_BONUS[race]
    except KeyError:
        raise ValueError("Invalid hero race! Cannot assign racial bonus!") from None


def create_hero(
    name: str,
    level: int,
    race: HeroRace,
    hero_class: HeroClass,
    weapon: Item | None,
    spell: Item | None,
    armor: Item | None,
) -> Hero:
    """Create a fresh hero at full health with a score of zero."""
    stats = initial_stats(hero_class) + racial_bonus(race)
    return Hero(
        name, level, stats, float(stats.max_health), 0, race, hero_class,
        weapon, spell, armor,
    )


def hero_from_json(data: dict) -> Hero:
    """Rebuild a hero from its JSON form.

    Raises KeyError for missing fields and ValueError for unknown names,
    invalid items or a non-positive current health.
    """
    name = str(data["name"])
    level = int(data["level"])
    score = int(data["score"])
    race = hero_race_from_name(data["race"])
    hero_class = hero_class_from_name(data["class"])
    stats = Stats(int(data["strength"]), int(data["mana"]), int(data["maxhealth"]))

    current_health = float(data["currenthealth"])
    if current_health <= 0:
        raise ValueError("Invalid value for 'currenthealth' in hero JSON")

    slots: dict[ItemType, Item] = {}
    for item_data in data["items"]:
        item = item_from_json(item_data)
        slots[item.item_type] = item

    return Hero(
        name, level, stats, current_health, score, race, hero_class,
        slots.get(ItemType.WEAPON), slots.get(ItemType.SPELL), slots.get(ItemType.ARMOR),
    )