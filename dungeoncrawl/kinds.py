"""Enumerations shared across the game: classes, races, items and actions."""

from __future__ import annotations

from enum import Enum, auto


class HeroClass(Enum):
    """Combat style of a hero; the value is its saved name."""

    WARRIOR = "warrior"
    MAGE = "mage"


class HeroRace(Enum):
    """Race of a hero; the value is its saved name."""

    HUMAN = "human"
    ELF = "elf"


class ItemType(Enum):
    """Kind of equipment; the value is its saved name."""

    WEAPON = "weapon"
    SPELL = "spell"
    ARMOR = "armor"


class AttackType(Enum):
    """Ways a hero can attack."""

    WEAPON = auto()
    SPELL = auto()


class GameAction(Enum):
    """Player input actions during exploration."""

    MOVE_UP = auto()
    MOVE_DOWN = auto()
    MOVE_LEFT = auto()
    MOVE_RIGHT = auto()
    SAVE = auto()
    EXIT = auto()


class CoinToss(Enum):
    """Outcome of a coin toss."""

    HEADS = "Heads"
    TAILS = "Tails"

    def __str__(self) -> str:
        return self.value


def hero_class_from_name(name: str) -> HeroClass:
    """Return the hero class with the given saved name."""
    try:
        return HeroClass(name)
    except ValueError:
        raise ValueError(f"No such hero class: {name}") from None


def hero_race_from_name(name: str) -> HeroRace:
    """Return the hero race with the given saved name."""
    try:
        return HeroRace(name)
    except ValueError:
        raise ValueError(f"No such hero race: {name}") from None


def item_type_from_name(name: str) -> ItemType:
    """Return the item type with the given saved name."""
    try:
        return ItemType(name)
    except ValueError:
        raise ValueError("No such item type!") from None