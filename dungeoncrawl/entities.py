"""Non-player entities that occupy map cells: items, walls and monsters."""

from __future__ import annotations

import copy
import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, TextIO

from .combat import initiate_combat
from .interactions import prompt_continue, prompt_hero_item_equip
from .kinds import ItemType
from .stats import Stats

if TYPE_CHECKING:
    from .hero import Hero


def _fmt(value: float) -> str:
    """Format a number the way a default stream prints a double."""
    return f"{value:g}"


class EntityStatus(Enum):
    """Whether an entity is still present in the world."""

    ACTIVE = auto()
    INACTIVE = auto()


class NPEntity(ABC):
    """Something on the map that is not controlled by the player."""

    symbol = "?"
    status = EntityStatus.ACTIVE

    @abstractmethod
    def on_step(self, hero: Hero) -> bool:
        """React to the hero trying to enter the cell; return True to allow it."""

    @abstractmethod
    def on_interact(self, hero: Hero) -> None:
        """React to the hero standing on the cell."""

    def clone(self) -> NPEntity:
        """Return an independent copy of this entity."""
        return copy.copy(self)

    def to_json(self) -> dict:
        """Return a JSON-ready description of the entity."""
        return {}


_ITEM_LABELS = {
    ItemType.WEAPON: "Weapon",
    ItemType.SPELL: "Spell",
    ItemType.ARMOR: "Armor",
}


@dataclass
class Item(NPEntity):
    """A piece of equipment the hero can pick up; `mult` is its bonus."""

    name: str
    mult: float
    item_type: ItemType

    symbol = "T"

    def on_step(self, hero: Hero) -> bool:
        print(self)
        prompt_continue()
        return True

    def on_interact(self, hero: Hero) -> None:
        prompt_hero_item_equip(hero, self)
        self.status = EntityStatus.INACTIVE

    def to_json(self) -> dict:
        return {
            "name": self.name,
            "mult": self.mult,
            "itemtype": self.item_type.value,
        }

    def __str__(self) -> str:
        label = _ITEM_LABELS[self.item_type]
        return f"<{self.name}, Mult: {_fmt(self.mult)}, {label}>"


class Wall(NPEntity):
    """An impassable block."""

    symbol = "#"

    def on_step(self, hero: Hero) -> bool:
        print("You have encountered a wall!")
        prompt_continue()
        return False

    def on_interact(self, hero: Hero) -> None:
        """Walls do nothing when interacted with."""


@dataclass
class Monster(NPEntity):
    """A hostile creature; `scales_defence_mult` is the share of damage it resists."""

    name: str
    level: int
    stats: Stats
    scales_defence_mult: float
    current_health: float = field(init=False)

    symbol = "M"

    def __post_init__(self) -> None:
        self.current_health = float(self.stats.max_health)

    def deal_damage(self, hero: Hero) -> None:
        """Strike the hero for the mean of strength and mana."""
        hero.take_damage((self.stats.strength + self.stats.mana) / 2)

    def take_damage(self, damage: float) -> None:
        """Lose health, reduced by the monster's resistance."""
        self.current_health -= damage - self.scales_defence_mult * damage

    def on_step(self, hero: Hero) -> bool:
        print(f"You have encountered a {self.name}")
        prompt_continue()
        return True

    def on_interact(self, hero: Hero) -> None:
        initiate_combat(hero, self)
        if not self.is_alive():
            self.status = EntityStatus.INACTIVE

    def is_alive(self) -> bool:
        """Return True while health is above zero."""
        return self.current_health > 0

    def display_status(self, out: TextIO | None = None) -> None:
        """Write health and resistance to `out` (stdout by default)."""
        out = sys.stdout if out is None else out
        health = self.current_health if self.current_health >= 0 else 0
        out.write(f"{self.name}: {_fmt(health)}/{self.stats.max_health}\n")
        out.write(f"Resistance: {_fmt(self.scales_defence_mult)}\n")

    def to_json(self) -> dict:
        return {
            "name": self.name,
            "level": self.level,
            "strength": self.stats.max_health,
            "mana": self.stats.mana,
            "maxhealth": self.stats.max_health,
            "scalesdefencemult": self.scales_defence_mult,
        }