"""The player-controlled hero: stats, equipment, combat and scoring."""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, TextIO

from .kinds import AttackType, HeroClass, HeroRace, ItemType
from .stats import Stats

if TYPE_CHECKING:
    from .entities import Item, Monster

LEVEL_UP_POINTS = 30
SCORE_PER_VICTORY = 100


def _fmt(value: float) -> str:
    """Format a number the way a default stream prints a double."""
    return f"{value:g}"


@dataclass
class Hero:
    """A hero with stats, a race, a class and up to three equipped items."""

    name: str
    level: int
    stats: Stats
    current_health: float
    score: int
    race: HeroRace
    hero_class: HeroClass
    weapon: Item | None = None
    spell: Item | None = None
    armor: Item | None = None

    def level_up(self, increment: Stats) -> bool:
        """Raise the level if exactly 30 points are allocated; return success."""
        total = increment.strength + increment.mana + increment.max_health
        if total != LEVEL_UP_POINTS:
            return False
        self.level += 1
        self.stats = self.stats + increment
        self.current_health = float(self.stats.max_health)
        return True

    def deal_damage(self, monster: Monster, attack_type: AttackType) -> None:
        """Hit the monster with a weapon or a spell attack."""
        if attack_type is AttackType.WEAPON:
            damage = float(self.stats.strength)
            if self.weapon is not None:
                damage += self.weapon.mult * damage
        else:
            damage = float(self.stats.mana)
            if self.spell is not None:
                damage += self.spell.mult * damage
        monster.take_damage(damage)

    def take_damage(self, damage: float) -> None:
        """Lose health, reduced by the equipped armor if any."""
        if self.armor is not None:
            damage -= self.armor.mult * damage
        self.current_health -= damage

    def heal(self) -> None:
        """Restore health to half of the maximum if it is below that."""
        half = self.stats.max_health / 2
        if self.current_health < half:
            self.current_health = half

    def equip_item(self, item: Item | None) -> None:
        """Equip the item, replacing whatever occupies its slot."""
        if item is None:
            return
        if item.item_type is ItemType.ARMOR:
            self.armor = item
        elif item.item_type is ItemType.WEAPON:
            self.weapon = item
        else:
            self.spell = item

    def is_alive(self) -> bool:
        """Return True while health is above zero."""
        return self.current_health > 0

    def _weapon_damage(self) -> float:
        if self.weapon is None:
            return self.stats.strength
        return self.stats.strength * (1 + self.weapon.mult)

    def _spell_damage(self) -> float:
        if self.spell is None:
            return self.stats.mana
        return self.stats.mana * (1 + self.spell.mult)

    def display_stats(self, out: TextIO | None = None) -> None:
        """Write strength, mana and maximum health."""
        out = sys.stdout if out is None else out
        out.write(
            f"str: {self.stats.strength}, mana: {self.stats.mana}, "
            f"max health: {self.stats.max_health}\n"
        )

    def display_attack_damage(self, out: TextIO | None = None) -> None:
        """Write the damage of a weapon and of a spell attack."""
        out = sys.stdout if out is None else out
        out.write(f"Weapon attack damage: {_fmt(self._weapon_damage())}\n")
        out.write(f"Spell attack damage: {_fmt(self._spell_damage())}\n")

    def display_status(self, out: TextIO | None = None) -> None:
        """Write current health and resistance."""
        out = sys.stdout if out is None else out
        health = self.current_health if self.current_health >= 0 else 0
        resistance = self.armor.mult if self.armor is not None else 0
        out.write(f"{self.name}: {_fmt(health)}/{self.stats.max_health}\n")
        out.write(f"Resistence: {_fmt(resistance)}\n")

    def display_loadout(self, out: TextIO | None = None) -> None:
        """Write the equipped items and the damage they give."""
        out = sys.stdout if out is None else out
        if self.armor is not None:
            out.write(f"{self.armor}\n")
        else:
            out.write("No armor equipped.\n")

        if self.weapon is not None:
            out.write(f"{self.weapon}\n")
            out.write(f"Weapon damage: {_fmt(self._weapon_damage())}\n")
        else:
            out.write("No weapon equipped.\n")

        if self.spell is not None:
            out.write(f"{self.spell}\n")
            out.write(f"Spell damage: {_fmt(self._spell_damage())}\n")
        else:
            out.write("No spell equipped.\n")

    def display_score(self, out: TextIO | None = None) -> None:
        """Write the current score."""
        out = sys.stdout if out is None else out
        out.write(f"Score: {self.score}\n")

    def increment_score(self) -> None:
        """Add the reward for a won battle to the score."""
        self.score += SCORE_PER_VICTORY

    def save_score(self, location: str | Path) -> None:
        """Append this hero's score to the leaderboard file at `location`.

        A missing or unreadable leaderboard is started afresh. Raises OSError if
        the file cannot be written.
        """
        path = Path(location)
        try:
            with path.open(encoding="utf-8") as file:
                board = json.load(file)
        except (OSError, ValueError):
            board = {}
        if not isinstance(board, dict):
            board = {}
        if not isinstance(board.get("leaderboard"), list):
            board["leaderboard"] = []

        board["leaderboard"].append({"playername": self.name, "score": self.score})

        try:
            with path.open("w", encoding="utf-8") as file:
                json.dump(board, file, indent=2)
        except OSError as exc:
            raise OSError("Cannot open score file for writing!") from exc

    def to_json(self) -> dict:
        """Return a JSON-ready description of the hero and its items."""
        items = [
            item.to_json()
            for item in (self.armor, self.weapon, self.spell)
            if item is not None
        ]
        return {
            "name": self.name,
            "level": self.level,
            "strength": self.stats.strength,
            "mana": self.stats.mana,
            "maxhealth": self.stats.max_health,
            "currenthealth": self.current_health,
            "score": self.score,
            "race": self.race.value,
            "class": self.hero_class.value,
            "items": items,
        }