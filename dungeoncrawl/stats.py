"""Primary attributes of heroes and monsters."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Stats:
    """Strength, mana and maximum health."""

    strength: int
    mana: int
    max_health: int

    def __add__(self, other: object) -> Stats:
        if not isinstance(other, Stats):
            return NotImplemented
        return Stats(
            self.strength + other.strength,
            self.mana + other.mana,
            self.max_health + other.max_health,
        )