"""A single tile of the game map, optionally holding an entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .entities import EntityStatus, NPEntity

if TYPE_CHECKING:
    from .hero import Hero

EMPTY_SYMBOL = "."


@dataclass
class Cell:
    """A map tile that may contain one non-player entity."""

    entity: NPEntity | None = None

    def add_entity(self, entity: NPEntity | None) -> None:
        """Replace the contained entity."""
        self.entity = entity

    def entity_json(self) -> dict | None:
        """Return the entity's JSON form, or None for an empty cell."""
        return None if self.entity is None else self.entity.to_json()

    def remove_entity(self) -> None:
        """Empty the cell."""
        self.entity = None

    def step(self, hero: Hero) -> bool:
        """Return True if the hero may move onto this cell."""
        if self.entity is None:
            return True
        return self.entity.on_step(hero)

    def interact(self, hero: Hero) -> None:
        """Let the entity act on the hero and drop it if it became inactive."""
        if self.entity is None:
            return
        self.entity.on_interact(hero)
        if self.entity.status is EntityStatus.INACTIVE:
            self.remove_entity()

    def symbol(self) -> str:
        """Return the character shown for this cell."""
        return EMPTY_SYMBOL if self.entity is None else self.entity.symbol