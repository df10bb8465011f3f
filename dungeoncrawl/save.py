"""Saving and loading of the game state."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from .game_map import GameMap
from .hero import Hero
from .hero_factory import hero_from_json
from .map_factory import map_from_json

DEFAULT_SAVE_FILE = Path("../../data/save/savedata.json")


@dataclass
class GameContext:
    """The hero and the map of a game in progress."""

    hero: Hero | None = None
    game_map: GameMap | None = None


def save_game(ctx: GameContext, path: str | Path | None = None) -> None:
    """Write the hero and the map to the save file.

    Raises ValueError if either is missing and OSError if the file cannot be
    written.
    """
    if ctx.hero is None or ctx.game_map is None:
        raise ValueError("Map and hero should have values upon calling save game!")
    path = DEFAULT_SAVE_FILE if path is None else Path(path)
    data = {"hero": ctx.hero.to_json(), "map": ctx.game_map.to_json()}
    try:
        with path.open("w", encoding="utf-8") as file:
            json.dump(data, file, indent=2)
    except OSError as exc:
        raise OSError("Cannot open file!") from exc


def load_game(path: str | Path | None = None) -> GameContext:
    """Read a game from the save file.

    Raises FileNotFoundError if there is no save file, and KeyError or
    ValueError if its contents are invalid.
    """
    path = DEFAULT_SAVE_FILE if path is None else Path(path)
    try:
        with path.open(encoding="utf-8") as file:
            data = json.load(file)
    except FileNotFoundError:
        raise FileNotFoundError("Save file does not exist!") from None
    return GameContext(hero_from_json(data["hero"]), map_from_json(data["map"]))