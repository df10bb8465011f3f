"""The main game: menu, character creation and the exploration loop."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Sequence, TextIO, TypeVar

from .controls import get_input
from .entities import Item
from .hero import Hero
from .hero_factory import create_hero
from .interactions import prompt_continue, prompt_hero_level_up
from .kinds import GameAction, HeroClass, HeroRace, ItemType
from .map_factory import create_map
from .save import GameContext, load_game, save_game
from .terminal import clear_terminal

DEFAULT_DATA_DIR = Path("../../data")
LEVELS_COUNT = 4
MENU = "1. New Game\n2. Load Game\n3. Leaderboard\n4. Exit Game"

_LOAD_ERRORS = (OSError, ValueError, KeyError, TypeError)

_T = TypeVar("_T")


def _read_int() -> int | None:
    try:
        return int(input().strip())
    except ValueError:
        return None


def _choose(prompt: str, options: Sequence[_T]) -> _T:
    while True:
        print(prompt)
        choice = _read_int()
        if choice is not None and 1 <= choice <= len(options):
            return options[choice - 1]


def create_hero_interactively() -> Hero:
    """Ask for a name, race and class and return a hero with starting gear."""
    name = input("Enter hero name: ")
    race = _choose("Choose race:\n1. Human\n2. Elf", (HeroRace.HUMAN, HeroRace.ELF))
    hero_class = _choose(
        "Choose class:\n1. Warrior\n2. Mage", (HeroClass.WARRIOR, HeroClass.MAGE)
    )
    armor = Item("Light Leather Armor", 0.05, ItemType.ARMOR)
    spell = Item("Firebolt", 0.1, ItemType.SPELL)
    weapon = Item("Iron Sword", 0.1, ItemType.WEAPON)
    return create_hero(name, 1, race, hero_class, weapon, spell, armor)


def show_leaderboard(score_file: str | Path, out: TextIO | None = None) -> None:
    """Write every recorded player and score from the leaderboard file."""
    out = sys.stdout if out is None else out
    clear_terminal()
    try:
        with Path(score_file).open(encoding="utf-8") as file:
            board = json.load(file)
    except OSError:
        out.write("Leaderboard is empty!\n")
        return

    scores = board["leaderboard"]
    if not scores:
        out.write("Leaderboard is empty!\n")
        return

    for entry in scores:
        out.write("---------------\n")
        out.write(f"Player: {entry['playername']}\n")
        out.write(f"Score: {int(entry['score'])}\n")
        out.write("---------------\n")


class GameManager:
    """Runs the menu, level progression, saving and scoring."""

    def __init__(self, data_dir: str | Path | None = None) -> None:
        self.data_dir = DEFAULT_DATA_DIR if data_dir is None else Path(data_dir)
        self.level = 1
        self.ctx = GameContext()

    @property
    def score_file(self) -> Path:
        return self.data_dir / "score" / "score.json"

    @property
    def save_file(self) -> Path:
        return self.data_dir / "save" / "savedata.json"

    def run_game_loop(self) -> None:
        """Show the menu, then play until the game ends or the player exits."""
        if self._start():
            self._play()

    def _start(self) -> bool:
        """Run the main menu; return True once a game is ready to play."""
        while True:
            print(MENU)
            match _read_int():
                case 1:
                    self.level = 1
                    hero = create_hero_interactively()
                    try:
                        game_map = create_map(self.level, self.data_dir)
                    except _LOAD_ERRORS as exc:
                        print("Encountered an error while creating map! Exiting game...")
                        print(exc)
                        return False
                    self.ctx = GameContext(hero, game_map)
                    return True
                case 2:
                    try:
                        self.ctx = load_game(self.save_file)
                        return True
                    except _LOAD_ERRORS as exc:
                        print(
                            "Encountered a problem with reading save file! "
                            "Data might be corrupted."
                        )
                        print(exc)
                        prompt_continue()
                        clear_terminal()
                case 3:
                    show_leaderboard(self.score_file)
                    prompt_continue()
                    clear_terminal()
                case 4:
                    return False

    def _play(self) -> None:
        hero = self.ctx.hero
        while True:
            game_map = self.ctx.game_map
            clear_terminal()
            hero.display_score()
            game_map.display()

            action = get_input()
            if action is GameAction.SAVE:
                save_game(self.ctx, self.save_file)
                print("Game successfully saved!")
                prompt_continue()
            elif action is GameAction.EXIT:
                save_game(self.ctx, self.save_file)
                print("Exiting game. Progress saved.")
                prompt_continue()
                return
            else:
                game_map.move_hero(hero, action)

            if not hero.is_alive():
                print("\n\n===GAME OVER===")
                hero.save_score(self.score_file)
                return

            if game_map.has_reached_end():
                self.level += 1
                if self.level > LEVELS_COUNT:
                    print("\n\n===GAME COMPLETED===\n")
                    print("Thanks for playing!")
                    hero.save_score(self.score_file)
                    return
                clear_terminal()
                prompt_hero_level_up(hero)
                self.ctx.game_map = create_map(self.level, self.data_dir)
                save_game(self.ctx, self.save_file)


def main(argv: list[str] | None = None) -> int:
    """Start the game."""
    parser = argparse.ArgumentParser(description="Play the dungeon crawler.")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=DEFAULT_DATA_DIR,
        help="directory holding levels, items, monsters, saves and scores",
    )
    args = parser.parse_args(argv)
    GameManager(args.data_dir).run_game_loop()
    return 0