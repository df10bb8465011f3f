"""Prompts shown to the player: pausing, equipping items and levelling up."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from .stats import Stats
from .terminal import clear_terminal

if TYPE_CHECKING:
    from .entities import Item
    from .hero import Hero


def _read_choice() -> str:
    """Return the first non-blank character of the next non-empty line."""
    while True:
        line = input().strip()
        if line:
            return line[0]


def _read_points(prompt: str) -> int | None:
    """Read a non-negative integer, or None if the input is not one."""
    text = input(prompt).strip()
    try:
        value = int(text)
    except ValueError:
        return None
    return value if value >= 0 else None


def prompt_continue() -> None:
    """Wait for the player to press enter."""
    input("Press enter to continue...")


def prompt_hero_item_equip(hero: Hero, item: Item) -> bool:
    """Offer the found item to the hero; return True if it was equipped."""
    clear_terminal()

    print(f"You have found {item}, {item.item_type.value}")
    print("Your current loadout:")
    hero.display_loadout(sys.stdout)
    print("Do you want to equip the item [y/n]:", end="", flush=True)

    while True:
        choice = _read_choice()
        if choice == "y":
            hero.equip_item(item.clone())
            return True
        if choice == "n":
            return False
        print("Invalid choice!")


def prompt_hero_level_up(hero: Hero) -> None:
    """Ask for stat points until the hero accepts a valid allocation."""
    clear_terminal()

    print("You have reached the end of the level! Level up your character!")
    print("Current stats: ")
    hero.display_stats(sys.stdout)

    while True:
        print("You have 30 points to allocate: ")
        strength = _read_points("Enter points going to strength: ")
        mana = _read_points("Enter points going to mana: ")
        max_health = _read_points("Enter points going to max health: ")
        if strength is None or mana is None or max_health is None:
            continue
        if hero.level_up(Stats(strength, mana, max_health)):
            return