"""Interactive level editor that generates mazes and saves level files."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .maze import Maze
from .maze_generator import generate

LEVELS_COUNT = 4
DEFAULT_LEVELS_DIR = Path("../../data/levels")


def _ask_numbers(prompt: str, count: int) -> list[int] | None:
    """Read `count` non-negative integers from one line, or None if malformed."""
    tokens = input(prompt).split()
    if len(tokens) < count:
        return None
    try:
        values = [int(token) for token in tokens[:count]]
    except ValueError:
        return None
    if any(value < 0 for value in values):
        return None
    return values


def save_level(
    levels_dir: str | Path,
    n: int,
    maze: Maze,
    treasure_n: int,
    monster_n: int,
    finish_row: int,
    finish_col: int,
) -> Path:
    """Write level `n` as JSON into `levels_dir` and return the file path."""
    data = maze.to_json()
    data["treasureN"] = treasure_n
    data["monsterN"] = monster_n
    data["finishRow"] = finish_row
    data["finishCol"] = finish_col

    path = Path(levels_dir) / f"level{n}.json"
    try:
        with path.open("w", encoding="utf-8") as file:
            json.dump(data, file, indent=2, sort_keys=True)
    except OSError as exc:
        raise OSError("Cannot open/create level file!") from exc
    return path


def edit_game_details(levels_dir: str | Path | None = None) -> None:
    """Prompt for level parameters, generate a maze and save the level."""
    levels_dir = DEFAULT_LEVELS_DIR if levels_dir is None else Path(levels_dir)

    print("-----------------")
    print("=== GAME EDITOR ===")
    print("-----------------")

    while True:
        values = _ask_numbers(
            f"Select level number to generate (1-{LEVELS_COUNT}): ", 1
        )
        if values is not None and 1 <= values[0] <= LEVELS_COUNT:
            (level_n,) = values
            break
        print("Invalid level number!")

    while True:
        values = _ask_numbers("Enter rows and columns (odd numbers, >=11): ", 2)
        if values is not None and all(v >= 11 and v % 2 == 1 for v in values):
            rows, cols = values
            break
        print("Rows and columns must be odd and >= 11!")

    while True:
        values = _ask_numbers(
            "Enter number of monsters and treasures (each < 10): ", 2
        )
        if values is not None and all(v < 10 for v in values):
            monster_n, treasure_n = values
            break
        print("Number must be less than 10!")

    maze = generate(rows, cols)
    print("\nGenerated Maze:")
    maze.display()

    while True:
        values = _ask_numbers("Enter finish cell coordinates (row col): ", 2)
        if (
            values is not None
            and maze.is_within_bounds(*values)
            and not maze.is_wall(*values)
        ):
            finish_row, finish_col = values
            break
        print("Invalid finish cell! Must be a walkable path within bounds.")

    try:
        save_level(
            levels_dir, level_n, maze, treasure_n, monster_n, finish_row, finish_col
        )
        print("Level saved successfully!")
    except OSError as exc:
        print(f"Error saving level: \n{exc}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """Run the level editor."""
    parser = argparse.ArgumentParser(description="Generate a dungeon level.")
    parser.add_argument(
        "--levels-dir",
        type=Path,
        default=DEFAULT_LEVELS_DIR,
        help="directory where level files are written",
    )
    args = parser.parse_args(argv)
    edit_game_details(args.levels_dir)
    return 0