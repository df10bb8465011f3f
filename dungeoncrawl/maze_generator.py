"""Depth-first maze generation."""

from __future__ import annotations

import random

from .maze import Maze


def generate(rows: int, cols: int, rng: random.Random | None = None) -> Maze:
    """Carve a perfect maze of the given size, starting at cell (1, 1)."""
    rng = random.Random() if rng is None else rng
    maze = Maze(rows, cols)
    start = (1, 1)
    maze.set_path(*start)
    stack = [start]

    while stack:
        row, col = stack[-1]
        candidates = maze.neighbours(row, col)
        if not candidates:
            stack.pop()
            continue
        next_row, next_col = rng.choice(candidates)
        maze.set_path((row + next_row) // 2, (col + next_col) // 2)
        maze.set_path(next_row, next_col)
        stack.append((next_row, next_col))

    return maze