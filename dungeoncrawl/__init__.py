"""A terminal dungeon crawler with a maze-generating level editor."""

__version__ = "0.1.0"