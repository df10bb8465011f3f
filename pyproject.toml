[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dungeoncrawl"
version = "0.1.0"
description = "A terminal dungeon crawler with a maze-generating level editor"
requires-python = ">=3.10"
keywords = ["game", "roguelike", "dungeon", "maze", "terminal", "rpg"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dungeoncrawl = "dungeoncrawl.game:main"
dungeoncrawl-editor = "dungeoncrawl.editor:main"

[tool.hatch.build.targets.wheel]
packages = ["dungeoncrawl"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
