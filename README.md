# dungeoncrawl

A small turn-based dungeon crawler for the terminal, together with a level
editor that generates random mazes for it. It uses only the standard library.

## Installing

    pip install .

This installs two commands, `dungeoncrawl` and `dungeoncrawl-editor`.

## Playing

    dungeoncrawl [--data-dir DIR]

`--data-dir` is the directory holding levels, item and monster pools, the
save file and the leaderboard (see "Data layout"). It defaults to
`../../data`, relative to the current directory.

The main menu offers:

1. New Game - asks for a hero name, a race (human or elf) and a class
   (warrior or mage), then loads level 1. The hero starts with
   *Light Leather Armor*, an *Iron Sword* and a *Firebolt* spell.
2. Load Game - continues from the save file.
3. Leaderboard - lists every recorded player and score.
4. Exit Game.

On the map `P` is the hero, `F` the finish, `#` a wall, `M` a monster and
`T` a treasure. Move with the arrow keys; press `s` to save, or `x` to save
and quit. Other keys are ignored.

Stepping onto a monster starts a fight. A coin toss decides who attacks
first; on your turn press `w` for a weapon attack or `s` for a spell attack.
Armor reduces the damage you take; monsters resist a share of your damage
that grows with the level they come from. Each victory adds 100 points and
restores your health to at least half of its maximum. Stepping onto a
treasure shows it and offers to equip it, replacing the item of the same
kind.

Reaching the finish takes you to the next level. Before it loads you must
share exactly 30 points between strength, mana and maximum health; the game
is saved once the new level is ready. Clear all four levels to finish the
game. Your score is added to the leaderboard when you win or when your hero
dies.

## Building levels

    dungeoncrawl-editor [--levels-dir DIR]

The editor asks for a level number (1 to 4), the maze size (rows and
columns, odd and at least 11), the number of monsters and treasures (each
fewer than 10), then prints the generated maze with row and column numbers
so you can choose a finish cell on a path. The level is written as
`level<N>.json` in `--levels-dir`, which defaults to `../../data/levels`.

Mazes can also be made from Python:

```python
import random
from dungeoncrawl.maze_generator import generate
from dungeoncrawl.editor import save_level

maze = generate(11, 11, random.Random(7))
maze.display()
save_level("levels", 1, maze, treasure_n=3, monster_n=2, finish_row=9, finish_col=9)
```

## Data layout

Under the data directory the game reads and writes:

    levels/level<N>.json       rows, columns, grid (0 path, 1 wall),
                               monsterN, treasureN, finishRow, finishCol
    items/items<N>.json        {"items": [{"name", "bonus", "type"}, ...]}
                               where type is weapon, spell or armor
    monsters/monsters<N>.json  {"monsters": [{"name", "stats":
                               {"strength", "mana", "maxhealth"}}, ...]}
    save/savedata.json         saved game
    score/score.json           leaderboard

When a level loads, the hero starts on the first free cell (reading row by
row) that is not the finish; the requested number of treasures and monsters
are picked at random from the level's pools and placed on random free cells.

## What it does not do

The package ships no data: there are no level files, item pools or monster
pools included. Build levels with `dungeoncrawl-editor` and write the item
and monster pool files yourself before starting a new game. Play happens in
the terminal only; there is no graphical display.

## Running the tests

    pip install .[test]
    pytest