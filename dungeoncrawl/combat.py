"""Turn-based battles between the hero and a monster."""

from __future__ import annotations

import random
import sys
from typing import TYPE_CHECKING

from .interactions import prompt_continue
from .kinds import AttackType, CoinToss
from .terminal import clear_terminal

if TYPE_CHECKING:
    from .entities import Monster
    from .hero import Hero

_ATTACK_KEYS = {"w": AttackType.WEAPON, "s": AttackType.SPELL}


def _read_choice() -> str:
    """Return the first non-blank character of the next non-empty line."""
    while True:
        line = input().strip()
        if line:
            return line[0]


def coin_toss(rng: random.Random | None = None) -> CoinToss:
    """Toss a coin: an even draw from 0..1000 is heads."""
    rng = random.Random() if rng is None else rng
    return CoinToss.HEADS if rng.randint(0, 1000) % 2 == 0 else CoinToss.TAILS


def player_attack(hero: Hero, monster: Monster) -> AttackType:
    """Let the player pick an attack and apply it; return the attack used."""
    print("<w> Weapon attack   <s> Spell attack")
    while True:
        attack = _ATTACK_KEYS.get(_read_choice())
        if attack is not None:
            hero.deal_damage(monster, attack)
            return attack
        print("Invalid choice!")


def monster_attack(hero: Hero, monster: Monster) -> None:
    """Let the monster strike the hero."""
    monster.deal_damage(hero)


def initiate_combat(hero: Hero, monster: Monster) -> bool:
    """Fight until one side falls; return True if the hero won."""
    clear_terminal()
    print("Battle begins!")

    hero_turn = coin_toss() is CoinToss.HEADS
    print(f"\n{'Hero' if hero_turn else 'Monster'} goes first!")
    prompt_continue()

    while hero.is_alive() and monster.is_alive():
        clear_terminal()

        if hero_turn:
            print("\nHero makes an attack!\n")
            hero.display_attack_damage(sys.stdout)
            player_attack(hero, monster)
        else:
            print("\nMonster makes an attack!")
            monster_attack(hero, monster)

        print("\n--------\n")
        print("Hero:")
        hero.display_status(sys.stdout)
        print("\n--------\n")
        print("Monster:")
        monster.display_status(sys.stdout)
        print("\n--------\n")

        hero_turn = not hero_turn
        prompt_continue()

    clear_terminal()

    won = hero.is_alive()
    if won:
        print("You have defeated the enemy!")
        hero.heal()
        hero.increment_score()
    else:
        print("You have been defeated in combat!")
    prompt_continue()
    return won