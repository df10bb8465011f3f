import io
import sys

import pytest

from dungeoncrawl import combat
from dungeoncrawl.kinds import AttackType, CoinToss


class FakeRng:
    def __init__(self, value):
        self.value = value
        self.calls = []

    def randint(self, low, high):
        self.calls.append((low, high))
        return self.value


class FakeMonster:
    def __init__(self, health, power):
        self.health = health
        self.power = power

    def is_alive(self):
        return self.health > 0

    def deal_damage(self, hero):
        hero.take_damage(self.power)

    def display_status(self, out=None):
        (out or sys.stdout).write("MONSTER STATUS\n")


class FakeHero:
    def __init__(self, health, power):
        self.health = health
        self.power = power
        self.attacks = []
        self.healed = False
        self.score = 0

    def is_alive(self):
        return self.health > 0

    def deal_damage(self, monster, attack_type):
        self.attacks.append(attack_type)
        monster.health -= self.power

    def take_damage(self, damage):
        self.health -= damage

    def display_attack_damage(self, out=None):
        (out or sys.stdout).write("ATTACK DAMAGE\n")

    def display_status(self, out=None):
        (out or sys.stdout).write("HERO STATUS\n")

    def heal(self):
        self.healed = True

    def increment_score(self):
        self.score += 100


@pytest.fixture
def feed(monkeypatch):
    def _feed(text):
        monkeypatch.setattr(sys, "stdin", io.StringIO(text))

    return _feed


def test_coin_toss_even_is_heads():
    rng = FakeRng(4)
    assert combat.coin_toss(rng) is CoinToss.HEADS
    assert rng.calls == [(0, 1000)]


def test_coin_toss_odd_is_tails():
    assert combat.coin_toss(FakeRng(7)) is CoinToss.TAILS


def test_player_attack_weapon(feed):
    feed("w\n")
    hero, monster = FakeHero(10, 3), FakeMonster(10, 0)
    assert combat.player_attack(hero, monster) is AttackType.WEAPON
    assert hero.attacks == [AttackType.WEAPON]
    assert monster.health == 7


def test_player_attack_retries_on_invalid_choice(feed, capsys):
    feed("q\n\n spell\n")
    hero, monster = FakeHero(10, 3), FakeMonster(10, 0)
    assert combat.player_attack(hero, monster) is AttackType.SPELL
    assert hero.attacks == [AttackType.SPELL]
    assert capsys.readouterr().out.count("Invalid choice!") == 1


def test_monster_attack_hurts_hero():
    hero, monster = FakeHero(10, 0), FakeMonster(10, 4)
    combat.monster_attack(hero, monster)
    assert hero.health == 6


def test_hero_wins_combat(feed, capsys):
    feed("w\n" * 10)
    hero, monster = FakeHero(50, 100), FakeMonster(30, 0)
    assert combat.initiate_combat(hero, monster) is True
    assert not monster.is_alive()
    assert hero.healed
    assert hero.score == 100
    assert hero.attacks == [AttackType.WEAPON]
    out = capsys.readouterr().out
    assert "Battle begins!" in out
    assert "You have defeated the enemy!" in out


def test_hero_loses_combat(feed, capsys):
    feed("w\n" * 10)
    hero, monster = FakeHero(50, 0), FakeMonster(30, 100)
    assert combat.initiate_combat(hero, monster) is False
    assert not hero.is_alive()
    assert monster.is_alive()
    assert not hero.healed
    assert hero.score == 0
    assert "You have been defeated in combat!" in capsys.readouterr().out