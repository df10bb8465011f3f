import dataclasses

import pytest

from dungeoncrawl.stats import Stats


def test_add_componentwise():
    assert Stats(20, 10, 40) + Stats(3, 2, 5) == Stats(23, 12, 45)


def test_zero_is_identity():
    stats = Stats(7, 8, 9)
    assert stats + Stats(0, 0, 0) == stats


def test_add_is_commutative_and_associative():
    a, b, c = Stats(1, 2, 3), Stats(10, 20, 30), Stats(5, 0, 7)
    assert a + b == b + a
    assert (a + b) + c == a + (b + c)


def test_add_non_stats_raises():
    with pytest.raises(TypeError):
        Stats(1, 2, 3) + 5


def test_stats_are_immutable():
    stats = Stats(1, 2, 3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        stats.strength = 4
    assert stats.strength == 1
    assert stats == Stats(1, 2, 3)