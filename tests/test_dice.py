import random

import pytest

from oca.dice import FACES, Die


def test_initial_value_is_one():
    assert Die().value == 1


def test_roll_stays_within_faces():
    die = Die(random.Random(1234))
    results = [die.roll() for _ in range(500)]
    assert min(results) >= 1
    assert max(results) <= FACES


def test_roll_updates_value():
    die = Die(random.Random(7))
    for _ in range(20):
        rolled = die.roll()
        assert die.value == rolled


def test_same_seed_gives_same_sequence():
    first = Die(random.Random(42))
    second = Die(random.Random(42))
    assert [first.roll() for _ in range(30)] == [second.roll() for _ in range(30)]


def test_every_face_eventually_appears():
    die = Die(random.Random(99))
    seen = {die.roll() for _ in range(1000)}
    assert seen == set(range(1, FACES + 1))


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_default_rng_is_not_required(seed):
    random.seed(seed)
    die = Die()
    assert 1 <= die.roll() <= FACES