import random

import pytest

from pet_battle.utils.rng import LcgRandom, ScriptedRandom, chance, choice, rand_int, uniform


def test_lcg_is_reproducible_from_seed():
    a = LcgRandom(seed=42)
    b = LcgRandom(seed=42)
    assert [a.random() for _ in range(10)] == [b.random() for _ in range(10)]


def test_lcg_first_draw_matches_recurrence():
    source = LcgRandom(seed=0)
    assert source.random() == 1013904223 / 2**32
    assert source.seed == 1013904223


def test_lcg_draws_stay_in_unit_interval():
    source = LcgRandom(seed=12345)
    for _ in range(1000):
        value = source.random()
        assert 0.0 <= value < 1.0


def test_scripted_random_cycles_and_counts():
    source = ScriptedRandom([0.1, 0.2])
    assert [source.random() for _ in range(5)] == [0.1, 0.2, 0.1, 0.2, 0.1]
    assert source.draws_consumed == 5


def test_scripted_random_rejects_empty_sequence():
    with pytest.raises(ValueError):
        ScriptedRandom([])


def test_chance_always_consumes_one_draw():
    source = ScriptedRandom([0.5])
    assert chance(source, 1.0) is True
    assert chance(source, 0.0) is False
    assert chance(source, 0.6) is True
    assert chance(source, 0.5) is False
    assert source.draws_consumed == 4


def test_chance_certain_even_on_a_draw_of_one():
    assert chance(ScriptedRandom([1.0]), 1.0) is True
    assert chance(ScriptedRandom([1.0]), 0.99) is False


def test_rand_int_is_inclusive_and_clamped():
    assert rand_int(ScriptedRandom([0.0]), -1, 2) == -1
    assert rand_int(ScriptedRandom([0.99]), -1, 2) == 2
    assert rand_int(ScriptedRandom([1.0]), -1, 2) == 2


def test_uniform_and_choice():
    assert uniform(ScriptedRandom([0.5]), -10, 10) == 0
    assert choice(ScriptedRandom([0.0]), ["a", "b", "c"]) == "a"
    assert choice(ScriptedRandom([1.0]), ["a", "b", "c"]) == "c"


def test_stdlib_random_is_an_accepted_source():
    source = random.Random(7)
    assert isinstance(chance(source, 0.5), bool)
