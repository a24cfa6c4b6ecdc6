"""
Random sources for the battle core

Every random decision in a battle (accuracy, crits, damage variance, AI noise,
skip-turn rolls, flee rolls, NPC generation) is a uniform draw from a single
RandomSource, so a battle is replayable from its seed or from a recorded draw
sequence. Anything with a ``random() -> float`` method works, including
``random.Random``.
"""

import math
import time
from typing import Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    def random(self) -> float:
        """Return the next uniform draw in [0, 1)"""
        ...


class LcgRandom:
    """Seeded 32-bit linear congruential generator.

    seed = (seed * 1664525 + 1013904223) mod 2^32, draws are seed / 2^32
    """

    def __init__(self, seed: int | None = None):
        # Allow deterministic seeding for tests; default to time-based if not provided
        self.seed = (seed if seed is not None else int(time.time())) & 0xFFFFFFFF

    def advance(self) -> int:
        """Advance the LCG and return the new 32-bit seed."""
        self.seed = (self.seed * 1664525 + 1013904223) & 0xFFFFFFFF
        return self.seed

    def random(self) -> float:
        return self.advance() / 0x100000000


class ScriptedRandom:
    """Replays a fixed sequence of draws, cycling when exhausted.

    ScriptedRandom([1.0]) is a source that returns 1.0 forever.
    """

    def __init__(self, draws: Sequence[float]):
        if not draws:
            raise ValueError("ScriptedRandom needs at least one draw")
        self._draws = list(draws)
        self._index = 0

    @property
    def draws_consumed(self) -> int:
        return self._index

    def random(self) -> float:
        value = self._draws[self._index % len(self._draws)]
        self._index += 1
        return value


def uniform(source: RandomSource, low: float, high: float) -> float:
    """Uniform value in [low, high] from one draw."""
    return low + source.random() * (high - low)


def rand_int(source: RandomSource, low: int, high: int) -> int:
    """Uniform integer in [low, high] inclusive from one draw."""
    value = low + math.floor(source.random() * (high - low + 1))
    # A draw of exactly 1.0 (scripted sources) would land one past the range
    return min(high, value)


def chance(source: RandomSource, probability: float) -> bool:
    """Roll against a probability. Always consumes exactly one draw.

    Probabilities >= 1 always succeed, probabilities <= 0 never do.
    """
    roll = source.random()
    if probability >= 1.0:
        return True
    return roll < probability


def choice(source: RandomSource, items: Sequence[T]) -> T:
    """Pick one element uniformly. Caller must ensure items is not empty."""
    return items[rand_int(source, 0, len(items) - 1)]
