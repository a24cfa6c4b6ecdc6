from typing import TypeVar

Number = TypeVar("Number", int, float)


def clamp(value: Number, low: Number, high: Number) -> Number:
    """Bound value to [low, high]; integer arguments give an integer back"""
    return max(low, min(high, value))
