from enum import Enum


class ElementType(str, Enum):
    """Battle elements. Each element has one element it is strong against and one it is weak against."""

    FIRE = "fire"
    WATER = "water"
    EARTH = "earth"
    AIR = "air"
    SPIRIT = "spirit"
