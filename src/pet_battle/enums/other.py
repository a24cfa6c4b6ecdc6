from enum import Enum


class Difficulty(str, Enum):
    """NPC opponent difficulty - shifts the opponent level relative to the player"""

    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"


class Rarity(str, Enum):
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"


class ModelType(str, Enum):
    """3D model format of a species, consumed by the renderer only"""

    VRM = "vrm"
    GLB = "glb"


class EvolutionStage(str, Enum):
    """Growth stage derived from level. Later stages get a flat stat bonus."""

    BABY = "baby"
    TEEN = "teen"
    ADULT = "adult"
    ELDER = "elder"


class ModifiableStat(str, Enum):
    """Stats that status effects can scale. Values match the BattlerStats field names."""

    ATTACK = "attack"
    DEFENSE = "defense"
    SPEED = "speed"
    ACCURACY = "accuracy"
    CRIT_RATE = "crit_rate"
