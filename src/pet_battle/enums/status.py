from enum import Enum


class StatusEffectKind(str, Enum):
    """Timed status conditions a battler can carry - at most one instance of each kind"""

    BURNED = "burned"  # fire damage every turn
    SOAKED = "soaked"  # slowed
    ROOTED = "rooted"
    DAZED = "dazed"  # accuracy down
    ENLIGHTENED = "enlightened"  # crit and accuracy up
    MELLOW = "mellow"  # heals every turn, attack down
    VIBING = "vibing"  # defense and speed up
    STONED = "stoned"  # may skip the turn
    BLAZED = "blazed"  # attack up
