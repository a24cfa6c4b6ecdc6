from enum import Enum


class MoveCategory(str, Enum):
    """Damage category of a move. Special moves get a flat attack boost in the damage formula."""

    PHYSICAL = "physical"
    SPECIAL = "special"
    STATUS = "status"


class StatusTarget(str, Enum):
    """Who receives the status effect a move carries"""

    SELF = "self"
    ENEMY = "enemy"


class MoveAnimation(str, Enum):
    """Animation family requested from the renderer. Not used by battle math."""

    ATTACK = "attack"
    SPECIAL = "special"
    STATUS = "status"
