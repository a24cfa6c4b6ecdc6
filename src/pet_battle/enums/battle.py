from enum import Enum


class BattlePhase(str, Enum):
    """Battle phases. intro -> select -> execute -> select ... until a faint or escape forces end."""

    INTRO = "intro"
    SELECT = "select"
    EXECUTE = "execute"
    END = "end"


class Winner(str, Enum):
    PLAYER = "player"
    OPPONENT = "opponent"


class BattleEventType(str, Enum):
    """Tag vocabulary of narrated battle events - the contract with the UI/chat layer"""

    BATTLE_START = "battle_start"
    TURN_START = "turn_start"
    MOVE_SELECT = "move_select"  # diagnostics for rejected input
    MOVE_EXECUTE = "move_execute"
    DAMAGE_DEALT = "damage_dealt"
    HEAL = "heal"
    STATUS_APPLIED = "status_applied"
    STATUS_REMOVED = "status_removed"
    STATUS_TICK = "status_tick"
    MISS = "miss"
    CRITICAL = "critical"
    TYPE_EFFECTIVE = "type_effective"
    TYPE_WEAK = "type_weak"
    FAINT = "faint"
    VICTORY = "victory"
    DEFEAT = "defeat"
    FLEE_SUCCESS = "flee_success"
    FLEE_FAIL = "flee_fail"


class Effectiveness(str, Enum):
    SUPER = "super"
    WEAK = "weak"
    NORMAL = "normal"
