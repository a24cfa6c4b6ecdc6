from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from pet_battle.enums import BattleEventType, BattlePhase, Effectiveness, StatusEffectKind, Winner
from pet_battle.schema.battler import Battler


class BattleEvent(BaseModel):
    """One narrated occurrence. Only the fields relevant to the event type are set."""

    model_config = ConfigDict(frozen=True)

    type: BattleEventType
    message: str
    battler_id: str | None = None
    target_id: str | None = None
    move_id: str | None = None
    damage: int | None = None
    healing: int | None = None
    status: StatusEffectKind | None = None
    is_critical: bool | None = None
    effectiveness: Effectiveness | None = None

    def to_wire(self) -> dict[str, Any]:
        """Serializable form for the UI/chat layer, unset fields omitted"""
        return self.model_dump(mode="json", exclude_none=True)


class BattleState(BaseModel):
    """
    Complete battle state for one player battler against one opponent battler

    Every engine operation returns a new BattleState; none mutates its input.
    `events` holds only the events produced by the operation that returned
    this state, callers that need the full history must accumulate it.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    player: Battler
    opponent: Battler
    turn: int = Field(ge=1, default=1)
    phase: BattlePhase = BattlePhase.INTRO
    events: tuple[BattleEvent, ...] = ()
    winner: Winner | None = None
    can_flee: bool = False

    @property
    def is_over(self) -> bool:
        return self.phase == BattlePhase.END

    def with_events(self, *events: BattleEvent) -> "BattleState":
        """Same battle, with the event log replaced"""
        return self.model_copy(update={"events": tuple(events)})


class BattleSummary(BaseModel):
    """Post-battle result shown to the player"""

    model_config = ConfigDict(frozen=True)

    won: bool
    xp_gained: int
    coins_gained: int
    opponent_name: str
    opponent_level: int
    turns_played: int
    damage_dealt: int
    damage_taken: int
