from pydantic import BaseModel, ConfigDict, Field, model_validator

from pet_battle.enums import ElementType, MoveCategory, StatusTarget, StatusEffectKind, MoveAnimation


class StatusApplication(BaseModel):
    """Status effect a move may inflict when it connects"""

    model_config = ConfigDict(frozen=True)

    effect: StatusEffectKind
    chance: float = Field(ge=0.0, le=1.0)
    target: StatusTarget


class BattleMove(BaseModel):
    """Static move definition"""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    description: str = ""
    category: MoveCategory
    element: ElementType
    power: int = Field(ge=0)  # 0 for pure status moves
    accuracy: int = Field(ge=0, le=100)  # percent
    crit_rate: float = Field(ge=0.0, le=1.0)  # base critical chance added to the user's
    priority: int = 0  # higher resolves first
    max_pp: int = Field(ge=1)
    status_effect: StatusApplication | None = None
    healing: int | None = Field(default=None, ge=0, le=100)  # percent of max HP
    recoil: float | None = Field(default=None, ge=0.0, le=1.0)  # fraction of damage dealt

    # Pass-through metadata for the renderer
    animation: MoveAnimation = MoveAnimation.ATTACK
    visual_effect: str | None = None

    @property
    def inflicts_enemy_status(self) -> bool:
        return self.status_effect is not None and self.status_effect.target == StatusTarget.ENEMY

    @property
    def buffs_self(self) -> bool:
        return self.status_effect is not None and self.status_effect.target == StatusTarget.SELF


class MoveInstance(BaseModel):
    """A move bound to one battler's remaining PP"""

    model_config = ConfigDict(frozen=True)

    move: BattleMove
    current_pp: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_pp(self) -> "MoveInstance":
        if self.current_pp > self.move.max_pp:
            raise ValueError(f"current_pp {self.current_pp} exceeds max_pp {self.move.max_pp} for {self.move.id}")
        return self

    @classmethod
    def full(cls, move: BattleMove) -> "MoveInstance":
        return cls(move=move, current_pp=move.max_pp)

    @property
    def is_usable(self) -> bool:
        return self.current_pp > 0

    def use(self) -> "MoveInstance":
        """Spend one PP, never going below zero."""
        return self.model_copy(update={"current_pp": max(0, self.current_pp - 1)})
