from pydantic import BaseModel, ConfigDict, Field

from pet_battle.enums import StatusEffectKind, ModifiableStat


class StatModifiers(BaseModel):
    """Fractional stat deltas (-0.25 = -25%) a status applies while active"""

    model_config = ConfigDict(frozen=True)

    attack: float = 0.0
    defense: float = 0.0
    speed: float = 0.0
    accuracy: float = 0.0
    crit_rate: float = 0.0

    def get(self, stat: ModifiableStat) -> float:
        return getattr(self, stat.value)


class StatusEffectData(BaseModel):
    """Static definition of a status effect kind"""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    duration: int = Field(ge=1)  # turns
    damage_per_turn: int = 0  # negative heals
    stat_modifiers: StatModifiers = Field(default_factory=StatModifiers)
    skip_turn_chance: float = Field(default=0.0, ge=0.0, le=1.0)


class ActiveStatus(BaseModel):
    """A status effect attached to a battler. The data snapshot keeps stat folding self-contained."""

    model_config = ConfigDict(frozen=True)

    kind: StatusEffectKind
    data: StatusEffectData
    turns_remaining: int = Field(ge=0)

    @property
    def expired(self) -> bool:
        return self.turns_remaining <= 0

    def tick(self) -> "ActiveStatus":
        return self.model_copy(update={"turns_remaining": max(0, self.turns_remaining - 1)})

    def refreshed(self) -> "ActiveStatus":
        return self.model_copy(update={"turns_remaining": self.data.duration})
