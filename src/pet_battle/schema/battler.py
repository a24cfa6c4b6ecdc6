from pydantic import BaseModel, ConfigDict, Field, model_validator

from pet_battle.constants import MIN_LEVEL, MAX_LEVEL, MIN_TRAIT, MAX_TRAIT
from pet_battle.enums import ElementType, StatusEffectKind
from pet_battle.schema.battle_move import MoveInstance
from pet_battle.schema.status_effect import ActiveStatus


class PetTraits(BaseModel):
    """Personality traits of a raised pet, each 1-100 with 50 neutral"""

    model_config = ConfigDict(frozen=True)

    energy: int = Field(default=50, ge=MIN_TRAIT, le=MAX_TRAIT)
    mood: int = Field(default=50, ge=MIN_TRAIT, le=MAX_TRAIT)
    intelligence: int = Field(default=50, ge=MIN_TRAIT, le=MAX_TRAIT)
    luck: int = Field(default=50, ge=MIN_TRAIT, le=MAX_TRAIT)
    aggression: int = Field(default=50, ge=MIN_TRAIT, le=MAX_TRAIT)
    resilience: int = Field(default=50, ge=MIN_TRAIT, le=MAX_TRAIT)


class BattlerStats(BaseModel):
    """Base combat stats. Effective values are derived on demand from active statuses."""

    model_config = ConfigDict(frozen=True)

    max_hp: int = Field(ge=1)
    hp: int = Field(ge=0)
    attack: int = Field(ge=0)
    defense: int = Field(ge=0)
    speed: int = Field(ge=0)
    accuracy: int = Field(ge=0)  # percent
    crit_rate: float = Field(ge=0.0, le=1.0)

    @model_validator(mode="after")
    def _check_hp(self) -> "BattlerStats":
        if self.hp > self.max_hp:
            raise ValueError(f"hp {self.hp} exceeds max_hp {self.max_hp}")
        return self


class Battler(BaseModel):
    """One combatant's full battle state"""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    species: str
    element: ElementType
    level: int = Field(ge=MIN_LEVEL, le=MAX_LEVEL)
    stats: BattlerStats
    moves: tuple[MoveInstance, ...]  # selection order, not priority order
    active_statuses: tuple[ActiveStatus, ...] = ()
    is_player: bool = False
    is_npc: bool = False

    @property
    def hp(self) -> int:
        return self.stats.hp

    @property
    def max_hp(self) -> int:
        return self.stats.max_hp

    @property
    def is_fainted(self) -> bool:
        return self.stats.hp <= 0

    @property
    def hp_fraction(self) -> float:
        return self.stats.hp / self.stats.max_hp

    def find_move(self, move_id: str) -> int | None:
        """Return the slot of a move by id, or None if the battler does not know it."""
        for slot, instance in enumerate(self.moves):
            if instance.move.id == move_id:
                return slot
        return None

    def get_status(self, kind: StatusEffectKind) -> ActiveStatus | None:
        for status in self.active_statuses:
            if status.kind == kind:
                return status
        return None

    # =================================================================
    # COPY-WITH-CHANGES HELPERS
    # =================================================================

    def with_hp(self, hp: int) -> "Battler":
        """Copy with hp clamped to [0, max_hp]"""
        clamped = max(0, min(self.stats.max_hp, hp))
        return self.model_copy(update={"stats": self.stats.model_copy(update={"hp": clamped})})

    def with_statuses(self, statuses: tuple[ActiveStatus, ...]) -> "Battler":
        return self.model_copy(update={"active_statuses": tuple(statuses)})

    def with_move_used(self, slot: int) -> "Battler":
        """Copy with one PP spent from the move in the given slot"""
        moves = list(self.moves)
        moves[slot] = moves[slot].use()
        return self.model_copy(update={"moves": tuple(moves)})
