import logging

from pydantic import BaseModel, ConfigDict, Field, model_validator

from pet_battle.enums import ElementType, StatusEffectKind
from pet_battle.schema.battle_move import BattleMove
from pet_battle.schema.species_info import ElementInfo, SpeciesInfo
from pet_battle.schema.status_effect import StatusEffectData
from pet_battle.type_effectiveness import get_type_effectiveness

logger = logging.getLogger(__name__)


class BattleData(BaseModel):
    """
    Static game content consumed by the battle core

    Passed into the engine and its collaborators; DEFAULT_BATTLE_DATA is the
    shipped game content. Species lookups fail soft: a species missing from a
    table falls back to the default element / default move kit and logs a
    warning.
    """

    model_config = ConfigDict(frozen=True)

    elements: dict[ElementType, ElementInfo]
    status_effects: dict[StatusEffectKind, StatusEffectData]
    moves: dict[str, BattleMove]

    # Species tables, keyed by species tag
    species: dict[str, SpeciesInfo] = Field(default_factory=dict)
    species_elements: dict[str, ElementType] = Field(default_factory=dict)
    species_movesets: dict[str, tuple[str, ...]] = Field(default_factory=dict)
    legendary_species: tuple[str, ...] = ()

    # Fallbacks
    default_moveset: tuple[str, ...] = ("tackle", "scratch", "glare", "rest")
    default_element: ElementType = ElementType.SPIRIT
    basic_attack: str = "tackle"  # used by the AI when every move is out of PP

    npc_name_prefixes: tuple[str, ...] = ("Wild",)
    npc_name_suffixes: tuple[str, ...] = ("Pet",)

    @model_validator(mode="after")
    def _check_tables(self) -> "BattleData":
        missing_elements = [e.value for e in ElementType if e not in self.elements]
        if missing_elements:
            raise ValueError(f"elements table is missing {missing_elements}")
        missing_statuses = [s.value for s in StatusEffectKind if s not in self.status_effects]
        if missing_statuses:
            raise ValueError(f"status effect table is missing {missing_statuses}")
        for move_id, move in self.moves.items():
            if move_id != move.id:
                raise ValueError(f"move table key {move_id!r} does not match move id {move.id!r}")
        unknown_defaults = [m for m in self.default_moveset if m not in self.moves]
        if not self.default_moveset or unknown_defaults:
            raise ValueError(f"default moveset must be non-empty and known, unknown: {unknown_defaults}")
        if self.basic_attack not in self.moves:
            raise ValueError(f"basic attack {self.basic_attack!r} is not in the move table")
        if not self.npc_name_prefixes or not self.npc_name_suffixes:
            raise ValueError("NPC name word lists must not be empty")
        return self

    # =================================================================
    # MOVES
    # =================================================================

    def get_move(self, move_id: str) -> BattleMove | None:
        return self.moves.get(move_id)

    def get_moves_by_element(self, element: ElementType) -> list[BattleMove]:
        return [move for move in self.moves.values() if move.element == element]

    def get_default_moves(self) -> list[BattleMove]:
        return [self.moves[move_id] for move_id in self.default_moveset]

    # =================================================================
    # SPECIES
    # =================================================================

    def get_species_moves(self, species: str) -> list[BattleMove]:
        """Resolve a species' moveset, falling back to the default kit"""
        move_ids = self.species_movesets.get(species)
        if not move_ids:
            logger.warning("Missing moveset for species %r, using defaults", species)
            return self.get_default_moves()

        moves = []
        for move_id in move_ids:
            move = self.moves.get(move_id)
            if move is None:
                logger.error("Move not found: %r (moveset of %r)", move_id, species)
                continue
            moves.append(move)

        if not moves:
            logger.error("All moves invalid for species %r, using defaults", species)
            return self.get_default_moves()
        return moves

    def get_species_element(self, species: str) -> ElementType:
        element = self.species_elements.get(species)
        if element is None:
            logger.warning("Missing element for species %r, defaulting to %s", species, self.default_element.value)
            return self.default_element
        return element

    def get_species_name(self, species: str) -> str:
        info = self.species.get(species)
        if info is None:
            logger.warning("Missing display name for species %r", species)
            return species.title() or "???"
        return info.name

    def common_species(self) -> list[str]:
        return [s for s in self.species if s not in self.legendary_species]

    def legendary_pool(self) -> list[str]:
        return [s for s in self.species if s in self.legendary_species]

    # =================================================================
    # STATUS / ELEMENTS
    # =================================================================

    def get_status_data(self, kind: StatusEffectKind) -> StatusEffectData:
        return self.status_effects[kind]

    def type_effectiveness(self, attack_element: ElementType, defender_element: ElementType) -> float:
        return get_type_effectiveness(attack_element, defender_element, self.elements)
