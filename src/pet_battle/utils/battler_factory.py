import logging
import uuid
from typing import Optional

from pet_battle.constants import LEGENDARY_ENCOUNTER_CHANCE, LEGENDARY_MIN_PLAYER_LEVEL, NPC_LEVEL_OFFSETS
from pet_battle.data.defaults import DEFAULT_BATTLE_DATA
from pet_battle.enums import Difficulty
from pet_battle.errors import PetBattleError
from pet_battle.schema.battle_data import BattleData
from pet_battle.schema.battle_move import MoveInstance
from pet_battle.schema.battler import Battler, PetTraits
from pet_battle.stats import clamp_level, derive_base_stats
from pet_battle.utils import rng

logger = logging.getLogger(__name__)


def generate_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


def create_battler(
    species: str,
    level: int,
    is_player: bool,
    is_npc: bool = False,
    name: Optional[str] = None,
    traits: Optional[PetTraits] = None,
    *,
    data: BattleData = DEFAULT_BATTLE_DATA,
) -> Battler:
    """Build a full-HP battler with a fresh id, its species moveset at full PP and no statuses."""
    safe_level = clamp_level(level)
    moves = tuple(MoveInstance.full(move) for move in data.get_species_moves(species))

    return Battler(
        id=generate_id("player" if is_player else "opponent"),
        name=name or data.get_species_name(species),
        species=species,
        element=data.get_species_element(species),
        level=safe_level,
        stats=derive_base_stats(safe_level, species, traits),
        moves=moves,
        active_statuses=(),
        is_player=is_player,
        is_npc=is_npc,
    )


def generate_npc_opponent(
    player_level: int,
    difficulty: Difficulty = Difficulty.NORMAL,
    *,
    data: BattleData = DEFAULT_BATTLE_DATA,
    random_source: rng.RandomSource,
) -> Battler:
    """
    Random wild opponent scaled to the player

    Legendary species only show up on a 5% roll, and only on hard difficulty
    or once the player reaches level 10.
    """
    difficulty = Difficulty(difficulty)
    can_encounter_legendary = difficulty == Difficulty.HARD or player_level >= LEGENDARY_MIN_PLAYER_LEVEL
    legendary_roll = rng.chance(random_source, LEGENDARY_ENCOUNTER_CHANCE) and can_encounter_legendary

    legendary = data.legendary_pool()
    common = data.common_species()
    if legendary_roll and legendary:
        species = rng.choice(random_source, legendary)
    elif common or legendary:
        species = rng.choice(random_source, common or legendary)
    else:
        raise PetBattleError("Cannot generate an NPC opponent: no species configured")

    low, high = NPC_LEVEL_OFFSETS[difficulty]
    npc_level = clamp_level(player_level + rng.rand_int(random_source, low, high))
    npc_name = f"{rng.choice(random_source, data.npc_name_prefixes)} {rng.choice(random_source, data.npc_name_suffixes)}"

    logger.debug("Generated NPC %s: %s Lv%d (%s)", npc_name, species, npc_level, difficulty.value)
    return create_battler(species, npc_level, is_player=False, is_npc=True, name=npc_name, data=data)
