"""
NPC move selection

Each usable move gets a heuristic score and the best one wins. Uniform noise
keeps the NPC from being perfectly predictable while staying deterministic
for a fixed random source. Ties go to the first move scanned.
"""

import logging
from typing import NamedTuple, Optional

from pet_battle.constants import (
    AI_EFFECTIVENESS_WEIGHT,
    AI_ENEMY_STATUS_BONUS,
    AI_HEAL_BONUS,
    AI_HIGH_HP_THRESHOLD,
    AI_LOW_HP_THRESHOLD,
    AI_NOISE,
    AI_POWER_WEIGHT,
    AI_PP_WEIGHT,
    AI_SELF_BUFF_BONUS,
)
from pet_battle.data.defaults import DEFAULT_BATTLE_DATA
from pet_battle.schema.battle_data import BattleData
from pet_battle.schema.battle_move import BattleMove, MoveInstance
from pet_battle.schema.battler import Battler
from pet_battle.utils import rng

logger = logging.getLogger(__name__)


class AiMoveChoice(NamedTuple):
    move: BattleMove
    slot: Optional[int]  # None for the out-of-PP basic attack, which spends nothing


def score_move(npc: Battler, opponent: Battler, instance: MoveInstance, data: BattleData, random_source: rng.RandomSource) -> float:
    move = instance.move
    score = data.type_effectiveness(move.element, opponent.element) * AI_EFFECTIVENESS_WEIGHT
    score += move.power * AI_POWER_WEIGHT

    if move.healing and npc.hp_fraction < AI_LOW_HP_THRESHOLD:
        score += AI_HEAL_BONUS
    if move.inflicts_enemy_status and not opponent.active_statuses:
        score += AI_ENEMY_STATUS_BONUS
    if move.buffs_self and npc.hp_fraction > AI_HIGH_HP_THRESHOLD:
        score += AI_SELF_BUFF_BONUS

    score += (instance.current_pp / move.max_pp) * AI_PP_WEIGHT
    score += rng.uniform(random_source, -AI_NOISE, AI_NOISE)
    return score


def select_npc_move(npc: Battler, opponent: Battler, *, data: BattleData = DEFAULT_BATTLE_DATA, random_source: rng.RandomSource) -> AiMoveChoice:
    """
    Pick the NPC's move for this turn

    Args:
        npc: The battler choosing a move
        opponent: The battler it is facing

    Returns:
        AiMoveChoice with the move and its slot on the NPC. When every move is
        out of PP the configured basic attack is returned with slot None.
    """
    usable = [(slot, instance) for slot, instance in enumerate(npc.moves) if instance.is_usable]
    if not usable:
        logger.warning("%s has no PP left, falling back to %r", npc.name, data.basic_attack)
        return AiMoveChoice(move=data.moves[data.basic_attack], slot=None)

    best_slot, best_instance = usable[0]
    best_score = float("-inf")
    for slot, instance in usable:
        score = score_move(npc, opponent, instance, data, random_source)
        if score > best_score:
            best_score = score
            best_slot, best_instance = slot, instance

    logger.debug("%s picked %s (score %.1f)", npc.name, best_instance.move.id, best_score)
    return AiMoveChoice(move=best_instance.move, slot=best_slot)
