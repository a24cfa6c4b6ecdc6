import math
from typing import Iterable, Optional

from pet_battle.constants import (
    BASE_COINS,
    BASE_XP,
    COIN_BONUS_MAX,
    COIN_BONUS_MIN,
    COIN_LEVEL_DIFF_WEIGHT,
    CONSOLATION_COIN_FRACTION,
    XP_BONUS_MAX,
    XP_BONUS_MIN,
    XP_LEVEL_DIFF_WEIGHT,
)
from pet_battle.enums import BattleEventType, Winner
from pet_battle.schema.battle_state import BattleEvent, BattleState, BattleSummary
from pet_battle.schema.battler import Battler
from pet_battle.utils.numeric import clamp


def calculate_xp_reward(winner: Battler, loser: Battler) -> int:
    """Beating a higher-level opponent pays up to 2.5x, a lower-level one as little as 0.5x"""
    multiplier = 1 + clamp((loser.level - winner.level) * XP_LEVEL_DIFF_WEIGHT, XP_BONUS_MIN, XP_BONUS_MAX)
    return math.floor(BASE_XP * loser.level * multiplier)


def calculate_coin_reward(winner: Battler, loser: Battler) -> int:
    multiplier = 1 + clamp((loser.level - winner.level) * COIN_LEVEL_DIFF_WEIGHT, COIN_BONUS_MIN, COIN_BONUS_MAX)
    return math.floor(BASE_COINS * loser.level * multiplier)


def consolation_coins() -> int:
    return math.floor(BASE_COINS * CONSOLATION_COIN_FRACTION)


def get_battle_summary(state: BattleState, history: Optional[Iterable[BattleEvent]] = None) -> BattleSummary:
    """
    Post-battle result for the player

    Args:
        state: Final battle state
        history: Cumulative event stream of the whole battle. Each state only
            carries the events of the operation that produced it, so without a
            history the damage totals cover just the last turn.
    """
    events = list(history) if history is not None else list(state.events)
    player_id = state.player.id

    damage_dealt = 0
    damage_taken = 0
    for event in events:
        if event.type != BattleEventType.DAMAGE_DEALT or not event.damage:
            continue
        if event.target_id == player_id:
            damage_taken += event.damage
        elif event.battler_id == player_id:
            damage_dealt += event.damage

    won = state.winner == Winner.PLAYER
    return BattleSummary(
        won=won,
        xp_gained=calculate_xp_reward(state.player, state.opponent) if won else 0,
        coins_gained=calculate_coin_reward(state.player, state.opponent) if won else consolation_coins(),
        opponent_name=state.opponent.name,
        opponent_level=state.opponent.level,
        turns_played=state.turn,
        damage_dealt=damage_dealt,
        damage_taken=damage_taken,
    )
