from pet_battle.enums import ModifiableStat
from pet_battle.schema.battle_move import BattleMove
from pet_battle.schema.battler import Battler
from pet_battle.stats import effective_stat
from pet_battle.utils import rng


def player_moves_first(player: Battler, opponent: Battler, player_move: BattleMove, opponent_move: BattleMove, random_source: rng.RandomSource) -> bool:
    """
    Higher move priority acts first, then higher effective speed.
    A full tie is a coin flip, which only then consumes a draw.
    """
    if player_move.priority != opponent_move.priority:
        return player_move.priority > opponent_move.priority

    player_speed = effective_stat(player, ModifiableStat.SPEED)
    opponent_speed = effective_stat(opponent, ModifiableStat.SPEED)
    if player_speed != opponent_speed:
        return player_speed > opponent_speed

    return rng.chance(random_source, 0.5)


def determine_turn_order(player: Battler, opponent: Battler, player_move: BattleMove, opponent_move: BattleMove, random_source: rng.RandomSource) -> tuple[bool, bool]:
    """Acting order as is_player flags, first mover first"""
    if player_moves_first(player, opponent, player_move, opponent_move, random_source):
        return (True, False)
    return (False, True)
