"""
Accuracy and damage calculation

Damage formula:

    ((2 * level / 5 + 2) * power * (attack / defense) / 50 + 2)
        * type_multiplier * stab * critical * variance

attack and defense are effective stats (status modifiers folded in), with
attack boosted 10% for special moves. Random draws happen in a fixed order so
a turn replays exactly from the same draw sequence: critical roll first, then
damage variance.
"""

import math
from typing import NamedTuple

from pet_battle.constants import (
    CRITICAL_MULTIPLIER,
    DAMAGE_VARIANCE_MAX,
    DAMAGE_VARIANCE_MIN,
    MIN_DAMAGE,
    SPECIAL_ATTACK_BOOST,
    STAB_MULTIPLIER,
)
from pet_battle.enums import Effectiveness, ModifiableStat, MoveCategory
from pet_battle.schema.battle_data import BattleData
from pet_battle.schema.battle_move import BattleMove
from pet_battle.schema.battler import Battler
from pet_battle.stats import effective_stat
from pet_battle.type_effectiveness import classify_effectiveness
from pet_battle.utils import rng


class DamageResult(NamedTuple):
    damage: int
    is_critical: bool
    effectiveness: Effectiveness
    type_multiplier: float


class DamageCalculator:
    """Accuracy and damage rolls for a single move use"""

    def __init__(self, data: BattleData, random_source: rng.RandomSource):
        self.data = data
        self.random_source = random_source

    def check_accuracy(self, attacker: Battler, move: BattleMove) -> bool:
        """One draw against move accuracy x attacker accuracy, both percentages"""
        hit_chance = move.accuracy * effective_stat(attacker, ModifiableStat.ACCURACY) / 100 / 100
        return rng.chance(self.random_source, hit_chance)

    def calculate_damage(self, attacker: Battler, defender: Battler, move: BattleMove) -> DamageResult:
        """
        Damage of a connecting move with power > 0

        Returns:
            DamageResult with damage floored and at least 1
        """
        attack = effective_stat(attacker, ModifiableStat.ATTACK)
        defense = effective_stat(defender, ModifiableStat.DEFENSE)

        match move.category:
            case MoveCategory.SPECIAL:
                attack = attack * SPECIAL_ATTACK_BOOST
            case MoveCategory.PHYSICAL | MoveCategory.STATUS:
                pass

        base = ((2 * attacker.level / 5 + 2) * move.power * (attack / defense)) / 50 + 2

        type_multiplier = self.data.type_effectiveness(move.element, defender.element)
        stab = STAB_MULTIPLIER if move.element == attacker.element else 1.0

        crit_chance = effective_stat(attacker, ModifiableStat.CRIT_RATE) + move.crit_rate
        is_critical = rng.chance(self.random_source, crit_chance)
        critical = CRITICAL_MULTIPLIER if is_critical else 1.0

        variance = rng.uniform(self.random_source, DAMAGE_VARIANCE_MIN, DAMAGE_VARIANCE_MAX)

        damage = math.floor(base * type_multiplier * stab * critical * variance)
        return DamageResult(
            damage=max(MIN_DAMAGE, damage),
            is_critical=is_critical,
            effectiveness=classify_effectiveness(type_multiplier),
            type_multiplier=type_multiplier,
        )
