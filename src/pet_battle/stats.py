"""
Stat model

Base stats are derived once when a battler is created, from level, a
per-species hash, optional personality traits and the evolution stage bonus.
Effective stats used in combat math are recomputed on demand by folding the
modifiers of every active status over the base value.
"""

import math

from pet_battle.constants import (
    MIN_LEVEL,
    MAX_LEVEL,
    BASE_ACCURACY,
    BASE_CRIT_RATE,
    NEUTRAL_TRAIT,
    TRAIT_INFLUENCE,
    TEEN_LEVEL,
    ADULT_LEVEL,
    ELDER_LEVEL,
)
from pet_battle.enums import EvolutionStage, ModifiableStat
from pet_battle.schema.battler import Battler, BattlerStats, PetTraits
from pet_battle.utils.numeric import clamp

EVOLUTION_STAT_BONUS: dict[EvolutionStage, int] = {
    EvolutionStage.BABY: 0,
    EvolutionStage.TEEN: 5,
    EvolutionStage.ADULT: 10,
    EvolutionStage.ELDER: 15,
}


def clamp_level(level: int) -> int:
    return clamp(level, MIN_LEVEL, MAX_LEVEL)


def get_evolution_stage(level: int) -> EvolutionStage:
    if level >= ELDER_LEVEL:
        return EvolutionStage.ELDER
    if level >= ADULT_LEVEL:
        return EvolutionStage.ADULT
    if level >= TEEN_LEVEL:
        return EvolutionStage.TEEN
    return EvolutionStage.BABY


def get_trait_modifier(trait_value: int) -> float:
    """Map a 1-100 trait to a modifier in [-5%, +5%], 50 being neutral"""
    return ((trait_value - NEUTRAL_TRAIT) / NEUTRAL_TRAIT) * TRAIT_INFLUENCE


def species_hash(species: str) -> int:
    if not species:
        return 0
    return ord(species[0]) + ord(species[-1])


def derive_base_stats(level: int, species: str, traits: PetTraits | None = None) -> BattlerStats:
    """
    Derive a battler's base stats

    Args:
        level: Battler level, clamped to [1, 50]
        species: Species tag, hashed for per-species variety
        traits: Optional personality traits (each nudges one or two stats by up to 5%)

    Returns:
        Full-HP BattlerStats
    """
    lvl = clamp_level(level)
    h = species_hash(species)

    # Per-species variance, scaled linearly by level
    hp = math.floor(40 + (h % 20) + lvl * (5 + (h % 3)))
    attack = math.floor(10 + (h % 8) + lvl * (1.5 + (h % 2) * 0.3))
    defense = math.floor(8 + ((h * 3) % 6) + lvl * (1.2 + ((h * 2) % 2) * 0.2))
    speed = math.floor(8 + ((h * 7) % 10) + lvl * (1 + ((h * 5) % 3) * 0.2))
    accuracy = BASE_ACCURACY
    crit_rate = BASE_CRIT_RATE

    if traits is not None:
        speed = math.floor(speed * (1 + get_trait_modifier(traits.energy)))
        accuracy = math.floor(accuracy * (1 + get_trait_modifier(traits.intelligence)))
        # Luck is additive on the crit fraction, at half weight
        crit_rate = crit_rate + get_trait_modifier(traits.luck) * 0.5

        aggression = get_trait_modifier(traits.aggression)
        attack = math.floor(attack * (1 + aggression))
        defense = math.floor(defense * (1 - aggression * 0.5))

        resilience = get_trait_modifier(traits.resilience)
        defense = math.floor(defense * (1 + resilience))
        hp = math.floor(hp * (1 + resilience * 0.5))

    bonus = EVOLUTION_STAT_BONUS[get_evolution_stage(lvl)] / 100
    if bonus > 0:
        hp = math.floor(hp * (1 + bonus))
        attack = math.floor(attack * (1 + bonus))
        defense = math.floor(defense * (1 + bonus))
        speed = math.floor(speed * (1 + bonus))

    return BattlerStats(max_hp=hp, hp=hp, attack=attack, defense=defense, speed=speed, accuracy=accuracy, crit_rate=crit_rate)


def effective_stat(battler: Battler, stat: ModifiableStat) -> float:
    """
    Base stat with every active status modifier folded in multiplicatively

    Integer stats are floored with a minimum of 1. Crit rate stays a fraction,
    clamped to [0, 1].
    """
    value = getattr(battler.stats, stat.value)
    for status in battler.active_statuses:
        modifier = status.data.stat_modifiers.get(stat)
        if modifier:
            value *= 1 + modifier

    if stat == ModifiableStat.CRIT_RATE:
        return clamp(value, 0.0, 1.0)
    return max(1, math.floor(value))
