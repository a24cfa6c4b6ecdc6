import math

import pytest

from pet_battle.data.status_effects import STATUS_EFFECTS
from pet_battle.enums import ElementType, EvolutionStage, ModifiableStat, StatusEffectKind
from pet_battle.schema.battler import Battler, BattlerStats, PetTraits
from pet_battle.schema.status_effect import ActiveStatus
from pet_battle.stats import derive_base_stats, effective_stat, get_evolution_stage, get_trait_modifier, species_hash


def make_battler(*, attack: int = 30, crit_rate: float = 0.05, statuses: tuple[StatusEffectKind, ...] = ()) -> Battler:
    active = tuple(ActiveStatus(kind=kind, data=STATUS_EFFECTS[kind], turns_remaining=STATUS_EFFECTS[kind].duration) for kind in statuses)
    return Battler(
        id="test_battler",
        name="Tester",
        species="meep",
        element=ElementType.EARTH,
        level=10,
        stats=BattlerStats(max_hp=100, hp=100, attack=attack, defense=20, speed=30, accuracy=100, crit_rate=crit_rate),
        moves=(),
        active_statuses=active,
    )


def test_meep_level_10_base_stats():
    assert species_hash("meep") == 221
    stats = derive_base_stats(10, "meep")
    assert (stats.max_hp, stats.hp, stats.attack, stats.defense, stats.speed) == (111, 111, 33, 23, 27)
    assert stats.accuracy == 100
    assert stats.crit_rate == 0.05


def test_level_is_clamped():
    assert derive_base_stats(0, "meep") == derive_base_stats(1, "meep")
    assert derive_base_stats(99, "meep") == derive_base_stats(50, "meep")


def test_evolution_stage_thresholds():
    assert get_evolution_stage(14) == EvolutionStage.BABY
    assert get_evolution_stage(15) == EvolutionStage.TEEN
    assert get_evolution_stage(30) == EvolutionStage.ADULT
    assert get_evolution_stage(45) == EvolutionStage.ELDER


def test_teen_bonus_applies_to_hp():
    # Level 15 meep before the 5% teen bonus: 40 + 1 + 15 * 7
    assert derive_base_stats(15, "meep").max_hp == math.floor(146 * 1.05)


def test_trait_modifier_range():
    assert get_trait_modifier(50) == 0
    assert get_trait_modifier(100) == pytest.approx(0.05)
    assert get_trait_modifier(1) == pytest.approx(-0.049)


def test_neutral_traits_change_nothing():
    assert derive_base_stats(20, "lovebug", PetTraits()) == derive_base_stats(20, "lovebug")


def test_aggressive_pet_trades_defense_for_attack():
    base = derive_base_stats(20, "lovebug")
    aggressive = derive_base_stats(20, "lovebug", PetTraits(aggression=100))
    assert aggressive.attack > base.attack
    assert aggressive.defense < base.defense


def test_luck_is_additive_on_crit_rate():
    stats = derive_base_stats(10, "meep", PetTraits(luck=100))
    assert stats.crit_rate == pytest.approx(0.075)


def test_effective_attack_folds_status_modifiers():
    assert effective_stat(make_battler(), ModifiableStat.ATTACK) == 30
    assert effective_stat(make_battler(statuses=(StatusEffectKind.BLAZED,)), ModifiableStat.ATTACK) == 39
    # burned -10% then mellow -15%
    assert effective_stat(make_battler(statuses=(StatusEffectKind.BURNED, StatusEffectKind.MELLOW)), ModifiableStat.ATTACK) == 22


def test_effective_stat_never_below_one():
    assert effective_stat(make_battler(attack=1, statuses=(StatusEffectKind.MELLOW,)), ModifiableStat.ATTACK) == 1


def test_effective_crit_rate_stays_fractional():
    battler = make_battler(statuses=(StatusEffectKind.ENLIGHTENED,))
    assert effective_stat(battler, ModifiableStat.CRIT_RATE) == pytest.approx(0.065)
    assert effective_stat(make_battler(crit_rate=1.0, statuses=(StatusEffectKind.ENLIGHTENED,)), ModifiableStat.CRIT_RATE) == 1.0
