from pet_battle.data.defaults import DEFAULT_BATTLE_DATA
from pet_battle.data.status_effects import STATUS_EFFECTS
from pet_battle.enums import BattleEventType, StatusEffectKind
from pet_battle.move_executor import MoveExecutor
from pet_battle.schema.status_effect import ActiveStatus
from pet_battle.utils.battler_factory import create_battler
from pet_battle.utils.rng import ScriptedRandom

MOVES = DEFAULT_BATTLE_DATA.moves


def make_executor(draws) -> MoveExecutor:
    return MoveExecutor(DEFAULT_BATTLE_DATA, ScriptedRandom(draws))


def test_hit_emits_execute_then_damage():
    attacker = create_battler("meep", 10, is_player=True)
    defender = create_battler("meep", 10, is_player=False)

    new_attacker, new_defender, events = make_executor([1.0]).execute_move(attacker, defender, MOVES["tackle"])

    assert [e.type for e in events] == [BattleEventType.MOVE_EXECUTE, BattleEventType.DAMAGE_DEALT]
    assert events[0].message == "Meep used Tackle!"
    assert events[1].damage == 10
    assert events[1].battler_id == attacker.id and events[1].target_id == defender.id
    assert new_defender.hp == defender.hp - 10
    assert new_attacker == attacker
    # Inputs untouched
    assert defender.hp == defender.max_hp


def test_miss_stops_the_move():
    attacker = create_battler("meep", 10, is_player=True)
    dazed = attacker.with_statuses((ActiveStatus(kind=StatusEffectKind.DAZED, data=STATUS_EFFECTS[StatusEffectKind.DAZED], turns_remaining=2),))
    defender = create_battler("meep", 10, is_player=False)

    _, new_defender, events = make_executor([0.9]).execute_move(dazed, defender, MOVES["tackle"])

    assert [e.type for e in events] == [BattleEventType.MOVE_EXECUTE, BattleEventType.MISS]
    assert new_defender == defender


def test_super_effective_hit_and_recoil():
    attacker = create_battler("sparky", 10, is_player=True)
    defender = create_battler("meep", 10, is_player=False)

    # accuracy 0.0 hits, crit 0.0 crits, variance 0.0, burn roll 0.0 applies
    new_attacker, new_defender, events = make_executor([0.0]).execute_move(attacker, defender, MOVES["infernoRush"])

    types = [e.type for e in events]
    assert types == [
        BattleEventType.MOVE_EXECUTE,
        BattleEventType.DAMAGE_DEALT,
        BattleEventType.CRITICAL,
        BattleEventType.TYPE_EFFECTIVE,
        BattleEventType.DAMAGE_DEALT,
        BattleEventType.STATUS_APPLIED,
    ]
    damage = events[1].damage
    recoil = events[4]
    assert recoil.damage == int(damage * 0.2)
    assert recoil.battler_id == recoil.target_id == attacker.id
    assert new_attacker.hp == attacker.hp - recoil.damage
    assert new_defender.hp == max(0, defender.hp - damage)
    assert new_defender.get_status(StatusEffectKind.BURNED) is not None


def test_heal_is_capped_at_max_hp():
    attacker = create_battler("meep", 10, is_player=True)
    hurt = attacker.with_hp(100)
    defender = create_battler("meep", 10, is_player=False)

    new_attacker, _, events = make_executor([0.0]).execute_move(hurt, defender, MOVES["rest"])

    # 30% of 111 = 33, capped at 111
    assert events[-1].type == BattleEventType.HEAL
    assert events[-1].healing == 33
    assert new_attacker.hp == attacker.max_hp


def test_self_status_move_buffs_attacker():
    attacker = create_battler("sparky", 10, is_player=True)
    defender = create_battler("meep", 10, is_player=False)

    new_attacker, new_defender, events = make_executor([0.5]).execute_move(attacker, defender, MOVES["blazeUp"])

    assert new_attacker.get_status(StatusEffectKind.BLAZED) is not None
    assert new_defender.active_statuses == ()
    assert events[-1].type == BattleEventType.STATUS_APPLIED
    assert events[-1].battler_id == attacker.id
