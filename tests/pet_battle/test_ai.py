import logging

from pet_battle.ai import select_npc_move
from pet_battle.utils.battler_factory import create_battler
from pet_battle.utils.rng import ScriptedRandom


def no_noise() -> ScriptedRandom:
    # uniform(-10, 10) of 0.5 is exactly 0
    return ScriptedRandom([0.5])


def test_prefers_super_effective_status_move():
    npc = create_battler("sparky", 10, is_player=False, is_npc=True)
    player = create_battler("meep", 10, is_player=True)

    choice = select_npc_move(npc, player, random_source=no_noise())

    assert choice.move.id == "emberBlast"
    assert choice.slot == 1


def test_heals_when_low_on_hp():
    npc = create_battler("blob", 10, is_player=False, is_npc=True)
    player = create_battler("meep", 10, is_player=True)

    low = npc.with_hp(npc.max_hp // 10)
    assert select_npc_move(low, player, random_source=no_noise()).move.id == "rest"


def test_ties_keep_first_scanned_move():
    # At full HP tackle and glare both score 55
    npc = create_battler("blob", 10, is_player=False, is_npc=True)
    player = create_battler("meep", 10, is_player=True)

    choice = select_npc_move(npc, player, random_source=no_noise())
    assert choice.move.id == "tackle"
    assert choice.slot == 0


def test_one_noise_draw_per_usable_move():
    npc = create_battler("sparky", 10, is_player=False, is_npc=True)
    npc = npc.model_copy(update={"moves": (npc.moves[0].model_copy(update={"current_pp": 0}),) + npc.moves[1:]})
    player = create_battler("meep", 10, is_player=True)
    source = no_noise()

    choice = select_npc_move(npc, player, random_source=source)

    assert choice.slot != 0
    assert source.draws_consumed == 3


def test_out_of_pp_falls_back_to_basic_attack(caplog):
    npc = create_battler("sparky", 10, is_player=False, is_npc=True)
    npc = npc.model_copy(update={"moves": tuple(m.model_copy(update={"current_pp": 0}) for m in npc.moves)})
    player = create_battler("meep", 10, is_player=True)

    with caplog.at_level(logging.WARNING):
        choice = select_npc_move(npc, player, random_source=no_noise())

    assert choice.move.id == "tackle"
    assert choice.slot is None
    assert "no PP left" in caplog.text
