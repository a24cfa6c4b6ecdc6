import logging

from pet_battle.battle_engine import BattleEngine, flee_chance
from pet_battle.data.defaults import DEFAULT_BATTLE_DATA
from pet_battle.data.status_effects import STATUS_EFFECTS
from pet_battle.enums import BattleEventType, BattlePhase, StatusEffectKind, Winner
from pet_battle.schema.battle_move import MoveInstance
from pet_battle.schema.battle_state import BattleState
from pet_battle.schema.battler import Battler
from pet_battle.schema.status_effect import ActiveStatus
from pet_battle.utils.battler_factory import create_battler
from pet_battle.utils.rng import ScriptedRandom

MOVES = DEFAULT_BATTLE_DATA.moves


def make_battler(species: str = "meep", level: int = 10, *, is_player: bool, is_npc: bool = False, moves: tuple[str, ...] | None = None, speed: int | None = None) -> Battler:
    battler = create_battler(species, level, is_player=is_player, is_npc=is_npc)
    if moves is not None:
        battler = battler.model_copy(update={"moves": tuple(MoveInstance.full(MOVES[m]) for m in moves)})
    if speed is not None:
        battler = battler.model_copy(update={"stats": battler.stats.model_copy(update={"speed": speed})})
    return battler


def start_battle(engine: BattleEngine, *, opponent_is_npc: bool = True, **opponent_kwargs) -> BattleState:
    player = make_battler(is_player=True)
    opponent = make_battler(is_player=False, is_npc=opponent_is_npc, **opponent_kwargs)
    return engine.initialize_battle(player, opponent)


def burned(turns: int = 3) -> ActiveStatus:
    return ActiveStatus(kind=StatusEffectKind.BURNED, data=STATUS_EFFECTS[StatusEffectKind.BURNED], turns_remaining=turns)


def total_pp(battler: Battler) -> int:
    return sum(instance.current_pp for instance in battler.moves)


def event_types(state: BattleState) -> list[BattleEventType]:
    return [event.type for event in state.events]


# =================================================================
# INITIALIZATION
# =================================================================


def test_initialize_battle_clears_statuses():
    engine = BattleEngine(seed=1)
    player = make_battler(is_player=True).with_statuses((burned(),))
    opponent = make_battler("cat", is_player=False, is_npc=True).with_statuses((burned(),))

    state = engine.initialize_battle(player, opponent)

    assert state.turn == 1
    assert state.phase == BattlePhase.INTRO
    assert state.winner is None
    assert state.can_flee
    assert state.player.active_statuses == () and state.opponent.active_statuses == ()
    assert event_types(state) == [BattleEventType.BATTLE_START]
    assert state.events[0].message == "A wild Cat appeared!"
    # Inputs are not mutated
    assert player.active_statuses


def test_only_npc_opponents_can_be_fled():
    assert not start_battle(BattleEngine(seed=1), opponent_is_npc=False).can_flee


# =================================================================
# TURNS
# =================================================================


def test_turn_spends_one_pp_each_and_advances():
    engine = BattleEngine(random_source=ScriptedRandom([1.0]))
    state = start_battle(engine)

    after = engine.execute_turn(state, "tackle")

    assert after.turn == 2
    assert after.phase == BattlePhase.SELECT
    assert after.winner is None
    assert after.events[0].type == BattleEventType.TURN_START
    assert after.events[0].message == "Turn 1"
    assert after.player.moves[0].current_pp == MOVES["tackle"].max_pp - 1
    assert total_pp(after.player) == total_pp(state.player) - 1
    assert total_pp(after.opponent) == total_pp(state.opponent) - 1
    assert event_types(after).count(BattleEventType.MOVE_EXECUTE) == 2
    # Original state untouched
    assert state.turn == 1
    assert total_pp(state.player) == sum(m.move.max_pp for m in state.player.moves)


def test_tackle_hits_for_formula_damage():
    engine = BattleEngine(random_source=ScriptedRandom([1.0]))
    # Slow opponent with a 90% accuracy move: the 1.0 draw makes it miss
    state = start_battle(engine, moves=("glare",), speed=1)

    after = engine.execute_turn(state, "tackle")

    damage_events = [e for e in after.events if e.type == BattleEventType.DAMAGE_DEALT]
    assert damage_events[0].damage == 10
    assert after.opponent.hp == state.opponent.hp - 10


def test_invalid_move_is_rejected_without_changes():
    engine = BattleEngine(seed=5)
    state = start_battle(engine)

    after = engine.execute_turn(state, "hyperBeam")

    assert event_types(after) == [BattleEventType.MOVE_SELECT]
    assert after.events[0].message == "Invalid move selected!"
    assert after.player == state.player and after.opponent == state.opponent
    assert after.turn == state.turn and after.phase == state.phase


def test_move_without_pp_is_rejected():
    engine = BattleEngine(seed=5)
    state = start_battle(engine)
    drained = state.player.model_copy(update={"moves": (state.player.moves[0].model_copy(update={"current_pp": 0}),) + state.player.moves[1:]})
    state = state.model_copy(update={"player": drained})

    after = engine.execute_turn(state, "tackle")

    assert event_types(after) == [BattleEventType.MOVE_SELECT]
    assert after.events[0].message == "No PP left for this move!"
    assert after.player == state.player


def test_opponent_without_moves_is_rejected(caplog):
    engine = BattleEngine(seed=5)
    state = start_battle(engine, moves=())

    with caplog.at_level(logging.ERROR):
        after = engine.execute_turn(state, "tackle")

    assert event_types(after) == [BattleEventType.MOVE_SELECT]
    assert after.events[0].message == "Battle error: opponent has no moves"
    assert "has no moves" in caplog.text


def test_status_tick_knockout_ends_battle_before_moves():
    engine = BattleEngine(random_source=ScriptedRandom([1.0]))
    state = start_battle(engine)
    state = state.model_copy(update={"opponent": state.opponent.with_hp(5).with_statuses((burned(),))})

    after = engine.execute_turn(state, "tackle")

    assert after.phase == BattlePhase.END
    assert after.winner == Winner.PLAYER
    assert after.opponent.hp == 0
    assert BattleEventType.MOVE_EXECUTE not in event_types(after)
    assert event_types(after)[-2:] == [BattleEventType.FAINT, BattleEventType.VICTORY]
    # No PP was spent
    assert total_pp(after.player) == total_pp(state.player)


def test_player_tick_knockout_is_checked_first():
    engine = BattleEngine(random_source=ScriptedRandom([1.0]))
    state = start_battle(engine)
    state = state.model_copy(
        update={
            "player": state.player.with_hp(3).with_statuses((burned(),)),
            "opponent": state.opponent.with_hp(3).with_statuses((burned(),)),
        }
    )

    after = engine.execute_turn(state, "tackle")

    assert after.winner == Winner.OPPONENT
    assert event_types(after)[-2:] == [BattleEventType.FAINT, BattleEventType.DEFEAT]


def test_stoned_player_loses_the_turn_and_keeps_pp():
    # 0.0 passes the 25% skip roll; every other draw still resolves normally
    engine = BattleEngine(random_source=ScriptedRandom([0.0]))
    state = start_battle(engine)
    stoned = ActiveStatus(kind=StatusEffectKind.STONED, data=STATUS_EFFECTS[StatusEffectKind.STONED], turns_remaining=3)
    state = state.model_copy(update={"player": state.player.with_statuses((stoned,))})

    after = engine.execute_turn(state, "tackle")

    executed = [event for event in after.events if event.type == BattleEventType.MOVE_EXECUTE]
    assert [event.battler_id for event in executed] == [state.opponent.id]
    assert total_pp(after.player) == total_pp(state.player)
    assert after.player.moves[0].current_pp == 35
    assert f"{state.player.name} is too stoned to move!" in [event.message for event in after.events]
    assert after.winner is None
    assert after.turn == state.turn + 1


def test_knockout_skips_second_mover():
    engine = BattleEngine(random_source=ScriptedRandom([1.0]))
    state = start_battle(engine, speed=1)
    state = state.model_copy(update={"opponent": state.opponent.with_hp(4)})

    after = engine.execute_turn(state, "tackle")

    assert after.phase == BattlePhase.END
    assert after.winner == Winner.PLAYER
    assert event_types(after).count(BattleEventType.MOVE_EXECUTE) == 1
    assert total_pp(after.opponent) == total_pp(state.opponent)
    assert after.turn == state.turn


def test_recoil_knockout_ends_battle():
    engine = BattleEngine(random_source=ScriptedRandom([0.0]))
    player = make_battler("sparky", is_player=True, moves=("infernoRush",)).with_hp(1)
    opponent = make_battler("meep", 50, is_player=False, is_npc=True, moves=("rest",))
    state = engine.initialize_battle(player, opponent)

    after = engine.execute_turn(state, "infernoRush")

    assert after.phase == BattlePhase.END
    assert after.winner == Winner.OPPONENT
    assert after.player.hp == 0
    assert after.opponent.hp > 0
    assert after.events[-2].battler_id == player.id
    assert event_types(after)[-2:] == [BattleEventType.FAINT, BattleEventType.DEFEAT]


def test_ended_battle_is_an_idempotent_no_op():
    engine = BattleEngine(random_source=ScriptedRandom([1.0]))
    state = start_battle(engine)
    state = state.model_copy(update={"opponent": state.opponent.with_hp(5).with_statuses((burned(),))})
    ended = engine.execute_turn(state, "tackle")

    again = engine.execute_turn(ended, "tackle")
    fled = engine.attempt_flee(ended)

    for after in (again, fled):
        assert event_types(after) == [BattleEventType.MOVE_SELECT]
        assert after.player == ended.player and after.opponent == ended.opponent
        assert after.turn == ended.turn
        assert after.phase == BattlePhase.END
        assert after.winner == Winner.PLAYER


def test_unexpected_errors_become_diagnostics(caplog):
    class BrokenSource:
        def random(self) -> float:
            raise RuntimeError("entropy pool empty")

    engine = BattleEngine(random_source=BrokenSource())
    state = start_battle(BattleEngine(seed=1))

    with caplog.at_level(logging.ERROR):
        after = engine.execute_turn(state, "tackle")

    assert event_types(after) == [BattleEventType.MOVE_SELECT]
    assert "entropy pool empty" in after.events[0].message
    assert after.player == state.player
    assert "turn 1 failed" in caplog.text


def test_seeded_battles_replay_identically_and_keep_invariants():
    def run(seed: int) -> list[BattleState]:
        engine = BattleEngine(seed=seed)
        player = make_battler("pizzalotl", 12, is_player=True)
        opponent = make_battler("lovebug", 12, is_player=False, is_npc=True)
        states = [engine.initialize_battle(player, opponent)]
        while not states[-1].is_over and len(states) < 200:
            current = states[-1]
            usable = [m.move.id for m in current.player.moves if m.is_usable]
            states.append(engine.execute_turn(current, usable[len(states) % len(usable)]))
        return states

    def narrate(run_states: list[BattleState]) -> list[list[tuple]]:
        # Battler ids are random per run, the narration is not
        return [[(e.type, e.message) for e in s.events] for s in run_states]

    states = run(2024)
    assert narrate(states) == narrate(run(2024))

    phase_rank = {BattlePhase.INTRO: 0, BattlePhase.SELECT: 1, BattlePhase.EXECUTE: 1, BattlePhase.END: 2}
    for before, after in zip(states, states[1:]):
        assert after.turn >= before.turn
        assert phase_rank[after.phase] >= phase_rank[before.phase]
        for battler in (after.player, after.opponent):
            assert 0 <= battler.hp <= battler.max_hp
            for instance in battler.moves:
                assert 0 <= instance.current_pp <= instance.move.max_pp

    final = states[-1]
    assert final.is_over
    assert final.winner in (Winner.PLAYER, Winner.OPPONENT)

    history = [event for state in states for event in state.events]
    summary = BattleEngine().get_battle_summary(final, history)
    assert summary.won == (final.winner == Winner.PLAYER)
    assert summary.damage_dealt > 0


# =================================================================
# FLEEING
# =================================================================


def test_flee_from_trainer_battle_changes_nothing():
    engine = BattleEngine(random_source=ScriptedRandom([0.0]))
    state = start_battle(engine, opponent_is_npc=False)

    after = engine.attempt_flee(state)

    assert after.player == state.player
    assert after.opponent == state.opponent
    assert after.turn == state.turn and after.phase == state.phase
    assert event_types(after) == [BattleEventType.FLEE_FAIL]
    assert after.events[0].message == "You can't escape from this battle!"


def test_flee_success_ends_without_winner():
    engine = BattleEngine(random_source=ScriptedRandom([0.0]))
    state = start_battle(engine)

    after = engine.attempt_flee(state)

    assert after.phase == BattlePhase.END
    assert after.winner is None
    assert event_types(after) == [BattleEventType.FLEE_SUCCESS]
    assert after.player == state.player and after.opponent == state.opponent


def test_failed_flee_gives_opponent_a_free_move():
    # Equal speed: flee chance 0.75, so 0.99 fails
    engine = BattleEngine(random_source=ScriptedRandom([0.99]))
    state = start_battle(engine)

    after = engine.attempt_flee(state)

    assert after.events[0].type == BattleEventType.FLEE_FAIL
    assert after.events[0].message == "Couldn't escape!"
    assert after.events[1].type == BattleEventType.MOVE_EXECUTE
    assert after.events[1].battler_id == state.opponent.id
    assert event_types(after).count(BattleEventType.MOVE_EXECUTE) == 1
    assert total_pp(after.opponent) == total_pp(state.opponent) - 1
    assert total_pp(after.player) == total_pp(state.player)
    assert after.turn == state.turn + 1
    assert after.phase == BattlePhase.SELECT


def test_failed_flee_can_end_in_defeat():
    engine = BattleEngine(random_source=ScriptedRandom([0.99]))
    state = start_battle(engine, moves=("tackle",))
    state = state.model_copy(update={"player": state.player.with_hp(1)})

    after = engine.attempt_flee(state)

    assert after.phase == BattlePhase.END
    assert after.winner == Winner.OPPONENT
    assert event_types(after)[-2:] == [BattleEventType.FAINT, BattleEventType.DEFEAT]


def test_flee_chance_is_monotonic_and_bounded():
    opponent = make_battler(is_player=False, speed=40)
    chances = [flee_chance(make_battler(is_player=True, speed=speed), opponent) for speed in (1, 10, 20, 40, 60, 80, 200, 1000)]

    assert chances == sorted(chances)
    assert all(0.5 <= c <= 0.95 for c in chances)
    assert chances[3] == 0.75
    assert chances[-1] == 0.95


# =================================================================
# BATTLER CREATION
# =================================================================


def test_engine_generates_opponents_with_its_own_source():
    a = BattleEngine(seed=77).generate_npc_opponent(15)
    b = BattleEngine(seed=77).generate_npc_opponent(15)

    assert (a.species, a.level, a.name) == (b.species, b.level, b.name)
    assert a.is_npc
    assert BattleEngine(seed=1).create_battler("wolf", 30, is_player=True).element == DEFAULT_BATTLE_DATA.get_species_element("wolf")
