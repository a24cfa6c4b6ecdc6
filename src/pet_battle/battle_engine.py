import logging
from typing import Iterable, Optional

from pet_battle.ai import select_npc_move
from pet_battle.constants import BASE_FLEE_CHANCE, FLEE_SPEED_RATIO_WEIGHT, MAX_FLEE_CHANCE
from pet_battle.data.defaults import DEFAULT_BATTLE_DATA
from pet_battle.enums import BattleEventType, BattlePhase, Difficulty, ModifiableStat, Winner
from pet_battle.move_executor import MoveExecutor
from pet_battle.rewards import get_battle_summary
from pet_battle.schema.battle_data import BattleData
from pet_battle.schema.battle_state import BattleEvent, BattleState, BattleSummary
from pet_battle.schema.battler import Battler, PetTraits
from pet_battle.stats import effective_stat
from pet_battle.status_effects import StatusEffectProcessor
from pet_battle.turn_order import determine_turn_order
from pet_battle.utils import rng
from pet_battle.utils.battler_factory import create_battler, generate_id, generate_npc_opponent

logger = logging.getLogger(__name__)


def flee_chance(player: Battler, opponent: Battler) -> float:
    """0.5 + 0.25 x speed ratio, capped at 0.95"""
    ratio = effective_stat(player, ModifiableStat.SPEED) / effective_stat(opponent, ModifiableStat.SPEED)
    return min(MAX_FLEE_CHANCE, BASE_FLEE_CHANCE + FLEE_SPEED_RATIO_WEIGHT * ratio)


class BattleEngine:
    """
    Turn-based battle between one player battler and one opponent battler

    The engine holds no battle state of its own. Every operation takes a
    BattleState and returns a new one, with `events` narrating what that
    operation did. Rejected input never raises: the original state comes back
    with a single move_select diagnostic event.

    Flow of a turn:
    1. Validate the player's move and the opponent's kit
    2. AI picks the opponent's move
    3. Status ticks, player first (a faint here ends the battle before any move)
    4. Turn order by priority, speed, coin flip
    5. Each battler that can act spends PP and executes its move
    6. A faint ends the battle immediately, otherwise the turn counter advances
    """

    def __init__(self, data: BattleData = DEFAULT_BATTLE_DATA, random_source: Optional[rng.RandomSource] = None, seed: Optional[int] = None):
        self.data = data
        self.random_source = random_source if random_source is not None else rng.LcgRandom(seed)
        self.move_executor = MoveExecutor(data, self.random_source)
        self.status_processor = StatusEffectProcessor(data, self.random_source)

    # =================================================================
    # BATTLER CREATION
    # =================================================================

    def create_battler(self, species: str, level: int, is_player: bool, is_npc: bool = False, name: Optional[str] = None, traits: Optional[PetTraits] = None) -> Battler:
        return create_battler(species, level, is_player, is_npc, name, traits, data=self.data)

    def generate_npc_opponent(self, player_level: int, difficulty: Difficulty = Difficulty.NORMAL) -> Battler:
        return generate_npc_opponent(player_level, difficulty, data=self.data, random_source=self.random_source)

    # =================================================================
    # BATTLE LIFECYCLE
    # =================================================================

    def initialize_battle(self, player: Battler, opponent: Battler) -> BattleState:
        """
        Start a battle with both battlers cleared of statuses

        Only NPC opponents can be fled from.
        """
        state = BattleState(
            id=generate_id("battle"),
            player=player.with_statuses(()),
            opponent=opponent.with_statuses(()),
            turn=1,
            phase=BattlePhase.INTRO,
            events=(BattleEvent(type=BattleEventType.BATTLE_START, message=f"A wild {opponent.name} appeared!"),),
            can_flee=opponent.is_npc,
        )
        logger.debug("Battle %s: %s Lv%d vs %s Lv%d", state.id, player.name, player.level, opponent.name, opponent.level)
        return state

    def execute_turn(self, state: BattleState, player_move_id: str) -> BattleState:
        """
        Resolve one full turn with the player using the given move

        Args:
            state: Current battle state
            player_move_id: Id of a move the player knows with PP left

        Returns:
            New battle state with this turn's events
        """
        try:
            return self._execute_turn(state, player_move_id)
        except Exception as e:
            logger.exception("Battle %s: turn %d failed", state.id, state.turn)
            return self._reject(state, f"Battle error: {e}")

    def attempt_flee(self, state: BattleState) -> BattleState:
        """
        Try to run from the battle

        A failed attempt gives the opponent one free move and advances the turn.
        """
        try:
            return self._attempt_flee(state)
        except Exception as e:
            logger.exception("Battle %s: flee attempt failed", state.id)
            return self._reject(state, f"Battle error: {e}")

    def get_battle_summary(self, state: BattleState, history: Optional[Iterable[BattleEvent]] = None) -> BattleSummary:
        return get_battle_summary(state, history)

    # =================================================================
    # TURN RESOLUTION
    # =================================================================

    def _execute_turn(self, state: BattleState, player_move_id: str) -> BattleState:
        if state.is_over:
            return self._reject(state, "The battle is already over!")

        player, opponent = state.player, state.opponent

        player_slot = player.find_move(player_move_id)
        if player_slot is None:
            return self._reject(state, "Invalid move selected!")
        if not player.moves[player_slot].is_usable:
            return self._reject(state, "No PP left for this move!")
        if not opponent.moves:
            logger.error("Battle %s: opponent %s has no moves", state.id, opponent.name)
            return self._reject(state, "Battle error: opponent has no moves")

        player_move = player.moves[player_slot].move
        opponent_choice = select_npc_move(opponent, player, data=self.data, random_source=self.random_source)

        events = [BattleEvent(type=BattleEventType.TURN_START, message=f"Turn {state.turn}")]

        player_tick = self.status_processor.tick(player)
        opponent_tick = self.status_processor.tick(opponent)
        player, opponent = player_tick.battler, opponent_tick.battler
        events.extend(player_tick.events)
        events.extend(opponent_tick.events)

        if player.is_fainted:
            return self._finish(state, player, opponent, events, Winner.OPPONENT)
        if opponent.is_fainted:
            return self._finish(state, player, opponent, events, Winner.PLAYER)

        can_act = {True: player_tick.can_act, False: opponent_tick.can_act}
        slots = {True: player_slot, False: opponent_choice.slot}
        moves = {True: player_move, False: opponent_choice.move}

        for is_player in determine_turn_order(player, opponent, player_move, opponent_choice.move, self.random_source):
            attacker, defender = (player, opponent) if is_player else (opponent, player)
            if not can_act[is_player] or attacker.is_fainted:
                logger.debug("Battle %s: %s cannot act", state.id, attacker.name)
                continue

            if slots[is_player] is not None:
                attacker = attacker.with_move_used(slots[is_player])
            attacker, defender, move_events = self.move_executor.execute_move(attacker, defender, moves[is_player])
            events.extend(move_events)
            player, opponent = (attacker, defender) if is_player else (defender, attacker)

            if defender.is_fainted:
                return self._finish(state, player, opponent, events, Winner.PLAYER if is_player else Winner.OPPONENT)
            if attacker.is_fainted:
                # Knocked out by its own recoil
                return self._finish(state, player, opponent, events, Winner.OPPONENT if is_player else Winner.PLAYER)

        logger.debug("Battle %s: turn %d done, %s %d/%d HP, %s %d/%d HP", state.id, state.turn, player.name, player.hp, player.max_hp, opponent.name, opponent.hp, opponent.max_hp)
        return state.model_copy(update={"player": player, "opponent": opponent, "turn": state.turn + 1, "phase": BattlePhase.SELECT, "events": tuple(events)})

    def _attempt_flee(self, state: BattleState) -> BattleState:
        if state.is_over:
            return self._reject(state, "The battle is already over!")
        if not state.can_flee:
            return state.with_events(BattleEvent(type=BattleEventType.FLEE_FAIL, message="You can't escape from this battle!"))

        if rng.chance(self.random_source, flee_chance(state.player, state.opponent)):
            logger.debug("Battle %s: player fled on turn %d", state.id, state.turn)
            return state.model_copy(update={"phase": BattlePhase.END, "events": (BattleEvent(type=BattleEventType.FLEE_SUCCESS, message="Got away safely!"),)})

        player, opponent = state.player, state.opponent
        events = [BattleEvent(type=BattleEventType.FLEE_FAIL, message="Couldn't escape!")]

        # Failed escape costs the player's action: the opponent gets one free move
        if opponent.moves:
            choice = select_npc_move(opponent, player, data=self.data, random_source=self.random_source)
            if choice.slot is not None:
                opponent = opponent.with_move_used(choice.slot)
            opponent, player, move_events = self.move_executor.execute_move(opponent, player, choice.move)
            events.extend(move_events)

            if player.is_fainted:
                return self._finish(state, player, opponent, events, Winner.OPPONENT)
            if opponent.is_fainted:
                return self._finish(state, player, opponent, events, Winner.PLAYER)

        return state.model_copy(update={"player": player, "opponent": opponent, "turn": state.turn + 1, "phase": BattlePhase.SELECT, "events": tuple(events)})

    # =================================================================
    # HELPERS
    # =================================================================

    def _finish(self, state: BattleState, player: Battler, opponent: Battler, events: list[BattleEvent], winner: Winner) -> BattleState:
        loser = opponent if winner == Winner.PLAYER else player
        events.append(BattleEvent(type=BattleEventType.FAINT, battler_id=loser.id, message=f"{loser.name} fainted!"))
        if winner == Winner.PLAYER:
            events.append(BattleEvent(type=BattleEventType.VICTORY, message="You won the battle!"))
        else:
            events.append(BattleEvent(type=BattleEventType.DEFEAT, message="You lost the battle!"))

        logger.debug("Battle %s: ended on turn %d, winner %s", state.id, state.turn, winner.value)
        return state.model_copy(update={"player": player, "opponent": opponent, "phase": BattlePhase.END, "winner": winner, "events": tuple(events)})

    def _reject(self, state: BattleState, message: str) -> BattleState:
        logger.debug("Battle %s: rejected (%s)", state.id, message)
        return state.with_events(BattleEvent(type=BattleEventType.MOVE_SELECT, message=message))
