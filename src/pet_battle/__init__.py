from pet_battle.battle_engine import BattleEngine, flee_chance
from pet_battle.data.defaults import DEFAULT_BATTLE_DATA
from pet_battle.data.loader import load_battle_data
from pet_battle.enums import (
    BattleEventType,
    BattlePhase,
    Difficulty,
    Effectiveness,
    ElementType,
    EvolutionStage,
    ModifiableStat,
    MoveAnimation,
    MoveCategory,
    StatusEffectKind,
    StatusTarget,
    Winner,
)
from pet_battle.errors import BattleDataError, PetBattleError
from pet_battle.rewards import calculate_coin_reward, calculate_xp_reward, get_battle_summary
from pet_battle.schema.battle_data import BattleData
from pet_battle.schema.battle_move import BattleMove, MoveInstance, StatusApplication
from pet_battle.schema.battle_state import BattleEvent, BattleState, BattleSummary
from pet_battle.schema.battler import Battler, BattlerStats, PetTraits
from pet_battle.schema.status_effect import ActiveStatus, StatModifiers, StatusEffectData
from pet_battle.stats import derive_base_stats, effective_stat
from pet_battle.type_effectiveness import get_type_effectiveness
from pet_battle.utils.battler_factory import create_battler, generate_npc_opponent
from pet_battle.utils.rng import LcgRandom, ScriptedRandom
