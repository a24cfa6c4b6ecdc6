import logging
import math
from typing import NamedTuple

from pet_battle.damage_calculator import DamageCalculator
from pet_battle.enums import BattleEventType, Effectiveness, StatusTarget
from pet_battle.schema.battle_data import BattleData
from pet_battle.schema.battle_move import BattleMove
from pet_battle.schema.battle_state import BattleEvent
from pet_battle.schema.battler import Battler
from pet_battle.status_effects import StatusEffectProcessor
from pet_battle.utils import rng

logger = logging.getLogger(__name__)


class MoveOutcome(NamedTuple):
    attacker: Battler
    defender: Battler
    events: list[BattleEvent]


class MoveExecutor:
    """
    Resolves one move use from attacker onto defender

    Order of resolution:
    1. Announce the move
    2. Accuracy roll (a miss ends the move)
    3. Damage for power > 0 moves, then recoil on the attacker
    4. Healing on the attacker
    5. Status roll, applied to the attacker or the defender

    PP is not spent here; the caller spends it before executing.
    """

    def __init__(self, data: BattleData, random_source: rng.RandomSource):
        self.data = data
        self.random_source = random_source
        self.damage_calculator = DamageCalculator(data, random_source)
        self.status_processor = StatusEffectProcessor(data, random_source)

    def execute_move(self, attacker: Battler, defender: Battler, move: BattleMove) -> MoveOutcome:
        events = [
            BattleEvent(
                type=BattleEventType.MOVE_EXECUTE,
                battler_id=attacker.id,
                target_id=defender.id,
                move_id=move.id,
                message=f"{attacker.name} used {move.name}!",
            )
        ]

        if not self.damage_calculator.check_accuracy(attacker, move):
            events.append(BattleEvent(type=BattleEventType.MISS, battler_id=attacker.id, move_id=move.id, message=f"{attacker.name}'s attack missed!"))
            logger.debug("%s used %s: missed", attacker.name, move.id)
            return MoveOutcome(attacker, defender, events)

        if move.power > 0:
            result = self.damage_calculator.calculate_damage(attacker, defender, move)
            defender = defender.with_hp(defender.hp - result.damage)
            events.append(
                BattleEvent(
                    type=BattleEventType.DAMAGE_DEALT,
                    battler_id=attacker.id,
                    target_id=defender.id,
                    move_id=move.id,
                    damage=result.damage,
                    is_critical=result.is_critical,
                    effectiveness=result.effectiveness,
                    message=f"{defender.name} took {result.damage} damage!",
                )
            )
            if result.is_critical:
                events.append(BattleEvent(type=BattleEventType.CRITICAL, battler_id=attacker.id, message="Critical hit!"))
            match result.effectiveness:
                case Effectiveness.SUPER:
                    events.append(BattleEvent(type=BattleEventType.TYPE_EFFECTIVE, message="It's super effective!"))
                case Effectiveness.WEAK:
                    events.append(BattleEvent(type=BattleEventType.TYPE_WEAK, message="It's not very effective..."))
                case Effectiveness.NORMAL:
                    pass
            logger.debug("%s used %s: %d damage (x%s, crit=%s)", attacker.name, move.id, result.damage, result.type_multiplier, result.is_critical)

            if move.recoil:
                recoil = math.floor(result.damage * move.recoil)
                attacker = attacker.with_hp(attacker.hp - recoil)
                events.append(
                    BattleEvent(
                        type=BattleEventType.DAMAGE_DEALT,
                        battler_id=attacker.id,
                        target_id=attacker.id,
                        move_id=move.id,
                        damage=recoil,
                        message=f"{attacker.name} took {recoil} recoil damage!",
                    )
                )

        if move.healing:
            heal = math.floor(attacker.max_hp * move.healing / 100)
            attacker = attacker.with_hp(attacker.hp + heal)
            events.append(BattleEvent(type=BattleEventType.HEAL, battler_id=attacker.id, healing=heal, message=f"{attacker.name} recovered {heal} HP!"))

        if move.status_effect is not None and rng.chance(self.random_source, move.status_effect.chance):
            if move.status_effect.target == StatusTarget.SELF:
                attacker, status_events = self.status_processor.apply_status(attacker, move.status_effect.effect)
            else:
                defender, status_events = self.status_processor.apply_status(defender, move.status_effect.effect)
            events.extend(status_events)

        return MoveOutcome(attacker, defender, events)
