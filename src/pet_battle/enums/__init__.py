from pet_battle.enums.element import ElementType
from pet_battle.enums.status import StatusEffectKind
from pet_battle.enums.move import MoveCategory, StatusTarget, MoveAnimation
from pet_battle.enums.battle import BattlePhase, Winner, BattleEventType, Effectiveness
from pet_battle.enums.other import Difficulty, Rarity, ModelType, EvolutionStage, ModifiableStat
