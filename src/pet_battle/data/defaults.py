from pet_battle.data.elements import ELEMENT_TABLE
from pet_battle.data.moves import BATTLE_MOVES
from pet_battle.data.species import DEFAULT_MOVESET, LEGENDARY_SPECIES, NPC_NAME_PREFIXES, NPC_NAME_SUFFIXES, SPECIES_ELEMENTS, SPECIES_INFOS, SPECIES_MOVESETS
from pet_battle.data.status_effects import STATUS_EFFECTS
from pet_battle.enums import ElementType
from pet_battle.schema.battle_data import BattleData

DEFAULT_BATTLE_DATA = BattleData(
    elements=ELEMENT_TABLE,
    status_effects=STATUS_EFFECTS,
    moves=BATTLE_MOVES,
    species=SPECIES_INFOS,
    species_elements=SPECIES_ELEMENTS,
    species_movesets=SPECIES_MOVESETS,
    legendary_species=LEGENDARY_SPECIES,
    default_moveset=DEFAULT_MOVESET,
    default_element=ElementType.SPIRIT,
    basic_attack="tackle",
    npc_name_prefixes=NPC_NAME_PREFIXES,
    npc_name_suffixes=NPC_NAME_SUFFIXES,
)
