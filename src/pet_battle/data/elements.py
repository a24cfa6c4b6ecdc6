from pet_battle.enums import ElementType
from pet_battle.schema.species_info import ElementInfo

# Hand-authored, intentionally asymmetric. Spirit lists itself as both strong and weak.
ELEMENT_TABLE: dict[ElementType, ElementInfo] = {
    ElementType.FIRE: ElementInfo(name="Fire", color="#ff4400", strong=ElementType.EARTH, weak=ElementType.WATER),
    ElementType.WATER: ElementInfo(name="Water", color="#0088ff", strong=ElementType.FIRE, weak=ElementType.EARTH),
    ElementType.EARTH: ElementInfo(name="Earth", color="#88aa44", strong=ElementType.AIR, weak=ElementType.FIRE),
    ElementType.AIR: ElementInfo(name="Air", color="#aaddff", strong=ElementType.WATER, weak=ElementType.EARTH),
    ElementType.SPIRIT: ElementInfo(name="Spirit", color="#dd88ff", strong=ElementType.SPIRIT, weak=ElementType.SPIRIT),
}
