"""
Element matchup multipliers

Each element is configured with exactly one element it is strong against and
one it is weak against. The table is hand-authored and not symmetric: fire is
strong against earth, but earth being weak to fire is a separate entry. Spirit
is configured as both strong and weak against itself; the two cancel and the
matchup is neutral.
"""

from typing import Mapping

from pet_battle.constants import TYPE_MUL_NORMAL, TYPE_MUL_NOT_EFFECTIVE, TYPE_MUL_SUPER_EFFECTIVE
from pet_battle.enums import ElementType, Effectiveness
from pet_battle.schema.species_info import ElementInfo


def get_type_effectiveness(attack_element: ElementType, defender_element: ElementType, elements: Mapping[ElementType, ElementInfo]) -> float:
    """
    Damage multiplier of an attacking element against a defending element

    Args:
        elements: Element table of the dataset in play, usually `BattleData.elements`

    Returns:
        1.5 (super effective), 0.75 (not very effective) or 1.0
    """
    info = elements.get(attack_element)
    if info is None:
        return TYPE_MUL_NORMAL

    strong = info.strong == defender_element
    weak = info.weak == defender_element
    if strong and weak:
        return TYPE_MUL_NORMAL
    if strong:
        return TYPE_MUL_SUPER_EFFECTIVE
    if weak:
        return TYPE_MUL_NOT_EFFECTIVE
    return TYPE_MUL_NORMAL


def classify_effectiveness(multiplier: float) -> Effectiveness:
    if multiplier > TYPE_MUL_NORMAL:
        return Effectiveness.SUPER
    if multiplier < TYPE_MUL_NORMAL:
        return Effectiveness.WEAK
    return Effectiveness.NORMAL
