from pydantic import BaseModel, ConfigDict

from pet_battle.enums import ElementType, ModelType, Rarity


class SpeciesInfo(BaseModel):
    """Display and model data for a pet species"""

    model_config = ConfigDict(frozen=True)

    name: str
    model_url: str = ""
    model_type: ModelType = ModelType.VRM
    rarity: Rarity = Rarity.COMMON


class ElementInfo(BaseModel):
    """Element display data plus its single strong and single weak matchup"""

    model_config = ConfigDict(frozen=True)

    name: str
    color: str
    strong: ElementType  # this element deals super effective damage to `strong`
    weak: ElementType  # and not very effective damage to `weak`
