"""
Load alternate battle datasets from JSON

The file holds a BattleData object in its JSON form, for example:

    {
        "elements": {"fire": {"name": "Fire", "color": "#ff4400", "strong": "earth", "weak": "water"}, ...},
        "status_effects": {"burned": {"name": "Burned", "duration": 3, "damage_per_turn": 8}, ...},
        "moves": {"tackle": {"id": "tackle", "name": "Tackle", "category": "physical", ...}, ...},
        "species_movesets": {"meep": ["tackle"]}
    }
"""

import logging
from pathlib import Path

from pydantic import ValidationError

from pet_battle.errors import BattleDataError
from pet_battle.schema.battle_data import BattleData

logger = logging.getLogger(__name__)


def load_battle_data(path: str | Path) -> BattleData:
    """Read and validate a dataset. Raises BattleDataError on I/O or validation failure."""
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise BattleDataError(str(path), str(e)) from e

    try:
        data = BattleData.model_validate_json(raw)
    except ValidationError as e:
        raise BattleDataError(str(path), f"{e.error_count()} validation error(s): {e}") from e

    logger.info("Loaded battle data from %s: %d moves, %d species", path, len(data.moves), len(data.species))
    return data
