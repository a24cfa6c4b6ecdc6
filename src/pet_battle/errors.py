class PetBattleError(Exception):
    """Base for internal errors."""


class BattleDataError(PetBattleError):
    """A battle dataset could not be read or failed validation"""

    def __init__(self, path: str, detail: str):
        super().__init__(f"Failed loading battle data '{path}': {detail}")
        self.path = path
        self.detail = detail
