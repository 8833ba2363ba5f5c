"""Exceptions raised outside the pure battle logic (catalog, matchmaking, request boundary)."""


class BattleError(Exception):
    """Base class for poke_arena errors. ``status`` is the status code the request boundary reports."""

    status = 500


class MissingTeamsError(BattleError):
    status = 400

    def __init__(self, message: str = "Missing teams"):
        super().__init__(message)


class InvalidMeasurementError(BattleError, ValueError):
    """A height/weight string does not parse once its unit is stripped"""

    status = 400

    def __init__(self, field: str, value: str, unit: str):
        self.field = field
        self.value = value
        self.unit = unit
        super().__init__(f"Invalid {field} {value!r}: expected a number followed by '{unit}'")


class CreatureNotFoundError(BattleError, LookupError):
    status = 404

    def __init__(self, creature_id: int):
        self.creature_id = creature_id
        super().__init__(f"Chosen Pokémon not found: {creature_id}")


class CatalogSeedError(BattleError):
    """The catalog is empty and could not be seeded"""


class NotEnoughCreaturesError(BattleError):
    """The catalog has no creatures left to build an opponent team from"""
