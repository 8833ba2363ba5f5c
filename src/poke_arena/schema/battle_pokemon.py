import math

from pydantic import Field, field_serializer, field_validator, model_validator

from src.poke_arena.schema.creature import Creature


class Battler(Creature):
    """Combat-ready creature: the catalog record plus derived battle stats.

    Field names follow the game's JSON wire format, so a snapshot can be sent to the
    client and posted back for the next turn unchanged.
    """

    # HP (never negative; 0 means fainted)
    hp: int = Field(ge=0)
    maxHp: int = Field(ge=0)

    # Core stats
    defense: int
    attack: int
    speed: int

    # Accuracy and crits
    critChance: float = Field(ge=0, le=1)
    missChance: float = Field(ge=0, le=1)

    # Parsed measurements (NaN when the catalog string was malformed, null on the wire)
    weightKg: float
    heightM: float

    # Damage factors
    rarityFactor: float
    powerMultiplier: float

    @field_validator("weightKg", "heightM", mode="before")
    @classmethod
    def _null_as_nan(cls, value):
        return math.nan if value is None else value

    # JSON has no NaN, so an unparsed measurement goes on the wire as null
    @field_serializer("weightKg", "heightM", when_used="json")
    def _nan_as_null(self, value: float) -> float | None:
        return None if math.isnan(value) else value

    @model_validator(mode="after")
    def _hp_within_max(self) -> "Battler":
        if self.hp > self.maxHp:
            raise ValueError(f"hp {self.hp} exceeds maxHp {self.maxHp}")
        return self

    @property
    def is_fainted(self) -> bool:
        return self.hp <= 0
