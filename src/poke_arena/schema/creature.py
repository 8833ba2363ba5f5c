from pydantic import BaseModel, Field

from src.poke_arena.enums import Type


class Creature(BaseModel):
    """Catalog record for one Pokemon, as served by the Pokedex catalog.

    Measurements keep their units ("0.7 m", "6.9 kg"); the battler factory parses them.
    Extra catalog fields (candy, egg, spawn_time, ...) are ignored.
    """

    # Identity
    id: int
    num: str
    name: str
    img: str

    # Typing
    type: list[Type] = Field(min_length=1)
    weaknesses: list[Type] | None = None

    # Physical data, human readable with units
    height: str
    weight: str

    # Rarity and evolution
    spawn_chance: float | None = Field(default=None, ge=0)
    multipliers: list[float] | None = None
