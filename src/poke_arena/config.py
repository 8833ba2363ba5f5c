"""
Tunable battle settings

Defaults come from constants.py. BattleConfig.from_env() lets a deployment override
them through POKE_ARENA_* environment variables; values are validated by pydantic,
so a bad override fails at startup rather than mid-battle.
"""

import os
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field, model_validator

from src.poke_arena import constants

ENV_PREFIX = "POKE_ARENA_"


class BattleConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    max_turns: int = Field(default=constants.MAX_TURNS, ge=1)
    heal_chance: float = Field(default=constants.HEAL_CHANCE, ge=0, le=1)
    heal_min: int = Field(default=constants.HEAL_MIN, ge=0)
    heal_max: int = Field(default=constants.HEAL_MAX, ge=0)

    # Reject malformed height/weight strings at the request boundary instead of
    # letting NaN flow into the damage formula
    strict_measurements: bool = True

    catalog_cache_seconds: float = Field(default=constants.CATALOG_CACHE_SECONDS, ge=0)

    @model_validator(mode="after")
    def _heal_range(self) -> "BattleConfig":
        if self.heal_min > self.heal_max:
            raise ValueError(f"heal_min {self.heal_min} is greater than heal_max {self.heal_max}")
        return self

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "BattleConfig":
        """Build a config from POKE_ARENA_<FIELD> variables, falling back to defaults"""
        environ = os.environ if environ is None else environ
        overrides = {}
        for name in cls.model_fields:
            value = environ.get(ENV_PREFIX + name.upper())
            if value is not None and value != "":
                overrides[name] = value
        return cls.model_validate(overrides)


DEFAULT_CONFIG = BattleConfig()
