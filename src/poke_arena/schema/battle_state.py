from pydantic import BaseModel, ConfigDict, Field

from src.poke_arena.enums import BattleOutcome
from src.poke_arena.schema.battle_pokemon import Battler


class DamageResult(BaseModel):
    """Outcome of one attack as computed by the damage calculator"""

    model_config = ConfigDict(frozen=True)

    damage: int = Field(ge=0)
    isCritical: bool = False
    missed: bool = False
    effectiveness: float = Field(default=1.0, ge=0)


class BattleSnapshot(BaseModel):
    """
    State of a battle returned from each engine call

    The engine keeps no state between calls: the caller posts this snapshot's
    rosters back for the next turn.

    - turnLog only holds the messages produced by the call that returned it;
      callers accumulate the log across turns themselves.
    - ended is True once a side is defeated or the turn limit is reached,
      and outcome says which way it went.
    """

    model_config = ConfigDict(frozen=True)

    userBattlers: list[Battler]
    opponentBattlers: list[Battler]
    turnLog: list[str] = Field(default_factory=list)
    ended: bool = False
    outcome: BattleOutcome = BattleOutcome.ONGOING
