import logging
from typing import Iterable

from pydantic import BaseModel, Field

from src.poke_arena.battle_engine import BattleEngine
from src.poke_arena.constants import MSG_BATTLE_STARTED
from src.poke_arena.schema.battle_state import BattleSnapshot
from src.poke_arena.schema.creature import Creature

logger = logging.getLogger(__name__)


class BattleRecord(BaseModel):
    """A finished battle: the last snapshot plus the log accumulated over every turn"""

    final_state: BattleSnapshot
    log: list[str] = Field(default_factory=list)
    turns_played: int = Field(ge=0, default=0)


def run_battle(user_creatures: Iterable[Creature], opponent_creatures: Iterable[Creature], engine: BattleEngine | None = None) -> BattleRecord:
    """
    Play a battle from catalog records to the end

    Drives the engine the way the battle page does: initialize once, then resolve
    turns 1, 2, ... feeding each snapshot back in, appending each turn's log, until
    the snapshot reports the battle ended. The turn limit in the engine's config
    bounds the loop.
    """
    engine = engine if engine is not None else BattleEngine()
    state = engine.initialize_battle(user_creatures, opponent_creatures)
    log = [MSG_BATTLE_STARTED]

    turn = 0
    while not state.ended:
        turn += 1
        state = engine.resolve_turn(state.userBattlers, state.opponentBattlers, turn)
        log.extend(state.turnLog)

    logger.info("Battle finished after %d turns: %s", turn, state.outcome.name)
    return BattleRecord(final_state=state, log=log, turns_played=turn)
