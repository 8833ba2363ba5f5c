"""
Request boundary for the battle and catalog endpoints

Transport-agnostic: each handler takes the decoded request and returns a
``(status, body)`` pair where body is JSON-serializable, so any web framework can
wrap it. Validation lives here; the engine assumes well-formed battlers.

Status codes:
- 200: success
- 400: missing teams or malformed records
- 404: unknown creature id
- 500: anything unexpected, with the underlying message
"""

import json
import logging
import math
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from src.poke_arena.battle_engine import BattleEngine
from src.poke_arena.catalog import CreatureCatalog
from src.poke_arena.config import BattleConfig
from src.poke_arena.constants import HEIGHT_UNIT, MSG_BATTLE_FAILED, MSG_CATALOG_FAILED, WEIGHT_UNIT
from src.poke_arena.errors import BattleError, InvalidMeasurementError, MissingTeamsError
from src.poke_arena.schema.battle_pokemon import Battler
from src.poke_arena.schema.creature import Creature
from src.poke_arena.utils.units import require_measurement

logger = logging.getLogger(__name__)

Response = tuple[int, dict[str, Any]]


class BattleRequest(BaseModel):
    """Body of a battle request. Teams stay untyped until initOnly says which record type they hold."""

    userTeam: list[dict[str, Any]] | None = None
    opponentTeam: list[dict[str, Any]] | None = None
    turn: int | None = Field(default=None, ge=0)
    initOnly: bool | None = None


def _error(status: int, message: str) -> Response:
    return status, {"error": message}


def _check_creature_measurements(creatures: list[Creature]) -> None:
    for creature in creatures:
        require_measurement("weight", creature.weight, WEIGHT_UNIT)
        require_measurement("height", creature.height, HEIGHT_UNIT)


def _check_battler_measurements(battlers: list[Battler]) -> None:
    for battler in battlers:
        if math.isnan(battler.weightKg):
            raise InvalidMeasurementError("weightKg", str(battler.weightKg), WEIGHT_UNIT)
        if math.isnan(battler.heightM):
            raise InvalidMeasurementError("heightM", str(battler.heightM), HEIGHT_UNIT)


def handle_battle_request(payload: Any, engine: BattleEngine | None = None) -> Response:
    """
    Run one battle call from a decoded request body

    Args:
        payload: Decoded JSON body with userTeam, opponentTeam, turn and initOnly
        engine: Engine to use (a fresh one with default config if None)

    Returns:
        (status, body) where body is the snapshot JSON or {"error": message}
    """
    engine = engine if engine is not None else BattleEngine()
    config: BattleConfig = engine.config

    try:
        request = BattleRequest.model_validate(payload)
        if request.userTeam is None or request.opponentTeam is None:
            raise MissingTeamsError()

        if request.initOnly:
            user_creatures = [Creature.model_validate(record) for record in request.userTeam]
            opponent_creatures = [Creature.model_validate(record) for record in request.opponentTeam]
            if config.strict_measurements:
                _check_creature_measurements(user_creatures)
                _check_creature_measurements(opponent_creatures)
            snapshot = engine.initialize_battle(user_creatures, opponent_creatures)
        else:
            user_battlers = [Battler.model_validate(record) for record in request.userTeam]
            opponent_battlers = [Battler.model_validate(record) for record in request.opponentTeam]
            if config.strict_measurements:
                _check_battler_measurements(user_battlers)
                _check_battler_measurements(opponent_battlers)
            snapshot = engine.resolve_turn(user_battlers, opponent_battlers, request.turn or 0)

        return 200, snapshot.model_dump(mode="json")

    except ValidationError as err:
        logger.info("Rejected battle request: %s", err)
        return _error(400, str(err))
    except BattleError as err:
        logger.info("Rejected battle request: %s", err)
        return _error(err.status, str(err))
    except Exception as err:
        logger.exception("Battle API error")
        return _error(500, str(err) or MSG_BATTLE_FAILED)


def handle_battle_body(body: str | bytes, engine: BattleEngine | None = None) -> Response:
    """Decode a raw JSON body and hand it to handle_battle_request. Undecodable bodies are a 500, like any other failure."""
    try:
        payload = json.loads(body)
    except ValueError as err:
        logger.exception("Battle API error")
        return _error(500, str(err) or MSG_BATTLE_FAILED)
    return handle_battle_request(payload, engine)


def handle_catalog_request(catalog: CreatureCatalog) -> Response:
    try:
        creatures = catalog.get_all()
    except Exception as err:
        logger.exception("Database or API error")
        return _error(500, str(err) or MSG_CATALOG_FAILED)
    return 200, {"pokemon": [creature.model_dump(mode="json") for creature in creatures]}
