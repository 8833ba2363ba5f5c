import logging
from typing import Iterable, Sequence

from src.poke_arena.config import DEFAULT_CONFIG, BattleConfig
from src.poke_arena.constants import (
    MSG_CRITICAL_HIT,
    MSG_DRAW,
    MSG_FAINTED,
    MSG_HEAL,
    MSG_HIT,
    MSG_HP_LEFT,
    MSG_MAX_TURNS,
    MSG_MISS,
    MSG_OPPONENT_WINS_BY_HP,
    MSG_TURN_HEADER,
    MSG_USER_LOSES,
    MSG_USER_WINS,
    MSG_USER_WINS_BY_HP,
)
from src.poke_arena.damage_calculator import DamageCalculator
from src.poke_arena.enums import BattleOutcome, BattleSide
from src.poke_arena.schema.battle_pokemon import Battler
from src.poke_arena.schema.battle_state import BattleSnapshot
from src.poke_arena.schema.creature import Creature
from src.poke_arena.type_effectiveness import TypeEffectiveness
from src.poke_arena.utils import mon_factory
from src.poke_arena.utils.rng import RandomSource, choice_index, default_source, rand_int

logger = logging.getLogger(__name__)


def is_team_defeated(team: Iterable[Battler]) -> bool:
    """True when every battler on the team has fainted (an empty team counts as defeated)"""
    return all(battler.is_fainted for battler in team)


def team_hp(team: Iterable[Battler]) -> int:
    return sum(battler.hp for battler in team)


class BattleEngine:
    """
    Turn engine for a two-team battle

    The engine holds no battle state: every call takes the rosters from the previous
    snapshot and returns a new snapshot. Only the random source and config live on
    the instance.

    A turn follows this flow:
    1. Copy both rosters (caller's battlers are never mutated)
    2. Determine turn order by speed
    3. Each living battler either heals or attacks a random living enemy
    4. Check for battle end conditions
    5. Return the new snapshot
    """

    def __init__(self, rng: RandomSource | None = None, config: BattleConfig | None = None):
        self.rng: RandomSource = rng if rng is not None else default_source()
        self.config: BattleConfig = config if config is not None else DEFAULT_CONFIG
        self.damage_calculator = DamageCalculator(self.rng)

    def initialize_battle(self, user_creatures: Iterable[Creature], opponent_creatures: Iterable[Creature]) -> BattleSnapshot:
        """Roll battle stats for both rosters. No combat happens and the log is empty."""
        user_battlers = mon_factory.initialize(user_creatures, self.rng)
        opponent_battlers = mon_factory.initialize(opponent_creatures, self.rng)
        logger.debug("Initialized battle: %d user battlers vs %d opponent battlers", len(user_battlers), len(opponent_battlers))
        return BattleSnapshot(userBattlers=user_battlers, opponentBattlers=opponent_battlers)

    def resolve_turn(self, user_battlers: Sequence[Battler], opponent_battlers: Sequence[Battler], turn: int) -> BattleSnapshot:
        """
        Resolve one full turn

        Args:
            user_battlers: The user's roster from the previous snapshot
            opponent_battlers: The opponent's roster from the previous snapshot
            turn: Turn number, compared against config.max_turns

        Returns:
            A new snapshot holding the mutated copies and this turn's log only
        """
        user_team = [battler.model_copy(deep=True) for battler in user_battlers]
        opponent_team = [battler.model_copy(deep=True) for battler in opponent_battlers]
        log: list[str] = [MSG_TURN_HEADER.format(turn=turn)]

        teams = {BattleSide.USER: user_team, BattleSide.OPPONENT: opponent_team}
        for battler, side in self._determine_turn_order(user_team, opponent_team):
            if battler.is_fainted:
                continue

            enemy_team = teams[side.opposite()]
            if is_team_defeated(enemy_team):
                break

            # Chance to heal instead of attacking
            if self._try_heal(battler, log):
                continue

            alive_enemies = [enemy for enemy in enemy_team if not enemy.is_fainted]
            if not alive_enemies:
                break

            defender = alive_enemies[choice_index(self.rng, len(alive_enemies))]
            self._execute_attack(battler, defender, log)

        outcome = self._check_battle_end(user_team, opponent_team, turn, log)
        logger.debug("Turn %d resolved: outcome=%s, user hp=%d, opponent hp=%d", turn, outcome.name, team_hp(user_team), team_hp(opponent_team))

        return BattleSnapshot(
            userBattlers=user_team,
            opponentBattlers=opponent_team,
            turnLog=log,
            ended=outcome.ended,
            outcome=outcome,
        )

    def _determine_turn_order(self, user_team: list[Battler], opponent_team: list[Battler]) -> list[tuple[Battler, BattleSide]]:
        """
        Order every battler by speed, fastest first

        The sort is stable, so equal speeds keep roster order with the whole user
        roster ahead of the opponent roster.
        """
        combined = [(battler, BattleSide.USER) for battler in user_team]
        combined += [(battler, BattleSide.OPPONENT) for battler in opponent_team]
        return sorted(combined, key=lambda entry: entry[0].speed, reverse=True)

    def _try_heal(self, battler: Battler, log: list[str]) -> bool:
        """Small chance to heal instead of attacking. Always takes one draw; a successful heal takes a second."""
        roll = self.rng.random()
        if battler.hp > 0 and battler.hp < battler.maxHp and roll < self.config.heal_chance:
            heal_amount = rand_int(self.rng, self.config.heal_min, self.config.heal_max)
            battler.hp = min(battler.hp + heal_amount, battler.maxHp)
            log.append(MSG_HEAL.format(name=battler.name, amount=heal_amount, hp=battler.hp, max_hp=battler.maxHp))
            return True
        return False

    def _execute_attack(self, attacker: Battler, defender: Battler, log: list[str]) -> None:
        result = self.damage_calculator.calculate_damage(attacker, defender)

        if result.missed:
            log.append(MSG_MISS.format(attacker=attacker.name, defender=defender.name))
            return

        defender.hp = max(defender.hp - result.damage, 0)

        parts = [MSG_HIT.format(attacker=attacker.name, defender=defender.name, damage=result.damage)]
        if result.isCritical:
            parts.append(MSG_CRITICAL_HIT)
        effectiveness_message = TypeEffectiveness.get_effectiveness_description(result.effectiveness)
        if effectiveness_message:
            parts.append(effectiveness_message)
        parts.append(MSG_HP_LEFT.format(hp=defender.hp, max_hp=defender.maxHp))
        log.append(" ".join(parts))

        if defender.hp == 0:
            log.append(MSG_FAINTED.format(name=defender.name))

    def _check_battle_end(self, user_team: list[Battler], opponent_team: list[Battler], turn: int, log: list[str]) -> BattleOutcome:
        """
        Check if the battle has ended, appending the verdict to the log

        Checked in order, so a turn that wipes out both teams is a user win:
        1. Opponent team fainted -> user wins
        2. User team fainted -> opponent wins
        3. Turn limit reached -> higher total HP wins, equal totals draw
        """
        if is_team_defeated(opponent_team):
            log.append(MSG_USER_WINS)
            return BattleOutcome.USER_WON
        if is_team_defeated(user_team):
            log.append(MSG_USER_LOSES)
            return BattleOutcome.OPPONENT_WON

        if turn >= self.config.max_turns:
            log.append(MSG_MAX_TURNS.format(max_turns=self.config.max_turns))
            user_hp = team_hp(user_team)
            opponent_hp = team_hp(opponent_team)
            if user_hp > opponent_hp:
                log.append(MSG_USER_WINS_BY_HP)
                return BattleOutcome.USER_WON
            elif opponent_hp > user_hp:
                log.append(MSG_OPPONENT_WINS_BY_HP)
                return BattleOutcome.OPPONENT_WON
            else:
                log.append(MSG_DRAW)
                return BattleOutcome.DRAW

        return BattleOutcome.ONGOING


def run_one_turn(
    user_team: Sequence[Creature] | Sequence[Battler],
    opponent_team: Sequence[Creature] | Sequence[Battler],
    turn: int = 0,
    init_only: bool = False,
    rng: RandomSource | None = None,
    config: BattleConfig | None = None,
) -> BattleSnapshot:
    """
    Single-call form of the engine, as the game's battle endpoint uses it

    With init_only the teams are catalog records and are initialized (turn is
    ignored); otherwise they are battlers from the previous snapshot and one turn
    is resolved.
    """
    engine = BattleEngine(rng=rng, config=config)
    if init_only:
        return engine.initialize_battle(user_team, opponent_team)
    return engine.resolve_turn(user_team, opponent_team, turn)
