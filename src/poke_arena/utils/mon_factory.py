from typing import Any, Iterable

from src.poke_arena.constants import (
    ATTACK_MAX,
    ATTACK_MIN,
    BASE_CRIT_CHANCE,
    BASE_HP,
    BASE_MISS_CHANCE,
    DEFAULT_ATTACK,
    DEFAULT_DEFENSE,
    DEFAULT_POWER_MULTIPLIER,
    DEFAULT_SPEED,
    DEFENSE_MAX,
    DEFENSE_MIN,
    HEIGHT_UNIT,
    RARITY_FACTOR_COMMON,
    RARITY_FACTOR_RARE,
    RARITY_FACTOR_VERY_RARE,
    RARITY_RARE_THRESHOLD,
    RARITY_VERY_RARE_THRESHOLD,
    SPEED_MAX,
    SPEED_MIN,
    WEIGHT_UNIT,
)
from src.poke_arena.schema.battle_pokemon import Battler
from src.poke_arena.schema.creature import Creature
from src.poke_arena.utils.rng import RandomSource, rand_int
from src.poke_arena.utils.units import parse_measurement


def rarity_factor(spawn_chance: float | None) -> float:
    # A spawn chance of 0 is treated like a missing one
    if not spawn_chance:
        return RARITY_FACTOR_COMMON
    if spawn_chance < RARITY_VERY_RARE_THRESHOLD:
        return RARITY_FACTOR_VERY_RARE
    if spawn_chance < RARITY_RARE_THRESHOLD:
        return RARITY_FACTOR_RARE
    return RARITY_FACTOR_COMMON


def power_multiplier(multipliers: list[float] | None) -> float:
    if not multipliers:
        return DEFAULT_POWER_MULTIPLIER
    return max(multipliers)


def create_battler(creature: Creature, rng: RandomSource | None = None, **overrides: Any) -> Battler:
    """Build a Battler from a catalog record.

    With a random source, defense, speed and attack are rolled in that order (one draw each).
    Without one, fixed stats are used (defense 10, speed 50, attack 25).
    Keyword overrides replace any derived field, e.g. ``create_battler(c, hp=1, speed=60)``.
    """
    if rng is not None:
        defense = rand_int(rng, DEFENSE_MIN, DEFENSE_MAX)
        speed = rand_int(rng, SPEED_MIN, SPEED_MAX)
        attack = rand_int(rng, ATTACK_MIN, ATTACK_MAX)
    else:
        defense = DEFAULT_DEFENSE
        speed = DEFAULT_SPEED
        attack = DEFAULT_ATTACK

    fields = creature.model_dump()
    fields.update(
        hp=BASE_HP,
        maxHp=BASE_HP,
        defense=defense,
        critChance=BASE_CRIT_CHANCE,
        missChance=BASE_MISS_CHANCE,
        speed=speed,
        attack=attack,
        weightKg=parse_measurement(creature.weight, WEIGHT_UNIT),
        heightM=parse_measurement(creature.height, HEIGHT_UNIT),
        rarityFactor=rarity_factor(creature.spawn_chance),
        powerMultiplier=power_multiplier(creature.multipliers),
    )
    fields.update(overrides)
    return Battler.model_validate(fields)


def initialize(creatures: Iterable[Creature], rng: RandomSource) -> list[Battler]:
    """Turn a roster of catalog records into battlers, rolling stats from rng"""
    return [create_battler(creature, rng) for creature in creatures]
