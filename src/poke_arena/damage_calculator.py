"""
Damage calculation for a single attack

The random source is consumed in a fixed order so tests can script outcomes:

1. miss check       (always drawn)
2. base damage roll (only if the attack hits)
3. damage variance
4. critical hit check

A miss therefore takes exactly one draw and a hit exactly four.
"""

import logging
import math

from src.poke_arena.constants import (
    ATTACK_SCALE,
    BASE_DAMAGE_BONUS,
    BASE_DAMAGE_BONUS_RANGE,
    CRITICAL_MULTIPLIER,
    DAMAGE_VARIANCE_MIN,
    DAMAGE_VARIANCE_RANGE,
    DEFENSE_SCALE,
    HEAVY_MISS_PENALTY,
    HEAVY_WEIGHT_KG,
    HEIGHT_ADVANTAGE_FACTOR,
    HEIGHT_DISADVANTAGE_FACTOR,
    MAX_WEIGHT_FACTOR,
    MIN_DAMAGE,
    MIN_WEIGHT_DIVISOR,
    TYPE_MUL_NORMAL,
)
from src.poke_arena.schema.battle_pokemon import Battler
from src.poke_arena.schema.battle_state import DamageResult
from src.poke_arena.type_effectiveness import TypeEffectiveness
from src.poke_arena.utils.rng import RandomSource, default_source

logger = logging.getLogger(__name__)


def miss_probability(attacker: Battler) -> float:
    """Heavier Pokemon are slightly clumsier"""
    penalty = HEAVY_MISS_PENALTY if attacker.weightKg > HEAVY_WEIGHT_KG else 0.0
    return attacker.missChance + penalty


def weight_factor(attacker: Battler, defender: Battler) -> float:
    """Attacker/defender weight ratio, capped at 1.4. An unparsed (NaN) weight makes the factor neutral."""
    if math.isnan(attacker.weightKg) or math.isnan(defender.weightKg):
        return 1.0
    return min(MAX_WEIGHT_FACTOR, attacker.weightKg / max(MIN_WEIGHT_DIVISOR, defender.weightKg))


def height_factor(attacker: Battler, defender: Battler) -> float:
    return HEIGHT_ADVANTAGE_FACTOR if attacker.heightM >= defender.heightM else HEIGHT_DISADVANTAGE_FACTOR


class DamageCalculator:
    def __init__(self, rng: RandomSource | None = None):
        self.rng: RandomSource = rng if rng is not None else default_source()

    def calculate_damage(self, attacker: Battler, defender: Battler) -> DamageResult:
        """
        Calculate the damage attacker deals to defender

        Args:
            attacker: Battler performing the attack
            defender: Battler receiving it

        Returns:
            DamageResult with the floored damage, crit flag, miss flag and the
            type effectiveness multiplier that was applied
        """
        # 1. Miss check
        if self.rng.random() < miss_probability(attacker):
            return DamageResult(damage=0, isCritical=False, missed=True, effectiveness=TYPE_MUL_NORMAL)

        # 2. Base damage with a 0-4 random bonus
        base_damage = attacker.attack * ATTACK_SCALE + (BASE_DAMAGE_BONUS + math.floor(self.rng.random() * BASE_DAMAGE_BONUS_RANGE))

        # 3. Modifiers (no draws)
        effectiveness = TypeEffectiveness.get_type_multiplier(attacker.type, defender.type, defender.weaknesses)
        damage = base_damage * weight_factor(attacker, defender) * height_factor(attacker, defender) * attacker.rarityFactor * attacker.powerMultiplier * effectiveness

        # 4. Defense, floored at the minimum
        damage -= defender.defense * DEFENSE_SCALE
        if damage < MIN_DAMAGE:
            damage = MIN_DAMAGE

        # 5. Variance +/-10%
        damage *= DAMAGE_VARIANCE_MIN + self.rng.random() * DAMAGE_VARIANCE_RANGE

        # 6. Critical hit
        is_critical = self.rng.random() < attacker.critChance
        if is_critical:
            damage *= CRITICAL_MULTIPLIER

        logger.debug("%s -> %s: %.2f raw damage (x%.2f effectiveness, crit=%s)", attacker.name, defender.name, damage, effectiveness, is_critical)

        return DamageResult(
            damage=math.floor(damage),
            isCritical=is_critical,
            missed=False,
            effectiveness=effectiveness,
        )
