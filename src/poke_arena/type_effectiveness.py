from typing import Dict, Iterable

from src.poke_arena.enums import Type
from src.poke_arena.constants import (
    TYPE_MUL_NO_EFFECT,
    TYPE_MUL_NOT_EFFECTIVE,
    TYPE_MUL_NORMAL,
    TYPE_MUL_SUPER_EFFECTIVE,
    WEAKNESS_BONUS,
    MSG_NO_EFFECT,
    MSG_NOT_VERY_EFFECTIVE,
    MSG_SUPER_EFFECTIVE,
)

# Simplified type chart: attacking type -> defending type -> multiplier.
# Pairs missing from the chart are neutral (x1.0).
TYPE_EFFECTIVENESS_CHART: Dict[Type, Dict[Type, float]] = {
    Type.FIRE: {
        Type.GRASS: TYPE_MUL_SUPER_EFFECTIVE,
        Type.WATER: TYPE_MUL_NOT_EFFECTIVE,
        Type.FIRE: TYPE_MUL_NOT_EFFECTIVE,
    },
    Type.WATER: {
        Type.FIRE: TYPE_MUL_SUPER_EFFECTIVE,
        Type.GRASS: TYPE_MUL_NOT_EFFECTIVE,
        Type.WATER: TYPE_MUL_NOT_EFFECTIVE,
    },
    Type.GRASS: {
        Type.WATER: TYPE_MUL_SUPER_EFFECTIVE,
        Type.FIRE: TYPE_MUL_NOT_EFFECTIVE,
        Type.GRASS: TYPE_MUL_NOT_EFFECTIVE,
    },
    Type.ELECTRIC: {
        Type.WATER: TYPE_MUL_SUPER_EFFECTIVE,
        Type.GROUND: TYPE_MUL_NO_EFFECT,
    },
    Type.GROUND: {
        Type.ELECTRIC: TYPE_MUL_SUPER_EFFECTIVE,
        Type.GRASS: TYPE_MUL_NOT_EFFECTIVE,
    },
}


class TypeEffectiveness:
    """Type effectiveness lookups against TYPE_EFFECTIVENESS_CHART"""

    @staticmethod
    def get_effectiveness(attacking_type: Type, defending_type: Type) -> float:
        """Chart multiplier for a single pair, 1.0 when the pair is not charted"""
        return TYPE_EFFECTIVENESS_CHART.get(attacking_type, {}).get(defending_type, TYPE_MUL_NORMAL)

    @staticmethod
    def get_type_multiplier(attacker_types: Iterable[Type], defender_types: Iterable[Type], defender_weaknesses: Iterable[Type] | None = None) -> float:
        """
        Combined multiplier of every attacker type against every defender type

        Every charted (attacking, defending) pair multiplies in, so dual types compound:
        - Fire vs Grass/Poison: 2 (Poison is not charted for Fire)
        - Fire/Ground vs Grass: 2 * 0.5 = x1
        - Electric vs Water/Ground: 2 * 0 = x0

        Each attacker type that appears in the defender's weaknesses adds another x1.2,
        independently of the chart.
        """
        attacker_types = list(attacker_types)
        defender_types = list(defender_types)

        multiplier = TYPE_MUL_NORMAL
        for attacking_type in attacker_types:
            chart_row = TYPE_EFFECTIVENESS_CHART.get(attacking_type)
            if not chart_row:
                continue
            for defending_type in defender_types:
                effect = chart_row.get(defending_type)
                if effect is not None:
                    multiplier *= effect

        if defender_weaknesses:
            weaknesses = set(defender_weaknesses)
            for attacking_type in attacker_types:
                if attacking_type in weaknesses:
                    multiplier *= WEAKNESS_BONUS

        return multiplier

    @staticmethod
    def is_immune(multiplier: float) -> bool:
        return multiplier == TYPE_MUL_NO_EFFECT

    @staticmethod
    def is_super_effective(multiplier: float) -> bool:
        return multiplier > TYPE_MUL_NORMAL

    @staticmethod
    def is_not_very_effective(multiplier: float) -> bool:
        return TYPE_MUL_NO_EFFECT < multiplier < TYPE_MUL_NORMAL

    @staticmethod
    def get_effectiveness_description(multiplier: float) -> str:
        """Human-readable annotation for a combined multiplier ("" when neutral)"""
        if TypeEffectiveness.is_super_effective(multiplier):
            return MSG_SUPER_EFFECTIVE
        elif TypeEffectiveness.is_not_very_effective(multiplier):
            return MSG_NOT_VERY_EFFECTIVE
        elif TypeEffectiveness.is_immune(multiplier):
            return MSG_NO_EFFECT
        else:
            return ""  # Normal effectiveness - no message
