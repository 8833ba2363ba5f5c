import math

from src.poke_arena.errors import InvalidMeasurementError


def parse_measurement(value: str, unit: str) -> float:
    """Parse a catalog measurement such as "6.9 kg" into a float.

    The first occurrence of ``unit`` is removed and surrounding whitespace stripped.
    Returns NaN when what remains is not a number; callers decide whether that matters.
    """
    try:
        return float(value.replace(unit, "", 1).strip())
    except ValueError:
        return math.nan


def require_measurement(field: str, value: str, unit: str) -> float:
    """Like parse_measurement, but raises InvalidMeasurementError instead of returning NaN"""
    parsed = parse_measurement(value, unit)
    if math.isnan(parsed):
        raise InvalidMeasurementError(field, value, unit)
    return parsed
