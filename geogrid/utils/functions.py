"""Module for miscellaneous multi-use functions"""

__all__ = ['round_half_away']

import math


def round_half_away(value: float, precision: int) -> float:
    """
    Rounds a number to the given number of decimal places, where a value exactly
    between the two nearest candidates is rounded away from zero (so 0.5 -> 1 and
    -0.5 -> -1). Python's builtin round() uses banker's rounding instead, which
    disagrees with published UTM test vectors.

    Non-finite values (inf, nan) are returned unchanged.

    Args:
        value:
            The float value to be rounded
        precision:
            The number of decimal places to keep

    Returns:
        float
    """
    if not math.isfinite(value):
        return value

    divisor = 10.0 ** precision
    return math.copysign(math.floor(abs(value) * divisor + 0.5), value) / divisor
