"""Module for miscellaneous multi-use functions"""

__all__ = ['round_half_up', 'safe_divide', 'sign']

import math


def round_half_up(value: float, precision) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)


def safe_divide(numerator: float, denominator: float) -> float:
    """
    Divides two floats using IEEE semantics, i.e. division by zero yields
    +/-inf (or nan for 0/0) instead of raising ZeroDivisionError.

    Args:
        numerator:
            The dividend

        denominator:
            The divisor

    Returns:
        float
    """
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator) * math.copysign(1.0, denominator)


def sign(value: float) -> float:
    """Returns 0.0 for exactly zero, otherwise +/-1.0 matching the sign of the value"""
    if value == 0:
        return 0.0

    return 1.0 if value > 0 else -1.0
