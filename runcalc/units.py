"""
Shared constants and small numeric helpers used across the calculators.

Formulas divide through divide() and raise to a power through power(), so a
zero divisor or a negative base gives inf/nan instead of an exception.
"""

import math
from typing import Union

import numpy as np


KM_PER_MILE = 1.60934
SECONDS_PER_HOUR = 3600
SECONDS_PER_MINUTE = 60


def divide(numerator: float, denominator: float) -> float:
    """
    Divide as float64: x / 0 gives +/-inf and 0 / 0 gives nan.

    Args:
        numerator: Dividend
        denominator: Divisor, may be zero

    Returns:
        Quotient as a Python float
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(numerator) / np.float64(denominator))


def power(base: float, exponent: float) -> float:
    """Raise to a power as float64; a negative base with a fractional exponent gives nan."""
    with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
        return float(np.power(np.float64(base), np.float64(exponent)))


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, with .5 always rounding up.

    Python's round() uses banker's rounding (round(2.5) == 2); the calculator
    rounds heart rates, paces and hydration volumes the conventional way.

    Args:
        value: Number to round

    Returns:
        Nearest integer, ties toward +infinity
    """
    return int(math.floor(value + 0.5))


def format_number(value: float) -> str:
    """Print a number the way the calculator shows it: 15.0 -> '15', 7.5 -> '7.5'."""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value)


def is_female(gender: Union[str, int], allow_flag: bool = True) -> bool:
    """
    Return True for 'female' (any case).

    With allow_flag, the binary flag 0 also means female (1 means male).
    """
    if isinstance(gender, str):
        return gender.lower() == 'female'
    return allow_flag and gender == 0
