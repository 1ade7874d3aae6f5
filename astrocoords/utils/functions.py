"""Module for miscellaneous multi-use functions"""

__all__ = [
    'round_half_away', 'wrap_into_interval'
]

import math

from astrocoords.utils.logging import LOGGER


def round_half_away(value: float, precision: int = 0) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded away from zero (unlike the builtin round(), which rounds to even).

    Args:
        value:
            The float value to be rounded
        precision:
            The number of decimal places to round the float value to

    """
    factor = 10 ** precision
    return math.copysign(math.floor(abs(value) * factor + 0.5) / factor, value)


def wrap_into_interval(
    value: float,
    lower: float,
    upper: float,
    upper_inclusive: bool = True
) -> float:
    """
    Brings a value into [lower, upper] (or [lower, upper) when upper_inclusive is
    False) by adding or subtracting a whole number of interval widths. This is a
    modular wrap, not a clamp: 370 in [0, 360] becomes 10.

    Values already in range are returned unchanged. A value that overshoots by
    less than one width is shifted by exactly one width.

    Args:
        value:
            The value to wrap

        lower:
            The lower (always inclusive) bound

        upper:
            The upper bound; must be greater than lower

        upper_inclusive: (bool)
            (Default True) Whether a value equal to the upper bound is legal

    Returns:
        float
    """
    if lower <= value < upper or (upper_inclusive and value == upper):
        return value

    if not math.isfinite(value):
        raise ValueError(f'Cannot bring non-finite value {value} into [{lower}, {upper}]')

    width = upper - lower
    if value < lower:
        wrapped = value + math.ceil((lower - value) / width) * width
    elif upper_inclusive:
        wrapped = value - math.ceil((value - upper) / width) * width
    else:
        wrapped = value - math.floor((value - lower) / width) * width

    # Floating point residue from very large inputs can land a hair outside the bounds
    wrapped = min(max(wrapped, lower), upper)
    if not upper_inclusive and wrapped == upper:
        wrapped = lower

    LOGGER.debug('Wrapped %s into [%s, %s%s: %s', value, lower, upper,
                 ']' if upper_inclusive else ')', wrapped)
    return wrapped
