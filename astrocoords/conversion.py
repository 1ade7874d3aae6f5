"""
Module for angular unit conversions and sexagesimal (degrees/hours, minutes, seconds)
rendering and parsing
"""
__all__ = [
    'DEGREE_UNITS', 'HOUR_UNITS', 'degrees_to_hours', 'format_sexagesimal', 'hours_to_degrees',
    'parse_sexagesimal', 'to_sexagesimal'
]

import math
import re
from typing import Tuple

from astrocoords._const import DEGREES_PER_HOUR
from astrocoords.utils.functions import round_half_away
from astrocoords.utils.logging import warn_once

DEGREE_UNITS = ('°', "'", '"')
HOUR_UNITS = ('h', 'm', 's')

# Separators accepted between sexagesimal components, e.g. 10°30'0" / 7h45m18s / 10:30:00
_RE_SEXAGESIMAL_SEP = re.compile(r"[°dhms:'\"′″\s]+", flags=re.IGNORECASE)
_RE_NUMBER = re.compile(r'^\d+(?:\.\d*)?$|^\.\d+$')


def degrees_to_hours(degrees: float) -> float:
    """Converts an angle in degrees to hours (15 degrees per hour)"""
    return degrees / DEGREES_PER_HOUR


def hours_to_degrees(hours: float) -> float:
    """Converts an angle in hours to degrees (15 degrees per hour)"""
    return hours * DEGREES_PER_HOUR


def to_sexagesimal(value: float, precision: int = 2) -> Tuple[int, int, int, float]:
    """
    Splits a fractional value (degrees or hours) into its sexagesimal components.

    The sign is extracted once and applied to the whole value; the remaining
    components are non-negative magnitudes. Seconds are rounded half away from zero
    to `precision` decimals, carrying into minutes and whole units where needed, so
    that seconds never round up to 60.

    Args:
        value:
            The value, in degrees or hours

        precision: (int)
            (Default 2) The number of decimals to keep on the seconds

    Returns:
        (sign, whole, minutes, seconds) where sign is 1 or -1
    """
    if not math.isfinite(value):
        raise ValueError(f'Cannot render non-finite value {value} as sexagesimal')

    factor = 10 ** precision
    # Work in integer units of 10^-precision seconds so the carry is exact
    ticks = int(round_half_away(abs(value) * 3600 * factor))
    whole, ticks = divmod(ticks, 3600 * factor)
    minutes, ticks = divmod(ticks, 60 * factor)

    # A value that rounds to zero carries no sign
    sign = -1 if value < 0 and (whole or minutes or ticks) else 1
    return sign, whole, minutes, ticks / factor


def format_sexagesimal(
    value: float,
    units: Tuple[str, str, str] = DEGREE_UNITS,
    precision: int = 2
) -> str:
    """
    Renders a fractional value as a sexagesimal string, e.g. 10.5 -> 10° 30' 0.00"

    Args:
        value:
            The value, in degrees or hours

        units:
            (Default ('°', "'", '"')) The suffixes for the whole, minutes and seconds
            components. Use ('h', 'm', 's') for hour angles.

        precision: (int)
            (Default 2) The number of decimals to render on the seconds

    Returns:
        str
    """
    sign, whole, minutes, seconds = to_sexagesimal(value, precision)
    return (
        f'{"-" if sign < 0 else ""}{whole}{units[0]} '
        f'{minutes}{units[1]} {seconds:.{precision}f}{units[2]}'
    )


def parse_sexagesimal(text: str) -> float:
    """
    Parses a sexagesimal string back into a fractional value. Accepts up to three
    components separated by unit symbols, colons or whitespace; all of the following
    are understood:

        10° 30' 0.00"
        7h 45m 18.95s
        -10:30:00
        -10 30
        10.5

    Minutes and seconds must be non-negative; a leading minus sign negates the whole
    value. The result is in the same unit as the first component.

    Args:
        text:
            The string to parse

    Returns:
        float
    """
    stripped = text.strip()
    negative = stripped.startswith('-')
    if stripped[:1] in ('-', '+'):
        stripped = stripped[1:].strip()

    parts = [x for x in _RE_SEXAGESIMAL_SEP.split(stripped) if x]
    if not 1 <= len(parts) <= 3 or not all(_RE_NUMBER.match(x) for x in parts):
        raise ValueError(f'Could not parse sexagesimal value: {text!r}')

    components = [float(x) for x in parts]
    if any(x >= 60 for x in components[1:]):
        warn_once(
            'Sexagesimal minutes or seconds of 60 or more were parsed as-is. '
            '(this warning will not repeat)'
        )

    value = sum(x / 60 ** i for i, x in enumerate(components))
    return -value if negative else value
