"""
Base class declarations for astrocoords
"""

from __future__ import annotations

__all__ = ['BoundedAngularPair']

from abc import ABC, abstractmethod
import math
from typing import Tuple

from typing_extensions import Self

from astrocoords._types import NUMERIC_TYPE
from astrocoords.conversion import (
    DEGREE_UNITS, HOUR_UNITS, format_sexagesimal, parse_sexagesimal
)
from astrocoords.utils.functions import wrap_into_interval


def _validate_bounds(bounds: Tuple[float, float]) -> Tuple[float, float]:
    """Ensures a (min, max) pair describes a usable interval"""
    lower, upper = float(bounds[0]), float(bounds[1])
    if not (math.isfinite(lower) and math.isfinite(upper)):
        raise ValueError(f'Bounds must be finite; received ({lower}, {upper})')

    if upper <= lower:
        raise ValueError(
            f'Upper bound {upper} must be greater than lower bound {lower}'
        )

    return lower, upper


class BoundedAngularPair(ABC):
    """
    A pair of angular values, each held within its own interval. Values outside of
    their interval are wrapped back into it by whole multiples of the interval width
    (e.g. 370 in [0, 360] is stored as 10), never clamped.

    The bounds are fixed at construction; the values may be re-assigned through their
    properties, which apply the same wrapping. Subclasses give the two values their
    meaning (longitude/latitude, right ascension/declination).

    Args:
        value1:
            The first value

        value2:
            The second value

        bounds1:
            The (min, max) interval of the first value

        bounds2:
            The (min, max) interval of the second value

        upper_inclusive1: (bool)
            (Default True) Whether the first value may equal its upper bound

        upper_inclusive2: (bool)
            (Default True) Whether the second value may equal its upper bound
    """

    def __init__(
        self,
        value1: NUMERIC_TYPE,
        value2: NUMERIC_TYPE,
        bounds1: Tuple[float, float],
        bounds2: Tuple[float, float],
        upper_inclusive1: bool = True,
        upper_inclusive2: bool = True,
    ):
        # Bounds are recorded before any value is normalized against them
        self._bounds1 = _validate_bounds(bounds1)
        self._bounds2 = _validate_bounds(bounds2)
        self._upper_inclusive1 = upper_inclusive1
        self._upper_inclusive2 = upper_inclusive2

        self.value1 = value1  # type: ignore
        self.value2 = value2  # type: ignore

    def __eq__(self, other):
        if type(self) is not type(other):
            return False

        return self.value1 == other.value1 and self.value2 == other.value2

    def __hash__(self):
        return hash((self.__class__.__name__, self.value1, self.value2))

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.value1}, {self.value2})>'

    @property
    def bounds1(self) -> Tuple[float, float]:
        """The (min, max) interval of the first value"""
        return self._bounds1

    @property
    def bounds2(self) -> Tuple[float, float]:
        """The (min, max) interval of the second value"""
        return self._bounds2

    @property
    def value1(self) -> float:
        return self._value1

    @value1.setter
    def value1(self, value: NUMERIC_TYPE):
        self._value1 = wrap_into_interval(
            float(value), *self._bounds1, upper_inclusive=self._upper_inclusive1
        )

    @property
    def value2(self) -> float:
        return self._value2

    @value2.setter
    def value2(self, value: NUMERIC_TYPE):
        self._value2 = wrap_into_interval(
            float(value), *self._bounds2, upper_inclusive=self._upper_inclusive2
        )

    @classmethod
    def from_sexagesimal(cls, value1: str, value2: str) -> Self:
        """
        Creates an instance from a pair of sexagesimal strings, e.g.
        ("10° 30' 0.00\"", "-5° 15' 0.00\""). Any format accepted by
        astrocoords.conversion.parse_sexagesimal is permitted.

        Args:
            value1:
                The first value, as a sexagesimal string

            value2:
                The second value, as a sexagesimal string

        Returns:
            An instance of the calling class
        """
        return cls(parse_sexagesimal(value1), parse_sexagesimal(value2))  # type: ignore

    @staticmethod
    def format_angle(value: float, precision: int = 2) -> str:
        """
        Renders a value in fractional degrees as degrees, minutes, seconds,
        e.g. -10.5 -> -10° 30' 0.00"

        The sign is applied once to the whole value and the seconds are rounded half
        away from zero to `precision` decimals.

        Args:
            value:
                The angle, in degrees

            precision: (int)
                (Default 2) The number of decimals to render on the seconds

        Returns:
            str
        """
        return format_sexagesimal(value, DEGREE_UNITS, precision)

    @staticmethod
    def format_hours(value: float, precision: int = 2) -> str:
        """
        Renders a value in fractional hours as hours, minutes, seconds,
        e.g. 7.5 -> 7h 30m 0.00s

        Args:
            value:
                The angle, in hours

            precision: (int)
                (Default 2) The number of decimals to render on the seconds

        Returns:
            str
        """
        return format_sexagesimal(value, HOUR_UNITS, precision)

    @abstractmethod
    def to_sexagesimal(self) -> Tuple[str, str]:
        """Returns both values rendered in their human-readable sexagesimal form"""

    def to_float(self) -> Tuple[float, float]:
        """Returns the pair as a tuple of floats (value1, value2)"""
        return self.value1, self.value2

    def to_str(self) -> Tuple[str, str]:
        """Returns the pair as a tuple of strings (value1, value2)"""
        return str(self.value1), str(self.value2)
