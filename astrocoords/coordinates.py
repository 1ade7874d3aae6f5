"""
Representations of positions in the geographical, ecliptical and equatorial
coordinate systems
"""

from __future__ import annotations

__all__ = ['EclipticalCoordinate', 'EquatorialCoordinate', 'GeographicalCoordinate']

from typing import Tuple

from astrocoords._base import BoundedAngularPair
from astrocoords._const import OBLIQUITY_B1950, OBLIQUITY_J2000
from astrocoords._types import NUMERIC_TYPE
from astrocoords.calc import ecliptical_to_equatorial, equatorial_to_ecliptical


class GeographicalCoordinate(BoundedAngularPair):
    """
    The location of an observer on Earth. Longitude is bounded to [-180, 180] and
    latitude to [-90, 90] degrees; each is wrapped independently when out of range.
    """

    def __init__(self, longitude: NUMERIC_TYPE, latitude: NUMERIC_TYPE):
        super().__init__(longitude, latitude, (-180., 180.), (-90., 90.))

    @property
    def longitude(self) -> float:
        """The geographical longitude, in degrees"""
        return self.value1

    @longitude.setter
    def longitude(self, longitude: NUMERIC_TYPE):
        self.value1 = longitude  # type: ignore

    @property
    def latitude(self) -> float:
        """The geographical latitude, in degrees"""
        return self.value2

    @latitude.setter
    def latitude(self, latitude: NUMERIC_TYPE):
        self.value2 = latitude  # type: ignore

    def print_longitude(self, precision: int = 2) -> str:
        return self.format_angle(self.longitude, precision)

    def print_latitude(self, precision: int = 2) -> str:
        return self.format_angle(self.latitude, precision)

    def to_sexagesimal(self) -> Tuple[str, str]:
        return self.print_longitude(), self.print_latitude()


class EclipticalCoordinate(BoundedAngularPair):
    """
    A position relative to the plane of Earth's orbit. Longitude is bounded to
    [0, 360] and latitude to [-90, 90] degrees.

    Both ends of the longitude interval are legal, so 0 and 360 are distinct stored
    values describing the same direction.
    """

    def __init__(self, longitude: NUMERIC_TYPE, latitude: NUMERIC_TYPE):
        super().__init__(longitude, latitude, (0., 360.), (-90., 90.))

    @property
    def longitude(self) -> float:
        """The ecliptical longitude, in degrees"""
        return self.value1

    @longitude.setter
    def longitude(self, longitude: NUMERIC_TYPE):
        self.value1 = longitude  # type: ignore

    @property
    def latitude(self) -> float:
        """The ecliptical latitude, in degrees"""
        return self.value2

    @latitude.setter
    def latitude(self, latitude: NUMERIC_TYPE):
        self.value2 = latitude  # type: ignore

    def print_longitude(self, precision: int = 2) -> str:
        return self.format_angle(self.longitude, precision)

    def print_latitude(self, precision: int = 2) -> str:
        return self.format_angle(self.latitude, precision)

    def to_sexagesimal(self) -> Tuple[str, str]:
        return self.print_longitude(), self.print_latitude()

    def convert_to_equatorial(self, nutation_obliquity: float) -> EquatorialCoordinate:
        """
        Converts to equatorial coordinates for a given obliquity of the ecliptic.

        Args:
            nutation_obliquity:
                The obliquity of the ecliptic in degrees. Pass the true obliquity
                (corrected for nutation) for apparent positions, or a mean
                obliquity such as astrocoords.calc.mean_obliquity(jd).

        Returns:
            A new EquatorialCoordinate
        """
        ra, dec = ecliptical_to_equatorial(self.longitude, self.latitude, nutation_obliquity)
        return EquatorialCoordinate(float(ra), float(dec))

    def convert_to_equatorial_j2000(self) -> EquatorialCoordinate:
        """Converts to equatorial coordinates in the J2000.0 equinox"""
        return self.convert_to_equatorial(OBLIQUITY_J2000)

    def convert_to_equatorial_b1950(self) -> EquatorialCoordinate:
        """Converts to equatorial coordinates in the B1950.0 equinox"""
        return self.convert_to_equatorial(OBLIQUITY_B1950)


class EquatorialCoordinate(BoundedAngularPair):
    """
    A position relative to the celestial equator. Right ascension is expressed in
    hours within [0, 24), declination in degrees within [-90, 90].
    """

    def __init__(self, right_ascension: NUMERIC_TYPE, declination: NUMERIC_TYPE):
        super().__init__(
            right_ascension, declination, (0., 24.), (-90., 90.),
            upper_inclusive1=False
        )

    @property
    def right_ascension(self) -> float:
        """The right ascension, in hours"""
        return self.value1

    @right_ascension.setter
    def right_ascension(self, right_ascension: NUMERIC_TYPE):
        self.value1 = right_ascension  # type: ignore

    @property
    def declination(self) -> float:
        """The declination, in degrees"""
        return self.value2

    @declination.setter
    def declination(self, declination: NUMERIC_TYPE):
        self.value2 = declination  # type: ignore

    def print_right_ascension(self, precision: int = 2) -> str:
        return self.format_hours(self.right_ascension, precision)

    def print_declination(self, precision: int = 2) -> str:
        return self.format_angle(self.declination, precision)

    def to_sexagesimal(self) -> Tuple[str, str]:
        return self.print_right_ascension(), self.print_declination()

    def convert_to_ecliptical(self, nutation_obliquity: float) -> EclipticalCoordinate:
        """
        Converts to ecliptical coordinates for a given obliquity of the ecliptic;
        the inverse of EclipticalCoordinate.convert_to_equatorial.

        Args:
            nutation_obliquity:
                The obliquity of the ecliptic, in degrees

        Returns:
            A new EclipticalCoordinate
        """
        lon, lat = equatorial_to_ecliptical(
            self.right_ascension, self.declination, nutation_obliquity
        )
        return EclipticalCoordinate(float(lon), float(lat))

    def convert_to_ecliptical_j2000(self) -> EclipticalCoordinate:
        """Converts to ecliptical coordinates in the J2000.0 equinox"""
        return self.convert_to_ecliptical(OBLIQUITY_J2000)

    def convert_to_ecliptical_b1950(self) -> EclipticalCoordinate:
        """Converts to ecliptical coordinates in the B1950.0 equinox"""
        return self.convert_to_ecliptical(OBLIQUITY_B1950)
