""" Spherical trigonometry for converting between celestial coordinate systems """

__all__ = [
    'ecliptical_to_equatorial', 'equatorial_to_ecliptical', 'mean_obliquity'
]

from typing import Tuple

import numpy as np
from numpy.typing import ArrayLike

from astrocoords._const import (
    DAYS_PER_JULIAN_CENTURY, DEGREES_PER_HOUR, JD_J2000, OBLIQUITY_COEFFICIENTS
)


def ecliptical_to_equatorial(
    longitude: ArrayLike,
    latitude: ArrayLike,
    obliquity: ArrayLike
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Transform ecliptical longitude/latitude to right ascension/declination, given the
    obliquity of the ecliptic at the epoch of interest (Meeus, Astronomical
    Algorithms, eq. 13.3 and 13.4).

    Accepts scalars or arrays of matching shape, so a whole catalogue can be converted
    at once. The returned right ascension is in hours in the range (-12, 12]; callers
    wanting [0, 24) should wrap it, as EquatorialCoordinate does.

    Args:
        longitude:
            Ecliptical longitude(s), in degrees

        latitude:
            Ecliptical latitude(s), in degrees

        obliquity:
            Obliquity of the ecliptic in degrees; use the true obliquity (mean
            obliquity plus nutation in obliquity) for apparent positions

    Returns:
        (right ascension in hours, declination in degrees)
    """
    lon, lat, eps = np.deg2rad(longitude), np.deg2rad(latitude), np.deg2rad(obliquity)

    # atan2 resolves the quadrant over the full circle of longitudes
    ra = np.rad2deg(
        np.arctan2(
            np.sin(lon) * np.cos(eps) - np.tan(lat) * np.sin(eps),
            np.cos(lon)
        )
    )
    dec = np.rad2deg(
        # Rounding can push points on the pole a hair past +-1
        np.arcsin(np.clip(
            np.sin(lat) * np.cos(eps) + np.cos(lat) * np.sin(eps) * np.sin(lon),
            -1.0, 1.0
        ))
    )
    return ra / DEGREES_PER_HOUR, dec


def equatorial_to_ecliptical(
    right_ascension: ArrayLike,
    declination: ArrayLike,
    obliquity: ArrayLike
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Transform right ascension/declination to ecliptical longitude/latitude; the inverse
    of ecliptical_to_equatorial (Meeus, Astronomical Algorithms, eq. 13.1 and 13.2).

    Args:
        right_ascension:
            Right ascension(s), in hours

        declination:
            Declination(s), in degrees

        obliquity:
            Obliquity of the ecliptic, in degrees

    Returns:
        (longitude in degrees within (-180, 180], latitude in degrees)
    """
    ra = np.deg2rad(np.asarray(right_ascension, dtype=float) * DEGREES_PER_HOUR)
    dec, eps = np.deg2rad(declination), np.deg2rad(obliquity)

    lon = np.rad2deg(
        np.arctan2(
            np.sin(ra) * np.cos(eps) + np.tan(dec) * np.sin(eps),
            np.cos(ra)
        )
    )
    lat = np.rad2deg(
        np.arcsin(np.clip(
            np.sin(dec) * np.cos(eps) - np.cos(dec) * np.sin(eps) * np.sin(ra),
            -1.0, 1.0
        ))
    )
    return lon, lat


def mean_obliquity(jd: ArrayLike) -> np.ndarray:
    """
    The mean obliquity of the ecliptic (i.e. not corrected for nutation) for a Julian
    Ephemeris Day, per the IAU 1980 cubic (Meeus, Astronomical Algorithms, eq. 22.2).
    Accurate to within a second of arc over 2000 years either side of J2000.

    Args:
        jd:
            Julian Ephemeris Day(s)

    Returns:
        The mean obliquity, in degrees
    """
    t = (np.asarray(jd, dtype=float) - JD_J2000) / DAYS_PER_JULIAN_CENTURY
    # polyval expects the highest order coefficient first
    return np.polyval(OBLIQUITY_COEFFICIENTS[::-1], t) / 3600
