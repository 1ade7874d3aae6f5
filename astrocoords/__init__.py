from astrocoords._version import __version__  # noqa: F401
from astrocoords.utils.logging import LOGGER
from astrocoords._base import BoundedAngularPair
from astrocoords._const import OBLIQUITY_B1950, OBLIQUITY_J2000
from astrocoords.coordinates import (
    EclipticalCoordinate, EquatorialCoordinate, GeographicalCoordinate
)
from astrocoords.calc import (
    ecliptical_to_equatorial, equatorial_to_ecliptical, mean_obliquity
)

__all__ = [
    'BoundedAngularPair',
    'EclipticalCoordinate',
    'EquatorialCoordinate',
    'GeographicalCoordinate',
    'OBLIQUITY_B1950',
    'OBLIQUITY_J2000',
    'ecliptical_to_equatorial',
    'equatorial_to_ecliptical',
    'mean_obliquity',
    'LOGGER',
]
