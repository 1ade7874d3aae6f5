import numpy as np
import pytest

from astrocoords import OBLIQUITY_J2000
from astrocoords.calc import *


def test_ecliptical_to_equatorial():
    ra, dec = ecliptical_to_equatorial(0., 0., OBLIQUITY_J2000)
    assert ra == 0.
    assert dec == 0.

    # Pollux, Meeus example 13.a
    ra, dec = ecliptical_to_equatorial(113.215630, 6.684170, OBLIQUITY_J2000)
    assert ra * 15 == pytest.approx(116.328942, abs=1e-4)
    assert dec == pytest.approx(28.026183, abs=1e-4)


def test_ecliptical_to_equatorial_arrays():
    ra, dec = ecliptical_to_equatorial(
        [0., 90., 180., 270.], [0., 0., 0., 0.], OBLIQUITY_J2000
    )
    assert isinstance(ra, np.ndarray)
    assert list(ra) == pytest.approx([0., 6., 12., -6.], abs=1e-9)
    assert list(dec) == pytest.approx(
        [0., OBLIQUITY_J2000, 0., -OBLIQUITY_J2000], abs=1e-9
    )


def test_equatorial_to_ecliptical():
    lon, lat = equatorial_to_ecliptical(0., 0., OBLIQUITY_J2000)
    assert lon == 0.
    assert lat == 0.

    # Pollux, Meeus example 13.a
    lon, lat = equatorial_to_ecliptical(116.328942 / 15, 28.026183, OBLIQUITY_J2000)
    assert lon == pytest.approx(113.215630, abs=1e-4)
    assert lat == pytest.approx(6.684170, abs=1e-4)

    # The north celestial pole sits at ecliptic latitude 90 - obliquity
    _, lat = equatorial_to_ecliptical(18., 90., OBLIQUITY_J2000)
    assert lat == pytest.approx(90. - OBLIQUITY_J2000)


def test_conversions_invert_each_other():
    lons = np.array([0.5, 45., 139.686111, 200., 330.])
    lats = np.array([-60., -4.875278, 4.875278, 30., 80.])

    ra, dec = ecliptical_to_equatorial(lons, lats, OBLIQUITY_J2000)
    lon, lat = equatorial_to_ecliptical(ra, dec, OBLIQUITY_J2000)

    assert list(lon % 360) == pytest.approx(list(lons), abs=1e-9)
    assert list(lat) == pytest.approx(list(lats), abs=1e-9)


def test_mean_obliquity():
    assert mean_obliquity(2451545.0) == pytest.approx(OBLIQUITY_J2000, abs=1e-7)

    # Meeus example 22.a, 1987 April 10 0h TD: 23° 26' 27.407"
    assert mean_obliquity(2446895.5) == pytest.approx(
        23 + 26 / 60 + 27.407 / 3600, abs=1e-6
    )

    result = mean_obliquity([2451545.0, 2446895.5])
    assert result.shape == (2,)
    assert result[0] == pytest.approx(OBLIQUITY_J2000, abs=1e-7)


def test_conversions_at_the_poles():
    # Points exactly on a pole can round a hair past the domain of arcsin
    eps = np.arange(0.01, 45., 0.01)
    quarter = np.full_like(eps, 90.)

    ra, dec = ecliptical_to_equatorial(quarter, 90. - eps, eps)
    assert np.all(np.isfinite(ra))
    assert np.allclose(dec, 90., atol=1e-5)

    ra, dec = ecliptical_to_equatorial(quarter + 180., -(90. - eps), eps)
    assert np.all(np.isfinite(ra))
    assert np.allclose(dec, -90., atol=1e-5)

    lon, lat = equatorial_to_ecliptical(np.full_like(eps, 18.), 90. - eps, eps)
    assert np.all(np.isfinite(lon))
    assert np.allclose(lat, 90., atol=1e-5)

    lon, lat = equatorial_to_ecliptical(np.full_like(eps, 6.), -(90. - eps), eps)
    assert np.all(np.isfinite(lon))
    assert np.allclose(lat, -90., atol=1e-5)
