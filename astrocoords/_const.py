"""
Constants declarations for astrocoords
"""

# Mean obliquity of the ecliptic at the standard equinoxes (degrees)
OBLIQUITY_J2000 = 23.4392911
OBLIQUITY_B1950 = 23.4457889

# Right ascension is expressed in hours; 24h == 360 degrees
DEGREES_PER_HOUR = 15.0

# Julian Ephemeris Day of the J2000.0 epoch (2000 January 1.5 TD)
JD_J2000 = 2451545.0
DAYS_PER_JULIAN_CENTURY = 36525.0

# Mean obliquity polynomial (IAU 1980), arcseconds
OBLIQUITY_COEFFICIENTS = (
    23 * 3600 + 26 * 60 + 21.448,
    -46.8150,
    -0.00059,
    0.001813,
)
