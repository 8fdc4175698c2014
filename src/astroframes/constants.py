"""
Angle conversion factors, time-scale offsets and Earth parameters used by the frame transformations.
"""

from jax.numpy import pi as PI

# ---------------------------------------------------------------------------
# Angles
# ---------------------------------------------------------------------------

DEG2RAD = PI / 180.0
"""Degrees to radians. Units: *rad/deg*"""

RAD2DEG = 180.0 / PI
"""Radians to degrees. Units: *deg/rad*"""

AS2RAD = DEG2RAD / 3600.0
"""Arcseconds to radians. Units: *rad/as*"""

RAD2AS = RAD2DEG * 3600.0
"""Radians to arcseconds. Units: *as/rad*"""

MAS2RAD = AS2RAD / 1000.0
"""Milliarcseconds to radians. EOP pole offsets are published in mas. Units: *rad/mas*"""

# ---------------------------------------------------------------------------
# Time
# ---------------------------------------------------------------------------

JD_MJD_OFFSET = 2400000.5
"""MJD = JD - JD_MJD_OFFSET. Units: *days*"""

JD_J2000 = 2451545.0
"""Julian Date of J2000.0, 2000-01-01 12:00:00 TT. Units: *days*"""

MJD2000 = JD_J2000 - JD_MJD_OFFSET
"""Modified Julian Date of J2000.0. Units: *days*"""

DAYS_PER_CENTURY = 36525.0
"""Length of a Julian century, the time unit of the precession and nutation series. Units: *days*"""

SECONDS_PER_DAY = 86400.0
"""Units: *s*"""

# ---------------------------------------------------------------------------
# Earth
# ---------------------------------------------------------------------------

R_EARTH = 6.378136300e6
"""Equatorial radius of the Earth, GGM05s value. Units: *m*"""

GM_EARTH = 3.986004415e14
"""Gravitational parameter of the Earth, GGM05s value. Units: *m^3/s^2*

References:

    1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and
       Applications*, 2012.
"""

OMEGA_EARTH = 7.292115146706979e-5
"""Nominal rotation rate of the Earth, scaled by ``1 - LOD/86400`` when
transporting velocities. Units: *rad/s*

References:

    1. D. Vallado, *Fundamentals of Astrodynamics and Applications (4th Ed.)*, p. 222, 2010.
"""

WGS84_a = 6378137.0
"""Semi-major axis of the WGS84 ellipsoid. Units: *m*

References:

    1. NIMA Technical Report TR8350.2
"""

WGS84_f = 1.0 / 298.257223563
"""Flattening of the WGS84 ellipsoid. Units: *dimensionless*

References:

    1. NIMA Technical Report TR8350.2
"""
