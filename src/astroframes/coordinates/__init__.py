"""Coordinate transformations.

- **Geocentric**: spherical Earth ``[lon, lat, alt]`` ↔ Earth-fixed Cartesian
- **Geodetic**: WGS84 ellipsoid ``[lon, lat, alt]`` ↔ Earth-fixed Cartesian,
  and geodetic ↔ geocentric
- **Local**: North-East-Down frame at a geodetic point
- **Keplerian**: orbital elements ``[a, e, i, Ω, ω, ν]`` ↔ inertial Cartesian
"""

from .geocentric import (
    ecef_to_geocentric,
    geocentric_to_ecef,
)
from .geodetic import (
    ecef_to_geodetic,
    geocentric_to_geodetic,
    geodetic_to_ecef,
    geodetic_to_geocentric,
)
from .keplerian import (
    kepler_to_rv,
    rv_to_kepler,
    state_eci_to_koe,
    state_koe_to_eci,
)
from .local import (
    ecef_to_ned,
    ned_to_ecef,
    rotation_ecef_to_ned,
    rotation_ned_to_ecef,
)

__all__ = [
    "geocentric_to_ecef",
    "ecef_to_geocentric",
    "geodetic_to_ecef",
    "ecef_to_geodetic",
    "geocentric_to_geodetic",
    "geodetic_to_geocentric",
    "rotation_ecef_to_ned",
    "rotation_ned_to_ecef",
    "ecef_to_ned",
    "ned_to_ecef",
    "kepler_to_rv",
    "rv_to_kepler",
    "state_koe_to_eci",
    "state_eci_to_koe",
]
