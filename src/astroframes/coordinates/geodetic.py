"""Geodetic (WGS84 ellipsoid) coordinates.

Converts between geodetic coordinates ``[longitude, latitude, altitude]``
and Earth-fixed Cartesian coordinates ``[x, y, z]``, and between geodetic
and geocentric coordinates of the same point.

The forward transformation is closed-form.  The inverse uses Bowring's
fixed-point iteration on the ``z`` offset of the ellipsoid normal, run with
``jax.lax.while_loop`` so it traces under ``jax.jit``.

All inputs and outputs use SI base units (metres, radians) unless
``use_degrees=True``.

References:
    1. NIMA Technical Report TR8350.2, *Department of Defense World Geodetic
       System 1984*.
    2. O. Montenbruck and E. Gill, *Satellite Orbits: Models, Methods
       and Applications*, Springer, 2012, Sec. 5.3.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from astroframes.config import get_dtype
from astroframes.constants import WGS84_a, WGS84_f
from astroframes.coordinates.geocentric import ecef_to_geocentric, geocentric_to_ecef
from astroframes.utils import from_radians, to_radians

# First eccentricity squared of the WGS84 ellipsoid
ECC2 = WGS84_f * (2.0 - WGS84_f)

_MAX_ITERATIONS = 20


def geodetic_to_ecef(
    x_geod: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Earth-fixed position of a geodetic point.

    Uses the WGS84 prime vertical radius of curvature
    ``N = a / sqrt(1 - e^2 sin^2(lat))``.

    Args:
        x_geod: Geodetic coordinates ``[lon, lat, alt]``.  Longitude and
            latitude in *rad* (or *deg* if ``use_degrees=True``), altitude in
            *m* above the WGS84 ellipsoid.
        use_degrees: If ``True``, interpret longitude and latitude as degrees.

    Returns:
        Position ``[x, y, z]`` in *m*.

    Examples:
        ```python
        import jax.numpy as jnp
        from astroframes.coordinates import geodetic_to_ecef
        r = geodetic_to_ecef(jnp.array([-122.17, 37.43, 30.0]), use_degrees=True)
        ```
    """
    x_geod = jnp.asarray(x_geod, dtype=get_dtype())
    lon, lat = to_radians(x_geod[:2], use_degrees)
    alt = x_geod[2]

    sin_lat = jnp.sin(lat)
    cos_lat = jnp.cos(lat)
    N = WGS84_a / jnp.sqrt(1.0 - ECC2 * sin_lat * sin_lat)

    return jnp.array([
        (N + alt) * cos_lat * jnp.cos(lon),
        (N + alt) * cos_lat * jnp.sin(lon),
        ((1.0 - ECC2) * N + alt) * sin_lat,
    ])


def ecef_to_geodetic(
    x_ecef: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Geodetic coordinates ``[lon, lat, alt]`` of an Earth-fixed position.

    Iterates ``dz = N e^2 sin(lat)`` until it changes by less than a
    thousandth of the ellipsoid radius times the machine epsilon of the
    configured dtype, or for at most 20 iterations.

    Args:
        x_ecef: Position ``[x, y, z]`` in *m*.
        use_degrees: If ``True``, return longitude and latitude in degrees.

    Returns:
        Geodetic coordinates, altitude in *m* above the WGS84 ellipsoid.
    """
    dtype = get_dtype()
    x_ecef = jnp.asarray(x_ecef, dtype=dtype)
    x, y, z = x_ecef[0], x_ecef[1], x_ecef[2]

    eps = 1.0e-3 * WGS84_a * float(jnp.finfo(dtype).eps)
    rho2 = x * x + y * y

    def cond(state):
        dz, dz_prev, i = state
        return (jnp.abs(dz - dz_prev) > eps) & (i < _MAX_ITERATIONS)

    def body(state):
        dz, _, i = state
        zdz = z + dz
        sin_lat = zdz / jnp.sqrt(rho2 + zdz * zdz)
        N = WGS84_a / jnp.sqrt(1.0 - ECC2 * sin_lat * sin_lat)
        return N * ECC2 * sin_lat, dz, i + 1

    # dz_prev starts far from dz0 to force the first pass
    dz0 = ECC2 * z
    dz, _, _ = jax.lax.while_loop(cond, body, (dz0, dz0 + 1.0e10, jnp.int32(0)))

    zdz = z + dz
    nh = jnp.sqrt(rho2 + zdz * zdz)
    sin_lat = zdz / nh
    N = WGS84_a / jnp.sqrt(1.0 - ECC2 * sin_lat * sin_lat)

    angles = from_radians(jnp.array([jnp.arctan2(y, x), jnp.arctan2(zdz, jnp.sqrt(rho2))]), use_degrees)
    return jnp.concatenate([angles, (nh - N)[None]])


def geocentric_to_geodetic(
    x_geoc: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Geodetic coordinates of a point given in geocentric coordinates.

    Longitude is the same in both systems; latitude and altitude change.

    Args:
        x_geoc: Geocentric ``[lon, lat, alt]``, altitude above the sphere of
            radius ``WGS84_a``.
        use_degrees: If ``True``, angles are in degrees on input and output.

    Returns:
        Geodetic ``[lon, lat, alt]``, altitude above the WGS84 ellipsoid.
    """
    return ecef_to_geodetic(geocentric_to_ecef(x_geoc, use_degrees), use_degrees)


def geodetic_to_geocentric(
    x_geod: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Geocentric coordinates of a point given in geodetic coordinates.

    Args:
        x_geod: Geodetic ``[lon, lat, alt]``.
        use_degrees: If ``True``, angles are in degrees on input and output.

    Returns:
        Geocentric ``[lon, lat, alt]``.

    Examples:
        ```python
        import jax.numpy as jnp
        from astroframes.coordinates import geodetic_to_geocentric
        x_geoc = geodetic_to_geocentric(jnp.array([0.0, 45.0, 0.0]), use_degrees=True)
        ```
    """
    return ecef_to_geocentric(geodetic_to_ecef(x_geod, use_degrees), use_degrees)
