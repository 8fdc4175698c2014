"""Geocentric (spherical Earth) coordinates.

Converts between geocentric coordinates ``[longitude, latitude, altitude]``
and Earth-fixed Cartesian coordinates ``[x, y, z]``.  The Earth is a sphere
of radius ``WGS84_a``, so the altitude is the distance from the centre minus
that radius.  See :mod:`astroframes.coordinates.geodetic` for the ellipsoid.

References:
    1. O. Montenbruck and E. Gill, *Satellite Orbits: Models, Methods
       and Applications*, Springer, 2012, Sec. 5.3.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from astroframes.config import get_dtype
from astroframes.constants import WGS84_a
from astroframes.utils import from_radians, to_radians


def geocentric_to_ecef(
    x_geoc: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Earth-fixed position of a geocentric point.

    Args:
        x_geoc: Geocentric coordinates ``[lon, lat, alt]``.  Longitude and
            latitude in *rad* (or *deg* if ``use_degrees=True``), altitude in
            *m* above the sphere of radius ``WGS84_a``.
        use_degrees: If ``True``, interpret longitude and latitude as degrees.

    Returns:
        Position ``[x, y, z]`` in *m*.

    Examples:
        ```python
        import jax.numpy as jnp
        from astroframes.coordinates import geocentric_to_ecef
        r = geocentric_to_ecef(jnp.array([0.0, 0.0, 0.0]))  # [WGS84_a, 0, 0]
        ```
    """
    x_geoc = jnp.asarray(x_geoc, dtype=get_dtype())
    lon, lat = to_radians(x_geoc[:2], use_degrees)

    r = WGS84_a + x_geoc[2]
    return jnp.array([
        r * jnp.cos(lat) * jnp.cos(lon),
        r * jnp.cos(lat) * jnp.sin(lon),
        r * jnp.sin(lat),
    ])


def ecef_to_geocentric(
    x_ecef: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Geocentric coordinates ``[lon, lat, alt]`` of an Earth-fixed position.

    Args:
        x_ecef: Position ``[x, y, z]`` in *m*.
        use_degrees: If ``True``, return longitude and latitude in degrees.

    Returns:
        Geocentric coordinates, altitude in *m* above the sphere.
    """
    x_ecef = jnp.asarray(x_ecef, dtype=get_dtype())
    x, y, z = x_ecef[0], x_ecef[1], x_ecef[2]

    rho = jnp.sqrt(x * x + y * y)
    angles = from_radians(jnp.array([jnp.arctan2(y, x), jnp.arctan2(z, rho)]), use_degrees)
    alt = jnp.sqrt(rho * rho + z * z) - WGS84_a

    return jnp.concatenate([angles, alt[None]])
