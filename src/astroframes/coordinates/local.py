"""North-East-Down (NED) local frame.

The NED frame sits at a geodetic point: North and East are tangent to the
WGS84 ellipsoid and Down is along the inward ellipsoid normal.  Vectors are
rotated between NED and the Earth-fixed frame; with ``translate=True``
positions are also shifted by the Earth-fixed position of the NED origin.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from astroframes.config import get_dtype
from astroframes.coordinates.geodetic import geodetic_to_ecef
from astroframes.utils import to_radians


def rotation_ecef_to_ned(
    x_geod: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Rotation matrix from the Earth-fixed frame to NED at a geodetic point.

    Only longitude and latitude enter the rotation; altitude is ignored.

    Args:
        x_geod: Geodetic coordinates ``[lon, lat, alt]`` of the NED origin.
            Longitude and latitude in *rad* (or *deg* if ``use_degrees=True``).
        use_degrees: If ``True``, interpret longitude and latitude as degrees.

    Returns:
        3x3 rotation matrix (ECEF -> NED).

    References:

        1. ESA Navipedia, *Transformations between ECEF and ENU coordinates*.
    """
    x_geod = jnp.asarray(x_geod, dtype=get_dtype())
    lon, lat = to_radians(x_geod[:2], use_degrees)

    sin_lon = jnp.sin(lon)
    cos_lon = jnp.cos(lon)
    sin_lat = jnp.sin(lat)
    cos_lat = jnp.cos(lat)

    # Rows are the N, E, D axes expressed in ECEF
    return jnp.array([
        [-sin_lat * cos_lon, -sin_lat * sin_lon, cos_lat],     # North
        [-sin_lon, cos_lon, 0.0],                              # East
        [-cos_lat * cos_lon, -cos_lat * sin_lon, -sin_lat],    # Down
    ])


def rotation_ned_to_ecef(
    x_geod: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Rotation matrix from NED to the Earth-fixed frame, the transpose of :func:`rotation_ecef_to_ned`."""
    return rotation_ecef_to_ned(x_geod, use_degrees).T


def ecef_to_ned(
    r_ecef: ArrayLike,
    x_geod: ArrayLike,
    use_degrees: bool = False,
    translate: bool = False,
) -> Array:
    """Express an Earth-fixed vector in the NED frame at *x_geod*.

    Args:
        r_ecef: Vector ``[x, y, z]`` in the Earth-fixed frame.
        x_geod: Geodetic ``[lon, lat, alt]`` of the NED origin.
        use_degrees: If ``True``, interpret longitude and latitude as degrees.
        translate: If ``True``, treat *r_ecef* as a position and return it
            relative to the NED origin.  Otherwise only rotate it.

    Returns:
        Vector ``[north, east, down]``.

    Examples:
        ```python
        import jax.numpy as jnp
        from astroframes.coordinates import ecef_to_ned
        station = jnp.array([-122.17, 37.43, 30.0])
        r_ned = ecef_to_ned(r_sat, station, use_degrees=True, translate=True)
        ```
    """
    r_ecef = jnp.asarray(r_ecef, dtype=get_dtype())
    if translate:
        r_ecef = r_ecef - geodetic_to_ecef(x_geod, use_degrees)
    return rotation_ecef_to_ned(x_geod, use_degrees) @ r_ecef


def ned_to_ecef(
    r_ned: ArrayLike,
    x_geod: ArrayLike,
    use_degrees: bool = False,
    translate: bool = False,
) -> Array:
    """Express a NED vector at *x_geod* in the Earth-fixed frame.

    Args:
        r_ned: Vector ``[north, east, down]``.
        x_geod: Geodetic ``[lon, lat, alt]`` of the NED origin.
        use_degrees: If ``True``, interpret longitude and latitude as degrees.
        translate: If ``True``, treat *r_ned* as a position relative to the
            NED origin and return the absolute Earth-fixed position.

    Returns:
        Vector ``[x, y, z]`` in the Earth-fixed frame.
    """
    r_ecef = rotation_ned_to_ecef(x_geod, use_degrees) @ jnp.asarray(r_ned, dtype=get_dtype())
    if translate:
        r_ecef = r_ecef + geodetic_to_ecef(x_geod, use_degrees)
    return r_ecef
