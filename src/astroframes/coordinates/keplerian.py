"""Keplerian orbital element ↔ inertial Cartesian state conversions.

Converts between osculating Keplerian orbital elements
``[a, e, i, RAAN, omega, nu]`` and inertial Cartesian state vectors
``[x, y, z, vx, vy, vz]``.

| Index | Element                          | Units         |
|-------|----------------------------------|---------------|
| 0     | *a*: semi-major axis             | m             |
| 1     | *e*: eccentricity                | dimensionless |
| 2     | *i*: inclination                 | rad           |
| 3     | *Ω*: right ascension (RAAN)      | rad           |
| 4     | *ω*: argument of perigee         | rad           |
| 5     | *ν*: true anomaly                | rad           |

Only elliptical orbits are supported.  The eccentricity checks convert
their inputs to Python floats, so these functions run eagerly and are not
meant to be traced by ``jax.jit``.

References:
    1. O. Montenbruck and E. Gill, *Satellite Orbits: Models, Methods
       and Applications*, Springer, 2012, Sec. 2.2.
    2. H. D. Curtis, *Orbital Mechanics for Engineering Students*, 3rd ed.,
       2014, Algorithm 4.2.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from astroframes.config import get_dtype
from astroframes.constants import GM_EARTH
from astroframes.errors import DimensionError, InvalidEccentricity
from astroframes.utils import from_radians, to_radians

_ECC_MAX = 1.0 - 1e-6
_ECC_MIN = 1e-6
# sin(i) below which an orbit counts as equatorial
_NODE_MIN = 1e-6


def _plane_angle(u: Array, w: Array, w_mag: Array, pole: Array) -> Array:
    """Angle from unit vector *u* to *w* in ``[0, 2*pi)``, positive about *pole*."""
    theta = jnp.arccos(jnp.clip(jnp.dot(u, w) / w_mag, -1.0, 1.0))
    return jnp.where(jnp.dot(pole, jnp.cross(u, w)) < 0.0, 2.0 * jnp.pi - theta, theta)


def kepler_to_rv(
    a: ArrayLike,
    e: ArrayLike,
    i: ArrayLike,
    raan: ArrayLike,
    argp: ArrayLike,
    nu: ArrayLike,
    gm: float = GM_EARTH,
) -> tuple[Array, Array]:
    """Position and velocity from Keplerian elements.

    Builds the state from the perifocal P and Q unit vectors
    (Montenbruck & Gill Eq. 2.43) and the conic equation in true anomaly.

    Args:
        a: Semi-major axis. *m*
        e: Eccentricity, ``0 <= e < 1``.
        i: Inclination. *rad*
        raan: Right ascension of the ascending node. *rad*
        argp: Argument of perigee. *rad*
        nu: True anomaly. *rad*
        gm: Gravitational parameter, in units consistent with *a*.
            *m^3/s^2*

    Returns:
        Tuple ``(r, v)`` of shape ``(3,)`` arrays.

    Raises:
        InvalidEccentricity: If *e* is outside ``[0, 1)``.
    """
    if not 0.0 <= float(e) < 1.0:
        raise InvalidEccentricity(float(e))

    dtype = get_dtype()
    a = jnp.asarray(a, dtype=dtype)
    e = jnp.asarray(e, dtype=dtype)

    cos_o = jnp.cos(argp)
    sin_o = jnp.sin(argp)
    cos_R = jnp.cos(raan)
    sin_R = jnp.sin(raan)
    cos_i = jnp.cos(i)
    sin_i = jnp.sin(i)

    P = jnp.array(
        [
            cos_o * cos_R - sin_o * cos_i * sin_R,
            cos_o * sin_R + sin_o * cos_i * cos_R,
            sin_o * sin_i,
        ],
        dtype=dtype,
    )

    Q = jnp.array(
        [
            -sin_o * cos_R - cos_o * cos_i * sin_R,
            -sin_o * sin_R + cos_o * cos_i * cos_R,
            cos_o * sin_i,
        ],
        dtype=dtype,
    )

    # Semi-latus rectum and orbit radius
    p = a * (1.0 - e * e)
    r_mag = p / (1.0 + e * jnp.cos(nu))

    r = r_mag * (jnp.cos(nu) * P + jnp.sin(nu) * Q)
    v = jnp.sqrt(gm / p) * (-jnp.sin(nu) * P + (e + jnp.cos(nu)) * Q)

    return r, v


def rv_to_kepler(
    r: ArrayLike,
    v: ArrayLike,
    gm: float = GM_EARTH,
) -> tuple[Array, Array, Array, Array, Array, Array]:
    """Keplerian elements from inertial position and velocity.

    Uses the angular momentum, node and eccentricity vectors.  Each angle is
    measured in the direction of motion, so quadrants follow from the sign
    of the angular momentum along the normal of the two vectors involved.

    Degenerate orbits get conventional values:

    - equatorial (``sin i < 1e-6``): RAAN is zero and the argument of
      perigee is measured from the x-axis.
    - circular (``e < 1e-6``): the argument of perigee is zero and the true
      anomaly is measured from the node, or from the x-axis when the orbit
      is also equatorial.

    Args:
        r: Position, shape ``(3,)``. *m*
        v: Velocity, shape ``(3,)``. *m/s*
        gm: Gravitational parameter, in units consistent with *r* and *v*.
            *m^3/s^2*

    Returns:
        Tuple ``(a, e, i, raan, argp, nu)``, angles in radians, RAAN,
        argument of perigee and true anomaly in ``[0, 2*pi)``.

    Raises:
        DimensionError: If *r* or *v* does not have 3 components.
        InvalidEccentricity: If the computed eccentricity is above
            ``1 - 1e-6``.

    Examples:
        ```python
        from astroframes.coordinates import rv_to_kepler
        a, e, i, raan, argp, nu = rv_to_kepler(r, v)
        ```
    """
    dtype = get_dtype()
    r = jnp.asarray(r, dtype=dtype)
    v = jnp.asarray(v, dtype=dtype)
    if r.shape != (3,):
        raise DimensionError("r", r.shape)
    if v.shape != (3,):
        raise DimensionError("v", v.shape)

    r_mag = jnp.linalg.norm(r)
    v2 = jnp.dot(v, v)

    x_axis = jnp.array([1.0, 0.0, 0.0], dtype=dtype)
    z_axis = jnp.array([0.0, 0.0, 1.0], dtype=dtype)

    # Angular momentum and node vectors
    h = jnp.cross(r, v)
    h_mag = jnp.linalg.norm(h)
    n = jnp.cross(z_axis, h)
    n_mag = jnp.linalg.norm(n)

    # Eccentricity vector
    e_vec = ((v2 - gm / r_mag) * r - jnp.dot(r, v) * v) / gm
    ecc = jnp.linalg.norm(e_vec)

    if float(ecc) > _ECC_MAX:
        raise InvalidEccentricity(float(ecc), "The state does not describe an elliptical orbit.")

    # Semi-major axis from the specific orbital energy
    energy = v2 / 2.0 - gm / r_mag
    a = -gm / (2.0 * energy)

    i = jnp.arccos(jnp.clip(h[2] / h_mag, -1.0, 1.0))

    # An equatorial orbit has no node and a circular one no perigee.  The
    # undefined angle is zero and the next one is measured from the x-axis
    # (equatorial) or from the node (circular) instead.
    equatorial = n_mag <= _NODE_MIN * h_mag
    circular = ecc < _ECC_MIN
    n_safe = jnp.where(equatorial, 1.0, n_mag)
    ecc_safe = jnp.where(circular, 1.0, ecc)

    node = jnp.where(equatorial, x_axis, n / n_safe)

    raan = jnp.where(equatorial, 0.0, _plane_angle(x_axis, n, n_safe, z_axis))
    argp = jnp.where(circular, 0.0, _plane_angle(node, e_vec, ecc_safe, h))
    nu = jnp.where(
        circular,
        _plane_angle(node, r, r_mag, h),
        _plane_angle(e_vec / ecc_safe, r, r_mag, h),
    )

    return a, ecc, i, raan, argp, nu


def state_koe_to_eci(
    x_oe: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Convert Keplerian orbital elements to an inertial Cartesian state vector.

    Args:
        x_oe: Orbital elements ``[a, e, i, RAAN, omega, nu]``.
            Semi-major axis in *m*, angles in *rad* (or *deg* if
            ``use_degrees=True``).
        use_degrees: If ``True``, interpret angular elements as degrees.

    Returns:
        State ``[x, y, z, vx, vy, vz]`` in *m* and *m/s*.

    Examples:
        ```python
        import jax.numpy as jnp
        from astroframes.constants import R_EARTH
        from astroframes.coordinates import state_koe_to_eci
        oe = jnp.array([R_EARTH + 500e3, 0.001, 97.0, 15.0, 30.0, 45.0])
        state = state_koe_to_eci(oe, use_degrees=True)
        ```
    """
    x_oe = jnp.asarray(x_oe, dtype=get_dtype())

    angles = to_radians(x_oe[2:6], use_degrees)
    r, v = kepler_to_rv(x_oe[0], x_oe[1], *angles)

    return jnp.concatenate([r, v])


def state_eci_to_koe(
    x_cart: ArrayLike,
    use_degrees: bool = False,
) -> Array:
    """Convert an inertial Cartesian state vector to Keplerian orbital elements.

    Args:
        x_cart: State ``[x, y, z, vx, vy, vz]`` in *m* and *m/s*.
        use_degrees: If ``True``, return angular elements in degrees.

    Returns:
        Orbital elements ``[a, e, i, RAAN, omega, nu]``.
            Semi-major axis in *m*, angles in *rad* (or *deg*).
    """
    x_cart = jnp.asarray(x_cart, dtype=get_dtype())

    a, e, i, raan, argp, nu = rv_to_kepler(x_cart[:3], x_cart[3:6])
    angles = from_radians(jnp.array([i, raan, argp, nu]), use_degrees)

    return jnp.concatenate([jnp.array([a, e]), angles])
