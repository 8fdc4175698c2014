"""IAU-76/FK5 reduction between ITRF, PEF, TOD, MOD and GCRF.

The chain is

``ITRF --(polar motion)--> PEF --(GAST)--> TOD --(nutation)--> MOD --(precession)--> GCRF``

Each provider takes the rotation kind (``RotationMatrix`` or
``Quaternion``) as its first argument, followed by the Julian Dates it
needs (UT1 for Earth rotation, TT for precession and nutation) and the
optional IERS corrections ``d_deps`` / ``d_dpsi`` [rad].  Without those
corrections GCRF coincides with the FK5 mean equator and equinox of
J2000.0.

All functions are JAX-traceable.

References:

    1. D. Vallado, *Fundamentals of Astrodynamics and Applications (4th Ed.)*, 2013, Sec. 3.7.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from astroframes.config import get_dtype
from astroframes.constants import AS2RAD, DAYS_PER_CENTURY, DEG2RAD
from astroframes.frames._fk5_nutation_data import NUTATION_COEFFS_1980
from astroframes.rotations import (
    Rotation,
    RotationKind,
    angle_to_dcm,
    as_kind,
    compose,
    invert,
    smallangle_to_dcm,
)
from astroframes.time import JulianDateLike, days_since_j2000


def _centuries(jd: JulianDateLike) -> Array:
    whole, fraction = days_since_j2000(jd)
    return (whole + fraction) / DAYS_PER_CENTURY


def _poly(t: Array, coeffs: tuple[float, ...]) -> Array:
    acc = coeffs[-1]
    for c in reversed(coeffs[:-1]):
        acc = c + t * acc
    return acc


# ---------------------------------------------------------------------------
# Sidereal time, nutation and precession
# ---------------------------------------------------------------------------


def gmst(jd_ut1: JulianDateLike) -> Array:
    """Greenwich Mean Sidereal Time, IAU-82 model.

    The whole turns per day are dropped before the day count is multiplied,
    so the angle keeps its precision in ``float32``.

    Args:
        jd_ut1: Julian Date [UT1], plain or split.

    Returns:
        GMST in radians, in ``[0, 2*pi)``.

    References:

        1. D. Vallado, *Fundamentals of Astrodynamics and Applications (4th Ed.)*, 2013, eq. 3-47.
    """
    whole, fraction = days_since_j2000(jd_ut1)
    t_ut1 = (whole + fraction) / DAYS_PER_CENTURY

    # 360.98564736629 deg/day with the 360 deg per whole day removed
    degrees = (
        280.46061837
        + 360.0 * fraction
        + 0.98564736629 * (whole + fraction)
        + t_ut1 * t_ut1 * (0.000387933 - t_ut1 / 38710000.0)
    )
    return jnp.mod(degrees, 360.0) * DEG2RAD


def nutation_fk5(jd_tt: JulianDateLike) -> tuple[Array, Array, Array]:
    """Evaluate the 106-term IAU 1980 theory of nutation.

    Args:
        jd_tt: Julian Date [TT].

    Returns:
        Tuple of (mean obliquity, nutation in obliquity, nutation in
        longitude), all in radians.

    Examples:
        ```python
        from astroframes.frames.fk5 import nutation_fk5
        meps, deps, dpsi = nutation_fk5(2453101.828154745)
        ```
    """
    dtype = get_dtype()
    t = _centuries(jd_tt)
    r = 360.0

    mean_obliquity = jnp.mod(_poly(t, (23.439291, -0.0130042, -1.64e-7, 5.04e-7)), 360.0) * DEG2RAD

    # Delaunay arguments of the Moon and Sun (with the 1980 errata)
    m_moon = jnp.mod(_poly(t, (134.96298139, 1325 * r + 198.8673981, 0.0086972, 1.78e-5)), 360.0)
    m_sun = jnp.mod(_poly(t, (357.52772333, 99 * r + 359.0503400, -0.0001603, -3.3e-6)), 360.0)
    u_moon = jnp.mod(_poly(t, (93.27191028, 1342 * r + 82.0175381, -0.0036825, 3.1e-6)), 360.0)
    d_sun = jnp.mod(_poly(t, (297.85036306, 1236 * r + 307.1114800, -0.0019142, 5.3e-6)), 360.0)
    omega_moon = jnp.mod(_poly(t, (125.04452222, -(5 * r + 134.1362608), 0.0020708, 2.2e-6)), 360.0)
    delaunay = jnp.array([m_moon, m_sun, u_moon, d_sun, omega_moon]) * DEG2RAD

    coeffs = jnp.array(NUTATION_COEFFS_1980, dtype=dtype)
    args = coeffs[:, :5] @ delaunay

    # Series coefficients are in units of 0.0001 arcsec
    dpsi = jnp.sum((coeffs[:, 5] + coeffs[:, 6] * t) * jnp.sin(args)) * 1.0e-4 * AS2RAD
    deps = jnp.sum((coeffs[:, 7] + coeffs[:, 8] * t) * jnp.cos(args)) * 1.0e-4 * AS2RAD

    return mean_obliquity, deps, dpsi


def precession_fk5(jd_tt: JulianDateLike) -> tuple[Array, Array, Array]:
    """IAU-76 precession angles.

    Args:
        jd_tt: Julian Date [TT].

    Returns:
        Tuple of (zeta, theta, z) in radians.
    """
    t = _centuries(jd_tt)
    zeta = _poly(t, (0.0, 2306.2181, 0.30188, 0.017998)) * AS2RAD
    theta = _poly(t, (0.0, 2004.3109, -0.42665, -0.041833)) * AS2RAD
    z = _poly(t, (0.0, 2306.2181, 1.09468, 0.018203)) * AS2RAD
    return zeta, theta, z


def _equation_of_equinoxes(jd_tt: JulianDateLike, mean_obliquity: Array, dpsi: Array) -> Array:
    # Mean longitude of the Moon's ascending node, for the 1982 kinematic terms
    t = _centuries(jd_tt)
    omega_moon = jnp.mod(_poly(t, (125.04452222, -(5 * 360.0 + 134.1362608), 0.0020708, 2.2e-6)), 360.0)
    omega_moon = omega_moon * DEG2RAD

    return (
        dpsi * jnp.cos(mean_obliquity)
        + (0.002640 * jnp.sin(omega_moon) + 0.000063 * jnp.sin(2.0 * omega_moon)) * AS2RAD
    )


def equation_of_equinoxes_fk5(jd_tt: JulianDateLike, d_dpsi: ArrayLike = 0.0) -> Array:
    """Equation of the equinoxes, IAU-1982 form.

    Args:
        jd_tt: Julian Date [TT].
        d_dpsi: Correction to the nutation in longitude [rad].

    Returns:
        GAST - GMST in radians.
    """
    mean_obliquity, _, dpsi = nutation_fk5(jd_tt)
    return _equation_of_equinoxes(jd_tt, mean_obliquity, dpsi + d_dpsi)


# ---------------------------------------------------------------------------
# ITRF <-> PEF
# ---------------------------------------------------------------------------


def rotation_itrf_to_pef_fk5(kind: RotationKind, x_p: ArrayLike, y_p: ArrayLike) -> Rotation:
    """Rotation from ITRF to PEF (polar motion).

    Args:
        kind: ``RotationMatrix`` or ``Quaternion``.
        x_p: Polar motion x-component [rad].
        y_p: Polar motion y-component [rad].

    Returns:
        The rotation as an instance of *kind*.
    """
    return as_kind(kind, smallangle_to_dcm(y_p, x_p, 0.0))


def rotation_pef_to_itrf_fk5(kind: RotationKind, x_p: ArrayLike, y_p: ArrayLike) -> Rotation:
    """Rotation from PEF to ITRF (polar motion)."""
    return as_kind(kind, smallangle_to_dcm(-y_p, -x_p, 0.0))


# ---------------------------------------------------------------------------
# PEF <-> TOD
# ---------------------------------------------------------------------------


def rotation_pef_to_tod_fk5(
    kind: RotationKind,
    jd_ut1: JulianDateLike,
    jd_tt: JulianDateLike,
    d_dpsi: ArrayLike = 0.0,
) -> Rotation:
    """Rotation from PEF to TOD (Greenwich apparent sidereal time).

    Args:
        kind: ``RotationMatrix`` or ``Quaternion``.
        jd_ut1: Julian Date [UT1].
        jd_tt: Julian Date [TT].
        d_dpsi: Correction to the nutation in longitude [rad].

    Returns:
        The rotation as an instance of *kind*.
    """
    mean_obliquity, _, dpsi = nutation_fk5(jd_tt)
    gast = gmst(jd_ut1) + _equation_of_equinoxes(jd_tt, mean_obliquity, dpsi + d_dpsi)
    return as_kind(kind, angle_to_dcm(-gast, 0.0, 0.0, "ZYX"))


def rotation_tod_to_pef_fk5(
    kind: RotationKind,
    jd_ut1: JulianDateLike,
    jd_tt: JulianDateLike,
    d_dpsi: ArrayLike = 0.0,
) -> Rotation:
    """Rotation from TOD to PEF."""
    return invert(rotation_pef_to_tod_fk5(kind, jd_ut1, jd_tt, d_dpsi))


# ---------------------------------------------------------------------------
# TOD <-> MOD
# ---------------------------------------------------------------------------


def _tod_to_mod_dcm(mean_obliquity: Array, deps: Array, dpsi: Array) -> Array:
    return angle_to_dcm(mean_obliquity + deps, dpsi, -mean_obliquity, "XZX")


def rotation_tod_to_mod_fk5(
    kind: RotationKind,
    jd_tt: JulianDateLike,
    d_deps: ArrayLike = 0.0,
    d_dpsi: ArrayLike = 0.0,
) -> Rotation:
    """Rotation from TOD to MOD (IAU 1980 nutation).

    Args:
        kind: ``RotationMatrix`` or ``Quaternion``.
        jd_tt: Julian Date [TT].
        d_deps: Correction to the nutation in obliquity [rad].
        d_dpsi: Correction to the nutation in longitude [rad].

    Returns:
        The rotation as an instance of *kind*.
    """
    mean_obliquity, deps, dpsi = nutation_fk5(jd_tt)
    return as_kind(kind, _tod_to_mod_dcm(mean_obliquity, deps + d_deps, dpsi + d_dpsi))


def rotation_mod_to_tod_fk5(
    kind: RotationKind,
    jd_tt: JulianDateLike,
    d_deps: ArrayLike = 0.0,
    d_dpsi: ArrayLike = 0.0,
) -> Rotation:
    """Rotation from MOD to TOD."""
    return invert(rotation_tod_to_mod_fk5(kind, jd_tt, d_deps, d_dpsi))


# ---------------------------------------------------------------------------
# MOD <-> GCRF
# ---------------------------------------------------------------------------


def rotation_mod_to_gcrf_fk5(kind: RotationKind, jd_tt: JulianDateLike) -> Rotation:
    """Rotation from MOD to GCRF (IAU-76 precession).

    Args:
        kind: ``RotationMatrix`` or ``Quaternion``.
        jd_tt: Julian Date [TT].

    Returns:
        The rotation as an instance of *kind*.
    """
    zeta, theta, z = precession_fk5(jd_tt)
    return as_kind(kind, angle_to_dcm(z, -theta, zeta, "ZYZ"))


def rotation_gcrf_to_mod_fk5(kind: RotationKind, jd_tt: JulianDateLike) -> Rotation:
    """Rotation from GCRF to MOD."""
    return invert(rotation_mod_to_gcrf_fk5(kind, jd_tt))


# ---------------------------------------------------------------------------
# PEF <-> MOD (one nutation evaluation)
# ---------------------------------------------------------------------------


def rotation_pef_to_mod_fk5(
    kind: RotationKind,
    jd_ut1: JulianDateLike,
    jd_tt: JulianDateLike,
    d_deps: ArrayLike = 0.0,
    d_dpsi: ArrayLike = 0.0,
) -> Rotation:
    """Rotation from PEF to MOD.

    Equivalent to composing :func:`rotation_pef_to_tod_fk5` and
    :func:`rotation_tod_to_mod_fk5`, but evaluates the nutation series once.

    Args:
        kind: ``RotationMatrix`` or ``Quaternion``.
        jd_ut1: Julian Date [UT1].
        jd_tt: Julian Date [TT].
        d_deps: Correction to the nutation in obliquity [rad].
        d_dpsi: Correction to the nutation in longitude [rad].

    Returns:
        The rotation as an instance of *kind*.
    """
    mean_obliquity, deps, dpsi = nutation_fk5(jd_tt)
    deps = deps + d_deps
    dpsi = dpsi + d_dpsi

    gast = gmst(jd_ut1) + _equation_of_equinoxes(jd_tt, mean_obliquity, dpsi)
    tod_from_pef = angle_to_dcm(-gast, 0.0, 0.0, "ZYX")
    mod_from_tod = _tod_to_mod_dcm(mean_obliquity, deps, dpsi)

    return as_kind(kind, mod_from_tod @ tod_from_pef)


def rotation_mod_to_pef_fk5(
    kind: RotationKind,
    jd_ut1: JulianDateLike,
    jd_tt: JulianDateLike,
    d_deps: ArrayLike = 0.0,
    d_dpsi: ArrayLike = 0.0,
) -> Rotation:
    """Rotation from MOD to PEF."""
    return invert(rotation_pef_to_mod_fk5(kind, jd_ut1, jd_tt, d_deps, d_dpsi))


# ---------------------------------------------------------------------------
# ITRF <-> GCRF
# ---------------------------------------------------------------------------


def rotation_itrf_to_gcrf_fk5(
    kind: RotationKind,
    jd_ut1: JulianDateLike,
    jd_tt: JulianDateLike,
    x_p: ArrayLike,
    y_p: ArrayLike,
    d_deps: ArrayLike = 0.0,
    d_dpsi: ArrayLike = 0.0,
) -> Rotation:
    """Rotation from ITRF to GCRF through the full FK5 chain.

    Args:
        kind: ``RotationMatrix`` or ``Quaternion``.
        jd_ut1: Julian Date [UT1].
        jd_tt: Julian Date [TT].
        x_p: Polar motion x-component [rad].
        y_p: Polar motion y-component [rad].
        d_deps: Correction to the nutation in obliquity [rad].
        d_dpsi: Correction to the nutation in longitude [rad].

    Returns:
        The rotation as an instance of *kind*.

    Examples:
        ```python
        from astroframes.rotations import RotationMatrix
        from astroframes.frames.fk5 import rotation_itrf_to_gcrf_fk5
        r = rotation_itrf_to_gcrf_fk5(RotationMatrix, 2453101.8274, 2453101.8282, 0.0, 0.0)
        ```
    """
    return compose(
        rotation_itrf_to_pef_fk5(kind, x_p, y_p),
        rotation_pef_to_mod_fk5(kind, jd_ut1, jd_tt, d_deps, d_dpsi),
        rotation_mod_to_gcrf_fk5(kind, jd_tt),
    )


def rotation_gcrf_to_itrf_fk5(
    kind: RotationKind,
    jd_ut1: JulianDateLike,
    jd_tt: JulianDateLike,
    x_p: ArrayLike,
    y_p: ArrayLike,
    d_deps: ArrayLike = 0.0,
    d_dpsi: ArrayLike = 0.0,
) -> Rotation:
    """Rotation from GCRF to ITRF."""
    return invert(rotation_itrf_to_gcrf_fk5(kind, jd_ut1, jd_tt, x_p, y_p, d_deps, d_dpsi))
