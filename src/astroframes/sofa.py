"""IAU SOFA routines for Earth orientation modeling.

The geometric routines (obliquity, precession angles, CIP/CIO matrix,
Earth Rotation Angle, polar motion) are written with ``jax.numpy`` and
work under ``jax.jit``.  The large IAU 2006/2000A nutation, CIP and
equation-of-origins series are evaluated by ``pyerfa``, the Python
binding of ERFA (the BSD-licensed fork of SOFA).  Those wrappers convert
their inputs to concrete floats and therefore cannot be traced.

Uses routines and computations derived from software provided by SOFA
under license to the user. Does not itself constitute software provided
by and/or endorsed by SOFA.
"""

from __future__ import annotations

import erfa
import jax.numpy as jnp
import numpy as np
from jax import Array
from jax.typing import ArrayLike

from astroframes.config import get_dtype
from astroframes.rotations import Rx, Ry, Rz

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

DJ00: float = 2451545.0
"""Julian Date of J2000.0."""

DJC: float = 36525.0
"""Days per Julian century."""

DAS2R: float = 4.848136811095359935899141e-6
"""Arcseconds to radians."""

D2PI: float = 6.283185307179586476925287
"""2*pi."""

EPS0_IAU2006: float = 84381.406
"""Obliquity of the ecliptic at J2000.0, IAU 2006 [arcsec]."""


def _centuries(date1: ArrayLike, date2: ArrayLike) -> Array:
    return ((date1 - DJ00) + date2) / DJC


def _poly(t: Array, coeffs: tuple[float, ...]) -> Array:
    """Evaluate ``sum(c_k * t**k)`` in Horner form."""
    acc = coeffs[-1]
    for c in reversed(coeffs[:-1]):
        acc = c + t * acc
    return acc


# ---------------------------------------------------------------------------
# Mean obliquity
# ---------------------------------------------------------------------------


def obl06(date1: ArrayLike, date2: ArrayLike = 0.0) -> Array:
    """Mean obliquity of the ecliptic, IAU 2006 precession.

    Args:
        date1: TT Julian Date, or its larger part when split in two.
        date2: Remaining part of the split TT Julian Date. Default: ``0.0``

    Returns:
        Obliquity of the ecliptic in radians.
    """
    t = _centuries(date1, date2)
    eps0 = _poly(t, (EPS0_IAU2006, -46.836769, -0.0001831, 0.00200340, -0.000000576, -0.0000000434))
    return eps0 * DAS2R


# ---------------------------------------------------------------------------
# Precession angles (Capitaine et al. 2003, IAU 2006)
# ---------------------------------------------------------------------------

_PSI_A = (0.0, 5038.481507, -1.0790069, -0.00114045, 1.32851e-4, -9.51e-8)
_OMEGA_A = (EPS0_IAU2006, -0.025754, 0.0512623, -0.00772503, -4.67e-7, 3.337e-7)
_CHI_A = (0.0, 10.556403, -2.3814292, -0.00121197, 1.70663e-4, -5.60e-8)


def p06_precession(date1: ArrayLike, date2: ArrayLike = 0.0) -> tuple[Array, Array, Array]:
    """Canonical IAU 2006 precession angles.

    Args:
        date1: TT Julian Date, or its larger part when split in two.
        date2: Remaining part of the split TT Julian Date. Default: ``0.0``

    Returns:
        Tuple of (psi_a, omega_a, chi_a) in radians: luni-solar
        precession, inclination of the mean equator on the J2000.0
        ecliptic, and planetary precession.

    References:

        1. N. Capitaine, P. Wallace and J. Chapront, *Expressions for IAU 2000
           precession quantities*, A&A 412, 2003, Table 1.
    """
    t = _centuries(date1, date2)
    psi_a = _poly(t, _PSI_A) * DAS2R
    omega_a = _poly(t, _OMEGA_A) * DAS2R
    chi_a = _poly(t, _CHI_A) * DAS2R
    return psi_a, omega_a, chi_a


# ---------------------------------------------------------------------------
# CIP to celestial-to-intermediate matrix
# ---------------------------------------------------------------------------


def c2ixys(x: ArrayLike, y: ArrayLike, s: ArrayLike) -> Array:
    """Form the celestial-to-intermediate matrix given CIP X, Y and CIO locator s.

    Uses ``Rz(-(e+s)) @ Ry(d) @ Rz(e)`` where
    ``d = arctan(sqrt((x^2 + y^2) / (1 - x^2 - y^2)))`` and
    ``e = atan2(y, x)``, matching SOFA ``iauC2ixys``.

    Args:
        x: CIP x coordinate.
        y: CIP y coordinate.
        s: CIO locator.

    Returns:
        3x3 celestial-to-intermediate (GCRS -> CIRS) matrix.
    """
    r2 = x * x + y * y
    e = jnp.where(r2 > 0.0, jnp.arctan2(y, x), 0.0)
    d = jnp.arctan(jnp.sqrt(r2 / (1.0 - r2)))

    return Rz(-(e + s)) @ Ry(d) @ Rz(e)


# ---------------------------------------------------------------------------
# Earth Rotation Angle
# ---------------------------------------------------------------------------


def era00(dj1: ArrayLike, dj2: ArrayLike = 0.0) -> Array:
    """Earth Rotation Angle (IAU 2000 model).

    Args:
        dj1: UT1 Julian Date, or its larger part when split in two.
        dj2: Remaining part of the split UT1 Julian Date. Default: ``0.0``

    Returns:
        Earth Rotation Angle in radians, in ``[0, 2*pi)``.
    """
    t = (dj1 - DJ00) + dj2

    # Fractional part of dj1 + dj2 carried separately for precision
    f = jnp.fmod(dj1, 1.0) + jnp.fmod(dj2, 1.0)

    theta = jnp.mod(f + 0.7790572732640 + 0.00273781191135448 * t, 1.0) * D2PI
    return theta


# ---------------------------------------------------------------------------
# TIO locator s' and polar motion matrix
# ---------------------------------------------------------------------------


def sp00(date1: ArrayLike, date2: ArrayLike = 0.0) -> Array:
    """TIO locator s', positioning the Terrestrial Intermediate Origin.

    Args:
        date1: TT Julian Date, or its larger part when split in two.
        date2: Remaining part of the split TT Julian Date. Default: ``0.0``

    Returns:
        TIO locator s' in radians.
    """
    return -47e-6 * _centuries(date1, date2) * DAS2R


def pom00(xp: ArrayLike, yp: ArrayLike, sp: ArrayLike) -> Array:
    """Form the polar motion matrix (TIRS -> ITRS).

    The matrix is ``Rx(-yp) @ Ry(-xp) @ Rz(sp)``, matching SOFA ``iauPom00``.

    Args:
        xp: Polar motion x-component (radians, positive towards Greenwich).
        yp: Polar motion y-component (radians, positive towards 270E).
        sp: TIO locator s' (radians).

    Returns:
        3x3 polar motion matrix.
    """
    return Rx(-yp) @ Ry(-xp) @ Rz(sp)


# ---------------------------------------------------------------------------
# Series evaluated by ERFA (not traceable)
# ---------------------------------------------------------------------------


def _concrete(date1: ArrayLike, date2: ArrayLike) -> tuple[np.ndarray, np.ndarray]:
    return np.asarray(date1, dtype=np.float64), np.asarray(date2, dtype=np.float64)


def xys06a(date1: ArrayLike, date2: ArrayLike = 0.0) -> tuple[Array, Array, Array]:
    """CIP X, Y coordinates and CIO locator s, IAU 2006/2000A.

    Args:
        date1: TT Julian Date, or its larger part when split in two.
        date2: Remaining part of the split TT Julian Date. Default: ``0.0``

    Returns:
        Tuple of (x, y, s) in radians.
    """
    x, y, s = erfa.xys06a(*_concrete(date1, date2))
    dtype = get_dtype()
    return jnp.asarray(x, dtype=dtype), jnp.asarray(y, dtype=dtype), jnp.asarray(s, dtype=dtype)


def nut06a(date1: ArrayLike, date2: ArrayLike = 0.0) -> tuple[Array, Array]:
    """Nutation, IAU 2006/2000A (IAU 2000A with the P03 adjustment).

    Args:
        date1: TT Julian Date, or its larger part when split in two.
        date2: Remaining part of the split TT Julian Date. Default: ``0.0``

    Returns:
        Tuple of (dpsi, deps) nutation in longitude and obliquity [radians].
    """
    dpsi, deps = erfa.nut06a(*_concrete(date1, date2))
    dtype = get_dtype()
    return jnp.asarray(dpsi, dtype=dtype), jnp.asarray(deps, dtype=dtype)


def eo06a(date1: ArrayLike, date2: ArrayLike = 0.0) -> Array:
    """Equation of the origins, IAU 2006/2000A.

    Args:
        date1: TT Julian Date, or its larger part when split in two.
        date2: Remaining part of the split TT Julian Date. Default: ``0.0``

    Returns:
        Equation of the origins ``ERA - GST`` in radians.
    """
    return jnp.asarray(erfa.eo06a(*_concrete(date1, date2)), dtype=get_dtype())
