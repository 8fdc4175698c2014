"""IAU-2006/2010 reduction, CIO-based and equinox-based.

CIO-based chain (IERS Conventions 2010, Ch. 5)::

    ITRF --(polar motion, s')--> TIRS --(ERA)--> CIRS --(X, Y, s)--> GCRF

Equinox-based chain::

    TIRS --(GAST)--> ERS --(nutation)--> MOD06 --(precession)--> MJ2000 --(bias)--> GCRF

MJ2000 is the mean equator and equinox of J2000.0 in the IAU-2006 sense;
it differs from the FK5 J2000 frame by the frame bias.

Corrections from IERS EOP data enter as CIP offsets ``dX`` / ``dY`` in the
CIO chain and as nutation corrections ``d_deps`` / ``d_dpsi`` in the
equinox chain (see :func:`cip_offsets_to_nutation_corrections`), all in
radians.

The series behind CIRS, ERS and MOD06 are evaluated by ``pyerfa`` (see
:mod:`astroframes.sofa`), so the providers touching them accept concrete
dates only and cannot be traced by ``jax.jit``.

References:

    1. G. Petit and B. Luzum, *IERS Conventions (2010)*, IERS Technical Note 36.
    2. D. Vallado, *Fundamentals of Astrodynamics and Applications (4th Ed.)*, 2013, Sec. 3.7.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from astroframes import sofa
from astroframes.constants import AS2RAD
from astroframes.rotations import (
    Rotation,
    RotationKind,
    Rx,
    Rz,
    angle_to_dcm,
    as_kind,
    invert,
)
from astroframes.time import JulianDateLike, split_jd


# ---------------------------------------------------------------------------
# ITRF <-> TIRS
# ---------------------------------------------------------------------------


def rotation_itrf_to_tirs_iau2006(
    kind: RotationKind,
    jd_tt: JulianDateLike,
    x_p: ArrayLike,
    y_p: ArrayLike,
) -> Rotation:
    """Rotation from ITRF to TIRS (polar motion and TIO locator).

    Args:
        kind: ``RotationMatrix`` or ``Quaternion``.
        jd_tt: Julian Date [TT].
        x_p: Polar motion x-component [rad].
        y_p: Polar motion y-component [rad].

    Returns:
        The rotation as an instance of *kind*.
    """
    sp = sofa.sp00(*split_jd(jd_tt))
    return as_kind(kind, sofa.pom00(x_p, y_p, sp).T)


def rotation_tirs_to_itrf_iau2006(
    kind: RotationKind,
    jd_tt: JulianDateLike,
    x_p: ArrayLike,
    y_p: ArrayLike,
) -> Rotation:
    """Rotation from TIRS to ITRF."""
    return invert(rotation_itrf_to_tirs_iau2006(kind, jd_tt, x_p, y_p))


# ---------------------------------------------------------------------------
# TIRS <-> CIRS
# ---------------------------------------------------------------------------


def rotation_tirs_to_cirs_iau2006(kind: RotationKind, jd_ut1: JulianDateLike) -> Rotation:
    """Rotation from TIRS to CIRS (Earth Rotation Angle).

    Args:
        kind: ``RotationMatrix`` or ``Quaternion``.
        jd_ut1: Julian Date [UT1].

    Returns:
        The rotation as an instance of *kind*.
    """
    return as_kind(kind, Rz(-sofa.era00(*split_jd(jd_ut1))))


def rotation_cirs_to_tirs_iau2006(kind: RotationKind, jd_ut1: JulianDateLike) -> Rotation:
    """Rotation from CIRS to TIRS."""
    return invert(rotation_tirs_to_cirs_iau2006(kind, jd_ut1))


# ---------------------------------------------------------------------------
# CIRS <-> GCRF
# ---------------------------------------------------------------------------


def rotation_gcrf_to_cirs_iau2006(
    kind: RotationKind,
    jd_tt: JulianDateLike,
    dX: ArrayLike = 0.0,
    dY: ArrayLike = 0.0,
) -> Rotation:
    """Rotation from GCRF to CIRS (CIP coordinates and CIO locator).

    Args:
        kind: ``RotationMatrix`` or ``Quaternion``.
        jd_tt: Julian Date [TT].
        dX: CIP offset in X [rad].
        dY: CIP offset in Y [rad].

    Returns:
        The rotation as an instance of *kind*.
    """
    x, y, s = sofa.xys06a(*split_jd(jd_tt))
    return as_kind(kind, sofa.c2ixys(x + dX, y + dY, s))


def rotation_cirs_to_gcrf_iau2006(
    kind: RotationKind,
    jd_tt: JulianDateLike,
    dX: ArrayLike = 0.0,
    dY: ArrayLike = 0.0,
) -> Rotation:
    """Rotation from CIRS to GCRF.

    Args:
        kind: ``RotationMatrix`` or ``Quaternion``.
        jd_tt: Julian Date [TT].
        dX: CIP offset in X [rad].
        dY: CIP offset in Y [rad].

    Returns:
        The rotation as an instance of *kind*.
    """
    return invert(rotation_gcrf_to_cirs_iau2006(kind, jd_tt, dX, dY))


# ---------------------------------------------------------------------------
# Equinox-based chain
# ---------------------------------------------------------------------------


def _nutation(jd_tt: JulianDateLike, d_deps: ArrayLike, d_dpsi: ArrayLike) -> tuple[Array, Array, Array]:
    mean_obliquity = sofa.obl06(*split_jd(jd_tt))
    dpsi, deps = sofa.nut06a(*split_jd(jd_tt))
    return mean_obliquity, deps + d_deps, dpsi + d_dpsi


def _gast(jd_ut1: JulianDateLike, jd_tt: JulianDateLike, mean_obliquity: Array, d_dpsi: ArrayLike) -> Array:
    # A longitude correction shifts the equinox, so the equation of the origins moves with it
    eo = sofa.eo06a(*split_jd(jd_tt)) - d_dpsi * jnp.cos(mean_obliquity)
    return sofa.era00(*split_jd(jd_ut1)) - eo


def rotation_tirs_to_ers_iau2006(
    kind: RotationKind,
    jd_ut1: JulianDateLike,
    jd_tt: JulianDateLike,
    d_dpsi: ArrayLike = 0.0,
) -> Rotation:
    """Rotation from TIRS to ERS (Greenwich apparent sidereal time).

    GAST is the Earth Rotation Angle minus the equation of the origins.

    Args:
        kind: ``RotationMatrix`` or ``Quaternion``.
        jd_ut1: Julian Date [UT1].
        jd_tt: Julian Date [TT].
        d_dpsi: Correction to the nutation in longitude [rad].

    Returns:
        The rotation as an instance of *kind*.
    """
    gast = _gast(jd_ut1, jd_tt, sofa.obl06(*split_jd(jd_tt)), d_dpsi)
    return as_kind(kind, Rz(-gast))


def rotation_ers_to_tirs_iau2006(
    kind: RotationKind,
    jd_ut1: JulianDateLike,
    jd_tt: JulianDateLike,
    d_dpsi: ArrayLike = 0.0,
) -> Rotation:
    """Rotation from ERS to TIRS."""
    return invert(rotation_tirs_to_ers_iau2006(kind, jd_ut1, jd_tt, d_dpsi))


def rotation_ers_to_mod_iau2006(
    kind: RotationKind,
    jd_tt: JulianDateLike,
    d_deps: ArrayLike = 0.0,
    d_dpsi: ArrayLike = 0.0,
) -> Rotation:
    """Rotation from ERS to MOD06 (IAU 2006/2000A nutation).

    Args:
        kind: ``RotationMatrix`` or ``Quaternion``.
        jd_tt: Julian Date [TT].
        d_deps: Correction to the nutation in obliquity [rad].
        d_dpsi: Correction to the nutation in longitude [rad].

    Returns:
        The rotation as an instance of *kind*.
    """
    mean_obliquity, deps, dpsi = _nutation(jd_tt, d_deps, d_dpsi)
    return as_kind(kind, angle_to_dcm(mean_obliquity + deps, dpsi, -mean_obliquity, "XZX"))


def rotation_mod_to_ers_iau2006(
    kind: RotationKind,
    jd_tt: JulianDateLike,
    d_deps: ArrayLike = 0.0,
    d_dpsi: ArrayLike = 0.0,
) -> Rotation:
    """Rotation from MOD06 to ERS."""
    return invert(rotation_ers_to_mod_iau2006(kind, jd_tt, d_deps, d_dpsi))


def rotation_tirs_to_mod_iau2006(
    kind: RotationKind,
    jd_ut1: JulianDateLike,
    jd_tt: JulianDateLike,
    d_deps: ArrayLike = 0.0,
    d_dpsi: ArrayLike = 0.0,
) -> Rotation:
    """Rotation from TIRS to MOD06 with a single nutation evaluation.

    Args:
        kind: ``RotationMatrix`` or ``Quaternion``.
        jd_ut1: Julian Date [UT1].
        jd_tt: Julian Date [TT].
        d_deps: Correction to the nutation in obliquity [rad].
        d_dpsi: Correction to the nutation in longitude [rad].

    Returns:
        The rotation as an instance of *kind*.
    """
    mean_obliquity, deps, dpsi = _nutation(jd_tt, d_deps, d_dpsi)
    ers_from_tirs = Rz(-_gast(jd_ut1, jd_tt, mean_obliquity, d_dpsi))
    mod_from_ers = angle_to_dcm(mean_obliquity + deps, dpsi, -mean_obliquity, "XZX")
    return as_kind(kind, mod_from_ers @ ers_from_tirs)


def rotation_mod_to_tirs_iau2006(
    kind: RotationKind,
    jd_ut1: JulianDateLike,
    jd_tt: JulianDateLike,
    d_deps: ArrayLike = 0.0,
    d_dpsi: ArrayLike = 0.0,
) -> Rotation:
    """Rotation from MOD06 to TIRS."""
    return invert(rotation_tirs_to_mod_iau2006(kind, jd_ut1, jd_tt, d_deps, d_dpsi))


def rotation_mod_to_mj2000_iau2006(kind: RotationKind, jd_tt: JulianDateLike) -> Rotation:
    """Rotation from MOD06 to MJ2000 (IAU 2006 precession).

    Args:
        kind: ``RotationMatrix`` or ``Quaternion``.
        jd_tt: Julian Date [TT].

    Returns:
        The rotation as an instance of *kind*.
    """
    psi_a, omega_a, chi_a = sofa.p06_precession(*split_jd(jd_tt))
    eps0 = sofa.EPS0_IAU2006 * AS2RAD
    dcm = Rx(-eps0) @ angle_to_dcm(-chi_a, omega_a, psi_a, "ZXZ")
    return as_kind(kind, dcm)


def rotation_mj2000_to_mod_iau2006(kind: RotationKind, jd_tt: JulianDateLike) -> Rotation:
    """Rotation from MJ2000 to MOD06."""
    return invert(rotation_mod_to_mj2000_iau2006(kind, jd_tt))


def rotation_mj2000_to_gcrf_iau2006(kind: RotationKind) -> Rotation:
    """Rotation from MJ2000 to GCRF (frame bias).

    The bias is a fixed rotation and does not depend on the epoch.

    Args:
        kind: ``RotationMatrix`` or ``Quaternion``.

    Returns:
        The rotation as an instance of *kind*.
    """
    dalpha0 = -0.0146 * AS2RAD
    xi0 = -0.041775 * jnp.sin(84381.448 * AS2RAD) * AS2RAD
    eta0 = -0.0068192 * AS2RAD
    return as_kind(kind, angle_to_dcm(eta0, -xi0, -dalpha0, "XYZ"))


def rotation_gcrf_to_mj2000_iau2006(kind: RotationKind) -> Rotation:
    """Rotation from GCRF to MJ2000 (inverse frame bias)."""
    return invert(rotation_mj2000_to_gcrf_iau2006(kind))


# ---------------------------------------------------------------------------
# EOP conversion
# ---------------------------------------------------------------------------


def cip_offsets_to_nutation_corrections(
    jd_tt: JulianDateLike,
    dX: ArrayLike,
    dY: ArrayLike,
) -> tuple[Array, Array]:
    """Convert IERS CIP offsets into equinox-based nutation corrections.

    Args:
        jd_tt: Julian Date [TT].
        dX: CIP offset in X [rad].
        dY: CIP offset in Y [rad].

    Returns:
        Tuple of (d_deps, d_dpsi) corrections [rad], the same order the
        equinox-chain providers accept them in.

    References:

        1. G. Petit and B. Luzum, *IERS Conventions (2010)*, IERS Technical Note 36, eq. 5.25.
    """
    psi_a, omega_a, chi_a = sofa.p06_precession(*split_jd(jd_tt))
    eps_a = sofa.obl06(*split_jd(jd_tt))
    eps0 = sofa.EPS0_IAU2006 * AS2RAD

    c = psi_a * jnp.cos(eps0) - chi_a
    d_dpsi = (dX - c * dY) / ((1.0 + c * c) * jnp.sin(eps_a))
    d_deps = (dY + c * dX) / (1.0 + c * c)
    return d_deps, d_dpsi
