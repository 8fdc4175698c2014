"""True Equator, Mean Equinox (TEME) frame.

TEME is the output frame of the SGP4 propagator.  It shares its z-axis
with TOD but measures right ascension from the mean equinox, so

- PEF -> TEME is a rotation by GMST (no equation of the equinoxes),
- TEME -> TOD is a rotation by the equation of the equinoxes.

Every provider here belongs to the IAU-76/FK5 family and accepts the same
``d_deps`` / ``d_dpsi`` nutation corrections [rad].

References:

    1. D. Vallado, P. Crawford, R. Hujsak and T. Kelso, *Revisiting Spacetrack Report #3*, AIAA 2006-6753.
"""

from __future__ import annotations

from jax.typing import ArrayLike

from astroframes.frames.fk5 import (
    _equation_of_equinoxes,
    _tod_to_mod_dcm,
    gmst,
    nutation_fk5,
    rotation_mod_to_gcrf_fk5,
)
from astroframes.rotations import (
    Rotation,
    RotationKind,
    Rz,
    as_kind,
    compose,
    invert,
)
from astroframes.time import JulianDateLike


def rotation_pef_to_teme(kind: RotationKind, jd_ut1: JulianDateLike) -> Rotation:
    """Rotation from PEF to TEME.

    Args:
        kind: ``RotationMatrix`` or ``Quaternion``.
        jd_ut1: Julian Date [UT1].

    Returns:
        The rotation as an instance of *kind*.
    """
    return as_kind(kind, Rz(-gmst(jd_ut1)))


def rotation_teme_to_pef(kind: RotationKind, jd_ut1: JulianDateLike) -> Rotation:
    """Rotation from TEME to PEF."""
    return invert(rotation_pef_to_teme(kind, jd_ut1))


def rotation_teme_to_tod(
    kind: RotationKind,
    jd_tt: JulianDateLike,
    d_deps: ArrayLike = 0.0,
    d_dpsi: ArrayLike = 0.0,
) -> Rotation:
    """Rotation from TEME to TOD (equation of the equinoxes).

    Args:
        kind: ``RotationMatrix`` or ``Quaternion``.
        jd_tt: Julian Date [TT].
        d_deps: Correction to the nutation in obliquity [rad].  Accepted for
            a uniform signature; the equation of the equinoxes does not use it.
        d_dpsi: Correction to the nutation in longitude [rad].

    Returns:
        The rotation as an instance of *kind*.
    """
    mean_obliquity, _, dpsi = nutation_fk5(jd_tt)
    eqeq = _equation_of_equinoxes(jd_tt, mean_obliquity, dpsi + d_dpsi)
    return as_kind(kind, Rz(-eqeq))


def rotation_tod_to_teme(
    kind: RotationKind,
    jd_tt: JulianDateLike,
    d_deps: ArrayLike = 0.0,
    d_dpsi: ArrayLike = 0.0,
) -> Rotation:
    """Rotation from TOD to TEME."""
    return invert(rotation_teme_to_tod(kind, jd_tt, d_deps, d_dpsi))


def rotation_teme_to_mod(
    kind: RotationKind,
    jd_tt: JulianDateLike,
    d_deps: ArrayLike = 0.0,
    d_dpsi: ArrayLike = 0.0,
) -> Rotation:
    """Rotation from TEME to MOD, with a single nutation evaluation.

    Args:
        kind: ``RotationMatrix`` or ``Quaternion``.
        jd_tt: Julian Date [TT].
        d_deps: Correction to the nutation in obliquity [rad].
        d_dpsi: Correction to the nutation in longitude [rad].

    Returns:
        The rotation as an instance of *kind*.
    """
    mean_obliquity, deps, dpsi = nutation_fk5(jd_tt)
    deps = deps + d_deps
    dpsi = dpsi + d_dpsi

    tod_from_teme = Rz(-_equation_of_equinoxes(jd_tt, mean_obliquity, dpsi))
    mod_from_tod = _tod_to_mod_dcm(mean_obliquity, deps, dpsi)

    return as_kind(kind, mod_from_tod @ tod_from_teme)


def rotation_mod_to_teme(
    kind: RotationKind,
    jd_tt: JulianDateLike,
    d_deps: ArrayLike = 0.0,
    d_dpsi: ArrayLike = 0.0,
) -> Rotation:
    """Rotation from MOD to TEME."""
    return invert(rotation_teme_to_mod(kind, jd_tt, d_deps, d_dpsi))


def rotation_teme_to_gcrf(
    kind: RotationKind,
    jd_tt: JulianDateLike,
    d_deps: ArrayLike = 0.0,
    d_dpsi: ArrayLike = 0.0,
) -> Rotation:
    """Rotation from TEME to GCRF.

    Args:
        kind: ``RotationMatrix`` or ``Quaternion``.
        jd_tt: Julian Date [TT].
        d_deps: Correction to the nutation in obliquity [rad].
        d_dpsi: Correction to the nutation in longitude [rad].

    Returns:
        The rotation as an instance of *kind*.
    """
    return compose(
        rotation_teme_to_mod(kind, jd_tt, d_deps, d_dpsi),
        rotation_mod_to_gcrf_fk5(kind, jd_tt),
    )


def rotation_gcrf_to_teme(
    kind: RotationKind,
    jd_tt: JulianDateLike,
    d_deps: ArrayLike = 0.0,
    d_dpsi: ArrayLike = 0.0,
) -> Rotation:
    """Rotation from GCRF to TEME."""
    return invert(rotation_teme_to_gcrf(kind, jd_tt, d_deps, d_dpsi))
