"""Frame graph resolver.

Given two frame tags and an epoch, pick the chain of elementary rotations
that connects them, feed it the right EOP corrections and compose the chain
into a single rotation.

Hand-coded pairs are kept in two tables, one per theory.  The mirror of a
hand-coded pair is resolved by inverting it.  Any other pair, and any
request with an epoch pair ``(jd_origin, jd_destination)``, is resolved
through a reference frame: GCRF when EOP data is given, otherwise J2000
(FK5) or MJ2000 (IAU-2006).

Epochs are Julian Dates in UTC.  EOP values are sampled at that UTC epoch.
When no EOP data is given every correction is zero, UT1 is taken equal to
UTC and polar motion is zero.  Expect errors of a few hundred metres at LEO
radii in that case.

Typical usage::

    from astroframes.frames import Frame, resolve
    from astroframes.eop import static_eop_iau1980
    r = resolve(Frame.ITRF, Frame.GCRF, 2453101.828154745, eop)
"""

from __future__ import annotations

import logging
from typing import Callable, NamedTuple

import jax.numpy as jnp
from jax import Array

from astroframes.config import get_dtype
from astroframes.eop import (
    EOPData,
    EOPDataIAU1980,
    EOPDataIAU2000A,
    get_nutation_corrections,
    get_pm,
    get_ut1_utc,
)
from astroframes.errors import EopShapeMismatch, FrameTheoryMismatch
from astroframes.frames._types import ECEF_FRAMES, ECI_FRAMES, Frame, Theory
from astroframes.frames.fk5 import (
    rotation_gcrf_to_mod_fk5,
    rotation_itrf_to_gcrf_fk5,
    rotation_itrf_to_pef_fk5,
    rotation_mod_to_gcrf_fk5,
    rotation_mod_to_pef_fk5,
    rotation_mod_to_tod_fk5,
    rotation_pef_to_mod_fk5,
    rotation_pef_to_tod_fk5,
)
from astroframes.frames.iau2006 import (
    cip_offsets_to_nutation_corrections,
    rotation_cirs_to_gcrf_iau2006,
    rotation_gcrf_to_cirs_iau2006,
    rotation_gcrf_to_mj2000_iau2006,
    rotation_itrf_to_tirs_iau2006,
    rotation_mj2000_to_gcrf_iau2006,
    rotation_mj2000_to_mod_iau2006,
    rotation_mod_to_ers_iau2006,
    rotation_mod_to_mj2000_iau2006,
    rotation_tirs_to_cirs_iau2006,
    rotation_tirs_to_ers_iau2006,
    rotation_tirs_to_mod_iau2006,
)
from astroframes.frames.teme import (
    rotation_gcrf_to_teme,
    rotation_mod_to_teme,
    rotation_pef_to_teme,
)
from astroframes.rotations import (
    Rotation,
    RotationKind,
    RotationMatrix,
    as_kind,
    compose,
    invert,
)
from astroframes.time import JulianDate, JulianDateLike, jd_utc_to_tt, jd_utc_to_ut1, split_jd

logger = logging.getLogger(__name__)

Epoch = JulianDateLike | tuple[JulianDateLike, JulianDateLike]
"""A Julian Date [UTC], plain or split, or a ``(jd_origin, jd_destination)`` pair."""


def is_epoch_pair(epoch: Epoch) -> bool:
    """Whether *epoch* is a ``(jd_origin, jd_destination)`` pair.

    A split :class:`~astroframes.time.JulianDate` is a tuple too, but names a
    single instant.
    """
    return isinstance(epoch, tuple) and not isinstance(epoch, JulianDate)


# ---------------------------------------------------------------------------
# Epoch parameters
# ---------------------------------------------------------------------------


class _EpochParams(NamedTuple):
    """Time arguments and EOP corrections for one epoch.

    All angles in radians.  ``dX`` / ``dY`` are only non-zero under
    IAU-2006, where ``d_deps`` / ``d_dpsi`` are derived from them for the
    equinox-based chain.
    """

    jd_ut1: JulianDate
    jd_tt: JulianDate
    x_p: Array
    y_p: Array
    d_deps: Array
    d_dpsi: Array
    dX: Array
    dY: Array


def _epoch_params(theory: Theory, jd_utc: JulianDateLike, eop: EOPData | None) -> _EpochParams:
    # Split before any offset is added so float32 keeps sub-second resolution
    jd_utc = split_jd(jd_utc)
    jd_tt = jd_utc_to_tt(jd_utc)
    zero = jnp.zeros((), dtype=get_dtype())

    if eop is None:
        return _EpochParams(jd_utc, jd_tt, zero, zero, zero, zero, zero, zero)

    jd_ut1 = jd_utc_to_ut1(jd_utc, get_ut1_utc(eop, jd_utc))
    x_p, y_p = get_pm(eop, jd_utc)

    if theory is Theory.FK5:
        d_dpsi, d_deps = get_nutation_corrections(eop, jd_utc)
        return _EpochParams(jd_ut1, jd_tt, x_p, y_p, d_deps, d_dpsi, zero, zero)

    dX, dY = get_nutation_corrections(eop, jd_utc)
    d_deps, d_dpsi = cip_offsets_to_nutation_corrections(jd_tt, dX, dY)
    return _EpochParams(jd_ut1, jd_tt, x_p, y_p, d_deps, d_dpsi, dX, dY)


# ---------------------------------------------------------------------------
# Theory inference
# ---------------------------------------------------------------------------


def _eop_theory(eop: EOPData | None) -> Theory | None:
    if eop is None:
        return None
    if isinstance(eop, EOPDataIAU1980):
        return Theory.FK5
    if isinstance(eop, EOPDataIAU2000A):
        return Theory.IAU2006
    raise EopShapeMismatch("EOPDataIAU1980 or EOPDataIAU2000A", type(eop).__name__)


def _eop_type_name(theory: Theory) -> str:
    return "EOPDataIAU1980" if theory is Theory.FK5 else "EOPDataIAU2000A"


def _infer_theory(
    origin: Frame,
    destination: Frame,
    eop: EOPData | None,
    hint: Theory | None,
) -> Theory:
    """Pick the theory for a tag pair and validate the EOP record against it.

    Raises:
        FrameTheoryMismatch: If the tags, the hint, or the EOP-bound shared
            tag disagree on the theory.
        EopShapeMismatch: If the EOP record has the wrong shape for two
            theory-specific tags, or is not an EOP record at all.
    """
    tag_theories = {f.theory for f in (origin, destination) if f.theory is not None}
    if len(tag_theories) > 1:
        raise FrameTheoryMismatch(origin, destination)
    tag_theory = tag_theories.pop() if tag_theories else None

    if hint is not None and tag_theory is not None and hint is not tag_theory:
        raise FrameTheoryMismatch(
            origin, destination, f"Requested theory {hint.name} does not match the frames."
        )

    eop_theory = _eop_theory(eop)

    if tag_theory is not None:
        if eop_theory is not None and eop_theory is not tag_theory:
            if origin.theory is None or destination.theory is None:
                # The EOP record binds the shared frame to the other theory
                raise FrameTheoryMismatch(
                    origin,
                    destination,
                    f"The EOP data is {eop_theory.name}, the frames are {tag_theory.name}.",
                )
            raise EopShapeMismatch(_eop_type_name(tag_theory), type(eop).__name__)
        return tag_theory

    if hint is not None:
        if eop_theory is not None and eop_theory is not hint:
            raise EopShapeMismatch(_eop_type_name(hint), type(eop).__name__)
        return hint

    return eop_theory or Theory.FK5


# ---------------------------------------------------------------------------
# FK5 edges
# ---------------------------------------------------------------------------

_Edge = Callable[[RotationKind, _EpochParams], Rotation]


def _fk5_itrf_to_pef(kind: RotationKind, p: _EpochParams) -> Rotation:
    return rotation_itrf_to_pef_fk5(kind, p.x_p, p.y_p)


def _fk5_pef_to_gcrf(kind: RotationKind, p: _EpochParams) -> Rotation:
    return compose(
        rotation_pef_to_mod_fk5(kind, p.jd_ut1, p.jd_tt, p.d_deps, p.d_dpsi),
        rotation_mod_to_gcrf_fk5(kind, p.jd_tt),
    )


def _fk5_pef_to_j2000(kind: RotationKind, p: _EpochParams) -> Rotation:
    # J2000 is the FK5 mean equator without EOP nutation corrections
    return compose(
        rotation_pef_to_mod_fk5(kind, p.jd_ut1, p.jd_tt),
        rotation_mod_to_gcrf_fk5(kind, p.jd_tt),
    )


def _fk5_pef_to_mod(kind: RotationKind, p: _EpochParams) -> Rotation:
    return rotation_pef_to_mod_fk5(kind, p.jd_ut1, p.jd_tt, p.d_deps, p.d_dpsi)


def _fk5_pef_to_tod(kind: RotationKind, p: _EpochParams) -> Rotation:
    return rotation_pef_to_tod_fk5(kind, p.jd_ut1, p.jd_tt, p.d_dpsi)


def _fk5_pef_to_teme(kind: RotationKind, p: _EpochParams) -> Rotation:
    return rotation_pef_to_teme(kind, p.jd_ut1)


def _fk5_itrf_to_gcrf(kind: RotationKind, p: _EpochParams) -> Rotation:
    return rotation_itrf_to_gcrf_fk5(kind, p.jd_ut1, p.jd_tt, p.x_p, p.y_p, p.d_deps, p.d_dpsi)


def _fk5_itrf_to_j2000(kind: RotationKind, p: _EpochParams) -> Rotation:
    return rotation_itrf_to_gcrf_fk5(kind, p.jd_ut1, p.jd_tt, p.x_p, p.y_p)


def _fk5_via_pef(pef_edge: _Edge) -> _Edge:
    def edge(kind: RotationKind, p: _EpochParams) -> Rotation:
        return compose(_fk5_itrf_to_pef(kind, p), pef_edge(kind, p))

    return edge


def _fk5_gcrf_to_j2000(kind: RotationKind, p: _EpochParams) -> Rotation:
    # The corrected and uncorrected nutation passes are kept separate and
    # composed literally, so the corrections cancel numerically.
    return compose(
        rotation_gcrf_to_mod_fk5(kind, p.jd_tt),
        rotation_mod_to_pef_fk5(kind, p.jd_ut1, p.jd_tt, p.d_deps, p.d_dpsi),
        rotation_pef_to_mod_fk5(kind, p.jd_ut1, p.jd_tt),
        rotation_mod_to_gcrf_fk5(kind, p.jd_tt),
    )


def _fk5_gcrf_to_mod(kind: RotationKind, p: _EpochParams) -> Rotation:
    return rotation_gcrf_to_mod_fk5(kind, p.jd_tt)


def _fk5_gcrf_to_tod(kind: RotationKind, p: _EpochParams) -> Rotation:
    return compose(
        rotation_gcrf_to_mod_fk5(kind, p.jd_tt),
        rotation_mod_to_tod_fk5(kind, p.jd_tt, p.d_deps, p.d_dpsi),
    )


def _fk5_gcrf_to_teme(kind: RotationKind, p: _EpochParams) -> Rotation:
    return compose(
        rotation_gcrf_to_mod_fk5(kind, p.jd_tt),
        rotation_mod_to_teme(kind, p.jd_tt, p.d_deps, p.d_dpsi),
    )


def _fk5_j2000_to_mod(kind: RotationKind, p: _EpochParams) -> Rotation:
    return compose(
        rotation_gcrf_to_mod_fk5(kind, p.jd_tt),
        rotation_mod_to_pef_fk5(kind, p.jd_ut1, p.jd_tt),
        rotation_pef_to_mod_fk5(kind, p.jd_ut1, p.jd_tt, p.d_deps, p.d_dpsi),
    )


def _fk5_j2000_to_tod(kind: RotationKind, p: _EpochParams) -> Rotation:
    return compose(
        _fk5_j2000_to_mod(kind, p),
        rotation_mod_to_tod_fk5(kind, p.jd_tt, p.d_deps, p.d_dpsi),
    )


def _fk5_j2000_to_teme(kind: RotationKind, p: _EpochParams) -> Rotation:
    return rotation_gcrf_to_teme(kind, p.jd_tt)


_FK5_EDGES: dict[tuple[Frame, Frame], _Edge] = {
    # ECEF <-> ECEF
    (Frame.ITRF, Frame.PEF): _fk5_itrf_to_pef,
    # ECEF -> ECI
    (Frame.ITRF, Frame.GCRF): _fk5_itrf_to_gcrf,
    (Frame.ITRF, Frame.J2000): _fk5_itrf_to_j2000,
    (Frame.ITRF, Frame.MOD): _fk5_via_pef(_fk5_pef_to_mod),
    (Frame.ITRF, Frame.TOD): _fk5_via_pef(_fk5_pef_to_tod),
    (Frame.ITRF, Frame.TEME): _fk5_via_pef(_fk5_pef_to_teme),
    (Frame.PEF, Frame.GCRF): _fk5_pef_to_gcrf,
    (Frame.PEF, Frame.J2000): _fk5_pef_to_j2000,
    (Frame.PEF, Frame.MOD): _fk5_pef_to_mod,
    (Frame.PEF, Frame.TOD): _fk5_pef_to_tod,
    (Frame.PEF, Frame.TEME): _fk5_pef_to_teme,
    # ECI <-> ECI
    (Frame.GCRF, Frame.J2000): _fk5_gcrf_to_j2000,
    (Frame.GCRF, Frame.MOD): _fk5_gcrf_to_mod,
    (Frame.GCRF, Frame.TOD): _fk5_gcrf_to_tod,
    (Frame.GCRF, Frame.TEME): _fk5_gcrf_to_teme,
    (Frame.J2000, Frame.MOD): _fk5_j2000_to_mod,
    (Frame.J2000, Frame.TOD): _fk5_j2000_to_tod,
    (Frame.J2000, Frame.TEME): _fk5_j2000_to_teme,
}


# ---------------------------------------------------------------------------
# IAU-2006 edges
# ---------------------------------------------------------------------------


def _iau2006_itrf_to_tirs(kind: RotationKind, p: _EpochParams) -> Rotation:
    return rotation_itrf_to_tirs_iau2006(kind, p.jd_tt, p.x_p, p.y_p)


def _iau2006_tirs_to_cirs(kind: RotationKind, p: _EpochParams) -> Rotation:
    return rotation_tirs_to_cirs_iau2006(kind, p.jd_ut1)


def _iau2006_tirs_to_gcrf(kind: RotationKind, p: _EpochParams) -> Rotation:
    return compose(
        rotation_tirs_to_cirs_iau2006(kind, p.jd_ut1),
        rotation_cirs_to_gcrf_iau2006(kind, p.jd_tt, p.dX, p.dY),
    )


def _iau2006_tirs_to_ers(kind: RotationKind, p: _EpochParams) -> Rotation:
    return rotation_tirs_to_ers_iau2006(kind, p.jd_ut1, p.jd_tt, p.d_dpsi)


def _iau2006_tirs_to_mod(kind: RotationKind, p: _EpochParams) -> Rotation:
    return rotation_tirs_to_mod_iau2006(kind, p.jd_ut1, p.jd_tt, p.d_deps, p.d_dpsi)


def _iau2006_tirs_to_mj2000(kind: RotationKind, p: _EpochParams) -> Rotation:
    return compose(
        rotation_tirs_to_mod_iau2006(kind, p.jd_ut1, p.jd_tt, p.d_deps, p.d_dpsi),
        rotation_mod_to_mj2000_iau2006(kind, p.jd_tt),
    )


def _iau2006_via_tirs(tirs_edge: _Edge) -> _Edge:
    def edge(kind: RotationKind, p: _EpochParams) -> Rotation:
        return compose(_iau2006_itrf_to_tirs(kind, p), tirs_edge(kind, p))

    return edge


def _iau2006_gcrf_to_cirs(kind: RotationKind, p: _EpochParams) -> Rotation:
    return rotation_gcrf_to_cirs_iau2006(kind, p.jd_tt, p.dX, p.dY)


def _iau2006_gcrf_to_mj2000(kind: RotationKind, p: _EpochParams) -> Rotation:
    return rotation_gcrf_to_mj2000_iau2006(kind)


def _iau2006_gcrf_to_mod(kind: RotationKind, p: _EpochParams) -> Rotation:
    return compose(
        rotation_gcrf_to_mj2000_iau2006(kind),
        rotation_mj2000_to_mod_iau2006(kind, p.jd_tt),
    )


def _iau2006_gcrf_to_ers(kind: RotationKind, p: _EpochParams) -> Rotation:
    return compose(
        _iau2006_gcrf_to_mod(kind, p),
        rotation_mod_to_ers_iau2006(kind, p.jd_tt, p.d_deps, p.d_dpsi),
    )


def _iau2006_via_gcrf(gcrf_edge: _Edge) -> _Edge:
    def edge(kind: RotationKind, p: _EpochParams) -> Rotation:
        return compose(rotation_mj2000_to_gcrf_iau2006(kind), gcrf_edge(kind, p))

    return edge


_IAU2006_EDGES: dict[tuple[Frame, Frame], _Edge] = {
    # ECEF <-> ECEF
    (Frame.ITRF, Frame.TIRS): _iau2006_itrf_to_tirs,
    # ECEF -> ECI
    (Frame.TIRS, Frame.CIRS): _iau2006_tirs_to_cirs,
    (Frame.TIRS, Frame.GCRF): _iau2006_tirs_to_gcrf,
    (Frame.TIRS, Frame.ERS): _iau2006_tirs_to_ers,
    (Frame.TIRS, Frame.MOD06): _iau2006_tirs_to_mod,
    (Frame.TIRS, Frame.MJ2000): _iau2006_tirs_to_mj2000,
    (Frame.ITRF, Frame.CIRS): _iau2006_via_tirs(_iau2006_tirs_to_cirs),
    (Frame.ITRF, Frame.GCRF): _iau2006_via_tirs(_iau2006_tirs_to_gcrf),
    (Frame.ITRF, Frame.ERS): _iau2006_via_tirs(_iau2006_tirs_to_ers),
    (Frame.ITRF, Frame.MOD06): _iau2006_via_tirs(_iau2006_tirs_to_mod),
    (Frame.ITRF, Frame.MJ2000): _iau2006_via_tirs(_iau2006_tirs_to_mj2000),
    # ECI <-> ECI
    (Frame.GCRF, Frame.CIRS): _iau2006_gcrf_to_cirs,
    (Frame.GCRF, Frame.MJ2000): _iau2006_gcrf_to_mj2000,
    (Frame.GCRF, Frame.MOD06): _iau2006_gcrf_to_mod,
    (Frame.GCRF, Frame.ERS): _iau2006_gcrf_to_ers,
    (Frame.MJ2000, Frame.CIRS): _iau2006_via_gcrf(_iau2006_gcrf_to_cirs),
    (Frame.MJ2000, Frame.MOD06): _iau2006_via_gcrf(_iau2006_gcrf_to_mod),
    (Frame.MJ2000, Frame.ERS): _iau2006_via_gcrf(_iau2006_gcrf_to_ers),
}

_EDGES: dict[Theory, dict[tuple[Frame, Frame], _Edge]] = {
    Theory.FK5: _FK5_EDGES,
    Theory.IAU2006: _IAU2006_EDGES,
}


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


def _reference_frame(theory: Theory, eop: EOPData | None) -> Frame:
    if eop is not None:
        return Frame.GCRF
    return Frame.J2000 if theory is Theory.FK5 else Frame.MJ2000


def _identity(kind: RotationKind) -> Rotation:
    return as_kind(kind, jnp.eye(3, dtype=get_dtype()))


def _direct(
    origin: Frame,
    destination: Frame,
    theory: Theory,
    kind: RotationKind,
    p: _EpochParams,
) -> Rotation | None:
    """Hand-coded pair or its mirror, or ``None`` if neither exists."""
    edges = _EDGES[theory]
    edge = edges.get((origin, destination))
    if edge is not None:
        return edge(kind, p)
    edge = edges.get((destination, origin))
    if edge is not None:
        return invert(edge(kind, p))
    return None


def _resolve_single(
    origin: Frame,
    destination: Frame,
    theory: Theory,
    kind: RotationKind,
    p: _EpochParams,
    reference: Frame,
) -> Rotation:
    if origin is destination:
        return _identity(kind)

    rotation = _direct(origin, destination, theory, kind, p)
    if rotation is not None:
        return rotation

    logger.debug("No direct %s edge %s -> %s, resolving via %s", theory.name, origin, destination, reference)
    return compose(
        _resolve_single(origin, reference, theory, kind, p, reference),
        _resolve_single(reference, destination, theory, kind, p, reference),
    )


def resolve(
    origin: Frame,
    destination: Frame,
    epoch: Epoch,
    eop: EOPData | None = None,
    *,
    kind: RotationKind = RotationMatrix,
    theory: Theory | None = None,
) -> Rotation:
    """Rotation from *origin* to *destination* at the given epoch.

    The returned rotation maps coordinates expressed in *origin* to
    coordinates expressed in *destination*.

    The theory is inferred from the frame tags.  When both tags are shared
    (ITRF, GCRF) it comes from *theory*, else from the EOP record shape, else
    defaults to FK5.

    Args:
        origin: Origin frame.
        destination: Destination frame.
        epoch: Julian Date [UTC], or a ``(jd_origin, jd_destination)`` pair
            to move an of-date frame between two epochs.
        eop: ``EOPDataIAU1980`` for FK5, ``EOPDataIAU2000A`` for IAU-2006.
            If ``None``, all EOP corrections are zero.
        kind: ``RotationMatrix`` (default) or ``Quaternion``.
        theory: Optional theory hint, needed only to pick the IAU-2006
            realisation of ITRF <-> GCRF without EOP data.

    Returns:
        The rotation as an instance of *kind*.

    Raises:
        FrameTheoryMismatch: If the frames belong to different theories, or
            the hint or EOP record contradicts them.
        EopShapeMismatch: If the EOP record does not fit the theory.

    Examples:
        ```python
        from astroframes.frames import Frame, resolve
        r = resolve(Frame.PEF, Frame.J2000, 2446601.399305556)
        ```
    """
    theory = _infer_theory(origin, destination, eop, theory)

    if eop is None:
        logger.debug("No EOP data for %s -> %s, using zero corrections", origin, destination)

    reference = _reference_frame(theory, eop)

    if not is_epoch_pair(epoch):
        return _resolve_single(origin, destination, theory, kind, _epoch_params(theory, epoch, eop), reference)

    jd_origin, jd_destination = epoch
    if origin is destination and not origin.is_of_date:
        return _identity(kind)

    logger.debug("Epoch pair for %s -> %s, resolving via %s", origin, destination, reference)
    return compose(
        _resolve_single(origin, reference, theory, kind, _epoch_params(theory, jd_origin, eop), reference),
        _resolve_single(reference, destination, theory, kind, _epoch_params(theory, jd_destination, eop), reference),
    )


# ---------------------------------------------------------------------------
# Side-checked entry points
# ---------------------------------------------------------------------------


def _check_side(frame: Frame, allowed: frozenset[Frame], role: str, side: str) -> None:
    if frame not in allowed:
        raise ValueError(f"{role} frame {frame} is not an {side} frame.")


def resolve_ecef_to_ecef(
    origin: Frame,
    destination: Frame,
    epoch: Epoch,
    eop: EOPData | None = None,
    *,
    kind: RotationKind = RotationMatrix,
    theory: Theory | None = None,
) -> Rotation:
    """Rotation between two Earth-fixed frames. See :func:`resolve`.

    Raises:
        ValueError: If either frame is inertial.
    """
    _check_side(origin, ECEF_FRAMES, "Origin", "Earth-fixed")
    _check_side(destination, ECEF_FRAMES, "Destination", "Earth-fixed")
    return resolve(origin, destination, epoch, eop, kind=kind, theory=theory)


def resolve_ecef_to_eci(
    origin: Frame,
    destination: Frame,
    epoch: Epoch,
    eop: EOPData | None = None,
    *,
    kind: RotationKind = RotationMatrix,
    theory: Theory | None = None,
) -> Rotation:
    """Rotation from an Earth-fixed frame to an inertial frame. See :func:`resolve`.

    Raises:
        ValueError: If *origin* is inertial or *destination* is Earth-fixed.
    """
    _check_side(origin, ECEF_FRAMES, "Origin", "Earth-fixed")
    _check_side(destination, ECI_FRAMES, "Destination", "inertial")
    return resolve(origin, destination, epoch, eop, kind=kind, theory=theory)


def resolve_eci_to_ecef(
    origin: Frame,
    destination: Frame,
    epoch: Epoch,
    eop: EOPData | None = None,
    *,
    kind: RotationKind = RotationMatrix,
    theory: Theory | None = None,
) -> Rotation:
    """Rotation from an inertial frame to an Earth-fixed frame. See :func:`resolve`.

    Raises:
        ValueError: If *origin* is Earth-fixed or *destination* is inertial.
    """
    _check_side(origin, ECI_FRAMES, "Origin", "inertial")
    _check_side(destination, ECEF_FRAMES, "Destination", "Earth-fixed")
    return resolve(origin, destination, epoch, eop, kind=kind, theory=theory)


def resolve_eci_to_eci(
    origin: Frame,
    destination: Frame,
    epoch: Epoch,
    eop: EOPData | None = None,
    *,
    kind: RotationKind = RotationMatrix,
    theory: Theory | None = None,
) -> Rotation:
    """Rotation between two inertial frames. See :func:`resolve`.

    Raises:
        ValueError: If either frame is Earth-fixed.
    """
    _check_side(origin, ECI_FRAMES, "Origin", "inertial")
    _check_side(destination, ECI_FRAMES, "Destination", "inertial")
    return resolve(origin, destination, epoch, eop, kind=kind, theory=theory)
