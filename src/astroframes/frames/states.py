"""State vector transport between reference frames.

Rotates position, velocity and acceleration between frames.  When one side
is Earth-fixed and the other inertial, the Earth-fixed side is first reduced
to the pseudo Earth-fixed frame of the theory (PEF for FK5, TIRS for
IAU-2006) and the transport theorem is applied there with the Earth
rotation vector ``w = [0, 0, OMEGA_EARTH * (1 - LOD / 86400)]``.

Positions are in metres, velocities in m/s and accelerations in m/s^2,
although any consistent length unit works since only the time unit enters
through ``w``.
"""

from __future__ import annotations

from typing import NamedTuple

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from astroframes.config import get_dtype
from astroframes.constants import OMEGA_EARTH, SECONDS_PER_DAY
from astroframes.eop import EOPData, get_lod
from astroframes.frames._types import ECEF_FRAMES, ECI_FRAMES, Frame, Theory
from astroframes.frames.resolver import Epoch, _check_side, _infer_theory, is_epoch_pair, resolve
from astroframes.rotations import Rotation, apply
from astroframes.time import JulianDateLike


class OrbitStateVector(NamedTuple):
    """Orbit state at an epoch.

    Attributes:
        epoch: Julian Date [UTC], plain or split.  A single instant; epoch
            pairs go through the ``epoch`` argument of :func:`transport`.
        r: Position, shape ``(3,)``.
        v: Velocity, shape ``(3,)``.
        a: Acceleration, shape ``(3,)``. Defaults to zero.
    """

    epoch: JulianDateLike
    r: ArrayLike
    v: ArrayLike
    a: ArrayLike = (0.0, 0.0, 0.0)


def _check_single_epoch(epoch: Epoch, owner: str) -> None:
    if is_epoch_pair(epoch):
        raise TypeError(
            f"{owner}.epoch must be a single Julian Date, got a tuple. "
            "Pass an epoch pair through the epoch argument instead."
        )


def _earth_rotation_vector(epoch: JulianDateLike, eop: EOPData | None) -> Array:
    dtype = get_dtype()
    lod = get_lod(eop, epoch) if eop is not None else jnp.zeros((), dtype=dtype)
    omega = OMEGA_EARTH * (1.0 - lod / SECONDS_PER_DAY)
    return jnp.array([0.0, 0.0, 1.0], dtype=dtype) * omega


def _rotate(rotation: Rotation, r: Array, v: Array, a: Array) -> tuple[Array, Array, Array]:
    return apply(rotation, r), apply(rotation, v), apply(rotation, a)


def transport(
    state: OrbitStateVector,
    origin: Frame,
    destination: Frame,
    eop: EOPData | None = None,
    *,
    epoch: Epoch | None = None,
    theory: Theory | None = None,
) -> OrbitStateVector:
    """Express an orbit state in another frame.

    The returned state has the same epoch as *state*; the input is not
    modified.

    With an epoch pair ``(jd_origin, jd_destination)`` the origin side is
    evaluated at ``jd_origin`` and the destination side at
    ``jd_destination``.  Across the Earth-fixed / inertial boundary the Earth
    rotation vector is taken at the epoch of the Earth-fixed side.

    Args:
        state: State expressed in *origin*.
        origin: Frame of *state*.
        destination: Frame to express the state in.
        eop: Optional EOP record (see :func:`~astroframes.frames.resolve`).
            Also supplies the LOD used for the Earth rotation rate.
        epoch: Epoch of the rotation, or a ``(jd_origin, jd_destination)``
            pair.  Defaults to ``state.epoch``.
        theory: Optional theory hint for ITRF <-> GCRF.

    Returns:
        The state expressed in *destination*.

    Raises:
        TypeError: If ``state.epoch`` is a tuple rather than a single date.
        FrameTheoryMismatch: If the frames belong to different theories.
        EopShapeMismatch: If the EOP record does not fit the theory.

    Examples:
        ```python
        from astroframes.frames import Frame, OrbitStateVector, transport
        sv = OrbitStateVector(2453101.828154745, r_itrf, v_itrf)
        sv_gcrf = transport(sv, Frame.ITRF, Frame.GCRF, eop)
        ```
    """
    _check_single_epoch(state.epoch, "OrbitStateVector")
    if epoch is None:
        epoch = state.epoch

    if is_epoch_pair(epoch):
        jd_origin, jd_destination = epoch
    else:
        jd_origin = jd_destination = epoch

    dtype = get_dtype()
    r = jnp.asarray(state.r, dtype=dtype)
    v = jnp.asarray(state.v, dtype=dtype)
    a = jnp.asarray(state.a, dtype=dtype)

    theory = _infer_theory(origin, destination, eop, theory)

    if origin.is_ecef == destination.is_ecef:
        rotation = resolve(origin, destination, epoch, eop, theory=theory)
        return OrbitStateVector(state.epoch, *_rotate(rotation, r, v, a))

    pivot = Frame.PEF if theory is Theory.FK5 else Frame.TIRS

    if origin.is_ecef:
        w = _earth_rotation_vector(jd_origin, eop)
        r_p, v_p, a_p = _rotate(resolve(origin, pivot, jd_origin, eop, theory=theory), r, v, a)
        rotation = resolve(pivot, destination, epoch, eop, theory=theory)

        r_f = apply(rotation, r_p)
        v_f = apply(rotation, v_p + jnp.cross(w, r_p))
        a_f = apply(rotation, a_p + jnp.cross(w, jnp.cross(w, r_p)) + 2.0 * jnp.cross(w, v_p))
        return OrbitStateVector(state.epoch, r_f, v_f, a_f)

    w = _earth_rotation_vector(jd_destination, eop)
    rotation = resolve(origin, pivot, epoch, eop, theory=theory)
    r_p = apply(rotation, r)
    v_p = apply(rotation, v) - jnp.cross(w, r_p)
    a_p = apply(rotation, a) - jnp.cross(w, jnp.cross(w, r_p)) - 2.0 * jnp.cross(w, v_p)

    rotation = resolve(pivot, destination, jd_destination, eop, theory=theory)
    r_f, v_f, a_f = _rotate(rotation, r_p, v_p, a_p)
    return OrbitStateVector(state.epoch, r_f, v_f, a_f)


def transport_ecef_to_ecef(
    state: OrbitStateVector,
    origin: Frame,
    destination: Frame,
    eop: EOPData | None = None,
    *,
    theory: Theory | None = None,
) -> OrbitStateVector:
    """Transport a state between two Earth-fixed frames. See :func:`transport`."""
    _check_side(origin, ECEF_FRAMES, "Origin", "Earth-fixed")
    _check_side(destination, ECEF_FRAMES, "Destination", "Earth-fixed")
    return transport(state, origin, destination, eop, theory=theory)


def transport_ecef_to_eci(
    state: OrbitStateVector,
    origin: Frame,
    destination: Frame,
    eop: EOPData | None = None,
    *,
    theory: Theory | None = None,
) -> OrbitStateVector:
    """Transport a state from an Earth-fixed to an inertial frame. See :func:`transport`."""
    _check_side(origin, ECEF_FRAMES, "Origin", "Earth-fixed")
    _check_side(destination, ECI_FRAMES, "Destination", "inertial")
    return transport(state, origin, destination, eop, theory=theory)


def transport_eci_to_ecef(
    state: OrbitStateVector,
    origin: Frame,
    destination: Frame,
    eop: EOPData | None = None,
    *,
    theory: Theory | None = None,
) -> OrbitStateVector:
    """Transport a state from an inertial to an Earth-fixed frame. See :func:`transport`."""
    _check_side(origin, ECI_FRAMES, "Origin", "inertial")
    _check_side(destination, ECEF_FRAMES, "Destination", "Earth-fixed")
    return transport(state, origin, destination, eop, theory=theory)


def transport_eci_to_eci(
    state: OrbitStateVector,
    origin: Frame,
    destination: Frame,
    eop: EOPData | None = None,
    *,
    epoch: Epoch | None = None,
    theory: Theory | None = None,
) -> OrbitStateVector:
    """Transport a state between two inertial frames. See :func:`transport`."""
    _check_side(origin, ECI_FRAMES, "Origin", "inertial")
    _check_side(destination, ECI_FRAMES, "Destination", "inertial")
    return transport(state, origin, destination, eop, epoch=epoch, theory=theory)
