"""Frame change of Keplerian orbital elements.

The elements are converted to position and velocity, rotated between the
two inertial frames and converted back.  No transport-theorem terms are
involved since both frames are inertial.
"""

from __future__ import annotations

from typing import NamedTuple

from jax.typing import ArrayLike

from astroframes.coordinates import kepler_to_rv, rv_to_kepler
from astroframes.eop import EOPData
from astroframes.frames._types import Frame, Theory
from astroframes.frames.resolver import Epoch, is_epoch_pair, resolve_eci_to_eci
from astroframes.rotations import apply


class KeplerianElements(NamedTuple):
    """Osculating Keplerian elements at an epoch.

    Attributes:
        epoch: Julian Date [UTC].
        a: Semi-major axis [m].
        e: Eccentricity.
        i: Inclination [rad].
        raan: Right ascension of the ascending node [rad].
        argp: Argument of perigee [rad].
        nu: True anomaly [rad].
    """

    epoch: ArrayLike
    a: ArrayLike
    e: ArrayLike
    i: ArrayLike
    raan: ArrayLike
    argp: ArrayLike
    nu: ArrayLike


def change_oe_frame(
    elements: KeplerianElements,
    origin: Frame,
    destination: Frame,
    eop: EOPData | None = None,
    *,
    epoch: Epoch | None = None,
    theory: Theory | None = None,
) -> KeplerianElements:
    """Express Keplerian elements in another inertial frame.

    Args:
        elements: Elements expressed in *origin*.
        origin: Inertial frame of *elements*.
        destination: Inertial frame to express the elements in.
        eop: Optional EOP record (see :func:`~astroframes.frames.resolve`).
        epoch: Epoch of the rotation, or a ``(jd_origin, jd_destination)``
            pair.  Defaults to ``elements.epoch``.
        theory: Optional theory hint.

    Returns:
        The elements in *destination*, tagged with the same epoch as the
        input elements.

    Raises:
        ValueError: If either frame is Earth-fixed.
        FrameTheoryMismatch: If the frames belong to different theories.
        EopShapeMismatch: If the EOP record does not fit the theory.
        InvalidEccentricity: If the elements are not elliptical.
        TypeError: If ``elements.epoch`` is a tuple rather than a single date.

    Examples:
        ```python
        from astroframes.frames import Frame, KeplerianElements, change_oe_frame
        oe = KeplerianElements(2451545.0, 7130982.0, 0.001111, 1.7175, 3.9677, 1.5708, 5.5851)
        oe_teme = change_oe_frame(oe, Frame.J2000, Frame.TEME)
        ```
    """
    if is_epoch_pair(elements.epoch):
        raise TypeError(
            "KeplerianElements.epoch must be a single Julian Date, got a tuple. "
            "Pass an epoch pair through the epoch argument instead."
        )
    if epoch is None:
        epoch = elements.epoch

    rotation = resolve_eci_to_eci(origin, destination, epoch, eop, theory=theory)

    r, v = kepler_to_rv(
        elements.a, elements.e, elements.i, elements.raan, elements.argp, elements.nu
    )
    a, e, i, raan, argp, nu = rv_to_kepler(apply(rotation, r), apply(rotation, v))

    return KeplerianElements(elements.epoch, a, e, i, raan, argp, nu)
