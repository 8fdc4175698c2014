"""Type definitions for Earth Orientation Parameters (EOP).

Two record shapes exist, one per frame theory:

- :class:`EOPDataIAU1980`: nutation corrections as ``dPsi``/``dEps``
  (IAU-76/FK5 frames).
- :class:`EOPDataIAU2000A`: celestial pole offsets as ``dX``/``dY``
  (IAU-2006/2010 frames).

Both are :class:`~typing.NamedTuple` instances, which JAX treats as
pytrees, so they pass through ``jax.jit`` and ``jax.vmap`` unchanged.
"""

from __future__ import annotations

import enum
from typing import NamedTuple, Union

from jax import Array


class EOPDataIAU1980(NamedTuple):
    """EOP series for the IAU-76/FK5 reduction.

    Attributes:
        mjd: Sorted Modified Julian Dates, shape ``(N,)``.
        pm_x: Polar motion x-component [rad], shape ``(N,)``.
        pm_y: Polar motion y-component [rad], shape ``(N,)``.
        ut1_utc: UT1-UTC offset [seconds], shape ``(N,)``.
        lod: Length of day excess [seconds], shape ``(N,)``.
        dPsi: Nutation correction in longitude [rad], shape ``(N,)``.
        dEps: Nutation correction in obliquity [rad], shape ``(N,)``.
        mjd_min: Scalar, first MJD in the dataset.
        mjd_max: Scalar, last MJD in the dataset.
    """

    mjd: Array
    pm_x: Array
    pm_y: Array
    ut1_utc: Array
    lod: Array
    dPsi: Array
    dEps: Array
    mjd_min: Array
    mjd_max: Array


class EOPDataIAU2000A(NamedTuple):
    """EOP series for the IAU-2006/2010 reduction.

    Attributes:
        mjd: Sorted Modified Julian Dates, shape ``(N,)``.
        pm_x: Polar motion x-component [rad], shape ``(N,)``.
        pm_y: Polar motion y-component [rad], shape ``(N,)``.
        ut1_utc: UT1-UTC offset [seconds], shape ``(N,)``.
        lod: Length of day excess [seconds], shape ``(N,)``.
        dX: Celestial pole offset X [rad], shape ``(N,)``.
        dY: Celestial pole offset Y [rad], shape ``(N,)``.
        mjd_min: Scalar, first MJD in the dataset.
        mjd_max: Scalar, last MJD in the dataset.
    """

    mjd: Array
    pm_x: Array
    pm_y: Array
    ut1_utc: Array
    lod: Array
    dX: Array
    dY: Array
    mjd_min: Array
    mjd_max: Array


EOPData = Union[EOPDataIAU1980, EOPDataIAU2000A]
"""Either EOP record shape."""


class EOPKind(enum.Enum):
    """Which nutation-correction convention an EOP series carries.

    Attributes:
        IAU1980: ``dPsi``/``dEps`` corrections, builds :class:`EOPDataIAU1980`.
        IAU2000A: ``dX``/``dY`` corrections, builds :class:`EOPDataIAU2000A`.
    """

    IAU1980 = "iau1980"
    IAU2000A = "iau2000a"


class EOPFormat(enum.Enum):
    """On-disk layout of an IERS EOP file.

    Attributes:
        FINALS: IERS "finals" fixed-column format (``finals.all``,
            ``finals.all.iau2000``).
        C04: IERS EOP C04 whitespace-separated format.
    """

    FINALS = "finals"
    C04 = "c04"


class EOPExtrapolation(enum.Enum):
    """Extrapolation mode for EOP queries outside the data range.

    Resolved at trace time (Python enum), not at runtime.

    Attributes:
        HOLD: Clamp to the nearest boundary value.
        ZERO: Return zero for out-of-range queries.
    """

    HOLD = "hold"
    ZERO = "zero"
