"""Point queries into an EOP table.

Every query takes a Julian Date in UTC, the epoch the frame resolver
receives, and linearly interpolates between the two bracketing table rows.
The date may be plain or a split :class:`~astroframes.time.JulianDate`.
Only JAX array operations are used, so the queries trace under ``jax.jit``
and ``jax.vmap``.
"""

from __future__ import annotations

from typing import NamedTuple

import jax.numpy as jnp
from jax import Array

from astroframes.eop._types import (
    EOPData,
    EOPDataIAU1980,
    EOPDataIAU2000A,
    EOPExtrapolation,
)
from astroframes.time import JulianDateLike, jd_to_mjd


class _Bracket(NamedTuple):
    lo: Array
    hi: Array
    frac: Array
    in_range: Array


def _bracket(eop: EOPData, jd: JulianDateLike) -> _Bracket:
    mjd = jnp.asarray(jd_to_mjd(jd), dtype=eop.mjd.dtype)
    last = eop.mjd.shape[0] - 1

    # Rows either side of mjd; outside the table both clamp to the end row
    above = jnp.searchsorted(eop.mjd, mjd, side="right")
    lo = jnp.clip(above - 1, 0, last)
    hi = jnp.clip(above, 0, last)

    span = eop.mjd[hi] - eop.mjd[lo]
    frac = jnp.where(span > 0.0, (mjd - eop.mjd[lo]) / span, 0.0)
    in_range = (mjd >= eop.mjd_min) & (mjd <= eop.mjd_max)
    return _Bracket(lo, hi, frac, in_range)


def _sample(values: Array, b: _Bracket, extrapolation: EOPExtrapolation) -> Array:
    value = values[b.lo] + b.frac * (values[b.hi] - values[b.lo])
    if extrapolation == EOPExtrapolation.ZERO:
        return jnp.where(b.in_range, value, 0.0)
    return value


def get_ut1_utc(
    eop: EOPData,
    jd: JulianDateLike,
    extrapolation: EOPExtrapolation = EOPExtrapolation.HOLD,
) -> Array:
    """UT1-UTC at a UTC Julian Date.

    Args:
        eop: EOP table of either kind.
        jd: Julian Date [UTC].
        extrapolation: What to return outside the table: the end value
            (``HOLD``) or zero (``ZERO``).

    Returns:
        UT1-UTC [s].

    Examples:
        ```python
        from astroframes.eop import EOPKind, zero_eop, get_ut1_utc
        eop = zero_eop(EOPKind.IAU1980)
        ut1_utc = get_ut1_utc(eop, 2451545.0)
        ```
    """
    return _sample(eop.ut1_utc, _bracket(eop, jd), extrapolation)


def get_pm(
    eop: EOPData,
    jd: JulianDateLike,
    extrapolation: EOPExtrapolation = EOPExtrapolation.HOLD,
) -> tuple[Array, Array]:
    """Pole coordinates ``(x_p, y_p)`` [rad] at a UTC Julian Date."""
    b = _bracket(eop, jd)
    return _sample(eop.pm_x, b, extrapolation), _sample(eop.pm_y, b, extrapolation)


def get_lod(
    eop: EOPData,
    jd: JulianDateLike,
    extrapolation: EOPExtrapolation = EOPExtrapolation.HOLD,
) -> Array:
    """Excess length of day [s] at a UTC Julian Date."""
    return _sample(eop.lod, _bracket(eop, jd), extrapolation)


def get_nutation_corrections(
    eop: EOPData,
    jd: JulianDateLike,
    extrapolation: EOPExtrapolation = EOPExtrapolation.HOLD,
) -> tuple[Array, Array]:
    """Celestial pole corrections at a UTC Julian Date.

    The pair depends on the table kind: ``(dPsi, dEps)`` for
    :class:`EOPDataIAU1980` and ``(dX, dY)`` for :class:`EOPDataIAU2000A`.

    Args:
        eop: EOP table.
        jd: Julian Date [UTC].
        extrapolation: Out-of-range behaviour, as in :func:`get_ut1_utc`.

    Returns:
        The two corrections [rad].

    Raises:
        TypeError: If *eop* is not an EOP table.
    """
    if isinstance(eop, EOPDataIAU1980):
        first, second = eop.dPsi, eop.dEps
    elif isinstance(eop, EOPDataIAU2000A):
        first, second = eop.dX, eop.dY
    else:
        raise TypeError(f"Unsupported EOP record type {type(eop).__name__}.")
    b = _bracket(eop, jd)
    return _sample(first, b, extrapolation), _sample(second, b, extrapolation)
