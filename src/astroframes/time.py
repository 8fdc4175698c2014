"""Time scale helpers for frame transformations.

Epochs are carried through astroframes as Julian Dates in UTC.  The
elementary rotations need the same instant in Terrestrial Time (precession,
nutation) and in UT1 (Earth rotation), which this module derives from the
leap second table and the UT1-UTC offset.

A Julian Date near the present is about 2.45e6, so a single ``float32``
resolves it to a quarter of a day.  The frame providers therefore work on a
:class:`JulianDate`, an integral day plus a day fraction, which keeps
sub-second resolution in either precision.
"""

from __future__ import annotations

from typing import NamedTuple, Union

import jax
import jax.numpy as jnp
import numpy as np
from jax.typing import ArrayLike

from .config import get_dtype
from .constants import JD_J2000, JD_MJD_OFFSET, SECONDS_PER_DAY

TT_TAI: float = 32.184
"""TT - TAI [s], fixed by definition."""

TAI_UTC_1972: float = 10.0
"""TAI - UTC [s] before the first tabulated leap second."""

# MJD (UTC) at which each leap second takes effect, and the resulting TAI-UTC [s]
_LEAP_MJD: tuple[float, ...] = (
    41317.0, 41499.0, 41683.0, 42048.0, 42413.0, 42778.0, 43144.0,  # 1972-01 .. 1977-01
    43509.0, 43874.0, 44239.0, 44786.0, 45151.0, 45516.0, 46247.0,  # 1978-01 .. 1985-07
    47161.0, 47892.0, 48257.0, 48804.0, 49169.0, 49534.0, 50083.0,  # 1988-01 .. 1996-01
    50630.0, 51179.0, 53736.0, 54832.0, 56109.0, 57204.0, 57754.0,  # 1997-07 .. 2017-01
)
_LEAP_TAI_UTC: tuple[float, ...] = tuple(float(n) for n in range(10, 10 + len(_LEAP_MJD)))


# ---------------------------------------------------------------------------
# Split Julian Dates
# ---------------------------------------------------------------------------


class JulianDate(NamedTuple):
    """Julian Date held as an integral day and a day fraction.

    ``day`` is a whole number, exact in ``float32`` for any date of interest.
    ``fraction`` is the remainder and may fall outside ``[0, 1)`` after a time
    scale offset is added to it.

    Attributes:
        day: Integral part of the Julian Date [days].
        fraction: Fractional part of the Julian Date [days].
    """

    day: jax.Array
    fraction: jax.Array


JulianDateLike = Union[ArrayLike, JulianDate]


def split_jd(jd: JulianDateLike) -> JulianDate:
    """Split a Julian Date into its integral day and day fraction.

    Host values (Python floats, NumPy arrays) are split in ``float64`` before
    being cast to the configured dtype, so the fraction is exact to the
    input's own precision.  JAX arrays are split in their own dtype, and a
    :class:`JulianDate` is returned unchanged.

    Args:
        jd: Julian Date, scalar or array, or an already split date.

    Returns:
        The split date, in the configured dtype.

    Examples:
        ```python
        from astroframes.time import split_jd
        jd = split_jd(2453101.8274118)
        jd.day, jd.fraction  # (2453101.0, 0.8274118)
        ```
    """
    if isinstance(jd, JulianDate):
        return jd
    dtype = get_dtype()
    if isinstance(jd, jax.Array):
        day = jnp.floor(jd)
        return JulianDate(day.astype(dtype), (jd - day).astype(dtype))
    jd = np.asarray(jd, dtype=np.float64)
    day = np.floor(jd)
    return JulianDate(jnp.asarray(day, dtype=dtype), jnp.asarray(jd - day, dtype=dtype))


def days_since_j2000(jd: JulianDateLike) -> tuple[jax.Array, jax.Array]:
    """Days elapsed since J2000.0 as ``(whole, fraction)``.

    ``whole`` is an integral number of days and exact; adding the two parts
    gives the elapsed time without the loss of subtracting ``2451545`` from a
    rounded Julian Date.
    """
    jd = split_jd(jd)
    return jd.day - JD_J2000, jd.fraction


def _offset(jd: JulianDateLike, days: jax.Array) -> jax.Array | JulianDate:
    if isinstance(jd, JulianDate):
        return JulianDate(jd.day, jd.fraction + days)
    return jnp.asarray(jd, dtype=get_dtype()) + days


# ---------------------------------------------------------------------------
# Time scales
# ---------------------------------------------------------------------------
def leap_seconds_tai_utc(mjd: ArrayLike) -> jax.Array:
    """TAI-UTC in seconds at a UTC Modified Julian Date.

    Step function over the IERS Bulletin C table (1972-01-01 to
    2017-01-01).  Dates before the table give 10 s; dates after it keep the
    last value.  Works under ``jax.jit``.

    Args:
        mjd: Modified Julian Date [UTC], scalar or array.

    Returns:
        TAI-UTC [s].
    """
    dtype = get_dtype()
    mjd = jnp.asarray(mjd, dtype=dtype)

    # Number of table entries at or before mjd
    count = jnp.searchsorted(jnp.array(_LEAP_MJD, dtype=dtype), mjd, side="right")
    table = jnp.concatenate(
        [jnp.array([TAI_UTC_1972], dtype=dtype), jnp.array(_LEAP_TAI_UTC, dtype=dtype)]
    )
    return table[count]


def jd_utc_to_tt(jd_utc: JulianDateLike) -> jax.Array | JulianDate:
    """Convert a UTC Julian Date to Terrestrial Time.

    TT = UTC + (TAI-UTC) + 32.184 s.  A split :class:`JulianDate` comes back
    split, with the offset added to its fraction.

    Args:
        jd_utc: Julian Date [UTC].

    Returns:
        Julian Date [TT].

    Examples:
        ```python
        from astroframes.time import jd_utc_to_tt
        jd_tt = jd_utc_to_tt(2453101.827411)
        ```
    """
    tai_utc = leap_seconds_tai_utc(jd_to_mjd(jd_utc))
    return _offset(jd_utc, (tai_utc + TT_TAI) / SECONDS_PER_DAY)


def jd_utc_to_ut1(jd_utc: JulianDateLike, ut1_utc: ArrayLike) -> jax.Array | JulianDate:
    """Convert a UTC Julian Date to UT1, keeping a split date split.

    Args:
        jd_utc: Julian Date [UTC].
        ut1_utc: UT1-UTC offset [s], usually read from EOP data.

    Returns:
        Julian Date [UT1].
    """
    return _offset(jd_utc, jnp.asarray(ut1_utc, dtype=get_dtype()) / SECONDS_PER_DAY)


def caldate_to_mjd(
    year: ArrayLike,
    month: ArrayLike,
    day: ArrayLike,
    hour: ArrayLike = 0,
    minute: ArrayLike = 0,
    second: ArrayLike = 0.0,
) -> jax.Array:
    """Modified Julian Date of a Gregorian calendar date (year 1583 onward).

    Args:
        year: Year.
        month: Month, 1-12.
        day: Day of month.
        hour: Hour. Default: ``0``
        minute: Minute. Default: ``0``
        second: Second, may be fractional. Default: ``0.0``

    Returns:
        Modified Julian Date.

    References:

        1. O. Montenbruck and E. Gill, *Satellite Orbits: Models, Methods and
           Applications*, 2012, Sec. A.1.1.
    """
    day_number, seconds_of_day = _day_number(year, month, day, hour, minute, second)
    return day_number + seconds_of_day / SECONDS_PER_DAY


def _day_number(year, month, day, hour, minute, second) -> tuple[jax.Array, jax.Array]:
    dtype = get_dtype()

    # January and February count as months 13 and 14 of the previous year
    early = month <= 2
    y = jnp.where(early, year - 1, year)
    m = jnp.where(early, month + 12, month)

    leap_days = jnp.floor(y / 400) - jnp.floor(y / 100) + jnp.floor(y / 4)
    day_number = jnp.floor(365 * y - 679004 + leap_days + jnp.floor(30.6001 * (m + 1)) + day)

    seconds_of_day = jnp.asarray(hour * 3600.0 + minute * 60.0 + second, dtype=dtype)
    return day_number.astype(dtype), seconds_of_day


def caldate_to_jd(
    year: ArrayLike,
    month: ArrayLike,
    day: ArrayLike,
    hour: ArrayLike = 0,
    minute: ArrayLike = 0,
    second: ArrayLike = 0.0,
) -> jax.Array:
    """Julian Date of a Gregorian calendar date.

    Same arguments as :func:`caldate_to_mjd`.

    Examples:
        ```python
        from astroframes.time import caldate_to_jd
        jd = caldate_to_jd(2004, 4, 6, 7, 51, 28.386009)
        ```
    """
    return caldate_to_mjd(year, month, day, hour, minute, second) + JD_MJD_OFFSET


def caldate_to_split_jd(
    year: ArrayLike,
    month: ArrayLike,
    day: ArrayLike,
    hour: ArrayLike = 0,
    minute: ArrayLike = 0,
    second: ArrayLike = 0.0,
) -> JulianDate:
    """Split Julian Date of a Gregorian calendar date.

    Same arguments as :func:`caldate_to_mjd`.  The time of day goes into the
    fraction only, so the result resolves a few milliseconds even in
    ``float32``.

    Examples:
        ```python
        from astroframes.time import caldate_to_split_jd
        jd = caldate_to_split_jd(2004, 4, 6, 7, 51, 28.386009)
        ```
    """
    day_number, seconds_of_day = _day_number(year, month, day, hour, minute, second)
    # JD = MJD + 2400000.5, and the half day joins the fraction
    return JulianDate(day_number + 2400000.0, 0.5 + seconds_of_day / SECONDS_PER_DAY)


def jd_to_mjd(jd: JulianDateLike) -> jax.Array:
    """Julian Date to Modified Julian Date."""
    if isinstance(jd, JulianDate):
        return (jd.day - JD_MJD_OFFSET) + jd.fraction
    return jnp.asarray(jd, dtype=get_dtype()) - JD_MJD_OFFSET


def mjd_to_jd(mjd: ArrayLike) -> jax.Array:
    """Modified Julian Date to Julian Date."""
    return jnp.asarray(mjd, dtype=get_dtype()) + JD_MJD_OFFSET
