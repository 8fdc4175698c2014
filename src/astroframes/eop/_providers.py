"""Factory functions for creating EOP records.

- :func:`static_eop_iau1980` / :func:`static_eop_iau2000a`: constant values,
  useful for testing or when the values for one epoch are known.
- :func:`zero_eop`: all-zero record of either kind.
- :func:`load_eop_from_file`: load an IERS finals or C04 file.
- :func:`load_cached_eop`: load from a local cache, downloading fresh data
  from IERS when stale.
"""

from __future__ import annotations

import logging
from pathlib import Path

import jax.numpy as jnp

from astroframes.config import get_dtype
from astroframes.eop._download import download_eop_file, eop_filename
from astroframes.eop._parsers import parse_c04_file, parse_finals_file
from astroframes.eop._types import (
    EOPData,
    EOPDataIAU1980,
    EOPDataIAU2000A,
    EOPFormat,
    EOPKind,
)
from astroframes.utils.caching import get_eop_cache_dir, is_file_stale

logger = logging.getLogger(__name__)

_DEFAULT_MAX_AGE_DAYS: float = 7.0
"""Default maximum age for cached EOP data in days."""


def static_eop_iau1980(
    pm_x: float = 0.0,
    pm_y: float = 0.0,
    ut1_utc: float = 0.0,
    lod: float = 0.0,
    dPsi: float = 0.0,
    dEps: float = 0.0,
    mjd_min: float = 0.0,
    mjd_max: float = 99999.0,
) -> EOPDataIAU1980:
    """Create an IAU-1980 record with constant values across the MJD range.

    The record holds two identical points (at mjd_min and mjd_max), so
    interpolation returns the constant everywhere.

    Args:
        pm_x: Polar motion x-component [rad]. Default: 0.0.
        pm_y: Polar motion y-component [rad]. Default: 0.0.
        ut1_utc: UT1-UTC offset [seconds]. Default: 0.0.
        lod: Length of day excess [seconds]. Default: 0.0.
        dPsi: Nutation correction in longitude [rad]. Default: 0.0.
        dEps: Nutation correction in obliquity [rad]. Default: 0.0.
        mjd_min: Start of the valid MJD range. Default: 0.0.
        mjd_max: End of the valid MJD range. Default: 99999.0.

    Returns:
        EOPDataIAU1980 with constant values.

    Examples:
        ```python
        from astroframes.constants import AS2RAD
        from astroframes.eop import static_eop_iau1980
        eop = static_eop_iau1980(pm_x=-0.140682 * AS2RAD, ut1_utc=-0.4399619)
        ```
    """
    dtype = get_dtype()

    def _pair(value: float):
        return jnp.array([value, value], dtype=dtype)

    return EOPDataIAU1980(
        mjd=jnp.array([mjd_min, mjd_max], dtype=dtype),
        pm_x=_pair(pm_x),
        pm_y=_pair(pm_y),
        ut1_utc=_pair(ut1_utc),
        lod=_pair(lod),
        dPsi=_pair(dPsi),
        dEps=_pair(dEps),
        mjd_min=jnp.array(mjd_min, dtype=dtype),
        mjd_max=jnp.array(mjd_max, dtype=dtype),
    )


def static_eop_iau2000a(
    pm_x: float = 0.0,
    pm_y: float = 0.0,
    ut1_utc: float = 0.0,
    lod: float = 0.0,
    dX: float = 0.0,
    dY: float = 0.0,
    mjd_min: float = 0.0,
    mjd_max: float = 99999.0,
) -> EOPDataIAU2000A:
    """Create an IAU-2000A record with constant values across the MJD range.

    Args:
        pm_x: Polar motion x-component [rad]. Default: 0.0.
        pm_y: Polar motion y-component [rad]. Default: 0.0.
        ut1_utc: UT1-UTC offset [seconds]. Default: 0.0.
        lod: Length of day excess [seconds]. Default: 0.0.
        dX: Celestial pole offset X [rad]. Default: 0.0.
        dY: Celestial pole offset Y [rad]. Default: 0.0.
        mjd_min: Start of the valid MJD range. Default: 0.0.
        mjd_max: End of the valid MJD range. Default: 99999.0.

    Returns:
        EOPDataIAU2000A with constant values.
    """
    dtype = get_dtype()

    def _pair(value: float):
        return jnp.array([value, value], dtype=dtype)

    return EOPDataIAU2000A(
        mjd=jnp.array([mjd_min, mjd_max], dtype=dtype),
        pm_x=_pair(pm_x),
        pm_y=_pair(pm_y),
        ut1_utc=_pair(ut1_utc),
        lod=_pair(lod),
        dX=_pair(dX),
        dY=_pair(dY),
        mjd_min=jnp.array(mjd_min, dtype=dtype),
        mjd_max=jnp.array(mjd_max, dtype=dtype),
    )


def zero_eop(kind: EOPKind | str = EOPKind.IAU1980) -> EOPData:
    """Create an all-zero record of the requested kind.

    Passing it to the resolver binds the shared frames (ITRF, GCRF) to the
    matching theory without applying any Earth orientation correction.

    Args:
        kind: ``EOPKind.IAU1980`` or ``EOPKind.IAU2000A`` (or their values).

    Returns:
        EOP record with all values set to zero.
    """
    kind = EOPKind(kind)
    if kind is EOPKind.IAU1980:
        return static_eop_iau1980()
    return static_eop_iau2000a()


def load_eop_from_file(
    filepath: str | Path,
    kind: EOPKind | str = EOPKind.IAU1980,
    fmt: EOPFormat | str = EOPFormat.C04,
) -> EOPData:
    """Load EOP data from an IERS file.

    Args:
        filepath: Path to an IERS finals or C04 file.
        kind: Convention of the two nutation columns.  ``IAU1980`` files
            carry dPsi/dEps, ``IAU2000A`` files carry dX/dY.
        fmt: File layout, ``EOPFormat.FINALS`` or ``EOPFormat.C04``.

    Returns:
        EOP record of the requested kind, ready for JIT-compatible lookups.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If no valid EOP data is found.

    Examples:
        ```python
        from astroframes.eop import EOPFormat, EOPKind, load_eop_from_file
        eop = load_eop_from_file("finals.all.iau2000.txt", EOPKind.IAU2000A, EOPFormat.FINALS)
        ```
    """
    kind = EOPKind(kind)
    fmt = EOPFormat(fmt)
    filepath = Path(filepath)
    if not filepath.exists():
        raise FileNotFoundError(f"EOP file not found: {filepath}")

    if fmt is EOPFormat.FINALS:
        columns = parse_finals_file(filepath)
    else:
        columns = parse_c04_file(filepath)
    mjds, pm_xs, pm_ys, ut1_utcs, lods, corr_1s, corr_2s = columns
    logger.debug("Loaded %d EOP rows from %s", len(mjds), filepath)

    dtype = get_dtype()
    mjd = jnp.array(mjds, dtype=dtype)
    common = dict(
        mjd=mjd,
        pm_x=jnp.array(pm_xs, dtype=dtype),
        pm_y=jnp.array(pm_ys, dtype=dtype),
        ut1_utc=jnp.array(ut1_utcs, dtype=dtype),
        lod=jnp.array(lods, dtype=dtype),
        mjd_min=mjd[0],
        mjd_max=mjd[-1],
    )
    corr_1 = jnp.array(corr_1s, dtype=dtype)
    corr_2 = jnp.array(corr_2s, dtype=dtype)

    if kind is EOPKind.IAU1980:
        return EOPDataIAU1980(dPsi=corr_1, dEps=corr_2, **common)
    return EOPDataIAU2000A(dX=corr_1, dY=corr_2, **common)


def load_cached_eop(
    kind: EOPKind | str = EOPKind.IAU1980,
    filepath: str | Path | None = None,
    *,
    fmt: EOPFormat | str = EOPFormat.C04,
    max_age_days: float = _DEFAULT_MAX_AGE_DAYS,
) -> EOPData:
    """Load EOP data from a local cache, downloading fresh data when stale.

    If the cached file is missing or older than *max_age_days*, a fresh copy
    is downloaded from IERS.  When the download fails but an older cached
    file exists, that file is used and a warning is logged; with no cached
    file to fall back on, the download error is raised.

    Args:
        kind: Convention of the EOP series to fetch.
        filepath: Path to the cached EOP file.  When ``None`` (the default),
            uses ``<cache_dir>/eop/<IERS filename>``.
        fmt: File layout to fetch. Default: ``EOPFormat.C04``.
        max_age_days: Maximum acceptable age of the cached file in days.
            Defaults to 7.

    Returns:
        EOP record loaded from the cached (or freshly downloaded) file.

    Raises:
        httpx.HTTPError: If the download fails and no cached copy exists.

    Examples:
        ```python
        from astroframes.eop import EOPKind, load_cached_eop
        eop = load_cached_eop(EOPKind.IAU2000A, max_age_days=1.0)
        ```
    """
    kind = EOPKind(kind)
    fmt = EOPFormat(fmt)
    if filepath is None:
        filepath = get_eop_cache_dir() / eop_filename(kind, fmt)
    else:
        filepath = Path(filepath)

    max_age_seconds = max_age_days * 86400.0

    if is_file_stale(filepath, max_age_seconds):
        try:
            download_eop_file(filepath, kind, fmt)
        except Exception:
            if not filepath.exists():
                raise
            logger.warning(
                "Failed to refresh EOP data; using cached file %s.",
                filepath,
                exc_info=True,
            )

    return load_eop_from_file(filepath, kind, fmt)
