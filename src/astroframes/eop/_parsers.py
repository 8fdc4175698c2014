"""Parsers for IERS Earth Orientation Parameter data files.

Two layouts are supported:

- The IERS "finals" fixed-column format (``finals.all`` for IAU-1980
  nutation corrections, ``finals.all.iau2000`` for celestial pole
  offsets).  Both share the same columns; only the meaning of the two
  nutation columns differs.
- The IERS EOP C04 whitespace-separated format
  (``EOP_C04_14.62-NOW.IAU1980`` and ``.IAU2000A``).

Every parser returns parallel lists ``(mjd, pm_x, pm_y, ut1_utc, lod,
corr_1, corr_2)`` with angles in radians and times in seconds, where
``corr_1``/``corr_2`` are ``dPsi``/``dEps`` or ``dX``/``dY``.
"""

from __future__ import annotations

import math
from pathlib import Path

from astroframes.constants import AS2RAD, MAS2RAD

# Column ranges for the finals format (0-indexed Python slices)
_MJD_RANGE = slice(6, 15)
_PM_X_RANGE = slice(17, 27)
_PM_Y_RANGE = slice(36, 46)
_UT1_UTC_RANGE = slice(58, 68)
_LOD_RANGE = slice(78, 86)
_CORR_1_RANGE = slice(96, 106)
_CORR_2_RANGE = slice(115, 125)
_FINALS_LINE_LENGTH = 187

# year, month, day, MJD, x, y, UT1-UTC, LOD, corr_1, corr_2, then six error columns
_C04_COLUMNS = 16

EOPRow = tuple[float, float, float, float, float, float, float]
EOPColumns = tuple[
    list[float],
    list[float],
    list[float],
    list[float],
    list[float],
    list[float],
    list[float],
]


def parse_finals_line(line: str) -> EOPRow | None:
    """Parse a single line from an IERS finals format EOP file.

    Lines shorter than 187 characters are padded with spaces (prediction
    lines may have trailing whitespace trimmed).  Lines longer than 187
    characters or lines where required fields (MJD, PM_X, PM_Y, UT1-UTC)
    cannot be parsed are skipped (returns None).  Missing LOD and
    nutation columns become 0.0.

    Args:
        line: A single line from the finals file.

    Returns:
        Tuple of (mjd, pm_x [rad], pm_y [rad], ut1_utc [s], lod [s],
        corr_1 [rad], corr_2 [rad]), or None if the line cannot be parsed.
    """
    if len(line) > _FINALS_LINE_LENGTH:
        return None

    line = line.ljust(_FINALS_LINE_LENGTH)

    try:
        mjd = float(line[_MJD_RANGE].strip())
        pm_x = float(line[_PM_X_RANGE].strip()) * AS2RAD
        pm_y = float(line[_PM_Y_RANGE].strip()) * AS2RAD
        ut1_utc = float(line[_UT1_UTC_RANGE].strip())
    except ValueError:
        return None

    lod = _optional_float(line[_LOD_RANGE], 1.0e-3)  # ms -> s
    corr_1 = _optional_float(line[_CORR_1_RANGE], MAS2RAD)
    corr_2 = _optional_float(line[_CORR_2_RANGE], MAS2RAD)

    return mjd, pm_x, pm_y, ut1_utc, lod, corr_1, corr_2


def parse_c04_line(line: str) -> EOPRow | None:
    """Parse a single data line from an IERS EOP C04 file.

    Header lines and blank lines do not split into sixteen numeric fields
    and are skipped (returns None).

    Args:
        line: A single line from the C04 file.

    Returns:
        Tuple of (mjd, pm_x [rad], pm_y [rad], ut1_utc [s], lod [s],
        corr_1 [rad], corr_2 [rad]), or None for non-data lines.
    """
    fields = line.split()
    if len(fields) != _C04_COLUMNS:
        return None

    try:
        values = [float(f) for f in fields]
    except ValueError:
        return None

    mjd = values[3]
    pm_x = values[4] * AS2RAD
    pm_y = values[5] * AS2RAD
    ut1_utc = values[6]
    lod = values[7]
    corr_1 = values[8] * AS2RAD
    corr_2 = values[9] * AS2RAD

    return mjd, pm_x, pm_y, ut1_utc, lod, corr_1, corr_2


def _optional_float(field: str, scale: float) -> float:
    try:
        value = float(field.strip()) * scale
    except ValueError:
        return 0.0
    return 0.0 if math.isnan(value) else value


def _parse_file(filepath: str | Path, parse_line) -> EOPColumns:
    mjds: list[float] = []
    pm_xs: list[float] = []
    pm_ys: list[float] = []
    ut1_utcs: list[float] = []
    lods: list[float] = []
    corr_1s: list[float] = []
    corr_2s: list[float] = []

    with open(filepath) as f:
        for line in f:
            result = parse_line(line.rstrip("\n"))
            if result is not None:
                mjd, pm_x, pm_y, ut1_utc, lod, corr_1, corr_2 = result
                mjds.append(mjd)
                pm_xs.append(pm_x)
                pm_ys.append(pm_y)
                ut1_utcs.append(ut1_utc)
                lods.append(lod)
                corr_1s.append(corr_1)
                corr_2s.append(corr_2)

    if not mjds:
        raise ValueError(f"No valid EOP data found in {filepath}")

    return mjds, pm_xs, pm_ys, ut1_utcs, lods, corr_1s, corr_2s


def parse_finals_file(filepath: str | Path) -> EOPColumns:
    """Parse an entire IERS finals format EOP file.

    Args:
        filepath: Path to the finals file.

    Returns:
        Tuple of 7 lists: (mjd, pm_x, pm_y, ut1_utc, lod, corr_1, corr_2).
        Units match :func:`parse_finals_line`.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If no valid lines were parsed.
    """
    return _parse_file(filepath, parse_finals_line)


def parse_c04_file(filepath: str | Path) -> EOPColumns:
    """Parse an entire IERS EOP C04 file.

    Args:
        filepath: Path to the C04 file.

    Returns:
        Tuple of 7 lists: (mjd, pm_x, pm_y, ut1_utc, lod, corr_1, corr_2).
        Units match :func:`parse_c04_line`.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If no valid lines were parsed.
    """
    return _parse_file(filepath, parse_c04_line)
