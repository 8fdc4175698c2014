"""Fetch EOP series from the IERS data centre.

HTTP and network errors are not caught here; :func:`load_cached_eop`
decides whether a stale cache file can stand in for a failed download.
"""

from __future__ import annotations

import logging
from pathlib import Path

import httpx

from astroframes.eop._types import EOPFormat, EOPKind

logger = logging.getLogger(__name__)

_IERS_LATEST: str = "https://datacenter.iers.org/data/latestVersion"

EOP_URLS: dict[tuple[EOPKind, EOPFormat], str] = {
    (EOPKind.IAU1980, EOPFormat.C04): f"{_IERS_LATEST}/223_EOP_C04_14.62-NOW.IAU1980223.txt",
    (EOPKind.IAU2000A, EOPFormat.C04): f"{_IERS_LATEST}/224_EOP_C04_14.62-NOW.IAU2000A224.txt",
    (EOPKind.IAU1980, EOPFormat.FINALS): f"{_IERS_LATEST}/finals.all.iau1980.txt",
    (EOPKind.IAU2000A, EOPFormat.FINALS): f"{_IERS_LATEST}/finals.all.iau2000.txt",
}
"""Latest-version IERS URL for each (kind, format) pair."""

_TIMEOUT_S: float = 120.0


def eop_filename(kind: EOPKind, fmt: EOPFormat) -> str:
    """Cache filename for a series, taken from the last segment of its URL."""
    return EOP_URLS[(kind, fmt)].rsplit("/", 1)[-1]


def download_eop_file(
    filepath: str | Path,
    kind: EOPKind = EOPKind.IAU1980,
    fmt: EOPFormat = EOPFormat.C04,
    *,
    url: str | None = None,
    timeout: float = _TIMEOUT_S,
) -> Path:
    """Save the current IERS series of the given kind and format to *filepath*.

    Missing parent directories are created.  Nothing is written unless the
    request succeeds.

    Args:
        filepath: Where to write the file.
        kind: ``IAU1980`` (dPsi/dEps) or ``IAU2000A`` (dX/dY) corrections.
        fmt: ``C04`` or ``FINALS`` layout.
        url: Fetch from this URL instead of :data:`EOP_URLS`.
        timeout: Request timeout [s].

    Returns:
        Absolute path of the written file.

    Raises:
        httpx.HTTPStatusError: The server answered with an error status.
        httpx.TransportError: The request failed at the network level.
    """
    target = Path(filepath)
    target.parent.mkdir(parents=True, exist_ok=True)
    source = EOP_URLS[(kind, fmt)] if url is None else url

    logger.info("Downloading EOP data from %s", source)
    with httpx.Client(timeout=timeout, follow_redirects=True) as client:
        response = client.get(source)
        response.raise_for_status()

    target.write_text(response.text, encoding="utf-8")
    logger.info("EOP data written to %s", target)
    return target.resolve()
