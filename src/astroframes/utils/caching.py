"""On-disk cache location for downloaded EOP tables.

Files live under ``$ASTROFRAMES_CACHE`` when that variable is set and under
``~/.cache/astroframes`` otherwise.
"""

from __future__ import annotations

import os
import time
from pathlib import Path

_ENV_VAR = "ASTROFRAMES_CACHE"


def get_cache_dir(subdirectory: str | None = None) -> Path:
    """Cache root, or a named folder inside it.  Created on first use.

    Args:
        subdirectory: Folder name below the root, e.g. ``"eop"``.

    Returns:
        Path of the (existing) directory.
    """
    override = os.environ.get(_ENV_VAR)
    root = Path(override) if override is not None else Path.home() / ".cache" / "astroframes"
    target = root if subdirectory is None else root / subdirectory
    target.mkdir(parents=True, exist_ok=True)
    return target


def get_eop_cache_dir() -> Path:
    """Folder holding cached IERS files, ``<cache>/eop``."""
    return get_cache_dir("eop")


def file_age_seconds(filepath: str | Path) -> float:
    """Seconds since *filepath* was last modified, never negative.

    Raises:
        FileNotFoundError: If *filepath* does not exist.
    """
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"No such file: '{path}'")
    return max(0.0, time.time() - path.stat().st_mtime)


def is_file_stale(filepath: str | Path, max_age_seconds: float) -> bool:
    """``True`` when *filepath* is missing or was modified more than *max_age_seconds* ago."""
    path = Path(filepath)
    return not path.exists() or file_age_seconds(path) > max_age_seconds
