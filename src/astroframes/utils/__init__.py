"""Shared utility functions for astroframes.

Provides angle conversion helpers and EOP cache directory management.
"""

from astroframes.utils._angle import from_radians, to_radians
from astroframes.utils.caching import (
    file_age_seconds,
    get_cache_dir,
    get_eop_cache_dir,
    is_file_stale,
)

__all__ = [
    "file_age_seconds",
    "from_radians",
    "get_cache_dir",
    "get_eop_cache_dir",
    "is_file_stale",
    "to_radians",
]
