"""Earth Orientation Parameters (EOP) for JAX-compatible lookups.

Provides EOP data storage for both IERS nutation conventions and
interpolation using sorted JAX arrays and ``jnp.searchsorted``.  All query
functions work inside ``jax.jit`` and ``jax.vmap``.

Typical usage::

    from astroframes.eop import EOPKind, load_cached_eop, get_ut1_utc
    eop = load_cached_eop(EOPKind.IAU1980)
    ut1_utc = get_ut1_utc(eop, 2459569.5)
"""

from astroframes.eop._download import EOP_URLS, download_eop_file
from astroframes.eop._lookup import get_lod, get_nutation_corrections, get_pm, get_ut1_utc
from astroframes.eop._providers import (
    load_cached_eop,
    load_eop_from_file,
    static_eop_iau1980,
    static_eop_iau2000a,
    zero_eop,
)
from astroframes.eop._types import (
    EOPData,
    EOPDataIAU1980,
    EOPDataIAU2000A,
    EOPExtrapolation,
    EOPFormat,
    EOPKind,
)

__all__ = [
    "EOPData",
    "EOPDataIAU1980",
    "EOPDataIAU2000A",
    "EOPExtrapolation",
    "EOPFormat",
    "EOPKind",
    "EOP_URLS",
    "download_eop_file",
    "get_lod",
    "get_nutation_corrections",
    "get_pm",
    "get_ut1_utc",
    "load_cached_eop",
    "load_eop_from_file",
    "static_eop_iau1980",
    "static_eop_iau2000a",
    "zero_eop",
]
