import jax.numpy as jnp
import pytest

from astroframes.config import set_dtype
from astroframes.constants import AS2RAD, MAS2RAD
from astroframes.eop import static_eop_iau1980, static_eop_iau2000a
from astroframes.time import caldate_to_jd

# Module-level reference arrays in the test files are built at collection time
set_dtype(jnp.float64)


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision before every test.

    With pytest-xdist, each worker process starts with the default float32.
    This fixture ensures all tests get float64 unless they explicitly override
    it (e.g. test_config.py has its own autouse fixture that sets float32).
    """
    set_dtype(jnp.float64)


# ---------------------------------------------------------------------------
# Vallado, Fundamentals of Astrodynamics (4th Ed.), Example 3-15
# ---------------------------------------------------------------------------


@pytest.fixture
def vallado_jd():
    """2004-04-06 07:51:28.386009 UTC."""
    return caldate_to_jd(2004, 4, 6, 7, 51, 28.386009)


@pytest.fixture
def vallado_eop_fk5():
    return static_eop_iau1980(
        pm_x=-0.140682 * AS2RAD,
        pm_y=0.333309 * AS2RAD,
        ut1_utc=-0.4399619,
        lod=0.0015563,
        dPsi=-0.052195 * AS2RAD,
        dEps=-0.003875 * AS2RAD,
    )


@pytest.fixture
def vallado_eop_iau2006():
    return static_eop_iau2000a(
        pm_x=-0.140682 * AS2RAD,
        pm_y=0.333309 * AS2RAD,
        ut1_utc=-0.4399619,
        lod=0.0015563,
        dX=-0.205 * MAS2RAD,
        dY=-0.136 * MAS2RAD,
    )


@pytest.fixture
def r_itrf():
    """Position in ITRF [km]."""
    return jnp.array([-1033.4793830, 7901.2952754, 6380.3565958])


@pytest.fixture
def v_itrf():
    """Velocity in ITRF [km/s]."""
    return jnp.array([-3.225636520, -2.872451450, 5.531924446])
