"""
astroframes computes rotations between Earth-fixed and inertial reference frames in JAX.
"""

from .constants import (
    DEG2RAD,
    RAD2DEG,
    AS2RAD,
    RAD2AS,
    MAS2RAD,
    JD_MJD_OFFSET,
    JD_J2000,
    MJD2000,
    R_EARTH,
    GM_EARTH,
    OMEGA_EARTH,
    WGS84_a,
    WGS84_f,
)

from .config import set_dtype, get_dtype

from .errors import (
    AstroframesError,
    EopShapeMismatch,
    FrameTheoryMismatch,
    InvalidEccentricity,
    DimensionError,
)

from .rotations import (
    Quaternion,
    RotationMatrix,
    apply,
    compose,
    invert,
)

from .eop import (
    EOPDataIAU1980,
    EOPDataIAU2000A,
    EOPKind,
    load_cached_eop,
    load_eop_from_file,
    static_eop_iau1980,
    static_eop_iau2000a,
    zero_eop,
)

from .frames import (
    Frame,
    Theory,
    resolve,
    resolve_ecef_to_ecef,
    resolve_ecef_to_eci,
    resolve_eci_to_ecef,
    resolve_eci_to_eci,
    OrbitStateVector,
    transport,
    transport_ecef_to_ecef,
    transport_ecef_to_eci,
    transport_eci_to_ecef,
    transport_eci_to_eci,
    KeplerianElements,
    change_oe_frame,
)

from .coordinates import (
    kepler_to_rv,
    rv_to_kepler,
    state_koe_to_eci,
    state_eci_to_koe,
)

__all__ = [
    # Constants
    "DEG2RAD",
    "RAD2DEG",
    "AS2RAD",
    "RAD2AS",
    "MAS2RAD",
    "JD_MJD_OFFSET",
    "JD_J2000",
    "MJD2000",
    "R_EARTH",
    "GM_EARTH",
    "OMEGA_EARTH",
    # Config
    "set_dtype",
    "get_dtype",
    # Errors
    "AstroframesError",
    "EopShapeMismatch",
    "FrameTheoryMismatch",
    "InvalidEccentricity",
    "DimensionError",
    # Rotations
    "Quaternion",
    "RotationMatrix",
    "apply",
    "compose",
    "invert",
    # EOP
    "EOPDataIAU1980",
    "EOPDataIAU2000A",
    "EOPKind",
    "load_cached_eop",
    "load_eop_from_file",
    "static_eop_iau1980",
    "static_eop_iau2000a",
    "zero_eop",
    # Frames
    "Frame",
    "Theory",
    "resolve",
    "resolve_ecef_to_ecef",
    "resolve_ecef_to_eci",
    "resolve_eci_to_ecef",
    "resolve_eci_to_eci",
    "OrbitStateVector",
    "transport",
    "transport_ecef_to_ecef",
    "transport_ecef_to_eci",
    "transport_eci_to_ecef",
    "transport_eci_to_eci",
    "KeplerianElements",
    "change_oe_frame",
    # Coordinates
    "kepler_to_rv",
    "rv_to_kepler",
    "state_koe_to_eci",
    "state_eci_to_koe",
]
