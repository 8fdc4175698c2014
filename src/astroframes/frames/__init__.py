"""Frame transformations.

This sub-module resolves rotations between Earth-fixed and inertial frames
under the IAU-76/FK5 and IAU-2006/2010 theories and applies them to state
vectors and orbital elements:

- **Resolver**: :func:`resolve` picks and composes the chain of elementary
  rotations between two :class:`Frame` tags.
- **State transport**: :func:`transport` rotates position, velocity and
  acceleration, adding the Earth rotation terms between Earth-fixed and
  inertial frames.
- **Orbit elements**: :func:`change_oe_frame` expresses Keplerian elements
  in another inertial frame.
- **Elementary providers**: :mod:`.fk5`, :mod:`.teme` and :mod:`.iau2006`.
"""

from ._types import (
    ECEF_FRAMES,
    ECI_FRAMES,
    FK5_FRAMES,
    IAU2006_FRAMES,
    OF_DATE_FRAMES,
    SHARED_FRAMES,
    Frame,
    Theory,
)
from .orbit_elements import KeplerianElements, change_oe_frame
from .resolver import (
    Epoch,
    is_epoch_pair,
    resolve,
    resolve_ecef_to_ecef,
    resolve_ecef_to_eci,
    resolve_eci_to_ecef,
    resolve_eci_to_eci,
)
from .states import (
    OrbitStateVector,
    transport,
    transport_ecef_to_ecef,
    transport_ecef_to_eci,
    transport_eci_to_ecef,
    transport_eci_to_eci,
)

__all__ = [
    # Tags
    "Frame",
    "Theory",
    "ECEF_FRAMES",
    "ECI_FRAMES",
    "FK5_FRAMES",
    "IAU2006_FRAMES",
    "OF_DATE_FRAMES",
    "SHARED_FRAMES",
    # Resolver
    "Epoch",
    "is_epoch_pair",
    "resolve",
    "resolve_ecef_to_ecef",
    "resolve_ecef_to_eci",
    "resolve_eci_to_ecef",
    "resolve_eci_to_eci",
    # State transport
    "OrbitStateVector",
    "transport",
    "transport_ecef_to_ecef",
    "transport_ecef_to_eci",
    "transport_eci_to_ecef",
    "transport_eci_to_eci",
    # Orbit elements
    "KeplerianElements",
    "change_oe_frame",
]
