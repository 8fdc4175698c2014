"""Frame tags and frame theories.

:class:`Frame` is a closed set of reference-frame tags.  Each tag belongs to
one of two reduction theories (:class:`Theory`), except ITRF and GCRF which
are realised by both.
"""

from __future__ import annotations

import enum


class Theory(enum.Enum):
    """Earth orientation reduction theory.

    Attributes:
        FK5: IAU-76/FK5 precession, IAU-1980 nutation.
        IAU2006: IAU-2006 precession, IAU-2000A nutation (IERS 2010).
    """

    FK5 = "fk5"
    IAU2006 = "iau2006"


class Frame(enum.Enum):
    """Reference frame tag.

    Earth-fixed: ``ITRF``, ``PEF``, ``TIRS``.
    Inertial: ``TOD``, ``MOD``, ``MOD06``, ``TEME``, ``J2000``, ``GCRF``,
    ``CIRS``, ``ERS``, ``MJ2000``.
    """

    ITRF = "ITRF"
    PEF = "PEF"
    TIRS = "TIRS"
    TOD = "TOD"
    MOD = "MOD"
    MOD06 = "MOD06"
    TEME = "TEME"
    J2000 = "J2000"
    GCRF = "GCRF"
    CIRS = "CIRS"
    ERS = "ERS"
    MJ2000 = "MJ2000"

    def __str__(self) -> str:
        return self.value

    @property
    def is_ecef(self) -> bool:
        """Whether the frame rotates with the Earth."""
        return self in ECEF_FRAMES

    @property
    def is_of_date(self) -> bool:
        """Whether the frame orientation depends on the epoch."""
        return self in OF_DATE_FRAMES

    @property
    def theory(self) -> Theory | None:
        """The theory this frame belongs to, or ``None`` for ITRF and GCRF."""
        if self in FK5_FRAMES:
            return Theory.FK5
        if self in IAU2006_FRAMES:
            return Theory.IAU2006
        return None


ECEF_FRAMES: frozenset[Frame] = frozenset({Frame.ITRF, Frame.PEF, Frame.TIRS})
"""Earth-fixed frames."""

ECI_FRAMES: frozenset[Frame] = frozenset(Frame) - ECEF_FRAMES
"""Inertial frames."""

FK5_FRAMES: frozenset[Frame] = frozenset(
    {Frame.PEF, Frame.TOD, Frame.MOD, Frame.TEME, Frame.J2000}
)
"""Frames that only exist in the IAU-76/FK5 reduction."""

IAU2006_FRAMES: frozenset[Frame] = frozenset(
    {Frame.TIRS, Frame.CIRS, Frame.ERS, Frame.MOD06, Frame.MJ2000}
)
"""Frames that only exist in the IAU-2006/2010 reduction."""

SHARED_FRAMES: frozenset[Frame] = frozenset({Frame.ITRF, Frame.GCRF})
"""Frames realised by both theories."""

OF_DATE_FRAMES: frozenset[Frame] = frozenset(
    {Frame.TOD, Frame.MOD, Frame.TEME, Frame.CIRS, Frame.ERS, Frame.MOD06}
)
"""Inertial frames whose orientation is tied to the epoch."""
