"""Exception types raised by astroframes.

Every error is deterministic in its inputs, so none of them is retried
internally.  Each class also derives from the closest built-in exception
so callers can catch either the specific type or the generic one.
"""

from __future__ import annotations


class AstroframesError(Exception):
    """Base class for all astroframes errors."""


class FrameTheoryMismatch(AstroframesError, ValueError):
    """Origin and destination frames belong to different theories.

    Raised when an IAU-76/FK5 frame is paired with an IAU-2006/2010 frame,
    either directly or because the supplied EOP record binds a shared frame
    (ITRF, GCRF) to the other theory.
    """

    def __init__(self, origin, destination, detail: str | None = None) -> None:
        self.origin = origin
        self.destination = destination
        msg = f"Cannot transform between {origin} and {destination}: frame theories differ."
        if detail:
            msg = f"{msg} {detail}"
        super().__init__(msg)


class EopShapeMismatch(AstroframesError, TypeError):
    """The supplied EOP record does not match the theory in use."""

    def __init__(self, expected: str, received: str) -> None:
        self.expected = expected
        self.received = received
        super().__init__(f"Expected EOP data of type {expected}, got {received}.")


class InvalidEccentricity(AstroframesError, ValueError):
    """Eccentricity is outside the elliptical range ``[0, 1)``."""

    def __init__(self, e: float, detail: str | None = None) -> None:
        self.e = e
        msg = f"Invalid eccentricity {e}: must be in [0, 1)."
        if detail:
            msg = f"{msg} {detail}"
        super().__init__(msg)


class DimensionError(AstroframesError, ValueError):
    """A vector input does not have exactly three components."""

    def __init__(self, name: str, shape) -> None:
        self.name = name
        self.shape = shape
        super().__init__(f"'{name}' must have exactly 3 components, got shape {shape}.")
