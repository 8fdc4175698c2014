"""Frame rotation representations.

Provides two interconvertible representation types:

- :class:`RotationMatrix` -- 3x3 direction cosine matrix
- :class:`Quaternion` -- unit quaternion (scalar-first ``[w, x, y, z]``)

together with :func:`compose`, :func:`invert`, :func:`apply` and
:func:`as_kind`, and the elementary matrices :func:`Rx`, :func:`Ry`,
:func:`Rz`, :func:`angle_to_dcm` and :func:`smallangle_to_dcm`.
"""

from .rotation_matrices import (
    Rx,
    Ry,
    Rz,
    angle_to_dcm,
    smallangle_to_dcm,
)

from .quaternion import Quaternion
from .rotation_matrix import RotationMatrix
from .compose import Rotation, RotationKind, apply, as_kind, compose, invert

__all__ = [
    # Elementary rotations
    "Rx",
    "Ry",
    "Rz",
    "angle_to_dcm",
    "smallangle_to_dcm",
    # Representations
    "Quaternion",
    "RotationMatrix",
    "Rotation",
    "RotationKind",
    # Operations
    "apply",
    "as_kind",
    "compose",
    "invert",
]
