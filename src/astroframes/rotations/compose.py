"""Composition, inversion and application of frame rotations.

These helpers work uniformly over ``RotationMatrix`` and ``Quaternion`` so
the frame providers can be written once and return whichever kind the
caller asked for.
"""

from __future__ import annotations

from typing import Union

import jax
import jax.numpy as jnp
from jax.typing import ArrayLike

from astroframes.rotations.conversions import (
    quaternion_conjugate,
    quaternion_multiply,
    rotation_matrix_to_quaternion,
)
from astroframes.rotations.quaternion import Quaternion
from astroframes.rotations.rotation_matrix import RotationMatrix

Rotation = Union[RotationMatrix, Quaternion]
"""Either supported rotation representation."""

RotationKind = Union[type[RotationMatrix], type[Quaternion]]
"""The class object naming a rotation representation."""


def as_kind(kind: RotationKind, dcm: ArrayLike) -> Rotation:
    """Wrap a raw direction cosine matrix in the requested representation.

    Args:
        kind: ``RotationMatrix`` or ``Quaternion``.
        dcm: Array of shape ``(3, 3)``.

    Returns:
        The rotation as an instance of *kind*.

    Raises:
        TypeError: If *kind* is not a supported representation.
    """
    dcm = jnp.asarray(dcm)
    if kind is RotationMatrix:
        return RotationMatrix._from_internal(dcm)
    if kind is Quaternion:
        return Quaternion._from_internal(rotation_matrix_to_quaternion(dcm))
    raise TypeError(f"Unsupported rotation kind {kind!r}; use RotationMatrix or Quaternion.")


def compose(*rotations: Rotation) -> Rotation:
    """Chain frame rotations, applying the first argument first.

    For matrices the result is ``Rn @ ... @ R2 @ R1``.  For quaternions it is
    the Hamilton product ``q1 * q2 * ... * qn``; both forms describe the same
    rotation.

    Args:
        *rotations: One or more rotations of the same kind.

    Returns:
        The combined rotation, of the same kind as the inputs.

    Raises:
        TypeError: If no rotation is given or the kinds are mixed.

    Examples:
        ```python
        from astroframes.rotations import RotationMatrix, Rz, compose
        r = compose(RotationMatrix(Rz(0.1)), RotationMatrix(Rz(0.2)))
        ```
    """
    if not rotations:
        raise TypeError("compose() requires at least one rotation.")

    first = rotations[0]
    if not isinstance(first, (RotationMatrix, Quaternion)):
        raise TypeError(f"Cannot compose object of type {type(first).__name__}.")
    for r in rotations[1:]:
        if type(r) is not type(first):
            raise TypeError(
                f"Cannot compose {type(first).__name__} with {type(r).__name__}."
            )

    if isinstance(first, RotationMatrix):
        data = first.to_matrix()
        for r in rotations[1:]:
            data = r.to_matrix() @ data
        return RotationMatrix._from_internal(data)

    data = first.to_vector()
    for r in rotations[1:]:
        data = quaternion_multiply(data, r.to_vector())
    return Quaternion._from_internal(data)


def invert(rotation: Rotation) -> Rotation:
    """Inverse rotation: transpose of a matrix, conjugate of a quaternion.

    Raises:
        TypeError: If *rotation* is not a supported representation.
    """
    if isinstance(rotation, RotationMatrix):
        return RotationMatrix._from_internal(rotation.to_matrix().T)
    if isinstance(rotation, Quaternion):
        return Quaternion._from_internal(quaternion_conjugate(rotation.to_vector()))
    raise TypeError(f"Cannot invert object of type {type(rotation).__name__}.")


def apply(rotation: Rotation, v: ArrayLike) -> jax.Array:
    """Express the 3-vector *v* in the destination frame of *rotation*.

    Args:
        rotation: ``RotationMatrix`` or ``Quaternion``.
        v: Vector of shape ``(3,)``.

    Returns:
        jnp.ndarray: Rotated vector of shape ``(3,)``.
    """
    if isinstance(rotation, Quaternion):
        rotation = rotation.to_rotation_matrix()
    if not isinstance(rotation, RotationMatrix):
        raise TypeError(f"Cannot apply object of type {type(rotation).__name__}.")
    return rotation.to_matrix() @ jnp.asarray(v)
