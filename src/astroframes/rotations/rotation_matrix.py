"""Direction cosine matrix rotation representation.

Provides the ``RotationMatrix`` class, the default output of the frame
resolver.  Matrices produced by the frame providers are wrapped with
``_from_internal`` and skip SO(3) validation, since first-order polar
motion matrices are only orthonormal to first order.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import jax
import jax.numpy as jnp

from astroframes.config import get_dtype, get_rotation_epsilon

if TYPE_CHECKING:
    from astroframes.rotations.quaternion import Quaternion


def _is_so3(matrix: jax.Array, tol: float = 1e-6) -> bool:
    """Check orthogonality (R^T R ~ I) and positive determinant."""
    rtrt = matrix.T @ matrix
    orth_err = jnp.max(jnp.abs(rtrt - jnp.eye(3)))
    det = jnp.linalg.det(matrix)
    return bool(orth_err < tol and det > 0.0)


class RotationMatrix:
    """3x3 frame rotation (Direction Cosine Matrix).

    ``R @ v`` expresses a vector given in the origin frame in the
    destination frame.  Registered as a JAX pytree with the matrix as the
    sole leaf.

    Args:
        matrix (jax.Array): Array-like of shape ``(3, 3)``.
        validate (bool): Check SO(3) membership. Default: ``True``.

    Raises:
        ValueError: If ``validate=True`` and the matrix is not a proper rotation.
    """

    __slots__ = ("_data",)

    def __init__(self, matrix: jax.Array, validate: bool = True) -> None:
        data = jnp.asarray(matrix, dtype=get_dtype())
        if data.shape != (3, 3):
            raise ValueError(f"Rotation matrix must have shape (3, 3), got {data.shape}.")
        if validate and not _is_so3(data):
            raise ValueError(
                f"Matrix is not a proper rotation matrix. det={float(jnp.linalg.det(data)):.6f}"
            )
        self._data = data

    @classmethod
    def _from_internal(cls, data: jax.Array) -> RotationMatrix:
        """Create from a raw JAX array without validation."""
        obj = object.__new__(cls)
        obj._data = data
        return obj

    @classmethod
    def identity(cls) -> RotationMatrix:
        """Identity rotation."""
        return cls._from_internal(jnp.eye(3, dtype=get_dtype()))

    def to_matrix(self) -> jax.Array:
        """Return the underlying 3x3 array.

        Returns:
            jnp.ndarray: Array of shape ``(3, 3)``.
        """
        return self._data

    # Operators

    def __matmul__(self, other: jax.Array) -> jax.Array:
        v = jnp.asarray(other)
        if v.shape[-1:] != (3,):
            return NotImplemented
        return self._data @ v

    def __getitem__(self, idx: int | tuple[int, int]) -> jax.Array:
        return self._data[idx]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RotationMatrix):
            return NotImplemented
        eps = get_rotation_epsilon()
        return bool(jnp.all(jnp.abs(self._data - other._data) < eps))

    # Conversion methods

    def to_quaternion(self) -> Quaternion:
        """Convert to ``Quaternion``.

        Returns:
            Quaternion: Equivalent unit quaternion.
        """
        from astroframes.rotations.conversions import rotation_matrix_to_quaternion
        from astroframes.rotations.quaternion import Quaternion

        return Quaternion._from_internal(rotation_matrix_to_quaternion(self._data))

    def to_rotation_matrix(self) -> RotationMatrix:
        """Return a copy."""
        return RotationMatrix._from_internal(self._data)

    def transpose(self) -> RotationMatrix:
        """Inverse rotation."""
        return RotationMatrix._from_internal(self._data.T)

    # String representations

    def __str__(self) -> str:
        rows = "\n".join(
            "  [" + " ".join(f"{float(x):13.10f}" for x in row) + "]" for row in self._data
        )
        return f"RotationMatrix(\n{rows})"

    def __repr__(self) -> str:
        return self.__str__()


# Register as JAX pytree
jax.tree_util.register_pytree_node(
    RotationMatrix,
    lambda r: ((r._data,), None),
    lambda _, children: RotationMatrix._from_internal(children[0]),
)
