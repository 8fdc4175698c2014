"""Quaternion rotation representation.

Provides the ``Quaternion`` class representing a frame rotation as a unit
quaternion in scalar-first convention ``[w, x, y, z]``.  A quaternion and
the ``RotationMatrix`` built from it describe the same rotation, so the
resolver can hand back either one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import jax
import jax.numpy as jnp

from astroframes.config import get_dtype, get_rotation_epsilon

if TYPE_CHECKING:
    from astroframes.rotations.rotation_matrix import RotationMatrix


class Quaternion:
    """Unit quaternion representing a frame rotation.

    Internal storage is a shape ``(4,)`` array in scalar-first order
    ``[w, x, y, z]``.  The quaternion is normalized on construction.
    Registered as a JAX pytree with the data array as the sole leaf.

    Args:
        s (float): Scalar (real) component.
        v1 (float): First vector (imaginary) component.
        v2 (float): Second vector (imaginary) component.
        v3 (float): Third vector (imaginary) component.
    """

    __slots__ = ('_data',)

    def __init__(self, s: float, v1: float, v2: float, v3: float) -> None:
        _float = get_dtype()
        q = jnp.array([_float(s), _float(v1), _float(v2), _float(v3)])
        self._data = q / jnp.linalg.norm(q)

    @classmethod
    def _from_internal(cls, data: jax.Array) -> Quaternion:
        """Create from a raw JAX array without normalization."""
        obj = object.__new__(cls)
        obj._data = data
        return obj

    @classmethod
    def identity(cls) -> Quaternion:
        """Identity rotation ``[1, 0, 0, 0]``."""
        return cls._from_internal(jnp.array([1.0, 0.0, 0.0, 0.0], dtype=get_dtype()))

    # Properties

    @property
    def w(self) -> jax.Array:
        """Scalar component."""
        return self._data[0]

    @property
    def x(self) -> jax.Array:
        """First vector component."""
        return self._data[1]

    @property
    def y(self) -> jax.Array:
        """Second vector component."""
        return self._data[2]

    @property
    def z(self) -> jax.Array:
        """Third vector component."""
        return self._data[3]

    def to_vector(self) -> jax.Array:
        """Return ``[w, x, y, z]``.

        Returns:
            jnp.ndarray: Array of shape ``(4,)``.
        """
        return self._data

    # Methods

    def conjugate(self) -> Quaternion:
        """Inverse rotation of a unit quaternion.

        Returns:
            Quaternion: ``[w, -x, -y, -z]``.
        """
        from astroframes.rotations.conversions import quaternion_conjugate

        return Quaternion._from_internal(quaternion_conjugate(self._data))

    def __mul__(self, other: Quaternion) -> Quaternion:
        """Hamilton product; ``q1 * q2`` applies ``q1`` first, then ``q2``."""
        if not isinstance(other, Quaternion):
            return NotImplemented
        from astroframes.rotations.conversions import quaternion_multiply

        return Quaternion._from_internal(quaternion_multiply(self._data, other._data))

    def __eq__(self, other: object) -> bool:
        """Equal when both describe the same rotation (``q`` and ``-q`` match)."""
        if not isinstance(other, Quaternion):
            return NotImplemented
        eps = get_rotation_epsilon()
        same = jnp.all(jnp.abs(self._data - other._data) < eps)
        flipped = jnp.all(jnp.abs(self._data + other._data) < eps)
        return bool(same | flipped)

    # Conversion methods

    def to_rotation_matrix(self) -> RotationMatrix:
        """Convert to ``RotationMatrix``.

        Returns:
            RotationMatrix: Equivalent direction cosine matrix.
        """
        from astroframes.rotations.conversions import quaternion_to_rotation_matrix
        from astroframes.rotations.rotation_matrix import RotationMatrix

        return RotationMatrix._from_internal(quaternion_to_rotation_matrix(self._data))

    def to_quaternion(self) -> Quaternion:
        """Return a copy."""
        return Quaternion._from_internal(self._data)

    # String representations

    def __str__(self) -> str:
        d = self._data
        return (
            f"Quaternion: [s: {float(d[0]):.12f}, "
            f"v: [{float(d[1]):.12f}, {float(d[2]):.12f}, {float(d[3]):.12f}]]"
        )

    def __repr__(self) -> str:
        return self.__str__()


# Register as JAX pytree
jax.tree_util.register_pytree_node(
    Quaternion,
    lambda q: ((q._data,), None),
    lambda _, children: Quaternion._from_internal(children[0]),
)
