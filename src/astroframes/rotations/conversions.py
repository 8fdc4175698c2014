"""Array-level kernels shared by :class:`Quaternion` and :class:`RotationMatrix`.

The kernels take and return bare JAX arrays so the two rotation classes can
both use them without importing each other at module load.

Quaternions are scalar-first ``[w, x, y, z]``.  Both representations are
frame rotations, so the product ``q1 * q2`` matches ``R(q2) @ R(q1)``.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp


# ---------------------------------------------------------------------------
# Quaternion <-> Rotation Matrix
# ---------------------------------------------------------------------------

def _cross_matrix(v: jax.Array) -> jax.Array:
    return jnp.array([
        [0.0, -v[2], v[1]],
        [v[2], 0.0, -v[0]],
        [-v[1], v[0], 0.0],
    ])


def quaternion_to_rotation_matrix(q: jax.Array) -> jax.Array:
    """Frame-rotation matrix of a unit quaternion.

    ``R = (w^2 - |v|^2) I + 2 v v^T - 2 w [v]x`` with ``v = [x, y, z]``.

    Args:
        q (jax.Array): Quaternion ``[w, x, y, z]``.

    Returns:
        jnp.ndarray: Rotation matrix of shape ``(3, 3)``.
    """
    w, v = q[0], q[1:]
    return (
        (w * w - jnp.dot(v, v)) * jnp.eye(3, dtype=q.dtype)
        + 2.0 * jnp.outer(v, v)
        - 2.0 * w * _cross_matrix(v)
    )


def rotation_matrix_to_quaternion(R: jax.Array) -> jax.Array:
    """Unit quaternion of a frame-rotation matrix.

    Builds the four Shepperd candidates ``4 q_k q`` (one per component
    ``q_k``) and keeps the one whose ``q_k`` is largest, which avoids
    dividing by a small number.  The result is renormalized and its scalar
    part made non-negative, so matrices that are orthonormal only to first
    order still give a unit quaternion.

    Args:
        R (jax.Array): Rotation matrix of shape ``(3, 3)``.

    Returns:
        jnp.ndarray: Quaternion ``[w, x, y, z]``.
    """
    trace = R[0, 0] + R[1, 1] + R[2, 2]
    diag = jnp.array([
        1.0 + trace,
        1.0 + 2.0 * R[0, 0] - trace,
        1.0 + 2.0 * R[1, 1] - trace,
        1.0 + 2.0 * R[2, 2] - trace,
    ])

    dx = R[1, 2] - R[2, 1]
    dy = R[2, 0] - R[0, 2]
    dz = R[0, 1] - R[1, 0]
    sxy = R[0, 1] + R[1, 0]
    sxz = R[2, 0] + R[0, 2]
    syz = R[1, 2] + R[2, 1]

    # Row k is 4 * q_k * q
    candidates = jnp.array([
        [diag[0], dx, dy, dz],
        [dx, diag[1], sxy, sxz],
        [dy, sxy, diag[2], syz],
        [dz, sxz, syz, diag[3]],
    ])

    q = candidates[jnp.argmax(diag)]
    q = q / jnp.linalg.norm(q)
    return jnp.where(q[0] < 0.0, -q, q)


# ---------------------------------------------------------------------------
# Quaternion algebra
# ---------------------------------------------------------------------------

def quaternion_multiply(q1: jax.Array, q2: jax.Array) -> jax.Array:
    """Normalized Hamilton product ``q1 * q2``.

    Args:
        q1 (jax.Array): Left quaternion ``[w, x, y, z]``.
        q2 (jax.Array): Right quaternion ``[w, x, y, z]``.

    Returns:
        jnp.ndarray: Unit product quaternion.
    """
    w1, v1 = q1[0], q1[1:]
    w2, v2 = q2[0], q2[1:]

    product = jnp.concatenate([
        jnp.atleast_1d(w1 * w2 - jnp.dot(v1, v2)),
        w1 * v2 + w2 * v1 + jnp.cross(v1, v2),
    ])
    return product / jnp.linalg.norm(product)


def quaternion_conjugate(q: jax.Array) -> jax.Array:
    """Conjugate ``[w, -x, -y, -z]``, the inverse of a unit quaternion."""
    return jnp.concatenate([q[:1], -q[1:]])
