"""Elementary frame-rotation matrices.

All matrices here are *frame* (passive) rotations: ``Rz(theta) @ v``
expresses the fixed vector ``v`` in a frame rotated by ``theta`` about z.
Chaining follows the same rule as :func:`~astroframes.rotations.compose`,
so ``angle_to_dcm(a1, a2, a3, "ZYX")`` rotates about Z first.

References:

    1. O. Montenbruck, and E. Gill, *Satellite Orbits: Models, Methods and
       Applications*, 2012, p.27.
"""

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from astroframes.utils import to_radians


def _axis_rotation(axis: int, angle: ArrayLike, use_degrees: bool) -> Array:
    # Rows/columns of the two axes spanning the rotation plane, in cyclic order
    i, j = (axis + 1) % 3, (axis + 2) % 3
    angle = to_radians(angle, use_degrees)
    c, s = jnp.cos(angle), jnp.sin(angle)

    dcm = jnp.eye(3, dtype=c.dtype)
    dcm = dcm.at[i, i].set(c).at[j, j].set(c)
    return dcm.at[i, j].set(s).at[j, i].set(-s)


def Rx(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Frame rotation about the x-axis.

    Args:
        angle: Rotation angle, positive counter-clockwise looking down the
            axis toward the origin.
        use_degrees: Interpret *angle* as degrees. Default: ``False``

    Returns:
        3x3 rotation matrix.
    """
    return _axis_rotation(0, angle, use_degrees)


def Ry(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Frame rotation about the y-axis. See :func:`Rx`."""
    return _axis_rotation(1, angle, use_degrees)


def Rz(angle: ArrayLike, use_degrees: bool = False) -> Array:
    """Frame rotation about the z-axis. See :func:`Rx`."""
    return _axis_rotation(2, angle, use_degrees)


_AXIS_ROTATIONS = {"X": Rx, "Y": Ry, "Z": Rz}


def angle_to_dcm(
    angle1: ArrayLike,
    angle2: ArrayLike,
    angle3: ArrayLike,
    sequence: str = "ZYX",
    use_degrees: bool = False,
) -> Array:
    """Direction cosine matrix for a sequence of three axis rotations.

    The frame is first rotated by ``angle1`` about ``sequence[0]``, then by
    ``angle2`` about ``sequence[1]`` and finally by ``angle3`` about
    ``sequence[2]``, so the result is
    ``R_{seq[2]}(angle3) @ R_{seq[1]}(angle2) @ R_{seq[0]}(angle1)``.

    Args:
        angle1: First rotation angle.
        angle2: Second rotation angle.
        angle3: Third rotation angle.
        sequence: Three-letter axis sequence such as ``"ZYX"`` or ``"XZX"``.
        use_degrees: Interpret the angles as degrees. Default: ``False``

    Returns:
        3x3 rotation matrix.

    Raises:
        ValueError: If *sequence* is not three letters drawn from X, Y, Z.

    Examples:
        ```python
        from astroframes.rotations import angle_to_dcm
        dcm = angle_to_dcm(0.1, 0.0, 0.0, "ZYX")
        ```
    """
    sequence = sequence.upper()
    if len(sequence) != 3 or any(axis not in _AXIS_ROTATIONS for axis in sequence):
        raise ValueError(f"Invalid rotation sequence '{sequence}'.")

    r1 = _AXIS_ROTATIONS[sequence[0]](angle1, use_degrees)
    r2 = _AXIS_ROTATIONS[sequence[1]](angle2, use_degrees)
    r3 = _AXIS_ROTATIONS[sequence[2]](angle3, use_degrees)

    return r3 @ r2 @ r1


def smallangle_to_dcm(theta_x: ArrayLike, theta_y: ArrayLike, theta_z: ArrayLike) -> Array:
    """First-order direction cosine matrix for three small rotations.

    Valid when every angle is small enough that second-order terms can be
    dropped (e.g. polar motion, a few hundred milliarcseconds).  The result
    is orthonormal only to first order.

    Args:
        theta_x: Rotation about x [rad].
        theta_y: Rotation about y [rad].
        theta_z: Rotation about z [rad].

    Returns:
        3x3 matrix ``I - [theta]x``.
    """
    return jnp.array([[1.0,      theta_z, -theta_y],
                      [-theta_z, 1.0,      theta_x],
                      [theta_y,  -theta_x, 1.0]])
