"""Module-wide numerical configuration.

Two settings live here:

- the float dtype used for every array astroframes creates
  (:func:`set_dtype` / :func:`get_dtype`), and
- the absolute tolerance that ``==`` uses on rotation objects, which
  follows the dtype (:func:`get_rotation_epsilon`).

The default dtype is ``jnp.float32``.  A Julian Date near ``2.45e6`` is
only resolved to a fraction of a day in single precision, so reproducing
published frame transformations to the arcsecond needs
``set_dtype(jnp.float64)``, which also turns on ``jax_enable_x64``.

Set the dtype before compiling anything with ``jax.jit``: ``get_dtype()`` is
read while tracing and the traced value is kept by the compiled function.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp

# Rotation equality tolerance per supported dtype
_ROTATION_EPSILON = {
    jnp.float64: 1e-12,
    jnp.float32: 1e-6,
    jnp.float16: 1e-3,
    jnp.bfloat16: 1e-3,
}

_dtype = jnp.float32


def set_dtype(dtype) -> None:
    """Select the float dtype for astroframes.

    Args:
        dtype: ``jnp.float16``, ``jnp.bfloat16``, ``jnp.float32`` or
            ``jnp.float64``.  Choosing ``jnp.float64`` enables JAX's 64-bit
            mode.

    Raises:
        ValueError: If *dtype* is not one of the supported float types.
    """
    global _dtype
    if dtype not in _ROTATION_EPSILON:
        raise ValueError(
            f"Unsupported dtype {dtype}. Must be one of: "
            f"jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64"
        )
    if dtype == jnp.float64:
        jax.config.update("jax_enable_x64", True)
    _dtype = dtype


def get_dtype():
    """Return the active float dtype (``jnp.float32`` unless changed)."""
    return _dtype


def get_rotation_epsilon() -> float:
    """Absolute element-wise tolerance for comparing rotations.

    ``1e-12`` in float64, ``1e-6`` in float32 and ``1e-3`` in the half
    precision types.

    Returns:
        float: Tolerance for the active dtype.
    """
    return _ROTATION_EPSILON[_dtype]
