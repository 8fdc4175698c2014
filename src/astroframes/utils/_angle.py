"""Degree/radian handling for the ``use_degrees`` keyword.

The flag is a plain Python ``bool`` chosen by the caller, so it is
resolved at trace time rather than inside the computation.
"""

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from astroframes.constants import DEG2RAD, RAD2DEG


def to_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Angle in radians, converting from degrees when *use_degrees* is set."""
    angle = jnp.asarray(angle)
    return angle * DEG2RAD if use_degrees else angle


def from_radians(angle: ArrayLike, use_degrees: bool) -> Array:
    """Angle given in radians, expressed in degrees when *use_degrees* is set."""
    angle = jnp.asarray(angle)
    return angle * RAD2DEG if use_degrees else angle
