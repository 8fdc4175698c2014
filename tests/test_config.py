"""Tests for the astroframes.config module."""

import jax
import jax.numpy as jnp
import pytest

from astroframes.config import get_dtype, get_rotation_epsilon, set_dtype
from astroframes.rotations import Rz


@pytest.fixture(autouse=True)
def reset_dtype():
    """Reset dtype to float32 before each test and restore float64 after."""
    set_dtype(jnp.float32)
    yield
    set_dtype(jnp.float64)


class TestGetSetDtype:
    def test_set_float64(self):
        set_dtype(jnp.float64)
        assert get_dtype() == jnp.float64

    def test_roundtrip(self):
        for dtype in (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64):
            set_dtype(dtype)
            assert get_dtype() == dtype

    def test_invalid_dtype_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype(jnp.int32)

    def test_invalid_dtype_string_raises(self):
        with pytest.raises(ValueError, match="Unsupported dtype"):
            set_dtype("float32")

    def test_float64_enables_x64(self):
        set_dtype(jnp.float64)
        assert jax.config.jax_enable_x64 is True


class TestRotationEpsilon:
    def test_float32(self):
        assert get_rotation_epsilon() == 1e-6

    def test_float64(self):
        set_dtype(jnp.float64)
        assert get_rotation_epsilon() == 1e-12

    def test_float16(self):
        set_dtype(jnp.float16)
        assert get_rotation_epsilon() == 1e-3


class TestDtypePropagation:
    def test_elementary_rotation_float32(self):
        assert Rz(0.1).shape == (3, 3)
        assert jnp.isfinite(Rz(0.1)).all()
