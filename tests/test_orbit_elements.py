"""Tests for changing the frame of Keplerian elements."""

import jax.numpy as jnp
import pytest

from astroframes.constants import DEG2RAD
from astroframes.errors import InvalidEccentricity
from astroframes.frames import Frame, KeplerianElements, change_oe_frame


@pytest.fixture
def elements(vallado_jd):
    return KeplerianElements(
        vallado_jd,
        7130.982e3,
        0.001111,
        98.405 * DEG2RAD,
        227.336 * DEG2RAD,
        90.0 * DEG2RAD,
        320.0 * DEG2RAD,
    )


def _assert_elements_close(got, expected, rel=1e-6):
    for name in ("a", "e", "i", "raan", "argp", "nu"):
        assert float(getattr(got, name)) == pytest.approx(float(getattr(expected, name)), rel=rel), name


class TestChangeOEFrame:
    def test_identity_change(self, elements):
        out = change_oe_frame(elements, Frame.J2000, Frame.J2000)
        _assert_elements_close(out, elements)

    def test_round_trip(self, elements, vallado_eop_fk5):
        teme = change_oe_frame(elements, Frame.GCRF, Frame.TEME, vallado_eop_fk5)
        back = change_oe_frame(teme, Frame.TEME, Frame.GCRF, vallado_eop_fk5)
        _assert_elements_close(back, elements)

    def test_shape_invariants(self, elements, vallado_eop_iau2006):
        # A rotation leaves the size and shape of the orbit unchanged
        out = change_oe_frame(elements, Frame.GCRF, Frame.MOD06, vallado_eop_iau2006)
        assert float(out.a) == pytest.approx(float(elements.a), rel=1e-9)
        assert float(out.e) == pytest.approx(float(elements.e), rel=1e-6)
        assert float(out.nu) == pytest.approx(float(elements.nu), abs=1e-7)
        assert abs(float(out.raan) - float(elements.raan)) > 1e-5

    def test_epoch_kept(self, elements):
        out = change_oe_frame(elements, Frame.J2000, Frame.TOD)
        assert out.epoch == elements.epoch

    def test_epoch_pair(self, elements):
        jd = elements.epoch
        moved = change_oe_frame(elements, Frame.TOD, Frame.TOD, epoch=(jd, jd + 365.25))
        assert abs(float(moved.raan) - float(elements.raan)) > 1e-5
        same = change_oe_frame(elements, Frame.TOD, Frame.TOD, epoch=(jd, jd))
        _assert_elements_close(same, elements)

    def test_rejects_earth_fixed(self, elements):
        with pytest.raises(ValueError):
            change_oe_frame(elements, Frame.ITRF, Frame.GCRF)

    def test_tuple_epoch_rejected(self, elements):
        jd = elements.epoch
        paired = elements._replace(epoch=(jd, jd + 1.0))
        with pytest.raises(TypeError, match="single Julian Date"):
            change_oe_frame(paired, Frame.J2000, Frame.TOD)

    def test_rejects_hyperbolic(self, vallado_jd):
        oe = KeplerianElements(vallado_jd, 7000e3, 1.2, 0.5, 0.1, 0.2, 0.3)
        with pytest.raises(InvalidEccentricity):
            change_oe_frame(oe, Frame.GCRF, Frame.J2000)


class TestDegenerateElements:
    def test_equatorial_identity(self, vallado_jd):
        oe = KeplerianElements(vallado_jd, 7130982.0, 0.01, 0.0, 0.0, 0.5, 1.0)
        out = change_oe_frame(oe, Frame.GCRF, Frame.GCRF)
        assert jnp.isfinite(jnp.array(out[1:])).all()
        assert float(out.raan) == 0.0
        assert float(out.argp) == pytest.approx(0.5, abs=1e-9)
        assert float(out.nu) == pytest.approx(1.0, abs=1e-9)

    def test_equatorial_round_trip(self, vallado_jd, vallado_eop_fk5):
        oe = KeplerianElements(vallado_jd, 7130982.0, 0.01, 0.0, 0.0, 0.5, 1.0)
        teme = change_oe_frame(oe, Frame.GCRF, Frame.TEME, vallado_eop_fk5)
        assert jnp.isfinite(jnp.array(teme[1:])).all()
        back = change_oe_frame(teme, Frame.TEME, Frame.GCRF, vallado_eop_fk5)
        assert float(back.i) == pytest.approx(0.0, abs=1e-9)
        assert float(back.raan) == 0.0
        assert float(back.argp) == pytest.approx(0.5, abs=1e-7)
        assert float(back.nu) == pytest.approx(1.0, abs=1e-7)

    def test_circular(self, vallado_jd, vallado_eop_fk5):
        oe = KeplerianElements(vallado_jd, 7130982.0, 0.0, 0.9, 4.0, 1.0, 0.5)
        out = change_oe_frame(oe, Frame.GCRF, Frame.TOD, vallado_eop_fk5)
        assert jnp.isfinite(jnp.array(out[1:])).all()
        assert float(out.argp) == 0.0
        # Argument of latitude changes by less than the frame offset
        assert float(out.nu) == pytest.approx(1.5, abs=1e-2)
