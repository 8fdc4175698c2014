"""Tests for state vector transport."""

import jax.numpy as jnp
import pytest

from astroframes.constants import OMEGA_EARTH
from astroframes.errors import FrameTheoryMismatch
from astroframes.frames import (
    Frame,
    OrbitStateVector,
    resolve,
    transport,
    transport_ecef_to_ecef,
    transport_ecef_to_eci,
    transport_eci_to_ecef,
    transport_eci_to_eci,
)
from astroframes.rotations import apply
from astroframes.time import caldate_to_split_jd

R_GCRF = jnp.array([5102.50895790, 6123.01140070, 6378.13692820])
V_GCRF = jnp.array([-4.7432201570, 0.7905364970, 5.5337557270])
R_CIRS = jnp.array([5100.01840470, 6122.78636480, 6380.34453270])
V_CIRS = jnp.array([-4.7453803300, 0.7903414530, 5.5319312880])


@pytest.fixture
def state_itrf(vallado_jd, r_itrf, v_itrf):
    return OrbitStateVector(vallado_jd, r_itrf, v_itrf)


def _max_err(a, b):
    return float(jnp.max(jnp.abs(jnp.asarray(a) - jnp.asarray(b))))


# ---------------------------------------------------------------------------
# Earth-fixed <-> inertial
# ---------------------------------------------------------------------------


class TestMixedTransport:
    def test_itrf_to_gcrf_vallado(self, state_itrf, vallado_eop_fk5):
        out = transport(state_itrf, Frame.ITRF, Frame.GCRF, vallado_eop_fk5)
        assert _max_err(out.r, R_GCRF) < 3e-4
        assert _max_err(out.v, V_GCRF) < 8e-7, f"v: {out.v}"

    def test_itrf_to_cirs_vallado(self, state_itrf, vallado_eop_iau2006):
        out = transport(state_itrf, Frame.ITRF, Frame.CIRS, vallado_eop_iau2006)
        assert _max_err(out.r, R_CIRS) < 1e-3
        assert _max_err(out.v, V_CIRS) < 2e-6, f"v: {out.v}"

    @pytest.mark.parametrize("eop_fixture, inertial", [("vallado_eop_fk5", Frame.TOD), ("vallado_eop_iau2006", Frame.GCRF)])
    def test_round_trip(self, state_itrf, eop_fixture, inertial, request):
        eop = request.getfixturevalue(eop_fixture)
        there = transport(state_itrf, Frame.ITRF, inertial, eop)
        back = transport(there, inertial, Frame.ITRF, eop)
        assert _max_err(back.r, state_itrf.r) < 1e-6
        assert _max_err(back.v, state_itrf.v) < 1e-9
        assert _max_err(back.a, jnp.zeros(3)) < 1e-12

    def test_centripetal_acceleration(self, vallado_jd):
        # A point at rest on the equator accelerates towards the spin axis in the inertial frame
        r = jnp.array([6378.137, 0.0, 0.0])
        state = OrbitStateVector(vallado_jd, r, jnp.zeros(3))
        out = transport(state, Frame.PEF, Frame.TOD)
        assert float(jnp.linalg.norm(out.a)) == pytest.approx(OMEGA_EARTH**2 * 6378.137, rel=1e-9)
        assert float(jnp.dot(out.a, out.r)) < 0.0
        assert float(jnp.linalg.norm(out.v)) == pytest.approx(OMEGA_EARTH * 6378.137, rel=1e-9)

    def test_lod_slows_rotation(self, vallado_jd, vallado_eop_fk5):
        r = jnp.array([6378.137, 0.0, 0.0])
        state = OrbitStateVector(vallado_jd, r, jnp.zeros(3))
        out = transport(state, Frame.PEF, Frame.TOD, vallado_eop_fk5)
        expected = OMEGA_EARTH * (1.0 - 0.0015563 / 86400.0) * 6378.137
        assert float(jnp.linalg.norm(out.v)) == pytest.approx(expected, rel=1e-12)

    def test_epoch_preserved(self, state_itrf, vallado_eop_fk5):
        out = transport(state_itrf, Frame.ITRF, Frame.J2000, vallado_eop_fk5)
        assert out.epoch == state_itrf.epoch

    def test_theory_mismatch(self, state_itrf, vallado_eop_fk5):
        with pytest.raises(FrameTheoryMismatch):
            transport(state_itrf, Frame.ITRF, Frame.CIRS, vallado_eop_fk5)


# ---------------------------------------------------------------------------
# Same-class transport
# ---------------------------------------------------------------------------


class TestSameClassTransport:
    def test_eci_rotation_only(self, vallado_jd, vallado_eop_fk5):
        state = OrbitStateVector(vallado_jd, R_GCRF, V_GCRF, jnp.array([1e-3, -2e-3, 3e-3]))
        out = transport(state, Frame.GCRF, Frame.TEME, vallado_eop_fk5)
        R = resolve(Frame.GCRF, Frame.TEME, vallado_jd, vallado_eop_fk5)
        assert jnp.allclose(out.r, apply(R, R_GCRF), atol=1e-10)
        assert jnp.allclose(out.v, apply(R, V_GCRF), atol=1e-14)
        assert jnp.allclose(out.a, apply(R, state.a), atol=1e-16)

    def test_ecef_rotation_only(self, state_itrf, vallado_eop_fk5):
        out = transport(state_itrf, Frame.ITRF, Frame.PEF, vallado_eop_fk5)
        assert _max_err(out.r, [-1033.47503130, 7901.30558560, 6380.34453270]) < 1e-6
        assert float(jnp.linalg.norm(out.v)) == pytest.approx(float(jnp.linalg.norm(state_itrf.v)), rel=1e-10)

    def test_default_acceleration_is_zero(self, state_itrf):
        out = transport(state_itrf, Frame.ITRF, Frame.PEF)
        assert jnp.allclose(out.a, jnp.zeros(3))


class TestWrappers:
    def test_ecef_to_eci_matches_transport(self, state_itrf, vallado_eop_fk5):
        a = transport_ecef_to_eci(state_itrf, Frame.ITRF, Frame.GCRF, vallado_eop_fk5)
        b = transport(state_itrf, Frame.ITRF, Frame.GCRF, vallado_eop_fk5)
        assert jnp.allclose(a.v, b.v, atol=1e-15)

    @pytest.mark.parametrize(
        "wrapper, origin, destination",
        [
            (transport_ecef_to_ecef, Frame.ITRF, Frame.GCRF),
            (transport_ecef_to_eci, Frame.ITRF, Frame.PEF),
            (transport_eci_to_ecef, Frame.PEF, Frame.ITRF),
            (transport_eci_to_eci, Frame.GCRF, Frame.ITRF),
        ],
    )
    def test_wrong_side_raises(self, wrapper, origin, destination, state_itrf):
        with pytest.raises(ValueError, match="frame"):
            wrapper(state_itrf, origin, destination)


# ---------------------------------------------------------------------------
# Epoch argument
# ---------------------------------------------------------------------------


class TestEpochArgument:
    @pytest.fixture
    def state_tod(self, vallado_jd):
        return OrbitStateVector(
            vallado_jd,
            jnp.array([5094.51620300, 6127.36527840, 6380.34453270]),
            jnp.array([-4.7460883850, 0.7860783240, 5.5319312880]),
        )

    def test_tod_epoch_pair(self, state_tod, vallado_jd, vallado_eop_fk5):
        pair = (vallado_jd, vallado_jd + 365.25)
        out = transport(state_tod, Frame.TOD, Frame.TOD, vallado_eop_fk5, epoch=pair)
        R = resolve(Frame.TOD, Frame.TOD, pair, vallado_eop_fk5)
        assert jnp.allclose(out.r, apply(R, state_tod.r), atol=1e-10)
        assert jnp.allclose(out.v, apply(R, state_tod.v), atol=1e-13)
        # A year of precession moves the position by about a kilometre
        assert _max_err(out.r, state_tod.r) > 0.1

    def test_same_epoch_pair_is_identity(self, state_tod, vallado_jd, vallado_eop_fk5):
        out = transport(state_tod, Frame.TOD, Frame.TOD, vallado_eop_fk5, epoch=(vallado_jd, vallado_jd))
        assert _max_err(out.r, state_tod.r) < 1e-9
        assert _max_err(out.v, state_tod.v) < 1e-12

    def test_epoch_kept(self, state_tod, vallado_jd, vallado_eop_fk5):
        out = transport(state_tod, Frame.TOD, Frame.GCRF, vallado_eop_fk5, epoch=(vallado_jd, vallado_jd + 30.0))
        assert out.epoch == state_tod.epoch

    def test_single_epoch_overrides_state(self, state_tod, vallado_jd, vallado_eop_fk5):
        later = vallado_jd + 10.0
        out = transport(state_tod, Frame.TOD, Frame.GCRF, vallado_eop_fk5, epoch=later)
        moved = transport(state_tod._replace(epoch=later), Frame.TOD, Frame.GCRF, vallado_eop_fk5)
        assert jnp.allclose(out.r, moved.r, atol=1e-10)

    def test_eci_to_eci_wrapper(self, state_tod, vallado_jd, vallado_eop_fk5):
        pair = (vallado_jd, vallado_jd + 365.25)
        a = transport_eci_to_eci(state_tod, Frame.TOD, Frame.MOD, vallado_eop_fk5, epoch=pair)
        b = transport(state_tod, Frame.TOD, Frame.MOD, vallado_eop_fk5, epoch=pair)
        assert jnp.allclose(a.r, b.r, atol=1e-12)
        assert jnp.allclose(a.v, b.v, atol=1e-15)

    def test_mixed_pair_matches_two_steps(self, state_itrf, vallado_jd, vallado_eop_fk5):
        pair = (vallado_jd, vallado_jd + 365.25)
        direct = transport(state_itrf, Frame.ITRF, Frame.TOD, vallado_eop_fk5, epoch=pair)
        gcrf = transport(state_itrf, Frame.ITRF, Frame.GCRF, vallado_eop_fk5)
        stepped = transport(gcrf, Frame.GCRF, Frame.TOD, vallado_eop_fk5, epoch=pair)
        assert _max_err(direct.r, stepped.r) < 1e-8
        assert _max_err(direct.v, stepped.v) < 1e-11

    def test_tuple_state_epoch_rejected(self, vallado_jd, vallado_eop_fk5):
        state = OrbitStateVector((vallado_jd, vallado_jd + 1.0), R_GCRF, V_GCRF)
        with pytest.raises(TypeError, match="single Julian Date"):
            transport(state, Frame.GCRF, Frame.TOD, vallado_eop_fk5)

    def test_split_state_epoch_accepted(self, vallado_eop_fk5):
        state = OrbitStateVector(caldate_to_split_jd(2004, 4, 6, 7, 51, 28.386009), R_GCRF, V_GCRF)
        out = transport(state, Frame.GCRF, Frame.ITRF, vallado_eop_fk5)
        assert _max_err(out.r, [-1033.4793830, 7901.2952754, 6380.3565958]) < 5e-4
