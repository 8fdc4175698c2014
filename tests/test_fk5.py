"""Tests for the IAU-76/FK5 elementary rotations.

Reference values from D. Vallado, *Fundamentals of Astrodynamics and
Applications (4th Ed.)*, Examples 3-5 and 3-15.
"""

import jax
import jax.numpy as jnp
import pytest

from astroframes.constants import AS2RAD, RAD2DEG
from astroframes.frames.fk5 import (
    equation_of_equinoxes_fk5,
    gmst,
    nutation_fk5,
    precession_fk5,
    rotation_gcrf_to_itrf_fk5,
    rotation_itrf_to_gcrf_fk5,
    rotation_itrf_to_pef_fk5,
    rotation_mod_to_gcrf_fk5,
    rotation_mod_to_pef_fk5,
    rotation_pef_to_itrf_fk5,
    rotation_pef_to_mod_fk5,
    rotation_pef_to_tod_fk5,
    rotation_tod_to_mod_fk5,
    rotation_tod_to_pef_fk5,
)
from astroframes.rotations import Quaternion, RotationMatrix, apply, compose
from astroframes.time import caldate_to_jd, caldate_to_split_jd

X_P = -0.140682 * AS2RAD
Y_P = 0.333309 * AS2RAD
UT1_UTC = -0.4399619
D_PSI = -0.052195 * AS2RAD
D_EPS = -0.003875 * AS2RAD

R_PEF = jnp.array([-1033.47503130, 7901.30558560, 6380.34453270])
R_TOD = jnp.array([5094.51620300, 6127.36527840, 6380.34453270])
R_MOD = jnp.array([5094.02837450, 6127.87081640, 6380.24851640])
R_GCRF = jnp.array([5102.50895790, 6123.01140070, 6378.13692820])
R_J2000 = jnp.array([5102.50960000, 6123.01152000, 6378.13630000])


@pytest.fixture
def jd_ut1(vallado_jd):
    return vallado_jd + UT1_UTC / 86400.0


@pytest.fixture
def jd_tt(vallado_jd):
    return vallado_jd + 64.184 / 86400.0


# ---------------------------------------------------------------------------
# Angles
# ---------------------------------------------------------------------------


class TestAngles:
    def test_gmst_vallado_3_5(self):
        theta = gmst(caldate_to_jd(1992, 8, 20, 12, 14, 0)) * RAD2DEG
        assert theta == pytest.approx(152.578787886, abs=1e-5)

    def test_gmst_split_date(self):
        jd = caldate_to_jd(1992, 8, 20, 12, 14, 0)
        split = caldate_to_split_jd(1992, 8, 20, 12, 14, 0)
        assert jnp.allclose(gmst(split), gmst(jd), atol=1e-10)

    def test_gmst_range(self):
        jds = jnp.linspace(2451545.0, 2460000.0, 17)
        theta = jax.vmap(gmst)(jds)
        assert jnp.all(theta >= 0.0)
        assert jnp.all(theta < 2.0 * jnp.pi)

    def test_nutation_vallado_3_15(self, jd_tt):
        mean_obliquity, deps, dpsi = nutation_fk5(jd_tt)
        assert mean_obliquity * RAD2DEG == pytest.approx(23.4387368, abs=1e-6)
        assert dpsi * RAD2DEG == pytest.approx(-0.0034108, abs=1e-6)
        assert deps * RAD2DEG == pytest.approx(0.0020316, abs=1e-6)

    def test_precession_vallado_3_15(self, jd_tt):
        zeta, theta, z = precession_fk5(jd_tt)
        assert zeta * RAD2DEG == pytest.approx(0.0273055, abs=1e-6)
        assert theta * RAD2DEG == pytest.approx(0.0237306, abs=1e-6)
        assert z * RAD2DEG == pytest.approx(0.0273059, abs=1e-6)

    def test_equation_of_equinoxes_jit(self, jd_tt):
        eqeq = jax.jit(equation_of_equinoxes_fk5)(jd_tt, D_PSI)
        assert eqeq == pytest.approx(float(equation_of_equinoxes_fk5(jd_tt, D_PSI)), abs=1e-15)


# ---------------------------------------------------------------------------
# Chain steps
# ---------------------------------------------------------------------------


class TestChainSteps:
    def test_itrf_to_pef(self, r_itrf):
        r = apply(rotation_itrf_to_pef_fk5(RotationMatrix, X_P, Y_P), r_itrf)
        assert jnp.allclose(r, R_PEF, atol=1e-6), f"Max error: {jnp.max(jnp.abs(r - R_PEF))}"

    def test_pef_to_tod(self, jd_ut1, jd_tt):
        r = apply(rotation_pef_to_tod_fk5(RotationMatrix, jd_ut1, jd_tt, D_PSI), R_PEF)
        assert jnp.allclose(r, R_TOD, atol=3e-4), f"Max error: {jnp.max(jnp.abs(r - R_TOD))}"

    def test_tod_to_mod(self, jd_tt):
        r = apply(rotation_tod_to_mod_fk5(RotationMatrix, jd_tt, D_EPS, D_PSI), R_TOD)
        assert jnp.allclose(r, R_MOD, atol=3e-4), f"Max error: {jnp.max(jnp.abs(r - R_MOD))}"

    def test_mod_to_gcrf(self, jd_tt):
        r = apply(rotation_mod_to_gcrf_fk5(RotationMatrix, jd_tt), R_MOD)
        assert jnp.allclose(r, R_GCRF, atol=3e-4), f"Max error: {jnp.max(jnp.abs(r - R_GCRF))}"

    def test_pef_to_mod_matches_two_steps(self, jd_ut1, jd_tt):
        direct = rotation_pef_to_mod_fk5(RotationMatrix, jd_ut1, jd_tt, D_EPS, D_PSI)
        steps = compose(
            rotation_pef_to_tod_fk5(RotationMatrix, jd_ut1, jd_tt, D_PSI),
            rotation_tod_to_mod_fk5(RotationMatrix, jd_tt, D_EPS, D_PSI),
        )
        assert jnp.allclose(direct.to_matrix(), steps.to_matrix(), atol=1e-14)


# ---------------------------------------------------------------------------
# Full chain and inverses
# ---------------------------------------------------------------------------


class TestFullChain:
    def test_itrf_to_gcrf(self, r_itrf, jd_ut1, jd_tt):
        R = rotation_itrf_to_gcrf_fk5(RotationMatrix, jd_ut1, jd_tt, X_P, Y_P, D_EPS, D_PSI)
        r = apply(R, r_itrf)
        assert jnp.allclose(r, R_GCRF, atol=3e-4), f"Max error: {jnp.max(jnp.abs(r - R_GCRF))}"

    def test_itrf_to_j2000_without_corrections(self, r_itrf, jd_ut1, jd_tt):
        R = rotation_itrf_to_gcrf_fk5(RotationMatrix, jd_ut1, jd_tt, X_P, Y_P)
        r = apply(R, r_itrf)
        assert jnp.allclose(r, R_J2000, atol=3e-4), f"Max error: {jnp.max(jnp.abs(r - R_J2000))}"

    def test_quaternion_matches_matrix(self, r_itrf, jd_ut1, jd_tt):
        q = rotation_itrf_to_gcrf_fk5(Quaternion, jd_ut1, jd_tt, X_P, Y_P, D_EPS, D_PSI)
        r = apply(q, r_itrf)
        assert jnp.allclose(r, R_GCRF, atol=3e-4)
        assert jnp.linalg.norm(q.to_vector()) == pytest.approx(1.0, abs=1e-12)

    def test_gcrf_to_itrf_is_inverse(self, jd_ut1, jd_tt):
        fwd = rotation_itrf_to_gcrf_fk5(RotationMatrix, jd_ut1, jd_tt, X_P, Y_P, D_EPS, D_PSI)
        inv = rotation_gcrf_to_itrf_fk5(RotationMatrix, jd_ut1, jd_tt, X_P, Y_P, D_EPS, D_PSI)
        assert jnp.allclose(fwd.to_matrix() @ inv.to_matrix(), jnp.eye(3), atol=1e-12)

    @pytest.mark.parametrize(
        "forward, inverse",
        [
            (lambda k, ut1, tt: rotation_itrf_to_pef_fk5(k, X_P, Y_P), lambda k, ut1, tt: rotation_pef_to_itrf_fk5(k, X_P, Y_P)),
            (lambda k, ut1, tt: rotation_pef_to_tod_fk5(k, ut1, tt, D_PSI), lambda k, ut1, tt: rotation_tod_to_pef_fk5(k, ut1, tt, D_PSI)),
            (lambda k, ut1, tt: rotation_pef_to_mod_fk5(k, ut1, tt), lambda k, ut1, tt: rotation_mod_to_pef_fk5(k, ut1, tt)),
        ],
    )
    def test_inverse_pairs(self, forward, inverse, jd_ut1, jd_tt):
        a = forward(RotationMatrix, jd_ut1, jd_tt).to_matrix()
        b = inverse(RotationMatrix, jd_ut1, jd_tt).to_matrix()
        assert jnp.allclose(a.T, b, atol=1e-15)

    def test_jit_compatible(self, jd_ut1, jd_tt):
        f = jax.jit(lambda ut1, tt: rotation_itrf_to_gcrf_fk5(RotationMatrix, ut1, tt, X_P, Y_P).to_matrix())
        eager = rotation_itrf_to_gcrf_fk5(RotationMatrix, jd_ut1, jd_tt, X_P, Y_P).to_matrix()
        assert jnp.allclose(f(jd_ut1, jd_tt), eager, atol=1e-12)
