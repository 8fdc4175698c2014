"""Tests for the IAU-2006/2010 CIO-based and equinox-based rotations.

Reference vectors from Vallado (4th Ed.), Example 3-14; reference matrix
from the SOFA *Tools for Earth Attitude* cookbook, Sec. 5.5.
"""

import jax.numpy as jnp
import numpy as np
import pytest

from astroframes.constants import AS2RAD, MAS2RAD
from astroframes.frames.iau2006 import (
    cip_offsets_to_nutation_corrections,
    rotation_cirs_to_gcrf_iau2006,
    rotation_cirs_to_tirs_iau2006,
    rotation_ers_to_mod_iau2006,
    rotation_ers_to_tirs_iau2006,
    rotation_gcrf_to_cirs_iau2006,
    rotation_gcrf_to_mj2000_iau2006,
    rotation_itrf_to_tirs_iau2006,
    rotation_mj2000_to_gcrf_iau2006,
    rotation_mod_to_ers_iau2006,
    rotation_mod_to_mj2000_iau2006,
    rotation_mod_to_tirs_iau2006,
    rotation_tirs_to_cirs_iau2006,
    rotation_tirs_to_ers_iau2006,
    rotation_tirs_to_itrf_iau2006,
    rotation_tirs_to_mod_iau2006,
)
from astroframes.rotations import Quaternion, RotationMatrix, apply, compose
from astroframes.time import caldate_to_jd, jd_utc_to_tt, jd_utc_to_ut1

X_P = -0.140682 * AS2RAD
Y_P = 0.333309 * AS2RAD
DX = -0.205 * MAS2RAD
DY = -0.136 * MAS2RAD

R_TIRS = jnp.array([-1033.47503120, 7901.30558560, 6380.34453270])
R_CIRS = jnp.array([5100.01840470, 6122.78636480, 6380.34453270])
R_GCRF_CIO = jnp.array([5102.50895290, 6123.01139910, 6378.13693380])
R_ERS = jnp.array([5094.51462800, 6127.36658790, 6380.34453270])
R_MOD06 = jnp.array([5094.02896110, 6127.87113500, 6380.24774200])
R_GCRF_EQX = jnp.array([5102.50895780, 6123.01140380, 6378.13692530])


@pytest.fixture
def epochs(vallado_jd):
    return jd_utc_to_ut1(vallado_jd, -0.4399619), jd_utc_to_tt(vallado_jd)


# ---------------------------------------------------------------------------
# CIO-based chain
# ---------------------------------------------------------------------------


class TestCIOChain:
    def test_itrf_to_tirs(self, r_itrf, epochs):
        _, jd_tt = epochs
        r = apply(rotation_itrf_to_tirs_iau2006(RotationMatrix, jd_tt, X_P, Y_P), r_itrf)
        assert jnp.allclose(r, R_TIRS, atol=1e-6), f"Max error: {jnp.max(jnp.abs(r - R_TIRS))}"

    def test_tirs_to_cirs(self, epochs):
        jd_ut1, _ = epochs
        r = apply(rotation_tirs_to_cirs_iau2006(RotationMatrix, jd_ut1), R_TIRS)
        assert jnp.allclose(r, R_CIRS, atol=1e-3), f"Max error: {jnp.max(jnp.abs(r - R_CIRS))}"

    def test_cirs_to_gcrf(self, epochs):
        _, jd_tt = epochs
        r = apply(rotation_cirs_to_gcrf_iau2006(RotationMatrix, jd_tt, DX, DY), R_CIRS)
        assert jnp.allclose(r, R_GCRF_CIO, atol=1e-3), f"Max error: {jnp.max(jnp.abs(r - R_GCRF_CIO))}"

    def test_full_chain(self, r_itrf, epochs):
        jd_ut1, jd_tt = epochs
        R = compose(
            rotation_itrf_to_tirs_iau2006(RotationMatrix, jd_tt, X_P, Y_P),
            rotation_tirs_to_cirs_iau2006(RotationMatrix, jd_ut1),
            rotation_cirs_to_gcrf_iau2006(RotationMatrix, jd_tt, DX, DY),
        )
        r = apply(R, r_itrf)
        assert jnp.allclose(r, R_GCRF_CIO, atol=1e-3)

    def test_inverse_pairs(self, epochs):
        jd_ut1, jd_tt = epochs
        a = rotation_itrf_to_tirs_iau2006(RotationMatrix, jd_tt, X_P, Y_P).to_matrix()
        b = rotation_tirs_to_itrf_iau2006(RotationMatrix, jd_tt, X_P, Y_P).to_matrix()
        assert jnp.allclose(a @ b, jnp.eye(3), atol=1e-14)

        a = rotation_gcrf_to_cirs_iau2006(RotationMatrix, jd_tt, DX, DY).to_matrix()
        b = rotation_cirs_to_gcrf_iau2006(RotationMatrix, jd_tt, DX, DY).to_matrix()
        assert jnp.allclose(a @ b, jnp.eye(3), atol=1e-14)

        a = rotation_tirs_to_cirs_iau2006(RotationMatrix, jd_ut1).to_matrix()
        b = rotation_cirs_to_tirs_iau2006(RotationMatrix, jd_ut1).to_matrix()
        assert jnp.allclose(a @ b, jnp.eye(3), atol=1e-14)

    def test_sofa_cookbook_gcrs_to_itrs(self):
        # 2007-04-05 12:00:00 UTC
        jd_utc = caldate_to_jd(2007, 4, 5, 12, 0, 0.0)
        jd_ut1 = jd_utc_to_ut1(jd_utc, -0.072073685)
        jd_tt = jd_utc_to_tt(jd_utc)
        x_p = 0.0349282 * AS2RAD
        y_p = 0.4833163 * AS2RAD

        R = compose(
            rotation_gcrf_to_cirs_iau2006(RotationMatrix, jd_tt, 0.1750 * MAS2RAD, -0.2259 * MAS2RAD),
            rotation_tirs_to_cirs_iau2006(RotationMatrix, jd_ut1).transpose(),
            rotation_tirs_to_itrf_iau2006(RotationMatrix, jd_tt, x_p, y_p),
        )

        expected = np.array(
            [
                [+0.973104317697535, +0.230363826239128, -0.000703163482198],
                [-0.230363800456037, +0.973104570632801, +0.000118545366625],
                [+0.000711560162668, +0.000046626403995, +0.999999745754024],
            ]
        )
        assert np.allclose(np.asarray(R.to_matrix()), expected, atol=1e-8)


# ---------------------------------------------------------------------------
# Equinox-based chain
# ---------------------------------------------------------------------------


class TestEquinoxChain:
    @pytest.fixture
    def corrections(self, epochs):
        _, jd_tt = epochs
        return cip_offsets_to_nutation_corrections(jd_tt, DX, DY)

    def test_tirs_to_ers(self, epochs, corrections):
        jd_ut1, jd_tt = epochs
        _, d_dpsi = corrections
        r = apply(rotation_tirs_to_ers_iau2006(RotationMatrix, jd_ut1, jd_tt, d_dpsi), R_TIRS)
        assert jnp.allclose(r, R_ERS, atol=1e-3), f"Max error: {jnp.max(jnp.abs(r - R_ERS))}"

    def test_ers_to_mod(self, epochs, corrections):
        _, jd_tt = epochs
        d_deps, d_dpsi = corrections
        r = apply(rotation_ers_to_mod_iau2006(RotationMatrix, jd_tt, d_deps, d_dpsi), R_ERS)
        assert jnp.allclose(r, R_MOD06, atol=1e-3), f"Max error: {jnp.max(jnp.abs(r - R_MOD06))}"

    def test_mod_to_gcrf(self, epochs):
        _, jd_tt = epochs
        R = compose(
            rotation_mod_to_mj2000_iau2006(RotationMatrix, jd_tt),
            rotation_mj2000_to_gcrf_iau2006(RotationMatrix),
        )
        r = apply(R, R_MOD06)
        assert jnp.allclose(r, R_GCRF_EQX, atol=1e-3), f"Max error: {jnp.max(jnp.abs(r - R_GCRF_EQX))}"

    def test_tirs_to_mod_matches_two_steps(self, epochs, corrections):
        jd_ut1, jd_tt = epochs
        d_deps, d_dpsi = corrections
        steps = compose(
            rotation_tirs_to_ers_iau2006(RotationMatrix, jd_ut1, jd_tt, d_dpsi),
            rotation_ers_to_mod_iau2006(RotationMatrix, jd_tt, d_deps, d_dpsi),
        )
        direct = rotation_tirs_to_mod_iau2006(RotationMatrix, jd_ut1, jd_tt, d_deps, d_dpsi)
        assert jnp.allclose(direct.to_matrix(), steps.to_matrix(), atol=1e-14)

    def test_inverse_pairs(self, epochs, corrections):
        jd_ut1, jd_tt = epochs
        d_deps, d_dpsi = corrections
        pairs = [
            (
                rotation_tirs_to_ers_iau2006(RotationMatrix, jd_ut1, jd_tt, d_dpsi),
                rotation_ers_to_tirs_iau2006(RotationMatrix, jd_ut1, jd_tt, d_dpsi),
            ),
            (
                rotation_ers_to_mod_iau2006(RotationMatrix, jd_tt, d_deps, d_dpsi),
                rotation_mod_to_ers_iau2006(RotationMatrix, jd_tt, d_deps, d_dpsi),
            ),
            (
                rotation_tirs_to_mod_iau2006(RotationMatrix, jd_ut1, jd_tt, d_deps, d_dpsi),
                rotation_mod_to_tirs_iau2006(RotationMatrix, jd_ut1, jd_tt, d_deps, d_dpsi),
            ),
        ]
        for forward, backward in pairs:
            assert jnp.allclose(forward.to_matrix() @ backward.to_matrix(), jnp.eye(3), atol=1e-14)

    def test_equinox_and_cio_agree(self, r_itrf, epochs, corrections):
        jd_ut1, jd_tt = epochs
        d_deps, d_dpsi = corrections
        cio = compose(
            rotation_itrf_to_tirs_iau2006(RotationMatrix, jd_tt, X_P, Y_P),
            rotation_tirs_to_cirs_iau2006(RotationMatrix, jd_ut1),
            rotation_cirs_to_gcrf_iau2006(RotationMatrix, jd_tt, DX, DY),
        )
        equinox = compose(
            rotation_itrf_to_tirs_iau2006(RotationMatrix, jd_tt, X_P, Y_P),
            rotation_tirs_to_mod_iau2006(RotationMatrix, jd_ut1, jd_tt, d_deps, d_dpsi),
            rotation_mod_to_mj2000_iau2006(RotationMatrix, jd_tt),
            rotation_mj2000_to_gcrf_iau2006(RotationMatrix),
        )
        diff = apply(cio, r_itrf) - apply(equinox, r_itrf)
        assert jnp.max(jnp.abs(diff)) < 1e-3

    def test_frame_bias_is_constant(self):
        bias = rotation_mj2000_to_gcrf_iau2006(RotationMatrix).to_matrix()
        inverse = rotation_gcrf_to_mj2000_iau2006(RotationMatrix).to_matrix()
        assert jnp.allclose(bias @ inverse, jnp.eye(3), atol=1e-15)
        # The bias is tens of milliarcseconds
        assert jnp.max(jnp.abs(bias - jnp.eye(3))) < 1e-6

    def test_quaternion_kind(self, epochs):
        _, jd_tt = epochs
        q = rotation_gcrf_to_cirs_iau2006(Quaternion, jd_tt, DX, DY)
        R = rotation_gcrf_to_cirs_iau2006(RotationMatrix, jd_tt, DX, DY)
        assert jnp.allclose(q.to_rotation_matrix().to_matrix(), R.to_matrix(), atol=1e-12)


class TestCIPOffsets:
    def test_zero_offsets(self, vallado_jd):
        d_deps, d_dpsi = cip_offsets_to_nutation_corrections(jd_utc_to_tt(vallado_jd), 0.0, 0.0)
        assert float(d_deps) == 0.0
        assert float(d_dpsi) == 0.0

    def test_magnitude(self, vallado_jd):
        # dX maps to dpsi * sin(eps); dY maps to deps, to first order
        jd_tt = jd_utc_to_tt(vallado_jd)
        d_deps, d_dpsi = cip_offsets_to_nutation_corrections(jd_tt, DX, DY)
        assert float(d_deps) == pytest.approx(DY, rel=1e-2)
        assert float(d_dpsi) * np.sin(23.44 * np.pi / 180.0) == pytest.approx(DX, rel=1e-2)
