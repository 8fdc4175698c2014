"""Tests for the SOFA-derived routines, cross-checked against ERFA."""

import erfa
import jax
import jax.numpy as jnp
import numpy as np
import pytest

from astroframes import sofa

DATES = [
    (2400000.5, 53736.0),
    (2400000.5, 54388.0),
    (2451545.0, 0.0),
    (2453101.5, 0.328154745),
]


class TestObliquityAndPrecession:
    @pytest.mark.parametrize("date1, date2", DATES)
    def test_obl06(self, date1, date2):
        assert float(sofa.obl06(date1, date2)) == pytest.approx(erfa.obl06(date1, date2), abs=1e-14)

    def test_obl06_sofa_reference(self):
        assert float(sofa.obl06(2400000.5, 54388.0)) == pytest.approx(0.4090749229387258204, abs=1e-14)

    @pytest.mark.parametrize("date1, date2", DATES)
    def test_p06_precession(self, date1, date2):
        psi_a, omega_a, chi_a = sofa.p06_precession(date1, date2)
        reference = erfa.p06e(date1, date2)
        assert float(psi_a) == pytest.approx(reference[1], abs=1e-14)
        assert float(omega_a) == pytest.approx(reference[2], abs=1e-14)
        assert float(chi_a) == pytest.approx(reference[8], abs=1e-14)


class TestEarthRotation:
    @pytest.mark.parametrize("date1, date2", DATES)
    def test_era00(self, date1, date2):
        assert float(sofa.era00(date1, date2)) == pytest.approx(erfa.era00(date1, date2), abs=1e-12)

    def test_era00_sofa_reference(self):
        assert float(sofa.era00(2400000.5, 54388.0)) == pytest.approx(0.4022837240028158102, abs=1e-12)

    def test_era00_jit(self):
        era = jax.jit(sofa.era00)(2454388.0, 0.5)
        assert float(era) == pytest.approx(erfa.era00(2454388.0, 0.5), abs=1e-12)


class TestMatrices:
    def test_c2ixys(self):
        x, y, s = 0.5791308486706011000e-3, 0.4020579816732961219e-4, -0.1220040848472271978e-7
        assert np.allclose(np.asarray(sofa.c2ixys(x, y, s)), erfa.c2ixys(x, y, s), atol=1e-15)

    def test_c2ixys_at_pole_is_rz_s(self):
        R = sofa.c2ixys(0.0, 0.0, 1e-6)
        assert jnp.allclose(R, np.asarray(erfa.c2ixys(0.0, 0.0, 1e-6)), atol=1e-15)

    def test_sp00(self):
        assert float(sofa.sp00(2400000.5, 52541.0)) == pytest.approx(erfa.sp00(2400000.5, 52541.0), abs=1e-18)

    def test_pom00(self):
        xp, yp, sp = 2.55060238e-7, 1.860359247e-6, -0.1367174580728891460e-10
        assert np.allclose(np.asarray(sofa.pom00(xp, yp, sp)), erfa.pom00(xp, yp, sp), atol=1e-15)


class TestSeries:
    def test_xys06a(self):
        x, y, s = sofa.xys06a(2400000.5, 53736.0)
        rx, ry, rs = erfa.xys06a(2400000.5, 53736.0)
        assert float(x) == rx
        assert float(y) == ry
        assert float(s) == rs

    def test_nut06a(self):
        dpsi, deps = sofa.nut06a(2400000.5, 53736.0)
        assert float(dpsi) == pytest.approx(-0.9630912025820308797e-5, abs=1e-13)
        assert float(deps) == pytest.approx(0.4063238496887249798e-4, abs=1e-13)

    def test_eo06a(self):
        assert float(sofa.eo06a(2400000.5, 53736.0)) == pytest.approx(erfa.eo06a(2400000.5, 53736.0), abs=1e-15)
