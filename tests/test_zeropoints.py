import os

import numpy as np
import pytest

import unitphot as up

TEST_DATA = os.environ.get('UNITPHOT_TEST_DATA')


@pytest.mark.parametrize('limits', [(400., 700.), (1500., 1800.),
                                    (3000., 4000.)])
def test_ab_zero_jy(limits):
    filt = up.tophat(*limits)
    assert filt.ab_zero_jy().to_value(up.Jy) == \
        pytest.approx(3630.78, rel=1e-5)


def test_ab_zero_mag():
    filt = up.tophat(500., 600.)
    lp = filt.lpivot.to_value(up.angstrom)
    c = 299792458e10
    expected = 2.5 * np.log10(lp ** 2 / c) + 48.60
    assert filt.ab_zero_mag() == pytest.approx(expected, rel=1e-10)
    assert filt.ab_zero_flux().to_value(up.flam) == \
        pytest.approx(10 ** (-0.4 * expected), rel=1e-10)
    assert up.ab_zero_mag(filt) == filt.ab_zero_mag()


def test_st_zero_point():
    filt = up.tophat(500., 600.)
    assert filt.st_zero_mag() == 21.1
    assert filt.st_zero_flux().to_value(up.flam) == \
        pytest.approx(10 ** (-0.4 * 21.1))
    lp = filt.lpivot.to_value(up.angstrom)
    expected = 1e5 / (1e-8 * 299792458.) * lp ** 2 * 10 ** (-0.4 * 21.1)
    assert filt.st_zero_jy().to_value(up.Jy) == pytest.approx(expected)


def test_flam_to_jy():
    jy = up.flam_to_jy(1e-9 * up.flam, 5000. * up.angstrom)
    assert jy.to_value(up.Jy) == pytest.approx(1e5 / 2.99792458 * 25e6 * 1e-9)


def test_vega_zero_point(vega):
    filt = up.tophat(500., 600.)
    flux = filt.get_flux(vega.get_wavelength(up.nm), vega.get_flux(up.flam),
                         up.nm, up.flam)
    assert filt.vega_zero_flux().to_value(up.flam) == \
        pytest.approx(flux.to_value(up.flam))
    assert filt.vega_zero_mag() == \
        pytest.approx(-2.5 * np.log10(flux.to_value(up.flam)))
    assert filt.vega_zero_jy().to_value(up.Jy) == pytest.approx(
        up.flam_to_jy(flux, filt.lpivot).to_value(up.Jy))


def test_vega_zero_point_flat(flat_vega):
    filt = up.tophat(500., 600., vega=flat_vega)
    assert filt.vega_zero_flux().to_value(up.flam) == pytest.approx(3.44e-9)
    assert filt.vega_zero_mag() == \
        pytest.approx(-2.5 * np.log10(3.44e-9))


def test_vega_zero_point_other_vega(flat_vega):
    filt = up.tophat(500., 600.)
    flux = up.vega_zero_flux(filt, vega=flat_vega)
    assert flux.to_value(up.flam) == pytest.approx(3.44e-9)


@pytest.mark.skipif(TEST_DATA is None,
                    reason='UNITPHOT_TEST_DATA is not set')
class TestReferenceFilters:
    """
    GAIA G and 2MASS H with the Vega spectrum of Bohlin (2007). The
    directory UNITPHOT_TEST_DATA holds GAIA_GAIA3.G.pb, 2MASS_2MASS.H.pb and
    vega.dat.
    """
    @pytest.fixture(autouse=True)
    def reference_vega(self):
        vega = up.Vega.from_file(os.path.join(TEST_DATA, 'vega.dat'))
        up.set_default_vega(vega)
        yield vega

    def test_gaia_g(self):
        filt = up.read_filter(os.path.join(TEST_DATA, 'GAIA_GAIA3.G.pb'))
        assert filt.is_photon_type()
        assert filt.norm.to_value(up.nm) == pytest.approx(317.323944, rel=1e-5)
        assert filt.cl.to_value(up.nm) == pytest.approx(639.022034, rel=1e-5)
        assert filt.lpivot.to_value(up.nm) == \
            pytest.approx(621.759036, rel=1e-5)
        assert filt.lmin.to_value(up.nm) == pytest.approx(330., rel=1e-5)
        assert filt.lmax.to_value(up.nm) == pytest.approx(1030., rel=1e-5)
        assert filt.ab_zero_mag() == pytest.approx(21.376059, rel=1e-5)
        assert filt.ab_zero_flux().to_value(up.flam) == \
            pytest.approx(2.81564e-9, rel=1e-5)
        assert filt.st_zero_mag() == 21.1
        assert filt.vega_zero_mag() == pytest.approx(21.502333, rel=1e-5)

    def test_2mass_h(self):
        filt = up.read_filter(os.path.join(TEST_DATA, '2MASS_2MASS.H.pb'))
        assert not filt.is_photon_type()
        assert filt.norm.to_value(up.nm) == pytest.approx(250.940449, rel=1e-5)
        assert filt.cl.to_value(up.nm) == pytest.approx(1651.36646, rel=1e-5)
        assert filt.ab_zero_mag() == pytest.approx(23.489768, rel=1e-5)
        assert filt.vega_zero_flux().to_value(up.flam) == \
            pytest.approx(1.14415173e-10, rel=1e-5)
