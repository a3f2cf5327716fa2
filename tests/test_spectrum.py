import numpy as np
import pytest

import unitphot as up


def test_blackbody_flux_function():
    flux = up.bb_flux_function(500e-9 * up.metre, 1., 5000. * up.kelvin)
    assert flux.to_value(up.flam) == pytest.approx(1.21072e6, rel=1e-4)
    assert (500. * up.nm * flux).to_value(up.watt / up.metre2) == \
        pytest.approx(6.0536e6, rel=1e-4)


def test_blackbody_several_temperatures():
    wave = np.array([400., 500., 600.]) * up.nm
    flux = up.bb_flux_function(wave, 1., np.array([3000., 6000.]))
    assert flux.shape == (2, 3)
    # hotter is brighter at all wavelengths
    assert np.all(flux.to_value(up.flam)[1] > flux.to_value(up.flam)[0])


def test_blackbody_spectrum():
    bb = up.blackbody(np.linspace(1000., 20000., 100), 5800.,
                      wavelength_unit='AA')
    assert isinstance(bb, up.ReferenceSpectrum)
    assert bb.get_wavelength()[0] == pytest.approx(100.)
    # Wien's law, the peak is at 2898 um K / T
    peak = bb.get_wavelength()[np.argmax(bb.get_flux())]
    assert peak == pytest.approx(2.8978e6 / 5800., rel=0.05)


def test_reference_spectrum_units():
    wave = np.array([4000., 5000., 6000.])
    flux = np.array([1., 2., 3.])
    sp = up.ReferenceSpectrum(wave, flux, 'AA', 'Jy', name='test')
    assert np.allclose(sp.get_wavelength(), [400., 500., 600.])
    assert np.allclose(sp.get_wavelength(up.micron), [0.4, 0.5, 0.6])
    assert np.allclose(sp.get_flux(), flux * 1e-23)
    assert np.allclose(sp.get_flux(up.Jy), flux)
    assert len(sp) == 3
    assert 'test' in str(sp)
    with pytest.raises(up.UnitMismatchError):
        up.ReferenceSpectrum(wave, flux, 'AA', up.watt)
    with pytest.raises(up.InvalidArgumentError):
        up.ReferenceSpectrum(wave, flux[:2])


def test_spectrum_is_read_only():
    sp = up.Vega(np.array([400., 500.]), np.array([1., 2.]))
    assert sp.name == 'Vega'
    with pytest.raises(ValueError):
        sp.flux[0] = 3.


def test_sun_distance():
    wave = np.array([400., 500., 600.])
    flux = np.array([1., 2., 3.])
    sun = up.Sun(wave, flux)
    assert np.allclose(sun.get_flux(), flux)
    far = up.Sun(wave, flux, distance=10. * up.au)
    assert np.allclose(far.get_flux(), flux / 100.)
    assert far.distance.to_value(up.au) == pytest.approx(10.)
    with pytest.raises(up.UnitMismatchError):
        up.Sun(wave, flux, distance=1. * up.second)


def test_spectrum_from_file(tmp_path):
    fname = tmp_path / 'sun.txt'
    fname.write_text("# name: solar test\n"
                     "# xunit: AA\n"
                     "# yunit: flam\n"
                     "# comment without card\n"
                     "4000.  1.5e-9\n"
                     "5000.  2.0e-9\n"
                     "6000.  1.8e-9\n")
    sun = up.Sun.from_file(str(fname), distance=2. * up.au)
    assert sun.name == 'solar test'
    assert np.allclose(sun.get_wavelength(), [400., 500., 600.])
    assert np.allclose(sun.get_flux(), np.array([1.5e-9, 2.0e-9, 1.8e-9]) / 4.)


def test_set_default_vega_type():
    with pytest.raises(up.InvalidArgumentError):
        up.set_default_vega('vega.dat')
