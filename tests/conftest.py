import numpy as np
import pytest

import unitphot as up


def make_vega():
    """
    A 9600 K black body normalised to 3.44e-9 flam at 555.6 nm, on a
    0.5 nm grid from 100 nm to 3000 nm.
    """
    wave = np.arange(100., 3000.5, 0.5)
    bb = up.blackbody(wave, 9600., wavelength_unit=up.nm)
    flux = bb.get_flux()
    flux = flux * 3.44e-9 / np.interp(555.6, wave, flux)
    return up.Vega(wave, flux, up.nm, up.flam)


@pytest.fixture(scope='session')
def vega():
    return make_vega()


@pytest.fixture(autouse=True)
def default_vega(vega):
    up.set_default_vega(vega)
    yield vega
    up.set_default_vega(None)


@pytest.fixture
def flat_vega():
    wave = np.linspace(100., 3000., 2901)
    return up.Vega(wave, np.full(wave.shape, 3.44e-9))
