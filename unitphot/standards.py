"""
This module provides functions to obtain standard spectra.

- default_vega / set_default_vega : the process wide Vega spectrum
- bb_flux_function : the Planck law, in flam
- blackbody : a black body ReferenceSpectrum
"""

import logging
import numpy as np
from astropy import constants as const

from . import config
from .errors import NotFoundError, InvalidArgumentError
from .quantities import nm, flam, kelvin, as_unit, to_value
from .spectrum import ReferenceSpectrum, Vega

__all__ = ['set_default_vega', 'default_vega', 'bb_flux_function',
           'blackbody']

logger = logging.getLogger(__name__)

_default_vega = None


def set_default_vega(spectrum):
    """
    Set the Vega spectrum used by filters built without an explicit one.
    Passing None forgets the current default.
    """
    global _default_vega
    if spectrum is not None and not isinstance(spectrum, ReferenceSpectrum):
        raise InvalidArgumentError("The default Vega must be a "
                                   "ReferenceSpectrum")
    _default_vega = spectrum


def default_vega():
    """
    Return the default Vega spectrum. If none was set with
    set_default_vega(), it is read once from the file given by the
    UNITPHOT_VEGA_FILE environment variable.
    """
    global _default_vega
    if _default_vega is None:
        if config.VEGA_FILE is None:
            raise NotFoundError("No default Vega spectrum: use "
                                "set_default_vega() or set "
                                "UNITPHOT_VEGA_FILE")
        logger.info("reading the default Vega spectrum from %s",
                    config.VEGA_FILE)
        _default_vega = Vega.from_file(config.VEGA_FILE)
    return _default_vega


def bb_flux_function(wavelength, amp, teff):
    """
    Black body spectral flux density per unit wavelength,
    amp * 2 h c**2 / lambda**5 / (exp(h c / (lambda k T)) - 1)

    Parameters
    ----------
    wavelength: Quantity
        the wavelengths (scalar or 1d)
    amp: float
        scaling factor, e.g. a solid angle
    teff: Quantity or float
        the temperature(s), in kelvin if a float. If an array, the result
        has one row per temperature.

    Returns
    -------
    Quantity in flam
    """
    lam = np.asarray(to_value(wavelength, nm), dtype='float64')
    t = np.asarray(to_value(teff, kelvin), dtype='float64')
    if t.ndim == 1:
        t = t[:, np.newaxis]
    h = const.h.value
    c = const.c.value
    k = const.k_B.value
    with np.errstate(over='ignore'):
        hckt = h * c / (lam * 1e-9 * k * t)
        # W / m**3 with lambda in nm, 1e45 * 1e-7 to flam
        result = amp * 2. * h * c ** 2 / (lam ** 5 * np.expm1(hckt)) * 1e38
    return flam * result


def blackbody(wavelength, teff, amp=1., wavelength_unit=nm):
    """
    Returns a black body spectrum.

    Parameters
    ----------
    wavelength: ndarray or Quantity
        The wavelengths
    teff: Quantity or float
        The temperature
    amp: float
        The scaling factor
    wavelength_unit: astropy unit or str
        unit of wavelength if it is not a Quantity

    Returns
    -------
    ReferenceSpectrum
    """
    unit = as_unit(wavelength_unit, nm, 'wavelength_unit')
    wave = np.asarray(to_value(wavelength, unit), dtype='float64') * unit
    flux = bb_flux_function(wave, amp, teff)
    return ReferenceSpectrum(wave.to(nm), flux.to(flam), nm, flam,
                             name='blackbody {:g} K'.format(
                                 float(to_value(teff, kelvin))))
