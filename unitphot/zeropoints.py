"""
Zero points of a Filter in the AB, ST and Vega magnitude systems.

For each system three functions are provided:
- xx_zero_mag(filt)  : the magnitude of a spectrum of flux density 1 flam
                       through the filter, i.e. mag = -2.5 log10(f) + zero_mag
- xx_zero_flux(filt) : the flux density of a magnitude 0 source, in flam
- xx_zero_jy(filt)   : the same, converted to Jy at the pivot wavelength

AB : f_nu = 3631 Jy, expressed at the pivot wavelength
ST : f_lam = 10**(-0.4 * 21.1) flam
Vega : the flux of Vega through the filter
"""

import numpy as np

from .quantities import nm, angstrom, metre, second, flam, jansky, \
    speed_of_light, to_value

__all__ = ['AB_MAG_OFFSET', 'ST_ZERO_MAG', 'flam_to_jy', 'ab_zero_mag',
           'ab_zero_flux', 'ab_zero_jy', 'st_zero_mag', 'st_zero_flux',
           'st_zero_jy', 'vega_zero_flux', 'vega_zero_mag', 'vega_zero_jy']

AB_MAG_OFFSET = 48.60
ST_ZERO_MAG = 21.1


def flam_to_jy(flux, lpivot):
    """
    Convert a flux density per unit wavelength into Jy at the pivot
    wavelength: 1e5 / (1e-8 c) * lpivot**2 * flux, with c in m/s, lpivot
    in angstrom and flux in flam.

    Parameters
    ----------
    flux: Quantity
        flux density per unit wavelength
    lpivot: Quantity
        pivot wavelength

    Returns
    -------
    Quantity in Jy
    """
    c = speed_of_light.to_value(metre / second)
    lp = to_value(lpivot, angstrom)
    return (1e5 / (1e-8 * c) * lp ** 2 * to_value(flux, flam)) * jansky


def ab_zero_mag(filt):
    lp = filt.lpivot.to_value(nm)
    c = speed_of_light.to_value(angstrom / second)
    return 2.5 * np.log10(lp ** 2 * nm.to(angstrom) ** 2 / c) + \
        AB_MAG_OFFSET


def ab_zero_flux(filt):
    return 10 ** (-0.4 * ab_zero_mag(filt)) * flam


def ab_zero_jy(filt):
    return flam_to_jy(ab_zero_flux(filt), filt.lpivot)


def st_zero_mag(filt):
    """The ST zero point does not depend on the filter"""
    return ST_ZERO_MAG


def st_zero_flux(filt):
    return 10 ** (-0.4 * st_zero_mag(filt)) * flam


def st_zero_jy(filt):
    return flam_to_jy(st_zero_flux(filt), filt.lpivot)


def vega_zero_flux(filt, vega=None):
    """
    Flux of Vega through the filter.

    Parameters
    ----------
    filt: Filter
    vega: ReferenceSpectrum
        If None, the Vega spectrum of the filter is used.

    Returns
    -------
    Quantity in flam
    """
    if vega is None:
        vega = filt.vega
    return filt.get_flux(vega.get_wavelength(nm), vega.get_flux(flam),
                         nm, flam)


def vega_zero_mag(filt, vega=None):
    return -2.5 * np.log10(vega_zero_flux(filt, vega).to_value(flam))


def vega_zero_jy(filt, vega=None):
    return flam_to_jy(vega_zero_flux(filt, vega), filt.lpivot)
