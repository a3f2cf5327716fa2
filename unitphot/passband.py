"""
This module provides the following classes:
- Filter : a passband, transmission as a function of wavelength, and the
           characteristic quantities derived from it.

Provide also the functions:
- tophat : a tophat filter
"""

import logging
import numpy as np

from .config import DEBUG
from .errors import InvalidArgumentError, UnitMismatchError
from .quantities import Quantity, nm, flam, Jy, is_wavelength, as_unit, \
    to_value
from .phottools import check_wavelength_grid, ndarray_1darray, \
    ndarray_2darray, trapezoid, LinearInterpolator
from .standards import default_vega
from . import zeropoints

__all__ = ['Filter', 'tophat', 'DETECTOR_TYPES']

logger = logging.getLogger(__name__)

DETECTOR_TYPES = ('photon', 'energy')


class Filter:
    """
    A class to perform synthetic photometry.

    A typical usage goes like this:

    import unitphot as up
    filt = up.Filter(wave, trans, 'AA', dtype='photon', name='GAIA_G')
    flux = filt.get_flux(sp_wave, sp_flux, up.angstrom, up.flam)
    filt.lpivot.to(up.angstrom)
    filt.ab_zero_mag()

    Internally, the wavelength is stored in nm. All the quantities that do
    not depend on a spectrum are computed once at initialization, the ones
    that depend on the Vega spectrum (leff, lphot) are computed once as
    well against the Vega spectrum given at initialization, or the default
    one (see unitphot.standards.default_vega). Filters are immutable,
    reinterp() returns a new Filter.

    Attributes (read-only):
    -----------------------
    name: str
        The name of the filter
    dtype: str
        The detector type: 'photon' for photon counting detectors,
        'energy' for energy counting ones.
    vega: ReferenceSpectrum
        The Vega spectrum used for leff, lphot and the Vega zero points.
    norm: Quantity
        Integral of the transmission over wavelength.
    cl: Quantity
        Central wavelength, transmission weighted mean wavelength.
    lpivot: Quantity
        Pivot wavelength.
    lmin, lmax: Quantity
        Smallest and largest wavelength where the transmission is above 1%
        of its peak.
    width: Quantity
        Effective width, norm / max(transmission).
    fwhm: Quantity
        Full width at half maximum, at the resolution of the wavelength grid.
    leff: Quantity
        Effective wavelength, Vega weighted mean wavelength.
    lphot: Quantity
        Photon distribution based effective wavelength.

    Methods:
    --------
    get_wavelength([unit]):
        the wavelength grid
    get_transmission():
        the transmission
    is_photon_type():
        True for photon counting detectors
    get_flux(wavelength, flux[, wavelength_unit, flux_unit]):
        mean flux density of a spectrum through the filter
    reinterp(new_wavelength[, wavelength_unit]):
        the same filter on another wavelength grid
    ab_zero_mag(), ab_zero_flux(), ab_zero_jy():
    st_zero_mag(), st_zero_flux(), st_zero_jy():
    vega_zero_mag(), vega_zero_flux(), vega_zero_jy():
        zero points in the three systems
    """
    def __init__(self, wavelength, transmission, wavelength_unit=nm,
                 dtype='photon', name='', vega=None):
        """
        Parameters:
        -----------
        wavelength: numpy.ndarray or Quantity
            The wavelength grid, in increasing order. If it is a Quantity
            wavelength_unit is ignored.
        transmission: numpy.ndarray
            The transmission, same number of elements as wavelength.
        wavelength_unit: astropy unit or str
            The unit of wavelength, e.g. unitphot.angstrom or 'AA'.
            Defaulted to nm
        dtype: str
            'photon' (default) or 'energy'
        name: str
            The name of the filter. It is not required to be unique.
        vega: ReferenceSpectrum
            The spectrum of Vega. If None, the default Vega spectrum is used.
        """
        if dtype not in DETECTOR_TYPES:
            raise InvalidArgumentError("Invalid detector type '{}', must be "
                                       "one of {}".format(dtype,
                                                          DETECTOR_TYPES))
        if isinstance(wavelength, Quantity):
            if not is_wavelength(wavelength.unit):
                raise UnitMismatchError("`wavelength` must be a length, got "
                                        "{}".format(wavelength.unit))
            wave = np.array(wavelength.to_value(nm), dtype='float64')
        else:
            unit = as_unit(wavelength_unit, nm, 'wavelength_unit')
            wave = np.array(wavelength, dtype='float64') * unit.to(nm)
        trans = np.array(transmission, dtype='float64')
        check_wavelength_grid(wave)
        msg = ndarray_1darray(trans, length=len(wave), other='wavelength')
        if msg is not None:
            raise InvalidArgumentError("`transmission`" + msg)
        if np.any(trans < 0):
            logger.warning("Filter '%s' has negative transmission values",
                           name)
        wave.flags.writeable = False
        trans.flags.writeable = False

        self._name = name
        self._dtype = dtype
        self._wavelength = wave
        self._transmission = trans
        self._interpolate = LinearInterpolator(wave, trans, extrapolate='zero')

        self._calculate_sed_independent_properties()
        if vega is None:
            vega = default_vega()
        self._vega = vega
        self._calculate_sed_dependent_properties()
        if DEBUG:
            logger.debug("new filter %r: cl=%g lpivot=%g leff=%g fwhm=%g nm",
                         self, self._cl, self._lpivot, self._leff,
                         self._fwhm)

    def _calculate_sed_independent_properties(self):
        wave = self._wavelength
        trans = self._transmission
        with np.errstate(divide='ignore', invalid='ignore'):
            self._norm = float(trapezoid(trans, wave))
            lt = float(trapezoid(wave * trans, wave))
            if self._norm > 0:
                self._cl = lt / self._norm
            else:
                self._cl = 0.
            if self.is_photon_type():
                lpivot2 = np.float64(lt) / trapezoid(trans / wave, wave)
            else:
                lpivot2 = np.float64(self._norm) / \
                    trapezoid(trans / wave ** 2, wave)
            self._lpivot = float(np.sqrt(lpivot2))
            tmax = trans.max()
            self._width = float(np.float64(self._norm) / tmax)
        if not np.isfinite(self._lpivot):
            logger.warning("Filter '%s': the pivot wavelength is undefined",
                           self._name)

        above = wave[trans > tmax / 100.]
        if len(above) > 0:
            self._lmin = float(above[0])
            self._lmax = float(above[-1])
        else:
            self._lmin = float(wave[-1])
            self._lmax = float(wave[0])

        # FWHM on the grid, no interpolation between samples
        half = 0.5 * tmax
        rising, = np.nonzero((trans[1:] > half) & (trans[:-1] <= half))
        falling, = np.nonzero((trans[:-1] > half) & (trans[1:] <= half))
        first = wave[rising[0]] if len(rising) > 0 else wave[0]
        last = wave[falling[-1] + 1] if len(falling) > 0 else wave[-1]
        self._fwhm = float(last - first)

    def _calculate_sed_dependent_properties(self):
        vega_wave = self._vega.get_wavelength(nm)
        vega_flux = self._vega.get_flux(flam)
        vega_trans = self._interpolate(vega_wave)
        weight = vega_trans * vega_flux
        with np.errstate(divide='ignore', invalid='ignore'):
            lf = trapezoid(vega_wave * weight, vega_wave)
            self._leff = float(lf / trapezoid(weight, vega_wave))
            self._lphot = float(trapezoid(vega_wave ** 2 * weight, vega_wave)
                                / lf)

    @property
    def name(self):
        return self._name

    @property
    def dtype(self):
        return self._dtype

    @property
    def vega(self):
        return self._vega

    @property
    def norm(self):
        return self._norm * nm

    @property
    def cl(self):
        return self._cl * nm

    @property
    def lpivot(self):
        return self._lpivot * nm

    @property
    def lmin(self):
        return self._lmin * nm

    @property
    def lmax(self):
        return self._lmax * nm

    @property
    def width(self):
        return self._width * nm

    @property
    def fwhm(self):
        return self._fwhm * nm

    @property
    def leff(self):
        return self._leff * nm

    @property
    def lphot(self):
        return self._lphot * nm

    def is_photon_type(self):
        return self._dtype == 'photon'

    def get_wavelength(self, unit=None):
        """
        Return a copy of the wavelength grid, in nm or in unit if given.
        """
        if unit is None:
            return self._wavelength.copy()
        unit = as_unit(unit, nm)
        return self._wavelength * nm.to(unit)

    def get_transmission(self):
        return self._transmission.copy()

    def get_flux(self, wavelength, flux, wavelength_unit=nm, flux_unit=flam):
        """
        Compute the mean spectral flux density of a spectrum through the
        filter:
        - photon counting: int(l T f dl) / int(l T dl)
        - energy counting: int(T f dl) / int(T dl)
        The transmission is interpolated on the wavelength of the spectrum,
        it is zero outside of the filter definition.

        Parameters
        ----------
        wavelength: numpy.ndarray or Quantity
            the wavelength of the spectrum, in increasing order
        flux: numpy.ndarray or Quantity
            the spectral flux density. Can be 2D, one spectrum per row.
        wavelength_unit: astropy unit or str
            the unit of wavelength, defaulted to nm
        flux_unit: astropy unit or str
            the unit of flux, defaulted to flam

        Returns
        -------
        Quantity: the flux (one value per spectrum), exactly 0 if the filter
        and the spectrum do not overlap.
        """
        wunit = as_unit(wavelength_unit, nm, 'wavelength_unit')
        funit = as_unit(flux_unit, flam, 'flux_unit')
        wave = np.asarray(to_value(wavelength, wunit), dtype='float64')
        flux = np.asarray(to_value(flux, funit), dtype='float64')
        check_wavelength_grid(wave)
        msg = ndarray_2darray(flux, length=len(wave), other='wavelength')
        if msg is not None:
            raise InvalidArgumentError("`flux`" + msg)

        wave_nm = wave * wunit.to(nm)
        if wave_nm[-1] < self._wavelength[0] or \
                wave_nm[0] > self._wavelength[-1]:
            logger.debug("Filter '%s' and spectrum do not overlap",
                         self._name)
            return funit * np.zeros(flux.shape[:-1])[()]
        trans = self._interpolate(wave_nm)
        if not np.any(trans > 0):
            logger.debug("Filter '%s' has no transmission on the spectrum "
                         "grid", self._name)
            return funit * np.zeros(flux.shape[:-1])[()]

        if self.is_photon_type():
            weight = wave * trans
        else:
            weight = trans
        values = trapezoid(weight * flux, wave) / trapezoid(weight, wave)
        return funit * values

    def reinterp(self, new_wavelength, wavelength_unit=nm):
        """
        Return a new Filter, with the same name and detector type, whose
        transmission is interpolated on new_wavelength (zero outside of
        the current definition).
        """
        unit = as_unit(wavelength_unit, nm, 'wavelength_unit')
        new_wave = np.asarray(to_value(new_wavelength, unit),
                              dtype='float64') * unit.to(nm)
        return Filter(new_wave, self._interpolate(new_wave), nm,
                      dtype=self._dtype, name=self._name, vega=self._vega)

    # zero points, see unitphot.zeropoints
    def ab_zero_mag(self):
        return zeropoints.ab_zero_mag(self)

    def ab_zero_flux(self):
        return zeropoints.ab_zero_flux(self)

    def ab_zero_jy(self):
        return zeropoints.ab_zero_jy(self)

    def st_zero_mag(self):
        return zeropoints.st_zero_mag(self)

    def st_zero_flux(self):
        return zeropoints.st_zero_flux(self)

    def st_zero_jy(self):
        return zeropoints.st_zero_jy(self)

    def vega_zero_mag(self):
        return zeropoints.vega_zero_mag(self)

    def vega_zero_flux(self):
        return zeropoints.vega_zero_flux(self)

    def vega_zero_jy(self):
        return zeropoints.vega_zero_jy(self)

    def __len__(self):
        return len(self._wavelength)

    def __repr__(self):
        return "Filter('{}', dtype='{}', {} points)".format(
            self._name, self._dtype, len(self))

    def __str__(self):
        result = "Filter object information:\n"
        result += "    name:                 {}\n".format(self._name)
        result += "    detector type:        {}\n".format(self._dtype)
        result += "    wavelength units:     nm\n"
        result += "    central wavelength:   {:f} nm\n".format(self._cl)
        result += "    pivot wavelength:     {:f} nm\n".format(self._lpivot)
        result += "    effective wavelength: {:f} nm\n".format(self._leff)
        result += "    photon wavelength:    {:f} nm\n".format(self._lphot)
        result += "    minimum wavelength:   {:f} nm\n".format(self._lmin)
        result += "    maximum wavelength:   {:f} nm\n".format(self._lmax)
        result += "    norm:                 {:f} nm\n".format(self._norm)
        result += "    effective width:      {:f} nm\n".format(self._width)
        result += "    fullwidth half-max:   {:f} nm\n".format(self._fwhm)
        result += "    definition contains {} points\n".format(len(self))
        result += "    Zero points\n"
        result += "        Vega: {:f} mag, {:g} flam, {:g} Jy\n".format(
            self.vega_zero_mag(), self.vega_zero_flux().to_value(flam),
            self.vega_zero_jy().to_value(Jy))
        result += "        AB:   {:f} mag, {:g} flam, {:g} Jy\n".format(
            self.ab_zero_mag(), self.ab_zero_flux().to_value(flam),
            self.ab_zero_jy().to_value(Jy))
        result += "        ST:   {:f} mag, {:g} flam, {:g} Jy".format(
            self.st_zero_mag(), self.st_zero_flux().to_value(flam),
            self.st_zero_jy().to_value(Jy))
        return result


def tophat(lmin, lmax, wavelength_unit=nm, dtype='photon', name='tophat',
           npoints=1001, vega=None):
    """
    Generate a tophat filter, with a transmission of 1.0 between lmin and
    lmax, and 0 elsewhere.

    Parameters:
    -----------
    lmin, lmax: float or Quantity
        the edges of the filter
    npoints: int
        number of samples of the wavelength grid

    Return:
    -------
    A Filter
    """
    unit = as_unit(wavelength_unit, nm, 'wavelength_unit')
    lo = to_value(lmin, unit)
    hi = to_value(lmax, unit)
    if not hi > lo:
        raise InvalidArgumentError("lmax must be greater than lmin")
    wave = np.linspace(lo, hi, npoints)
    return Filter(wave, np.ones(npoints), unit, dtype=dtype, name=name,
                  vega=vega)
