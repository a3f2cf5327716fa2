"""
Lick indices.

This module provides:
- reduce_resolution(): degrade a spectrum to the resolution of the Lick/IDS
                       system before measuring the indices
- LickIndex: the definition of one index, and its measurement on a
             spectrum following Worthey et al. (1994, ApJS 94, 687)
- LickLibrary: the table of index definitions shipped with the package
"""

import logging
import numpy as np
from astropy.table import Table

from . import config
from .errors import InvalidArgumentError, NotFoundError
from .quantities import angstrom, as_unit, to_value, parse_length
from .phottools import check_wavelength_grid, ndarray_1darray, trapezoid

__all__ = ['LICK_WAVELENGTH', 'LICK_FWHM', 'FWHM_TO_SIGMA',
           'reduce_resolution', 'LickIndex', 'LickLibrary']

logger = logging.getLogger(__name__)

# Lick/IDS resolution (FWHM, angstrom) as a function of wavelength
LICK_WAVELENGTH = np.array([4000., 4400., 4900., 5400., 6000.])
LICK_FWHM = np.array([11.5, 9.2, 8.4, 8.4, 9.8])

FWHM_TO_SIGMA = 2. * np.sqrt(2. * np.log(2.))


def reduce_resolution(wavelength, flux, fwhm0=0., sigma_floor=0.2):
    """
    Convolve a spectrum with a variable gaussian kernel, bringing its
    resolution from fwhm0 to the one of the Lick/IDS system. The Lick
    resolution is linearly interpolated between the anchor points, and
    kept constant outside of them.

    Parameters
    ----------
    wavelength: ndarray or Quantity
        increasing wavelengths, in angstrom if not a Quantity
    flux: ndarray
        the spectrum
    fwhm0: float or Quantity
        the resolution (FWHM) of the input spectrum, in angstrom
    sigma_floor: float or Quantity
        the largest step of the kernel sampling, in angstrom, strictly
        positive

    Returns
    -------
    ndarray: the degraded spectrum, on the same wavelengths. Where the
    input resolution is already at or below the Lick one, the input flux is
    returned unchanged.
    """
    w = np.asarray(to_value(wavelength, angstrom), dtype='float64')
    flux = np.asarray(flux, dtype='float64')
    fwhm0 = float(to_value(fwhm0, angstrom))
    sigma_floor = float(to_value(sigma_floor, angstrom))
    if not sigma_floor > 0:
        raise InvalidArgumentError("`sigma_floor` must be positive, got "
                                   "{}".format(sigma_floor))
    check_wavelength_grid(w)
    msg = ndarray_1darray(flux, length=len(w), other='wavelength')
    if msg is not None:
        raise InvalidArgumentError("`flux`" + msg)

    res = np.interp(w, LICK_WAVELENGTH, LICK_FWHM)
    sigma2 = res ** 2 - fwhm0 ** 2
    unchanged = sigma2 <= 0
    if np.any(unchanged):
        logger.warning("%d points have a resolution equal to or better "
                       "than fwhm0=%g AA and are left unchanged",
                       np.count_nonzero(unchanged), fwhm0)
    sigma = np.sqrt(np.where(unchanged, 0., sigma2)) / FWHM_TO_SIGMA

    result = flux.copy()
    for i in np.nonzero(~unchanged)[0]:
        s = sigma[i]
        delta = min(sigma_floor, 0.1 * s)
        offsets = np.arange(-3. * s, 3. * s, delta)
        fluxj = np.interp(w[i] + offsets, w, flux, left=0., right=0.)
        kernel = np.exp(-0.5 * (offsets / s) ** 2)
        result[i] = np.sum(fluxj * delta * kernel) / (s * FWHM_TO_SIGMA)
    return result


class LickIndex:
    """
    Definition of a Lick index: an index band and two pseudo-continuum
    windows, on the blue and red sides.

    Attributes
    ----------
    name: str
    index_band, blue_continuum, red_continuum: Quantity [2]
        the windows
    is_mag: bool
        True if the index is expressed in magnitudes, False if it is an
        equivalent width in angstrom
    description: str
    """
    def __init__(self, name, index_band, blue_continuum, red_continuum,
                 wavelength_unit=angstrom, is_mag=False, description=''):
        unit = as_unit(wavelength_unit, angstrom, 'wavelength_unit')
        self.name = name
        self.is_mag = bool(is_mag)
        self.description = description
        self._band = self._window(index_band, unit, 'index_band')
        self._blue = self._window(blue_continuum, unit, 'blue_continuum')
        self._red = self._window(red_continuum, unit, 'red_continuum')

    @staticmethod
    def _window(values, unit, name):
        bounds = np.asarray(to_value(values, unit), dtype='float64') * \
            unit.to(angstrom)
        if bounds.shape != (2,) or not bounds[1] > bounds[0]:
            raise InvalidArgumentError("`{}` must be 2 increasing "
                                       "wavelengths".format(name))
        return bounds

    @property
    def index_band(self):
        return self._band * angstrom

    @property
    def blue_continuum(self):
        return self._blue * angstrom

    @property
    def red_continuum(self):
        return self._red * angstrom

    @property
    def index_unit(self):
        return 'mag' if self.is_mag else 'AA'

    @staticmethod
    def _window_samples(w, flux, window):
        inside = (w > window[0]) & (w < window[1])
        xs = np.concatenate(([window[0]], w[inside], [window[1]]))
        return xs, np.interp(xs, w, flux)

    def get(self, wavelength, flux, wavelength_unit=angstrom):
        """
        Measure the index on a spectrum.

        The pseudo-continuum is the straight line through the mean fluxes
        of the blue and red windows, placed at the window centres. Then
            EW = int (1 - F / Fc) dl             (angstrom)
            mag = -2.5 log10(int F / Fc dl / (l2 - l1))
        over the index band.

        Parameters
        ----------
        wavelength: ndarray or Quantity
            increasing wavelengths
        flux: ndarray
            the spectrum
        wavelength_unit: astropy unit or str
            unit of wavelength if it is not a Quantity

        Returns
        -------
        float : the index, NaN if the spectrum does not cover the
        definition windows
        """
        unit = as_unit(wavelength_unit, angstrom, 'wavelength_unit')
        w = np.asarray(to_value(wavelength, unit), dtype='float64') * \
            unit.to(angstrom)
        flux = np.asarray(flux, dtype='float64')
        check_wavelength_grid(w)
        msg = ndarray_1darray(flux, length=len(w), other='wavelength')
        if msg is not None:
            raise InvalidArgumentError("`flux`" + msg)

        lo = min(self._blue[0], self._band[0], self._red[0])
        hi = max(self._blue[1], self._band[1], self._red[1])
        if w[0] > lo or w[-1] < hi:
            logger.warning("The spectrum does not cover index %s (%g-%g AA)",
                           self.name, lo, hi)
            return np.nan

        xb, fb = self._window_samples(w, flux, self._blue)
        xr, fr = self._window_samples(w, flux, self._red)
        blue_flux = trapezoid(fb, xb) / (self._blue[1] - self._blue[0])
        red_flux = trapezoid(fr, xr) / (self._red[1] - self._red[0])
        blue_mid = 0.5 * (self._blue[0] + self._blue[1])
        red_mid = 0.5 * (self._red[0] + self._red[1])

        xs, fs = self._window_samples(w, flux, self._band)
        continuum = blue_flux + (red_flux - blue_flux) * (xs - blue_mid) / \
            (red_mid - blue_mid)
        ratio = fs / continuum
        if self.is_mag:
            width = self._band[1] - self._band[0]
            return float(-2.5 * np.log10(trapezoid(ratio, xs) / width))
        return float(trapezoid(1. - ratio, xs))

    def __repr__(self):
        return "LickIndex('{}')".format(self.name)

    def __str__(self):
        result = "Lick index {}".format(self.name)
        if self.description:
            result += ": {}".format(self.description)
        fmt = "\n    {:15s} {:.3f} - {:.3f} AA"
        result += fmt.format('index band:', *self._band)
        result += fmt.format('blue continuum:', *self._blue)
        result += fmt.format('red continuum:', *self._red)
        result += "\n    unit:           {}".format(self.index_unit)
        return result


class LickLibrary:
    """
    The library of Lick index definitions.

    The definitions are read from an ascii table with the columns
    name, band_min, band_max, blue_min, blue_max, red_min, red_max, unit,
    is_mag. By default, the table shipped with the package is used.

    Methods
    -------
    content: list of the index names
    find(name[, case_sensitive]): names containing name
    load_index(name): the LickIndex called name
    """
    def __init__(self, filename=None):
        if filename is None:
            filename = config.LICK_FILE
        self.filename = filename
        table = Table.read(filename, format='ascii.commented_header')
        self._indices = dict()
        for row in table:
            name = str(row['name'])
            self._indices[name] = LickIndex(
                name,
                (float(row['band_min']), float(row['band_max'])),
                (float(row['blue_min']), float(row['blue_max'])),
                (float(row['red_min']), float(row['red_max'])),
                wavelength_unit=parse_length(str(row['unit'])),
                is_mag=bool(row['is_mag']))
        logger.debug("read %d Lick indices from %s", len(self._indices),
                     filename)

    @property
    def content(self):
        return list(self._indices.keys())

    def find(self, name, case_sensitive=True):
        """
        Return the names of the indices containing name.
        """
        if case_sensitive:
            return [k for k in self._indices if name in k]
        lname = name.lower()
        return [k for k in self._indices if lname in k.lower()]

    def load_index(self, name):
        try:
            return self._indices[name]
        except KeyError:
            raise NotFoundError("Lick index '{}' not found in {}".format(
                name, self.filename)) from None

    def __getitem__(self, name):
        return self.load_index(name)

    def __contains__(self, name):
        return name in self._indices

    def __len__(self):
        return len(self._indices)

    def __iter__(self):
        return iter(self._indices.values())

    def __str__(self):
        return "Lick index library {}: {} indices".format(self.filename,
                                                         len(self))
