"""
This module provides the following classes:
- ReferenceSpectrum: a spectrum, flux density per unit wavelength as a
                     function of wavelength
- Vega: the reference spectrum of Vega
- Sun: the reference spectrum of the Sun, seen at a given distance
"""

import os
import numpy as np

from .errors import InvalidArgumentError
from .quantities import nm, flam, au, as_unit, as_quantity, to_value
from .phottools import check_wavelength_grid, ndarray_1darray, \
    read_photometry_file

__all__ = ['ReferenceSpectrum', 'Vega', 'Sun']


class ReferenceSpectrum:
    """
    A class to represent a reference spectrum.

    Attributes
    ----------
    name: str
        name of the spectrum
    wavelength: ndarray [N]
        the wavelength, in nm, read-only
    flux: ndarray [N]
        the spectral flux density, in flam, read-only

    Methods
    -------
    - get_wavelength(unit=None)
        the wavelength in nm, or in unit
    - get_flux(unit=None)
        the flux density in flam, or in unit
    - from_file(filename)
        build a spectrum from an ascii file
    """
    def __init__(self, wavelength, flux, wavelength_unit=nm, flux_unit=flam,
                 name=''):
        """
        Parameters
        ----------
        wavelength: ndarray or Quantity
            increasing wavelengths
        flux: ndarray or Quantity
            flux density per unit wavelength
        wavelength_unit: astropy unit or str
            unit of wavelength if it is not a Quantity. Defaulted to nm
        flux_unit: astropy unit or str
            unit of flux if it is not a Quantity. Defaulted to flam
        name: str
        """
        wunit = as_unit(wavelength_unit, nm, 'wavelength_unit')
        funit = as_unit(flux_unit, flam, 'flux_unit')
        wave = np.array(to_value(wavelength, wunit), dtype='float64') * \
            wunit.to(nm)
        fl = np.array(to_value(flux, funit), dtype='float64') * funit.to(flam)
        check_wavelength_grid(wave)
        msg = ndarray_1darray(fl, length=len(wave), other='wavelength')
        if msg is not None:
            raise InvalidArgumentError("`flux`" + msg)
        wave.flags.writeable = False
        fl.flags.writeable = False
        self.name = name
        self.wavelength = wave
        self.flux = fl

    @classmethod
    def from_file(cls, filename, wavelength_unit=None, flux_unit=None,
                  name=None, **kwargs):
        """
        Read the spectrum from an ascii photometry file. The units and name
        default to the 'xunit', 'yunit' and 'name' cards of the file
        header, then to nm, flam and the file name.
        """
        x, y, header = read_photometry_file(filename)
        if wavelength_unit is None:
            wavelength_unit = header.get('xunit', 'nm')
        if flux_unit is None:
            flux_unit = header.get('yunit', 'flam')
        if name is None:
            name = header.get('name', os.path.splitext(
                os.path.basename(filename))[0])
        return cls(x, y, wavelength_unit=wavelength_unit, flux_unit=flux_unit,
                   name=name, **kwargs)

    def get_wavelength(self, unit=None):
        if unit is None:
            return self.wavelength.copy()
        return self.wavelength * nm.to(as_unit(unit, nm))

    def get_flux(self, unit=None):
        if unit is None:
            return self.flux.copy()
        return self.flux * flam.to(as_unit(unit, flam))

    def __len__(self):
        return len(self.wavelength)

    def __str__(self):
        return "{} '{}': {} points from {:g} to {:g} nm".format(
            type(self).__name__, self.name, len(self), self.wavelength[0],
            self.wavelength[-1])


class Vega(ReferenceSpectrum):
    """
    Spectrum of Vega. Used for the Vega magnitude system and to compute
    the effective wavelengths of filters.
    """
    def __init__(self, wavelength, flux, wavelength_unit=nm, flux_unit=flam,
                 name='Vega'):
        super().__init__(wavelength, flux, wavelength_unit=wavelength_unit,
                         flux_unit=flux_unit, name=name)


class Sun(ReferenceSpectrum):
    """
    Spectrum of the Sun. The input spectrum is given at reference_distance,
    the spectrum is scaled by (reference_distance / distance)**2.

    Additional attributes
    ---------------------
    distance: Quantity
        distance of the observer
    reference_distance: Quantity
        distance at which the input spectrum is given
    """
    def __init__(self, wavelength, flux, wavelength_unit=nm, flux_unit=flam,
                 name='Sun', distance=au, reference_distance=au):
        super().__init__(wavelength, flux, wavelength_unit=wavelength_unit,
                         flux_unit=flux_unit, name=name)
        distance = as_quantity(distance, au, 'distance')
        reference_distance = as_quantity(reference_distance, au,
                                         'reference_distance')
        if not distance.to_value(au) > 0:
            raise InvalidArgumentError("`distance` must be positive")
        self.distance = distance
        self.reference_distance = reference_distance
        scaled = self.flux * (reference_distance / distance).to_value('') ** 2
        scaled.flags.writeable = False
        self.flux = scaled
