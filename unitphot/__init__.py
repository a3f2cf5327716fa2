"""
The unitphot package is a synthetic photometry package with unit checked
quantities.

All the quantities that characterise a filter (central, pivot, effective
wavelengths, widths, zero points) are computed once, when the filter is
built, and stored in memory.

A typical session would go as this:
1) Set the Vega spectrum used for effective wavelengths and Vega
   magnitudes, either with the UNITPHOT_VEGA_FILE environment variable or:

import unitphot as up
up.set_default_vega(up.Vega.from_file('vega.dat'))

2) Build a filter, from arrays or from a file:

g = up.Filter(wave, trans, 'AA', dtype='photon', name='GAIA_G')
h = up.read_filter('2MASS_H.pb')

3) Use it:

g.lpivot.to(up.nm)
g.get_flux(sp_wave, sp_flux, up.angstrom, up.flam)
g.ab_zero_mag(), g.vega_zero_jy().to(up.Jy)

It contains the following submodules, all imported by default.
- quantities: dimensional analysis, units, unit names look-up
- phottools:  some useful functions and classes used across various
              submodules
- passband:   defines the Filter class
- zeropoints: AB, ST and Vega zero points
- spectrum:   defines the reference spectra ReferenceSpectrum, Vega and Sun
- standards:  default Vega spectrum, black bodies
- licks:      Lick indices
- library:    libraries of filter files
"""

import logging

from .config import VERSION as __version__
from .errors import *
from .quantities import *
from .phottools import *
from .spectrum import *
from .standards import *
from .passband import *
from .zeropoints import *
from .licks import *
from .library import *

logging.getLogger(__name__).addHandler(logging.NullHandler())
