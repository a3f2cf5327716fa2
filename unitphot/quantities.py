"""
This module provides the units used by the whole package, on top of
astropy.units.

Quantities are astropy Quantity objects: adding or comparing quantities of
different physical types raises astropy UnitConversionError, multiplying
and dividing them combines their units. Units are astropy units, and the
non SI ones are defined here with fixed conversion factors:

    import unitphot as up
    wave = 500. * up.nm
    wave.to_value(up.angstrom)           # 5000.
    up.to_value(wave, up.second)         # raises UnitMismatchError

Each unit also has a vector of integer exponents of the 8 base
dimensions (mass, length, time, angle, current, luminosity, substance,
temperature), given by dimensions().

Functions:
----------
- dimensions(x)           : exponents of the base dimensions of a unit
- is_wavelength(unit)     : check whether unit is a wavelength unit
- is_flam(unit)           : check whether unit is a spectral flux density
                            per unit wavelength
- sqrt(q), square(q)      : dimension aware square root and square
- to_value(x, unit)       : strip units from a Quantity, leave arrays as is
- as_quantity(x, unit)    : check that x is a Quantity convertible to unit
- parse_length(name)      : look-up of a length unit from its name
- parse_spectralflux(name): look-up of a spectral flux density unit
- parse_unit(name)        : look-up in all tables
- as_unit(unit)           : accept a unit as an astropy unit or a name
"""

import numpy as np
from astropy import units as u
from astropy import constants as const

from .errors import UnitMismatchError, UnitNotFoundError, InvalidArgumentError

__all__ = [
    'Quantity', 'DIMENSION_NAMES', 'dimensions', 'is_wavelength',
    'is_flam', 'sqrt', 'square', 'to_value', 'as_quantity',
    'parse_length', 'parse_spectralflux', 'parse_unit', 'as_unit',
    'LENGTH_UNITS', 'SPECTRAL_FLUX_UNITS',
    # mass
    'kilogram', 'kg', 'gram', 'tonne', 'ounce', 'pound', 'stone', 'carat',
    # length
    'metre', 'meter', 'decimetre', 'centimetre', 'cm', 'millimetre', 'mm',
    'micrometre', 'micron', 'um', 'nanometre', 'nanometer', 'nm',
    'angstrom', 'kilometre', 'km', 'inch', 'foot', 'yard', 'mile',
    # area and volume
    'metre2', 'centimetre2', 'millimetre2', 'kilometre2', 'inch2', 'foot2',
    'mile2', 'metre3', 'centimetre3', 'millimetre3', 'foot3', 'inch3',
    'litre',
    # time
    'second', 'minute', 'hour', 'day', 'julian_year',
    # mechanics
    'Hz', 'hertz', 'standard_gravity', 'newton', 'poundforce', 'kilopond',
    'pascal', 'bar', 'psi',
    # other base units
    'ampere', 'candela', 'mole', 'kelvin',
    # energy and power
    'joule', 'erg', 'electron_volt', 'eV', 'calorie', 'watt',
    # angles
    'radian', 'degree', 'arcminute', 'arcsecond', 'steradian',
    # astronomy
    'speed_of_light', 'astronomical_unit', 'au', 'parsec', 'pc',
    'light_year', 'ly', 'msun', 'rsun', 'lsun',
    # spectral flux densities
    'flam', 'jansky', 'Jy',
]

Quantity = u.Quantity

DIMENSION_NAMES = ('mass', 'length', 'time', 'angle', 'current',
                   'luminosity', 'substance', 'temperature')
_BASES = (u.kg, u.m, u.s, u.rad, u.A, u.cd, u.mol, u.K)


def dimensions(x):
    """
    Exponents of the base dimensions of a unit or of a quantity.

    Parameters
    ----------
    x: astropy unit, Quantity or number

    Returns
    -------
    tuple of 8 ints, in the order of DIMENSION_NAMES
    """
    unit = getattr(x, 'unit', None)
    if unit is None:
        unit = x if isinstance(x, u.UnitBase) else u.dimensionless_unscaled
    try:
        decomposed = unit.decompose(bases=_BASES)
    except u.UnitsError as exc:
        raise UnitMismatchError("Cannot decompose {} into SI base "
                                "units".format(unit)) from exc
    exponents = [0] * len(_BASES)
    for base, power in zip(decomposed.bases, decomposed.powers):
        if int(power) != power:
            raise UnitMismatchError("Non integer power {} of {} in {}".format(
                power, base, unit))
        exponents[_BASES.index(base)] = int(power)
    return tuple(exponents)


def _is_convertible(unit, other):
    try:
        unit.to(other)
        result = True
    except u.UnitsError:
        result = False
    return result


def is_wavelength(unit):
    """
    Check whether the unit is compatible with a wavelength.
    """
    return _is_convertible(unit, u.m)


def is_flam(unit):
    """
    Check whether the unit is a spectral flux density per unit wavelength.
    """
    return _is_convertible(unit, flam)


def sqrt(q):
    """
    Square root of a quantity. The exponents of the base dimensions are
    halved, an odd exponent raises UnitMismatchError. Numbers are passed to
    numpy.sqrt.
    """
    if not isinstance(q, u.Quantity):
        return np.sqrt(q)
    if any(e % 2 for e in dimensions(q)):
        raise UnitMismatchError("Cannot take the square root of {}: odd "
                                "exponents".format(q.unit))
    return np.sqrt(q.decompose(bases=_BASES))


def square(q):
    """Square of a quantity, exponents are doubled"""
    return np.square(q)


def to_value(x, unit):
    """
    Return x expressed in unit if x is a Quantity, x itself (assumed to be
    already in unit) otherwise. Raises UnitMismatchError if x cannot be
    expressed in unit.
    """
    if not isinstance(x, u.Quantity):
        return x
    unit = as_unit(unit)
    try:
        return x.to_value(unit)
    except u.UnitConversionError as exc:
        raise UnitMismatchError("Cannot convert {} to {}".format(
            x.unit, unit)) from exc


def as_quantity(x, reference, name='value'):
    """
    Check that x is a Quantity (or a unit, taken as one of it) that can be
    expressed in the reference unit.

    Returns
    -------
    Quantity
    """
    if isinstance(x, u.UnitBase):
        x = 1. * x
    if not isinstance(x, u.Quantity):
        raise InvalidArgumentError("`{}` must be a Quantity, got "
                                   "{!r}".format(name, x))
    if not _is_convertible(x.unit, reference):
        raise UnitMismatchError("`{}` is in {}, not convertible to {}".format(
            name, x.unit, reference))
    return x


# Mass
kilogram = kg = u.kg
gram = u.g
tonne = u.def_unit('tonne', 1e3 * u.kg)
ounce = u.def_unit('oz', 0.028349523125 * u.kg)
pound = u.def_unit('lb', 16. * ounce)
stone = u.def_unit('stone', 14. * pound)
carat = u.def_unit('carat', 0.2 * u.g)

# Length
metre = meter = u.m
decimetre = u.dm
centimetre = cm = u.cm
millimetre = mm = u.mm
micrometre = micron = um = u.um
nanometre = nanometer = nm = u.nm
angstrom = u.AA
kilometre = km = u.km
inch = u.def_unit('inch', 2.54 * u.cm)
foot = u.def_unit('ft', 12. * inch)
yard = u.def_unit('yd', 3. * foot)
mile = u.def_unit('mi', 5280. * foot)

# Area and volume
metre2 = metre ** 2
centimetre2 = centimetre ** 2
millimetre2 = millimetre ** 2
kilometre2 = kilometre ** 2
inch2 = inch ** 2
foot2 = foot ** 2
mile2 = mile ** 2
metre3 = metre ** 3
centimetre3 = centimetre ** 3
millimetre3 = millimetre ** 3
foot3 = foot ** 3
inch3 = inch ** 3
litre = u.def_unit('litre', 1. * decimetre ** 3)

# Time, the year is the julian one
second = u.s
minute = u.min
hour = u.h
day = u.d
julian_year = u.def_unit('julian_year', 365.25 * u.d)

# Mechanics
Hz = hertz = u.Hz
standard_gravity = 9.80665 * u.m / u.s ** 2
newton = u.N
poundforce = u.def_unit('lbf', 1. * pound * standard_gravity)
kilopond = u.def_unit('kp', 1. * u.kg * standard_gravity)
pascal = u.Pa
bar = u.bar
psi = u.def_unit('psi', 1. * poundforce / inch2)

# Electricity, photometry, chemistry, thermodynamics
ampere = u.A
candela = u.cd
mole = u.mol
kelvin = u.K

# Energy and power
joule = u.J
erg = u.erg
electron_volt = eV = u.eV
calorie = u.def_unit('cal', 4.184 * u.J)
watt = u.W

# Angles
radian = u.rad
degree = u.deg
arcminute = u.arcmin
arcsecond = u.arcsec
steradian = u.sr

# Astronomy
speed_of_light = const.c.to(u.m / u.s)
astronomical_unit = au = u.def_unit('au', 149597870691. * u.m)
parsec = pc = u.def_unit('pc', 30856775814914. * u.km)
light_year = ly = u.def_unit('ly', (speed_of_light * julian_year).to(u.m))
msun = u.def_unit('Msun', 1.98892e30 * u.kg)
rsun = u.def_unit('Rsun', 6.955e8 * u.m)
lsun = u.def_unit('Lsun', 3.839e26 * u.W)

# Spectral flux densities. Jy is a fixed multiple of flam here, not a flux
# per unit frequency: it is not convertible to astropy's u.Jy.
flam = u.erg / u.s / u.cm ** 2 / u.AA
jansky = Jy = u.def_unit('Jy', 1e-23 * flam)


LENGTH_UNITS = {
    'Angstrom': angstrom,
    'AA': angstrom,
    'angstrom': angstrom,
    'Nanometer': nanometre,
    'nanometer': nanometre,
    'nm': nanometre,
    'meter': metre,
    'metre': metre,
    'm': metre,
    'cm': centimetre,
    'centimeter': centimetre,
    'mm': millimetre,
    'millimeter': millimetre,
    'km': kilometre,
    'kilometer': kilometre,
    'micrometer': micrometre,
    'micron': micrometre,
    'um': micrometre,
    'pc': parsec,
    'parsec': parsec,
}

SPECTRAL_FLUX_UNITS = {
    'flam': flam,
    'erg/second/centimetre2/angstrom': flam,
    'erg/second/centimetre**2/angstrom': flam,
    'erg/second/centimetre^2/angstrom': flam,
    'Jy': jansky,
    'jansky': jansky,
}


def parse_length(name):
    """
    Return the length unit named name. Raises UnitNotFoundError if name is
    not in LENGTH_UNITS.
    """
    try:
        return LENGTH_UNITS[name.strip()]
    except KeyError:
        raise UnitNotFoundError("Unknown length unit '{}'".format(
            name)) from None


def parse_spectralflux(name):
    """
    Return the spectral flux density unit named name. Raises
    UnitNotFoundError if name is not in SPECTRAL_FLUX_UNITS.
    """
    try:
        return SPECTRAL_FLUX_UNITS[name.strip()]
    except KeyError:
        raise UnitNotFoundError("Unknown spectral flux unit '{}'".format(
            name)) from None


def parse_unit(name, reference=None):
    """
    Look-up a unit by name in all the unit tables.

    Parameters
    ----------
    name: str
        name of the unit
    reference: astropy unit
        if given, the unit must be convertible to reference.

    Returns
    -------
    astropy unit
    """
    key = name.strip()
    if key in LENGTH_UNITS:
        unit = LENGTH_UNITS[key]
    elif key in SPECTRAL_FLUX_UNITS:
        unit = SPECTRAL_FLUX_UNITS[key]
    else:
        raise UnitNotFoundError("Unknown unit '{}'".format(name))
    if reference is not None and not _is_convertible(unit, reference):
        raise UnitMismatchError("Unit '{}' is not convertible to {}".format(
            name, reference))
    return unit


def as_unit(unit, reference=None, name='unit'):
    """
    Normalise a unit argument given either as an astropy unit or as a name.

    Parameters
    ----------
    unit: astropy unit or str
    reference: astropy unit
        if given, the unit must be convertible to reference
    name: str
        name of the argument, used in error messages

    Returns
    -------
    astropy unit
    """
    if isinstance(unit, str):
        return parse_unit(unit, reference=reference)
    if not isinstance(unit, u.UnitBase):
        raise InvalidArgumentError("`{}` must be a unit or a unit name, "
                                   "got {!r}".format(name, unit))
    if reference is not None and not _is_convertible(unit, reference):
        raise UnitMismatchError("`{}` is {}, not convertible to {}".format(
            name, unit, reference))
    return unit
