"""
Exceptions raised by the unitphot package.

All of them derive from PhotometryError, and from the builtin exception a
caller would naturally expect (ValueError for bad inputs, LookupError for
failed look-ups), so that ``except ValueError`` keeps working. Unit
mismatches are also astropy UnitConversionError, the exception astropy
raises itself when quantities of different kinds are combined.
"""

from astropy import units as u

__all__ = ['PhotometryError', 'InvalidArgumentError', 'UnitMismatchError',
           'NotFoundError', 'UnitNotFoundError']


class PhotometryError(Exception):
    """Base class of the unitphot exceptions"""


class InvalidArgumentError(PhotometryError, ValueError):
    """An argument has an invalid value (detector type, array shape, ...)"""


class UnitMismatchError(PhotometryError, u.UnitConversionError, ValueError):
    """A quantity or a unit does not have the expected physical type"""


class NotFoundError(PhotometryError, LookupError):
    """A filter, a Lick index or a reference spectrum could not be found"""


class UnitNotFoundError(NotFoundError):
    """A unit name is not in the unit look-up tables"""
