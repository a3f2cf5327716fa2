"""
This module provides useful functions and classes shared by the other
submodules.

Utility functions:
------------------
- ndarray_1darray(x)       : check whether x is a 1d array, test length if
                             needed
- ndarray_2darray(x)       : check whether x is a 1d or 2d array, test length
                             of last axis if needed
- check_wavelength_grid(x) : 1d, at least 2 samples, non decreasing
- trapezoid(y, x)          : trapezoidal integration along the last axis
- read_photometry_file()   : read a photometry ascii file
- write_photometry_file()  : write a photometry ascii file

Classes:
--------
- LinearInterpolator()     : linear interpolation with a choice of
                             extrapolation
- PhotometryHeader()       : header of photometry files
"""

import os
import re
import logging
import numpy as np
from scipy import integrate

from .config import DATA_DIR
from .errors import InvalidArgumentError, NotFoundError

__all__ = ['ndarray_1darray', 'ndarray_2darray', 'check_wavelength_grid',
           'trapezoid', 'LinearInterpolator', 'read_photometry_file',
           'write_photometry_file', 'PhotometryHeader']

logger = logging.getLogger(__name__)


def ndarray_1darray(x, length=None, other=None):
    """
    Check that an input is a 1d array with at least 2 elements

    Parameters
    ----------
    x : any
        input to be tested
    length: int
        if not None (default), test that x has length elements
    other: str
        name of variable to be added to message

    Returns
    -------
    if x checks OK, returns None, otherwise returns a string message
    """
    if not isinstance(x, np.ndarray):
        return " has to be an array"
    if x.ndim != 1:
        return " has to be 1D"
    if len(x) < 2:
        return " has to have 2 elements or more"
    if length is not None and len(x) != length:
        return " must have the same number of elements as " + other
    return None


def ndarray_2darray(x, length=None, other=None):
    """
    Check that an input is a 1d or 2d ndarray. Length allows to test the
    number of elements along the last axis.

    Returns
    -------
    if x checks OK, returns None, otherwise returns a string message
    """
    if not isinstance(x, np.ndarray) or x.ndim == 0:
        return " has to be an array"
    if x.ndim > 2:
        return " has to be 1D or 2D"
    if length is not None and x.shape[-1] != length:
        return " must have the same number of elements along its last " \
               "axis as " + other
    return None


def check_wavelength_grid(x, name='wavelength'):
    """
    Raise InvalidArgumentError unless x is a 1d array of at least 2
    non-decreasing values.
    """
    msg = ndarray_1darray(x)
    if msg is not None:
        raise InvalidArgumentError("`{}`".format(name) + msg)
    if np.any(np.diff(x) < 0):
        raise InvalidArgumentError("`{}` must be sorted in increasing "
                                   "order".format(name))


def trapezoid(y, x):
    """
    Trapezoidal integration of y(x) along the last axis of y.
    """
    return integrate.trapezoid(y, x=x, axis=-1)


class LinearInterpolator:
    """
    Linear interpolation of y(x).

    Attributes:
    -----------
    x: ndarray[n]
        abscissae of the input, increasing
    y: ndarray[n]
        ordinates
    extrapolate: str
        - 'zero' : outside of [x[0], x[-1]], the result is 0. This is what
                   is needed for passbands.
        - 'no'   : outside values are NaN
        - 'edge' : outside values are the ones of the closest edge

    Methods
    -------
    __call__(x) : perform interpolation at x
    """
    def __init__(self, x, y, extrapolate='zero'):
        if extrapolate not in self.available_extrapolations():
            raise InvalidArgumentError("Invalid extrapolation scheme: "
                                       "'{}'".format(extrapolate))
        self.x = x
        self.y = y
        self.extrapolate = extrapolate
        if extrapolate == 'zero':
            self.fill = (0., 0.)
        elif extrapolate == 'no':
            self.fill = (np.nan, np.nan)
        else:
            self.fill = (None, None)

    def __call__(self, x):
        return np.interp(x, self.x, self.y, left=self.fill[0],
                         right=self.fill[1])

    def __str__(self):
        output = "LinearInterpolator, extrapolate: {}".format(
            self.extrapolate)
        output += "\nDefinition domain: {} to {}".format(self.x[0],
                                                         self.x[-1])
        return output

    @staticmethod
    def available_extrapolations():
        return 'zero', 'no', 'edge'


def read_photometry_file(filename):
    """
    Read a photometry ascii file: header lines of the form
    '# card: value', followed by two columns of numbers.

    Parameters
    ----------
    filename: str
        The name of the file. If the file is not found, it is searched for
        in the data/ directory of the installation of the package. If none
        or more than one is found, NotFoundError is raised.

    Returns
    -------
    tuple (x, y, header): two ndarrays and a PhotometryHeader
    """
    if not os.path.exists(filename):
        result = []
        for root, dirs, files in os.walk(DATA_DIR):
            if filename in files:
                result.append(os.path.join(root, filename))
        if len(result) != 1:
            raise NotFoundError('could not locate {}, found {}'.format(
                filename, result))
        fullpath = result[0]
    else:
        fullpath = filename
    values = np.genfromtxt(fullpath, comments='#', dtype='float64',
                           usecols=(0, 1), ndmin=2)
    header = PhotometryHeader()
    with open(fullpath, 'r') as f:
        for line in f:
            if line.startswith('#'):
                header.import_line(line.rstrip('\n'), strict=False)
    logger.debug("read %d samples from %s", values.shape[0], fullpath)
    return values[:, 0].copy(), values[:, 1].copy(), header


def write_photometry_file(x, y, header, filename, overwrite=False,
                          xfmt=':>14.6f', yfmt=':>14.8g'):
    """
    Write two columns and a header to an ascii file.

    Parameters
    ----------
    x, y: ndarray
        the columns
    header: PhotometryHeader or dict
        written first, one '# card: value' line per card
    filename: str
        the name of the file
    overwrite: bool
        If True, will overwrite an existing file. Defaulted to False
    xfmt: str
        format for the x values
    yfmt: str
        format for the y values

    Returns
    -------
    str : the full path of the written file
    """
    fullfilename = os.path.abspath(filename)
    if os.path.exists(fullfilename) and not overwrite:
        raise InvalidArgumentError("The file {} already exists !"
                                   " Aborting".format(fullfilename))
    if not isinstance(header, PhotometryHeader):
        hd = PhotometryHeader()
        hd.import_dict(header)
        header = hd
    outstr = "{" + xfmt + "}    {" + yfmt + "}\n"
    with open(fullfilename, 'w') as f:
        for key, value in header.items():
            f.write("{}\n".format(header.format_card(key, value)))
        for xval, yval in zip(x, y):
            f.write(outstr.format(xval, yval))
    return fullfilename


class PhotometryHeader:
    """
    A Class to handle the headers of photometry files. Behaves like a
    dict.

    Attributes:
    -----------
    content : dict
        key, values of the header cards
    key_card : compiled regular expression
        matching pattern to decode header

    The class provides methods to format to and read from header lines.
    - Formatting is handled by overloading the __str__ method, so that
      print(hd) will print the header as it would appear in a file.
    - Reading from a line is done by the import_line() method
    - Dictionaries can be imported by the import_dict() method
    - Card and values can be added by the add_card_value() method.
    """
    # cards that can only have one value
    unique_cards = ('file', 'name', 'detector', 'xunit', 'yunit')

    def __init__(self):
        self.content = dict()
        self.key_card = re.compile(r'^#\s+(.+?):\s+(\S+.*)$')
        self.split_cr = re.compile(r'\n')

    def __getitem__(self, item):
        return self.content[item]

    def __setitem__(self, card, value):
        if card in self.unique_cards:
            self.edit_card_value(card, value)
        else:
            self.add_card_value(card, value)

    def __contains__(self, item):
        return item in self.content

    def __len__(self):
        return len(self.content)

    def get(self, card, default=None):
        return self.content.get(card, default)

    def items(self):
        return self.content.items()

    def add_card_value(self, card, value):
        """
        Add the pair card, value to the header. If card is already present,
        add to the existing value by introducing a carriage return before.

        Parameters
        ----------
        card: str
          name of the card
        value: any
          value is formatted to string.
        """
        wcard = str(card)
        if wcard in self.content:
            self.content[wcard] = self.content[wcard] + '\n{}'.format(value)
        else:
            self.content[wcard] = '{}'.format(value)

    def edit_card_value(self, card, value):
        """
        Replace the value of a card.
        """
        self.content[str(card)] = '{}'.format(value)

    def import_line(self, line, strict=True):
        """
        Decode a file header line and add the corresponding key, value to
        the header dictionary.

        Parameters
        ----------
        line : str
        strict: bool
            if True, a line that is not of the form '# card: value' raises
            InvalidArgumentError, otherwise it is ignored.
        """
        mcard = self.key_card.match(line)
        if mcard:
            self[mcard.group(1).strip()] = mcard.group(2).strip()
        elif strict:
            raise InvalidArgumentError('The following header line was not '
                                       'parsed:\n{}'.format(line))
        else:
            logger.debug("ignored header line %r", line)

    def import_dict(self, header):
        """
        Add a dictionary to the header
        """
        for k, v in header.items():
            self[k] = v

    def format_card(self, key, value):
        """
        Format the card, value to print header.
        :param key: card name
        :param value: value
        :return: string "# card: value". If value is multilines return
        "# card: first bit of value"
        ...
        "# card: last bit of value"
        """
        bits = self.split_cr.split('{}'.format(value))
        return '\n'.join('# {}: {}'.format(key, bit) for bit in bits)

    def __str__(self):
        if len(self.content) == 0:
            return 'Header: None'
        result = '############### Header #################'
        for k, v in self.content.items():
            result += '\n{}'.format(self.format_card(k, v))
        result += '\n############### End of Header #################'
        return result
