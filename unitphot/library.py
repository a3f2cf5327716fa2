"""
Filter libraries.

A filter is stored as an ascii photometry file: a header with the cards
'name', 'detector' (photon or energy) and 'xunit', then two columns,
wavelength and transmission. A library is a directory of such files.

This module provides:
- read_filter(filename): read a Filter from a file
- write_filter(filt, filename): write a Filter to a file
- FilterLibrary: a directory of filter files
"""

import os
import glob
import logging
from concurrent.futures import ThreadPoolExecutor

from .errors import NotFoundError
from .phottools import PhotometryHeader, read_photometry_file, \
    write_photometry_file
from .passband import Filter
from .standards import default_vega

__all__ = ['read_filter', 'write_filter', 'FilterLibrary']

logger = logging.getLogger(__name__)


def read_filter(filename, vega=None):
    """
    Read a filter from an ascii photometry file.

    Missing header cards default to: name, the file name without its
    extension; detector, 'photon'; xunit, 'nm'.
    """
    x, y, header = read_photometry_file(filename)
    name = header.get('name', os.path.splitext(os.path.basename(filename))[0])
    return Filter(x, y, wavelength_unit=header.get('xunit', 'nm'),
                  dtype=header.get('detector', 'photon'), name=name,
                  vega=vega)


def write_filter(filt, filename, overwrite=False):
    """
    Write a filter to an ascii photometry file, wavelength in nm.

    Returns
    -------
    str : the full path of the written file
    """
    header = PhotometryHeader()
    header['name'] = filt.name
    header['detector'] = filt.dtype
    header['xunit'] = 'nm'
    return write_photometry_file(filt.get_wavelength(),
                                 filt.get_transmission(), header, filename,
                                 overwrite=overwrite)


class FilterLibrary:
    """
    A directory of filter files. Filters are identified by their file name
    without extension.

    Attributes
    ----------
    directory: str
    pattern: str
        glob pattern of the filter files, defaulted to '*.pb'

    Methods
    -------
    content: the names of the filters
    find(name[, case_sensitive]): the filter names containing name
    load_filter(name): the Filter called name
    load_all([names, max_workers]): build several filters concurrently
    """
    def __init__(self, directory, pattern='*.pb', vega=None):
        if not os.path.isdir(directory):
            raise NotFoundError("Filter library directory {} does not "
                                "exist".format(directory))
        self.directory = directory
        self.pattern = pattern
        self.vega = vega
        self._files = dict()
        for path in sorted(glob.glob(os.path.join(directory, pattern))):
            key = os.path.splitext(os.path.basename(path))[0]
            self._files[key] = path
        logger.debug("%d filters in %s", len(self._files), directory)

    @property
    def content(self):
        return list(self._files.keys())

    def find(self, name, case_sensitive=True):
        if case_sensitive:
            return [k for k in self._files if name in k]
        lname = name.lower()
        return [k for k in self._files if lname in k.lower()]

    def load_filter(self, name):
        try:
            path = self._files[name]
        except KeyError:
            raise NotFoundError("Filter '{}' not found in {}".format(
                name, self.directory)) from None
        return read_filter(path, vega=self._get_vega())

    def load_all(self, names=None, max_workers=None):
        """
        Build the filters called names (all of them by default) in a pool
        of threads.

        Returns
        -------
        list of Filter, in the order of names
        """
        if names is None:
            names = self.content
        for name in names:
            if name not in self._files:
                raise NotFoundError("Filter '{}' not found in {}".format(
                    name, self.directory))
        # resolve the shared Vega before the workers start
        vega = self._get_vega()
        paths = [self._files[name] for name in names]
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            return list(pool.map(lambda p: read_filter(p, vega=vega), paths))

    def _get_vega(self):
        if self.vega is None:
            return default_vega()
        return self.vega

    def __contains__(self, name):
        return name in self._files

    def __len__(self):
        return len(self._files)

    def __getitem__(self, name):
        return self.load_filter(name)

    def __str__(self):
        return "Filter library {}: {} filters".format(self.directory,
                                                     len(self))
