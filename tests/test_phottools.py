import numpy as np
import pytest

import unitphot as up
from unitphot import phottools


def test_ndarray_checks():
    assert phottools.ndarray_1darray(np.arange(3.)) is None
    assert phottools.ndarray_1darray([1., 2.]) is not None
    assert phottools.ndarray_1darray(np.ones((2, 2))) is not None
    assert phottools.ndarray_1darray(np.ones(1)) is not None
    assert phottools.ndarray_1darray(np.ones(3), length=4,
                                     other='x') is not None
    assert phottools.ndarray_2darray(np.ones((2, 4)), length=4) is None
    assert phottools.ndarray_2darray(np.ones((2, 2, 2))) is not None


def test_check_wavelength_grid():
    phottools.check_wavelength_grid(np.array([1., 1., 2.]))
    with pytest.raises(up.InvalidArgumentError):
        phottools.check_wavelength_grid(np.array([2., 1.]))


def test_linear_interpolator():
    x = np.array([1., 2., 3.])
    y = np.array([0., 10., 0.])
    zero = phottools.LinearInterpolator(x, y, extrapolate='zero')
    assert np.allclose(zero(np.array([0., 1.5, 2., 4.])), [0., 5., 10., 0.])
    nan = phottools.LinearInterpolator(x, y, extrapolate='no')
    assert np.isnan(nan(0.5))
    edge = phottools.LinearInterpolator(x, y + 1., extrapolate='edge')
    assert edge(10.) == 1.
    assert 'extrapolate: zero' in str(zero)
    with pytest.raises(up.InvalidArgumentError):
        phottools.LinearInterpolator(x, y, extrapolate='quadratic')


def test_trapezoid():
    x = np.linspace(0., 1., 11)
    assert phottools.trapezoid(x, x) == pytest.approx(0.5)
    y = np.vstack([x, 2. * x])
    assert np.allclose(phottools.trapezoid(y, x), [0.5, 1.])


def test_header():
    hd = up.PhotometryHeader()
    hd.import_line('# name: GAIA G')
    hd.import_line('# comment: first line')
    hd.import_line('# comment: second line')
    hd['name'] = 'GAIA G3'
    assert hd['name'] == 'GAIA G3'
    assert hd['comment'] == 'first line\nsecond line'
    assert 'comment' in hd
    assert 'xunit' not in hd
    assert hd.get('xunit', 'nm') == 'nm'
    assert hd.format_card('comment', hd['comment']) == \
        '# comment: first line\n# comment: second line'
    with pytest.raises(up.InvalidArgumentError):
        hd.import_line('no card here')
    assert str(up.PhotometryHeader()) == 'Header: None'


def test_read_write_file(tmp_path):
    fname = str(tmp_path / 'curve.dat')
    header = {'name': 'curve', 'xunit': 'um'}
    x = np.array([1., 2., 3.])
    y = np.array([0.1, 0.2, 0.3])
    assert up.write_photometry_file(x, y, header, fname) == fname
    xr, yr, hd = up.read_photometry_file(fname)
    assert np.allclose(xr, x)
    assert np.allclose(yr, y)
    assert hd['xunit'] == 'um'
    with pytest.raises(up.NotFoundError):
        up.read_photometry_file('no_such_file.dat')
