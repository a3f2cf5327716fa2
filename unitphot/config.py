"""
Configuration of the unitphot package.

Values are read once, at import, from the environment:
- UNITPHOT_DEBUG     : if set to 1/true/yes, extra debugging information is
                       logged.
- UNITPHOT_VEGA_FILE : ascii file holding the default Vega spectrum (see
                       unitphot.standards.default_vega)
"""

import os

VERSION = '0.3.0'

DEBUG = os.environ.get('UNITPHOT_DEBUG', '').lower() in ('1', 'true', 'yes')

DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'data')

LICK_FILE = os.path.join(DATA_DIR, 'licks.dat')

VEGA_FILE = os.environ.get('UNITPHOT_VEGA_FILE') or None
