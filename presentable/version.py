"""
Module containing Presentable version.

This module is the authority regarding the Presentable version. The
`setup.py` file loads it to get the version of the distribution package,
so it must not import anything from the rest of the package.
"""


__version__ = '1.1.0'

