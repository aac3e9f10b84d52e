"""
.. This module acts as the top-level API documentation.

.. module: zerofun

ZeroFun provides a small family of methods for finding a zero of a
scalar function of one real variable.  See :mod:`zerofun.solve` for the
solvers themselves and :mod:`zerofun.cli` for the command line front
end.
"""

__version__ = "0.1.0"

import sys

# ======================================================================

assert sys.version_info >= (3, 10)
