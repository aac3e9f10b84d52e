"""
=================================
Solvers (:mod:`zerofun.solve`)
=================================

.. currentmodule:: zerofun.solve

Methods for finding a zero of a scalar function :math:`f(x) = 0`.
Each method is a class holding its parameters; calling ``solve()``
returns a `SolverResult` ``(root, converged)``.

Bracketing Methods
------------------

These require an interval over which `f` changes sign.  If the
interval given does not bracket a root, a bracket search is made
first.

.. autosummary::
    :toctree:

    Bisection
    Brent
    RegulaFalsi

Open Methods
------------

.. autosummary::
    :toctree:

    Newton
    QuasiNewton
    Secant

Construction
------------

.. autosummary::
    :toctree:

    Parameters
    SolverFactory
    available_methods
    make_solver

Support
-------

.. autosummary::
    :toctree:

    BracketSolver
    Solver
    SolverError
    SolverResult
    central_difference
    expand_bracket_root

"""

from .exception import SolverError
from .bracket import expand_bracket_root
from .base import BracketSolver, Solver, SolverResult
from .bisection import Bisection
from .brent import Brent
from .regula_falsi import RegulaFalsi
from .secant import Secant
from .newton import Newton, QuasiNewton, central_difference
from .factory import (Parameters, SolverFactory, available_methods,
                      make_solver)
