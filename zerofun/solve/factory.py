"""
Construction of solvers by method name from a common set of
parameters.
"""
from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from zerofun.solve.base import Interval, ScalarFunc, Solver
from zerofun.solve.bisection import Bisection
from zerofun.solve.brent import Brent
from zerofun.solve.newton import Newton, QuasiNewton
from zerofun.solve.regula_falsi import RegulaFalsi
from zerofun.solve.secant import Secant


# ======================================================================

@dataclass(frozen=True, kw_only=True)
class Parameters:
    # noinspection PyUnresolvedReferences
    """
    All parameters that may be used by any of the solvers.  Each solver
    only takes the parameters it requires.

    Parameters
    ----------
    f : Callable[[float], float]
        Function for which the zero is sought.
    df : Callable[[float], float], optional
        Derivative of `f`.  Only required by ``'Newton'``.
    tol : float, default = 1e-5
        Convergence tolerance.
    maxits : int, default = 200
        Maximum number of iterations.
    tola : float, default = 1e-10
        Absolute residual tolerance (``'RegulaFalsi'``, ``'Secant'``,
        ``'Newton'``, ``'QuasiNewton'``).
    interval : (float, float), default = (0.0, 1.0)
        Starting interval for bracketing methods or starting points for
        ``'Secant'``.
    x : float, default = 0.0
        Starting point for ``'Newton'`` and ``'QuasiNewton'``.
    h : float, default = 1e-2
        Central difference step for ``'QuasiNewton'``.
    maxits_interval : int, default = 200
        Maximum steps for each bracket search.
    h_interval : float, default = 0.1
        Initial step for the bracket search.
    sol_ex : float, default = NaN
        Exact solution, if known.  Only used for reporting.
    """
    f: ScalarFunc
    df: ScalarFunc | None = None
    tol: float = 1e-5
    maxits: int = 200
    tola: float = 1e-10
    interval: Interval = (0.0, 1.0)
    x: float = 0.0
    h: float = 1e-2
    maxits_interval: int = 200
    h_interval: float = 0.1
    sol_ex: float = np.nan


# ----------------------------------------------------------------------

def _bracket_kwargs(p: Parameters) -> dict:
    return dict(tol=p.tol, maxits=p.maxits,
                maxits_interval=p.maxits_interval, h_interval=p.h_interval)


def _make_newton(p: Parameters, verbose: bool) -> Newton:
    if p.df is None:
        raise ValueError("Newton method requires a derivative 'df'.")
    return Newton(p.f, p.x, p.df, tol=p.tol, maxits=p.maxits, tola=p.tola,
                  verbose=verbose)


_BUILDERS: dict[str, Callable[[Parameters, bool], Solver]] = {
    'Bisection': lambda p, verbose: Bisection(
        p.f, p.interval, **_bracket_kwargs(p), verbose=verbose),
    'RegulaFalsi': lambda p, verbose: RegulaFalsi(
        p.f, p.interval, tola=p.tola, **_bracket_kwargs(p),
        verbose=verbose),
    'Brent': lambda p, verbose: Brent(
        p.f, p.interval, **_bracket_kwargs(p), verbose=verbose),
    'Secant': lambda p, verbose: Secant(
        p.f, p.interval, tol=p.tol, maxits=p.maxits, tola=p.tola,
        verbose=verbose),
    'Newton': _make_newton,
    'QuasiNewton': lambda p, verbose: QuasiNewton(
        p.f, p.x, h=p.h, tol=p.tol, maxits=p.maxits, tola=p.tola,
        verbose=verbose),
}


def available_methods() -> list[str]:
    """Names of the methods accepted by `make_solver`."""
    return list(_BUILDERS)


def make_solver(method: str, params: Parameters, *,
                verbose: bool = False) -> Solver:
    """
    Construct a new solver of the given type from `params`.

    Parameters
    ----------
    method : str
        One of ``'Bisection'``, ``'RegulaFalsi'``, ``'Brent'``,
        ``'Secant'``, ``'Newton'`` or ``'QuasiNewton'``.
    params : Parameters
        Parameters for the solver.
    verbose : bool, default = False
        Passed to the solver.

    Returns
    -------
    solver : Solver
        Solver ready for ``solve()``.

    Raises
    ------
    ValueError
        Unknown method, or a parameter required by the method is
        missing or invalid.
    """
    try:
        builder = _BUILDERS[method]
    except KeyError:
        raise ValueError(f"Invalid method '{method}'.  Available methods "
                         f"are: {', '.join(_BUILDERS)}.") from None

    return builder(params, verbose)


# ======================================================================

class SolverFactory:
    """
    Holds a set of `Parameters` and constructs solvers from them when
    called with a method name.

    Examples
    --------
    >>> factory = SolverFactory(Parameters(f=lambda x: x - 0.25))
    >>> solver = factory('Bisection')
    >>> type(solver).__name__
    'Bisection'
    """

    def __init__(self, params: Parameters, *, verbose: bool = False):
        self._params = params
        self.verbose = verbose

    def __call__(self, method: str) -> Solver:
        """Returns a new solver for `method` (see `make_solver`)."""
        return make_solver(method, self._params, verbose=self.verbose)

    @property
    def params(self) -> Parameters:
        return self._params

    def set_param(self, params: Parameters):
        """Replace the parameters used for subsequent solvers."""
        self._params = params
