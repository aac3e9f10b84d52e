"""
Common definitions for all root finding solvers.

Every solver carries its own parameters, which can be changed between
calls, and ``solve()`` returns a `SolverResult`.  Methods requiring an
interval that brackets the root derive from `BracketSolver`, which
checks the interval before the main iteration and attempts to repair it
if required.
"""
from __future__ import annotations

import operator
import warnings
from abc import ABC, abstractmethod
from collections.abc import Callable, Sequence
from typing import NamedTuple

import numpy as np

from zerofun.solve.bracket import expand_bracket_root, straddles
from zerofun.solve.exception import SolverError

ScalarFunc = Callable[[float], float]
Interval = tuple[float, float]


# ======================================================================

class SolverResult(NamedTuple):
    """
    Outcome of a call to ``solve()``.  Unpacks as the pair ``(root,
    converged)``.
    """
    root: float
    """Approximation of the zero, or `NaN` if the method failed."""
    converged: bool
    """``False`` if the iteration limit was reached or the method
    failed."""


def as_interval(interval: Sequence[float]) -> Interval:
    """Check and unpack an ``(a, b)`` pair."""
    try:
        a, b = interval
        a, b = float(a), float(b)
    except (TypeError, ValueError):
        raise ValueError(f"Interval must be a pair of numbers, got "
                         f"{interval!r}.") from None

    if np.isnan(a) or np.isnan(b):
        raise ValueError("Interval endpoints cannot be NaN.")

    return a, b


# ======================================================================

class Solver(ABC):
    """
    Abstract base for methods that find a zero of a scalar function
    :math:`f(x) = 0`.
    """

    def __init__(self, f: ScalarFunc, *, tol: float = 1e-5,
                 maxits: int = 200, verbose: bool = False):
        """
        Parameters
        ----------
        f : Callable[[float], float]
            Function for which the zero is sought.
        tol : float, default = 1e-5
            Convergence tolerance (>= 0).  Its exact meaning depends on
            the method.
        maxits : int, default = 200
            Maximum number of iterations (>= 1).
        verbose : bool, default = False
            If True, print progress statements.
        """
        self.f = f

        if not tol >= 0:
            raise ValueError(f"tol must be nonnegative (got {tol}).")
        self._tol = tol

        self._maxits = operator.index(maxits)
        if self._maxits < 1:
            raise ValueError("maxits must be greater than 0.")

        self.verbose = verbose

    # -- Public Methods ------------------------------------------------

    @property
    def f(self) -> ScalarFunc:
        """Function for which the zero is sought."""
        return self._f

    @f.setter
    def f(self, value: ScalarFunc):
        if not callable(value):
            raise TypeError("f must be callable.")
        self._f = value

    @property
    def maxits(self) -> int:
        """Maximum number of iterations."""
        return self._maxits

    @abstractmethod
    def solve(self) -> SolverResult:
        """
        Run the method from the current parameters.

        Returns
        -------
        result : SolverResult
            Approximation of the zero and convergence flag.  Numerical
            failures are reported in the result; no exception is raised.
        """
        raise NotImplementedError

    @property
    def tol(self) -> float:
        """Convergence tolerance."""
        return self._tol

    # -- Private Methods -----------------------------------------------

    def _failed(self, msg: str) -> SolverResult:
        # Warn and return the standard failure result.
        warnings.warn(f"{type(self).__name__}: {msg}", RuntimeWarning,
                      stacklevel=3)
        return SolverResult(np.nan, False)

    def _verbose_print(self, info: str):
        if self.verbose:
            print(info)


# ----------------------------------------------------------------------

class BracketSolver(Solver, ABC):
    """
    Abstract base for methods that need an interval :math:`[a, b]` with
    :math:`f(a) f(b) \\le 0`.  If the interval given does not bracket a
    sign change, ``solve()`` first searches for one using
    `expand_bracket_root`, starting from `a` and then (if required) from
    `b`.
    """

    def __init__(self, f: ScalarFunc, interval: Sequence[float], *,
                 tol: float = 1e-5, maxits: int = 200,
                 maxits_interval: int = 200, h_interval: float = 0.1,
                 verbose: bool = False):
        """
        Parameters
        ----------
        f : Callable[[float], float]
            Function for which the zero is sought.
        interval : (float, float)
            Initial interval ``(a, b)``, stored in ascending order.
        tol, maxits, verbose :
            See `Solver`.
        maxits_interval : int, default = 200
            Maximum number of steps for each bracket search (>= 1).
        h_interval : float, default = 0.1
            Initial step for the bracket search (> 0).  This expands
            during each search and the expanded value is retained.
        """
        super().__init__(f, tol=tol, maxits=maxits, verbose=verbose)
        self.interval = interval
        self.h_interval = h_interval

        self._maxits_interval = operator.index(maxits_interval)
        if self._maxits_interval < 1:
            raise ValueError("maxits_interval must be greater than 0.")

    # -- Public Methods ------------------------------------------------

    def bracket_interval(self, x1: float) -> tuple[Interval, bool]:
        """
        Search for an interval bracketing a root, starting from `x1` and
        using the current `h_interval` as the initial step.
        `h_interval` is updated to the expanded step at the end of the
        search, whether or not it succeeded.

        Returns
        -------
        interval, found : (float, float), bool
            The final interval in ascending order and ``True`` if it
            brackets a sign change.
        """
        try:
            x1, x2, self._h_interval = expand_bracket_root(
                self._f, x1, self._h_interval,
                max_steps=self._maxits_interval)

        except SolverError as e:
            self._h_interval = e.h
            self._verbose_print(f"... Bracket search from x = {x1} "
                                f"failed: {e.details}")
            return (e.x1, e.x2), False

        self._verbose_print(f"... Bracket interval found: [{x1}, {x2}]")
        return (x1, x2), True

    def check_interval(self) -> tuple[Interval, bool]:
        """
        Check whether the current interval brackets a root.  If it does
        not, try `bracket_interval` from each end in turn.

        Returns
        -------
        interval, found : (float, float), bool
            Bracketing interval (or the current interval, if none could
            be found) and ``True`` if successful.
        """
        a, b = self._interval
        if straddles(self._f(a), self._f(b)):
            return self._interval, True

        self._verbose_print(f"Function must change sign across [{a}, {b}], "
                            f"searching for a bracketing interval.")
        for x_start in (a, b):
            interval, found = self.bracket_interval(x_start)
            if found:
                return interval, True

        warnings.warn(f"{type(self).__name__}: Unable to find an interval "
                      f"that brackets the zero.", RuntimeWarning,
                      stacklevel=3)
        return self._interval, False

    @property
    def h_interval(self) -> float:
        """Current step used by the bracket search."""
        return self._h_interval

    @h_interval.setter
    def h_interval(self, value: float):
        if not value > 0:
            raise ValueError(f"h_interval must be positive (got {value}).")
        self._h_interval = value

    @property
    def interval(self) -> Interval:
        """
        Interval ``(a, b)`` with ``a <= b``.  After ``solve()`` this holds
        the interval actually used, which may differ from the one
        originally given if a bracket search was required.
        """
        return self._interval

    @interval.setter
    def interval(self, value: Sequence[float]):
        a, b = as_interval(value)
        self._interval = (a, b) if a <= b else (b, a)

    @property
    def maxits_interval(self) -> int:
        """Maximum number of steps for each bracket search."""
        return self._maxits_interval

    # -- Private Methods -----------------------------------------------

    def _setup_bracket(self) -> tuple[float, float, float, float] | None:
        # Run the interval check, adopting the resulting interval.
        # Returns a, b, f(a), f(b) or None if no bracket was found.
        interval, found = self.check_interval()
        if not found:
            return None

        self._interval = interval
        a, b = interval
        return a, b, self._f(a), self._f(b)


# ----------------------------------------------------------------------

def endpoint_root(a: float, b: float, ya: float,
                  yb: float) -> SolverResult | None:
    """
    Returns a converged `SolverResult` if either end of the interval is
    an exact zero, otherwise ``None``.
    """
    if ya == 0.0:
        return SolverResult(a, True)
    if yb == 0.0:
        return SolverResult(b, True)
    return None
