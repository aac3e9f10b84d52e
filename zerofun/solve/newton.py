"""
Newton-Raphson iteration for :math:`f(x) = 0`, either with a derivative
supplied by the user (`Newton`) or with a central difference
approximation to the derivative (`QuasiNewton`).
"""
from __future__ import annotations

from abc import ABC, abstractmethod

import numpy as np

from zerofun.solve.base import ScalarFunc, Solver, SolverResult


# ======================================================================

def central_difference(func: ScalarFunc, h: float) -> ScalarFunc:
    r"""
    Returns a function approximating the derivative of `func` by the
    central difference :math:`(f(x + h) - f(x - h)) / 2h`.  `func` and
    `h` are bound at the time of the call.
    """
    if not h > 0:
        raise ValueError(f"h must be positive (got {h}).")

    def dfunc(x: float) -> float:
        return (func(x + h) - func(x - h)) / (2.0 * h)

    return dfunc


# ======================================================================

class _NewtonIteration(Solver, ABC):
    r"""
    Common Newton-Raphson iteration :math:`x' = x - f(x) / f'(x)`
    starting from `x`.  Iteration stops once :math:`|f(x)| \le tol
    \cdot |f(x_0)| + tola`.  A zero derivative or a non-finite iterate
    returns ``(nan, False)``.
    """

    def __init__(self, f: ScalarFunc, x: float, *, tol: float = 1e-5,
                 maxits: int = 200, tola: float = 1e-10,
                 verbose: bool = False):
        super().__init__(f, tol=tol, maxits=maxits, verbose=verbose)
        self.x = x
        if not tola >= 0:
            raise ValueError(f"tola must be nonnegative (got {tola}).")
        self._tola = tola

    # -- Public Methods ------------------------------------------------

    @property
    @abstractmethod
    def df(self) -> ScalarFunc:
        """Derivative of `f` used by the iteration."""
        raise NotImplementedError

    def solve(self) -> SolverResult:
        df = self.df
        a = self._x
        ya = self._f(a)
        if not np.isfinite(ya):
            return self._failed(f"f({a}) = {ya} at starting point.")

        resid = abs(ya)
        check = self._tol * resid + self._tola
        it = 0

        self._verbose_print(f"{type(self).__name__}:")
        while resid > check and it < self._maxits:
            it += 1
            dya = df(a)
            if dya == 0:
                return self._failed(f"Derivative was zero at x = {a}.")

            a -= ya / dya
            if not np.isfinite(a):
                return self._failed(f"Non-finite iterate x = {a} "
                                    f"(f'(x) = {dya}).")

            ya = self._f(a)
            if not np.isfinite(ya):
                return self._failed(f"f({a}) = {ya}.")

            resid = abs(ya)
            self._verbose_print(f"... Iteration {it}: x = {a}, "
                                f"|f(x)| = {resid}")

        return SolverResult(a, it < self._maxits)

    @property
    def tola(self) -> float:
        """Absolute residual tolerance."""
        return self._tola

    @property
    def x(self) -> float:
        """Starting point."""
        return self._x

    @x.setter
    def x(self, value: float):
        if np.isnan(value):
            raise ValueError("Starting point cannot be NaN.")
        self._x = value


# ----------------------------------------------------------------------

class Newton(_NewtonIteration):
    """
    Newton-Raphson method using a derivative supplied by the user.

    Examples
    --------
    >>> newton = Newton(lambda x: x**2 - 2, 1.0, lambda x: 2 * x,
    ...                 tol=1e-12)
    >>> x, converged = newton.solve()
    >>> converged, round(x, 10)
    (True, 1.4142135624)
    """

    def __init__(self, f: ScalarFunc, x: float, df: ScalarFunc, *,
                 tol: float = 1e-5, maxits: int = 200, tola: float = 1e-10,
                 verbose: bool = False):
        """
        Parameters
        ----------
        f : Callable[[float], float]
            Function for which the zero is sought.
        x : float
            Starting point.
        df : Callable[[float], float]
            Derivative of `f`.
        tol : float, default = 1e-5
            Relative residual tolerance (>= 0).
        tola : float, default = 1e-10
            Absolute residual tolerance (>= 0).
        maxits, verbose :
            See `Solver`.
        """
        super().__init__(f, x, tol=tol, maxits=maxits, tola=tola,
                         verbose=verbose)
        self.df = df

    @property
    def df(self) -> ScalarFunc:
        """Derivative of `f`."""
        return self._df

    @df.setter
    def df(self, value: ScalarFunc):
        if not callable(value):
            raise TypeError("df must be callable.")
        self._df = value


# ----------------------------------------------------------------------

class QuasiNewton(_NewtonIteration):
    """
    Newton-Raphson method where the derivative is approximated by a
    central difference with step `h` (see `central_difference`).

    The approximate derivative always reflects the current `f` and `h`;
    changing either rebuilds it.  It cannot be assigned directly.
    """

    def __init__(self, f: ScalarFunc, x: float, *, h: float = 1e-2,
                 tol: float = 1e-5, maxits: int = 200, tola: float = 1e-10,
                 verbose: bool = False):
        """
        Parameters
        ----------
        h : float, default = 1e-2
            Central difference step (> 0).
        f, x, tol, tola, maxits, verbose :
            See `Newton`.
        """
        self._h = h
        super().__init__(f, x, tol=tol, maxits=maxits, tola=tola,
                         verbose=verbose)

    @property
    def df(self) -> ScalarFunc:
        """Central difference approximation to the derivative of `f`."""
        return self._df

    @Solver.f.setter
    def f(self, value: ScalarFunc):
        Solver.f.fset(self, value)
        self._df = central_difference(self._f, self._h)

    @property
    def h(self) -> float:
        """Central difference step."""
        return self._h

    @h.setter
    def h(self, value: float):
        self._df = central_difference(self._f, value)
        self._h = value
