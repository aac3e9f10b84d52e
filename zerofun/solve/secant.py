from collections.abc import Sequence

import numpy as np

from zerofun.solve.base import (Interval, ScalarFunc, Solver, SolverResult,
                                as_interval)


# ======================================================================

class Secant(Solver):
    r"""
    Solution of :math:`f(x) = 0` by a two point secant (chord) method.

    Starting from the pair ``(a, b)``, each new point is where the line
    through :math:`(a, f(a))` and :math:`(b, f(b))` crosses zero; it
    then replaces `a`.  The second point `b` is held fixed for the
    whole iteration so every step uses a chord pivoting about
    :math:`(b, f(b))`.  Unlike `RegulaFalsi` the points need not
    bracket the root.

    Iteration stops once :math:`|f(x)| \le tol \cdot |f(a_0)| + tola`.
    A zero slope or a non-finite iterate returns ``(nan, False)``.
    """

    def __init__(self, f: ScalarFunc, interval: Sequence[float], *,
                 tol: float = 1e-5, maxits: int = 200, tola: float = 1e-10,
                 verbose: bool = False):
        """
        Parameters
        ----------
        f : Callable[[float], float]
            Function for which the zero is sought.
        interval : (float, float)
            Starting points ``(a, b)``.  Order matters: `a` is the first
            iterate and `b` the fixed pivot.
        tol : float, default = 1e-5
            Relative residual tolerance (>= 0).
        tola : float, default = 1e-10
            Absolute residual tolerance (>= 0).
        maxits, verbose :
            See `Solver`.
        """
        super().__init__(f, tol=tol, maxits=maxits, verbose=verbose)
        self.interval = interval
        if not tola >= 0:
            raise ValueError(f"tola must be nonnegative (got {tola}).")
        self._tola = tola

    # -- Public Methods ------------------------------------------------

    @property
    def interval(self) -> Interval:
        """Starting points ``(a, b)``."""
        return self._interval

    @interval.setter
    def interval(self, value: Sequence[float]):
        self._interval = as_interval(value)

    def solve(self) -> SolverResult:
        a, b = self._interval
        ya = self._f(a)
        if not np.isfinite(ya):
            return self._failed(f"f({a}) = {ya} at starting point.")

        resid = abs(ya)
        check = self._tol * resid + self._tola
        yb = self._f(b)  # 'b' is held fixed.
        c = a
        it = 0

        self._verbose_print("Secant:")
        while resid > check and it < self._maxits:
            it += 1
            if yb == ya:
                return self._failed(f"Zero slope between x = {a} and "
                                    f"x = {b}.")

            c = a - ya * (b - a) / (yb - ya)
            if not np.isfinite(c):
                return self._failed(f"Non-finite iterate x = {c}.")

            yc = self._f(c)
            if not np.isfinite(yc):
                return self._failed(f"f({c}) = {yc}.")

            resid = abs(yc)
            a, ya = c, yc
            self._verbose_print(f"... Iteration {it}: x = {c}, "
                                f"|f(x)| = {resid}")

        return SolverResult(c, it < self._maxits)

    @property
    def tola(self) -> float:
        """Absolute residual tolerance."""
        return self._tola
