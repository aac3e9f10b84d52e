import numpy as np

from zerofun.solve.base import BracketSolver, SolverResult, endpoint_root
from zerofun.solve.bracket import straddles


# ======================================================================

class Bisection(BracketSolver):
    r"""
    Approximate solution of :math:`f(x) = 0` on an interval :math:`x \in
    [a, b]` by the bisection method.

    The interval is halved until its width is no more than ``2 * tol``
    and the midpoint is returned, so the error in the root is at most
    `tol`.  This requires at most
    :math:`\lceil \log_2((b - a) / 2 tol) \rceil` iterations.

    Examples
    --------
    >>> bisect = Bisection(lambda x: x**2 - x - 1, (1.0, 2.0), tol=1e-8)
    >>> x, converged = bisect.solve()
    >>> converged, round(x, 7)
    (True, 1.618034)
    """

    def solve(self) -> SolverResult:
        if (bracket := self._setup_bracket()) is None:
            return SolverResult(np.nan, False)

        a, b, ya, yb = bracket
        if (result := endpoint_root(a, b, ya, yb)) is not None:
            return result

        self._verbose_print("Bisection:")
        it = 0
        while abs(b - a) > 2 * self._tol and it < self._maxits:
            it += 1
            c = 0.5 * (a + b)
            yc = self._f(c)

            self._verbose_print(f"... Iteration {it}: x = [{a}, {c}, {b}], "
                                f"f = [{ya}, {yc}, {yb}]")

            # Keep the half holding the sign change (or exact zero).
            if straddles(ya, yc):
                b, yb = c, yc
            else:
                a, ya = c, yc

        return SolverResult(0.5 * (a + b), it < self._maxits)
