from collections.abc import Sequence

import numpy as np

from zerofun.solve.base import (BracketSolver, ScalarFunc, SolverResult,
                                endpoint_root)
from zerofun.solve.bracket import straddles

# Smallest chord fraction permitted before the iteration stops.
_SMALL_INCR = 10.0 * np.finfo(float).eps


# ======================================================================

class RegulaFalsi(BracketSolver):
    r"""
    Solution of :math:`f(x) = 0` by the Regula Falsi (false position)
    method.  Each new point is where the chord joining the ends of the
    bracket crosses zero; the end having the same sign as the new point
    is replaced, so the root always remains bracketed.

    Iteration stops once :math:`|f(c)| \le tol \cdot r_0 + tola`, where
    :math:`r_0 = \max(|f(a)|, |f(b)|)` for the starting bracket.  It
    also stops if the new point falls within a tiny fraction
    (:math:`10 \epsilon`) of the bracket width of either end.

    If the chord does not cross zero strictly inside the bracket (e.g.
    when the end values differ by many orders of magnitude) the method
    fails and returns ``(nan, False)``.
    """

    def __init__(self, f: ScalarFunc, interval: Sequence[float], *,
                 tol: float = 1e-5, maxits: int = 200, tola: float = 1e-10,
                 maxits_interval: int = 200, h_interval: float = 0.1,
                 verbose: bool = False):
        """
        Parameters
        ----------
        tol : float, default = 1e-5
            Relative residual tolerance (>= 0).
        tola : float, default = 1e-10
            Absolute residual tolerance (>= 0).
        f, interval, maxits, maxits_interval, h_interval, verbose :
            See `BracketSolver`.
        """
        super().__init__(f, interval, tol=tol, maxits=maxits,
                         maxits_interval=maxits_interval,
                         h_interval=h_interval, verbose=verbose)
        if not tola >= 0:
            raise ValueError(f"tola must be nonnegative (got {tola}).")
        self._tola = tola

    # -- Public Methods ------------------------------------------------

    def solve(self) -> SolverResult:
        if (bracket := self._setup_bracket()) is None:
            return SolverResult(np.nan, False)

        a, b, ya, yb = bracket
        if (result := endpoint_root(a, b, ya, yb)) is not None:
            return result

        delta = b - a
        check = self._tol * max(abs(ya), abs(yb)) + self._tola
        c, yc = a, ya
        incr = np.inf
        it = 0

        self._verbose_print("Regula Falsi:")
        while abs(yc) > check and incr > _SMALL_INCR and it < self._maxits:
            it += 1

            # Fractions of the interval either side of the chord zero.
            incra = -ya / (yb - ya)
            incrb = 1.0 - incra
            incr = min(incra, incrb)
            if max(incra, incrb) >= 1.0 or incr <= 0.0 or np.isnan(incr):
                return self._failed(f"Chord is failing on [{a}, {b}].")

            c = a + incra * delta
            yc = self._f(c)

            self._verbose_print(f"... Iteration {it}: x = [{a}, {c}, {b}], "
                                f"f = [{ya}, {yc}, {yb}]")

            if straddles(ya, yc):
                b, yb = c, yc
            else:
                a, ya = c, yc

            delta = b - a

        return SolverResult(c, it < self._maxits)

    @property
    def tola(self) -> float:
        """Absolute residual tolerance."""
        return self._tola
