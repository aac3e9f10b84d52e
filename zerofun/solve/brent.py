import numpy as np

from zerofun.solve.base import BracketSolver, SolverResult, endpoint_root
from zerofun.solve.bracket import straddles


# ======================================================================

class Brent(BracketSolver):
    """
    Solution of :math:`f(x) = 0` using Brent's method, combining
    inverse quadratic interpolation, the secant method and bisection.

    The interpolated point is only accepted when it lies between
    :math:`(3a + b) / 4` and `b` and the step is shrinking fast enough,
    otherwise a bisection step is taken.  This retains the reliability
    of bisection with (usually) much faster convergence.  Iteration
    stops when the bracket is no wider than `tol` (an absolute
    tolerance here) or an exact zero is found.

    References
    ----------
    .. [1] Brent, R. P., *Algorithms for Minimization without
       Derivatives*, Prentice-Hall, Englewood Cliffs, NJ, 1973. Chapter 4.
    """

    def solve(self) -> SolverResult:
        if (bracket := self._setup_bracket()) is None:
            return SolverResult(np.nan, False)

        a, b, ya, yb = bracket
        if (result := endpoint_root(a, b, ya, yb)) is not None:
            return result

        # 'b' is always the best estimate.
        if abs(ya) < abs(yb):
            a, b, ya, yb = b, a, yb, ya

        c, yc = a, ya
        d = c  # Point before 'c' (only used once mflag is False).
        mflag = True  # Previous step was bisection.
        s, ys = b, yb
        tol = self._tol
        it = 0

        self._verbose_print("Brent:")
        while True:
            it += 1

            # Scaled values so products of tiny function values cannot
            # underflow.
            scale = max(abs(ya), abs(yb), abs(yc))
            fa, fb, fc = ya / scale, yb / scale, yc / scale

            if fa != fc and fb != fc:
                # Inverse quadratic interpolation.
                fab, fac, fcb = fa - fb, fa - fc, fc - fb
                s = (a * fb * fc / (fab * fac) +
                     b * fa * fc / (fab * fcb) -
                     c * fa * fb / (fac * fcb))
            else:
                # Secant.
                s = b - yb * (b - a) / (yb - ya)

            if (not np.isfinite(s) or
                    (s - (3 * a + b) / 4) * (s - b) >= 0 or
                    (mflag and abs(s - b) >= 0.5 * abs(b - c)) or
                    (not mflag and abs(s - b) >= 0.5 * abs(c - d)) or
                    (mflag and abs(b - c) < tol) or
                    (not mflag and abs(c - d) < tol)):
                s = 0.5 * (a + b)  # Fall back to bisection.
                mflag = True
            else:
                mflag = False

            ys = self._f(s)
            d, c, yc = c, b, yb

            if straddles(ya, ys):
                b, yb = s, ys
            else:
                a, ya = s, ys

            if abs(ya) < abs(yb):
                a, b, ya, yb = b, a, yb, ya

            self._verbose_print(f"... Iteration {it}: x = {s}, f = {ys}, "
                                f"|b - a| = {abs(b - a)}, "
                                f"{'bisection' if mflag else 'interpolation'}")

            if ys == 0 or abs(b - a) <= tol or it >= self._maxits:
                break

        return SolverResult(s, it < self._maxits)
