from collections.abc import Callable

import numpy as np

from zerofun.solve.exception import SolverError

# Growth applied to the step after each move of the bracket search.
EXPAND_FACTOR = 1.5


# ======================================================================

def same_sign(y1: float, y2: float) -> bool:
    """
    Returns ``True`` if `y1` and `y2` are both nonzero and have the same
    sign.  Signs are compared directly (rather than via ``y1 * y2 > 0``)
    so that very large or very small values cannot overflow or
    underflow the comparison.  `NaN` values always return ``False``.
    """
    return bool(np.sign(y1) * np.sign(y2) > 0)


def straddles(y1: float, y2: float) -> bool:
    """
    Returns ``True`` if `y1` and `y2` have opposite signs or either is
    exactly zero, i.e. the corresponding abscissae bracket a root.
    `NaN` values always return ``False``.
    """
    return bool(np.sign(y1) * np.sign(y2) <= 0)


# ----------------------------------------------------------------------

def expand_bracket_root(func: Callable[..., float], x1: float, h: float,
                        func_args=(), max_steps: int = 200
                        ) -> tuple[float, float, float]:
    """
    Find an interval bracketing a root of `func` by walking away from
    `x1` with a geometrically expanding step.

    The search starts from ``x2 = x1 + h``.  While ``func(x1)`` and
    ``func(x2)`` have the same sign, the point with the larger
    magnitude is dropped and a new point is placed a further `h` beyond
    the remaining one, in the direction of decreasing magnitude.  The
    step `h` is multiplied by `EXPAND_FACTOR` (1.5) after each move.

    Parameters
    ----------
    func : Callable[[float, ...], float]
        Scalar function whose root is to be bracketed.
    x1 : float
        Starting point for the search.
    h : float
        Initial step (> 0).
    func_args : optional
        Extra positional arguments for `func`.
    max_steps : int, default = 200
        Stops once this number of steps has been completed.

    Returns
    -------
    x1, x2, h : float, float, float
        `x`-values bracketing the root, in ascending order, and the
        expanded step reached at the end of the search.

    Raises
    ------
    ValueError
        Illegal starting conditions.

    SolverError
        Failure to find a bracket raises a `SolverError` exception
        including the following attributes:

        - `x1`, `x2`: Most recent points (in ascending order).
        - `y1`, `y2`: Function values corresponding to `x1`, `x2`.
        - `h`: Expanded step at the time of failure.
        - `flag` and `details`:
            - 1: Reached max_steps.
            - 2: Function returned NaN.
        - `steps`: Number of steps taken.
        - `fevals`: Number of function evaluations.

    Examples
    --------
    Equation :math:`y = x^2 - 3x + 2` has roots at `x` = 1 and `x` = 2.
    Starting to the left of both roots the walk heads right:

    >>> def example_fn(x):
    ...     return x**2 - 3 * x + 2
    >>> x1, x2, h = expand_bracket_root(example_fn, -2.0, 0.1)
    >>> x1 <= 1.0 <= x2
    True
    """
    if not h > 0:
        raise ValueError("Requires h > 0.")

    if max_steps < 1:
        raise ValueError("max_steps must be greater than 0.")

    x2 = x1 + h
    y1, y2 = func(x1, *func_args), func(x2, *func_args)
    steps, fevals = 0, 2

    while same_sign(y1, y2):  # False if y1 or y2 == 0 or NaN.
        if steps >= max_steps:
            if x1 > x2:
                x1, x2, y1, y2 = x2, x1, y2, y1
            raise SolverError("expand_bracket_root() failed:",
                              flag=1, details="Reached max_steps.",
                              x1=x1, x2=x2, y1=y1, y2=y2, h=h,
                              steps=steps, fevals=fevals)

        # Keep the point nearer the axis and step past it, away from
        # the other point.
        if abs(y2) > abs(y1):
            x1, x2, y1, y2 = x2, x1, y2, y1

        direction = 1.0 if x2 > x1 else -1.0
        x1, y1 = x2, y2
        x2 += direction * h
        y2 = func(x2, *func_args)
        h *= EXPAND_FACTOR
        steps += 1
        fevals += 1

    if x1 > x2:
        x1, x2, y1, y2 = x2, x1, y2, y1

    if np.isnan(y1) or np.isnan(y2):
        raise SolverError("expand_bracket_root() failed:",
                          flag=2, details="Function returned NaN.",
                          x1=x1, x2=x2, y1=y1, y2=y2, h=h, steps=steps,
                          fevals=fevals)

    return x1, x2, h
