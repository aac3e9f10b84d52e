"""
Exceptions raised by the function-level helpers in
:mod:`zerofun.solve`.  The solver classes themselves report failures
in-band through `SolverResult` and do not raise during ``solve()``.
"""


# ======================================================================

class SolverError(RuntimeError):
    """
    Raised by `expand_bracket_root` when no bracket is found.  The state
    of the search when it stopped is attached so that the caller can
    report it or resume from it.

    Attributes
    ----------
    flag : int
        1 if `max_steps` was reached, 2 if the function returned `NaN`.
    details : str
        Short description matching `flag`.
    x1, x2 : float
        Last two points of the search, in ascending order.
    y1, y2 : float
        Function values at `x1`, `x2`.
    h : float
        Expanded step at the time of failure.
    steps, fevals : int
        Steps taken and function evaluations made.
    """

    def __init__(self, msg: str, *, flag: int, details: str, x1: float,
                 x2: float, y1: float, y2: float, h: float, steps: int,
                 fevals: int):
        super().__init__(msg)
        self.flag, self.details = flag, details
        self.x1, self.x2, self.y1, self.y2 = x1, x2, y1, y2
        self.h, self.steps, self.fevals = h, steps, fevals

    def __str__(self):
        return (f"{super().__str__()} {self.details} (flag = {self.flag}, "
                f"x = [{self.x1}, {self.x2}], f = [{self.y1}, {self.y2}], "
                f"h = {self.h}, steps = {self.steps}, "
                f"fevals = {self.fevals})")
