#!/usr/bin/env python3

# Compares the root finding methods on a single problem.

import warnings

import numpy as np

from zerofun.solve import Parameters, SolverFactory, available_methods


def f(x):
    return x * np.cos(x) - 0.5 * x ** 2 + 1


def df(x):
    return np.cos(x) - x * np.sin(x) - x


factory = SolverFactory(Parameters(f=f, df=df, interval=(1.0, 2.0), x=1.5,
                                   tol=1e-10))

print(f"{'Method':<12s} {'Converged':<10s} {'x':>20s} {'f(x)':>12s}")
for method in available_methods():
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter('always')
        x, converged = factory(method).solve()

    print(f"{method:<12s} {str(converged):<10s} {x:20.14f} {f(x):12.3e}")
    for w in caught:
        print(f"    {w.message}")

# Bracketing methods search for a bracket when the interval given does
# not contain a sign change.  The step used is expanded and retained.
bisect = factory('Bisection')
bisect.interval = (-5.0, -4.5)
x, converged = bisect.solve()
print(f"\nBisection from [-5.0, -4.5]: x = {x:.8f} (converged = "
      f"{converged}), interval used = {bisect.interval}, "
      f"h_interval = {bisect.h_interval:.4f}")
