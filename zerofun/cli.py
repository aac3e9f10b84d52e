"""
Command line front end for :mod:`zerofun.solve`.

Finds the zero of the example function :math:`f(x) = 0.5 - e^{\\pi x}`
using a method chosen on the command line, with the method parameters
read from a YAML data file::

    python -m zerofun -f data.yaml -m Brent

The data file holds a ``ZeroFun`` mapping.  Entries directly under
``ZeroFun`` apply to all methods; a sub-mapping named after the method
(e.g. ``Brent``) overrides them for that method only::

    ZeroFun:
      tol: 1.0e-5
      maxIt: 200
      sol_ex: -0.220635600152
      Brent:
        a: 0.5
        b: 1.0
        tol: 1.0e-8

Recognised entries are ``tol``, ``maxIt``, ``tola``, ``x``, ``a``,
``b``, ``h``, ``h_interval``, ``maxIt_interval`` and ``sol_ex``.
"""
from __future__ import annotations

import argparse
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import numpy as np
import yaml

from zerofun.solve import Parameters, available_methods, make_solver

SECTION = 'ZeroFun'

# Data file key -> (Parameters field, type).  Interval ends 'a' and 'b'
# are handled separately.
_ENTRIES = {'tol': ('tol', float),
            'maxIt': ('maxits', int),
            'tola': ('tola', float),
            'x': ('x', float),
            'h': ('h', float),
            'h_interval': ('h_interval', float),
            'maxIt_interval': ('maxits_interval', int),
            'sol_ex': ('sol_ex', float)}


# ======================================================================

def example_fun(x: float) -> float:
    """Function for which the zero is sought, :math:`0.5 - e^{\\pi x}`."""
    return 0.5 - np.exp(np.pi * x)


def example_dfun(x: float) -> float:
    """Derivative of `example_fun`."""
    return -np.pi * np.exp(np.pi * x)


# ----------------------------------------------------------------------

def load_data(path: str | Path) -> dict[str, Any]:
    """
    Read the ``ZeroFun`` section of a YAML data file.  A missing or
    empty section gives an empty mapping (all defaults).
    """
    with Path(path).open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}

    if not isinstance(data, Mapping):
        raise ValueError(f"Data file '{path}' must contain a mapping.")

    section = data.get(SECTION) or {}
    if not isinstance(section, Mapping):
        raise ValueError(f"'{SECTION}' entry in '{path}' must be a "
                         f"mapping.")
    return dict(section)


def read_parameters(section: Mapping[str, Any], method: str, *,
                    f=example_fun, df=example_dfun) -> Parameters:
    """
    Build `Parameters` for `method` from a ``ZeroFun`` section.  Values
    given in the method sub-mapping take precedence over those given
    at section level, which take precedence over the defaults.

    Raises
    ------
    ValueError
        If an entry cannot be converted to the required type.
    """
    subsection = section.get(method) or {}
    if not isinstance(subsection, Mapping):
        raise ValueError(f"'{SECTION}/{method}' must be a mapping.")

    def lookup(key: str):
        if key in subsection:
            return subsection[key]
        value = section.get(key)
        return None if isinstance(value, Mapping) else value

    def convert(key: str, kind: type):
        value = lookup(key)
        if value is None:
            return None
        try:
            # PyYAML reads some float forms (e.g. '1e-5') as strings.
            number = float(value)
            if kind is int:
                if not number.is_integer():
                    raise ValueError
                return int(number)
            return number
        except (TypeError, ValueError, OverflowError):
            raise ValueError(f"Invalid value for '{key}': "
                             f"{value!r}.") from None

    kwargs = {}
    for key, (field, kind) in _ENTRIES.items():
        if (value := convert(key, kind)) is not None:
            kwargs[field] = value

    a, b = convert('a', float), convert('b', float)
    kwargs['interval'] = (0.0 if a is None else a, 1.0 if b is None else b)

    return Parameters(f=f, df=df, **kwargs)


# ----------------------------------------------------------------------

def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog='zerofun',
        description="Find the zero of f(x) = 0.5 - exp(pi x) using the "
                    "chosen method.")
    parser.add_argument('-f', '--file', default='data.yaml',
                        help="YAML data file (default: %(default)s).")
    parser.add_argument('-m', '--method', default='Bisection',
                        help=f"Method to use, one of: "
                             f"{', '.join(available_methods())} "
                             f"(default: %(default)s).")
    parser.add_argument('-v', '--verbose', action='store_true',
                        help="Print solver progress.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """
    Run the front end.  Returns the process exit status: 0 if the
    method ran (whether or not it converged), 1 if the data file or
    method was invalid.
    """
    args = _parse_args(argv)

    try:
        section = load_data(args.file)
        params = read_parameters(section, args.method)
        solver = make_solver(args.method, params, verbose=args.verbose)
    except (OSError, yaml.YAMLError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(f"Finding the zero with {args.method} method")
    x, converged = solver.solve()

    if converged:
        print(f"The zero is {x}")
        if not np.isnan(params.sol_ex):
            print(f"The exact zero is {params.sol_ex}")
            print(f"Approximation error {abs(params.sol_ex - x)}")
    else:
        print("Zero not found! Try to change the parameters or the "
              "initial values")

    return 0
