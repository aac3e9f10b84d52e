import os
from contextlib import redirect_stderr, redirect_stdout
from io import StringIO
from tempfile import TemporaryDirectory
from unittest import TestCase

import numpy as np

_DATA = """\
ZeroFun:
  tol: 1e-5
  maxIt: 200
  sol_ex: -0.220635600152
  a: -1.0
  b: 1.0
  Brent:
    a: 0.5
    b: 1.0
    tol: 1.0e-8
  RegulaFalsi:
    a: -0.5
    b: 0.5
  Secant:
    a: 0.0
    b: -0.5
  Newton:
    x: 0.0
    maxIt: 3.0e+1
"""


# ======================================================================

class TestReadParameters(TestCase):
    def test_read_parameters(self):
        import yaml
        from zerofun.cli import example_dfun, example_fun, read_parameters

        section = yaml.safe_load(_DATA)['ZeroFun']

        # Method entries override section entries.
        params = read_parameters(section, 'Brent')
        self.assertEqual(params.interval, (0.5, 1.0))
        self.assertEqual(params.tol, 1e-8)
        self.assertEqual(params.maxits, 200)
        self.assertEqual(params.sol_ex, -0.220635600152)
        self.assertIs(params.f, example_fun)
        self.assertIs(params.df, example_dfun)

        # PyYAML reads '1e-5' as a string.
        params = read_parameters(section, 'Bisection')
        self.assertEqual(params.interval, (-1.0, 1.0))
        self.assertEqual(params.tol, 1e-5)

        params = read_parameters(section, 'Newton')
        self.assertEqual(params.maxits, 30)
        self.assertIsInstance(params.maxits, int)
        self.assertEqual(params.x, 0.0)

    def test_read_parameters_defaults(self):
        from zerofun.cli import read_parameters

        params = read_parameters({}, 'Secant')
        self.assertEqual(params.interval, (0.0, 1.0))
        self.assertEqual(params.tol, 1e-5)
        self.assertEqual(params.maxits, 200)
        self.assertEqual(params.h_interval, 0.1)
        self.assertTrue(np.isnan(params.sol_ex))

        params = read_parameters({'b': 3.0, 'maxIt_interval': 10,
                                  'h_interval': 0.5, 'h': 1e-3},
                                 'Bisection')
        self.assertEqual(params.interval, (0.0, 3.0))
        self.assertEqual((params.maxits_interval, params.h_interval,
                          params.h), (10, 0.5, 1e-3))

    def test_read_parameters_errors(self):
        from zerofun.cli import read_parameters

        with self.assertRaises(ValueError):
            read_parameters({'tol': 'small'}, 'Brent')
        with self.assertRaises(ValueError):
            read_parameters({'Brent': {'maxIt': [1, 2]}}, 'Brent')
        with self.assertRaises(ValueError):
            read_parameters({'Brent': 3}, 'Brent')

        # Iteration counts must be finite whole numbers.
        for value in (float('inf'), '-inf', 2.5, '2.5'):
            with self.subTest(maxIt=value):
                with self.assertRaises(ValueError):
                    read_parameters({'maxIt': value}, 'Brent')

        params = read_parameters({'maxIt_interval': '1e2'}, 'Brent')
        self.assertEqual(params.maxits_interval, 100)


# ======================================================================

class TestMain(TestCase):
    def setUp(self):
        self._tmpdir = TemporaryDirectory()
        self.data_file = os.path.join(self._tmpdir.name, 'data.yaml')
        with open(self.data_file, 'w', encoding='utf-8') as fh:
            fh.write(_DATA)

    def tearDown(self):
        self._tmpdir.cleanup()

    def run_main(self, *args) -> tuple[int, str, str]:
        from zerofun.cli import main

        out, err = StringIO(), StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            status = main(list(args))
        return status, out.getvalue(), err.getvalue()

    def test_main(self):
        for method in ('Bisection', 'RegulaFalsi', 'Brent', 'Secant',
                       'Newton', 'QuasiNewton'):
            with self.subTest(method=method):
                status, out, _ = self.run_main('-f', self.data_file,
                                               '-m', method)
                self.assertEqual(status, 0)
                self.assertIn(f"Finding the zero with {method} method", out)
                self.assertIn("The zero is", out)
                self.assertIn("The exact zero is -0.220635600152", out)
                self.assertIn("Approximation error", out)

    def test_main_verbose(self):
        status, out, _ = self.run_main('--file', self.data_file,
                                       '--method', 'Brent', '--verbose')
        self.assertEqual(status, 0)
        self.assertIn("Bracket interval found", out)
        self.assertIn("... Iteration 1:", out)

    def test_main_not_found(self):
        with open(self.data_file, 'w', encoding='utf-8') as fh:
            fh.write("ZeroFun:\n  a: -1.0\n  b: 1.0\n  maxIt: 2\n")

        status, out, _ = self.run_main('-f', self.data_file, '-m', 'Brent')
        self.assertEqual(status, 0)
        self.assertIn("Zero not found!", out)
        self.assertNotIn("The zero is", out)

    def test_main_no_exact(self):
        with open(self.data_file, 'w', encoding='utf-8') as fh:
            fh.write("ZeroFun:\n  a: -1.0\n  b: 1.0\n")

        status, out, _ = self.run_main('-f', self.data_file)
        self.assertEqual(status, 0)
        self.assertIn("Finding the zero with Bisection method", out)
        self.assertIn("The zero is", out)
        self.assertNotIn("Approximation error", out)

    def test_main_errors(self):
        status, out, err = self.run_main('-f', self.data_file,
                                         '-m', 'Dekker')
        self.assertEqual(status, 1)
        self.assertIn("ERROR: Invalid method 'Dekker'", err)
        self.assertEqual(out, "")

        status, _, err = self.run_main(
            '-f', os.path.join(self._tmpdir.name, 'missing.yaml'))
        self.assertEqual(status, 1)
        self.assertIn("ERROR:", err)

        with open(self.data_file, 'w', encoding='utf-8') as fh:
            fh.write("- 1\n- 2\n")
        status, _, err = self.run_main('-f', self.data_file)
        self.assertEqual(status, 1)
        self.assertIn("must contain a mapping", err)

        with open(self.data_file, 'w', encoding='utf-8') as fh:
            fh.write("ZeroFun: [1, 2\n")
        status, _, err = self.run_main('-f', self.data_file)
        self.assertEqual(status, 1)

        for entry in ("maxIt: .inf", "maxIt: 2.5"):
            with self.subTest(entry=entry):
                with open(self.data_file, 'w', encoding='utf-8') as fh:
                    fh.write(f"ZeroFun:\n  {entry}\n")
                status, out, err = self.run_main('-f', self.data_file)
                self.assertEqual(status, 1)
                self.assertIn("ERROR: Invalid value for 'maxIt'", err)
                self.assertEqual(out, "")

# ----------------------------------------------------------------------
