from unittest import TestCase

import numpy as np

from .scalar_tst_functions import (f_exp, f_exp_root, f_golden,
                                   f_golden_root)


# ======================================================================

class TestSecant(TestCase):
    def test_secant(self):
        from zerofun.solve import Secant

        # Check normal operation, stopping on the residual.
        a, b, tol, tola = 0.0, -0.5, 1e-5, 1e-10
        x, converged = Secant(f_exp, (a, b), tol=tol, tola=tola).solve()
        self.assertTrue(converged)
        self.assertLessEqual(abs(f_exp(x)), tol * abs(f_exp(a)) + tola)
        self.assertAlmostEqual(x, f_exp_root, places=4)

        x, converged = Secant(f_golden, (1.0, 2.0), tol=1e-12,
                              tola=0.0).solve()
        self.assertTrue(converged)
        self.assertAlmostEqual(x, f_golden_root, places=11)

    def test_secant_fixed_pivot(self):
        from zerofun.solve import Secant

        # Second point is used for every step, so f(b) is only
        # evaluated once.
        calls = []

        def f(x):
            calls.append(x)
            return f_golden(x)

        x, converged = Secant(f, (1.0, 2.0), maxits=3).solve()
        self.assertFalse(converged)
        self.assertEqual(calls.count(2.0), 1)
        self.assertEqual(calls[:3], [1.0, 2.0, 1.5])
        self.assertAlmostEqual(calls[3], 1.6)

    def test_secant_start_converged(self):
        from zerofun.solve import Secant

        self.assertEqual(Secant(lambda x: x - 0.5, (0.5, 1.0)).solve(),
                         (0.5, True))

    def test_secant_failure(self):
        from zerofun.solve import Secant

        # Zero slope.
        with self.assertWarns(RuntimeWarning):
            x, converged = Secant(lambda x: 1.0, (0.0, 1.0)).solve()
        self.assertFalse(converged)
        self.assertTrue(np.isnan(x))

        with self.assertWarns(RuntimeWarning):
            x, converged = Secant(f_exp, (0.3, 0.3)).solve()
        self.assertFalse(converged)
        self.assertTrue(np.isnan(x))

        # Non-finite starting value.
        with self.assertWarns(RuntimeWarning):
            x, converged = Secant(lambda x: np.inf, (0.0, 1.0)).solve()
        self.assertFalse(converged)
        self.assertTrue(np.isnan(x))

    def test_secant_setters(self):
        from zerofun.solve import Secant

        # Order of the points is retained.
        secant = Secant(f_golden, (2.0, 1.0))
        self.assertEqual(secant.interval, (2.0, 1.0))
        self.assertEqual(secant.tola, 1e-10)

        secant.f = f_exp
        secant.interval = (0.0, -0.5)
        x, converged = secant.solve()
        self.assertTrue(converged)
        self.assertAlmostEqual(x, f_exp_root, places=4)

        with self.assertRaises(ValueError):
            secant.interval = (1.0,)
        with self.assertRaises(ValueError):
            Secant(f_exp, (0.0, 1.0), tola=-1.0)
        with self.assertRaises(ValueError):
            Secant(f_exp, (0.0, 1.0), tola=np.nan)
        with self.assertRaises(ValueError):
            Secant(f_exp, (0.0, 1.0), tol=np.nan)
        with self.assertRaises(ValueError):
            secant.interval = (0.0, 'b')

# ----------------------------------------------------------------------
