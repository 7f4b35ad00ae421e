import math
from unittest import TestCase

from pynumerics.exception import (ConvergenceFailure, InvalidArgument,
                                  RuntimeFailure)
from pynumerics.solve.regula_falsi import IterationRecord, regula_falsi
from .scalar_tst_functions import f, f_exact


# ======================================================================

class TestRegulaFalsi(TestCase):
    def test_regula_falsi(self):
        # Check normal operation.
        x = regula_falsi(f, 1.0, 2.0)
        self.assertAlmostEqual(x, f_exact(x), places=6)

        x = regula_falsi(f, 1.0, 2.0, tol_fx=1e-13, tol_dx=1e-13)
        self.assertAlmostEqual(x, f_exact(x), places=12)

        # Check failure to converge is flagged.
        with self.assertRaises(ConvergenceFailure) as cm:
            regula_falsi(f, 1.0, 2.0, tol_fx=1e-15, tol_dx=1e-15,
                         maxits=2)
        self.assertEqual(cm.exception.its, 2)

    def test_history(self):
        log = [IterationRecord(99, 0.0, 0.0, 0.0)]  # Stale entry.
        x = regula_falsi(f, 1.0, 2.0, history=log)

        # First estimate is where the chord from (1, -1) to (2, 1)
        # crosses zero, with error measured from `a`.
        self.assertEqual(log[0], IterationRecord(0, 1.5, f(1.5), 0.5))
        self.assertEqual([rec.its for rec in log], list(range(len(log))))
        self.assertEqual(log[-1].x, x)
        self.assertTrue(abs(log[-1].fx) < 1e-7 or log[-1].error < 1e-7)

        # History is kept up to the failure point.
        with self.assertRaises(ConvergenceFailure):
            regula_falsi(f, 1.0, 2.0, tol_fx=1e-15, tol_dx=1e-15,
                         maxits=3, history=log)
        self.assertEqual(len(log), 3)

    def test_root_stays_bracketed(self):
        log = []
        regula_falsi(math.cos, 0.0, 3.0, tol_fx=1e-12, tol_dx=1e-12,
                     history=log)
        for rec in log:
            self.assertTrue(0.0 < rec.x < 3.0)
        self.assertAlmostEqual(log[-1].x, 0.5 * math.pi, places=10)

    def test_invalid(self):
        with self.assertRaises(InvalidArgument):
            regula_falsi(f, 2.0, 1.0)  # Reversed.
        with self.assertRaises(InvalidArgument):
            regula_falsi(f, 2.0, 3.0)  # No sign change.
        for kwargs in ({'tol_fx': 0.0}, {'tol_dx': -1.0}, {'maxits': 0}):
            with self.assertRaises(InvalidArgument):
                regula_falsi(f, 1.0, 2.0, **kwargs)

    def test_runtime_failure(self):
        # Function values at ends are too close.
        with self.assertRaises(RuntimeFailure) as cm:
            regula_falsi(lambda x: 1e-16 * x, -1.0, 1.0)
        self.assertEqual(cm.exception.its, 0)

        # NaN at the first estimate, nothing logged.
        log = []
        with self.assertRaises(RuntimeFailure):
            regula_falsi(lambda x: math.nan if 0.4 < x < 0.6 else x - 0.5,
                         0.0, 1.0, history=log)
        self.assertEqual(log, [])


def test_regula_falsi_verbose(capsys):
    regula_falsi(f, 1.0, 2.0, verbose=True)
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Regula Falsi Root:"
    assert out[1].startswith("... Iteration 0: x = [1.0, 1.5, 2.0]")
