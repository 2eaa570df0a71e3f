#!/usr/bin/env python3

import math
import unittest
import sys
import warnings

import numpy as np

from testutils import ExprTestCase
from .node import ExpressionWarning
from .evaluators import Evaluator
from .expression import X


class TestEvaluator(ExprTestCase):
    def test_call_and_diff(self):
        f = (X.sin() * X).evaluator()
        self.assertIsInstance(f, Evaluator)
        for x in np.linspace(-2, 2, 5):
            self.assertAlmostEqual(f(x), x*math.sin(x))
            self.assertAlmostEqual(f.diff(x), math.sin(x) + x*math.cos(x))
            self.assertEqual(f.diff(x, 0), f(x))
            self.assertEqual(f.eval(x), (f(x), f.diff(x)))

    def test_function(self):
        f = X.exp().evaluator()
        f0 = f.function()
        f1 = f.function(1)
        self.assertListAlmostEqual(list(map(f0, [0.0, 1.0])), [1.0, math.e])
        self.assertListAlmostEqual(list(map(f1, [0.0, 1.0])), [1.0, math.e])

    def test_higher_derivatives(self):
        f = X.pow(3).evaluator()
        with self.assertRaises(NotImplementedError):
            f.diff(1.0, 2)
        with self.assertRaises(NotImplementedError):
            f.function(2)

    def test_sample(self):
        f = (X * X).evaluator()
        pts = np.linspace(0, 2, 5)
        values, derivs = f.sample(pts)
        self.assertEqual(values.shape, (5,))
        self.assertListAlmostEqual(values, pts**2)
        self.assertListAlmostEqual(derivs, 2*pts)
        values, derivs = (1 / X).evaluator().sample([-1.0, 0.0, 1.0])
        self.assertListAlmostEqual(values, [-1.0, float('inf'), 1.0])
        self.assertListAlmostEqual(derivs, [-1.0, float('-inf'), -1.0])

    def test_check_finite(self):
        f = (1 / X).evaluator(check_finite=True)
        self.assertTrue(f.check_finite)
        with self.assertWarns(ExpressionWarning):
            value = f(0.0)
        self.assertEqual(value, float('inf'))
        with self.assertWarns(ExpressionWarning):
            f.diff(float('nan'))
        with warnings.catch_warnings(record=True) as w:
            warnings.simplefilter("always")
            self.assertEqual(f(2.0), 0.5)
        self.assertEqual(len(w), 0)

    def test_no_warning_by_default(self):
        f = X.ln().evaluator()
        self.assertFalse(f.check_finite)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            self.assertTrue(math.isnan(f(-1.0)))
            self.assertEqual(f(0.0), float('-inf'))

    def test_node(self):
        expr = X + 1
        self.assertIs(expr.evaluator().node, expr.node)


def run_tests():
    suite = unittest.TestLoader().loadTestsFromModule(sys.modules[__name__])
    return len(unittest.TextTestRunner(verbosity=2).run(suite).failures)


if __name__ == '__main__':
    unittest.main()
