#!/usr/bin/env python3
r"""@package fwdiff.test_composition

Tests for functional composition of expressions.
"""

import math
import unittest
import sys

import numpy as np

from testutils import ExprTestCase
from .basics import VariableNode, ConstantNode
from .composition import CompositionNode
from .expression import Expression, X


class TestComposition(ExprTestCase):
    def test_square_of_linear(self):
        f = X.pow(2)
        g = 3 * X
        self.assertEqual(f.compose(g).eval(2.0), (36.0, 36.0))
        # The other way around: 3 x^2
        self.assertEqual(g.compose(f).eval(2.0), (12.0, 12.0))

    def test_outer_evaluated_at_inner_value(self):
        f = X.ln().compose(X - 10)
        self.assertPairAlmostEqual(f.eval(12.0), (math.log(2), 0.5))
        f = X.ln().compose(X * X + 1)
        self.assertPairAlmostEqual(f.eval(2.0), (math.log(5), 0.8))

    def test_matches_direct_construction(self):
        composed = (X.pow(3) / 2 + (2 * X).sin()).compose(X / 3 - 5)
        inner = X / 3 - 5
        direct = inner.pow(3) / 2 + (2 * inner).sin()
        for x in np.linspace(-5, 25, 13):
            self.assertPairAlmostEqual(composed.eval(x), direct.eval(x), delta=1e-10)

    def test_nested(self):
        # sin(exp(x^2))
        f = X.sin().compose(X.exp().compose(X * X))
        for x in np.linspace(-1, 1, 5):
            e = math.exp(x*x)
            self.assertPairAlmostEqual(f.eval(x), (math.sin(e), 2*x*e*math.cos(e)))

    def test_identity(self):
        f = (X * X).sin()
        for x in np.linspace(-1, 1, 5):
            self.assertEqual(X.compose(f).eval(x), f.eval(x))
            self.assertEqual(f.compose(X).eval(x), f.eval(x))

    def test_constant_inner(self):
        f = X.sin().compose(Expression.constant(3.0))
        self.assertTrue(f.is_constant())
        self.assertEqual(f.eval(100.0), (math.sin(3.0), 0.0))
        f = Expression.constant(4.0).compose(X.exp())
        self.assertTrue(f.is_constant())
        self.assertEqual(f.eval(1.0), (4.0, 0.0))
        self.assertFalse(X.sin().compose(X).is_constant())

    def test_singularity_in_inner(self):
        value, deriv = X.exp().compose(1 / X).eval(0.0)
        self.assertEqual(value, float('inf'))
        self.assertTrue(math.isinf(deriv) or math.isnan(deriv))

    def test_type(self):
        with self.assertRaises(TypeError):
            X.compose(3.0)
        with self.assertRaises(TypeError):
            X.compose(VariableNode())

    def test_node(self):
        node = CompositionNode(ConstantNode(2), VariableNode())
        self.assertEqual(node.name, "compose")
        self.assertEqual(list(node.sub_nodes), ['outer', 'inner'])
        self.assertEqual(node.depth(), 2)
        self.assertEqual(str(X.pow(2).compose(3 * X)),
                         "(g(h(x)), where g(x)=(x^2.0), h(x)=(3.0 * x))")


def run_tests():
    suite = unittest.TestLoader().loadTestsFromModule(sys.modules[__name__])
    return len(unittest.TextTestRunner(verbosity=2).run(suite).failures)


if __name__ == '__main__':
    unittest.main()
