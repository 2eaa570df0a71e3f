r"""@package fwdiff.evaluators

Callable evaluators for expression trees.

An evaluator is a light-weight object wrapping a tree for repeated use as an
ordinary function, e.g. when passing it to code expecting a callable. Calling
it returns the value, diff() the derivative:

~~~.py
f = (X.sin() * X).evaluator()
f(0.5)          # value at 0.5
f.diff(0.5)     # first derivative at 0.5
df = f.function(1)
~~~

Evaluators do not cache anything, so a single evaluator may be used from
multiple threads at the same time.
"""

import warnings

import numpy as np

from .node import ExpressionWarning


__all__ = [
    "Evaluator",
]


class Evaluator(object):
    r"""Callable wrapper around the root node of a tree."""

    def __init__(self, node, check_finite=False):
        r"""Create an evaluator for a given node.

        @param node
            The root node.node.Node of the tree to evaluate.
        @param check_finite
            Whether to issue an node.ExpressionWarning whenever a computed
            value or derivative is `inf` or `nan`. The result is returned
            unchanged in any case. Default is `False`.
        """
        self._node = node
        self._check_finite = check_finite

    @property
    def node(self):
        r"""Root node evaluated by this evaluator."""
        return self._node

    @property
    def check_finite(self):
        r"""Whether non-finite results issue a warning."""
        return self._check_finite

    def eval(self, x):
        r"""Return ``(value, derivative)`` as floats at the point x."""
        value, derivative = self._node.eval(x)
        if self._check_finite and not (np.isfinite(value)
                                       and np.isfinite(derivative)):
            warnings.warn(
                "Non-finite result at x=%r: value=%r, derivative=%r (%s)"
                % (x, float(value), float(derivative), self._node.str()),
                ExpressionWarning, stacklevel=2
            )
        return float(value), float(derivative)

    def __call__(self, x):
        r"""Evaluate the expression at a point x."""
        return self.eval(x)[0]

    def diff(self, x, n=1):
        r"""Evaluate the n'th derivative of the expression at a point x.

        Only `n=0` (the value) and `n=1` are supported.
        """
        if n not in (0, 1):
            raise NotImplementedError('Derivative for n = %s not implemented.' % n)
        return self.eval(x)[n]

    def function(self, n=0):
        r"""Return a callable for the n'th derivative."""
        if n not in (0, 1):
            raise NotImplementedError('Derivative for n = %s not implemented.' % n)
        return lambda x: self.diff(x, n)

    def sample(self, pts):
        r"""Evaluate value and derivative at each of a sequence of points.

        @return Two numpy arrays of the same length as `pts` containing the
            values and derivatives, respectively.
        """
        pts = np.asarray(pts, dtype=float)
        values = np.empty(len(pts))
        derivs = np.empty(len(pts))
        for i, x in enumerate(pts):
            values[i], derivs[i] = self.eval(x)
        return values, derivs
