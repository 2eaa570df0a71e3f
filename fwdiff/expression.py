r"""@package fwdiff.expression

Public interface for building expressions.

An Expression is a handle on the root node of a tree. Expressions are built
starting from the free variable `X` using Python operators and the methods
of this class, mixing in plain real numbers as needed:

~~~.py
f = X.pow(3) / 2 + (2 * X).sin()
g = X / 3 - 5
h = f.compose(g)
value, derivative = h.eval(25.0)
~~~

Each operation creates a new expression and leaves its operands untouched, so
any expression may be reused as part of several larger ones.
"""

from collections import namedtuple

import numpy as np

from .common import ieee_arithmetic, is_real
from .node import Node
from .basics import VariableNode, ConstantNode
from .basics import SumNode, DifferenceNode, ProductNode, QuotientNode
from .basics import NegationNode
from .transcendental import PowerNode, ExpNode, LogNode
from .transcendental import SinNode, CosNode, AtanNode
from .composition import CompositionNode
from .evaluators import Evaluator


__all__ = [
    "Expression",
    "EvalResult",
    "X",
]


## Result of evaluating an expression at a point.
EvalResult = namedtuple('EvalResult', ['value', 'derivative'])


def _to_node(obj):
    r"""Return the node for an expression or real number, `None` otherwise."""
    if isinstance(obj, Expression):
        return obj.node
    if is_real(obj):
        return ConstantNode(obj)
    return None


class Expression(object):
    r"""Differentiable function of one real variable.

    Supported operations:
        * `+`, `-`, `*`, `/` between expressions and/or real numbers (in
          either order), unary `-` and `+`
        * `expr ** n` for a real number `n` (same as `expr.pow(n)`)
        * `a ** expr` for a real number `a` (same as `(expr * ln(a)).exp()`)
        * pow(), sqrt(), exp(), ln(), sin(), cos(), atan(), compose()

    Numbers are converted to constant nodes. Operands of any other type result
    in a `TypeError`.
    """
    # Make numpy scalars defer to the reflected operators defined here.
    __array_ufunc__ = None

    def __init__(self, node):
        r"""Wrap an existing node.

        Args:
            node: The node.Node to use as root of this expression.

        Raises:
            TypeError: If `node` is not a node.Node.
        """
        if not isinstance(node, Node):
            raise TypeError("Expected a Node, got %r." % (node,))
        self._node = node

    @classmethod
    def constant(cls, value, name='const'):
        r"""Create an expression for a constant value."""
        if not is_real(value):
            raise TypeError("Constant must be a real number, got %r." % (value,))
        return cls(ConstantNode(value, name=name))

    @classmethod
    def variable(cls):
        r"""Create an expression for the free variable (same as `X`)."""
        return cls(VariableNode())

    @property
    def node(self):
        r"""Root node of this expression."""
        return self._node

    @property
    def name(self):
        r"""Name of the root node."""
        return self._node.name

    def eval(self, x):
        r"""Compute the value and first derivative at a point x.

        Undefined operations (division by zero, logarithm of non-positive
        numbers, etc.) produce `inf` or `nan` results but never raise.

        Returns:
            An EvalResult ``(value, derivative)`` of floats.
        """
        value, derivative = self._node.eval(x)
        return EvalResult(float(value), float(derivative))

    def evaluator(self, check_finite=False):
        r"""Create a callable evaluators.Evaluator for this expression."""
        return Evaluator(self._node, check_finite=check_finite)

    def is_constant(self):
        r"""Return whether this expression does not depend on the variable."""
        return self._node.is_constant()

    def depth(self):
        r"""Depth of the tree (and recursion depth of evaluation)."""
        return self._node.depth()

    def traverse_tree(self, include_root=False):
        r"""Walk the tree. See node.Node.traverse_tree()."""
        return self._node.traverse_tree(include_root=include_root)

    def print_tree(self, root_name='root', nice_names=True):
        r"""Print the tree. See node.Node.print_tree()."""
        self._node.print_tree(root_name=root_name, nice_names=nice_names)

    def str(self):
        r"""Return the expression as a string."""
        return self._node.str()

    def __str__(self):
        return self.str()

    def __repr__(self):
        return "<Expression %s>" % self._node.str()

    def _combine(self, other, node_cls, reflected=False):
        node = _to_node(other)
        if node is None:
            return NotImplemented
        if reflected:
            return Expression(node_cls(node, self._node))
        return Expression(node_cls(self._node, node))

    def __add__(self, other):
        return self._combine(other, SumNode)

    def __radd__(self, other):
        return self._combine(other, SumNode, reflected=True)

    def __sub__(self, other):
        return self._combine(other, DifferenceNode)

    def __rsub__(self, other):
        return self._combine(other, DifferenceNode, reflected=True)

    def __mul__(self, other):
        return self._combine(other, ProductNode)

    def __rmul__(self, other):
        return self._combine(other, ProductNode, reflected=True)

    def __truediv__(self, other):
        return self._combine(other, QuotientNode)

    def __rtruediv__(self, other):
        return self._combine(other, QuotientNode, reflected=True)

    def __neg__(self):
        return Expression(NegationNode(self._node))

    def __pos__(self):
        return self

    def __pow__(self, exponent):
        if not is_real(exponent):
            return NotImplemented
        return self.pow(exponent)

    def __rpow__(self, base):
        if not is_real(base):
            return NotImplemented
        with ieee_arithmetic():
            log_base = float(np.log(np.float64(base)))
        return (self * log_base).exp()

    def pow(self, exponent):
        r"""Raise this expression to a fixed real power."""
        return Expression(PowerNode(self._node, exponent))

    def sqrt(self):
        r"""Square root, i.e. `pow(0.5)`."""
        return self.pow(0.5)

    def exp(self):
        r"""Exponential function of this expression."""
        return Expression(ExpNode(self._node))

    def ln(self):
        r"""Natural logarithm of this expression."""
        return Expression(LogNode(self._node))

    def sin(self):
        r"""Sine of this expression."""
        return Expression(SinNode(self._node))

    def cos(self):
        r"""Cosine of this expression."""
        return Expression(CosNode(self._node))

    def atan(self):
        r"""Inverse tangent of this expression."""
        return Expression(AtanNode(self._node))

    def compose(self, other):
        r"""Return the expression `self(other(x))`.

        Args:
            other: Expression to substitute for the variable of this one.

        Raises:
            TypeError: If `other` is not an Expression.
        """
        if not isinstance(other, Expression):
            raise TypeError("Can only compose with an Expression, got %r."
                            % (other,))
        return Expression(CompositionNode(self._node, other.node))


## The free variable.
X = Expression(VariableNode())
