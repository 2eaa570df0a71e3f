r"""@package fwdiff.basics

Collection of basic node.Node subclasses.

These are the leaves of every expression tree (the variable and constants)
and the arithmetic combinators joining two sub-trees.
"""

import numpy as np

from .common import to_real
from .node import Node


__all__ = [
    "VariableNode",
    "ConstantNode",
    "SumNode",
    "DifferenceNode",
    "ProductNode",
    "QuotientNode",
    "NegationNode",
]


_ZERO = np.float64(0.0)
_ONE = np.float64(1.0)


class VariableNode(Node):
    r"""The free variable.

    Represents the identity function \f$ f(x) = x \f$. All instances are
    interchangeable, since the node carries no data.
    """
    def __init__(self, name='x'):
        super(VariableNode, self).__init__(name=name)

    def _eval(self, x):
        return x, _ONE

    def is_constant(self):
        return False

    def str(self):
        return self._expr_str()

    def _expr_str(self):
        return "x"


class ConstantNode(Node):
    r"""Represent a constant.

    Represents a function of the form \f$ f(x) = c = \mathrm{const} \f$.

    The value of the constant can be accessed through the `value` property.
    """
    def __init__(self, value, name='const'):
        r"""Init function.

        Args:
            value:  The constant value.
            name:   Name of the node (e.g. for print_tree()).
        """
        super(ConstantNode, self).__init__(name=name)
        self._value = to_real(value)

    @property
    def value(self):
        r"""The constant value this node represents."""
        return self._value

    @property
    def nice_name(self):
        return "%s (%r)" % (self.name, float(self._value))

    def _eval(self, x):
        return self._value, _ZERO

    def str(self):
        return self._expr_str()

    def _expr_str(self):
        return "%r" % float(self._value)


class _BinaryNode(Node):
    r"""Base for nodes combining two sub-trees evaluated at the same point."""
    ## Operator symbol used in the string representation.
    _op = None

    def __init__(self, lhs, rhs, name=None):
        r"""Init function.

        Args:
            lhs:    Left operand.
            rhs:    Right operand.
            name:   Name of the node (e.g. for print_tree()).
        """
        super(_BinaryNode, self).__init__(lhs=lhs, rhs=rhs, name=name)

    @property
    def nice_name(self):
        return "%s (lhs %s rhs)" % (self.name, self._op)

    def _expr_str(self):
        return "%s %s %s" % (self.lhs.str(), self._op, self.rhs.str())


class SumNode(_BinaryNode):
    r"""Add two sub-trees: \f$ f(x) = u(x) + v(x) \f$."""
    _op = "+"

    def __init__(self, lhs, rhs, name='add'):
        super(SumNode, self).__init__(lhs, rhs, name=name)

    def _eval(self, x):
        u, du = self.lhs._eval(x)
        v, dv = self.rhs._eval(x)
        return u + v, du + dv


class DifferenceNode(_BinaryNode):
    r"""Subtract two sub-trees: \f$ f(x) = u(x) - v(x) \f$."""
    _op = "-"

    def __init__(self, lhs, rhs, name='sub'):
        super(DifferenceNode, self).__init__(lhs, rhs, name=name)

    def _eval(self, x):
        u, du = self.lhs._eval(x)
        v, dv = self.rhs._eval(x)
        return u - v, du - dv


class ProductNode(_BinaryNode):
    r"""Multiply two sub-trees: \f$ f(x) = u(x) v(x) \f$.

    The derivative follows the product rule \f$ f' = u v' + v u' \f$.
    """
    _op = "*"

    def __init__(self, lhs, rhs, name='mult'):
        super(ProductNode, self).__init__(lhs, rhs, name=name)

    def _eval(self, x):
        u, du = self.lhs._eval(x)
        v, dv = self.rhs._eval(x)
        return u * v, u * dv + v * du


class QuotientNode(_BinaryNode):
    r"""Divide two sub-trees: \f$ f(x) = u(x) / v(x) \f$.

    The derivative follows the quotient rule
    \f$ f' = (u' v - v' u) / v^2 \f$.

    Where \f$ v(x) = 0 \f$, the result contains `inf` or `nan` values as
    determined by IEEE-754 floating point division. No special handling takes
    place; avoiding singularities is up to the caller.
    """
    _op = "/"

    def __init__(self, lhs, rhs, name='divide'):
        super(QuotientNode, self).__init__(lhs, rhs, name=name)

    def _eval(self, x):
        u, du = self.lhs._eval(x)
        v, dv = self.rhs._eval(x)
        return u / v, (du * v - dv * u) / (v * v)


class NegationNode(Node):
    r"""Negate a sub-tree: \f$ f(x) = -u(x) \f$."""
    def __init__(self, inner, name='neg'):
        super(NegationNode, self).__init__(inner=inner, name=name)

    def _eval(self, x):
        u, du = self.inner._eval(x)
        return -u, -du

    def _expr_str(self):
        return "-%s" % self.inner.str()
