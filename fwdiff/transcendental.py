r"""@package fwdiff.transcendental

Nodes applying a fixed function to a single sub-tree.

Each node here represents \f$ f(x) = \phi(u(x)) \f$ for some elementary
function \f$ \phi \f$, and computes the derivative via the chain rule
\f$ f'(x) = u'(x) \phi'(u(x)) \f$.

The numpy versions of the elementary functions are used so that values
outside the domain of \f$ \phi \f$ produce `nan` or `inf` instead of raising
(as e.g. `math.log(0)` would).
"""

import numpy as np

from .common import is_real, to_real
from .node import Node


__all__ = [
    "PowerNode",
    "ExpNode",
    "LogNode",
    "SinNode",
    "CosNode",
    "AtanNode",
]


class _UnaryNode(Node):
    r"""Base for nodes wrapping one sub-tree in a named function."""
    ## Function name used in the string representation.
    _func = None

    def __init__(self, inner, name=None):
        r"""Init function.

        Args:
            inner:  The sub-tree the function is applied to.
            name:   Name of the node (e.g. for print_tree()). Defaults to the
                    function name.
        """
        super(_UnaryNode, self).__init__(inner=inner, name=name or self._func)

    def _expr_str(self):
        return "%s(%s)" % (self._func, self.inner._expr_str())


class PowerNode(Node):
    r"""Raise a sub-tree to a fixed real power.

    Represents \f$ f(x) = u(x)^n \f$ with derivative
    \f$ f'(x) = u'(x)\, n\, u(x)^{n-1} \f$.

    The exponent is a parameter and not differentiated. Negative bases with
    non-integer exponents result in `nan`, as for real-valued `pow`.
    """
    def __init__(self, inner, exponent, name='pow'):
        r"""Init function.

        Args:
            inner:  The base.
            exponent: Real number to raise `inner` to.
            name:   Name of the node (e.g. for print_tree()).

        Raises:
            TypeError: If `exponent` is not a real number.
        """
        super(PowerNode, self).__init__(inner=inner, name=name)
        if not is_real(exponent):
            raise TypeError("Exponent must be a real number, got %r."
                            % (exponent,))
        self._exponent = to_real(exponent)

    @property
    def exponent(self):
        r"""Fixed exponent of this node."""
        return self._exponent

    @property
    def nice_name(self):
        return "%s (%r)" % (self.name, float(self._exponent))

    def _eval(self, x):
        u, du = self.inner._eval(x)
        n = self._exponent
        return np.power(u, n), du * n * np.power(u, n - 1)

    def _expr_str(self):
        return "%s^%r" % (self.inner.str(), float(self._exponent))


class ExpNode(_UnaryNode):
    r"""Exponential \f$ f(x) = e^{u(x)} \f$."""
    _func = "exp"

    def _eval(self, x):
        u, du = self.inner._eval(x)
        e = np.exp(u)
        return e, du * e


class LogNode(_UnaryNode):
    r"""Natural logarithm \f$ f(x) = \ln u(x) \f$.

    For \f$ u(x) \leq 0 \f$, the result is `nan` or `-inf`.
    """
    _func = "ln"

    def _eval(self, x):
        u, du = self.inner._eval(x)
        return np.log(u), du / u


class SinNode(_UnaryNode):
    r"""Sine \f$ f(x) = \sin u(x) \f$."""
    _func = "sin"

    def _eval(self, x):
        u, du = self.inner._eval(x)
        return np.sin(u), du * np.cos(u)


class CosNode(_UnaryNode):
    r"""Cosine \f$ f(x) = \cos u(x) \f$."""
    _func = "cos"

    def _eval(self, x):
        u, du = self.inner._eval(x)
        return np.cos(u), -du * np.sin(u)


class AtanNode(_UnaryNode):
    r"""Inverse tangent \f$ f(x) = \arctan u(x) \f$."""
    _func = "atan"

    def _eval(self, x):
        u, du = self.inner._eval(x)
        return np.arctan(u), du / (1 + u * u)
