r"""@package fwdiff.composition

Functional composition of two trees.
"""

from .node import Node


__all__ = [
    "CompositionNode",
]


class CompositionNode(Node):
    r"""Apply one tree to the result of another.

    Represents \f$ f(x) = g(h(x)) \f$, where \f$ g \f$ is the `outer` and
    \f$ h \f$ the `inner` tree. The derivative is given by the chain rule
    \f$ f'(x) = h'(x)\, g'(h(x)) \f$.

    Unlike all other nodes, the two children are evaluated at different
    points: `inner` at `x` and `outer` at the value of `inner`. The inner
    tree is therefore always evaluated first.
    """
    def __init__(self, outer, inner, name='compose'):
        r"""Init function.

        Args:
            outer:  Function applied last (\f$ g \f$).
            inner:  Function applied first (\f$ h \f$).
            name:   Name of the node (e.g. for print_tree()).
        """
        super(CompositionNode, self).__init__(outer=outer, inner=inner,
                                              name=name)

    def is_constant(self):
        return self.outer.is_constant() or self.inner.is_constant()

    def _eval(self, x):
        h, dh = self.inner._eval(x)
        g, dg = self.outer._eval(h)
        return g, dh * dg

    def _expr_str(self):
        return ("g(h(x)), where g(x)=%s, h(x)=%s"
                % (self.outer.str(), self.inner.str()))
