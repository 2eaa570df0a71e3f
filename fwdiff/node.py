r"""@package fwdiff.node

Base of the expression node system.

Each node represents a function of a single real variable and knows how to
compute both its value and its first derivative at a given point, possibly in
terms of the values and derivatives of its sub-nodes. Composing nodes results
in a tree whose evaluation is a single bottom-up pass:

~~~.py
node = SumNode(ProductNode(VariableNode(), VariableNode()), ConstantNode(1))
value, derivative = node.eval(3.0)   # (10.0, 6.0)
~~~

Nodes are usually not created directly. Instead, an expression.Expression is
built from the free variable `X` using operators and methods, which creates
the nodes behind the scenes.

Nodes never change after construction. A sub-node may therefore appear in
several places of the same (or of different) trees.
"""

from abc import ABCMeta, abstractmethod

from .common import ieee_arithmetic, to_real


__all__ = [
    "Node",
    "ExpressionWarning",
]


class ExpressionWarning(UserWarning):
    """Warning issued when expressions evaluate to non-finite values."""
    pass


class Node(metaclass=ABCMeta):
    """Parent class for expression tree nodes.

    The methods a child has to override are:
        * _eval() returning the value and first derivative at a point
        * _expr_str() returning a representation of the node in terms of the
          representations of its sub-nodes
    """

    def __init__(self, name=None, **sub_nodes):
        r"""Base class init for nodes.

        The ``**sub_nodes`` given as keyword arguments here are stored in this
        object and can be accessed as attributes with the keys used here.
        They are used when traversing through a complete tree in e.g.
        print_tree() or traverse_tree().

        Args:
            name: (string, optional)
                Name for the node. Can be useful to label nodes in a more
                complex tree to indicate their role/meaning. By default, the
                current class name is used as name.

        Raises:
            TypeError: If any of the sub-nodes is not a Node.
        """
        self.__name = name if name else self.__class__.__name__
        self.__sub_nodes = dict()
        for key, node in sub_nodes.items():
            if not isinstance(node, Node):
                raise TypeError("Sub-node %r must be a Node, got %r."
                                % (key, node))
            setattr(self, key, node)
            self.__sub_nodes[key] = node

    @property
    def name(self):
        r"""Name given to this instance of the node."""
        return self.__name

    @property
    def nice_name(self):
        r"""More descriptive name, which may be overridden by sub classes."""
        return self.__name

    @property
    def sub_nodes(self):
        r"""Dictionary of the direct children of this node, keyed by role."""
        return dict(self.__sub_nodes)

    def eval(self, x):
        r"""Compute the value and first derivative at a point x.

        Any floating point exception (division by zero, logarithm of a
        negative number, overflow) results in `inf` or `nan` values instead
        of being raised.

        Returns:
            A tuple ``(value, derivative)`` of `numpy.float64` values.
        """
        with ieee_arithmetic():
            return self._eval(to_real(x))

    @abstractmethod
    def _eval(self, x):
        r"""Compute ``(value, derivative)`` at `x`.

        This is called with `x` already converted to `numpy.float64` and
        floating point errors silenced, so implementations should simply call
        `_eval()` on their sub-nodes and combine the results.
        """
        pass

    def traverse_tree(self, include_root=False, parents=None):
        r"""Generator that walks through a complete tree.

        In each iteration, the returned values represent the current node's
        parents (as a list from root to immediate parent), its key under which
        it is stored in its parent, and the node itself.

        Args:
            include_root: Whether to include the root as first item. Default
                is `False`.
            parents: Optional list of parents of the root. Normally only used
                internally for the recursion.

        @b Examples
        \code
            for parents, name, node in root.traverse_tree():
                print("-"*len(parents), name)
        \endcode
        """
        if parents is None:
            parents = []
        if include_root:
            yield parents, "", self
        parents = parents + [self]
        for key, node in self.__sub_nodes.items():
            yield parents, key, node
            for item in node.traverse_tree(include_root=False, parents=parents):
                yield item

    def print_tree(self, root_name='root', nice_names=True):
        r"""Print the whole tree.

        Each node's key under which it is stored in its parent will be shown
        as well as its actual name and the class name.

        Args:
            root_name: Key name to print for the root node.
            nice_names: Whether to use the more descriptive name (when
                implemented) or the usually shorter abstract names.
        """
        for parents, key, node in self.traverse_tree(include_root=True):
            n = node.nice_name if nice_names else node.name
            print("%s%s [%s] <%s>" % (
                ". " * len(parents), key or root_name, n, type(node).__name__
            ))

    def is_constant(self):
        r"""Return whether this node does not depend on the variable.

        By default, a node is constant if all its sub-nodes are.
        """
        return all(node.is_constant() for node in self.__sub_nodes.values())

    def depth(self):
        r"""Number of nodes on the longest path from this node to a leaf."""
        return 1 + max((node.depth() for node in self.__sub_nodes.values()),
                       default=0)

    def str(self):
        r"""Return the sub-tree represented by this node as a string."""
        return "(%s)" % self._expr_str()

    @abstractmethod
    def _expr_str(self):
        r"""String representing the node in terms of its sub-nodes.

        Sub-nodes should be represented using their `str` method and not the
        `_expr_str`. For example:

            def _expr_str(self):
                return "%s + %s" % (self.lhs.str(), self.rhs.str())
        """
        pass

    def __repr__(self):
        r"""Return a string representing the whole tree."""
        cls = self.__class__.__name__
        return "<%s %s>" % (cls, self.str())
