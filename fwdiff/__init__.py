r"""@package fwdiff

Forward-mode automatic differentiation of functions of one real variable.

Functions are built as expression trees starting from the free variable `X`
and combined using arithmetic operators and methods such as `sin()` or
`compose()`. Evaluating an expression at a point yields the exact value and
first derivative of the function in a single pass through the tree:

~~~.py
from fwdiff import X
f = X.pow(3) / 2 + (2 * X).sin()
value, derivative = f.eval(3.0)
~~~

Every node of the tree carries the rule needed to propagate the derivative of
its sub-trees (see the modules basics, transcendental and composition). No
symbolic simplification or finite differencing takes place.

Undefined operations, like division by zero or taking the logarithm of a
negative number, are not checked for. They result in IEEE-754 `inf` and `nan`
values, which then propagate through the rest of the tree.
"""

from .expression import Expression, EvalResult, X
from .node import Node, ExpressionWarning
from .evaluators import Evaluator
