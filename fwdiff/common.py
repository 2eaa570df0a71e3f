r"""@package fwdiff.common

Utils used by multiple modules in fwdiff.
"""

from contextlib import contextmanager
import numbers

import numpy as np


__all__ = [
    "ieee_arithmetic",
    "is_real",
    "isclose",
]


def is_real(value):
    r"""Return whether `value` can be lifted to a constant node.

    Booleans are rejected even though Python considers them integers, since
    `X + True` is almost certainly a mistake.
    """
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def to_real(value):
    r"""Convert a real scalar to the floating point type used in evaluation."""
    return np.float64(value)


@contextmanager
def ieee_arithmetic():
    r"""Context in which floating point errors produce IEEE-754 values.

    Inside this context, dividing by zero, taking the logarithm of a
    non-positive number, overflowing, etc. silently result in `inf` or `nan`
    instead of warnings. The setting is local to the current thread.
    """
    with np.errstate(all='ignore'):
        yield


def isclose(a, b, rel_tol=None, abs_tol=None):
    r"""Test if two numbers agree within an absolute/relative tolerance.

    The default relative tolerance is `1e-9` and the absolute one `0.0`.
    Two `nan` values are never close, two infinities of the same sign are.
    """
    if rel_tol is None:
        rel_tol = 1e-9
    if abs_tol is None:
        abs_tol = 0.0
    if a == b:
        return True
    if not (np.isfinite(a) and np.isfinite(b)):
        return False
    return abs(a-b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)
