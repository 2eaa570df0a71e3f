r"""@package testutils

Utilities to add more features to `unittest` classes.

This module provides a custom subclass of `unittest.TestCase`, namely
ExprTestCase, which obeys the global configuration settings in TestSettings
and knows how to compare the `(value, derivative)` pairs produced by
expressions. TestSettings can be configured by the script invoking the test
run (see `tests.py`).

The decorator slowtest leads to the test being skipped on normal runs. The
script starting the test must set `TestSettings.skipslow` to `False` for the
slow tests to be run.
"""

import functools
import math
import sys
import time
import unittest


__all__ = [
    "ExprTestCase",
    "TestSettings",
    "slowtest",
]


def slowtest(func):
    """Decorator for skipping a test if TestSettings.skipslow is true."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        if TestSettings.skipslow:
            raise unittest.SkipTest("skipping slow tests")
        return func(*args, **kwargs)
    return wrapper


def _same_special(a, b):
    r"""Whether `a` and `b` are both nan or the same infinity."""
    if math.isnan(a) and math.isnan(b):
        return True
    return math.isinf(a) and a == b


def _count(result, attr):
    r"""Number of entries in a list attribute of a (possibly foreign) result."""
    return len(getattr(result, attr, ()))


class ExprTestCase(unittest.TestCase):
    """Tweaked baseclass for unit tests.

    By deriving from this class, you:
        * Get timed individual tests (needs `verbosity=2`) if
          TestSettings.timing is true.
        * Can implement a hook (failureHook()) that is called after a test has
          failed (or errored), before tearDown().
        * Can compare evaluation results with assertPairAlmostEqual(), which
          treats two `nan` (or equal infinite) values as equal.
    """
    def run(self, result=None):
        self.__result = result
        self.__prevErrors = 0
        self.__prevFailures = 0
        self.__prevSkipped = 0
        if result is not None:
            self.__prevErrors = _count(result, "errors")
            self.__prevFailures = _count(result, "failures")
            self.__prevSkipped = _count(result, "skipped")
        return unittest.TestCase.run(self, result)

    def __lastTestSkipped(self):
        if self.__result is None:
            return False
        return _count(self.__result, "skipped") > self.__prevSkipped

    def __lastTestOK(self):
        if self.__result is None:
            return True
        return (_count(self.__result, "errors") <= self.__prevErrors
                and _count(self.__result, "failures") <= self.__prevFailures)

    def __shouldPrintTiming(self):
        if not TestSettings.timing or self.__lastTestSkipped():
            return False
        if self.__result is None:
            return True
        return not getattr(self.__result, 'dots', True) and \
            getattr(self.__result, 'showAll', False)

    def setUp(self):
        self.startTime = time.time()
        self.addCleanup(self.__finish)

    def __finish(self):
        if not self.__lastTestOK():
            self.failureHook(self.__result)
        if self.__shouldPrintTiming():
            duration = time.time() - self.startTime
            print("(%.4f seconds) ... " % (duration), file=sys.stderr, end='')

    def failureHook(self, result):
        r"""Custom function called just after a fail/error occurred.

        Subclasses may implement this function to e.g. print the tree of the
        expression that failed.
        """
        pass

    def assertPairAlmostEqual(self, pair, expected, places=None, delta=None):
        r"""Assert that a `(value, derivative)` pair matches the expectation."""
        self.assertEqual(len(pair), 2)
        self.assertListAlmostEqual(pair, expected, places=places, delta=delta)

    def assertListAlmostEqual(self, a, b, places=None, delta=None):
        r"""Assert that two iterables contain (almost) the same values."""
        if places is not None and delta is not None:
            raise TypeError("Cannot use delta and places at the same time")
        if places is None and delta is None:
            places = 7
        if len(a) != len(b):
            raise self.failureException("Lists have different lengths (%d != %d)" % (len(a), len(b)))
        fails = []
        for i in range(len(a)):
            if a[i] == b[i] or _same_special(a[i], b[i]):
                continue
            if delta is not None:
                if not abs(a[i]-b[i]) <= delta:
                    fails.append(i)
            else:
                if not round(abs(a[i]-b[i]), places) == 0:
                    fails.append(i)
        if fails:
            msg = "%d elements differ.\n" % len(fails)
            maxN = 9
            if len(fails) <= maxN:
                msg += "Differing elements:\n"
            else:
                msg += "First few differing elements:\n"
            msg += "\n".join(["  [{i}] {a} != {b}    (difference: {d})".format(i=i, a=a[i], b=b[i], d=(b[i]-a[i]))
                              for i in fails[:maxN]])
            raise self.failureException(msg)


class TestSettings(object):
    """Global settings for tests."""
    ## Stop test run on first fail/error.
    failfast = False
    ## Whether output is buffered.\ Just information, cannot be used to toggle output buffering.
    buffering = False
    ## Whether the timing for each test case should be printed.
    timing = False
    ## Control whether tests marked as slowtest should be skipped.
    skipslow = True
