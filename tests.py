#!/usr/bin/env python3
r"""Run all test suites of the project.

Flags:
    -f, --failfast          stop on the first failure
    -b, --buffer            buffer output of passing tests
    -t, --timing            print the duration of each test
    -s, --run-slow-tests    also run tests marked with @slowtest
    -v, --verbose           log information about the test run
"""

import logging
import os
import sys
import unittest

import os.path as op
sys.path.append(op.realpath(op.join(__file__, op.pardir)))

from testutils import TestSettings


def run_tests():
    if '-v' in sys.argv or '--verbose' in sys.argv:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    failfast = '-f' in sys.argv or '--failfast' in sys.argv
    buffering = '-b' in sys.argv or '--buffer' in sys.argv
    timing = '-t' in sys.argv or '--timing' in sys.argv
    runSlow = '-s' in sys.argv or '--run-slow-tests' in sys.argv
    TestSettings.failfast = failfast
    TestSettings.buffering = buffering
    TestSettings.timing = timing
    TestSettings.skipslow = not runSlow
    root_dir = os.path.dirname(os.path.realpath(__file__))
    logging.info("Discovering tests in: %s", root_dir)
    logging.info("Slow tests: %s", "run" if runSlow else "skipped")
    suite = unittest.TestLoader().discover(root_dir, pattern="test_*.py")
    logging.info("Found %d tests", suite.countTestCases())
    result = unittest.TextTestRunner(verbosity=2, failfast=failfast, buffer=buffering).run(suite)
    return len(result.failures) + len(result.errors)


if __name__ == '__main__':
    sys.exit(1 if run_tests() else 0)
