#!/usr/bin/env python3
"""
Test runner for the xsparse suites

Usage: python tests/run_tests.py [pattern]
"""
import sys
import unittest
from pathlib import Path

TESTS_DIR = Path(__file__).parent
PROJECT_ROOT = TESTS_DIR.parent


def run_suites(pattern='test_*.py', verbosity=2):
    """Discover suites matching pattern and return True if all passed"""
    if str(PROJECT_ROOT) not in sys.path:
        sys.path.insert(0, str(PROJECT_ROOT))

    suite = unittest.TestLoader().discover(str(TESTS_DIR), pattern=pattern)
    result = unittest.TextTestRunner(verbosity=verbosity).run(suite)
    return result.wasSuccessful()


if __name__ == '__main__':
    pattern = sys.argv[1] if len(sys.argv) > 1 else 'test_*.py'
    sys.exit(0 if run_suites(pattern) else 1)
