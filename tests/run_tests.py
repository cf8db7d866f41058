#!/usr/bin/env python3
"""
Test Runner for Merkle Paths

Runs every test module with unittest and prints a per-suite and overall
summary. ``pytest`` collects the same modules.
"""

import unittest
import sys
import os
from io import StringIO

# Test modules import their shared helpers by bare name
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

TEST_SUITES = [
    ('test_tree', 'Tree Construction Tests'),
    ('test_proof', 'Merkle Path Tests'),
    ('test_update', 'Incremental Update Tests'),
    ('test_models', 'Serialization Model Tests'),
    ('test_config', 'Configuration Tests'),
    ('test_cli', 'CLI Tests'),
]


def run_test_suite(test_module_name, description):
    """
    Run one test module and print its results.

    Returns:
        Tuple of (success_count, failure_count, error_count, skip_count)
    """
    print(f"\n{'='*60}")
    print(f"Running {description}")
    print('='*60)

    test_module = __import__(test_module_name)
    suite = unittest.TestLoader().loadTestsFromModule(test_module)

    stream = StringIO()
    runner = unittest.TextTestRunner(stream=stream, verbosity=2)
    result = runner.run(suite)
    print(stream.getvalue())

    failures = len(result.failures)
    errors = len(result.errors)
    skipped = len(result.skipped)
    success = result.testsRun - failures - errors - skipped

    print(f"{description}: {success} passed, {failures} failed, {errors} errors, {skipped} skipped")
    for test, traceback in result.failures + result.errors:
        print(f"  - {test}: {traceback}")

    return success, failures, errors, skipped


def main():
    """Run all test suites and return a process exit status."""
    print(f"Python version: {sys.version}")

    totals = [0, 0, 0, 0]
    for module_name, description in TEST_SUITES:
        try:
            counts = run_test_suite(module_name, description)
        except ImportError as e:
            print(f"\nError importing {module_name}: {e}")
            counts = (0, 0, 1, 0)
        totals = [a + b for a, b in zip(totals, counts)]

    success, failures, errors, skipped = totals
    print(f"\n{'='*60}")
    print("OVERALL TEST SUMMARY")
    print('='*60)
    print(f"Successful: {success}")
    print(f"Failed: {failures}")
    print(f"Errors: {errors}")
    print(f"Skipped: {skipped}")

    if failures == 0 and errors == 0:
        print("\nAll tests passed")
        return 0
    print(f"\nTests failed: {failures + errors} issues found")
    return 1


if __name__ == '__main__':
    sys.exit(main())
