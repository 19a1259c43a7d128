#!/usr/bin/env python3
"""
Main test runner for lexparse.

Runs every unittest suite under tests/. ``pytest`` works too.
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_all_tests():
    """Run all lexparse tests."""
    print("lexparse Test Suite")
    print("=" * 60)

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"),
                                                top_level_dir=project_root)
    result = unittest.TextTestRunner(verbosity=2).run(suite)

    print("=" * 60)
    if result.wasSuccessful():
        print(f"✅ All {result.testsRun} tests passed")
    else:
        print(f"❌ {len(result.failures)} failures, {len(result.errors)} errors")
    return result.wasSuccessful()


if __name__ == "__main__":
    sys.exit(0 if run_all_tests() else 1)
