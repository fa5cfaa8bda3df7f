#!/usr/bin/env python
"""
Convenience script to run tests with coverage reporting.
Usage: python tests/run_coverage.py
"""

import subprocess
import sys


def run_coverage() -> int:
    """Run tests with coverage and print the missing-lines report."""
    cmd = [
        "pytest",
        "tests/",
        "--cov=storyparse",
        "--cov-report=term-missing",
        "--cov-report=html:tests/htmlcov",
        "-v"
    ]

    print(f"Running: {' '.join(cmd)}")
    result = subprocess.run(cmd, capture_output=False)

    if result.returncode == 0:
        print("\n✓ Coverage report generated: tests/htmlcov/index.html")

    return result.returncode


if __name__ == "__main__":
    sys.exit(run_coverage())
