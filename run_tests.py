#!/usr/bin/env python3
"""
Test runner for sdklog.

Usage:
    python run_tests.py             # Run the suite
    python run_tests.py --coverage  # Run with coverage of the sdklog package
"""

import argparse
import subprocess
import sys


def main():
    parser = argparse.ArgumentParser(description="Test runner for sdklog")
    parser.add_argument("--coverage", action="store_true",
                        help="Report coverage of the sdklog package")
    parser.add_argument("-q", "--quiet", action="store_true",
                        help="Less verbose output")
    args = parser.parse_args()

    cmd = [sys.executable, "-m", "pytest", "tests/", "--tb=short"]
    if not args.quiet:
        cmd.append("-v")
    if args.coverage:
        cmd.extend(["--cov=sdklog", "--cov-report=term-missing"])

    print(f"Running: {' '.join(cmd)}")
    return subprocess.run(cmd).returncode


if __name__ == "__main__":
    sys.exit(main())
