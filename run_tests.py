#!/usr/bin/env python3
"""
Test runner script for callroute.
Provides convenient commands for running the unit and property suites.
"""
import sys
import subprocess
import argparse
from pathlib import Path


TESTS_DIR = Path(__file__).parent / "tests"


def run_command(cmd, description):
    """Run a command and report the outcome."""
    print(f"\n{'='*60}")
    print(f"Running: {description}")
    print(f"Command: {' '.join(cmd)}")
    print(f"{'='*60}")

    try:
        subprocess.run(cmd, check=True, capture_output=False)
        print(f"\n{description} completed successfully")
        return True
    except subprocess.CalledProcessError as e:
        print(f"\n{description} failed with exit code {e.returncode}")
        return False
    except FileNotFoundError:
        print(f"\nCommand not found: {cmd[0]}")
        return False


def main():
    parser = argparse.ArgumentParser(description="callroute Test Runner")
    parser.add_argument("--unit", action="store_true", help="Run unit tests only")
    parser.add_argument("--property", action="store_true", help="Run property-based tests only")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("--file", "-f", help="Run specific test file")
    parser.add_argument("--test", "-t", help="Run tests matching an expression")

    args = parser.parse_args()

    cmd = [sys.executable, "-m", "pytest", "-v" if args.verbose else "-q"]

    if args.unit:
        cmd.append(str(TESTS_DIR / "unit"))
        description = "Unit Tests"
    elif args.property:
        cmd.append(str(TESTS_DIR / "property"))
        description = "Property Tests"
    elif args.file:
        cmd.append(args.file)
        description = f"Tests in file: {args.file}"
    else:
        cmd.append(str(TESTS_DIR))
        description = "All Tests"

    if args.test:
        cmd.extend(["-k", args.test])
        description += f" matching: {args.test}"

    if not run_command(cmd, description):
        sys.exit(1)


if __name__ == "__main__":
    main()
