#!/usr/bin/env python3
"""
Lagrange - Interpolating Polynomial Calculator

Main entry point for the Lagrange application. This file serves as a thin
wrapper that delegates all functionality to the lagrange_pkg package.

Usage:
    python lagrange.py points.txt               # Interpolate and evaluate
    python lagrange.py points.txt --rational    # Rational coefficients
    python lagrange.py --help                   # Show help
"""

from __future__ import annotations

import sys
from typing import List, Optional


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for Lagrange.

    Delegates all functionality to the lagrange_pkg.cli module, which handles
    argument parsing, interpolation and output formatting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    from lagrange_pkg.cli import main_entry

    return main_entry(argv)


if __name__ == "__main__":
    sys.exit(main())
