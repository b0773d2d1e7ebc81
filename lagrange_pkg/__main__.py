"""Main entry point for running lagrange_pkg as a module.

This allows running Lagrange with:
    python -m lagrange_pkg points.txt
    python -m lagrange_pkg points.txt --rational
    python -m lagrange_pkg --health-check

This is equivalent to running:
    python -m lagrange_pkg.cli
    python lagrange.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
