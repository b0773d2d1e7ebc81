"""Centralized configuration for Lagrange.

This module defines:
- Numeric tolerances used when canonicalizing coefficients
- Rational approximation bounds
- Output precision and display names

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with LAGRANGE_)
"""

import importlib.metadata
import os
import re

import sympy as sp
from sympy.parsing.sympy_parser import convert_xor, standard_transformations

# Version is defined in pyproject.toml [project] section
try:
    VERSION = importlib.metadata.version("lagrange")
except importlib.metadata.PackageNotFoundError:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Coefficient canonicalization
ZERO_TOLERANCE = float(
    os.getenv("LAGRANGE_ZERO_TOLERANCE", "1e-10")
)  # Absolute, not relative

# Rational approximation
MAX_DENOMINATOR = int(os.getenv("LAGRANGE_MAX_DENOMINATOR", "1000000"))
INITIAL_DENOMINATOR = int(
    os.getenv("LAGRANGE_INITIAL_DENOMINATOR", str(10**12))
)  # Scale of the first approximation before convergents are taken

# Output
OUTPUT_PRECISION = int(
    os.getenv("LAGRANGE_OUTPUT_PRECISION", "12")
)  # significant digits
RATIONAL_DISPLAY = os.getenv("LAGRANGE_RATIONAL_DISPLAY", "false").lower() == "true"

# Logging
LOG_LEVEL = os.getenv("LAGRANGE_LOG_LEVEL", "WARNING").upper()

# Health check round-trip tolerance
EVALUATION_TOLERANCE = float(os.getenv("LAGRANGE_EVALUATION_TOLERANCE", "1e-6"))

# Display names
DEFAULT_NAME = "p"
INTERPOLATION_NAME = "ip"
DEFAULT_VARIABLE = "x"

# Names accepted in point-file tokens besides plain decimals
ALLOWED_SYMPY_NAMES = {
    "pi": sp.pi,
    "E": sp.E,
    "sqrt": sp.sqrt,
    "exp": sp.exp,
    "log": sp.log,
    "ln": sp.log,
}

TRANSFORMATIONS = standard_transformations + (convert_xor,)

NUMBER_TOKEN_RE = re.compile(r"^[0-9A-Za-z_.+\-*/^() ]+$")
TOKEN_SPLIT_RE = re.compile(r"[\s,;]+")
