"""Input parsing and output formatting module.

This module handles:
- Reading point files (pairs of x y values followed by an optional target)
- Parsing numeric tokens, including exact forms such as ``1/3`` or ``sqrt(2)``
- Formatting coefficients, polynomials and values for display
"""

from __future__ import annotations

import math
import re
import sys
from functools import lru_cache
from tokenize import TokenError
from typing import Any

import sympy as sp
from sympy import parse_expr

from . import config
from .polynomial import Polynomial
from .rational import rationalise
from .types import ParseError, ValidationError


def superscriptify(input_str: str) -> str:
    """Convert numeric string to Unicode superscript characters.

    Args:
        input_str: Input string with digits and '-' (e.g., "123", "-5")

    Returns:
        String with superscript Unicode characters (e.g., "¹²³", "⁻⁵")
    """
    mapping = {
        "0": "⁰",
        "1": "¹",
        "2": "²",
        "3": "³",
        "4": "⁴",
        "5": "⁵",
        "6": "⁶",
        "7": "⁷",
        "8": "⁸",
        "9": "⁹",
        "-": "⁻",
    }
    return "".join(mapping.get(char, char) for char in input_str)


def format_superscript(expr_str: str) -> str:
    """Replace Python power notation (**) with Unicode superscripts.

    Args:
        expr_str: Expression string (e.g., "x**2", "x**-3")

    Returns:
        String with superscripts (e.g., "x²", "x⁻³")
    """
    return re.sub(r"\*\*(\-?\d+)", lambda m: superscriptify(m.group(1)), expr_str)


def format_number(val: Any, precision: int | None = None) -> str:
    """Format a numeric value with specified precision.

    Args:
        val: Numeric value to format
        precision: Number of significant digits (default: config.OUTPUT_PRECISION)

    Returns:
        Formatted string representation of the number
    """
    if precision is None:
        precision = config.OUTPUT_PRECISION
    try:
        fmt = "{:." + str(int(precision)) + "g}"
        return fmt.format(float(val))
    except (ValueError, TypeError, OverflowError):
        # Fallback for non-numeric values
        return str(val)


def coefficient_formatter(rational: bool = False, max_denominator: int | None = None,
                          precision: int | None = None):
    """Return the coefficient -> string hook used for display."""
    if rational:
        return lambda coefficient: rationalise(coefficient, max_denominator)
    return lambda coefficient: format_number(coefficient, precision)


def format_coefficients(poly: Polynomial, rational: bool = False,
                        max_denominator: int | None = None,
                        precision: int | None = None) -> list[str]:
    """Format every coefficient of a polynomial, lowest power first."""
    return poly.format_coefficients(
        coefficient_formatter(rational, max_denominator, precision)
    )


def format_listing(name: str, coefficients: list[str]) -> str:
    """Format already rendered coefficients as ``name ≡ [c0, c1, ...]``."""
    return f"{name} ≡ [{', '.join(coefficients)}]"


def format_polynomial(poly: Polynomial, rational: bool = False,
                      max_denominator: int | None = None,
                      precision: int | None = None) -> str:
    """Format a polynomial as ``name ≡ [c0, c1, ...]``."""
    return format_listing(
        poly.name, format_coefficients(poly, rational, max_denominator, precision)
    )


def format_expression(poly: Polynomial, rational: bool = False,
                      max_denominator: int | None = None) -> str:
    """Format a polynomial as an expanded expression in ``x``."""
    expr = poly.to_expression(rational=rational, max_denominator=max_denominator)
    return format_superscript(sp.sstr(expr, full_prec=False))


@lru_cache(maxsize=1024)
def parse_number(token: str) -> float:
    """Parse one numeric token.

    Plain decimals are converted directly. Anything else is parsed with SymPy
    against a small set of allowed names so that exact forms like ``1/3``,
    ``2^10``, ``pi/4`` or ``sqrt(2)`` are accepted.

    Raises:
        ParseError: If the token is not a finite real constant
    """
    token = token.strip()
    if not token:
        raise ParseError("Empty numeric token.")
    try:
        value = float(token)
    except ValueError:
        value = _parse_symbolic(token)
    if not math.isfinite(value):
        raise ParseError(f"Value {token!r} is not finite.")
    return value


def _parse_symbolic(token: str) -> float:
    if "__" in token or not config.NUMBER_TOKEN_RE.match(token):
        raise ParseError(f"Invalid numeric token {token!r}.", "INVALID_TOKEN")
    try:
        expr = parse_expr(
            token,
            local_dict=dict(config.ALLOWED_SYMPY_NAMES),
            transformations=config.TRANSFORMATIONS,
            evaluate=True,
        )
    except (SyntaxError, TokenError, TypeError, ValueError, sp.SympifyError) as e:
        raise ParseError(f"Could not parse {token!r}: {e}") from e
    if not isinstance(expr, sp.Expr) or expr.free_symbols:
        raise ParseError(f"Token {token!r} is not a numeric constant.", "NOT_NUMERIC")
    try:
        return float(sp.N(expr))
    except TypeError as e:
        # Complex results such as sqrt(-1)
        raise ParseError(f"Token {token!r} is not a real number.", "NOT_REAL") from e


def tokenize_points(text: str) -> list[str]:
    """Split point data into tokens, dropping ``#`` comments."""
    tokens: list[str] = []
    for line in text.splitlines():
        line = line.split("#", 1)[0]
        tokens.extend(t for t in config.TOKEN_SPLIT_RE.split(line) if t)
    return tokens


def parse_points(text: str) -> tuple[list[float], list[float], float | None]:
    """Parse point data into x-coordinates, y-coordinates and a target.

    Values are read pairwise as ``x y``. A trailing unpaired value is the
    abscissa at which the polynomial should be evaluated; with an even number
    of values there is no target.

    Returns:
        Tuple (xs, ys, target_or_none)

    Raises:
        ParseError: If a token is not a number
        ValidationError: If the data holds no values at all
    """
    values = [parse_number(token) for token in tokenize_points(text)]
    if not values:
        raise ValidationError("Input contains no points.", "EMPTY_INPUT")
    target = values.pop() if len(values) % 2 else None
    return values[0::2], values[1::2], target


def read_points(path: str) -> tuple[list[float], list[float], float | None]:
    """Read and parse a point file; ``-`` reads standard input.

    Raises:
        ParseError: With code FILE_ERROR if the file could not be read
    """
    if path == "-":
        return parse_points(sys.stdin.read())
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ParseError(f"File '{path}' could not be read: {e}", "FILE_ERROR") from e
    return parse_points(text)
