from __future__ import annotations

import argparse
import json
import sys

from . import config
from .api import interpolate_file
from .config import VERSION
from .logging_config import get_logger, setup_logging
from .parser import format_listing, format_number, parse_number
from .types import InterpolationResult, ParseError

logger = get_logger("cli")

EXIT_OK = 0
EXIT_COMPUTATION_ERROR = 1
EXIT_INPUT_ERROR = 2

_INPUT_ERROR_CODES = {"FILE_ERROR", "PARSE_ERROR", "INVALID_TOKEN", "NOT_NUMERIC",
                      "NOT_REAL", "EMPTY_INPUT"}


def _health_check() -> int:
    """Run health check to verify dependencies and basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running Lagrange health check...")
    print("-" * 50)

    # Check SymPy import
    try:
        import sympy as sp

        print(f"[OK] SymPy {sp.__version__} imported successfully")
        checks_passed += 1
    except ImportError as e:
        print(f"[FAIL] SymPy import failed: {e}")
        checks_failed += 1

    # Check interpolation round trip
    try:
        from .interpolation import interpolate

        xs = [1.0, 2.0, 3.0, 4.0, 5.0]
        ys = [1.0, 2.0, 3.0, 4.0, 98756.0]
        poly = interpolate(xs, ys)
        worst = max(abs(poly.evaluate(x) - y) for x, y in zip(xs, ys))
        if poly.degree() == 4 and worst <= config.EVALUATION_TOLERANCE * max(ys):
            print("[OK] Interpolation reproduces its points")
            checks_passed += 1
        else:
            print(f"[FAIL] Interpolation check failed: degree {poly.degree()}, error {worst}")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Interpolation check failed: {e}")
        checks_failed += 1

    # Check rational approximation
    try:
        from .rational import rationalise

        result = rationalise(0.333333, 1000)
        if result == "1/3":
            print("[OK] Rational approximation works")
            checks_passed += 1
        else:
            print(f"[FAIL] Rational approximation failed: expected 1/3, got {result}")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Rational approximation check failed: {e}")
        checks_failed += 1

    # Check number parsing through SymPy
    try:
        value = parse_number("1/4")
        if value == 0.25:
            print("[OK] Number parsing works")
            checks_passed += 1
        else:
            print(f"[FAIL] Number parsing failed: expected 0.25, got {value}")
            checks_failed += 1
    except Exception as e:
        print(f"[FAIL] Number parsing check failed: {e}")
        checks_failed += 1

    print("-" * 50)
    print(f"Results: {checks_passed} passed, {checks_failed} failed")

    if checks_failed > 0:
        print("\n[WARN] Some health checks failed. Core functionality may be impaired.")
        return 1

    print("\n[OK] All health checks passed!")
    return 0


def print_result_pretty(res: InterpolationResult, output_format: str = "human",
                        rational: bool = False) -> None:
    """Print result in specified format.

    Args:
        res: Interpolation result
        output_format: "json" for JSON output, "human" for human-readable
        rational: Show coefficients as rational approximations
    """
    if output_format == "json":
        print(json.dumps(res.to_dict(), indent=2, ensure_ascii=False))
        return
    if not res.ok:
        print("Error:", res.error)
        return
    if rational and res.rational is not None:
        coefficients = res.rational
    else:
        coefficients = [format_number(c) for c in res.coefficients or []]
    _print_safe(format_listing(res.name or config.INTERPOLATION_NAME, coefficients))
    if res.expression:
        _print_safe(f"Expanded: {res.expression}")
    if res.target is not None:
        print(f"{res.name}({format_number(res.target)}) = {format_number(res.value)}")
    _print_safe(f"Done in {res.elapsed_us} µs.")


def _print_safe(text: str) -> None:
    try:
        print(text)
    except UnicodeEncodeError:
        # Console without Unicode support
        print(
            text.replace("≡", "=").replace("µ", "u")
            .translate(str.maketrans("⁰¹²³⁴⁵⁶⁷⁸⁹⁻", "0123456789-"))
        )


def _exit_code(res: InterpolationResult) -> int:
    if res.ok:
        return EXIT_OK
    if res.code in _INPUT_ERROR_CODES:
        return EXIT_INPUT_ERROR
    return EXIT_COMPUTATION_ERROR


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for Lagrange CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(
        prog="lagrange",
        description="Fit the Lagrange interpolating polynomial through the "
        "points in a file and evaluate it.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Point file: pairs of 'x y' values, optionally followed by a "
        "single x to evaluate at ('-' reads standard input)",
    )
    parser.add_argument(
        "--at", type=str, help="Evaluate at this x (overrides the file's target)"
    )
    parser.add_argument(
        "-r",
        "--rational",
        action="store_true",
        default=config.RATIONAL_DISPLAY,
        help="Show coefficients as rational approximations",
    )
    parser.add_argument(
        "-d",
        "--max-denominator",
        type=int,
        help=f"Largest denominator for rational display (default: {config.MAX_DENOMINATOR})",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "-p", "--precision", type=int, help="Set output precision (significant digits)"
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=config.LOG_LEVEL,
        help=f"Set logging level (default: {config.LOG_LEVEL})",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify dependencies",
    )
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    if args.version:
        print(VERSION)
        return EXIT_OK
    if args.health_check:
        return _health_check()
    if not args.input:
        parser.print_usage(sys.stderr)
        print("Error: an input file is required", file=sys.stderr)
        return EXIT_INPUT_ERROR

    # Apply CLI configuration overrides
    if args.precision and args.precision > 0:
        config.OUTPUT_PRECISION = int(args.precision)
    if args.max_denominator is not None and args.max_denominator < 1:
        print("Error: --max-denominator must be at least 1")
        return EXIT_INPUT_ERROR

    target = None
    if args.at is not None:
        try:
            target = parse_number(args.at)
        except ParseError as e:
            print(f"Error: {e}")
            return EXIT_INPUT_ERROR

    res = interpolate_file(
        args.input,
        target=target,
        rational=args.rational,
        max_denominator=args.max_denominator,
    )
    logger.debug("Result: %r", res)
    print_result_pretty(res, output_format=args.format, rational=args.rational)
    return _exit_code(res)


if __name__ == "__main__":
    """Allow running the CLI module directly with python -m lagrange_pkg.cli"""
    sys.exit(main_entry())
