"""Public API for Lagrange - returns structured objects without side effects."""

from __future__ import annotations

import time
from collections.abc import Sequence

from .interpolation import interpolate
from .logging_config import get_logger
from .parser import format_coefficients, format_expression, read_points
from .polynomial import Polynomial
from .rational import rationalise as _rationalise
from .types import InterpolationResult, LagrangeError

logger = get_logger("api")


def interpolate_points(
    xs: Sequence[float],
    ys: Sequence[float],
    target: float | None = None,
    rational: bool = False,
    max_denominator: int | None = None,
) -> InterpolationResult:
    """Interpolate a point set and optionally evaluate the result.

    Args:
        xs: x-coordinates of the points (pairwise distinct)
        ys: y-coordinates of the points
        target: Optional abscissa at which to evaluate the polynomial
        rational: Also render each coefficient as a rational approximation
        max_denominator: Bound for the rational approximation

    Returns:
        InterpolationResult; on failure ok is False and code names the error

    Example:
        >>> from lagrange_pkg.api import interpolate_points
        >>> result = interpolate_points([0, 1, 2], [1, 2, 5], target=3)
        >>> print(result.coefficients)
        [1.0, 0.0, 1.0]
        >>> print(result.value)
        10.0
    """
    begin = time.perf_counter()
    try:
        poly = interpolate(xs, ys)
        value = poly.evaluate(target) if target is not None else None
    except LagrangeError as e:
        logger.info("Interpolation failed: %s", e, extra={"context": {"code": e.code}})
        return InterpolationResult(ok=False, error=str(e), code=e.code)
    elapsed_us = int((time.perf_counter() - begin) * 1_000_000)
    logger.info(
        "Interpolation finished",
        extra={"context": {"degree": poly.degree(), "elapsed_us": elapsed_us}},
    )

    try:
        rational_coefficients = (
            format_coefficients(poly, rational=True, max_denominator=max_denominator)
            if rational
            else None
        )
        expression = format_expression(poly, rational=rational, max_denominator=max_denominator)
    except ValueError as e:
        return InterpolationResult(ok=False, error=str(e), code="VALIDATION_ERROR")

    return InterpolationResult(
        ok=True,
        name=poly.name,
        coefficients=list(poly.coefficients),
        degree=poly.degree(),
        expression=expression,
        target=float(target) if target is not None else None,
        value=value,
        rational=rational_coefficients,
        elapsed_us=elapsed_us,
    )


def interpolate_file(
    path: str,
    target: float | None = None,
    rational: bool = False,
    max_denominator: int | None = None,
) -> InterpolationResult:
    """Read a point file and interpolate it.

    An explicit ``target`` overrides the one found in the file.
    """
    try:
        xs, ys, file_target = read_points(path)
    except LagrangeError as e:
        return InterpolationResult(ok=False, error=str(e), code=e.code)
    return interpolate_points(
        xs,
        ys,
        target=file_target if target is None else target,
        rational=rational,
        max_denominator=max_denominator,
    )


def evaluate(coefficients: Sequence[float], x: float) -> float:
    """Evaluate the polynomial with the given coefficients (constant term first).

    Example:
        >>> from lagrange_pkg.api import evaluate
        >>> evaluate([1, 0, 1], 3)
        10.0
    """
    return Polynomial(coefficients).evaluate(x)


def rationalise(value: float, max_denominator: int | None = None) -> str:
    """Render a real number as its best rational approximation.

    Example:
        >>> from lagrange_pkg.api import rationalise
        >>> rationalise(0.333333, 1000)
        '1/3'
    """
    return _rationalise(value, max_denominator)
